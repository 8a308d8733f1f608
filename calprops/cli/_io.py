from __future__ import annotations

import json
import sys
from typing import Any, Mapping, Sequence

QUIET = False


def set_quiet(quiet: bool = False) -> None:
    global QUIET
    QUIET = bool(quiet)


def eprint(msg: str) -> None:
    if not QUIET:
        print(msg, file=sys.stderr)


def _json_default(o: Any) -> Any:
    # dates, callables and other non-JSON values
    if hasattr(o, "isoformat"):
        return o.isoformat()
    return str(o)


def print_json(obj: Any) -> None:
    """Compact JSON on stdout; non-JSON values go through isoformat() or str()."""
    sys.stdout.write(json.dumps(obj, separators=(",", ":"), default=_json_default) + "\n")


def print_table(rows: Sequence[Mapping[str, str]]) -> None:
    """Left-aligned columns keyed by the first row, with a dashed rule under the header."""
    if not rows:
        return
    headers = list(rows[0])
    widths = [max(len(h), *(len(r[h]) for r in rows)) for h in headers]

    def line(cells):
        return "  ".join(c.ljust(w) for c, w in zip(cells, widths)).rstrip()

    print(line(headers))
    print("  ".join("-" * w for w in widths))
    for r in rows:
        print(line([r[h] for h in headers]))
