"""CLI subcommand: check — run one field's type check and validator on a raw value.

VALUE is read as a YAML scalar or flow sequence, so `42` is a number, `"5,6,0"` a string
and `[5, 6, 0]` a list.
"""

from __future__ import annotations

import argparse

import yaml

from configs.validate import suggest_key

from ..io.config import PropsLoader
from ..props.table import FIELDS
from ._exit import INVALID, OK, USER_ERR
from ._io import eprint

_HELP = "Check a single raw value against a field"


def register(subparsers: argparse._SubParsersAction) -> None:
    sp = subparsers.add_parser("check", help=_HELP, description=_HELP)
    sp.add_argument("field", help="Field name, e.g. weekdays or interval_height")
    sp.add_argument("value", help="Raw value (YAML scalar or flow sequence)")
    sp.set_defaults(command="check", func=_run)


def _parse_value(text: str):
    try:
        return yaml.load(text, Loader=PropsLoader)
    except yaml.YAMLError:
        # not YAML: take it as the literal string
        return text


def _run(ns: argparse.Namespace) -> int:
    desc = FIELDS.get(ns.field)
    if desc is None:
        sug = suggest_key(ns.field, FIELDS.keys())
        hint = f" (did you mean '{sug}')" if sug else ""
        eprint(f"error: unknown field '{ns.field}'{hint}")
        return USER_ERR

    value = _parse_value(ns.value)
    if not desc.accepts_type(value):
        expected = "|".join(t.value for t in desc.types)
        print(f"rejected: {ns.field} expects {expected}, got {type(value).__name__}")
        return INVALID
    if not desc.validate(value):
        print(f"rejected: {ns.field} invalid value {value!r}")
        return INVALID
    print(f"accepted: {ns.field}={value!r}")
    return OK
