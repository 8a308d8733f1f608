#!/usr/bin/env python3
"""CLI subcommand: validate — resolve a YAML props file against the field table.

Exit codes:
  0 = OK
  1 = Props invalid (or warnings when --strict)
  2 = Load/parse errors or bad usage
"""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from configs.validate import validate_props_verbose

from ..errors import ConfigError, format_error
from ..io.config import load_props
from ..props.table import GROUPS
from ._config import discover_props_file
from ._exit import INVALID, OK, USER_ERR
from ._io import eprint, print_json, set_quiet

_HELP = "Validate a calendar props file"
_DESC = (
    "Resolve a YAML props file ('-' for stdin). Without PATH the file is discovered from "
    "--config, $CALPROPS_CONFIG, ./configs/calendar.yaml or the XDG config dir."
)


def register(subparsers: argparse._SubParsersAction) -> None:
    sp = subparsers.add_parser("validate", help=_HELP, description=_DESC)
    sp.add_argument("path", nargs="?", help="Path to props file (YAML). Use '-' for STDIN.")
    sp.add_argument("--strict", action="store_true",
                    help="Treat warnings as errors (non-zero exit if warnings present).")
    sp.add_argument("--group", action="append", choices=sorted(GROUPS), dest="groups",
                    help="Restrict to one props group (repeatable; default: all groups)")
    sp.add_argument("--json", action="store_true", help="Print the resolved props as JSON")
    sp.add_argument("--quiet", action="store_true", help="suppress non-essential stderr")
    sp.add_argument("--verbose", action="store_true", help="increase stderr verbosity")
    sp.set_defaults(command="validate", func=_run)


def _select_path(ns: argparse.Namespace) -> str | None:
    if ns.path:
        return ns.path
    found = discover_props_file(getattr(ns, "config", None), Path.cwd(), os.environ)
    if ns.verbose:
        eprint(found.describe())
    return None if found.path is None else str(found.path)


def _run(ns: argparse.Namespace) -> int:
    set_quiet(ns.quiet)

    path = _select_path(ns)
    if path is None:
        eprint("error: no props file given and none discovered")
        return USER_ERR

    try:
        props = load_props(path)
    except ConfigError as e:
        eprint(f"error: {e}")
        return USER_ERR

    try:
        resolved, warnings = validate_props_verbose(props, ns.groups)
    except ConfigError as e:
        print("PROPS INVALID\n" + str(e))
        if ns.verbose:
            eprint(format_error(e))
        return INVALID

    if ns.strict and warnings:
        print("PROPS WARNINGS (treated as errors due to --strict)")
        for w in warnings:
            print(w)
        return INVALID

    if ns.json:
        print_json(resolved)
        return OK

    print("OK")
    for w in warnings:
        print(w)
    if "weekdays" in resolved:
        print(
            "calendar: type={t} weekdays={wd} locale={loc}".format(
                t=resolved.get("type"), wd=resolved.get("weekdays"), loc=resolved.get("locale")
            )
        )
    return OK
