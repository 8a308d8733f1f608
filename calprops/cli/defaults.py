"""CLI subcommand: defaults — print the field table with each field's default."""

from __future__ import annotations

import argparse

from ..props.table import GROUPS, fields_for
from ._exit import OK
from ._io import print_json, print_table

_HELP = "Show props fields and their defaults"


def register(subparsers: argparse._SubParsersAction) -> None:
    sp = subparsers.add_parser("defaults", help=_HELP, description=_HELP)
    sp.add_argument("--group", action="append", choices=sorted(GROUPS), dest="groups",
                    help="Restrict to one props group (repeatable; default: all groups)")
    fmt = sp.add_mutually_exclusive_group()
    fmt.add_argument("--json", action="store_true", help="JSON output (stable, machine-readable)")
    fmt.add_argument("--table", action="store_true", help="Plain table output (no color; default)")
    sp.set_defaults(command="defaults", func=_run)


def _run(ns: argparse.Namespace) -> int:
    fields = fields_for(ns.groups)
    if ns.json:
        print_json({name: d.resolve_default() for name, d in fields.items()})
        return OK

    rows = []
    for group, members in GROUPS.items():
        for name, d in members.items():
            if name not in fields:
                continue
            rows.append(
                {
                    "group": group,
                    "field": name,
                    "types": "|".join(t.value for t in d.types) or "any",
                    "validator": d.validator.__name__ if d.validator else "",
                    "default": repr(d.resolve_default()),
                }
            )
    print_table(rows)
    return OK
