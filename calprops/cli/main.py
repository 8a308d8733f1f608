# calprops/cli/main.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from . import check, defaults, validate
from ._exit import INTERNAL, USER_ERR
from ..errors import format_error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calprops",
        description="Calendar props validation CLI",
        allow_abbrev=False,
    )
    from calprops import __version__ as _VER

    parser.add_argument(
        "--version",
        action="version",
        version=f"calprops {_VER}",
    )
    # Log level DEBUG for the resolver and loader.
    parser.add_argument(
        "--debug",
        action="store_true",
        help=argparse.SUPPRESS,
    )
    # Explicit props file for subcommands that discover one
    parser.add_argument(
        "-c",
        "--config",
        dest="config",
        help="Props file used when a subcommand is given no PATH",
    )
    subparsers = parser.add_subparsers(dest="command")

    validate.register(subparsers)
    defaults.register(subparsers)
    check.register(subparsers)

    return parser


def _configure_logging(ns: argparse.Namespace) -> None:
    if getattr(ns, "debug", False):
        level = logging.DEBUG
    elif getattr(ns, "verbose", False):
        level = logging.WARNING
    else:
        # subcommands print rejections themselves
        level = logging.ERROR
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="[calprops] %(levelname)s %(name)s: %(message)s",
    )


def main(argv: List[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    ns = parser.parse_args(argv)
    if not hasattr(ns, "func"):
        parser.print_help(sys.stderr)
        return USER_ERR
    _configure_logging(ns)
    try:
        return ns.func(ns)
    except Exception as e:  # unexpected failure: one uniform line, non-zero exit
        sys.stderr.write(f"[calprops] {format_error(e)}\n")
        if ns.debug:
            raise
        return INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
