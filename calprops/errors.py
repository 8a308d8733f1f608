from __future__ import annotations

"""Typed error taxonomy (public).

Only `calprops` and `calprops.errors` are public import roots. Validators never raise;
these classes are used by the resolver, the props-file loader and the CLI.
"""

__all__ = [
    "CalPropsError",
    "ConfigError",
    "CLIError",
    "format_error",
]


class CalPropsError(Exception):
    """Base class for all typed, operator-facing errors in calprops."""
    pass


class ConfigError(CalPropsError):
    """Props invalid, unknown keys or groups, unreadable props file, etc."""
    pass


class CLIError(CalPropsError):
    """Generic CLI failure wrapper for unexpected errors in CLI code paths."""
    pass


def format_error(e: BaseException) -> str:
    """Return a short, uniform operator-facing message like 'ConfigError: detail'."""
    name = e.__class__.__name__
    msg = str(e).strip()
    return f"{name}: {msg}" if msg else name


# Keep star-export order deterministic for tests and tooling
__all__ = sorted(__all__)
