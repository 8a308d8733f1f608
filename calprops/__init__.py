"""calprops — public API surface.

Only `calprops` and `calprops.errors` are public. Everything else is internal.
This module also resolves `__version__` from the installed distribution.
"""
from __future__ import annotations

from typing import Any as _Any
from . import errors as errors  # re-export for star-import; noqa: F401

from importlib.metadata import version as _pkg_version, PackageNotFoundError


def _version_from_metadata() -> str | None:
    try:
        return _pkg_version("calprops")
    except PackageNotFoundError:
        return None


__version__ = _version_from_metadata() or "0+unknown"

# ---------------------------------------------------------------------------
# Public re-exports
# ---------------------------------------------------------------------------
# Resolver surface – lazy-loaded via __getattr__
# Validators – lazy-loaded via __getattr__

_RESOLVER = ("validate_props", "validate_props_api", "validate_props_verbose")
_VALIDATORS = (
    "is_valid_numeric",
    "is_valid_time_of_day",
    "is_valid_timestamp",
    "is_valid_weekday_sequence",
    "parse_weekdays",
)


def __getattr__(name: str) -> _Any:  # PEP 562 lazy exports to avoid import-time cycles
    if name in _RESOLVER:
        # `configs` is a top-level package, not `calprops.configs`
        from configs import validate as _validate

        globals().update({n: getattr(_validate, n) for n in _RESOLVER})
        return globals()[name]
    if name in _VALIDATORS:
        from . import props as _props

        globals().update({n: getattr(_props, n) for n in _VALIDATORS})
        return globals()[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

# Make dir(calprops) reflect our public surface

def __dir__() -> list[str]:
    return list(__all__)

# Star-export surface (deterministic ordering). Tests require __all__ to be lexicographically sorted.
__all__ = [
    "__version__",
    "errors",
    "is_valid_numeric",
    "is_valid_time_of_day",
    "is_valid_timestamp",
    "is_valid_weekday_sequence",
    "parse_weekdays",
    "validate_props",
    "validate_props_api",
    "validate_props_verbose",
]
