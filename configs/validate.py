"""
Props resolution for calendar configuration.

Public API:
    validate_props(raw: Mapping, *, groups=None, strict=False) -> dict

- Applies the field descriptor table to a raw mapping of props.
- Accepted values pass through unchanged; rejected values fall back to the field default
  (a warning is logged) or, with strict=True, are reported as errors.
- Raises ConfigError with clear messages (field names + constraints) on invalid input.
- Returns a **new** dict holding every field of the selected groups; the input is not mutated.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from calprops.errors import ConfigError
from calprops.props.table import FIELDS, GROUPS, FieldDescriptor, fields_for

__all__ = ["validate_props", "validate_props_verbose", "validate_props_api"]

logger = logging.getLogger(__name__)


# ------------------------------
# Utilities
# ------------------------------

def _ensure_dict(x: Any) -> Optional[Dict[str, Any]]:
    if x is None:
        return {}
    if isinstance(x, Mapping):
        return dict(x)
    return None


def _lev(a: str, b: str) -> int:
    """Tiny Levenshtein distance (edit distance) for did-you-mean suggestions."""
    la, lb = len(a), len(b)
    dp = list(range(lb + 1))
    for i, ca in enumerate(a, 1):
        prev = dp[0]
        dp[0] = i
        for j, cb in enumerate(b, 1):
            ins = dp[j] + 1
            dele = dp[j - 1] + 1
            sub = prev + (0 if ca == cb else 1)
            prev, dp[j] = dp[j], min(ins, dele, sub)
    return dp[-1]


def suggest_key(bad: str, allowed: Iterable[str]) -> str | None:
    """Return closest allowed key within distance <=2, else None."""
    best_key, best_dist = None, 99
    for k in sorted(allowed):
        d = _lev(bad, k)
        if d < best_dist:
            best_key, best_dist = k, d
    return best_key if best_dist <= 2 else None


def _group_of(name: str) -> str | None:
    for g, fields in GROUPS.items():
        if name in fields:
            return g
    return None


def _err(errors: List[str], path: str, msg: str) -> None:
    errors.append(f"{path} {msg}")


def _describe_types(d: FieldDescriptor) -> str:
    return "|".join(t.value for t in d.types)


# ------------------------------
# Main resolver
# ------------------------------

def _validate_props_impl(
    raw: Any, groups: Optional[Iterable[str]], strict: bool
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Resolve a raw props mapping against the descriptor table.

    Returns (resolved, warnings). Raises ConfigError when errors were collected:
    unknown keys always, rejected values only when `strict`.
    """
    table = fields_for(groups)
    cfg_in = _ensure_dict(raw)
    if cfg_in is None:
        raise ConfigError(f"props must be a mapping, got {type(raw).__name__}")

    errors: List[str] = []
    warnings: List[str] = []

    # Unknown key detection, with suggestions
    for k in cfg_in.keys():
        key = str(k)
        if key in table:
            continue
        if key in FIELDS:
            _err(errors, key, f"belongs to group '{_group_of(key)}' which is not selected")
            continue
        sug = suggest_key(key, table.keys())
        hint = f" (did you mean '{sug}')" if sug else ""
        _err(errors, key, f"unknown key{hint}")

    resolved: Dict[str, Any] = {}
    for name, desc in table.items():
        value = cfg_in.get(name)
        if value is None:
            resolved[name] = desc.resolve_default()
            continue

        if not desc.accepts_type(value):
            reason = f"expected {_describe_types(desc)}, got {type(value).__name__}"
        elif not desc.validate(value):
            reason = f"invalid value {value!r}"
        else:
            resolved[name] = value
            continue

        default = desc.resolve_default()
        if strict:
            _err(errors, name, reason)
        else:
            msg = f"W[{name}]: {reason}; using default {default!r}"
            warnings.append(msg)
            logger.warning(msg)
        resolved[name] = default

    # If we collected errors, raise a single ConfigError with all messages (stable order)
    if errors:
        raise ConfigError("\n".join(errors))
    return resolved, warnings


def validate_props_verbose(
    raw: Mapping[str, Any], groups: Optional[Iterable[str]] = None
) -> Tuple[Dict[str, Any], List[str]]:
    """Resolve props and return (resolved, warnings); one warning per fallback to default.

    Raises ConfigError on unknown keys or groups.
    """
    return _validate_props_impl(raw, groups, strict=False)


def validate_props_api(raw: Mapping[str, Any], groups: Optional[Iterable[str]] = None):
    """Stable, test-friendly API.

    Returns a tuple: (ok: bool, errs: list[str], props_or_none).
    - On success: (True, [], resolved)
    - On validation error: (False, [messages...], None)
    Does not raise; rejected values are errors here, as in strict mode.
    """
    try:
        resolved, _ = _validate_props_impl(raw, groups, strict=True)
        return True, [], resolved
    except ConfigError as e:
        msg = str(e).strip()
        errs = msg.split("\n") if msg else ["invalid props"]
        return False, errs, None


def validate_props(
    raw: Mapping[str, Any],
    *,
    groups: Optional[Iterable[str]] = None,
    strict: bool = False,
) -> Dict[str, Any]:
    """Validate props and return the resolved dict.

    With strict=False (default) rejected values fall back to their defaults and a warning
    is logged. With strict=True they raise ConfigError instead.
    """
    resolved, _ = _validate_props_impl(raw, groups, strict)
    return resolved
