"""
Field validators for calendar props.

Every predicate here is total: it accepts any Python value, returns a bool, never raises
and never logs. Rejection handling (warnings, default substitution) belongs to the
resolver in `configs.validate`.

Numeric inputs follow leading-integer parse semantics: the value's string form is read
from the start (optional sign, then hex with a 0x prefix or decimal digits) and anything
after the numeric prefix is ignored, so "12px" parses to 12 while "px12" does not parse.
"""
from __future__ import annotations

import re
from numbers import Number
from typing import Any, List, Optional, Sequence, Tuple, Union

from ..errors import ConfigError
from .timestamp import DAYS_IN_WEEK

__all__ = [
    "OVERLAP_MODES",
    "WeekdaysInput",
    "is_valid_category_days",
    "is_valid_numeric",
    "is_valid_overlap_mode",
    "is_valid_weekday_sequence",
    "parse_int",
    "parse_weekdays",
]

WeekdaysInput = Union[str, Sequence[Union[int, str]]]

OVERLAP_MODES = frozenset({"stack", "column"})

_LEADING_INT = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]*|[0-9]+)")
_MAX_NESTING = 16
_FLOAT_LIMIT = 2 ** 1024


def _string_form(value: Any, depth: int = 0) -> Optional[str]:
    """Leading part of the value's string form, or None when it has none.

    Lists join with commas, so only the first element can supply digits; the rest is
    never walked and shared or cyclic lists cost at most `_MAX_NESTING` steps.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, Number):
        try:
            return str(value)
        except (ValueError, OverflowError):
            # int digit limit
            return None
    if isinstance(value, (list, tuple)):
        if not value:
            return ""
        if depth >= _MAX_NESTING:
            return None
        head = value[0]
        if head is None:
            return ""
        s = _string_form(head, depth + 1)
        if s is None:
            return None
        return s + "," if len(value) > 1 else s
    return None


def parse_int(value: Any) -> Optional[int]:
    """Leading-integer parse of `value`; None when no integer prefix exists."""
    s = _string_form(value)
    if s is None:
        return None
    m = _LEADING_INT.match(s)
    if m is None:
        return None
    sign, digits = m.group(1), m.group(2)
    try:
        if digits[:2] in ("0x", "0X"):
            if len(digits) == 2:
                return None
            n = int(digits[2:], 16)
        else:
            n = int(digits)
    except ValueError:
        return None
    # beyond double range the parse is infinite
    if n >= _FLOAT_LIMIT:
        return None
    return -n if sign == "-" else n


def is_valid_numeric(value: Any) -> bool:
    return parse_int(value) is not None


def _weekday_tokens(value: Any) -> Optional[List[Any]]:
    if isinstance(value, str):
        return value.split(",")
    if isinstance(value, (list, tuple)):
        return list(value)
    return None


def _normalize_weekdays(value: Any) -> Optional[List[Optional[int]]]:
    tokens = _weekday_tokens(value)
    if tokens is None:
        return None
    return [parse_int(t) for t in tokens]


def is_valid_weekday_sequence(value: Any) -> bool:
    """Return True if `value` lists weekday indices in display order.

    Accepts a comma-separated string ("5,6,0,1") or a list/tuple of ints or numeric strings.
    The sequence must hold 1..7 distinct indices in [0, 6] that only ever increase from one
    element to the next, except for at most one decrease where the week wraps from the end
    back to the start. Only adjacent pairs are compared, so [1, 3, 2] counts as a single
    wrap and is accepted.
    """
    ints = _normalize_weekdays(value)
    if ints is None or len(ints) == 0 or len(ints) > DAYS_IN_WEEK:
        return False

    seen = set()
    wrapped = False
    for i, x in enumerate(ints):
        if x is None or x < 0 or x >= DAYS_IN_WEEK:
            return False
        if i > 0:
            d = x - ints[i - 1]
            if d < 0:
                if wrapped:
                    return False
                wrapped = True
            elif d == 0:
                return False
        if x in seen:
            return False
        seen.add(x)
    return True


def parse_weekdays(value: WeekdaysInput) -> Tuple[int, ...]:
    """Canonical tuple of weekday indices for a valid sequence; ConfigError otherwise."""
    if not is_valid_weekday_sequence(value):
        raise ConfigError(f"weekdays: invalid weekday sequence {value!r}")
    return tuple(int(x) for x in _normalize_weekdays(value))  # type: ignore[union-attr]


def is_valid_category_days(value: Any) -> bool:
    n = parse_int(value)
    return n is not None and n > 0


def is_valid_overlap_mode(value: Any) -> bool:
    """Known layout mode name ('stack' | 'column') or a custom layout callable."""
    if isinstance(value, str):
        return value in OVERLAP_MODES
    return callable(value)
