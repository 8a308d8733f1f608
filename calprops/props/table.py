"""
Field descriptor table for calendar props.

Static data: each recognized field maps to the raw types it accepts, an optional
validator and its default. Groups mirror how the calendar composes its props
(base, intervals, weeks, calendar, category, events). Built once at import and
exposed through read-only mappings.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import date
from numbers import Real
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple

from ..errors import ConfigError
from .timestamp import is_valid_time_of_day, is_valid_timestamp, today
from .validators import (
    is_valid_category_days,
    is_valid_numeric,
    is_valid_overlap_mode,
    is_valid_weekday_sequence,
)

__all__ = [
    "GROUPS",
    "FIELDS",
    "FieldDescriptor",
    "PropType",
    "fields_for",
]

Validator = Callable[[Any], bool]


class PropType(enum.Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    DATE = "date"
    FUNCTION = "function"

    def matches(self, value: Any) -> bool:
        if self is PropType.STRING:
            return isinstance(value, str)
        if self is PropType.NUMBER:
            return isinstance(value, Real) and not isinstance(value, bool)
        if self is PropType.BOOLEAN:
            return isinstance(value, bool)
        if self is PropType.ARRAY:
            return isinstance(value, (list, tuple))
        if self is PropType.OBJECT:
            return isinstance(value, Mapping)
        if self is PropType.DATE:
            return isinstance(value, date)
        return callable(value)


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    types: Tuple[PropType, ...] = ()
    validator: Optional[Validator] = None
    default: Any = None
    default_factory: Optional[Callable[[], Any]] = None

    def accepts_type(self, value: Any) -> bool:
        """True when no types are declared or `value` carries one of them."""
        if not self.types:
            return True
        return any(t.matches(value) for t in self.types)

    def validate(self, value: Any) -> bool:
        if self.validator is None:
            return True
        return bool(self.validator(value))

    def resolve_default(self) -> Any:
        if self.default_factory is not None:
            return self.default_factory()
        return self.default


S, N, B, A, O, D, F = (
    PropType.STRING,
    PropType.NUMBER,
    PropType.BOOLEAN,
    PropType.ARRAY,
    PropType.OBJECT,
    PropType.DATE,
    PropType.FUNCTION,
)


def _all_weekdays() -> Tuple[int, ...]:
    return (0, 1, 2, 3, 4, 5, 6)


def _no_events() -> Tuple[Any, ...]:
    return ()


def _group(*descriptors: FieldDescriptor) -> Mapping[str, FieldDescriptor]:
    return MappingProxyType({d.name: d for d in descriptors})


_BASE = _group(
    FieldDescriptor("start", (S, N, D), is_valid_timestamp, default_factory=today),
    FieldDescriptor("end", (S, N, D), is_valid_timestamp),
    FieldDescriptor("weekdays", (A, S), is_valid_weekday_sequence, default_factory=_all_weekdays),
    FieldDescriptor("hide_header", (B,), default=False),
    FieldDescriptor("short_weekdays", (B,), default=True),
    FieldDescriptor("weekday_format", (F,)),
    FieldDescriptor("day_format", (F,)),
)

_INTERVALS = _group(
    FieldDescriptor("max_days", (N,), default=7),
    FieldDescriptor("short_intervals", (B,), default=False),
    FieldDescriptor("interval_height", (N, S), is_valid_numeric, default=48),
    FieldDescriptor("interval_width", (N, S), is_valid_numeric, default=60),
    FieldDescriptor("interval_minutes", (N, S), is_valid_numeric, default=60),
    FieldDescriptor("first_interval", (N, S), is_valid_numeric, default=0),
    FieldDescriptor("first_time", (N, S, O), is_valid_time_of_day),
    FieldDescriptor("interval_count", (N, S), is_valid_numeric, default=24),
    FieldDescriptor("interval_format", (F,)),
    FieldDescriptor("interval_style", (F,)),
    FieldDescriptor("show_interval_label", (F,)),
)

_WEEKS = _group(
    FieldDescriptor("locale_first_day_of_year", (S, N), default=0),
    # no declared type: anything whose leading integer parses
    FieldDescriptor("min_weeks", (), is_valid_numeric, default=1),
    FieldDescriptor("short_months", (B,), default=True),
    FieldDescriptor("show_month_on_first", (B,), default=True),
    FieldDescriptor("show_week", (B,), default=False),
    FieldDescriptor("month_format", (F,)),
)

_CALENDAR = _group(
    FieldDescriptor("type", (S,), default="month"),
    FieldDescriptor("model_value", (S, N, D), is_valid_timestamp),
    FieldDescriptor("now", (S,), is_valid_timestamp),
    FieldDescriptor("locale", (S,), default="en-US"),
)

_CATEGORY = _group(
    FieldDescriptor("categories", (A, S), default=""),
    FieldDescriptor("category_hide_dynamic", (B,), default=False),
    FieldDescriptor("category_show_all", (B,), default=False),
    FieldDescriptor("category_for_invalid", (S,), default=""),
    FieldDescriptor("category_days", (N, S), is_valid_category_days, default=1),
)

_EVENTS = _group(
    FieldDescriptor("events", (A,), default_factory=_no_events),
    FieldDescriptor("event_start", (S,), default="start"),
    FieldDescriptor("event_end", (S,), default="end"),
    FieldDescriptor("event_timed", (S, F), default="timed"),
    FieldDescriptor("event_category", (S, F), default="category"),
    FieldDescriptor("event_height", (N,), default=20),
    FieldDescriptor("event_color", (S, F), default="is-text-default"),
    FieldDescriptor("event_text_color", (S, F), default="is-default"),
    FieldDescriptor("event_name", (S, F), default="name"),
    FieldDescriptor("event_overlap_threshold", (S, N), default=60),
    FieldDescriptor("event_overlap_mode", (S, F), is_valid_overlap_mode, default="stack"),
    FieldDescriptor("event_more", (B,), default=True),
    FieldDescriptor("event_more_text", (S,), default="$v-calendar.moreEvents"),
    FieldDescriptor("event_ripple", (B, O)),
    FieldDescriptor("event_margin_bottom", (N,), default=1),
)

GROUPS: Mapping[str, Mapping[str, FieldDescriptor]] = MappingProxyType(
    {
        "base": _BASE,
        "intervals": _INTERVALS,
        "weeks": _WEEKS,
        "calendar": _CALENDAR,
        "category": _CATEGORY,
        "events": _EVENTS,
    }
)

FIELDS: Mapping[str, FieldDescriptor] = MappingProxyType(
    {name: d for group in GROUPS.values() for name, d in group.items()}
)


def fields_for(groups: Optional[Iterable[str]] = None) -> Mapping[str, FieldDescriptor]:
    """Merged descriptors for the named groups (all groups when None), in table order."""
    if groups is None:
        return FIELDS
    if isinstance(groups, str):
        groups = [groups]
    out: Dict[str, FieldDescriptor] = {}
    for g in groups:
        if g not in GROUPS:
            raise ConfigError(f"unknown props group '{g}' (expected one of: {', '.join(GROUPS)})")
        out.update(GROUPS[g])
    return MappingProxyType(out)
