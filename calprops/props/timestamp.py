"""Timestamp and time-of-day predicates used by the props table.

Like the other validators these are total: any input returns a bool and nothing raises.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date, datetime, time
from numbers import Real
from typing import Any, Mapping, Optional

__all__ = [
    "DAYS_IN_WEEK",
    "CalendarTimestamp",
    "is_valid_timestamp",
    "is_valid_time_of_day",
    "parse_date",
    "today",
]

DAYS_IN_WEEK = 7

# YYYY-MM[-DD][<sep>HH[:MM[:SS]]], matched against the whole string
PARSE_REGEX = re.compile(
    r"([0-9]{4})-([0-9]{1,2})(-([0-9]{1,2}))?([^0-9]+([0-9]{1,2}))?(:([0-9]{1,2}))?(:([0-9]{1,2}))?"
)
# Unanchored: "at 9:30 sharp" is a valid time of day.
PARSE_TIME = re.compile(r"([0-9][0-9]?)(:([0-9][0-9]?)|)(:([0-9][0-9]?)|)")
# Decimal number text as numeric coercion reads it; surrounding whitespace allowed.
_NUMBER_TEXT = re.compile(r"\s*[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?\s*")


@dataclass(frozen=True)
class CalendarTimestamp:
    date: str  # YYYY-MM-DD
    time: str  # HH:MM
    year: int
    month: int
    day: int
    weekday: int  # 0 = Sunday
    hour: int
    minute: int
    has_day: bool = True
    has_time: bool = False


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        return math.isfinite(value)
    except (TypeError, ValueError, OverflowError):
        return False


def _is_finite_component(value: Any) -> bool:
    # hour/minute may be numbers or decimal text such as "9" or " 30 "
    if isinstance(value, str):
        if _NUMBER_TEXT.fullmatch(value) is None:
            return False
        try:
            return math.isfinite(float(value))
        except (ValueError, OverflowError):
            return False
    return _is_finite_number(value)


def is_valid_timestamp(value: Any) -> bool:
    """Accept finite numbers (epoch-like), 'YYYY-MM[-DD][ HH[:MM[:SS]]]' strings and date objects."""
    if _is_finite_number(value):
        return True
    if isinstance(value, str):
        return PARSE_REGEX.fullmatch(value) is not None
    return isinstance(value, date)


def is_valid_time_of_day(value: Any) -> bool:
    """Accept finite numbers (minutes), strings holding an H[:MM[:SS]] token,
    `datetime.time` objects and mappings whose `hour` and `minute` are numbers or
    numeric strings."""
    if _is_finite_number(value):
        return True
    if isinstance(value, str):
        return PARSE_TIME.search(value) is not None
    if isinstance(value, time):
        return True
    if isinstance(value, Mapping):
        return _is_finite_component(value.get("hour")) and _is_finite_component(value.get("minute"))
    return False


def _pad(n: int, width: int = 2) -> str:
    return str(n).zfill(width)


def parse_date(d: date) -> CalendarTimestamp:
    has_time = isinstance(d, datetime)
    hour = d.hour if has_time else 0
    minute = d.minute if has_time else 0
    return CalendarTimestamp(
        date=f"{_pad(d.year, 4)}-{_pad(d.month)}-{_pad(d.day)}",
        time=f"{_pad(hour)}:{_pad(minute)}",
        year=d.year,
        month=d.month,
        day=d.day,
        weekday=d.isoweekday() % DAYS_IN_WEEK,
        hour=hour,
        minute=minute,
        has_day=True,
        has_time=has_time,
    )


def today(now: Optional[datetime] = None) -> str:
    """Return the 'YYYY-MM-DD' date of `now` (local time when omitted)."""
    return parse_date(now or datetime.now()).date
