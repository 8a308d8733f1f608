from .table import FIELDS, GROUPS, FieldDescriptor, PropType, fields_for
from .timestamp import DAYS_IN_WEEK, is_valid_time_of_day, is_valid_timestamp
from .validators import (
    is_valid_category_days,
    is_valid_numeric,
    is_valid_overlap_mode,
    is_valid_weekday_sequence,
    parse_weekdays,
)

__all__ = [
    "DAYS_IN_WEEK",
    "FIELDS",
    "GROUPS",
    "FieldDescriptor",
    "PropType",
    "fields_for",
    "is_valid_category_days",
    "is_valid_numeric",
    "is_valid_overlap_mode",
    "is_valid_time_of_day",
    "is_valid_timestamp",
    "is_valid_weekday_sequence",
    "parse_weekdays",
]
