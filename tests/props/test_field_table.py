from __future__ import annotations

import dataclasses
from datetime import date

import pytest

from calprops.errors import ConfigError
from calprops.props import validators
from calprops.props.table import FIELDS, GROUPS, FieldDescriptor, PropType, fields_for
from calprops.props.timestamp import is_valid_time_of_day, is_valid_timestamp


def test_groups_and_field_counts():
    assert list(GROUPS) == ["base", "intervals", "weeks", "calendar", "category", "events"]
    assert sum(len(g) for g in GROUPS.values()) == len(FIELDS)
    assert "weekdays" in GROUPS["base"]
    assert "event_overlap_mode" in GROUPS["events"]


def test_validators_wired_to_fields():
    assert FIELDS["weekdays"].validator is validators.is_valid_weekday_sequence
    for name in ("interval_height", "interval_width", "interval_minutes", "first_interval",
                 "interval_count", "min_weeks"):
        assert FIELDS[name].validator is validators.is_valid_numeric, name
    for name in ("start", "end", "model_value", "now"):
        assert FIELDS[name].validator is is_valid_timestamp, name
    assert FIELDS["first_time"].validator is is_valid_time_of_day
    assert FIELDS["category_days"].validator is validators.is_valid_category_days
    assert FIELDS["event_overlap_mode"].validator is validators.is_valid_overlap_mode


def test_literal_defaults():
    d = {name: desc.resolve_default() for name, desc in FIELDS.items()}
    assert d["interval_height"] == 48
    assert d["interval_width"] == 60
    assert d["interval_count"] == 24
    assert d["first_interval"] == 0
    assert d["max_days"] == 7
    assert d["type"] == "month"
    assert d["locale"] == "en-US"
    assert d["event_overlap_mode"] == "stack"
    assert d["event_more_text"] == "$v-calendar.moreEvents"
    assert d["short_weekdays"] is True and d["hide_header"] is False and d["show_week"] is False
    assert d["end"] is None and d["weekday_format"] is None


def test_factory_defaults_are_fresh_and_immutable():
    wd = FIELDS["weekdays"]
    assert wd.resolve_default() == (0, 1, 2, 3, 4, 5, 6)
    assert isinstance(wd.resolve_default(), tuple)
    assert FIELDS["events"].resolve_default() == ()
    start = FIELDS["start"].resolve_default()
    assert is_valid_timestamp(start)
    date.fromisoformat(start)


def test_descriptors_and_groups_are_read_only():
    with pytest.raises(dataclasses.FrozenInstanceError):
        FIELDS["type"].default = "week"  # type: ignore[misc]
    with pytest.raises(TypeError):
        FIELDS["type"] = FieldDescriptor("type")  # type: ignore[index]
    with pytest.raises(TypeError):
        GROUPS["base"]["extra"] = FieldDescriptor("extra")  # type: ignore[index]


@pytest.mark.parametrize(
    "ptype,good,bad",
    [
        (PropType.NUMBER, 3, True),
        (PropType.NUMBER, 2.5, "2"),
        (PropType.STRING, "x", 1),
        (PropType.BOOLEAN, False, 0),
        (PropType.ARRAY, (1,), "1"),
        (PropType.OBJECT, {"a": 1}, [("a", 1)]),
        (PropType.DATE, date(2024, 1, 1), "2024-01-01"),
        (PropType.FUNCTION, len, "len"),
    ],
)
def test_prop_type_matching(ptype, good, bad):
    assert ptype.matches(good)
    assert not ptype.matches(bad)


def test_untyped_field_accepts_any_type():
    assert FIELDS["min_weeks"].types == ()
    assert FIELDS["min_weeks"].accepts_type(["3"])


def test_every_validator_is_total_over_hostile_inputs():
    class Hostile:
        def __str__(self):
            raise RuntimeError

        def __eq__(self, other):
            raise RuntimeError

        __hash__ = None  # type: ignore[assignment]

    hostile = [None, "", "\x00", "9" * 1000, -1, float("nan"), [], [[]], {}, {"hour": None},
               object(), Hostile(), b"\xff", 1j, ("a", None), {1, 2}]
    for desc in FIELDS.values():
        for v in hostile:
            assert desc.validate(v) in (True, False), (desc.name, v)


def test_fields_for_merges_groups_in_order():
    f = fields_for(["intervals", "base"])
    names = list(f)
    assert names[0] == "max_days"
    assert "weekdays" in names and "type" not in names
    assert list(fields_for("weeks")) == list(GROUPS["weeks"])
    assert fields_for(None) is FIELDS


def test_fields_for_unknown_group():
    with pytest.raises(ConfigError) as ei:
        fields_for(["base", "colours"])
    assert "colours" in str(ei.value)
