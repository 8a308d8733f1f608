from __future__ import annotations

import pytest

from calprops.errors import CalPropsError, CLIError, ConfigError, format_error


def test_error_hierarchy():
    # Every typed error must be a CalPropsError
    assert issubclass(ConfigError, CalPropsError)
    assert issubclass(CLIError, CalPropsError)
    assert not issubclass(ConfigError, ValueError)


def test_format_error_prefix_and_message():
    e = ConfigError("weekdays invalid value '1,1'")
    s = format_error(e)
    assert s.startswith("ConfigError:")
    assert "weekdays" in s
    # Empty message uses class name only
    assert format_error(CLIError("")) == "CLIError"


def test_resolver_raises_typed_error_on_unknown_key():
    from configs.validate import validate_props

    with pytest.raises(ConfigError):
        validate_props({"unknown": 1})

    with pytest.raises(ConfigError):
        validate_props({"weekdays": "1,1"}, strict=True)


def test_validators_never_raise_typed_errors():
    from calprops.props import is_valid_numeric, is_valid_weekday_sequence

    assert is_valid_weekday_sequence("not,days") is False
    assert is_valid_numeric({"x": 1}) is False
