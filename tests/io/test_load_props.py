from __future__ import annotations

import io

import pytest

from calprops.errors import ConfigError
from calprops.io.config import apply_env_overrides, load_props
from configs.validate import validate_props


def test_loads_mapping(props_file):
    p = props_file("weekdays: '5,6,0'\ninterval_height: 40\n")
    assert load_props(str(p)) == {"weekdays": "5,6,0", "interval_height": 40}


def test_unquoted_dates_stay_strings(props_file):
    p = props_file("now: 2024-01-02\nstart: 2024-01-02 09:30\nend: '2024-02-01'\ninterval_count: 12\n")
    data = load_props(str(p))
    assert data == {
        "now": "2024-01-02",
        "start": "2024-01-02 09:30",
        "end": "2024-02-01",
        "interval_count": 12,
    }
    out = validate_props(data)
    assert out["now"] == "2024-01-02"
    assert out["start"] == "2024-01-02 09:30"


def test_empty_document_is_empty_mapping(props_file):
    p = props_file("# nothing here\n")
    assert load_props(str(p)) == {}


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigError) as ei:
        load_props(str(tmp_path / "nope.yaml"))
    assert "not found" in str(ei.value)


@pytest.mark.parametrize("text", ["- 1\n- 2\n", "just a string\n", "weekdays: [1, 2\n"])
def test_non_mapping_or_broken_yaml_raises(props_file, text):
    p = props_file(text)
    with pytest.raises(ConfigError):
        load_props(str(p))


def test_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("locale: fr-FR\n"))
    assert load_props("-") == {"locale": "fr-FR"}


def test_env_overrides_applied_on_load(props_file, monkeypatch):
    p = props_file("locale: en-US\nweekdays: [1, 2]\n")
    monkeypatch.setenv("CALPROPS_LOCALE", " de-DE ")
    monkeypatch.setenv("CALPROPS_WEEKDAYS", "6,0")
    assert load_props(str(p)) == {"locale": "de-DE", "weekdays": "6,0"}


def test_apply_env_overrides_ignores_blank_and_copies():
    props = {"locale": "en-US"}
    out = apply_env_overrides(props, {"CALPROPS_LOCALE": "  "})
    assert out == props and out is not props
