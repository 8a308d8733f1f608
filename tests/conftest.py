# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest

from calprops.io.config import ENV_OVERRIDES


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """
    Keep developer settings out of the tests: no props env overrides, no
    $CALPROPS_CONFIG, and an empty XDG config home.
    """
    for var in (*ENV_OVERRIDES, "CALPROPS_CONFIG"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-empty"))


@pytest.fixture
def props_file(tmp_path: Path):
    """Write a YAML props file under tmp_path and return its path."""

    def _write(text: str, name: str = "calendar.yaml") -> Path:
        p = tmp_path / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
        return p

    return _write
