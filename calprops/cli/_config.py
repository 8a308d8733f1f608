"""Props file lookup for `calprops validate` when no PATH is given."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, Mapping, NamedTuple, Optional, Tuple

PROPS_FILENAME = "calendar.yaml"
ENV_VAR = "CALPROPS_CONFIG"

__all__ = ["ENV_VAR", "PROPS_FILENAME", "Discovered", "discover_props_file"]


class Discovered(NamedTuple):
    path: Optional[Path]
    source: str  # "--config", "$CALPROPS_CONFIG", "./configs", "xdg" or "none"

    def describe(self) -> str:
        return f"[calprops] props file: {self.path or 'none'} (from {self.source})"


def _expand(raw: str) -> Path:
    return Path(os.path.expandvars(raw)).expanduser()


def _props_file(p: Path) -> Optional[Path]:
    # a directory stands for the calendar.yaml inside it
    if p.is_dir():
        p = p / PROPS_FILENAME
    return p.resolve() if p.is_file() else None


def _search_dirs(cwd: Path, env: Mapping[str, str]) -> Iterator[Tuple[str, Path]]:
    if env.get(ENV_VAR):
        yield f"${ENV_VAR}", _expand(env[ENV_VAR])
    yield "./configs", cwd / "configs"
    xdg = env.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    yield "xdg", _expand(xdg) / "calprops"


def discover_props_file(
    explicit: Optional[str],
    cwd: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Discovered:
    """Pick the props file: `--config`, then $CALPROPS_CONFIG, ./configs, the XDG dir.

    An explicit path is returned even when it does not exist so the loader can report
    it; the other locations are skipped unless they hold a file.
    """
    if explicit:
        path = _expand(explicit)
        return Discovered(_props_file(path) or path, "--config")
    cwd = cwd or Path.cwd()
    env = os.environ if env is None else env
    for source, candidate in _search_dirs(cwd, env):
        found = _props_file(candidate)
        if found is not None:
            return Discovered(found, source)
    return Discovered(None, "none")
