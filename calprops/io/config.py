from __future__ import annotations
import logging
import os
import sys
from typing import Any, Dict, Mapping, Optional

import yaml

from ..errors import ConfigError

__all__ = ["ENV_OVERRIDES", "PropsLoader", "apply_env_overrides", "load_props"]

logger = logging.getLogger(__name__)

# env var -> props field; applied after the file is read
ENV_OVERRIDES = {
    "CALPROPS_LOCALE": "locale",
    "CALPROPS_WEEKDAYS": "weekdays",
}


_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class PropsLoader(yaml.SafeLoader):
    """SafeLoader that leaves plain scalars like 2024-01-02 as strings.

    Timestamp props are strings or numbers, so YAML's implicit date typing is dropped.
    """


PropsLoader.yaml_implicit_resolvers = {
    first: [(tag, rx) for tag, rx in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


# ---- small helpers --------------------------------------------------------

def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        raise ConfigError(f"props file not found: {path}") from None
    except OSError as e:
        raise ConfigError(f"props file unreadable: {path} ({e})") from e


def apply_env_overrides(props: Dict[str, Any], env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Return a copy of `props` with CI/env overrides merged in (no effect if env vars absent).
    Supported:
      - CALPROPS_LOCALE=<tag>      -> locale
      - CALPROPS_WEEKDAYS=<list>   -> weekdays   (comma-separated, validated later like any value)
    """
    env = os.environ if env is None else env
    out = dict(props)
    for var, field in ENV_OVERRIDES.items():
        v = env.get(var)
        if v is None or not v.strip():
            continue
        out[field] = v.strip()
        logger.debug("props override from %s: %s=%r", var, field, out[field])
    return out


# ---- loader ---------------------------------------------------------------

def load_props(path: str, env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Load a YAML props file ('-' reads stdin) into a plain dict.
    Behavior:
      * An empty document yields {}.
      * A document that is not a mapping, or YAML that does not parse, raises ConfigError.
      * Env overrides (CALPROPS_LOCALE, CALPROPS_WEEKDAYS) are applied on top.
      * Unquoted dates stay strings (`now: 2024-01-02` reads as "2024-01-02").
    Values are returned raw; resolution happens in configs.validate.
    """
    text = _read_text(path)
    try:
        data = yaml.load(text, Loader=PropsLoader)
    except yaml.YAMLError as e:
        raise ConfigError(f"props file is not valid YAML: {path} ({e})") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"props file must hold a mapping, got {type(data).__name__}: {path}")
    logger.debug("loaded %d props from %s", len(data), path)
    return apply_env_overrides(data, env)
