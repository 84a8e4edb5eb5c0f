from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import yaml

from .errors import OverridesError

logger = logging.getLogger(__name__)

KNOWN_VARIABLES = (
    "XDG_DATA_HOME",
    "XDG_CONFIG_HOME",
    "XDG_CACHE_HOME",
    "XDG_STATE_HOME",
    "XDG_RUNTIME_DIR",
    "XDG_DATA_DIRS",
    "XDG_CONFIG_DIRS",
)

LIST_VARIABLES = ("XDG_DATA_DIRS", "XDG_CONFIG_DIRS")


def _override_value(path: Path, name: str, value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if name in LIST_VARIABLES and isinstance(value, list) and all(isinstance(v, str) for v in value):
        return ":".join(value)
    raise OverridesError(f"{path}: {name} must be a string, got {type(value).__name__}")


def load_overrides(path: Path) -> dict[str, str]:
    """
    Read XDG variable overrides from a YAML mapping.

    A null value becomes an empty string, which forces the lookup fallback.
    The *_DIRS variables also accept a list of strings, joined with ':'.
    Unknown keys are dropped with a warning.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise OverridesError(f"{path}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise OverridesError(f"{path}: invalid YAML: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise OverridesError(f"{path}: expected a mapping, got {type(data).__name__}")

    overrides: dict[str, str] = {}
    for key, value in data.items():
        name = str(key)
        if name not in KNOWN_VARIABLES:
            logger.warning("overrides: ignoring unknown variable '%s'. Known: %s", name, list(KNOWN_VARIABLES))
            continue
        overrides[name] = _override_value(path, name, value)
    return overrides


def layered_environ(overrides: Mapping[str, str], base: Mapping[str, str] | None = None) -> dict[str, str]:
    out = dict(os.environ if base is None else base)
    out.update(overrides)
    return out
