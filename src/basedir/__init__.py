"""Resolve XDG base directories from the environment and the user's account."""

from .errors import BaseDirError, HomeLookupError, NotFoundError, OverridesError
from .xdg import (
    cache_home,
    config_dirs,
    config_home,
    data_dirs,
    data_home,
    home_dir,
    resolve_all,
    runtime_dir,
    state_home,
)

__all__ = [
    "BaseDirError",
    "HomeLookupError",
    "NotFoundError",
    "OverridesError",
    "cache_home",
    "config_dirs",
    "config_home",
    "data_dirs",
    "data_home",
    "home_dir",
    "resolve_all",
    "runtime_dir",
    "state_home",
]
