"""
XDG base directory lookups.

Every lookup re-reads the environment and the account database on each
call; nothing is cached and nothing is created on disk.

- *_home lookups return the variable verbatim, or home + fixed suffix
- *_dirs lookups return the variable split on ':', or a fixed default
- runtime_dir has no fallback and raises NotFoundError instead
"""

from __future__ import annotations

import logging
import os
import pwd
from collections.abc import Callable, Mapping

from .errors import BaseDirError, HomeLookupError, NotFoundError

logger = logging.getLogger(__name__)

Environ = Mapping[str, str]
HomeResolver = Callable[[], str]

DEFAULT_DATA_DIRS = ("/usr/local/share", "/usr/share")
DEFAULT_CONFIG_DIRS = ("/etc/xdg",)


def home_dir() -> str:
    """Home directory of the invoking user, from the account database."""
    try:
        entry = pwd.getpwuid(os.getuid())
    except KeyError as exc:
        raise HomeLookupError(f"unable to find account for uid {os.getuid()}") from exc
    if not entry.pw_dir:
        raise HomeLookupError("unable to find home directory")
    return entry.pw_dir


def lookup_or_home(
    env: str,
    suffix: str,
    environ: Environ | None = None,
    home: HomeResolver | None = None,
) -> str:
    environ = os.environ if environ is None else environ
    value = environ.get(env, "")
    if value:
        return value

    base = (home or home_dir)()
    logger.debug("%s unset, falling back to %s under home", env, suffix)
    return os.path.join(base, suffix)


def lookup_list(env: str, default: tuple[str, ...], environ: Environ | None = None) -> list[str]:
    environ = os.environ if environ is None else environ
    value = environ.get(env, "")
    if value:
        # naive split: empty segments are kept on purpose
        return value.split(":")

    logger.debug("%s unset, using default %s", env, ":".join(default))
    return list(default)


def data_home(environ: Environ | None = None, home: HomeResolver | None = None) -> str:
    return lookup_or_home("XDG_DATA_HOME", ".local/share", environ, home)


def config_home(environ: Environ | None = None, home: HomeResolver | None = None) -> str:
    return lookup_or_home("XDG_CONFIG_HOME", ".config", environ, home)


def cache_home(environ: Environ | None = None, home: HomeResolver | None = None) -> str:
    return lookup_or_home("XDG_CACHE_HOME", ".cache", environ, home)


def state_home(environ: Environ | None = None, home: HomeResolver | None = None) -> str:
    return lookup_or_home("XDG_STATE_HOME", ".local/state", environ, home)


def runtime_dir(environ: Environ | None = None) -> str:
    """
    Resolve XDG_RUNTIME_DIR.

    The runtime directory must be set up by the session manager, so there is
    no home-relative default to fall back to.
    """
    environ = os.environ if environ is None else environ
    value = environ.get("XDG_RUNTIME_DIR", "")
    if value:
        return value
    raise NotFoundError("unable to find XDG_RUNTIME_DIR")


def data_dirs(environ: Environ | None = None) -> list[str]:
    return lookup_list("XDG_DATA_DIRS", DEFAULT_DATA_DIRS, environ)


def config_dirs(environ: Environ | None = None) -> list[str]:
    return lookup_list("XDG_CONFIG_DIRS", DEFAULT_CONFIG_DIRS, environ)


LOOKUPS: dict[str, Callable[..., str | list[str]]] = {
    "data_home": data_home,
    "config_home": config_home,
    "cache_home": cache_home,
    "state_home": state_home,
    "runtime_dir": lambda environ=None, home=None: runtime_dir(environ),
    "data_dirs": lambda environ=None, home=None: data_dirs(environ),
    "config_dirs": lambda environ=None, home=None: config_dirs(environ),
}


def resolve(name: str, environ: Environ | None = None, home: HomeResolver | None = None) -> str | list[str]:
    """Run a single lookup by name. Raises KeyError for unknown names."""
    return LOOKUPS[name](environ=environ, home=home)


def resolve_all(
    environ: Environ | None = None,
    home: HomeResolver | None = None,
) -> dict[str, str | list[str] | None]:
    """
    Resolve every base directory at once.

    Lookups that fail are reported as None (and logged) rather than raised,
    so one missing directory does not hide the others.
    """
    out: dict[str, str | list[str] | None] = {}
    for name in LOOKUPS:
        try:
            out[name] = resolve(name, environ=environ, home=home)
        except BaseDirError as exc:
            logger.warning("%s: %s", name, exc)
            out[name] = None
    return out
