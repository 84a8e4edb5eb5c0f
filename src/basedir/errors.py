from __future__ import annotations


class BaseDirError(Exception):
    """Base class for every error raised by basedir."""


class HomeLookupError(BaseDirError, LookupError):
    """The current user's account or home directory cannot be determined."""


class NotFoundError(BaseDirError, LookupError):
    """A directory with no derived default is missing from the environment."""


class OverridesError(BaseDirError):
    """An overrides file could not be understood."""
