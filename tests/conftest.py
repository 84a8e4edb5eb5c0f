from __future__ import annotations

import pytest

from basedir.config import KNOWN_VARIABLES


@pytest.fixture(autouse=True)
def _clean_xdg_env(monkeypatch) -> None:
    # Keep the host session's XDG_* values out of tests that read os.environ.
    for name in KNOWN_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def home():
    return lambda: "/home/alice"
