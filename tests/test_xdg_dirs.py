from __future__ import annotations

import pytest

from basedir.errors import NotFoundError
from basedir.xdg import config_dirs, data_dirs, resolve_all, runtime_dir


@pytest.mark.parametrize(
    ("lookup", "var", "expected"),
    [
        (data_dirs, "XDG_DATA_DIRS", ["/usr/local/share", "/usr/share"]),
        (config_dirs, "XDG_CONFIG_DIRS", ["/etc/xdg"]),
    ],
)
@pytest.mark.parametrize("unset", [False, True])
def test_dirs_default_when_unset_or_empty(lookup, var, expected, unset) -> None:
    environ = {} if unset else {var: ""}
    assert lookup(environ=environ) == expected


def test_dirs_split_in_order() -> None:
    assert data_dirs(environ={"XDG_DATA_DIRS": "/a:/b:/c"}) == ["/a", "/b", "/c"]
    assert config_dirs(environ={"XDG_CONFIG_DIRS": "/only"}) == ["/only"]


def test_dirs_keep_empty_segments() -> None:
    assert data_dirs(environ={"XDG_DATA_DIRS": ":/a::/b:"}) == ["", "/a", "", "/b", ""]


def test_default_list_is_a_fresh_copy() -> None:
    first = config_dirs(environ={})
    first.append("/mutated")
    assert config_dirs(environ={}) == ["/etc/xdg"]


def test_runtime_dir_verbatim() -> None:
    assert runtime_dir(environ={"XDG_RUNTIME_DIR": "/run/user/1000/"}) == "/run/user/1000/"


@pytest.mark.parametrize("environ", [{}, {"XDG_RUNTIME_DIR": ""}])
def test_runtime_dir_has_no_fallback(environ) -> None:
    with pytest.raises(NotFoundError, match="unable to find XDG_RUNTIME_DIR"):
        runtime_dir(environ=environ)


def test_resolve_all_reports_failures_as_none(home, caplog) -> None:
    resolved = resolve_all(environ={"XDG_DATA_DIRS": "/x:/y"}, home=home)

    assert resolved == {
        "data_home": "/home/alice/.local/share",
        "config_home": "/home/alice/.config",
        "cache_home": "/home/alice/.cache",
        "state_home": "/home/alice/.local/state",
        "runtime_dir": None,
        "data_dirs": ["/x", "/y"],
        "config_dirs": ["/etc/xdg"],
    }
    assert "unable to find XDG_RUNTIME_DIR" in caplog.text
