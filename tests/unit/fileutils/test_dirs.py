"""Unit tests for :mod:`littleutils.fileutils.dirs`.

Covers lazy resolution and caching, environment and injected overrides, the
fatal error path on first-ever resolution failure, and the join helpers.
"""

from pathlib import Path

import pytest

from littleutils.errors import FatalStartupError
from littleutils.fileutils import (
    DirectoryResolver,
    configure_directories,
    get_home_dir,
    get_working_directory,
    join_home_path,
    join_working_directory,
)

pytestmark = pytest.mark.usefixtures("fresh_directories")


@pytest.fixture(autouse=True)
def _no_env_overrides(monkeypatch):
    monkeypatch.delenv("LITTLEUTILS_HOME_DIR", raising=False)
    monkeypatch.delenv("LITTLEUTILS_WORKING_DIR", raising=False)


def test_home_dir_is_resolved_once_and_cached(monkeypatch, tmp_path):
    """Path.home() is consulted only on first access."""
    calls = []

    def fake_home():
        calls.append(1)
        return tmp_path

    monkeypatch.setattr(Path, "home", staticmethod(fake_home))

    assert get_home_dir() == tmp_path
    assert get_home_dir() == tmp_path
    assert len(calls) == 1


def test_working_dir_is_resolved_once_and_cached(monkeypatch, tmp_path):
    """Path.cwd() is consulted only on first access."""
    calls = []

    def fake_cwd():
        calls.append(1)
        return tmp_path

    monkeypatch.setattr(Path, "cwd", staticmethod(fake_cwd))

    assert get_working_directory() == tmp_path
    assert get_working_directory() == tmp_path
    assert len(calls) == 1


def test_home_dir_failure_is_fatal(monkeypatch):
    """A lookup failure on first access raises FatalStartupError."""

    def broken_home():
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", staticmethod(broken_home))

    with pytest.raises(FatalStartupError, match="home directory") as excinfo:
        get_home_dir()
    assert isinstance(excinfo.value.cause, RuntimeError)


def test_working_dir_failure_is_fatal(monkeypatch):
    """A vanished working directory raises FatalStartupError."""

    def broken_cwd():
        raise FileNotFoundError(2, "No such file or directory")

    monkeypatch.setattr(Path, "cwd", staticmethod(broken_cwd))

    with pytest.raises(FatalStartupError, match="working directory"):
        get_working_directory()


def test_cached_value_survives_later_lookup_failure(monkeypatch, tmp_path):
    """Once cached, a broken lookup no longer matters."""
    monkeypatch.setattr(Path, "home", staticmethod(lambda: tmp_path))
    assert get_home_dir() == tmp_path

    def broken_home():
        raise RuntimeError("gone")

    monkeypatch.setattr(Path, "home", staticmethod(broken_home))
    assert get_home_dir() == tmp_path


def test_env_override_wins_over_lookup(monkeypatch, tmp_path):
    """LITTLEUTILS_HOME_DIR / LITTLEUTILS_WORKING_DIR skip the system lookup."""

    def broken():
        raise AssertionError("system lookup should not run")

    monkeypatch.setattr(Path, "home", staticmethod(broken))
    monkeypatch.setattr(Path, "cwd", staticmethod(broken))
    monkeypatch.setenv("LITTLEUTILS_HOME_DIR", str(tmp_path / "home"))
    monkeypatch.setenv("LITTLEUTILS_WORKING_DIR", str(tmp_path / "work"))

    assert get_home_dir() == tmp_path / "home"
    assert get_working_directory() == tmp_path / "work"


def test_configure_directories_injects_values(tmp_path):
    """Injected directories are returned as-is."""
    configure_directories(home=tmp_path / "h", working=tmp_path / "w")
    assert get_home_dir() == tmp_path / "h"
    assert get_working_directory() == tmp_path / "w"


def test_join_helpers(tmp_path):
    """Join helpers append segments to the resolved directories."""
    configure_directories(home=tmp_path / "h", working=tmp_path / "w")
    assert join_home_path(".config", "app.yaml") == tmp_path / "h" / ".config" / "app.yaml"
    assert join_working_directory("data", "in.csv") == tmp_path / "w" / "data" / "in.csv"
    assert join_home_path() == tmp_path / "h"


@pytest.mark.parametrize(
    ("parts", "expected"),
    [
        (("/etc/passwd",), "etc/passwd"),
        (("//srv", "/data.csv"), "srv/data.csv"),
        (("\\tmp\\x",), "tmp\\x"),
    ],
)
def test_join_helpers_keep_the_directory_prefix(tmp_path, parts, expected):
    """Absolute parts are joined under the directory instead of replacing it."""
    configure_directories(home=tmp_path / "h", working=tmp_path / "w")
    assert join_home_path(*parts) == tmp_path / "h" / expected
    assert join_working_directory(*parts) == tmp_path / "w" / expected


def test_resolver_instances_are_independent(tmp_path):
    """Separate resolvers do not share cached values."""
    a = DirectoryResolver(home=tmp_path / "a")
    b = DirectoryResolver(home=tmp_path / "b")
    assert a.home_dir() == tmp_path / "a"
    assert b.home_dir() == tmp_path / "b"
