"""
Pytest configuration and fixtures for series renamer tests.
"""

import time
from pathlib import Path
from typing import Any

import pytest

from series_renamer.fetch import FetchCoordinator, FetchHandle
from series_renamer.models import Episode, LocalFile


class DummyResponse:
    """Stand-in for requests.Response."""

    def __init__(self, status_code: int = 200, body: Any = None, reason: str = "OK") -> None:
        self.status_code = status_code
        self.reason = reason
        self._body = body

    def json(self) -> Any:
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: Any) -> Path:
    """Point settings, .env lookup and the API key env var at a temp dir."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("APPDATA", str(home / "AppData"))
    # setenv first so the variable is removed again on teardown
    monkeypatch.setenv("OMDB_API_KEY", "")
    monkeypatch.delenv("OMDB_API_KEY")
    monkeypatch.chdir(tmp_path)
    return home


@pytest.fixture
def pilot() -> Episode:
    return Episode("Pilot", "1", "tt0000001")


@pytest.fixture
def second() -> Episode:
    return Episode("Second", "2", "tt0000002")


@pytest.fixture
def season_dir(tmp_path: Path) -> Path:
    """Folder with a.mkv and b.mkv."""
    folder = tmp_path / "season"
    folder.mkdir()
    (folder / "a.mkv").write_bytes(b"a")
    (folder / "b.mkv").write_bytes(b"b")
    return folder


@pytest.fixture
def files(season_dir: Path) -> list[LocalFile]:
    return [LocalFile(season_dir / "a.mkv"), LocalFile(season_dir / "b.mkv")]


def wait_for_result(
    coordinator: FetchCoordinator, handle: FetchHandle, timeout: float = 5.0
) -> Any:
    """Poll until the handle delivers, failing the test on timeout."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        result = coordinator.poll(handle)
        if result is not None:
            return result
        time.sleep(0.01)
    raise AssertionError("fetch did not finish in time")
