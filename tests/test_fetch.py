"""Tests for the fetch coordinator."""

import threading
from pathlib import Path
from typing import Any

import pytest

from series_renamer import fetch
from series_renamer.errors import ApiError, ChannelDisconnectedError
from series_renamer.fetch import FetchCoordinator
from series_renamer.models import Episode, Failed, Fetched

from .conftest import wait_for_result


def test_fetch_delivers_episodes_and_files(monkeypatch: Any, season_dir: Path,
                                           pilot: Episode) -> None:
    seen = []

    def fake_fetch(link: str, season: int, api_key: str) -> list[Episode]:
        seen.append((link, season, api_key))
        return [pilot]

    monkeypatch.setattr(fetch, "resolve_and_fetch", fake_fetch)
    coordinator = FetchCoordinator()
    handle = coordinator.start("tt0903747", season_dir, 3, "key")

    result = wait_for_result(coordinator, handle)

    assert isinstance(result, Fetched)
    assert result.episodes == [pilot]
    assert {f.name for f in result.files} == {"a.mkv", "b.mkv"}
    assert result.generation == handle.generation == 1
    assert seen == [("tt0903747", 3, "key")]


def test_result_is_delivered_once(monkeypatch: Any, season_dir: Path) -> None:
    monkeypatch.setattr(fetch, "resolve_and_fetch", lambda *a: [])
    coordinator = FetchCoordinator()
    handle = coordinator.start("tt1", season_dir, 1, "key")

    wait_for_result(coordinator, handle)
    handle.thread.join(timeout=5)

    assert coordinator.poll(handle) is None


def test_poll_is_non_blocking_while_running(monkeypatch: Any, season_dir: Path) -> None:
    release = threading.Event()

    def slow_fetch(*args: Any) -> list[Episode]:
        release.wait(timeout=5)
        return []

    monkeypatch.setattr(fetch, "resolve_and_fetch", slow_fetch)
    coordinator = FetchCoordinator()
    handle = coordinator.start("tt1", season_dir, 1, "key")

    assert coordinator.poll(handle) is None
    release.set()
    assert isinstance(wait_for_result(coordinator, handle), Fetched)


def test_catalog_error_becomes_failed(monkeypatch: Any, season_dir: Path) -> None:
    def broken_fetch(*args: Any) -> list[Episode]:
        raise ApiError(503, "Service Unavailable")

    monkeypatch.setattr(fetch, "resolve_and_fetch", broken_fetch)
    coordinator = FetchCoordinator()
    handle = coordinator.start("tt1", season_dir, 1, "key")

    result = wait_for_result(coordinator, handle)

    assert isinstance(result, Failed)
    assert "503" in result.reason


@pytest.mark.filterwarnings("ignore::pytest.PytestUnhandledThreadExceptionWarning")
def test_crashed_worker_is_channel_disconnected(monkeypatch: Any, season_dir: Path) -> None:
    def crash(*args: Any) -> list[Episode]:
        raise RuntimeError("boom")

    monkeypatch.setattr(fetch, "resolve_and_fetch", crash)
    coordinator = FetchCoordinator()
    handle = coordinator.start("tt1", season_dir, 1, "key")
    handle.thread.join(timeout=5)

    with pytest.raises(ChannelDisconnectedError):
        coordinator.poll(handle)
    assert coordinator.poll(handle) is None


def test_generations_increase_and_stale_results_are_detected(monkeypatch: Any,
                                                             season_dir: Path) -> None:
    monkeypatch.setattr(fetch, "resolve_and_fetch", lambda *a: [])
    coordinator = FetchCoordinator()

    first = coordinator.start("tt1", season_dir, 1, "key")
    second = coordinator.start("tt1", season_dir, 2, "key")

    first_result = wait_for_result(coordinator, first)
    second_result = wait_for_result(coordinator, second)

    assert (first.generation, second.generation) == (1, 2)
    assert coordinator.current_generation == 2
    assert not coordinator.is_current(first_result)
    assert coordinator.is_current(second_result)


def test_dropped_handle_is_harmless(monkeypatch: Any, season_dir: Path) -> None:
    monkeypatch.setattr(fetch, "resolve_and_fetch", lambda *a: [])
    coordinator = FetchCoordinator()
    handle = coordinator.start("tt1", season_dir, 1, "key")
    thread = handle.thread
    del handle

    thread.join(timeout=5)
    assert not thread.is_alive()
