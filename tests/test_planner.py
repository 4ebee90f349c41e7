"""Tests for target name generation."""

from pathlib import Path

import pytest

from series_renamer.errors import MissingExtensionError
from series_renamer.models import Episode, LocalFile
from series_renamer.planner import build_plan, plan_name, sanitize_title


def _file(name: str) -> LocalFile:
    return LocalFile(Path("/media/show") / name)


def test_plan_name_numeric_label() -> None:
    episode = Episode("The Beginning: Part One!", "3")
    assert plan_name(episode, _file("x.mkv"), 1) == "S01E03 - The Beginning Part One.mkv"


def test_plan_name_non_numeric_label_falls_back() -> None:
    assert plan_name(Episode("Special", "A"), _file("x.mp4"), 2) == "S02EA - Special.mp4"


def test_plan_name_wide_numbers() -> None:
    assert plan_name(Episode("Late", "123"), _file("x.avi"), 12) == "S12E123 - Late.avi"


def test_plan_name_keeps_last_extension_verbatim() -> None:
    assert plan_name(Episode("Pilot", "1"), _file("show.s01e01.MKV"), 1) == "S01E01 - Pilot.MKV"


def test_plan_name_empty_title_is_accepted() -> None:
    assert plan_name(Episode("?!", "4"), _file("x.mkv"), 1) == "S01E04 - .mkv"


@pytest.mark.parametrize("name", ["README", "trailing."])
def test_plan_name_without_extension_raises(name: str) -> None:
    with pytest.raises(MissingExtensionError):
        plan_name(Episode("Pilot", "1"), _file(name), 1)


def test_sanitize_title_drops_punctuation_keeps_unicode_letters() -> None:
    assert sanitize_title("Café / Déjà-vu: 2") == "Café  Déjàvu 2"


def test_build_plan_splits_unnamed() -> None:
    pilot, second = Episode("Pilot", "1"), Episode("Second", "2")
    entries, unnamed = build_plan({pilot: _file("a.mkv"), second: _file("b")}, 1)

    assert [e.target_name for e in entries] == ["S01E01 - Pilot.mkv"]
    assert entries[0].target_path == Path("/media/show/S01E01 - Pilot.mkv")
    assert unnamed == [(second, _file("b"))]
