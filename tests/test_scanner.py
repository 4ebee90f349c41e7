"""Tests for directory scanning."""

import os
from pathlib import Path

import pytest

from series_renamer.models import LocalFile
from series_renamer.scanner import scan


def test_scan_counts_files_not_directories(tmp_path: Path) -> None:
    (tmp_path / "s01").mkdir()
    (tmp_path / "s01" / "extras").mkdir()
    (tmp_path / "empty").mkdir()
    expected = {
        tmp_path / "top.mkv",
        tmp_path / "s01" / "e01.mkv",
        tmp_path / "s01" / "e02.srt",
        tmp_path / "s01" / "extras" / "noext",
    }
    for path in expected:
        path.write_text("x")

    found = scan(tmp_path)

    assert len(found) == len(expected)
    assert {f.path for f in found} == expected


def test_scan_accepts_string_root(tmp_path: Path) -> None:
    (tmp_path / "a.mkv").write_text("x")
    assert scan(str(tmp_path)) == [LocalFile(tmp_path / "a.mkv")]


def test_scan_missing_root_is_empty(tmp_path: Path) -> None:
    assert scan(tmp_path / "does-not-exist") == []


def test_scan_file_root_is_empty(tmp_path: Path) -> None:
    target = tmp_path / "a.mkv"
    target.write_text("x")
    assert scan(target) == []


@pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0,
                    reason="permissions are not enforced for root")
def test_scan_skips_unreadable_subtree(tmp_path: Path) -> None:
    (tmp_path / "ok.mkv").write_text("x")
    locked = tmp_path / "locked"
    locked.mkdir()
    (locked / "hidden.mkv").write_text("x")
    locked.chmod(0)
    try:
        found = scan(tmp_path)
    finally:
        locked.chmod(0o755)

    assert [f.path for f in found] == [tmp_path / "ok.mkv"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_scan_skips_symlinks(tmp_path: Path) -> None:
    real = tmp_path / "real.mkv"
    real.write_text("x")
    try:
        (tmp_path / "link.mkv").symlink_to(real)
    except OSError:
        pytest.skip("cannot create symlinks here")

    assert scan(tmp_path) == [LocalFile(real)]
