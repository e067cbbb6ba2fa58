"""Tests for monorel.platform.files module."""

from __future__ import annotations

from pathlib import Path

import pytest

from monorel.platform.files import LocalFiles, MemoryFiles


def test_local_files_resolve_and_read(tmp_path: Path) -> None:
    (tmp_path / ".release-meta").mkdir()
    (tmp_path / ".release-meta" / "plan.json").write_text("{}", encoding="utf-8")
    files = LocalFiles(tmp_path)

    path = files.resolve(".release-meta", "plan.json")

    assert path == (tmp_path / ".release-meta" / "plan.json").resolve()
    assert files.exists(path) is True
    assert files.read_text(path) == "{}"


def test_local_files_directory_counts_as_present(tmp_path: Path) -> None:
    (tmp_path / "plan.json").mkdir()
    files = LocalFiles(tmp_path)
    path = files.resolve("plan.json")

    assert files.exists(path) is True
    with pytest.raises(OSError):
        files.read_text(path)


def test_memory_files() -> None:
    files = MemoryFiles({"meta/plan.json": "{}"})

    assert files.exists(files.resolve("meta", "plan.json")) is True
    assert files.exists(files.resolve("meta", "other.json")) is False
    assert files.read_text(files.resolve("meta", "plan.json")) == "{}"
    with pytest.raises(FileNotFoundError):
        files.read_text(files.resolve("missing.json"))
