"""Tests for output/console.py."""

from __future__ import annotations

import pytest

from monorel.output.console import MockConsole, RichConsole, Style


class TestMockConsole:
    def test_captures_styles(self) -> None:
        console = MockConsole()
        console.print("plain")
        console.success("done")
        console.warning("careful")
        console.error("broken")
        console.info("fyi")
        console.header("Starting")

        assert console.messages == [
            "plain",
            "OK done",
            "warning: careful",
            "error: broken",
            "info: fyi",
            "Starting",
        ]
        assert console.has_error()
        assert console.has_warning()
        assert console.outputs[-1].style == Style.HEADER

    def test_find(self) -> None:
        console = MockConsole()
        console.print("Checking for branch 'release/1.x'...")
        console.print("something else")

        assert len(console.find("release/1.x")) == 1
        assert "something else" in console.text


def test_rich_console_splits_streams(capsys: pytest.CaptureFixture[str]) -> None:
    console = RichConsole()
    console.success("published")
    console.warning("skipping")
    console.error("failed")

    captured = capsys.readouterr()
    assert "published" in captured.out
    assert "skipping" in captured.err
    assert "failed" in captured.err
    assert "failed" not in captured.out


def test_style_str() -> None:
    assert str(Style.WARNING) == "warning"


def test_rich_console_keeps_brackets_literal(capsys: pytest.CaptureFixture[str]) -> None:
    console = RichConsole()
    console.error("! [rejected] release/1.x (fetch first)")
    console.print("[not markup]")

    captured = capsys.readouterr()
    assert "[rejected]" in captured.err
    assert "[not markup]" in captured.out
