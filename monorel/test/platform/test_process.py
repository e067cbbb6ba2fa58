"""Tests for monorel.platform.process module."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from monorel.core.result import Err, Ok
from monorel.platform.process import FakeShell, ProcessError, SubprocessShell, run, run_live

PY = sys.executable


class TestProcessError:
    def test_str_short_command(self) -> None:
        error = ProcessError(
            command=("git", "push", "origin", "release/1.x"),
            returncode=1,
            stdout="",
            stderr="rejected",
        )
        assert str(error) == "git push origin release/1.x failed (exit 1)"

    def test_str_long_command_truncated(self) -> None:
        error = ProcessError(
            command=("pnpm", "changeset", "publish", "--tag", "next", "--otp", "1"),
            returncode=2,
            stdout="",
            stderr="",
        )
        assert str(error) == "pnpm changeset publish --tag ... failed (exit 2)"


class TestRun:
    def test_success_captures_output(self, tmp_path: Path) -> None:
        result = run(
            [PY, "-c", "import sys; print('out'); sys.stderr.write('err')"],
            cwd=tmp_path,
        )

        assert isinstance(result, Ok)
        assert result.value.stdout.strip() == "out"
        assert result.value.stderr == "err"
        assert result.value.returncode == 0

    def test_failure_returns_error(self, tmp_path: Path) -> None:
        result = run([PY, "-c", "import sys; sys.exit(42)"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == 42

    def test_command_not_found(self, tmp_path: Path) -> None:
        result = run(["nonexistent_command_monorel_12345"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == -1
        assert result.error.stderr

    def test_timeout(self, tmp_path: Path) -> None:
        result = run([PY, "-c", "import time; time.sleep(10)"], cwd=tmp_path, timeout=0.2)

        assert isinstance(result, Err)
        assert "timed out" in result.error.stderr


class TestRunLive:
    def test_success(self, tmp_path: Path) -> None:
        assert isinstance(run_live([PY, "-c", "pass"], cwd=tmp_path), Ok)

    def test_failure_keeps_exit_code(self, tmp_path: Path) -> None:
        result = run_live([PY, "-c", "import sys; sys.exit(3)"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == 3
        assert result.error.command[0] == PY


def test_subprocess_shell_uses_cwd(tmp_path: Path) -> None:
    (tmp_path / "marker.txt").write_text("x", encoding="utf-8")
    shell = SubprocessShell(cwd=tmp_path)

    result = shell.run([PY, "-c", "import os; print(os.listdir('.'))"])

    assert isinstance(result, Ok)
    assert "marker.txt" in result.value.stdout


class TestFakeShell:
    def test_records_and_defaults_to_success(self) -> None:
        shell = FakeShell()

        result = shell.run(["git", "status"])

        assert isinstance(result, Ok)
        assert result.value.stdout == ""
        assert shell.calls == [("git", "status")]

    def test_registered_failure(self) -> None:
        shell = FakeShell()
        shell.on("git", "push", "origin", "x", returncode=128, stderr="denied")

        result = shell.run(["git", "push", "origin", "x"])

        assert isinstance(result, Err)
        assert result.error.stderr == "denied"

    @pytest.mark.parametrize("rc", [1, 7])
    def test_live_failure(self, rc: int) -> None:
        shell = FakeShell()
        shell.fail_live("pnpm", "publish", returncode=rc)

        result = shell.run_live(["pnpm", "publish"])

        assert isinstance(result, Err)
        assert result.error.returncode == rc
        assert shell.live_calls == [("pnpm", "publish")]
