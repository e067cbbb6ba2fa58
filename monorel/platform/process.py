"""Subprocess execution with Result-based error handling.

Two modes are offered: ``run`` captures stdout/stderr for commands whose
output is parsed (git queries), ``run_live`` inherits the parent's streams so
long-running commands (the publish step) stream their output into the CI log.

The ``Shell`` protocol is the seam the release flow depends on. Tests pass a
fake that records commands instead of executing them.

Usage:
    shell = SubprocessShell(cwd=Path("."))
    match shell.run(["git", "ls-remote", "--heads", "origin", "refs/heads/release/1.x"]):
        case Ok(result):
            print(result.stdout)
        case Err(error):
            print(f"Failed: {error.stderr}")
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from monorel.core.result import Err, Ok, Result

__all__ = [
    "ExecResult",
    "FakeShell",
    "ProcessError",
    "Shell",
    "SubprocessShell",
    "run",
    "run_live",
]


@dataclass(frozen=True, slots=True)
class ExecResult:
    """Output of a successful captured command."""

    stdout: str
    stderr: str
    returncode: int = 0


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: The exit code of the process (-1 if it never ran).
        stdout: Standard output (empty for live commands).
        stderr: Standard error (empty for live commands).
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:4])
        if len(self.command) > 4:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


class Shell(Protocol):
    """Command execution port."""

    def run(self, cmd: Sequence[str]) -> Result[ExecResult, ProcessError]:
        """Run a command and capture its output."""
        ...

    def run_live(self, cmd: Sequence[str]) -> Result[None, ProcessError]:
        """Run a command with inherited standard streams."""
        ...


def run(
    cmd: Sequence[str],
    cwd: Path,
    env: dict[str, str] | None = None,
    *,
    timeout: float | None = None,
) -> Result[ExecResult, ProcessError]:
    """Execute a command and capture its output.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Environment variables (uses current env if None).
        timeout: Maximum seconds to wait (None for no limit).

    Returns:
        Ok(ExecResult) on exit 0, Err(ProcessError) otherwise.
    """
    command = tuple(cmd)
    try:
        proc = subprocess.run(
            list(command),
            cwd=str(cwd),
            env=env,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        return Err(
            ProcessError(
                command=command,
                returncode=-1,
                stdout=e.stdout if isinstance(e.stdout, str) else "",
                stderr=f"Command timed out after {timeout}s",
            )
        )
    except OSError as e:
        return Err(ProcessError(command=command, returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=command,
                returncode=proc.returncode,
                stdout=proc.stdout,
                stderr=proc.stderr,
            )
        )

    return Ok(ExecResult(stdout=proc.stdout, stderr=proc.stderr, returncode=proc.returncode))


def run_live(
    cmd: Sequence[str],
    cwd: Path,
    env: dict[str, str] | None = None,
) -> Result[None, ProcessError]:
    """Execute a command with output streaming to the terminal.

    There is no timeout: the caller's CI job bounds the run.

    Returns:
        Ok(None) on exit 0, Err(ProcessError) otherwise.
    """
    command = tuple(cmd)
    try:
        proc = subprocess.run(list(command), cwd=str(cwd), env=env, check=False)
    except OSError as e:
        return Err(ProcessError(command=command, returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(ProcessError(command=command, returncode=proc.returncode, stdout="", stderr=""))

    return Ok(None)


class SubprocessShell:
    """Shell implementation backed by real subprocesses."""

    def __init__(
        self,
        cwd: Path,
        env: dict[str, str] | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        self.cwd = cwd
        self.env = env
        self.timeout = timeout

    def run(self, cmd: Sequence[str]) -> Result[ExecResult, ProcessError]:
        return run(cmd, cwd=self.cwd, env=self.env, timeout=self.timeout)

    def run_live(self, cmd: Sequence[str]) -> Result[None, ProcessError]:
        return run_live(cmd, cwd=self.cwd, env=self.env)


def _no_commands() -> list[tuple[str, ...]]:
    return []


@dataclass
class FakeShell:
    """Shell implementation that records commands for testing.

    Captured commands return an empty ``ExecResult`` unless a response was
    registered with ``on``; live commands succeed unless registered with
    ``fail_live``.
    """

    calls: list[tuple[str, ...]] = field(default_factory=_no_commands)
    live_calls: list[tuple[str, ...]] = field(default_factory=_no_commands)
    _responses: dict[tuple[str, ...], Result[ExecResult, ProcessError]] = field(
        default_factory=lambda: {}
    )
    _live_failures: dict[tuple[str, ...], int] = field(default_factory=lambda: {})

    def on(self, *cmd: str, stdout: str = "", stderr: str = "", returncode: int = 0) -> None:
        if returncode == 0:
            self._responses[cmd] = Ok(ExecResult(stdout=stdout, stderr=stderr))
        else:
            self._responses[cmd] = Err(
                ProcessError(command=cmd, returncode=returncode, stdout=stdout, stderr=stderr)
            )

    def fail_live(self, *cmd: str, returncode: int = 1) -> None:
        self._live_failures[cmd] = returncode

    def run(self, cmd: Sequence[str]) -> Result[ExecResult, ProcessError]:
        command = tuple(cmd)
        self.calls.append(command)
        return self._responses.get(command, Ok(ExecResult(stdout="", stderr="")))

    def run_live(self, cmd: Sequence[str]) -> Result[None, ProcessError]:
        command = tuple(cmd)
        self.live_calls.append(command)
        rc = self._live_failures.get(command)
        if rc is not None:
            return Err(ProcessError(command=command, returncode=rc, stdout="", stderr=""))
        return Ok(None)

    def git_calls(self, subcommand: str) -> list[tuple[str, ...]]:
        return [c for c in self.calls if c[:2] == ("git", subcommand)]
