"""Operating system adapters: subprocesses and files."""

from .files import FileAccess, LocalFiles, MemoryFiles
from .process import ExecResult, FakeShell, ProcessError, Shell, SubprocessShell, run, run_live

__all__ = [
    "ExecResult",
    "FakeShell",
    "FileAccess",
    "LocalFiles",
    "MemoryFiles",
    "ProcessError",
    "Shell",
    "SubprocessShell",
    "run",
    "run_live",
]
