"""Release step variants.

``Step`` is a closed union: the executor matches on it exhaustively, so a new
variant fails type checking until every consumer handles it.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class LogWarn:
    msg: str

    kind: ClassVar[str] = "log-warn"

    def describe(self) -> str:
        return f"warn: {self.msg}"


@dataclass(frozen=True, slots=True)
class Exec:
    cmd: tuple[str, ...]

    kind: ClassVar[str] = "exec"

    def describe(self) -> str:
        return f"exec: {shlex.join(self.cmd)}"


@dataclass(frozen=True, slots=True)
class EnsureMaintenanceBranch:
    branch_name: str

    kind: ClassVar[str] = "ensure-maintenance-branch"

    def describe(self) -> str:
        return f"ensure maintenance branch: {self.branch_name}"


type Step = LogWarn | Exec | EnsureMaintenanceBranch


def summarize(steps: tuple[Step, ...]) -> str:
    return ", ".join(s.kind for s in steps) or "(none)"
