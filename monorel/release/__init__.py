"""Release flow.

- context: branch facts read from the environment
- preconditions: decide whether the current commit is a release commit
- plan_file / planner: turn the maintenance plan into ordered steps
- executor: perform the steps
- orchestrator: sequence the above into one outcome
"""

from __future__ import annotations

from monorel.release.context import ReleaseContext, build_context
from monorel.release.errors import ReleaseError
from monorel.release.orchestrator import (
    Failed,
    Proceeded,
    ReleaseOutcome,
    Skipped,
    exit_code_for,
    run_release,
)
from monorel.release.steps import EnsureMaintenanceBranch, Exec, LogWarn, Step

__all__ = [
    "EnsureMaintenanceBranch",
    "Exec",
    "Failed",
    "LogWarn",
    "Proceeded",
    "ReleaseContext",
    "ReleaseError",
    "ReleaseOutcome",
    "Skipped",
    "Step",
    "build_context",
    "exit_code_for",
    "run_release",
]
