"""Top-level release flow.

The run ends in exactly one ``ReleaseOutcome``. A skip is its own variant, so
callers never have to guess from an error message whether a run that did
nothing was meant to do nothing.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

from monorel.core.config import ReleaseSettings
from monorel.core.errors import ExitCode
from monorel.core.result import Err
from monorel.git.repository import Repository
from monorel.output.console import ConsoleProtocol, Style
from monorel.platform.files import FileAccess
from monorel.platform.process import Shell
from monorel.release.context import build_context
from monorel.release.errors import ReleaseError
from monorel.release.executor import execute_steps
from monorel.release.planner import plan_release
from monorel.release.preconditions import validate_preconditions
from monorel.release.steps import Step, summarize

SkipKind = Literal["ineligible_branch", "no_release_changes", "no_steps"]


@dataclass(frozen=True, slots=True)
class Proceeded:
    steps: tuple[Step, ...]
    dry_run: bool = False


@dataclass(frozen=True, slots=True)
class Skipped:
    kind: SkipKind
    message: str


@dataclass(frozen=True, slots=True)
class Failed:
    error: ReleaseError


type ReleaseOutcome = Proceeded | Skipped | Failed


_SKIP_MESSAGES: dict[SkipKind, str] = {
    "ineligible_branch": "branch is not eligible for release in multi-release mode",
    "no_release_changes": "latest commit has no versioning changes",
    "no_steps": "no steps to execute",
}


def run_release(
    env: Mapping[str, str],
    *,
    shell: Shell,
    files: FileAccess,
    settings: ReleaseSettings,
    console: ConsoleProtocol,
    dry_run: bool = False,
) -> ReleaseOutcome:
    console.header("Starting release")

    ctx = build_context(env, settings)
    repo = Repository(shell)

    report = validate_preconditions(
        ctx, repo=repo, console=console, markers=settings.release_markers
    )
    if isinstance(report, Err):
        return Failed(
            ReleaseError(
                kind="git_failed",
                message=f"failed to list changed files: {report.error.message}",
            )
        )

    console.print(f"Current branch: {ctx.branch_name}", Style.DIM)
    console.print(f"Multi-release mode: {ctx.is_multi_release}", Style.DIM)
    console.print(f"Proceed with release: {report.value.proceed_with_release}", Style.DIM)

    if not report.value.proceed_with_release:
        kind = report.value.skip_reason or "no_release_changes"
        return _skip(kind, console)

    planned = plan_release(ctx, files=files, settings=settings, console=console)
    if isinstance(planned, Err):
        return Failed(planned.error)
    steps = planned.value

    if not steps:
        return _skip("no_steps", console)

    if dry_run:
        for step in steps:
            console.print(f"  {step.describe()}")
        console.info("dry run: no steps executed")
        return Proceeded(steps=steps, dry_run=True)

    executed = execute_steps(
        steps, repo=repo, shell=shell, remote=settings.remote, console=console
    )
    if isinstance(executed, Err):
        return Failed(executed.error)

    console.success(f"release completed ({summarize(steps)})")
    return Proceeded(steps=steps)


def _skip(kind: SkipKind, console: ConsoleProtocol) -> Skipped:
    message = _SKIP_MESSAGES[kind]
    console.info(f"skipping release process: {message}")
    return Skipped(kind=kind, message=message)


def exit_code_for(outcome: ReleaseOutcome) -> ExitCode:
    match outcome:
        case Proceeded() | Skipped():
            return ExitCode.OK
        case Failed(error=error):
            if error.kind == "invalid_plan":
                return ExitCode.CONFIG_ERROR
            return ExitCode.PROCESS_ERROR
    # Fallback for exhaustiveness
    return ExitCode.INTERNAL_ERROR
