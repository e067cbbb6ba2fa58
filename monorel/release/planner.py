from __future__ import annotations

from pathlib import PurePosixPath

from monorel.core.config import ReleaseSettings
from monorel.core.result import Err, Ok, Result
from monorel.output.console import ConsoleProtocol
from monorel.platform.files import FileAccess
from monorel.release.context import ReleaseContext
from monorel.release.errors import ReleaseError
from monorel.release.plan_file import MaintenancePlan, read_maintenance_plan
from monorel.release.steps import EnsureMaintenanceBranch, Exec, Step, summarize


def build_steps(
    ctx: ReleaseContext,
    plan: MaintenancePlan,
    *,
    publish_cmd: tuple[str, ...],
) -> tuple[Step, ...]:
    """Order the release steps.

    Maintenance branches are cut before publishing so they snapshot the tree
    as it was before the version bump commit.
    """
    steps: list[Step] = []

    if not plan.is_empty and ctx.is_multi_release and ctx.is_main_branch:
        for entry in plan.entries:
            steps.append(EnsureMaintenanceBranch(branch_name=entry.branch_name))

    steps.append(Exec(cmd=publish_cmd))
    return tuple(steps)


def plan_release(
    ctx: ReleaseContext,
    *,
    files: FileAccess,
    settings: ReleaseSettings,
    console: ConsoleProtocol,
) -> Result[tuple[Step, ...], ReleaseError]:
    path = files.resolve(*PurePosixPath(settings.plan_path).parts)
    plan = read_maintenance_plan(files=files, path=path)
    if isinstance(plan, Err):
        return plan

    steps = build_steps(ctx, plan.value, publish_cmd=settings.publish_argv)
    console.print(f"planned release steps: {summarize(steps)}")
    return Ok(steps)
