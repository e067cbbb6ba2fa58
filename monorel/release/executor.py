from __future__ import annotations

import shlex
from typing import assert_never

from monorel.core.result import Err, Ok, Result
from monorel.git.repository import Repository
from monorel.output.console import ConsoleProtocol
from monorel.platform.process import Shell
from monorel.release.errors import ReleaseError
from monorel.release.steps import EnsureMaintenanceBranch, Exec, LogWarn, Step

# The current HEAD is the "Version Packages" commit; maintenance lines fork
# from the commit before it.
MAINTENANCE_START_POINT = "HEAD~1"


def ensure_maintenance_branch(
    branch: str,
    *,
    repo: Repository,
    remote: str,
    console: ConsoleProtocol,
) -> Result[None, ReleaseError]:
    """Create and push ``branch`` from HEAD~1 unless the remote already has it."""
    console.print(f"Checking for branch '{branch}'...")

    exists = repo.remote_branch_exists(branch, remote=remote)
    if isinstance(exists, Err):
        return Err(
            ReleaseError(
                kind="git_failed",
                message=f"failed to query {remote} for {branch}: {exists.error.message}",
            )
        )

    if exists.value:
        console.success(f"branch '{branch}' already exists")
        return Ok(None)

    console.print(f"Creating '{branch}'...")
    created = repo.create_branch(branch, start_point=MAINTENANCE_START_POINT)
    if isinstance(created, Err):
        return Err(
            ReleaseError(
                kind="git_failed",
                message=f"failed to create {branch}: {created.error.message}",
            )
        )

    pushed = repo.push(branch, remote=remote)
    if isinstance(pushed, Err):
        return Err(
            ReleaseError(
                kind="git_failed",
                message=f"failed to push {branch} to {remote}: {pushed.error.message}",
                hint="another run may have pushed the same branch",
            )
        )

    console.success(f"created and pushed '{branch}' from {MAINTENANCE_START_POINT}")
    return Ok(None)


def execute_steps(
    steps: tuple[Step, ...],
    *,
    repo: Repository,
    shell: Shell,
    remote: str,
    console: ConsoleProtocol,
) -> Result[None, ReleaseError]:
    """Run steps in order, stopping at the first failure. Nothing is rolled back."""
    for step in steps:
        match step:
            case LogWarn(msg=msg):
                console.warning(msg)

            case Exec(cmd=cmd):
                result = shell.run_live(cmd)
                if isinstance(result, Err):
                    return Err(
                        ReleaseError(
                            kind="exec_failed",
                            message=f"{shlex.join(cmd)} failed (exit {result.error.returncode})",
                            hint=result.error.stderr.strip() or None,
                        )
                    )

            case EnsureMaintenanceBranch(branch_name=branch):
                ensured = ensure_maintenance_branch(
                    branch, repo=repo, remote=remote, console=console
                )
                if isinstance(ensured, Err):
                    return ensured

            case _:
                assert_never(step)

    return Ok(None)
