"""Release gating.

A release commit is recognised by what it touches rather than by its
message: ``changeset version`` always rewrites package manifests and/or
changelogs, while merge tooling is free to reword or squash messages.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal, Protocol

from monorel.core.result import Err, Ok, Result
from monorel.git.repository import GitError
from monorel.output.console import ConsoleProtocol
from monorel.release.context import ReleaseContext

SkipReason = Literal["ineligible_branch", "no_release_changes"]


class ChangedFileSource(Protocol):
    def changed_files(self) -> Result[tuple[str, ...], GitError]: ...


@dataclass(frozen=True, slots=True)
class PreconditionReport:
    proceed_with_release: bool
    changed_files: tuple[str, ...]
    skip_reason: SkipReason | None = None


def is_release_change(path: str, markers: Iterable[str]) -> bool:
    return any(path.endswith(m) for m in markers)


def validate_preconditions(
    ctx: ReleaseContext,
    *,
    repo: ChangedFileSource,
    console: ConsoleProtocol,
    markers: tuple[str, ...],
) -> Result[PreconditionReport, GitError]:
    changed = repo.changed_files()
    if isinstance(changed, Err):
        return changed
    files = changed.value

    latest_changes_are_release_changes = any(is_release_change(f, markers) for f in files)

    if not ctx.is_main_branch and not ctx.is_release_branch and ctx.is_multi_release:
        console.warning(
            f"skipping release: branch {ctx.branch_name} is not eligible in multi-release mode"
        )
        return Ok(
            PreconditionReport(
                proceed_with_release=False,
                changed_files=files,
                skip_reason="ineligible_branch",
            )
        )

    console.print("Checking for release commit by inspecting changed files in HEAD...")

    if latest_changes_are_release_changes:
        console.success(f"versioning changes detected ({', '.join(markers)}); proceeding")
        return Ok(PreconditionReport(proceed_with_release=True, changed_files=files))

    return Ok(
        PreconditionReport(
            proceed_with_release=False,
            changed_files=files,
            skip_reason="no_release_changes",
        )
    )
