"""Maintenance-branch plan file.

The plan is written by the versioning tooling, one entry per package that
needs a maintenance line cut before the next major goes out:

    {
      "lib-one": {"branchName": "release/lib-one-1.x"},
      "lib-two": {"branchName": "release/lib-two-3.x"}
    }

This module only reads it. A plan that cannot be parsed is an error: a
release must not go ahead on a half-understood plan.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from monorel.core.result import Err, Ok, Result
from monorel.core.structured import as_str_dict, get_str
from monorel.platform.files import FileAccess
from monorel.release.errors import ReleaseError


@dataclass(frozen=True, slots=True)
class MaintenanceEntry:
    package: str
    branch_name: str


@dataclass(frozen=True, slots=True)
class MaintenancePlan:
    """Plan entries, in the order the file lists them."""

    entries: tuple[MaintenanceEntry, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.entries


def parse_maintenance_plan(text: str, *, source: str) -> Result[MaintenancePlan, ReleaseError]:
    try:
        obj: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(
            ReleaseError(
                kind="invalid_plan",
                message=f"invalid JSON in maintenance plan: {e}",
                hint=source,
            )
        )

    data = as_str_dict(obj)
    if data is None:
        return Err(
            ReleaseError(
                kind="invalid_plan",
                message="maintenance plan root must be a JSON object",
                hint=source,
            )
        )

    entries: list[MaintenanceEntry] = []
    for package, value in data.items():
        item = as_str_dict(value)
        if item is None:
            return Err(
                ReleaseError(
                    kind="invalid_plan",
                    message=f"plan entry for {package} must be an object",
                    hint=source,
                )
            )
        branch_name = get_str(item, "branchName")
        if branch_name is None:
            return Err(
                ReleaseError(
                    kind="invalid_plan",
                    message=f"plan entry for {package} is missing branchName",
                    hint=source,
                )
            )
        entries.append(MaintenanceEntry(package=package, branch_name=branch_name))

    return Ok(MaintenancePlan(entries=tuple(entries)))


def read_maintenance_plan(
    *,
    files: FileAccess,
    path: Path,
) -> Result[MaintenancePlan, ReleaseError]:
    """Read the plan at ``path``; a missing file is an empty plan."""
    if not files.exists(path):
        return Ok(MaintenancePlan())

    try:
        text = files.read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        return Err(
            ReleaseError(
                kind="invalid_plan",
                message=f"failed to read maintenance plan: {e}",
                hint=str(path),
            )
        )

    return parse_maintenance_plan(text, source=str(path))
