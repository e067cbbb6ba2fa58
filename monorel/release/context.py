from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from monorel.core.config import ReleaseSettings


@dataclass(frozen=True, slots=True)
class ReleaseContext:
    """Branch facts for one release run, read once from the environment."""

    is_multi_release: bool
    branch_name: str | None
    is_release_branch: bool
    is_main_branch: bool


def build_context(
    env: Mapping[str, str],
    settings: ReleaseSettings | None = None,
) -> ReleaseContext:
    s = settings or ReleaseSettings()

    is_multi_release = env.get(s.multi_release_env) == "true"
    branch_name = env.get(s.ref_name_env) or None

    return ReleaseContext(
        is_multi_release=is_multi_release,
        branch_name=branch_name,
        is_release_branch=branch_name is not None
        and branch_name.startswith(s.release_branch_prefix),
        is_main_branch=branch_name == s.main_branch,
    )
