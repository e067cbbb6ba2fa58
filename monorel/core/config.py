"""Release settings.

Every knob has a default matching the conventional changesets + GitHub
Actions setup, so the settings file is optional. When present it is a TOML
file with a single ``[release]`` table:

    [release]
    publish_command = "pnpm changeset publish --no-git-tag"
    remote = "upstream"
    release_markers = ["package.json", "CHANGELOG.md"]
"""

from __future__ import annotations

import shlex
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_str_tuple, get_table

__all__ = [
    "DEFAULT_PLAN_PATH",
    "DEFAULT_SETTINGS_PATH",
    "ConfigError",
    "ReleaseSettings",
    "load_settings",
]

DEFAULT_PLAN_PATH = ".release-meta/maintenance-branches.json"
DEFAULT_SETTINGS_PATH = ".release-meta/monorel.toml"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the settings file cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ReleaseSettings:
    """Names and commands the release run depends on."""

    multi_release_env: str = "ENABLE_MULTI_RELEASE"
    ref_name_env: str = "GITHUB_REF_NAME"
    main_branch: str = "main"
    release_branch_prefix: str = "release/"
    plan_path: str = DEFAULT_PLAN_PATH
    publish_command: str = "pnpm changeset publish"
    remote: str = "origin"
    release_markers: tuple[str, ...] = ("package.json", "CHANGELOG.md")

    @property
    def publish_argv(self) -> tuple[str, ...]:
        return tuple(shlex.split(self.publish_command))

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> ReleaseSettings:
        """Create settings from a parsed TOML mapping."""
        release: StrDict = get_table(data, "release") or {}
        defaults = cls()

        publish_command = get_str(release, "publish_command") or defaults.publish_command
        if not shlex.split(publish_command):
            raise ValueError("publish_command is empty")

        markers = get_str_tuple(release, "release_markers")
        if "release_markers" in release and not markers:
            raise ValueError("release_markers must be a non-empty list of strings")

        return cls(
            multi_release_env=get_str(release, "multi_release_env") or defaults.multi_release_env,
            ref_name_env=get_str(release, "ref_name_env") or defaults.ref_name_env,
            main_branch=get_str(release, "main_branch") or defaults.main_branch,
            release_branch_prefix=get_str(release, "release_branch_prefix")
            or defaults.release_branch_prefix,
            plan_path=get_str(release, "plan_path") or defaults.plan_path,
            publish_command=publish_command,
            remote=get_str(release, "remote") or defaults.remote,
            release_markers=markers or defaults.release_markers,
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling parse and read errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Settings root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Settings file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading settings: {e}", path=path))


def load_settings(path: Path, *, required: bool = False) -> Result[ReleaseSettings, ConfigError]:
    """Load release settings from a TOML file.

    Args:
        path: Path to the settings file.
        required: When False a missing file yields the defaults.

    Returns:
        Ok(ReleaseSettings) on success, Err(ConfigError) on failure.
    """
    if not required and not path.exists():
        return Ok(ReleaseSettings())

    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(ReleaseSettings.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid settings: {e}", path=path))
