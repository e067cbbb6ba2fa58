from __future__ import annotations

import os
from pathlib import Path

import typer

from monorel import __version__
from monorel.core.config import DEFAULT_SETTINGS_PATH, load_settings
from monorel.core.errors import ExitCode
from monorel.core.result import Err
from monorel.output.console import ConsoleProtocol, RichConsole
from monorel.platform.files import LocalFiles
from monorel.platform.process import SubprocessShell
from monorel.release.orchestrator import Failed, exit_code_for, run_release


app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
)


def _console() -> ConsoleProtocol:
    return RichConsole()


@app.command()
def release(
    dry_run: bool = typer.Option(False, "--dry-run", help="Plan and print steps only."),
    config: Path | None = typer.Option(
        None,
        "--config",
        help=f"Settings file (default: {DEFAULT_SETTINGS_PATH} if present)",
    ),
    cwd: Path | None = typer.Option(None, "--cwd", help="Repository root (default: cwd)"),
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    """Publish packages when HEAD is a release commit.

    Reads ENABLE_MULTI_RELEASE and GITHUB_REF_NAME from the environment.
    """
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    console = _console()

    try:
        root = (cwd or Path.cwd()).expanduser().resolve()
    except OSError as e:
        console.error(f"invalid --cwd: {e}")
        raise typer.Exit(code=int(ExitCode.USER_ERROR))
    if not root.is_dir():
        console.error(f"--cwd '{root}' is not a directory")
        raise typer.Exit(code=int(ExitCode.USER_ERROR))

    settings_path = config if config is not None else root / DEFAULT_SETTINGS_PATH
    settings = load_settings(settings_path, required=config is not None)
    if isinstance(settings, Err):
        console.error(settings.error.message)
        raise typer.Exit(code=int(ExitCode.CONFIG_ERROR))

    try:
        outcome = run_release(
            dict(os.environ),
            shell=SubprocessShell(cwd=root),
            files=LocalFiles(root),
            settings=settings.value,
            console=console,
            dry_run=dry_run,
        )
    except AssertionError as e:
        console.error(f"internal error: {e}")
        raise typer.Exit(code=int(ExitCode.INTERNAL_ERROR))

    if isinstance(outcome, Failed):
        console.error(outcome.error.pretty())

    code = exit_code_for(outcome)
    if code.is_success:
        return
    raise typer.Exit(code=int(code))


def main() -> None:
    app()
