"""Git repository abstraction.

The release flow needs four git operations: list the files touched by the
current commit, check the remote for a branch, create a local branch and push
it. All of them go through the injected ``Shell`` and return Result types.

Usage:
    repo = Repository(SubprocessShell(cwd=root))

    match repo.changed_files():
        case Ok(files):
            print(f"{len(files)} files changed")
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass

from monorel.core.result import Err, Ok, Result
from monorel.platform.process import ExecResult, Shell

__all__ = ["GitError", "Repository"]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git subcommand that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


class Repository:
    """Git operations for the repository the shell is rooted in."""

    def __init__(self, shell: Shell) -> None:
        self.shell = shell

    def changed_files(self) -> Result[tuple[str, ...], GitError]:
        """List paths changed between HEAD~1 and HEAD.

        For a merge commit this is the diff against the first parent, i.e.
        everything the merge brought in.
        """
        result = self._run(["diff", "--name-only", "HEAD~1", "HEAD"], label="diff")
        if isinstance(result, Err):
            return result
        files = tuple(ln.strip() for ln in result.value.stdout.splitlines() if ln.strip())
        return Ok(files)

    def remote_branch_exists(self, branch: str, *, remote: str) -> Result[bool, GitError]:
        """Check whether ``remote`` has a head named exactly ``branch``.

        A bare name is matched by ls-remote as a ref suffix, so ``1.x`` would also
        hit ``refs/heads/release/1.x``. Passing the full ref avoids that.
        """
        result = self._run(
            ["ls-remote", "--heads", remote, f"refs/heads/{branch}"], label="ls-remote"
        )
        if isinstance(result, Err):
            return result
        return Ok(result.value.stdout.strip() != "")

    def create_branch(self, branch: str, *, start_point: str) -> Result[None, GitError]:
        """Create a local branch at ``start_point`` without checking it out."""
        result = self._run(["branch", branch, start_point], label="branch")
        if isinstance(result, Err):
            return result
        return Ok(None)

    def push(self, branch: str, *, remote: str) -> Result[None, GitError]:
        result = self._run(["push", remote, branch], label="push")
        if isinstance(result, Err):
            return result
        return Ok(None)

    def _run(self, args: list[str], *, label: str) -> Result[ExecResult, GitError]:
        """Run a git command, mapping process failures to GitError."""
        result = self.shell.run(["git", *args])
        match result:
            case Err(e):
                return Err(
                    GitError(
                        command=label,
                        message=e.stderr.strip() or e.stdout.strip() or f"git {label} failed",
                        returncode=e.returncode,
                    )
                )
            case Ok(output):
                return Ok(output)
