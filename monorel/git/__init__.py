"""Git operations used by the release flow.

Usage:
    from monorel.git import Repository

    repo = Repository(shell)
    exists = repo.remote_branch_exists("release/1.x", remote="origin")
"""

from monorel.git.repository import GitError, Repository

__all__ = ["GitError", "Repository"]
