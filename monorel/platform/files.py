"""Filesystem access port.

The planner only needs to resolve, check and read one file. Keeping those
three operations behind a protocol lets tests supply an in-memory tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Protocol

__all__ = ["FileAccess", "LocalFiles", "MemoryFiles"]


class FileAccess(Protocol):
    def resolve(self, *parts: str) -> Path:
        """Resolve path parts relative to the working directory."""
        ...

    def exists(self, path: Path) -> bool: ...

    def read_text(self, path: Path) -> str:
        """Read a UTF-8 file. May raise OSError or UnicodeDecodeError."""
        ...


class LocalFiles:
    """FileAccess over the local disk, rooted at ``root``."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def resolve(self, *parts: str) -> Path:
        return self.root.joinpath(*parts).resolve()

    def exists(self, path: Path) -> bool:
        return path.exists()

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")


@dataclass
class MemoryFiles:
    """In-memory FileAccess for tests. Keys are paths relative to the root."""

    contents: dict[str, str] = field(default_factory=lambda: {})
    root: Path = Path("/repo")

    def resolve(self, *parts: str) -> Path:
        return self.root.joinpath(*parts)

    def exists(self, path: Path) -> bool:
        return self._key(path) in self.contents

    def read_text(self, path: Path) -> str:
        key = self._key(path)
        if key not in self.contents:
            raise FileNotFoundError(str(path))
        return self.contents[key]

    def _key(self, path: Path) -> str:
        return str(PurePosixPath(path.relative_to(self.root)))
