from __future__ import annotations

import ast
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parents[2]
ALLOWLIST = {"platform/process.py"}


def _iter_source_files() -> list[Path]:
    files: list[Path] = []
    for path in sorted(PACKAGE_ROOT.rglob("*.py")):
        rel = path.relative_to(PACKAGE_ROOT)
        if rel.parts[0] == "test" or "__pycache__" in rel.parts:
            continue
        files.append(path)
    return files


def _imports_subprocess(tree: ast.AST) -> list[int]:
    lines: list[int] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            if any(alias.name == "subprocess" for alias in node.names):
                lines.append(node.lineno)
        elif isinstance(node, ast.ImportFrom) and node.module == "subprocess":
            lines.append(node.lineno)
    return lines


def test_subprocess_is_confined_to_platform_process() -> None:
    offenders: list[str] = []
    for path in _iter_source_files():
        rel = path.relative_to(PACKAGE_ROOT).as_posix()
        if rel in ALLOWLIST:
            continue
        tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
        for line in _imports_subprocess(tree):
            offenders.append(f"{rel}:{line}: subprocess imported outside platform/process.py")

    assert not offenders, "Subprocess policy violations:\n" + "\n".join(offenders)


def test_release_layer_does_not_read_environment() -> None:
    offenders: list[str] = []
    for path in sorted((PACKAGE_ROOT / "release").glob("*.py")):
        source = path.read_text(encoding="utf-8")
        if "os.environ" in source or "os.getenv" in source:
            offenders.append(path.name)

    assert not offenders, f"release modules must take env as input: {offenders}"
