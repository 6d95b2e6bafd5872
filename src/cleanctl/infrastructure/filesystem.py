"""Filesystem operations for generated units.

INVARIANT: Files are truth. Every operation re-reads a unit, mutates the
text in memory, and rewrites it; nothing is cached across invocations.
I/O failures surface as :class:`StorageUnavailable`.
"""

from __future__ import annotations

from pathlib import Path

from cleanctl.domain.errors import StorageUnavailable
from cleanctl.domain.layers import LayerKind, layer_spec
from cleanctl.domain.names import UNIT_EXTENSION, decapitalize

TEST_DIRNAME = "test"
TEST_SUFFIX = "_test"

# Project tree created by ``cleanctl init``, relative to the base directory.
PROJECT_DIRECTORIES: tuple[str, ...] = (
    "clean",
    "clean/entity",
    "clean/ifadapter",
    "clean/ifadapter/controller",
    "clean/ifadapter/controller/test",
    "clean/ifadapter/gateway",
    "clean/ifadapter/gateway/test",
    "clean/ifadapter/presenter",
    "clean/ifadapter/presenter/test",
    "clean/ifadapter/view",
    "clean/ifadapter/view/test",
    "clean/ifadapter/view/viewmodel",
    "clean/usecase",
    "clean/usecase/interactor",
    "clean/usecase/interactor/test",
    "clean/usecase/reqmodel",
    "clean/usecase/reqmodel/validator",
    "clean/usecase/reqmodel/validator/test",
    "clean/usecase/respmodel",
    "lib",
    "cmd",
)


# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------


def unit_path(unit_root: Path, kind: LayerKind, owner: str) -> Path:
    """Resolve ``{root}/{rel}/{owner}.go`` with the owner decapitalized."""
    return unit_root / layer_spec(kind).rel_path / f"{decapitalize(owner)}{UNIT_EXTENSION}"


def companion_path(unit_root: Path, kind: LayerKind, owner: str) -> Path:
    """Resolve the companion ``{root}/{rel}/test/{owner}_test.go``."""
    name = f"{decapitalize(owner)}{TEST_SUFFIX}{UNIT_EXTENSION}"
    return unit_root / layer_spec(kind).rel_path / TEST_DIRNAME / name


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def unit_exists(path: Path) -> bool:
    return path.exists()


def read_unit(path: Path) -> str:
    """Read a unit's raw text."""
    try:
        with path.open(encoding="utf-8", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read {path}: {exc}"
        raise StorageUnavailable(msg) from exc


def write_unit(path: Path, content: str) -> None:
    """Write a unit's full text.

    Creates parent directories if they don't exist. Newlines are written
    as-is so offsets computed on the text stay valid on disk.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(content)
    except OSError as exc:
        msg = f"Cannot write {path}: {exc}"
        raise StorageUnavailable(msg) from exc


def create_project_tree(base_dir: Path) -> list[str]:
    """Create :data:`PROJECT_DIRECTORIES` under *base_dir*.

    Returns the relative directories that were newly created.
    """
    created: list[str] = []
    for rel in PROJECT_DIRECTORIES:
        target = base_dir / rel
        if target.is_dir():
            continue
        try:
            target.mkdir(parents=True)
        except OSError as exc:
            msg = f"Cannot create the folder {target}: {exc}"
            raise StorageUnavailable(msg) from exc
        created.append(rel)
    return created
