"""Project context — the base directory and its derived Go import prefix.

The prefix is what follows the ``src`` segment of the base directory,
e.g. ``/home/jo/go/src/shop/`` yields ``shop/`` and every generated import
reads ``shop/clean/...``. The context is immutable and passed explicitly
to every call site that renders imports.
"""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel

from cleanctl.domain.errors import ConfigurationNotFound
from cleanctl.domain.layers import LayerKind, layer_spec

SOURCE_ROOT_SEGMENT = "src"
UNIT_ROOT_DIR = "clean"

_SEPARATORS = re.compile(r"[\\/]")


def derive_import_prefix(base_dir: str | Path) -> str:
    """Return the import prefix for *base_dir*.

    Splits the path into segments and takes everything after the last
    segment equal to ``src``, joined by ``/`` with a trailing ``/``.

    Raises:
        ConfigurationNotFound: the path has no ``src`` segment.

    Examples:
        >>> derive_import_prefix("/users/john/go/src/myproject/")
        'myproject/'
        >>> derive_import_prefix("/go/src/github.com/jo/shop")
        'github.com/jo/shop/'
        >>> derive_import_prefix("/go/src/")
        ''
    """
    segments = [s for s in _SEPARATORS.split(str(base_dir)) if s]
    for index in range(len(segments) - 1, -1, -1):
        if segments[index] == SOURCE_ROOT_SEGMENT:
            rest = segments[index + 1 :]
            return "".join(f"{segment}/" for segment in rest)
    msg = (
        f"No '{SOURCE_ROOT_SEGMENT}' directory in project path {str(base_dir)!r}; "
        "run 'cleanctl init' or 'cleanctl set folder' inside your GOPATH"
    )
    raise ConfigurationNotFound(msg)


class ProjectContext(BaseModel):
    """Immutable per-invocation view of the configured project."""

    model_config = {"frozen": True}

    base_dir: Path
    import_prefix: str

    @classmethod
    def from_base_dir(cls, base_dir: str | Path | None) -> ProjectContext:
        """Build a context, deriving the import prefix from *base_dir*."""
        if base_dir is None or str(base_dir) == "":
            msg = "Project directory not configured; run 'cleanctl init' first"
            raise ConfigurationNotFound(msg)
        return cls(base_dir=Path(base_dir), import_prefix=derive_import_prefix(base_dir))

    @property
    def unit_root(self) -> Path:
        return self.base_dir / UNIT_ROOT_DIR

    def import_path(self, kind: LayerKind) -> str:
        """Go import path of the package holding *kind* units."""
        rel = layer_spec(kind).rel_path.rstrip("/")
        return f"{self.import_prefix}{UNIT_ROOT_DIR}/{rel}"
