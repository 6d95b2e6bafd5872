"""Jinja2 template loading for generated Go text, with per-project overrides."""

from __future__ import annotations

from pathlib import Path

from jinja2 import (
    BaseLoader,
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
)

OVERRIDE_DIR = Path(".clean") / "templates"


def build_template_environment(group: str, *, base_dir: Path | None = None) -> Environment:
    """Build a Jinja2 environment with project overrides before packaged defaults.

    Overrides are loaded from ``.clean/templates/`` inside the project base
    directory, either namespaced (``.clean/templates/units/``) or flat.
    Rendered fragments drop the template file's final newline; callers
    join fragments with explicit separators.
    """
    loaders: list[BaseLoader] = []
    if base_dir is not None:
        template_root = base_dir / OVERRIDE_DIR
        loaders.append(FileSystemLoader([str(template_root / group), str(template_root)]))

    loaders.append(PackageLoader("cleanctl", f"templates/{group}"))
    return Environment(
        loader=ChoiceLoader(loaders),
        keep_trailing_newline=False,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
