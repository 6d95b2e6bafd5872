"""Project — the single dependency injected into every service.

Owns the resolved :class:`ProjectContext`, unit path resolution, unit I/O
and template rendering. The context is derived lazily so that commands
which never touch units (``--help``, ``init``) never require a valid
configuration record.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from jinja2 import TemplateError

from cleanctl.domain.context import ProjectContext
from cleanctl.domain.errors import TemplateUnusable
from cleanctl.infrastructure.filesystem import (
    companion_path,
    read_unit,
    unit_exists,
    unit_path,
    write_unit,
)
from cleanctl.infrastructure.templates import build_template_environment

if TYPE_CHECKING:
    from pathlib import Path

    from jinja2 import Environment

    from cleanctl.config.settings import CleanSettings
    from cleanctl.domain.layers import LayerKind

logger = logging.getLogger(__name__)

TEMPLATE_GROUP = "units"


class Project:
    """Access to one configured project's generated units."""

    def __init__(self, settings: CleanSettings) -> None:
        self.settings = settings
        self._context: ProjectContext | None = None
        self._templates: Environment | None = None

    def open(self) -> ProjectContext:
        """Resolve the project context.

        Raises:
            ConfigurationNotFound: no base directory is configured, or it
                has no source-root segment to derive imports from.
        """
        if self._context is None:
            self._context = ProjectContext.from_base_dir(self.settings.base_dir)
            logger.debug(
                "Project at %s (import prefix %r)",
                self._context.base_dir,
                self._context.import_prefix,
            )
        return self._context

    @property
    def context(self) -> ProjectContext:
        return self.open()

    @property
    def templates(self) -> Environment:
        if self._templates is None:
            self._templates = build_template_environment(
                TEMPLATE_GROUP, base_dir=self.context.base_dir
            )
        return self._templates

    # ------------------------------------------------------------------
    # Units
    # ------------------------------------------------------------------

    def unit_path(self, kind: LayerKind, owner: str) -> Path:
        return unit_path(self.context.unit_root, kind, owner)

    def companion_path(self, kind: LayerKind, owner: str) -> Path:
        return companion_path(self.context.unit_root, kind, owner)

    def exists(self, path: Path) -> bool:
        return unit_exists(path)

    def read(self, path: Path) -> str:
        return read_unit(path)

    def write(self, path: Path, content: str) -> None:
        write_unit(path, content)
        logger.debug("Wrote %s (%d chars)", path, len(content))

    def relative(self, path: Path) -> str:
        """Path relative to the base directory, for reporting."""
        try:
            return path.relative_to(self.context.base_dir).as_posix()
        except ValueError:
            return str(path)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, template: str, **values: Any) -> str:
        """Render a unit template with *values* plus the import prefix.

        Raises:
            TemplateUnusable: the template is missing, does not parse, or
                uses a value that was not supplied.
        """
        try:
            return self.templates.get_template(template).render(
                import_prefix=self.context.import_prefix, **values
            )
        except (TemplateError, UnicodeDecodeError) as exc:
            msg = f"Cannot render template {template}: {exc}"
            raise TemplateUnusable(msg) from exc
