"""InitService — project bootstrapping and the configuration record.

``init`` creates the fixed directory tree and points the configuration
record at the project; ``set folder`` repoints an existing record.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cleanctl.config.discovery import save_config
from cleanctl.config.models import ProjectConfig
from cleanctl.domain.context import UNIT_ROOT_DIR, derive_import_prefix
from cleanctl.domain.errors import ConfigurationNotFound, ScaffoldError
from cleanctl.infrastructure.filesystem import create_project_tree
from cleanctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class InitService:
    """Handles project initialization (static, no Project needed)."""

    @staticmethod
    def init_project(path: Path, *, config_path: Path) -> ServiceResult:
        """Create the project tree under *path* and record it as the base directory."""
        op = "init_project"
        base_dir = path.resolve()

        if (base_dir / UNIT_ROOT_DIR).exists():
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="PROJECT_EXISTS",
                    message=f"{base_dir / UNIT_ROOT_DIR} already exists",
                    detail={"path": str(base_dir)},
                ),
            )

        config = ProjectConfig(directory=str(base_dir))
        warnings = _prefix_warnings(config)
        try:
            save_config(config_path, config)
            created = create_project_tree(base_dir)
        except ScaffoldError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code=exc.code, message=str(exc)),
            )

        logger.info("Initialised project at %s", base_dir)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(base_dir),
                "config_path": str(config_path),
                "directories_created": created,
            },
            warnings=warnings,
        )

    @staticmethod
    def set_folder(path: Path, *, config_path: Path) -> ServiceResult:
        """Point the existing configuration record at *path*."""
        op = "set_folder"
        if not config_path.is_file():
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="NO_CONFIG",
                    message=(
                        f"No configuration record at {config_path}. "
                        "Use 'cleanctl init' to initialise a project instead"
                    ),
                ),
            )

        config = ProjectConfig(directory=str(path.resolve()))
        try:
            save_config(config_path, config)
        except ScaffoldError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code=exc.code, message=str(exc)),
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"directory": config.directory, "config_path": str(config_path)},
            warnings=_prefix_warnings(config),
        )


def _prefix_warnings(config: ProjectConfig) -> list[str]:
    """Warn when generated imports could not be resolved for this directory."""
    try:
        derive_import_prefix(config.directory)
    except ConfigurationNotFound as exc:
        return [str(exc)]
    return []
