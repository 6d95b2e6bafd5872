"""UnitBootstrapper — creates a method-bearing unit the first time an owner appears.

A fresh unit gets a package header, the import set of its kind, and the
empty interface/struct declaration block. A companion test unit is
written once alongside it and never touched again.

Re-declaring an owner is idempotent: the declaration block is appended
only when the interface opener is not already in the unit.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cleanctl.domain.errors import ScaffoldError
from cleanctl.domain.layers import LayerKind, layer_spec
from cleanctl.domain.locator import interface_opener
from cleanctl.domain.names import capitalize
from cleanctl.domain.splicer import already_has
from cleanctl.services._helpers import append_block, owner_values
from cleanctl.services.result import StepOutcome, StepStatus

if TYPE_CHECKING:
    from cleanctl.infrastructure.project import Project

logger = logging.getLogger(__name__)


class UnitBootstrapper:
    """Bootstraps one (kind, owner) unit. Used by ScaffoldService."""

    def __init__(self, project: Project) -> None:
        self._project = project

    def bootstrap(self, kind: LayerKind, owner: str) -> StepOutcome:
        """Create or complete the unit for (*kind*, *owner*).

        Storage and rendering failures are reported on the returned
        outcome; they never propagate to the caller.
        """
        spec = layer_spec(kind)
        if not spec.method_bearing:
            msg = f"{kind} units hold models only and are never bootstrapped"
            raise ValueError(msg)

        project = self._project
        path = project.unit_path(kind, owner)
        rel = project.relative(path)
        try:
            declaration = self._render_declaration(kind, owner)
            if not project.exists(path):
                content = f"{self._render_header(kind)}\n\n{declaration}\n"
                project.write(path, content)
                status = StepStatus.CREATED
            else:
                text = project.read(path)
                if already_has(text, interface_opener(capitalize(owner))):
                    status = StepStatus.UNCHANGED
                else:
                    project.write(path, append_block(text, declaration))
                    status = StepStatus.EXTENDED
            companion = self._ensure_companion(kind, owner)
        except ScaffoldError as exc:
            logger.warning("Bootstrap of %s failed: %s", rel, exc)
            return StepOutcome(
                kind=kind.value,
                owner=owner,
                status=StepStatus.FAILED,
                path=rel,
                code=exc.code,
                message=str(exc),
            )

        return StepOutcome(
            kind=kind.value,
            owner=owner,
            status=status,
            path=rel,
            companion=companion,
        )

    def _render_header(self, kind: LayerKind) -> str:
        spec = layer_spec(kind)
        context = self._project.context
        return self._project.render(
            "header.go.j2",
            package=spec.package,
            imports=[context.import_path(dep) for dep in spec.imports],
        )

    def _render_declaration(self, kind: LayerKind, owner: str) -> str:
        return self._project.render(
            "declaration.go.j2",
            label=layer_spec(kind).label,
            **owner_values(owner),
        )

    def _ensure_companion(self, kind: LayerKind, owner: str) -> str | None:
        """Write the empty companion test unit if missing; return its path when created."""
        path = self._project.companion_path(kind, owner)
        if self._project.exists(path):
            return None
        self._project.write(path, self._project.render("test_unit.go.j2") + "\n")
        return self._project.relative(path)
