"""ScaffoldService — declares interactors and attaches use-cases.

Pipeline per operation: VALIDATE NAMES → RESOLVE CONTEXT → STEP PER UNIT → REPORT

Each (kind, owner) step is independent. A failed step aborts only itself;
steps already written for other kinds stay written (no rollback), and the
result lists every step's outcome.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from cleanctl.domain.errors import ConfigurationNotFound, ScaffoldError, StructureNotFound
from cleanctl.domain.layers import METHOD_BEARING_KINDS, MODEL_KINDS, LayerKind, layer_spec
from cleanctl.domain.locator import struct_declaration
from cleanctl.domain.names import capitalize, strip_unit_extension, validate_identifier
from cleanctl.domain.splicer import already_has, extend_unit, signature_token
from cleanctl.services._helpers import append_block, owner_values
from cleanctl.services.base import BaseService
from cleanctl.services.bootstrap import UnitBootstrapper
from cleanctl.services.result import (
    ServiceError,
    ServiceResult,
    StepOutcome,
    StepStatus,
)

if TYPE_CHECKING:
    from pathlib import Path

log = structlog.get_logger(__name__)


class ScaffoldService(BaseService):
    """Drives bootstrap, guard, locate and splice across the eight unit kinds."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def declare_interactor(self, owner: str) -> ServiceResult:
        """Bootstrap the five method-bearing units of *owner*.

        Each kind is bootstrapped independently, so partial prior state
        across kinds is completed rather than rejected.
        """
        op = "declare_interactor"
        try:
            owner = _normalize(owner)
        except ValueError as exc:
            return self._error(op, exc, code="INVALID_NAME")
        try:
            self._project.open()
        except ConfigurationNotFound as exc:
            return self._error(op, exc)

        bootstrapper = UnitBootstrapper(self._project)
        steps = [bootstrapper.bootstrap(kind, owner) for kind in METHOD_BEARING_KINDS]
        return _finish(op, steps, {"owner": capitalize(owner)})

    def attach_usecase(self, use_case: str, owner: str) -> ServiceResult:
        """Attach *use_case* to every unit of *owner*.

        Method-bearing units gain the use-case's signatures and stub
        methods unless the signature token is already present. Model
        units gain the use-case's structs, but only once the owner's
        presenter unit exists; otherwise all three model kinds are skipped.
        """
        op = "attach_usecase"
        try:
            use_case = _normalize(use_case)
            owner = _normalize(owner)
        except ValueError as exc:
            return self._error(op, exc, code="INVALID_NAME")
        try:
            self._project.open()
        except ConfigurationNotFound as exc:
            return self._error(op, exc)

        name = capitalize(use_case)
        steps = [self._extend_layer(kind, name, owner) for kind in METHOD_BEARING_KINDS]

        warnings: list[str] = []
        presenter = self._project.unit_path(LayerKind.BOUNDARY_OUT, owner)
        if self._project.exists(presenter):
            steps.extend(self._add_models(kind, name, owner) for kind in MODEL_KINDS)
        else:
            reason = f"presenter unit {self._project.relative(presenter)} does not exist"
            warnings.append(f"Models for {name} skipped: {reason}")
            steps.extend(
                StepOutcome(
                    kind=kind.value,
                    owner=owner,
                    status=StepStatus.SKIPPED,
                    path=self._project.relative(self._project.unit_path(kind, owner)),
                    message=reason,
                )
                for kind in MODEL_KINDS
            )

        return _finish(
            op,
            steps,
            {"owner": capitalize(owner), "usecase": name},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _extend_layer(self, kind: LayerKind, name: str, owner: str) -> StepOutcome:
        """Add *name*'s signatures and methods to one method-bearing unit."""
        path = self._project.unit_path(kind, owner)
        try:
            if not self._project.exists(path):
                msg = (
                    f"Cannot find the {kind} unit {self._project.relative(path)}; "
                    f"declare the interactor {capitalize(owner)} first"
                )
                raise StructureNotFound(msg)
            text = self._project.read(path)
            if already_has(text, signature_token(kind, name)):
                return self._outcome(kind, owner, path, StepStatus.UNCHANGED)

            values = {"name": name, **owner_values(owner)}
            signatures = self._project.render(f"{kind}/signature.go.j2", **values) + "\n"
            methods = "\n\n" + self._project.render(f"{kind}/method.go.j2", **values)
            self._project.write(path, extend_unit(text, owner, signatures, methods))
        except ScaffoldError as exc:
            return self._failure(kind, owner, path, exc)
        return self._outcome(kind, owner, path, StepStatus.EXTENDED)

    def _add_models(self, kind: LayerKind, name: str, owner: str) -> StepOutcome:
        """Create or extend one model unit with *name*'s structs."""
        path = self._project.unit_path(kind, owner)
        try:
            model = self._project.render(f"{kind}/model.go.j2", name=name)
            if not self._project.exists(path):
                header = self._project.render("model_header.go.j2", package=layer_spec(kind).package)
                self._project.write(path, f"{header}\n\n{model}\n")
                return self._outcome(kind, owner, path, StepStatus.CREATED)

            text = self._project.read(path)
            if already_has(text, struct_declaration(name)):
                return self._outcome(kind, owner, path, StepStatus.UNCHANGED)
            self._project.write(path, append_block(text, model))
        except ScaffoldError as exc:
            return self._failure(kind, owner, path, exc)
        return self._outcome(kind, owner, path, StepStatus.EXTENDED)

    def _outcome(self, kind: LayerKind, owner: str, path: Path, status: StepStatus) -> StepOutcome:
        log.debug("scaffold.step", kind=kind.value, owner=owner, status=status.value)
        return StepOutcome(
            kind=kind.value,
            owner=owner,
            status=status,
            path=self._project.relative(path),
        )

    def _failure(self, kind: LayerKind, owner: str, path: Path, exc: ScaffoldError) -> StepOutcome:
        log.warning("scaffold.step_failed", kind=kind.value, owner=owner, code=exc.code)
        return StepOutcome(
            kind=kind.value,
            owner=owner,
            status=StepStatus.FAILED,
            path=self._project.relative(path),
            code=exc.code,
            message=str(exc),
        )


def _normalize(name: str) -> str:
    return validate_identifier(strip_unit_extension(name.strip()))


def _finish(
    op: str,
    steps: list[StepOutcome],
    data: dict[str, Any],
    *,
    warnings: list[str] | None = None,
) -> ServiceResult:
    """Fold step outcomes into a ServiceResult without hiding any of them."""
    payload = {**data, "steps": [step.model_dump(mode="json") for step in steps]}
    failed = [step for step in steps if step.failed]
    if not failed:
        return ServiceResult(ok=True, op=op, data=payload, warnings=warnings or [])

    codes = {step.code for step in failed}
    code = codes.pop() if len(codes) == 1 else "PARTIAL_FAILURE"
    return ServiceResult(
        ok=False,
        op=op,
        data=payload,
        warnings=warnings or [],
        error=ServiceError(
            code=code or "SCAFFOLD_ERROR",
            message=f"{len(failed)} of {len(steps)} steps failed: {failed[0].message}",
            detail={
                "failed": [
                    {"kind": step.kind, "code": step.code, "message": step.message}
                    for step in failed
                ]
            },
        ),
    )
