"""Return types shared by every service function.

Services never raise for expected failures; they hand back a ServiceResult.
Scaffolding operations touch several units independently; each
(kind, owner) step reports its own StepOutcome and a failed step never
rolls back the others.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class StepStatus(StrEnum):
    """What one (kind, owner) step did to its unit."""

    CREATED = "created"
    EXTENDED = "extended"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"
    FAILED = "failed"


class StepOutcome(BaseModel):
    """Result of one step against one generated unit."""

    model_config = {"frozen": True}

    kind: str
    owner: str
    status: StepStatus
    path: str = ""
    code: str | None = None
    message: str = ""
    companion: str | None = None

    @property
    def failed(self) -> bool:
        return self.status is StepStatus.FAILED


class ServiceError(BaseModel):
    """Why an operation failed: a stable code plus a readable message."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service call.

    ``data`` is filled on failure too, so the steps that did succeed are
    still reported. ``error`` is set exactly when ``ok`` is False;
    ``warnings`` collects problems that did not stop the operation.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
