"""BaseService — foundation for all cleanctl services.

Every service receives a :class:`Project` at construction time. The
Project resolves unit paths, performs unit I/O and renders templates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cleanctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from cleanctl.domain.errors import ScaffoldError
    from cleanctl.infrastructure.project import Project


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ScaffoldService(BaseService):
            def declare_interactor(self, owner: str) -> ServiceResult:
                context = self._project.context
                ...
    """

    def __init__(self, project: Project) -> None:
        self._project = project

    @staticmethod
    def _error(op: str, exc: ScaffoldError | ValueError, *, code: str | None = None) -> ServiceResult:
        """Failed ServiceResult for an operation aborted before any step ran."""
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code or getattr(exc, "code", "INVALID"), message=str(exc)),
        )
