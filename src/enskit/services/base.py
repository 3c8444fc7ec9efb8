"""BaseService — foundation for enskit services.

Every service receives the frozen :class:`EnsSettings` at construction and
derives its policy objects from it. Services hold no other state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from enskit.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from enskit.config.settings import EnsSettings


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class NameService(BaseService):
            def namehash(self, name: str) -> ServiceResult:
                ...
                return self._ok("namehash", {"node": node})
    """

    def __init__(self, settings: EnsSettings) -> None:
        self._settings = settings

    @staticmethod
    def _ok(
        op: str,
        data: dict[str, Any],
        *,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings or [])

    @staticmethod
    def _fail(
        op: str,
        code: str,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )
