"""BaseService — abstract foundation for all skillmgr services.

Every service receives a :class:`Workspace` at construction time and turns
core exceptions into :class:`ServiceResult` failures, so adapters never
have to catch domain errors themselves.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from skillmgr.domain.errors import SkillManagerError
from skillmgr.domain.ids import parse_id
from skillmgr.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from uuid import UUID

    from pydantic import BaseModel

    from skillmgr.infrastructure.store import EntityStore
    from skillmgr.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class SkillService(BaseService):
            def add(self, label: str) -> ServiceResult:
                try:
                    skill = self._workspace.skills.add(NewSkill(label=label))
                except SkillManagerError as exc:
                    return self._failure("add_skill", exc)
                return self._success("add_skill", skill, mutated=True)
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    @staticmethod
    def _dump(value: BaseModel | list[BaseModel] | None) -> Any:
        if value is None:
            return None
        if isinstance(value, list):
            return [item.model_dump(mode="json") for item in value]
        return value.model_dump(mode="json")

    def _success(self, op: str, data: Any, *, mutated: bool = False) -> ServiceResult:
        if not isinstance(data, (str, dict)):
            data = self._dump(data)
        return ServiceResult(ok=True, op=op, data=data, mutated=mutated)

    @staticmethod
    def _failure(op: str, exc: SkillManagerError) -> ServiceResult:
        logger.debug("%s failed: %s (%s)", op, exc.message, exc.code)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=exc.message, detail=exc.detail),
        )

    # ------------------------------------------------------------------
    # Generic store operations shared by the entity services
    # ------------------------------------------------------------------

    def _get(self, op: str, store: EntityStore, raw_id: UUID | str) -> ServiceResult:
        """Fetch one record; an absent id is a successful ``None`` result."""
        try:
            record_id = parse_id(raw_id, f"{store.name} id")
        except SkillManagerError as exc:
            return self._failure(op, exc)
        return self._success(op, store.get(record_id))

    def _find(
        self,
        op: str,
        store: EntityStore,
        page: int | None,
        size: int | None,
        *,
        default_size: int | None,
    ) -> ServiceResult:
        try:
            records = store.find(page or 0, default_size if size is None else size)
        except SkillManagerError as exc:
            return self._failure(op, exc)
        return self._success(op, records)

    def _delete(self, op: str, store: EntityStore, raw_id: UUID | str) -> ServiceResult:
        """Delete by id. Idempotent: a missing id still succeeds."""
        try:
            record_id = parse_id(raw_id, f"{store.name} id")
        except SkillManagerError as exc:
            return self._failure(op, exc)
        store.delete(record_id)
        return self._success(op, f"Deleted {store.name} {record_id}", mutated=True)
