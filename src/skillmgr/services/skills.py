"""SkillService — add, get, find, and delete skills."""

from __future__ import annotations

from typing import TYPE_CHECKING

from skillmgr.domain.models import NewSkill
from skillmgr.services.base import BaseService

if TYPE_CHECKING:
    from uuid import UUID

    from skillmgr.services.result import ServiceResult


class SkillService(BaseService):
    """Skill store operations. Skills are looked up by id, never by label."""

    def add(self, label: str) -> ServiceResult:
        skill = self._workspace.skills.add(NewSkill(label=label))
        return self._success("add_skill", skill, mutated=True)

    def get(self, skill_id: UUID | str) -> ServiceResult:
        return self._get("get_skill", self._workspace.skills, skill_id)

    def find(self, page: int | None = None, size: int | None = None) -> ServiceResult:
        """One page of skills; *size* defaults to ``storage.default_page_size``."""
        return self._find(
            "find_skills",
            self._workspace.skills,
            page,
            size,
            default_size=self._workspace.default_page_size,
        )

    def delete(self, skill_id: UUID | str) -> ServiceResult:
        """Delete a skill. Employees keep the knowledge entries that copied its label."""
        return self._delete("delete_skill", self._workspace.skills, skill_id)
