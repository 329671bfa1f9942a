"""ProjectService — add, get, find, and delete projects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from skillmgr.domain.models import NewProject
from skillmgr.services.base import BaseService

if TYPE_CHECKING:
    from uuid import UUID

    from skillmgr.services.result import ServiceResult


class ProjectService(BaseService):
    def add(self, label: str, description: str = "") -> ServiceResult:
        project = self._workspace.projects.add(NewProject(label=label, description=description))
        return self._success("add_project", project, mutated=True)

    def get(self, project_id: UUID | str) -> ServiceResult:
        return self._get("get_project", self._workspace.projects, project_id)

    def find(self, page: int | None = None, size: int | None = None) -> ServiceResult:
        """Projects in insertion order; all of them unless *size* is given."""
        return self._find("find_projects", self._workspace.projects, page, size, default_size=None)

    def delete(self, project_id: UUID | str) -> ServiceResult:
        """Delete a project. Existing assignments keep their project snapshot."""
        return self._delete("delete_project", self._workspace.projects, project_id)
