"""EmployeeService — employee CRUD plus project and skill assignment.

Assignment requests arrive from adapters as raw strings; they are parsed
here (ids, dates, level) and rejected with VALIDATION_FAILED before the
composition layer touches any store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from skillmgr.domain.errors import SkillManagerError
from skillmgr.domain.ids import parse_date, parse_id, parse_level, parse_optional_date
from skillmgr.domain.models import NewEmployee, ProjectAssignmentRequest
from skillmgr.services.base import BaseService
from skillmgr.services.composition import assign_project_to_employee, assign_skill_to_employee

if TYPE_CHECKING:
    from datetime import date
    from uuid import UUID

    from skillmgr.services.result import ServiceResult


class EmployeeService(BaseService):
    """Employee store operations and the two cross-store assignments."""

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def add(
        self,
        first_name: str,
        last_name: str,
        *,
        title: str = "",
        email: str = "",
        telephone: str = "",
    ) -> ServiceResult:
        """Add an employee with no skills and no projects."""
        draft = NewEmployee(
            first_name=first_name,
            last_name=last_name,
            title=title,
            email=email,
            telephone=telephone,
        )
        employee = self._workspace.employees.add(draft)
        return self._success("add_employee", employee, mutated=True)

    def get(self, employee_id: UUID | str) -> ServiceResult:
        return self._get("get_employee", self._workspace.employees, employee_id)

    def find(self, page: int | None = None, size: int | None = None) -> ServiceResult:
        return self._find(
            "find_employees", self._workspace.employees, page, size, default_size=None
        )

    def delete(self, employee_id: UUID | str) -> ServiceResult:
        return self._delete("delete_employee", self._workspace.employees, employee_id)

    # ------------------------------------------------------------------
    # Assignments
    # ------------------------------------------------------------------

    def assign_project(
        self,
        employee_id: UUID | str,
        project_id: UUID | str,
        contribution: str,
        start_date: date | str,
        end_date: date | str | None = None,
    ) -> ServiceResult:
        """Attach a snapshot of a project to an employee.

        Fails with EMPLOYEE_NOT_FOUND or PROJECT_NOT_FOUND, leaving every
        store unchanged.
        """
        op = "assign_project"
        try:
            request = ProjectAssignmentRequest(
                project_id=parse_id(project_id, "project id"),
                contribution=contribution,
                start_date=parse_date(start_date, "start date"),
                end_date=parse_optional_date(end_date, "end date"),
            )
            assignment = assign_project_to_employee(
                self._workspace.employees,
                self._workspace.projects,
                parse_id(employee_id, "employee id"),
                request,
            )
        except SkillManagerError as exc:
            return self._failure(op, exc)
        return self._success(op, assignment, mutated=True)

    def assign_skill(
        self,
        employee_id: UUID | str,
        skill_id: UUID | str,
        level: int | str,
        *,
        secret: bool = False,
    ) -> ServiceResult:
        """Record an employee's level in a skill, keyed by the skill's label.

        Fails with EMPLOYEE_NOT_FOUND or SKILL_NOT_FOUND, leaving every
        store unchanged.
        """
        op = "assign_skill"
        try:
            assignment = assign_skill_to_employee(
                self._workspace.employees,
                self._workspace.skills,
                parse_id(employee_id, "employee id"),
                parse_id(skill_id, "skill id"),
                parse_level(level),
                secret=secret,
            )
        except SkillManagerError as exc:
            return self._failure(op, exc)
        return self._success(op, assignment, mutated=True)
