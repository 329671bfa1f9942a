"""Composition layer — validated joins across two stores.

Each operation takes the owning Employee store and the referenced store as
explicit arguments, looks the reference up, and attaches a denormalized
copy to the employee. There is no foreign key: once created, an assignment
never follows later edits or deletes in the referenced store.

INVARIANT: Lookup before mutate. Every failure (not found, invalid level)
is raised before any store changes.

INVARIANT: Locks are taken in one global order, Employee store first, then
the referenced store, regardless of argument position.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from skillmgr.domain.errors import EmployeeNotFound, ProjectNotFound, SkillNotFound, ValidationError
from skillmgr.domain.ids import new_id
from skillmgr.domain.models import Knowledge, ProjectAssignment, SkillAssignment, utc_now

if TYPE_CHECKING:
    from uuid import UUID

    from skillmgr.domain.models import Employee, Project, ProjectAssignmentRequest, Skill
    from skillmgr.infrastructure.store import Repository, SupportsGet

logger = logging.getLogger(__name__)


def assign_project_to_employee(
    employees: Repository[Employee],
    projects: SupportsGet[Project],
    employee_id: UUID,
    request: ProjectAssignmentRequest,
) -> ProjectAssignment:
    """Append a project assignment to an employee and return it.

    Raises EmployeeNotFound or ProjectNotFound without mutating anything.
    Assignments are append-only: assigning the same project twice yields
    two entries.
    """
    with employees.locked(), projects.locked():
        employee = employees.get(employee_id)
        if employee is None:
            raise EmployeeNotFound(employee_id)
        project = projects.get(request.project_id)
        if project is None:
            raise ProjectNotFound(request.project_id)

        assignment = ProjectAssignment(
            id=new_id(),
            project=project.model_copy(deep=True),
            contribution=request.contribution,
            start_date=request.start_date,
            end_date=request.end_date,
        )
        projects_after = [*employee.projects, assignment]
        employees.replace(
            employee.model_copy(update={"projects": projects_after, "last_update": utc_now()})
        )

    logger.debug("Assigned project %s to employee %s as %s", project.id, employee_id, assignment.id)
    return assignment


def assign_skill_to_employee(
    employees: Repository[Employee],
    skills: SupportsGet[Skill],
    employee_id: UUID,
    skill_id: UUID,
    level: int,
    *,
    secret: bool = False,
) -> SkillAssignment:
    """Record an employee's knowledge of a skill, keyed by the skill's label.

    Re-assigning a skill with the same label overwrites the earlier entry,
    even when it comes from a different skill record. Raises
    ValidationError, EmployeeNotFound, or SkillNotFound without mutating.
    """
    if level < 0:
        msg = f"Invalid skill level: {level} (must be >= 0)"
        raise ValidationError(msg, value=level)

    with employees.locked(), skills.locked():
        employee = employees.get(employee_id)
        if employee is None:
            raise EmployeeNotFound(employee_id)
        skill = skills.get(skill_id)
        if skill is None:
            raise SkillNotFound(skill_id)

        knowledge = Knowledge(level=level, secret=secret)
        skills_after = {**employee.skills, skill.label: knowledge}
        employees.replace(
            employee.model_copy(update={"skills": skills_after, "last_update": utc_now()})
        )

    logger.debug("Assigned skill %r (level %d) to employee %s", skill.label, level, employee_id)
    return SkillAssignment(label=skill.label, level=level, secret=secret)
