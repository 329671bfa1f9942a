"""Record models for skills, projects, and employees.

All records are frozen pydantic models. A store never mutates a record in
place; the composition layer replaces an employee with an updated copy.

Assignments embed a *copy* of the referenced project or the skill's label
taken at assignment time, not a foreign key. Later edits or deletes in the
project/skill stores do not propagate to existing assignments.

An employee's ``last_update`` is stamped when it is added and again on
every assignment.
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from uuid import UUID

from pydantic import BaseModel, Field


def utc_now() -> datetime:
    return datetime.now(UTC)


# --- Root records ---


class Record(BaseModel):
    """Base for every record kept in an entity store."""

    model_config = {"frozen": True}

    id: UUID


class Skill(Record):
    label: str


class Project(Record):
    label: str
    description: str = ""


class Knowledge(BaseModel):
    """Proficiency of an employee in one skill (keyed by skill label)."""

    model_config = {"frozen": True}

    level: int = Field(ge=0)
    secret: bool = False


class ProjectAssignment(BaseModel):
    """An employee's participation in a project.

    ``project`` is a full snapshot of the project record at assignment time.
    ``end_date`` is not checked against ``start_date``.
    """

    model_config = {"frozen": True}

    id: UUID
    project: Project
    contribution: str
    start_date: date
    end_date: date | None = None


class Employee(Record):
    first_name: str
    last_name: str
    title: str = ""
    email: str = ""
    telephone: str = ""
    skills: dict[str, Knowledge] = Field(default_factory=dict)
    projects: list[ProjectAssignment] = Field(default_factory=list)
    last_update: datetime = Field(default_factory=utc_now)


# --- Drafts (record contents without an id) ---


class NewSkill(BaseModel):
    model_config = {"frozen": True}

    label: str


class NewProject(BaseModel):
    model_config = {"frozen": True}

    label: str
    description: str = ""


class NewEmployee(BaseModel):
    model_config = {"frozen": True}

    first_name: str
    last_name: str
    title: str = ""
    email: str = ""
    telephone: str = ""


# --- Composition requests and results ---


class ProjectAssignmentRequest(BaseModel):
    model_config = {"frozen": True}

    project_id: UUID
    contribution: str
    start_date: date
    end_date: date | None = None


class SkillAssignment(BaseModel):
    """Result of assigning a skill: the label copy and the stored knowledge."""

    model_config = {"frozen": True}

    label: str
    level: int
    secret: bool = False
