"""Error taxonomy raised by the core.

Every error carries a stable ``code`` that the service layer copies into
:class:`~skillmgr.services.result.ServiceError`, so adapters can render a
precise message without matching on exception types.

INVARIANT: The core never recovers from these errors internally.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID


class SkillManagerError(Exception):
    """Base class for every error the core raises."""

    code = "ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class NotFoundError(SkillManagerError):
    """A referenced record is absent from its store."""

    code = "NOT_FOUND"
    entity = "Record"

    def __init__(self, record_id: UUID | str) -> None:
        super().__init__(f"{self.entity} not found: {record_id}", id=str(record_id))
        self.record_id = record_id


class EmployeeNotFound(NotFoundError):
    code = "EMPLOYEE_NOT_FOUND"
    entity = "Employee"


class ProjectNotFound(NotFoundError):
    code = "PROJECT_NOT_FOUND"
    entity = "Project"


class SkillNotFound(NotFoundError):
    code = "SKILL_NOT_FOUND"
    entity = "Skill"


class ValidationError(SkillManagerError):
    """Structurally invalid input (identifier, date, level, page)."""

    code = "VALIDATION_FAILED"


class PersistenceError(SkillManagerError):
    """Snapshot file could not be read, parsed, or written."""

    code = "PERSISTENCE_FAILED"
