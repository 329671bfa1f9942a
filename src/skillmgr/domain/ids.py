"""Identifier types, generation, and input parsing.

All three root entities and project assignments are keyed by random UUID4
values; collisions are treated as impossible.

INVARIANT: IDs are permanent. Once generated, an ID never changes.

The parsers below turn adapter-supplied strings into typed values and raise
:class:`~skillmgr.domain.errors.ValidationError` for anything malformed.
"""

from __future__ import annotations

import re
import uuid
from datetime import date
from typing import NewType
from uuid import UUID

from skillmgr.domain.errors import ValidationError

SkillId = NewType("SkillId", UUID)
ProjectId = NewType("ProjectId", UUID)
EmployeeId = NewType("EmployeeId", UUID)
AssignmentId = NewType("AssignmentId", UUID)

# Calendar dates are accepted only in full ISO form (YYYY-MM-DD).
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def new_id() -> UUID:
    """Generate a fresh random identifier."""
    return uuid.uuid4()


def parse_id(raw: UUID | str, kind: str = "id") -> UUID:
    """Parse *raw* into a UUID, naming *kind* in the error message."""
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw).strip())
    except ValueError as exc:
        msg = f"Invalid {kind}: {raw!r} is not a UUID"
        raise ValidationError(msg, value=str(raw)) from exc


def parse_date(raw: date | str, field: str = "date") -> date:
    """Parse a ``YYYY-MM-DD`` string into a :class:`datetime.date`."""
    if isinstance(raw, date):
        return raw
    text = str(raw).strip()
    if not DATE_PATTERN.match(text):
        msg = f"Invalid {field}: {raw!r} (expected YYYY-MM-DD)"
        raise ValidationError(msg, value=text)
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        msg = f"Invalid {field}: {raw!r} ({exc})"
        raise ValidationError(msg, value=text) from exc


def parse_optional_date(raw: date | str | None, field: str = "date") -> date | None:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    return parse_date(raw, field)


def parse_level(raw: int | str) -> int:
    """Parse a skill proficiency level (a non-negative integer)."""
    try:
        level = int(raw)
    except (TypeError, ValueError) as exc:
        msg = f"Invalid skill level: {raw!r} is not an integer"
        raise ValidationError(msg, value=str(raw)) from exc
    if level < 0:
        msg = f"Invalid skill level: {level} (must be >= 0)"
        raise ValidationError(msg, value=level)
    return level
