"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer methods return ServiceResult.
The CLI, the HTTP adapter, and any future interface consume this type.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"add_skill"``).
        data: JSON-ready payload on success: a record dict, a list of
            record dicts, a message string, or None for an absent record.
        mutated: Whether the operation changed a store (adapters use this
            to decide on a checkpoint).
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: Any = None
    mutated: bool = False
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
