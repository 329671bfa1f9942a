"""HTTP routes for skills, projects, and employees.

Handlers are thin: they call the same services the CLI uses and map the
resulting ServiceResult onto a response. Failures become
``{"error": {"code", "message"}}`` bodies.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from skillmgr.domain.errors import PersistenceError
from skillmgr.infrastructure.workspace import Workspace
from skillmgr.services.employees import EmployeeService
from skillmgr.services.projects import ProjectService
from skillmgr.services.result import ServiceResult
from skillmgr.services.skills import SkillService

logger = logging.getLogger(__name__)

router = APIRouter()


class ApiError(Exception):
    """An error response with an HTTP status and a stable error code."""

    def __init__(self, status_code: int, code: str, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message


def _status_for(code: str) -> int:
    if code.endswith("NOT_FOUND"):
        return 404
    if code == "VALIDATION_FAILED":
        return 422
    return 500


def _error_body(code: str, message: str) -> dict[str, Any]:
    return {"error": {"code": code, "message": message}}


def register_error_handlers(app: FastAPI) -> None:
    """Render every error as ``{"error": {"code", "message"}}``."""

    @app.exception_handler(ApiError)
    async def _api_error(_request: Request, exc: ApiError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=_error_body(exc.code, exc.message))

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(_request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        if errors:
            first = errors[0]
            where = ".".join(str(part) for part in first.get("loc", ()))
            message = f"{where}: {first.get('msg', 'invalid value')}"
        else:
            message = "Invalid request"
        return JSONResponse(status_code=422, content=_error_body("VALIDATION_FAILED", message))

    @app.exception_handler(PersistenceError)
    async def _persistence_error(_request: Request, exc: PersistenceError) -> JSONResponse:
        logger.error("Checkpoint failed: %s", exc.message)
        return JSONResponse(status_code=500, content=_error_body(exc.code, exc.message))


# ── Request bodies ────────────────────────────────────────────────────


class SkillBody(BaseModel):
    label: str


class ProjectBody(BaseModel):
    label: str
    description: str = ""


class EmployeeBody(BaseModel):
    first_name: str
    last_name: str
    title: str = ""
    email: str = ""
    telephone: str = ""


class ProjectAssignmentBody(BaseModel):
    project_id: str
    contribution: str
    start_date: str
    end_date: str | None = None


class SkillAssignmentBody(BaseModel):
    skill_id: str
    level: int
    secret: bool = False


# ── Helpers ───────────────────────────────────────────────────────────


def get_workspace(request: Request) -> Workspace:
    return request.app.state.workspace


def _respond(request: Request, result: ServiceResult, *, not_found: str | None = None) -> Any:
    """Return the payload of *result*, checkpointing after a mutation.

    With *not_found* set, a successful ``None`` payload becomes a 404
    carrying that code.
    """
    if not result.ok:
        err = result.error
        code = err.code if err else "ERROR"
        message = err.message if err else "Unknown error"
        raise ApiError(_status_for(code), code, message)
    if result.data is None and not_found is not None:
        raise ApiError(404, not_found, f"Not found: {request.path_params.get('record_id')}")
    if result.mutated and request.app.state.checkpoint == "mutation":
        written = request.app.state.workspace.save()
        logger.debug("%s checkpoint wrote %d store(s)", result.op, len(written))
    return result.data


# ── Skills ────────────────────────────────────────────────────────────


@router.post("/skills")
def add_skill(body: SkillBody, request: Request, ws: Workspace = Depends(get_workspace)) -> Any:
    return _respond(request, SkillService(ws).add(body.label))


@router.get("/skills")
def find_skills(
    request: Request,
    page: int = Query(0),
    size: int | None = Query(None),
    ws: Workspace = Depends(get_workspace),
) -> Any:
    """One page of skills (page size defaults to ``storage.default_page_size``)."""
    return _respond(request, SkillService(ws).find(page, size))


@router.get("/skills/{record_id}")
def get_skill(record_id: str, request: Request, ws: Workspace = Depends(get_workspace)) -> Any:
    return _respond(request, SkillService(ws).get(record_id), not_found="SKILL_NOT_FOUND")


@router.delete("/skills/{record_id}")
def delete_skill(record_id: str, request: Request, ws: Workspace = Depends(get_workspace)) -> Any:
    return _respond(request, SkillService(ws).delete(record_id))


# ── Projects ──────────────────────────────────────────────────────────


@router.post("/projects")
def add_project(body: ProjectBody, request: Request, ws: Workspace = Depends(get_workspace)) -> Any:
    return _respond(request, ProjectService(ws).add(body.label, body.description))


@router.get("/projects")
def find_projects(
    request: Request,
    page: int = Query(0),
    size: int | None = Query(None),
    ws: Workspace = Depends(get_workspace),
) -> Any:
    return _respond(request, ProjectService(ws).find(page, size))


@router.get("/projects/{record_id}")
def get_project(record_id: str, request: Request, ws: Workspace = Depends(get_workspace)) -> Any:
    return _respond(request, ProjectService(ws).get(record_id), not_found="PROJECT_NOT_FOUND")


@router.delete("/projects/{record_id}")
def delete_project(
    record_id: str, request: Request, ws: Workspace = Depends(get_workspace)
) -> Any:
    return _respond(request, ProjectService(ws).delete(record_id))


# ── Employees ─────────────────────────────────────────────────────────


@router.post("/employees")
def add_employee(
    body: EmployeeBody, request: Request, ws: Workspace = Depends(get_workspace)
) -> Any:
    result = EmployeeService(ws).add(
        body.first_name,
        body.last_name,
        title=body.title,
        email=body.email,
        telephone=body.telephone,
    )
    return _respond(request, result)


@router.get("/employees")
def find_employees(
    request: Request,
    page: int = Query(0),
    size: int | None = Query(None),
    ws: Workspace = Depends(get_workspace),
) -> Any:
    return _respond(request, EmployeeService(ws).find(page, size))


@router.get("/employees/{record_id}")
def get_employee(record_id: str, request: Request, ws: Workspace = Depends(get_workspace)) -> Any:
    return _respond(request, EmployeeService(ws).get(record_id), not_found="EMPLOYEE_NOT_FOUND")


@router.delete("/employees/{record_id}")
def delete_employee(
    record_id: str, request: Request, ws: Workspace = Depends(get_workspace)
) -> Any:
    return _respond(request, EmployeeService(ws).delete(record_id))


@router.post("/employees/{record_id}/projects")
def assign_project(
    record_id: str,
    body: ProjectAssignmentBody,
    request: Request,
    ws: Workspace = Depends(get_workspace),
) -> Any:
    """Attach a copy of a project to the employee."""
    result = EmployeeService(ws).assign_project(
        record_id, body.project_id, body.contribution, body.start_date, body.end_date
    )
    return _respond(request, result)


@router.post("/employees/{record_id}/skills")
def assign_skill(
    record_id: str,
    body: SkillAssignmentBody,
    request: Request,
    ws: Workspace = Depends(get_workspace),
) -> Any:
    result = EmployeeService(ws).assign_skill(
        record_id, body.skill_id, body.level, secret=body.secret
    )
    return _respond(request, result)
