"""Tests for EmployeeService — CRUD and assignments."""

import uuid

import pytest

from skillmgr.infrastructure.workspace import Workspace
from skillmgr.services.employees import EmployeeService
from tests.conftest import add_employee, add_project, add_skill


@pytest.fixture
def svc(memory_workspace: Workspace) -> EmployeeService:
    return EmployeeService(memory_workspace)


class TestCrud:
    def test_add(self, svc: EmployeeService) -> None:
        result = svc.add("Ada", "Lovelace", title="Engineer", email="ada@example.com")
        assert result.ok
        assert result.op == "add_employee"
        data = result.data
        assert (data["first_name"], data["last_name"]) == ("Ada", "Lovelace")
        assert data["title"] == "Engineer"
        assert data["email"] == "ada@example.com"
        assert data["telephone"] == ""
        assert data["skills"] == {}
        assert data["projects"] == []

    def test_get_absent(self, svc: EmployeeService) -> None:
        assert svc.get(str(uuid.uuid4())).data is None

    def test_find_all(self, memory_workspace: Workspace, svc: EmployeeService) -> None:
        for name in ("Ada", "Grace", "Linus"):
            add_employee(memory_workspace, name, "X")
        assert [e["first_name"] for e in svc.find().data] == ["Ada", "Grace", "Linus"]

    def test_delete(self, memory_workspace: Workspace, svc: EmployeeService) -> None:
        employee = add_employee(memory_workspace, "Ada", "Lovelace")
        assert svc.delete(employee["id"]).data == f"Deleted employee {employee['id']}"


class TestAssignProject:
    def test_success(self, memory_workspace: Workspace, svc: EmployeeService) -> None:
        employee = add_employee(memory_workspace, "Ada", "Lovelace")
        project = add_project(memory_workspace, "Apollo", "Moon")
        result = svc.assign_project(employee["id"], project["id"], "Lead", "2024-01-15")
        assert result.ok
        assert result.mutated is True
        assert result.data["project"] == project
        assert result.data["start_date"] == "2024-01-15"
        assert result.data["end_date"] is None
        stored = svc.get(employee["id"]).data
        assert stored["projects"] == [result.data]

    def test_with_end_date(self, memory_workspace: Workspace, svc: EmployeeService) -> None:
        employee = add_employee(memory_workspace, "Ada", "Lovelace")
        project = add_project(memory_workspace, "Apollo")
        result = svc.assign_project(
            employee["id"], project["id"], "Reviewer", "2023-03-01", "2023-12-31"
        )
        assert result.data["end_date"] == "2023-12-31"

    def test_unknown_employee(self, memory_workspace: Workspace, svc: EmployeeService) -> None:
        project = add_project(memory_workspace, "Apollo")
        result = svc.assign_project(str(uuid.uuid4()), project["id"], "Lead", "2024-01-15")
        assert not result.ok
        assert result.error.code == "EMPLOYEE_NOT_FOUND"
        assert result.error.message.startswith("Employee not found")

    def test_unknown_project(self, memory_workspace: Workspace, svc: EmployeeService) -> None:
        employee = add_employee(memory_workspace, "Ada", "Lovelace")
        result = svc.assign_project(employee["id"], str(uuid.uuid4()), "Lead", "2024-01-15")
        assert result.error.code == "PROJECT_NOT_FOUND"
        assert svc.get(employee["id"]).data["projects"] == []

    def test_bad_date(self, memory_workspace: Workspace, svc: EmployeeService) -> None:
        employee = add_employee(memory_workspace, "Ada", "Lovelace")
        project = add_project(memory_workspace, "Apollo")
        result = svc.assign_project(employee["id"], project["id"], "Lead", "15/01/2024")
        assert result.error.code == "VALIDATION_FAILED"
        assert "start date" in result.error.message

    def test_bad_employee_id(self, svc: EmployeeService) -> None:
        result = svc.assign_project("nobody", str(uuid.uuid4()), "Lead", "2024-01-15")
        assert result.error.code == "VALIDATION_FAILED"


class TestAssignSkill:
    def test_success(self, memory_workspace: Workspace, svc: EmployeeService) -> None:
        employee = add_employee(memory_workspace, "Ada", "Lovelace")
        skill = add_skill(memory_workspace, "Rust")
        result = svc.assign_skill(employee["id"], skill["id"], "4")
        assert result.ok
        assert result.data == {"label": "Rust", "level": 4, "secret": False}
        assert svc.get(employee["id"]).data["skills"] == {"Rust": {"level": 4, "secret": False}}

    def test_secret(self, memory_workspace: Workspace, svc: EmployeeService) -> None:
        employee = add_employee(memory_workspace, "Ada", "Lovelace")
        skill = add_skill(memory_workspace, "COBOL")
        result = svc.assign_skill(employee["id"], skill["id"], 1, secret=True)
        assert result.data["secret"] is True

    def test_unknown_skill(self, memory_workspace: Workspace, svc: EmployeeService) -> None:
        employee = add_employee(memory_workspace, "Ada", "Lovelace")
        result = svc.assign_skill(employee["id"], str(uuid.uuid4()), 3)
        assert result.error.code == "SKILL_NOT_FOUND"
        assert svc.get(employee["id"]).data["skills"] == {}

    def test_negative_level(self, memory_workspace: Workspace, svc: EmployeeService) -> None:
        employee = add_employee(memory_workspace, "Ada", "Lovelace")
        skill = add_skill(memory_workspace, "Rust")
        result = svc.assign_skill(employee["id"], skill["id"], -2)
        assert result.error.code == "VALIDATION_FAILED"
        assert svc.get(employee["id"]).data["skills"] == {}

    def test_non_integer_level(self, memory_workspace: Workspace, svc: EmployeeService) -> None:
        employee = add_employee(memory_workspace, "Ada", "Lovelace")
        skill = add_skill(memory_workspace, "Rust")
        assert svc.assign_skill(employee["id"], skill["id"], "expert").error.code == (
            "VALIDATION_FAILED"
        )
