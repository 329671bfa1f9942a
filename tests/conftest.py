"""Shared pytest fixtures and test helpers for skillmgr tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from skillmgr.config.settings import SkillMgrSettings
from skillmgr.infrastructure.workspace import Workspace


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's SKILLMGR_* environment out of every test."""
    for name in ("SKILLMGR_CONFIG", "SKILLMGR_DATA_DIR", "SKILLMGR_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    """Temporary directory holding the three snapshot files.

    This is the single source of truth for the data directory layout.
    All file-backed fixtures (settings, workspace, _isolated_workspace)
    build on this.
    """
    return tmp_path


@pytest.fixture
def settings(data_root: Path) -> SkillMgrSettings:
    return SkillMgrSettings.from_cli(root=data_root)


@pytest.fixture
def workspace(settings: SkillMgrSettings) -> Workspace:
    """File-backed workspace on a temp directory (no files yet)."""
    return Workspace.open(settings)


@pytest.fixture
def memory_workspace() -> Workspace:
    """Workspace with no files behind it."""
    return Workspace.in_memory()


@pytest.fixture
def _isolated_workspace(data_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp data root so the CLI reads and writes there.

    Use via ``@pytest.mark.usefixtures("_isolated_workspace")`` on command
    test classes. Tests that need the path can also request ``tmp_path``
    directly (pytest deduplicates, it's the same directory).
    """
    monkeypatch.chdir(data_root)


# ---------------------------------------------------------------------------
# Shared test helpers (used across service and command test modules)
# ---------------------------------------------------------------------------


def add_skill(workspace: Workspace, label: str) -> dict[str, Any]:
    """Add a skill via SkillService, asserting success."""
    from skillmgr.services.skills import SkillService

    result = SkillService(workspace).add(label)
    assert result.ok, result.error
    return result.data


def add_project(workspace: Workspace, label: str, description: str = "") -> dict[str, Any]:
    """Add a project via ProjectService, asserting success."""
    from skillmgr.services.projects import ProjectService

    result = ProjectService(workspace).add(label, description)
    assert result.ok, result.error
    return result.data


def add_employee(workspace: Workspace, first: str, last: str, **kwargs: Any) -> dict[str, Any]:
    """Add an employee via EmployeeService, asserting success."""
    from skillmgr.services.employees import EmployeeService

    result = EmployeeService(workspace).add(first, last, **kwargs)
    assert result.ok, result.error
    return result.data


def read_snapshot(path: Path) -> dict[str, Any]:
    """Parse a snapshot file written by the CLI or a checkpoint."""
    return json.loads(path.read_text(encoding="utf-8"))
