"""Tests for the project command group."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from skillmgr.cli import cli
from tests.conftest import read_snapshot


def _add(cli_runner: CliRunner, *args: str) -> dict:
    result = cli_runner.invoke(cli, ["project", "add", *args])
    assert result.exit_code == 0, result.stderr
    return json.loads(result.stdout)


@pytest.mark.usefixtures("_isolated_workspace")
class TestProjectCommands:
    def test_add(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        project = _add(cli_runner, "-l", "Apollo", "-d", "Moon landing")
        assert project["label"] == "Apollo"
        assert project["description"] == "Moon landing"
        assert read_snapshot(tmp_path / "projects.json") == {project["id"]: project}

    def test_add_requires_label(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["project", "add"])
        assert result.exit_code == 2
        assert "--label" in result.stderr

    def test_get(self, cli_runner: CliRunner) -> None:
        project = _add(cli_runner, "--label", "Apollo")
        result = cli_runner.invoke(cli, ["project", "get", project["id"]])
        assert json.loads(result.stdout) == project

    def test_find_returns_all(self, cli_runner: CliRunner) -> None:
        for i in range(12):
            _add(cli_runner, "-l", f"p{i}")
        result = cli_runner.invoke(cli, ["project", "find"])
        assert [p["label"] for p in json.loads(result.stdout)] == [f"p{i}" for i in range(12)]

    def test_delete(self, cli_runner: CliRunner) -> None:
        project = _add(cli_runner, "-l", "Apollo")
        result = cli_runner.invoke(cli, ["project", "delete", project["id"]])
        assert result.exit_code == 0
        assert f"Deleted project {project['id']}" in result.stdout
        result = cli_runner.invoke(cli, ["project", "get", project["id"]])
        assert result.stdout.strip() == "null"

    def test_envelope(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--envelope", "project", "add", "-l", "Apollo"])
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "add_project"
        assert data["mutated"] is True
