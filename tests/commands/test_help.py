"""Parametrized help tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from skillmgr.cli import cli

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["--table", "--envelope", "--quiet", "--data-dir", "--config"]),
    (["skill", "--help"], ["add", "find", "get", "delete"]),
    (["skill", "add", "--help"], ["LABEL"]),
    (["skill", "find", "--help"], ["--page", "--size"]),
    (["skill", "get", "--help"], ["ID"]),
    (["skill", "delete", "--help"], ["ID"]),
    (["project", "--help"], ["add", "find", "get", "delete"]),
    (["project", "add", "--help"], ["--label", "--description"]),
    (["project", "find", "--help"], ["--page", "--size"]),
    (["employee", "--help"], ["add", "find", "get", "delete", "assign-project", "assign-skill"]),
    (["employee", "add", "--help"], ["--first-name", "--last-name", "--title", "--email"]),
    (
        ["employee", "assign-project", "--help"],
        ["--employee-id", "--project-id", "--start-date", "--end-date", "CONTRIBUTION"],
    ),
    (
        ["employee", "assign-skill", "--help"],
        ["--employee-id", "--skill-id", "--skill-level", "--secret"],
    ),
    (["serve", "--help"], ["--host", "--port", "--checkpoint"]),
]


@pytest.mark.parametrize(("args", "keywords"), HELP_COMMANDS)
def test_help(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    for keyword in keywords:
        assert keyword in result.output
