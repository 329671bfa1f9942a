"""Command group: projects (add, find, get, delete)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from skillmgr.commands._base import SkmGroup
from skillmgr.services.projects import ProjectService

if TYPE_CHECKING:
    from skillmgr.commands._context import AppContext


_PROJECT_EXAMPLES = """\
  skillmgr project add --label Apollo --description "Moon landing"
  skillmgr project find
  skillmgr project get 5e9a1c2d-7f3b-4e6a-8d0c-1b2a3c4d5e6f
  skillmgr project delete 5e9a1c2d-7f3b-4e6a-8d0c-1b2a3c4d5e6f"""


@click.group(cls=SkmGroup, examples=_PROJECT_EXAMPLES)
def project() -> None:
    """Add, find, get, and delete projects."""


@project.command(
    examples="""\
  skillmgr project add -l Apollo
  skillmgr project add -l Apollo -d "Moon landing\""""
)
@click.option("-l", "--label", required=True, help="Project label.")
@click.option("-d", "--description", default="", help="Free-text description.")
@click.pass_obj
def add(app: AppContext, label: str, description: str) -> None:
    """Add a project."""
    app.emit(ProjectService(app.workspace).add(label, description))


@project.command(
    examples="""\
  skillmgr project find
  skillmgr project find --page 1 --size 10"""
)
@click.option("-p", "--page", type=int, default=0, show_default=True, help="Zero-based page.")
@click.option("-s", "--size", type=int, default=None, help="Page size (default: all).")
@click.pass_obj
def find(app: AppContext, page: int, size: int | None) -> None:
    """List projects in insertion order."""
    app.emit(ProjectService(app.workspace).find(page, size))


@project.command(
    examples="""\
  skillmgr project get 5e9a1c2d-7f3b-4e6a-8d0c-1b2a3c4d5e6f"""
)
@click.argument("project_id", metavar="ID")
@click.pass_obj
def get(app: AppContext, project_id: str) -> None:
    """Show one project. Prints null when ID is unknown."""
    app.emit(ProjectService(app.workspace).get(project_id))


@project.command(
    examples="""\
  skillmgr project delete 5e9a1c2d-7f3b-4e6a-8d0c-1b2a3c4d5e6f"""
)
@click.argument("project_id", metavar="ID")
@click.pass_obj
def delete(app: AppContext, project_id: str) -> None:
    """Delete a project. Employees keep their copy of it."""
    app.emit(ProjectService(app.workspace).delete(project_id))
