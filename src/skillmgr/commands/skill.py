"""Command group: skills (add, find, get, delete)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from skillmgr.commands._base import SkmGroup
from skillmgr.services.skills import SkillService

if TYPE_CHECKING:
    from skillmgr.commands._context import AppContext


_SKILL_EXAMPLES = """\
  skillmgr skill add Python
  skillmgr skill find --page 1 --size 5
  skillmgr skill get 0b6f0c4e-3b5d-4a8e-9a3c-2f1d5e7a9b10
  skillmgr skill delete 0b6f0c4e-3b5d-4a8e-9a3c-2f1d5e7a9b10"""


@click.group(cls=SkmGroup, examples=_SKILL_EXAMPLES)
def skill() -> None:
    """Add, find, get, and delete skills."""


@skill.command(
    examples="""\
  skillmgr skill add Python
  skillmgr skill add "Technical writing\""""
)
@click.argument("label")
@click.pass_obj
def add(app: AppContext, label: str) -> None:
    """Add a skill with the given LABEL."""
    app.emit(SkillService(app.workspace).add(label))


@skill.command(
    examples="""\
  skillmgr skill find
  skillmgr skill find --page 2 --size 20
  skillmgr --table skill find"""
)
@click.option("-p", "--page", type=int, default=0, show_default=True, help="Zero-based page.")
@click.option("-s", "--size", type=int, default=None, help="Page size (default from config).")
@click.pass_obj
def find(app: AppContext, page: int, size: int | None) -> None:
    """List one page of skills in insertion order."""
    app.emit(SkillService(app.workspace).find(page, size))


@skill.command(
    examples="""\
  skillmgr skill get 0b6f0c4e-3b5d-4a8e-9a3c-2f1d5e7a9b10"""
)
@click.argument("skill_id", metavar="ID")
@click.pass_obj
def get(app: AppContext, skill_id: str) -> None:
    """Show one skill. Prints null when ID is unknown."""
    app.emit(SkillService(app.workspace).get(skill_id))


@skill.command(
    examples="""\
  skillmgr skill delete 0b6f0c4e-3b5d-4a8e-9a3c-2f1d5e7a9b10"""
)
@click.argument("skill_id", metavar="ID")
@click.pass_obj
def delete(app: AppContext, skill_id: str) -> None:
    """Delete a skill. Deleting an unknown ID succeeds."""
    app.emit(SkillService(app.workspace).delete(skill_id))
