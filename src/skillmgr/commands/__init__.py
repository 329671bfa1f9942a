"""Subcommand modules for skillmgr.

Provides register_commands() which uses deferred imports to keep
``skillmgr --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the three record groups and the ``serve`` command."""
    from skillmgr.commands.employee import employee
    from skillmgr.commands.project import project
    from skillmgr.commands.skill import skill

    cli.add_command(skill)
    cli.add_command(project)
    cli.add_command(employee)

    from skillmgr.commands.serve import serve

    cli.add_command(serve)
