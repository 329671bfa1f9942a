"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy Workspace loading, the command-scoped
checkpoint, and centralized result emission (stdout/stderr routing + exit
codes).

Checkpoint policy (command-scoped): the snapshots are loaded once, the
first time a command touches the workspace; exactly one command runs; the
stores it changed are saved once, after it succeeded and before its result
is printed. A failed command has mutated nothing and writes nothing.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from skillmgr.domain.errors import PersistenceError
from skillmgr.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from skillmgr.config.settings import SkillMgrSettings
    from skillmgr.infrastructure.workspace import Workspace
    from skillmgr.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``. The workspace is lazily
    loaded on first use so ``--help`` and ``--version`` never read the
    snapshot files.
    """

    def __init__(self, settings: SkillMgrSettings) -> None:
        self.settings = settings
        self._workspace: Workspace | None = None

        from skillmgr.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def workspace(self) -> Workspace:
        """The workspace (snapshots loaded on first access).

        A malformed snapshot aborts the command with exit code 1.
        """
        if self._workspace is None:
            from skillmgr.infrastructure.workspace import Workspace

            try:
                self._workspace = Workspace.open(self.settings)
            except PersistenceError as exc:
                raise click.ClickException(exc.message) from exc
        return self._workspace

    def checkpoint(self) -> None:
        """Save every store the command changed. No-op before first load."""
        if self._workspace is None:
            return
        try:
            written = self._workspace.save()
        except PersistenceError as exc:
            raise click.ClickException(exc.message) from exc
        if written:
            logger.debug("Checkpoint saved %s", ", ".join(str(p) for p in written))

    def emit(self, result: ServiceResult) -> None:
        """Checkpoint, then format and output a ServiceResult.

        * Success (``result.ok``): saves changed stores, writes to stdout,
          returns normally.
        * Failure: writes to stderr, exits with code 1. Nothing is saved.
        """
        settings = OutputSettings(
            envelope=self.settings.envelope,
            quiet=self.settings.quiet,
            table=self.settings.table,
            verbose=self.settings.verbose,
        )
        if result.ok:
            self.checkpoint()
            click.echo(format_result(result, settings=settings))
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(format_result(result, settings=settings), err=True)
            raise SystemExit(1)
