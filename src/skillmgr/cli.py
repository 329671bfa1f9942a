"""Root CLI group for skillmgr with global flags and command registration."""

from __future__ import annotations

import click

from skillmgr import __version__
from skillmgr.commands import register_commands
from skillmgr.commands._context import AppContext
from skillmgr.config.settings import SkillMgrSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="skillmgr")
@click.option("--table", is_flag=True, help="Human-readable tables instead of JSON.")
@click.option("--envelope", is_flag=True, help="Print the full result envelope as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print record ids only.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding skills.json, projects.json, and employees.json.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    table: bool,
    envelope: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    data_dir: str | None,
) -> None:
    """skillmgr — track skills, projects, and who works on what."""
    ctx.ensure_object(dict)
    settings = SkillMgrSettings.from_cli(
        config_path=config_path,
        table=table,
        envelope=envelope,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        data_dir=data_dir,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
