"""serve — start the HTTP API (requires skillmgr[http] extra)."""

from __future__ import annotations

import click

from skillmgr.commands._base import SkmCommand


@click.command(
    cls=SkmCommand,
    examples="""\
  # Serve the API on the configured address (default 127.0.0.1:8080)
  skillmgr serve

  # Listen on all interfaces, custom port
  skillmgr serve --host 0.0.0.0 --port 9000

  # Keep changes in memory until the server stops
  skillmgr serve --checkpoint shutdown""",
)
@click.option("--host", default=None, help="Bind address (default from [server] host).")
@click.option("--port", default=None, type=int, help="Listen port (default from [server] port).")
@click.option(
    "--checkpoint",
    default=None,
    type=click.Choice(["mutation", "shutdown"]),
    help="When to save: after every change, or only on shutdown.",
)
@click.pass_obj
def serve(app: object, host: str | None, port: int | None, checkpoint: str | None) -> None:
    """Start the HTTP API (requires skillmgr[http] extra)."""
    from skillmgr.http.server import create_app, http_available

    if not http_available:
        click.echo("HTTP extra not installed. Install with: pip install skillmgr[http]", err=True)
        raise SystemExit(1)

    import uvicorn

    from skillmgr.commands._context import AppContext

    assert isinstance(app, AppContext)
    server = app.settings.server
    api = create_app(app.workspace, checkpoint=checkpoint or server.checkpoint)
    uvicorn.run(api, host=host or server.host, port=port or server.port, log_config=None)
