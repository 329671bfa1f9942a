"""FastAPI application setup.

Optional extra — guarded behind try/except ImportError.
The app holds one Workspace for its whole lifetime (session-scoped
checkpoint): stores are loaded before the app is built, saved after each
mutating request under the ``mutation`` policy, and always flushed on
shutdown.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from skillmgr.infrastructure.workspace import Workspace

http_available = False
_FastAPI: Any = None

try:
    from fastapi import FastAPI as _FastAPI  # type: ignore[no-redef,import-not-found]

    http_available = True
except ImportError:
    pass

__all__ = ["create_app", "http_available"]

logger = logging.getLogger(__name__)

CHECKPOINT_POLICIES = ("mutation", "shutdown")


@asynccontextmanager
async def _lifespan(app: Any) -> AsyncIterator[None]:
    """Flush unsaved changes on graceful shutdown, whatever the policy."""
    workspace: Workspace = app.state.workspace
    logger.info("skillmgr API ready (checkpoint=%s)", app.state.checkpoint)
    yield
    written = workspace.save()
    logger.info("Shutdown checkpoint wrote %d store(s)", len(written))


def create_app(workspace: Workspace, *, checkpoint: str = "mutation") -> Any:
    """Create the FastAPI app serving *workspace* under ``/api``.

    *checkpoint* is ``"mutation"`` (save after every successful mutating
    request) or ``"shutdown"`` (save only when the server stops).

    Raises RuntimeError if the http extra is not installed.
    """
    if not http_available or _FastAPI is None:
        msg = "HTTP extra not installed. Install with: pip install skillmgr[http]"
        raise RuntimeError(msg)
    if checkpoint not in CHECKPOINT_POLICIES:
        msg = f"Unknown checkpoint policy: {checkpoint!r}"
        raise ValueError(msg)

    from skillmgr import __version__
    from skillmgr.http.routes import register_error_handlers, router

    app = _FastAPI(title="skillmgr", version=__version__, lifespan=_lifespan)
    app.state.workspace = workspace
    app.state.checkpoint = checkpoint

    app.include_router(router, prefix="/api")
    register_error_handlers(app)
    return app
