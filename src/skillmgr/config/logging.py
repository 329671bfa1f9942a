"""Logging setup: stdlib loggers rendered through structlog on stderr.

stdout is reserved for command results, so every log line goes to stderr,
either as console text (colored on a terminal) or, with ``--log-json``, as
one JSON object per line. Modules log with ``logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging
import sys

import structlog

# Pinned at WARNING regardless of --verbose.
_QUIET_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error", "httpx")


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _stderr_handler(pre_chain: list[structlog.types.Processor], log_json: bool) -> logging.Handler:
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route all logging to a single stderr handler.

    ``skillmgr.*`` logs at DEBUG with *verbose*, otherwise at WARNING; the
    root logger and noisy server/client libraries stay at WARNING. Safe to
    call repeatedly: the previous root handlers are replaced.
    """
    pre_chain = _pre_chain()
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers[:] = [_stderr_handler(pre_chain, log_json)]
    root.setLevel(logging.WARNING)

    logging.getLogger("skillmgr").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
