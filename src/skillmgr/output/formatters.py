"""Output mode selection for ServiceResult.

The CLI prints the result payload as pretty JSON by default, which is the
stable, scriptable surface. ``--envelope`` prints the whole ServiceResult,
``--quiet`` only ids, and ``--table`` hands off to the Rich renderers.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from skillmgr.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output flags resolved from the global CLI options."""

    envelope: bool = False
    quiet: bool = False
    table: bool = False
    verbose: bool = False


def format_error(result: ServiceResult) -> str:
    """One-line error message for stderr."""
    return f"Error: {result.error.message if result.error else 'Unknown error'}"


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Precedence: envelope, then quiet, then table, then plain JSON payload.
    """
    settings = settings or OutputSettings()
    if settings.envelope:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        from skillmgr.output.renderers import render_quiet

        return render_quiet(result)
    if settings.table:
        from skillmgr.output.renderers import render_result

        return render_result(result, verbose=settings.verbose)
    if not result.ok:
        return format_error(result)
    return _json.dumps(result.data, indent=2, ensure_ascii=False)
