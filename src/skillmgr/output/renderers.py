"""Operation-specific Rich renderers for ServiceResult (``--table`` mode).

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from skillmgr.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from skillmgr.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: ids only."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"Error: {msg}"

    data = result.data
    if isinstance(data, list):
        ids = (item["id"] for item in data if isinstance(item, dict) and "id" in item)
        return "\n".join(str(i) for i in ids)
    if isinstance(data, dict) and "id" in data:
        return str(data["id"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text("OK", style="skm.ok"), Text(f"  {result.op}", style="skm.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="skm.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="skm.id")
    elif key == "label":
        v = Text(str(value), style="skm.label")
    elif key == "level":
        v = Text(str(value), style="skm.level")
    elif isinstance(value, (dict, list)):
        v = Text(json.dumps(value, separators=(",", ":")))
    else:
        v = Text("" if value is None else str(value))
    console.print(k, v)


def _full_name(employee: dict[str, Any]) -> str:
    return f"{employee.get('first_name', '')} {employee.get('last_name', '')}".strip()


def _visible_skills(employee: dict[str, Any], *, verbose: bool) -> dict[str, Any]:
    """Skills shown in tables; secret ones only with --verbose."""
    skills: dict[str, dict[str, Any]] = employee.get("skills", {})
    return {k: v for k, v in skills.items() if verbose or not v.get("secret")}


def _date_range(assignment: dict[str, Any]) -> str:
    end = assignment.get("end_date") or "present"
    return f"{assignment.get('start_date', '?')} → {end}"


def _table(*columns: str) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    for column in columns:
        style = "skm.id" if column == "ID" else ""
        table.add_column(column, style=style, no_wrap=column == "ID")
    return table


def _add_row(table: Table, *cells: object) -> None:
    """Add a row of plain-text cells (no markup interpretation)."""
    table.add_row(*(Text(str(cell)) for cell in cells))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="skm.error")
    op = Text(f"  {result.op}", style="skm.op")
    console.print(label, op, Text(msg))

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Record renderers ──────────────────────────────────────────────────


def _render_record(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render add/get of a skill or project as key-value fields."""
    _status_line(console, result)
    if result.data is None:
        console.print(Text("  (not found)", style="dim"))
        return
    for key, value in result.data.items():
        _field(console, key, value)


def _render_employee(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render one employee as a panel with skill and project tables."""
    if result.data is None:
        _status_line(console, result)
        console.print(Text("  (not found)", style="dim"))
        return

    e = result.data
    lines = [f"id: {e['id']}"]
    for key in ("title", "email", "telephone"):
        if e.get(key):
            lines.append(f"{key}: {e[key]}")
    if e.get("last_update"):
        lines.append(f"updated: {e['last_update']}")
    panel = Panel(
        Text("\n".join(lines)), title=Text(_full_name(e)), border_style="dim", expand=False
    )
    console.print(panel)

    skills = _visible_skills(e, verbose=verbose)
    if skills:
        table = _table("Skill", "Level")
        for label, knowledge in skills.items():
            _add_row(table, label, knowledge.get("level", ""))
        console.print(table)

    projects: list[dict[str, Any]] = e.get("projects", [])
    if projects:
        table = _table("Project", "Contribution", "Period")
        for assignment in projects:
            _add_row(
                table,
                assignment["project"].get("label", ""),
                assignment.get("contribution", ""),
                _date_range(assignment),
            )
        console.print(table)


def _render_skill_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = _table("ID", "Label")
    for skill in result.data:
        _add_row(table, skill["id"], skill["label"])
    console.print(table)
    console.print(f"\n{len(result.data)} skills")


def _render_project_table(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    table = _table("ID", "Label", "Description")
    for project in result.data:
        _add_row(table, project["id"], project["label"], project["description"])
    console.print(table)
    console.print(f"\n{len(result.data)} projects")


def _render_employee_table(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    table = _table("ID", "Name", "Title", "Skills", "Projects")
    for employee in result.data:
        _add_row(
            table,
            employee["id"],
            _full_name(employee),
            employee.get("title", ""),
            len(_visible_skills(employee, verbose=verbose)),
            len(employee.get("projects", [])),
        )
    console.print(table)
    console.print(f"\n{len(result.data)} employees")


# ── Assignment renderers ──────────────────────────────────────────────


def _render_project_assignment(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    a = result.data
    _field(console, "id", a["id"])
    _field(console, "project_id", a["project"]["id"])
    _field(console, "label", a["project"]["label"])
    _field(console, "contribution", a["contribution"])
    console.print(Text("  period: ", style="skm.key"), Text(_date_range(a), style="skm.date"))


def _render_skill_assignment(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    for key in ("label", "level"):
        _field(console, key, result.data[key])
    if result.data.get("secret"):
        console.print(Text("  secret", style="skm.secret"))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + the payload."""
    _status_line(console, result)
    data = result.data
    if isinstance(data, dict):
        for key, value in data.items():
            _field(console, key, value)
    elif data is not None:
        console.print(Text(f"  {data}"))


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Skills
    "add_skill": _render_record,
    "get_skill": _render_record,
    "find_skills": _render_skill_table,
    "delete_skill": _render_generic,
    # Projects
    "add_project": _render_record,
    "get_project": _render_record,
    "find_projects": _render_project_table,
    "delete_project": _render_generic,
    # Employees
    "add_employee": _render_employee,
    "get_employee": _render_employee,
    "find_employees": _render_employee_table,
    "delete_employee": _render_generic,
    "assign_project": _render_project_assignment,
    "assign_skill": _render_skill_assignment,
}
