"""Command group: employees, plus project and skill assignment."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from skillmgr.commands._base import SkmGroup
from skillmgr.services.employees import EmployeeService

if TYPE_CHECKING:
    from skillmgr.commands._context import AppContext


_EMPLOYEE_EXAMPLES = """\
  skillmgr employee add -f Ada -l Lovelace --title Engineer
  skillmgr employee find
  skillmgr employee assign-project -e <employee-id> -p <project-id> -d 2024-01-15 "Lead developer"
  skillmgr employee assign-skill -e <employee-id> -s <skill-id> -l 4"""


@click.group(cls=SkmGroup, examples=_EMPLOYEE_EXAMPLES)
def employee() -> None:
    """Manage employees and assign them to projects and skills."""


@employee.command(
    examples="""\
  skillmgr employee add -f Ada -l Lovelace
  skillmgr employee add -f Ada -l Lovelace --title Engineer --email ada@example.com"""
)
@click.option("-f", "--first-name", required=True, help="First name.")
@click.option("-l", "--last-name", required=True, help="Last name.")
@click.option("--title", default="", help="Job title.")
@click.option("--email", default="", help="Email address.")
@click.option("--telephone", default="", help="Telephone number.")
@click.pass_obj
def add(
    app: AppContext,
    first_name: str,
    last_name: str,
    title: str,
    email: str,
    telephone: str,
) -> None:
    """Add an employee with no skills and no projects."""
    svc = EmployeeService(app.workspace)
    app.emit(svc.add(first_name, last_name, title=title, email=email, telephone=telephone))


@employee.command(
    examples="""\
  skillmgr employee find
  skillmgr --quiet employee find --size 50"""
)
@click.option("-p", "--page", type=int, default=0, show_default=True, help="Zero-based page.")
@click.option("-s", "--size", type=int, default=None, help="Page size (default: all).")
@click.pass_obj
def find(app: AppContext, page: int, size: int | None) -> None:
    """List employees in insertion order."""
    app.emit(EmployeeService(app.workspace).find(page, size))


@employee.command(
    examples="""\
  skillmgr employee get 9c1d2e3f-4a5b-4c6d-8e7f-0a1b2c3d4e5f
  skillmgr --table --verbose employee get 9c1d2e3f-4a5b-4c6d-8e7f-0a1b2c3d4e5f"""
)
@click.argument("employee_id", metavar="ID")
@click.pass_obj
def get(app: AppContext, employee_id: str) -> None:
    """Show one employee. Prints null when ID is unknown."""
    app.emit(EmployeeService(app.workspace).get(employee_id))


@employee.command(
    examples="""\
  skillmgr employee delete 9c1d2e3f-4a5b-4c6d-8e7f-0a1b2c3d4e5f"""
)
@click.argument("employee_id", metavar="ID")
@click.pass_obj
def delete(app: AppContext, employee_id: str) -> None:
    """Delete an employee. Deleting an unknown ID succeeds."""
    app.emit(EmployeeService(app.workspace).delete(employee_id))


@employee.command(
    "assign-project",
    examples="""\
  skillmgr employee assign-project -e <employee-id> -p <project-id> -d 2024-01-15 "Lead developer"
  skillmgr employee assign-project -e <employee-id> -p <project-id> \\
      --start-date 2023-03-01 --end-date 2023-12-31 "Reviewer\"""",
)
@click.option("-e", "--employee-id", required=True, help="Employee to assign.")
@click.option("-p", "--project-id", required=True, help="Project to copy onto the employee.")
@click.option("-d", "--start-date", required=True, help="Start date (YYYY-MM-DD).")
@click.option("--end-date", default=None, help="End date (YYYY-MM-DD), omitted while ongoing.")
@click.argument("contribution")
@click.pass_obj
def assign_project(
    app: AppContext,
    employee_id: str,
    project_id: str,
    start_date: str,
    end_date: str | None,
    contribution: str,
) -> None:
    """Record an employee's CONTRIBUTION to a project."""
    svc = EmployeeService(app.workspace)
    app.emit(svc.assign_project(employee_id, project_id, contribution, start_date, end_date))


@employee.command(
    "assign-skill",
    examples="""\
  skillmgr employee assign-skill -e <employee-id> -s <skill-id> -l 4
  skillmgr employee assign-skill -e <employee-id> -s <skill-id> --skill-level 2 --secret""",
)
@click.option("-e", "--employee-id", required=True, help="Employee to update.")
@click.option("-s", "--skill-id", required=True, help="Skill whose label is recorded.")
@click.option("-l", "--skill-level", required=True, help="Non-negative proficiency level.")
@click.option("--secret", is_flag=True, help="Hide this skill from --table output.")
@click.pass_obj
def assign_skill(
    app: AppContext,
    employee_id: str,
    skill_id: str,
    skill_level: str,
    secret: bool,
) -> None:
    """Record an employee's level in a skill."""
    svc = EmployeeService(app.workspace)
    app.emit(svc.assign_skill(employee_id, skill_id, skill_level, secret=secret))
