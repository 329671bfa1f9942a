"""Click classes for skillmgr commands.

Commands and groups built with these classes take an ``examples=`` string.
Passing ``--examples`` on the command line prints it and exits without
running the command or touching the data directory.
"""

from __future__ import annotations

from typing import Any

import click


def _examples_option(examples: str) -> click.Option:
    def _print(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n")
            click.echo(examples)
            ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        is_eager=True,
        expose_value=False,
        callback=_print,
        help="Show usage examples.",
    )


class _ExamplesMixin:
    examples: str | None

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))  # type: ignore[attr-defined]


class SkmCommand(_ExamplesMixin, click.Command):
    """A click command with an optional ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class SkmGroup(_ExamplesMixin, click.Group):
    """A click group with ``--examples``; ``@group.command`` builds SkmCommand."""

    command_class = SkmCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
