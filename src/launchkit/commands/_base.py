"""Base Click command for launchkit subcommands."""

from __future__ import annotations

from typing import Any

import click


class LaunchkitCommand(click.Command):
    """Click command with an optional ``--examples`` flag.

    ``--help`` stays short; the examples passed as ``examples=`` are printed
    on demand and the command exits without running.
    """

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        self.examples = examples
        params = list(kwargs.pop("params", None) or [])
        if examples:
            params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples and exit.",
                )
            )
        super().__init__(*args, params=params, **kwargs)

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)
