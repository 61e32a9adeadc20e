"""Command: describe the lifecycle hook contract."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from launchkit.commands._base import LaunchkitCommand

if TYPE_CHECKING:
    from launchkit.commands._context import AppContext


@click.command(
    cls=LaunchkitCommand,
    examples="""\
  launchkit hooks
  launchkit --json hooks""",
)
@click.pass_obj
def hooks(app: AppContext) -> None:
    """List the lifecycle hooks a plugin may implement, in milestone order."""
    from launchkit.output.renderers import render_hooks
    from launchkit.plugins.hookspecs import describe_hooks

    described = describe_hooks()
    app.emit({"hooks": described}, render_hooks(described))
