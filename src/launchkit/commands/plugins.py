"""Command: list discovered plugins in dispatch order."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from launchkit.commands._base import LaunchkitCommand

if TYPE_CHECKING:
    from launchkit.commands._context import AppContext


@click.command(
    cls=LaunchkitCommand,
    examples="""\
  launchkit plugins
  launchkit --json plugins
  LAUNCHKIT_PLUGINS__DISABLED='["splashscreen"]' launchkit plugins""",
)
@click.pass_obj
def plugins(app: AppContext) -> None:
    """List installed plugins in the order they receive each milestone."""
    from launchkit.output.renderers import render_plugins
    from launchkit.plugins.manager import validate_plugin

    pm = app.plugin_manager
    rows: list[dict[str, Any]] = [
        {"order": index, "name": name, "hooks": validate_plugin(plugin)}
        for index, (name, plugin) in enumerate(
            zip(pm.list_plugin_names(), pm.get_plugins(), strict=True), start=1
        )
    ]
    app.emit(
        {"error_policy": str(pm.error_policy), "plugins": rows},
        render_plugins(rows),
    )
