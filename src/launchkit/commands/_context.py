"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy plugin discovery and centralized
output emission.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

if TYPE_CHECKING:
    from launchkit.config.settings import LaunchkitSettings
    from launchkit.plugins.manager import PluginManager


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The plugin manager is created lazily on first use so ``--help`` and
    ``--version`` never import installed plugins.
    """

    def __init__(self, settings: LaunchkitSettings) -> None:
        self.settings = settings
        self._plugin_manager: PluginManager | None = None

        from launchkit.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugin_manager(self) -> PluginManager:
        """Manager loaded with every enabled entry-point plugin."""
        if self._plugin_manager is None:
            from launchkit.plugins.manager import PluginManager

            pm = PluginManager.from_settings(self.settings)
            pm.discover_and_load(
                self.settings.plugins.entry_point_group,
                disabled=self.settings.plugins.disabled,
            )
            self._plugin_manager = pm
        return self._plugin_manager

    def emit(self, payload: Any, human: str) -> None:
        """Write *payload* as JSON under ``--json``, otherwise *human*."""
        if self.settings.json_output:
            click.echo(json.dumps(payload, indent=2))
        else:
            click.echo(human)
