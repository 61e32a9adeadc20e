"""Subcommand modules for launchkit.

Provides register_commands() which uses deferred imports to keep
``launchkit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from launchkit.commands.hooks import hooks
    from launchkit.commands.plugins import plugins

    cli.add_command(hooks)
    cli.add_command(plugins)
