"""Rich renderers for the CLI listings.

Each renderer writes a table to a StringIO-backed Console and returns the
rendered text. ``--json`` output bypasses these entirely.
"""

from __future__ import annotations

from typing import Any

from rich.table import Table
from rich.text import Text

from launchkit.output.console import create_console, get_output


def render_hooks(hooks: list[dict[str, Any]]) -> str:
    """Render the hook contract: one row per hook, in milestone order."""
    console = create_console()
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Hook", style="lk.hook")
    table.add_column("Arguments", style="lk.args")
    table.add_column("Description")

    for hook in hooks:
        table.add_row(hook["name"], ", ".join(hook["args"]), hook["summary"])

    console.print(table)
    return get_output(console).rstrip("\n")


def render_plugins(plugins: list[dict[str, Any]]) -> str:
    """Render plugins in dispatch order with the hooks each one overrides."""
    console = create_console()
    if not plugins:
        console.print(Text("No plugins found.", style="lk.none"))
        return get_output(console).rstrip("\n")

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("#", style="lk.order", justify="right")
    table.add_column("Plugin", style="lk.plugin")
    table.add_column("Hooks")

    for plugin in plugins:
        hooks = ", ".join(plugin["hooks"]) or "-"
        table.add_row(str(plugin["order"]), plugin["name"], hooks)

    console.print(table)
    return get_output(console).rstrip("\n")
