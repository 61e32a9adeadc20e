"""Extension layer: lifecycle hook contract and ordered broadcast.

Discovery: entry_points (pip-installed) in the ``launchkit.plugins`` group.
INVARIANT: Hook failures propagate to the caller of the broadcast.
"""

from launchkit.plugins.base import Plugin
from launchkit.plugins.hookspecs import HOOK_NAMES, LaunchkitHookSpec, hookimpl
from launchkit.plugins.manager import PluginManager, validate_plugin

__all__ = [
    "HOOK_NAMES",
    "LaunchkitHookSpec",
    "Plugin",
    "PluginManager",
    "hookimpl",
    "validate_plugin",
]
