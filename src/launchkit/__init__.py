"""launchkit: lifecycle plugins for an interpreter bootstrap sequence."""

from launchkit.plugins.base import Plugin
from launchkit.plugins.hookspecs import hookimpl
from launchkit.plugins.manager import PluginManager

__version__ = "0.1.0"

__all__ = ["Plugin", "PluginManager", "__version__", "hookimpl"]
