"""Base class for launchkit plugins.

Every hook defaults to a no-op so subclasses override only the phases they
care about. Inheriting is optional: the plugin manager accepts any object
and treats missing hooks as no-ops.
"""

from __future__ import annotations

from typing import Any


class Plugin:
    """A bootstrap lifecycle observer."""

    def configure(self, config: Any) -> None:
        """Validate owned config keys and fill in their defaults."""

    def before_launch(self, config: Any) -> None:
        """Called right before the interpreter is downloaded and launched."""

    def after_setup(self, runtime: Any) -> None:
        """Called once the interpreter is ready, before any user script."""

    def after_startup(self, runtime: Any) -> None:
        """Called once startup scripts have finished."""

    def on_user_error(self, error: Any) -> None:
        """Called whenever a user script raises."""
