"""Built-in splashscreen plugin.

Shows a status spinner while the interpreter downloads and the startup
scripts run, and takes it down once startup completes.

Owns the ``splashscreen`` section of the host configuration:

    enabled    show the spinner at all (default: true)
    autoclose  close it after startup (default: true)

A user error always closes the spinner so the error is not hidden behind it.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from rich.console import Console
from rich.status import Status

from launchkit.exceptions import PluginConfigError
from launchkit.plugins.base import Plugin

logger = logging.getLogger(__name__)

SECTION = "splashscreen"

_DEFAULTS: dict[str, bool] = {
    "enabled": True,
    "autoclose": True,
}

LAUNCH_MESSAGE = "Downloading and launching the interpreter..."
STARTUP_MESSAGE = "Running startup scripts..."


class SplashscreenPlugin(Plugin):
    """Startup spinner driven by the bootstrap milestones.

    If bootstrap fails before startup completes (a hook raising under the
    ``abort`` policy, or a failed download), neither ``after_startup`` nor
    ``on_user_error`` fires. The host must call :meth:`close` on that path.

    Parameters:
        console: Console the spinner renders to. Defaults to stderr.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)
        self._options: dict[str, bool] = dict(_DEFAULTS)
        self._status: Status | None = None

    @property
    def is_open(self) -> bool:
        return self._status is not None

    @property
    def message(self) -> str | None:
        """Text currently shown next to the spinner, or None when closed."""
        if self._status is None:
            return None
        return str(self._status.status)

    @property
    def options(self) -> dict[str, bool]:
        return dict(self._options)

    # ------------------------------------------------------------------
    # Lifecycle hooks
    # ------------------------------------------------------------------

    def configure(self, config: MutableMapping[str, Any]) -> None:
        """Validate the ``splashscreen`` section and fill in its defaults."""
        section = config.setdefault(SECTION, {})
        if not isinstance(section, MutableMapping):
            raise PluginConfigError(SECTION, SECTION, "expected a table")

        for key, value in section.items():
            if key not in _DEFAULTS:
                raise PluginConfigError(SECTION, key, "unknown key")
            if not isinstance(value, bool):
                raise PluginConfigError(
                    SECTION, key, f"expected a bool, got {type(value).__name__}"
                )

        for key, default in _DEFAULTS.items():
            section.setdefault(key, default)
        self._options = {key: section[key] for key in _DEFAULTS}

    def before_launch(self, config: MutableMapping[str, Any]) -> None:
        """Open the spinner."""
        if not self._options["enabled"] or self._status is not None:
            return
        self._status = self._console.status(LAUNCH_MESSAGE)
        self._status.start()
        logger.debug("Splashscreen opened")

    def after_setup(self, runtime: Any) -> None:
        """Switch the message over to the startup scripts."""
        if self._status is not None:
            self._status.update(STARTUP_MESSAGE)

    def after_startup(self, runtime: Any) -> None:
        if self._options["autoclose"]:
            self.close()

    def on_user_error(self, error: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Stop the spinner. Safe to call when it is not open."""
        if self._status is None:
            return
        self._status.stop()
        self._status = None
        logger.debug("Splashscreen closed")
