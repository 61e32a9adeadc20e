"""Built-in plugin that logs each bootstrap milestone with its timing.

Elapsed times are measured from ``configure``, the first milestone.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

from launchkit.plugins.base import Plugin

logger = logging.getLogger(__name__)


class LifecycleLogPlugin(Plugin):
    """Records and logs when each milestone is reached."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._started: float | None = None
        self.timings: dict[str, float] = {}
        self.user_errors: int = 0

    def configure(self, config: Any) -> None:
        self._started = self._clock()
        self._record("configure")

    def before_launch(self, config: Any) -> None:
        self._record("before_launch")

    def after_setup(self, runtime: Any) -> None:
        self._record("after_setup")

    def after_startup(self, runtime: Any) -> None:
        elapsed = self._record("after_startup")
        logger.info("Startup complete in %.3fs", elapsed)

    def on_user_error(self, error: Any) -> None:
        self.user_errors += 1
        logger.warning("User code raised: %s", error)

    def _record(self, milestone: str) -> float:
        now = self._clock()
        if self._started is None:
            self._started = now
        elapsed = now - self._started
        self.timings[milestone] = elapsed
        logger.debug("Milestone %s reached after %.3fs", milestone, elapsed)
        return elapsed
