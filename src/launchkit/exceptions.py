"""Exception hierarchy for launchkit.

Hook failures are never swallowed: a raising hook propagates to the caller
of the broadcast, either unchanged (abort policy) or gathered into a
:class:`BroadcastError` (collect policy).
"""

from __future__ import annotations

from collections.abc import Sequence


class LaunchkitError(Exception):
    """Base class for errors raised by launchkit and its plugins."""


class PluginConfigError(LaunchkitError, ValueError):
    """A plugin rejected the configuration section it owns.

    Raised from ``configure`` for unknown keys or invalid values.
    """

    def __init__(self, section: str, key: str, message: str) -> None:
        super().__init__(f"[{section}] {key}: {message}")
        self.section = section
        self.key = key


class BroadcastError(LaunchkitError, ExceptionGroup):
    """One or more plugins raised while a milestone was being broadcast.

    ``exceptions`` holds the per-plugin failures in registration order.
    """

    def __new__(
        cls,
        message: str,
        exceptions: Sequence[Exception],
        milestone: str,
    ) -> BroadcastError:
        self = super().__new__(cls, message, exceptions)
        self.milestone = milestone
        return self

    def __init__(
        self,
        message: str,
        exceptions: Sequence[Exception],
        milestone: str,
    ) -> None:
        super().__init__(message, exceptions)

    def derive(self, excs: Sequence[Exception]) -> BroadcastError:
        return BroadcastError(self.message, excs, self.milestone)
