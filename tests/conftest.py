"""Shared pytest fixtures and test helpers for launchkit tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from typing import Any

import pytest
from click.testing import CliRunner

from launchkit.plugins.base import Plugin

# One entry per hook call: (plugin name, hook name, argument).
CallLog = list[tuple[str, str, Any]]


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore the launchkit logger after each test.

    CLI invocations call ``configure_logging``, which gives the logger its
    own handler and stops propagation to the root (where caplog listens).
    """
    launchkit = logging.getLogger("launchkit")
    handlers = launchkit.handlers[:]
    level = launchkit.level
    propagate = launchkit.propagate
    yield
    launchkit.handlers = handlers
    launchkit.setLevel(level)
    launchkit.propagate = propagate


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def call_log() -> CallLog:
    """Shared, ordered record of hook calls across plugins."""
    return []


# ---------------------------------------------------------------------------
# Shared test plugins
# ---------------------------------------------------------------------------


class RecordingPlugin(Plugin):
    """Plugin that records every hook call into a shared log."""

    def __init__(self, name: str, log: CallLog) -> None:
        self.name = name
        self.log = log

    def configure(self, config: Any) -> None:
        self.log.append((self.name, "configure", config))

    def before_launch(self, config: Any) -> None:
        self.log.append((self.name, "before_launch", config))

    def after_setup(self, runtime: Any) -> None:
        self.log.append((self.name, "after_setup", runtime))

    def after_startup(self, runtime: Any) -> None:
        self.log.append((self.name, "after_startup", runtime))

    def on_user_error(self, error: Any) -> None:
        self.log.append((self.name, "on_user_error", error))


class FailingPlugin(RecordingPlugin):
    """Records like RecordingPlugin, then raises from one chosen hook."""

    def __init__(self, name: str, log: CallLog, fail_on: str) -> None:
        super().__init__(name, log)
        self.fail_on = fail_on

    def _maybe_fail(self, hook: str) -> None:
        if hook == self.fail_on:
            msg = f"{self.name} exploded in {hook}"
            raise RuntimeError(msg)

    def configure(self, config: Any) -> None:
        super().configure(config)
        self._maybe_fail("configure")

    def before_launch(self, config: Any) -> None:
        super().before_launch(config)
        self._maybe_fail("before_launch")

    def after_setup(self, runtime: Any) -> None:
        super().after_setup(runtime)
        self._maybe_fail("after_setup")

    def after_startup(self, runtime: Any) -> None:
        super().after_startup(runtime)
        self._maybe_fail("after_startup")

    def on_user_error(self, error: Any) -> None:
        super().on_user_error(error)
        self._maybe_fail("on_user_error")


def hook_names(log: CallLog) -> list[tuple[str, str]]:
    """Drop the argument column from a call log."""
    return [(plugin, hook) for plugin, hook, _arg in log]
