"""Tests for the launchkit exception hierarchy."""

import pytest

from launchkit.exceptions import BroadcastError, LaunchkitError, PluginConfigError


class TestPluginConfigError:
    def test_message_and_fields(self) -> None:
        exc = PluginConfigError("splashscreen", "colour", "unknown key")
        assert str(exc) == "[splashscreen] colour: unknown key"
        assert exc.section == "splashscreen"
        assert exc.key == "colour"

    def test_is_value_error(self) -> None:
        assert isinstance(PluginConfigError("s", "k", "m"), ValueError)
        assert isinstance(PluginConfigError("s", "k", "m"), LaunchkitError)


class TestBroadcastError:
    def test_carries_failures_and_milestone(self) -> None:
        failures = [RuntimeError("a"), KeyError("b")]
        exc = BroadcastError("2 plugin(s) failed", failures, "configure")
        assert exc.milestone == "configure"
        assert list(exc.exceptions) == failures
        assert exc.message == "2 plugin(s) failed"

    def test_is_launchkit_error_and_group(self) -> None:
        exc = BroadcastError("failed", [RuntimeError("a")], "after_setup")
        assert isinstance(exc, LaunchkitError)
        assert isinstance(exc, ExceptionGroup)

    def test_split_keeps_type_and_milestone(self) -> None:
        exc = BroadcastError("failed", [RuntimeError("a"), KeyError("b")], "after_setup")
        runtime, rest = exc.split(RuntimeError)
        assert isinstance(runtime, BroadcastError)
        assert runtime.milestone == "after_setup"
        assert len(runtime.exceptions) == 1
        assert rest is not None
        assert len(rest.exceptions) == 1

    def test_can_be_raised_and_caught(self) -> None:
        with pytest.raises(LaunchkitError):
            raise BroadcastError("failed", [RuntimeError("a")], "configure")
