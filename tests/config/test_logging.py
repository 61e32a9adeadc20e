"""Tests for structlog configuration."""

from __future__ import annotations

import io
import json
import logging

import pytest
import structlog

from launchkit.config.logging import configure_logging
from launchkit.plugins.manager import PluginManager


def _json_lines(err: str) -> list[dict[str, object]]:
    return [json.loads(line) for line in err.strip().splitlines()]


class TestLevels:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("launchkit").level == logging.DEBUG

    def test_quiet_by_default(self) -> None:
        configure_logging()
        assert logging.getLogger("launchkit").level == logging.WARNING

    def test_other_loggers_are_not_routed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("urllib3").debug("connection noise")
        assert capfd.readouterr().err == ""

    def test_repeated_calls_keep_one_handler(self) -> None:
        configure_logging(verbose=True)
        handler = configure_logging(log_json=True)
        assert logging.getLogger("launchkit").handlers == [handler]


class TestHostLogging:
    def test_root_logger_untouched(self) -> None:
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        configure_logging(verbose=True)
        assert root.handlers == handlers
        assert root.level == level

    def test_records_do_not_reach_root(self) -> None:
        seen: list[logging.LogRecord] = []

        class _Collect(logging.Handler):
            def emit(self, record: logging.LogRecord) -> None:
                seen.append(record)

        root = logging.getLogger()
        collector = _Collect()
        root.addHandler(collector)
        try:
            configure_logging(stream=io.StringIO())
            logging.getLogger("launchkit.plugins.manager").warning("hook failed")
        finally:
            root.removeHandler(collector)
        assert seen == []

    def test_custom_stream(self) -> None:
        buf = io.StringIO()
        configure_logging(log_json=True, stream=buf)
        logging.getLogger("launchkit.test").warning("to the buffer")
        (parsed,) = _json_lines(buf.getvalue())
        assert parsed["event"] == "to the buffer"
        assert parsed["logger"] == "launchkit.test"


class TestRendering:
    def test_console_mode_smoke(self) -> None:
        configure_logging(verbose=True)
        structlog.get_logger("launchkit.test").warning("hello world", key="val")

    def test_json_structlog_event(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("launchkit.test").warning("json test", answer=42)
        (parsed,) = _json_lines(capfd.readouterr().err)
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "launchkit.test"
        assert "timestamp" in parsed

    def test_registry_debug_lines_are_structured(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        class Observer:
            pass

        configure_logging(verbose=True, log_json=True)
        PluginManager().add(Observer())

        (parsed,) = _json_lines(capfd.readouterr().err)
        assert parsed["event"] == "Registered plugin: Observer"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "launchkit.plugins.manager"

    def test_hook_failure_warning_is_structured(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        class Broken:
            def configure(self, config: object) -> None:
                raise RuntimeError("bad config")

        configure_logging(log_json=True)
        pm = PluginManager()
        pm.add(Broken())
        with pytest.raises(RuntimeError):
            pm.configure({})

        (parsed,) = _json_lines(capfd.readouterr().err)
        assert parsed["event"] == "Plugin Broken raised during configure; aborting broadcast"
        assert parsed["level"] == "warning"
