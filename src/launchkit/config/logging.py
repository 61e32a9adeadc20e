"""Log output for launchkit's own loggers.

Every launchkit module logs through ``logging.getLogger(__name__)``, so all
records land under the ``launchkit`` logger. A host embedding the plugin
manager can configure that tree however it likes; ``configure_logging`` is
the setup the ``launchkit`` CLI uses:

- console (default): structlog's console renderer on stderr
- JSON (``--log-json``): one JSON object per line on stderr

Only the ``launchkit`` logger gets a handler. The root logger, and with it
the host's own logging setup, is left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

import structlog

LOGGER_NAME = "launchkit"


def _processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Route the ``launchkit`` logger tree through structlog's formatter.

    Calling it again replaces the handler installed by the previous call.

    Args:
        verbose: Log milestone and registry detail at DEBUG; otherwise only
            warnings (hook failures, out-of-order milestones, broken entry
            points) are shown.
        log_json: Render JSON lines instead of console output.
        stream: Where to write. Defaults to ``sys.stderr``.

    Returns:
        The installed handler.
    """
    stream = stream or sys.stderr
    shared = _processors()

    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return handler
