"""Structured logging via structlog.

Library modules log through ``logging.getLogger(__name__)`` and never
configure anything themselves. Whoever embeds pipegen calls
``configure_structlog`` once at startup.

Renderer selection:
  debug=True  — `ConsoleRenderer` with colours for local runs.
  debug=False — `JSONRenderer` for CI logs.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_structlog(debug: bool = True) -> None:
    """Configure structlog and bridge stdlib logging into it.

    Calling multiple times is safe — structlog is idempotent.
    """
    shared_processors: list = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if debug:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if debug else logging.INFO
        ),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    # Bridge stdlib loggers (detector, builder) onto the same stream.
    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        level=logging.DEBUG if debug else logging.INFO,
        force=True,
    )
