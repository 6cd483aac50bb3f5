"""Structured logging via structlog.

Configures structlog once at CLI startup. Library modules keep using
`logging.getLogger(__name__)`; the stdlib bridge below routes their
records to the same output stream.

Renderer selection:
  json_output=False: `ConsoleRenderer` for people at a terminal.
  json_output=True:  `JSONRenderer` for machine-parseable logs.

Logs go to stderr so `claudenv detect --json` keeps a clean stdout.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_structlog(debug: bool = False, json_output: bool = False) -> None:
    """Configure structlog for the process lifetime.

    Calling multiple times is safe; the last call wins.
    """
    level = logging.DEBUG if debug else logging.WARNING

    shared_processors: list = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # Bridge stdlib logging → structlog so detector/generator modules
    # render through the same processor chain.
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)
