"""Logging for roverctl: every record goes to stderr through structlog.

Stdlib ``logging`` calls in the services and structlog calls in telemetry
share one processor chain, so ``--log-json`` turns both into JSON lines.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import Processor

_SHARED_PROCESSORS: tuple[Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
)


def _stderr_handler(log_json: bool) -> logging.Handler:
    renderer: Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=list(_SHARED_PROCESSORS),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install the stderr handler. ``roverctl.*`` logs at DEBUG under *verbose*, else WARNING."""
    structlog.configure(
        processors=[*_SHARED_PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers[:] = [_stderr_handler(log_json)]
    root.setLevel(logging.WARNING)
    logging.getLogger("roverctl").setLevel(logging.DEBUG if verbose else logging.WARNING)
