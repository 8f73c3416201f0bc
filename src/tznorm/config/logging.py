"""structlog configuration for tznorm.

Library modules log through stdlib ``logging.getLogger(__name__)``; this
module routes those records through structlog's ProcessorFormatter.

Two output modes, both on stderr:
- Human (default): structlog console renderer, colored on a TTY
- JSON (``--log-json``): one JSON object per line
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "tznorm"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Configure structlog and install a single stderr handler.

    Args:
        verbose: Show tznorm DEBUG records (per-leaf conversion misses,
            resolver decisions).  When False, only WARNING and above.
        log_json: Emit JSON lines instead of console output.
    """
    shared = _shared_processors()
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("tzlocal").setLevel(logging.WARNING)
