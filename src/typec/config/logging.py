"""structlog configuration for typec.

Two output modes:
- Human (default): colored console output to stderr
- JSON (log_json=True): Structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys

import structlog

_HANDLER_NAME = "typec.structlog"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and output routing.

    Output goes to a single handler on the ``typec`` logger, which stops
    propagating; handlers and levels on the root logger are left untouched.

    Args:
        verbose: Enable DEBUG-level output for the ``typec`` logger
            (guard rejection traces). When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    typec_level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler.set_name(_HANDLER_NAME)

    typec_logger = logging.getLogger("typec")
    for existing in [h for h in typec_logger.handlers if h.get_name() == _HANDLER_NAME]:
        typec_logger.removeHandler(existing)
    typec_logger.addHandler(handler)
    typec_logger.setLevel(typec_level)
    typec_logger.propagate = False
