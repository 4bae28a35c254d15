# pagekit/logger.py
import logging
import sys

import structlog

from pagekit.config import settings


def configure_logging(debug: bool | None = None) -> None:
    """
    Routes pagekit events through stdlib loggers named after their module.

    Events render as JSON lines carrying the logger name, e.g.
    {"event": "pagination_query_prepared", "logger": "pagekit.pagination.service", ...}.
    The console renderer replaces JSON when debug is on, which also lets
    debug-level pagination events through.
    """
    if debug is None:
        debug = settings.DEBUG
    log_level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
        force=True,
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    return structlog.get_logger(name or settings.PROJECT_NAME)
