"""Structured logging for servicecfg. Diagnostics go to stderr as JSON lines."""

import sys

import structlog

LOG_LEVELS = {
    "TRACE": 5,
    "DEBUG": 10,
    "INFO": 20,
}


def configure_logging(level: str) -> None:
    """Route structlog output to stderr, dropping events below ``level``."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVELS.get(level, 20)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,  # Level may change on settings reload
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger configured from the current settings.

    Args:
        name: Logger name, usually ``__name__``
    """
    from servicecfg.config import get_settings

    configure_logging(get_settings().logging.level)
    return structlog.get_logger(name)
