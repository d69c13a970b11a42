"""Logging configuration for the storefront."""

import logging
import sys

import structlog

# Suppress noisy library loggers
logging.getLogger("sqlalchemy").setLevel(logging.WARNING)


def configure_logging(verbose: bool = False) -> None:
    """Route structlog output to stderr for the command line front end."""
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
