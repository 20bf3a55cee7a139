"""Logging setup for the command line entry point."""

import logging

import structlog


def configure_logging(debug: bool = False) -> None:
    """Configure structlog to render key/value events on the console.

    INFO and above are shown by default, DEBUG as well when ``debug`` is set.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if debug else logging.INFO),
        cache_logger_on_first_use=True,
    )
