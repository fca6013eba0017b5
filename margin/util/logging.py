"""Standard library logging, forwarded to Logfire.

Margin's own code logs through logfire. Libraries that use ``logging``
(uvicorn, alembic, aiosmtplib) are routed through the same pipeline so
their records land next to the request spans.
"""

import logging

import logfire

from margin.config import Settings

# Chatty at INFO; only their warnings are interesting
QUIET_LOGGERS = ("httpx", "httpcore", "aiosmtplib", "uvicorn.access")


def log_level(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Send stdlib log records to Logfire at the environment's level."""
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    get_logger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
