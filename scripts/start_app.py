#!/usr/bin/env python3
"""Start the Margin API with Logfire error tracking for startup errors."""

import sys

import logfire
import uvicorn

from margin.config import Settings
from margin.util.logging import setup_logging
from margin.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Logfire first: the logging handler and app instrumentation both need it
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info("Starting Margin API", host=settings.host, port=settings.port)

        uvicorn.run(
            "margin.interface.api.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
