"""Logfire observability initialization and instrumentation."""

import logging

import logfire

from dekigokoro import __version__
from dekigokoro.config import Settings

logger = logging.getLogger(__name__)


def initialize_logfire(settings: Settings) -> bool:
    """
    Initialize Logfire for a host application using this client.

    Call once at startup, before creating clients. Instruments HTTPX so every
    API request is traced, and bridges Python logging into Logfire.

    Args:
        settings: Settings containing the Logfire token

    Returns:
        True if Logfire was configured, False if skipped or failed.
    """
    if not settings.logfire_token:
        logger.warning("Logfire token not set - observability disabled")
        return False

    try:
        logfire.configure(
            token=settings.logfire_token,
            service_name="dekigokoro",
            service_version=__version__,
            environment=settings.environment,
        )

        logfire.instrument_httpx()

        root_logger = logging.getLogger()
        if not any(
            isinstance(h, logfire.LogfireLoggingHandler) for h in root_logger.handlers
        ):
            root_logger.addHandler(logfire.LogfireLoggingHandler())

        logger.info("Logfire tracking initialized")
        return True

    except Exception as e:
        # Continue running - observability is optional
        logger.warning(f"Failed to initialize Logfire: {e}")
        return False
