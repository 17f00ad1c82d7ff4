"""Logging and observability setup using Pydantic Logfire."""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from review_action.config.settings import Settings


def setup_logging(log_level: str = "INFO") -> None:
    """Configure application logging.

    Sets up logging to stdout, where the Actions runner captures it, and
    reduces noise from verbose third-party libraries.
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        force=True,  # Reconfigure if already setup
    )

    # Reduce noise from verbose libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("github").setLevel(logging.WARNING)


def setup_observability(settings: "Settings") -> None:
    """Configure logging, then tracing of model and GitHub calls if enabled.

    Tracing is on only when ``LOGFIRE_TOKEN`` is set and the optional
    ``logfire`` extra is installed.
    """
    setup_logging(settings.log_level)

    if settings.logfire_token:
        _enable_logfire(settings.logfire_token)


def _enable_logfire(token: str) -> None:
    logger = logging.getLogger(__name__)
    try:
        import logfire
    except ImportError:
        logger.warning(
            "LOGFIRE_TOKEN is set but logfire is not installed; "
            "install ai-code-review-action[logfire] to trace review runs"
        )
        return

    logfire.configure(token=token, service_name="ai-code-review-action")
    # Spans for each chunk's agent run and for the raw diff downloads
    logfire.instrument_pydantic_ai()
    logfire.instrument_httpx()
    logger.info("Logfire tracing enabled")
