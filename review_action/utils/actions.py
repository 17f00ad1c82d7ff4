"""GitHub Actions workflow commands used to report the run status."""

import logging

logger = logging.getLogger(__name__)


def escape_data(message: str) -> str:
    """Escape a workflow command message (``%``, CR and LF are reserved)."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_failed(message: str) -> None:
    """Mark the step as failed with ``message``.

    Emits an ``::error::`` workflow command, which the runner shows as an
    annotation on the run. The caller is responsible for the non-zero exit.
    """
    logger.error(message)
    print(f"::error::{escape_data(message)}", flush=True)
