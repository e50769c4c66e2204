"""Plain-message logging helpers consumed by the action.

These mirror the GitHub Actions toolkit's ``info``/``warning``/``error``/
``debug`` calls. Each takes a single human-readable message.
"""

from merge_dependabot.utils.logging_config import get_logger

log = get_logger(__name__)


def log_info(message: str) -> None:
    log.info(message)


def log_warning(message: str) -> None:
    log.warning(message)


def log_error(message: str | BaseException) -> None:
    """Log an error; exceptions are logged with their traceback."""
    if isinstance(message, BaseException):
        log.error(str(message), exc_info=message)
        return
    log.error(message)


def log_debug(message: str) -> None:
    log.debug(message)
