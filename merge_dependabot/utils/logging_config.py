"""
Logging configuration using structlog.

The action runs inside GitHub Actions, where warnings and errors become
annotations only when printed as workflow commands (``::warning::...``).
The default ``github`` format renders log lines that way; ``json`` and
``console`` are available for local runs. Log lines go to stderr so that
command output on stdout stays machine-readable.
"""

import logging
import sys
from typing import Any, Literal

import structlog

LogFormat = Literal["github", "json", "console"]

# Levels without a workflow command print the bare message.
_WORKFLOW_COMMANDS = {
    "debug": "debug",
    "warning": "warning",
    "error": "error",
    "critical": "error",
    "exception": "error",
}

_RESERVED_KEYS = {"event", "level", "timestamp"}


def escape_workflow_data(value: str) -> str:
    """Escape a message so it survives as workflow command data."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class GitHubActionsRenderer:
    """Render structlog events as GitHub Actions workflow commands.

    ``log.warning("bad input")`` becomes ``::warning::bad input``. Extra
    key/value pairs are appended as ``key=value`` after the message.
    """

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> str:
        level = event_dict.get("level", method_name)
        message = str(event_dict.get("event", ""))

        extras = [f"{key}={value}" for key, value in event_dict.items() if key not in _RESERVED_KEYS]
        if extras:
            message = f"{message} {' '.join(extras)}"

        command = _WORKFLOW_COMMANDS.get(level)
        if command is None:
            return message
        return f"::{command}::{escape_workflow_data(message)}"


def _build_renderer(log_format: LogFormat) -> Any:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    return GitHubActionsRenderer()


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    return structlog.PrintLogger(sys.stderr)


def configure_logging(log_level: str = "INFO", log_format: LogFormat = "github") -> None:
    """Configure structured logging.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output renderer, one of ``github``, ``json`` or ``console``
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _build_renderer(log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, log_level.upper(), logging.INFO)),
        context_class=dict,
        logger_factory=_stderr_logger_factory,
        # Loggers must pick up sys.stderr at call time, not at first use.
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a logger instance.

    Args:
        name: Optional logger name (typically __name__ from calling module)

    Returns:
        A structlog logger instance

    Example:
        >>> log = get_logger(__name__)
        >>> log.info("inputs_resolved", merge_method="squash")
    """
    return structlog.get_logger(name)
