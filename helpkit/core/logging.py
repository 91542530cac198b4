"""
Structured logging configuration for helpkit.

Helper modules log through structlog loggers bound to the stdlib ``helpkit``
logger. That logger has no handlers until ``setup_logging`` runs, so the
helpers stay silent when used as a library; the CLI calls ``setup_logging``
to get rich or JSON output on stderr.
"""

import logging
import sys
import uuid
from typing import Optional

import structlog
from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "helpkit"

# Global correlation ID for tracing a CLI run
_correlation_id: Optional[str] = None


def set_correlation_id(correlation_id: Optional[str] = None) -> str:
    """Set a correlation ID for the current execution context."""
    global _correlation_id
    _correlation_id = correlation_id or str(uuid.uuid4())[:8]
    return _correlation_id


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID."""
    return _correlation_id


def add_correlation_id(logger, method_name, event_dict):
    """Add correlation ID to log entries."""
    if _correlation_id:
        event_dict["correlation_id"] = _correlation_id
    return event_dict


def _build_handler(rich_output: bool) -> logging.Handler:
    if rich_output:
        # structlog already renders time and level
        return RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_level=False,
            show_path=False,
            markup=False,
        )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def setup_logging(debug: bool = False, rich_output: bool = True) -> None:
    """
    Configure structured logging on stderr.

    Calling it again replaces the previous handler, so the level and output
    format can be switched per run.

    Args:
        debug: Enable debug level logging
        rich_output: Use rich formatting for console output, JSON lines otherwise
    """
    level = logging.DEBUG if debug else logging.INFO

    processors = [
        structlog.contextvars.merge_contextvars,
        add_correlation_id,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.dev.set_exc_info,
    ]
    if rich_output:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=False,
                exception_formatter=structlog.dev.rich_traceback,
            )
        )
    else:
        processors.append(structlog.processors.JSONRenderer())

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.addHandler(_build_handler(rich_output))
    root.setLevel(level)
    root.propagate = False

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def reset_logging() -> None:
    """Detach helpkit handlers and return structlog to its defaults."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
    root.propagate = True
    structlog.reset_defaults()


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger writing to the stdlib ``helpkit.<name>`` logger."""
    return structlog.wrap_logger(logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}"))


# Convenience loggers for the helper modules
i18n_logger = get_logger("i18n")
numeric_logger = get_logger("numeric")
objects_logger = get_logger("objects")
cli_logger = get_logger("cli")
