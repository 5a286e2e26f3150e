"""
Logging utilities for the deltablots library.
"""

import logging
import sys
from typing import Optional

import structlog

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
]


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger bound to a standard library logger.

    Keyword arguments passed to the logging methods are rendered as
    ``key=value`` pairs after the event message.

    Args:
        name: Logger name. If None, uses the calling module's name

    Returns:
        A structlog bound logger writing through the standard library
    """
    if name is None:
        import inspect
        frame = inspect.currentframe()
        if frame and frame.f_back:
            name = frame.f_back.f_globals.get('__name__', 'deltablots')
        else:
            name = 'deltablots'

    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    log_level: str = "INFO",
    json_output: bool = False,
    dev_mode: bool = True
) -> None:
    """
    Configure standard library logging for the library.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_output: Whether to output JSON format
        dev_mode: Whether to use dev-friendly console output
    """
    if json_output:
        # JSON format for production
        formatter = logging.Formatter(
            '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'
        )
    elif dev_mode:
        # Human-readable format for development
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    else:
        formatter = logging.Formatter(
            "%(levelname)s - %(name)s - %(message)s"
        )

    library_logger = logging.getLogger("hother.deltablots")
    library_logger.setLevel(getattr(logging, log_level.upper()))

    # Replace our own handler if called multiple times
    for handler in list(library_logger.handlers):
        if getattr(handler, "_deltablots_handler", False):
            library_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler._deltablots_handler = True
    library_logger.addHandler(handler)
    library_logger.propagate = False
