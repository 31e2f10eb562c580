"""Package-wide logging for uGraph.

Every module obtains its logger through `get_logger(__name__)`. All loggers
hang off the single ``ugraph`` root logger, which owns the only handler.
Library code logs at DEBUG; the default root level is taken from the
``UGRAPH_LOG_LEVEL`` environment variable (see `ugraph.config`).
"""

import logging
import sys
from typing import Optional, Union

from ugraph.config import DEFAULT_LOG_FORMAT, ROOT_LOGGER_NAME, env_log_level

_root_configured = False


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the handler on the ``ugraph`` root logger.

    Only the first call has an effect; use `reset_logging` to start over.

    Args:
        level: Logging level. Defaults to ``UGRAPH_LOG_LEVEL`` or INFO.
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).
    """
    global _root_configured

    if _root_configured:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(env_log_level() if level is None else level)
    root.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_LOG_FORMAT))
    root.addHandler(handler)

    # pytest's caplog hooks the stdlib root logger
    root.propagate = True

    _root_configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger that inherits the ``ugraph`` root configuration.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        The logger, with its own level left at NOTSET.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: Union[int, str]) -> None:
    """Change the level of the root logger and its handlers.

    Args:
        level: A numeric level or a level name such as ``"DEBUG"``.
    """
    setup_root_logger()
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level '{name}'.")

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the root handler and forget the configuration (used by tests)."""
    global _root_configured
    _root_configured = False

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
