"""Logging for wgraph.

Every module logs through a child of the ``wgraph`` logger obtained with
:func:`get_logger`. Library code only emits DEBUG records (search outcomes,
dropped edges), so the package is silent at the default INFO level; the
``wgraph`` CLI raises or lowers the level with :func:`set_global_log_level`.
"""

import logging
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "wgraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handler installed by setup_root_logger; None until configured
_handler: Optional[logging.Handler] = None


def _root() -> logging.Logger:
    return logging.getLogger(ROOT_LOGGER_NAME)


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the single console handler on the ``wgraph`` logger.

    Does nothing if a handler is already installed; call
    :func:`reset_logging` first to replace it (tests pass a StringIO-backed
    handler this way).

    Args:
        level: Level for the ``wgraph`` logger.
        format_string: Record format. Defaults to ``DEFAULT_FORMAT``.
        handler: Destination handler. Defaults to a stdout StreamHandler.
    """
    global _handler

    if _handler is not None:
        return

    root_logger = _root()
    root_logger.setLevel(level)

    _handler = handler if handler is not None else logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(_handler)

    # Records still reach the process root so pytest's caplog captures them
    root_logger.propagate = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a wgraph module.

    Args:
        name: Dotted module name, normally ``__name__``.

    Returns:
        Logger at NOTSET, deferring its level to the ``wgraph`` logger.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: Union[int, str]) -> None:
    """Set the level of the ``wgraph`` logger and its console handler.

    Args:
        level: A logging level number or name such as ``"DEBUG"``.

    Raises:
        ValueError: If ``level`` is an unknown level name.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level '{level}'.")
        level = resolved

    setup_root_logger()
    _root().setLevel(level)
    if _handler is not None:
        _handler.setLevel(level)


def enable_debug_logging() -> None:
    """Show search and graph-building DEBUG records."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to INFO, hiding library DEBUG records."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Remove the installed handler and clear the ``wgraph`` level.

    Handlers added to the ``wgraph`` logger by other code are left in place.
    """
    global _handler

    root_logger = _root()
    if _handler is not None:
        root_logger.removeHandler(_handler)
        _handler = None
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
