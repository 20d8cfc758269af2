"""Unified logging for rateconv with console and optional file output."""
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

# Logs go to stderr so stdout only ever carries the converted rate
console = Console(stderr=True)

ROOT_LOGGER = "rateconv"

# Track if file logging has been set up
_file_logging_configured = False


def _root_logger() -> logging.Logger:
    root_logger = logging.getLogger(ROOT_LOGGER)

    # Only add console handler if not already present
    if not any(isinstance(h, RichHandler) for h in root_logger.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler.setLevel(logging.WARNING)
        root_logger.addHandler(handler)
        # Handlers do the filtering
        root_logger.setLevel(logging.DEBUG)

    return root_logger


def setup_file_logging(log_file: str, verbose: bool = False):
    """Set up file logging for rateconv.

    Args:
        log_file: Path to the log file
        verbose: Enable debug-level logging

    Note:
        Creates the log directory if it doesn't exist.
    """
    global _file_logging_configured

    if _file_logging_configured:
        return

    target_log_file = Path(log_file).expanduser()
    target_log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = _root_logger()
    file_handler = logging.FileHandler(target_log_file)
    file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Detailed format for file logs
    file_formatter = logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)

    _file_logging_configured = True

    root_logger.info(f"rateconv logging initialized: {target_log_file}")


def close_file_logging() -> None:
    """Detach and close file handlers added by setup_file_logging()."""
    global _file_logging_configured

    root_logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(root_logger.handlers):
        if isinstance(handler, logging.FileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    _file_logging_configured = False


def set_log_level(debug: bool = False) -> None:
    """Show DEBUG records on the console, or only warnings and errors."""
    for handler in _root_logger().handlers:
        if isinstance(handler, RichHandler):
            handler.setLevel(logging.DEBUG if debug else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the rateconv hierarchy.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger whose records reach the shared Rich console handler

    Note:
        File logging must be enabled separately via setup_file_logging()
    """
    root_logger = _root_logger()
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return root_logger.getChild(name)
