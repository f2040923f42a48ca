"""
Logging configuration for the aiapi client library.

This module sets up a hierarchical logging structure with specialized loggers:
- aiapi (parent logger, console output once init_logging() ran)
- aiapi.client (request lifecycle → client_YYYY-MM-DD_HH-MM-SS.log)
- aiapi.transport (HTTP dumps → transport_YYYY-MM-DD_HH-MM-SS.log)

File handlers are attached only when init_logging() was given a log folder.
They open their file on the first record, so unused channels never create
empty files.
Without init_logging() the loggers behave like any library logger and leave
handler configuration to the application.
"""

import logging
import os
import threading
from datetime import datetime
from typing import Optional

ROOT_LOGGER_NAME = "aiapi"
LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] [%(threadName)s] [%(filename)s:%(lineno)d]:  %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_setup_lock = threading.Lock()
_loggers_initialized = False
_child_loggers_setup = set()
_log_timestamp: Optional[str] = None
_log_folder: Optional[str] = None

# Channels with their own log file
LOG_CHANNELS = ("client", "transport")


def init_logging(debug: bool = False, log_folder: Optional[str] = None) -> None:
    """Configure console logging and, optionally, per-channel log files.

    Idempotent: only the first call has any effect.

    Args:
        debug: If True, set logging level to DEBUG, otherwise INFO
        log_folder: Directory for channel log files; None disables file output
    """
    global _loggers_initialized, _log_timestamp, _log_folder

    with _setup_lock:
        if _loggers_initialized:
            return

        level = logging.DEBUG if debug else logging.INFO

        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        if log_folder:
            os.makedirs(log_folder, exist_ok=True)
            _log_folder = log_folder
            _log_timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")

        logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)
        _loggers_initialized = True

        if debug:
            logging.getLogger(ROOT_LOGGER_NAME).debug(
                "Logging initialized (log folder: %s)", _log_folder or "disabled"
            )

    if _log_folder is not None:
        for channel in LOG_CHANNELS:
            _ensure_child_logger_initialized(channel)


def _ensure_child_logger_initialized(logger_base_name: str) -> None:
    """Attach the file handler for a channel on first access.

    Args:
        logger_base_name: Channel name without prefix (e.g., 'client', 'transport')
    """
    logger_name = f"{ROOT_LOGGER_NAME}.{logger_base_name}"

    if logger_name in _child_loggers_setup:
        return

    with _setup_lock:
        if logger_name in _child_loggers_setup:
            return

        if _log_folder is not None and _log_timestamp is not None:
            log_file = f"{logger_base_name}_{_log_timestamp}.log"
            level = logging.getLogger(ROOT_LOGGER_NAME).level
            _setup_child_logger(logger_name, os.path.join(_log_folder, log_file), level)
            _child_loggers_setup.add(logger_name)


def _setup_child_logger(logger_name: str, log_path: str, level: int) -> None:
    """Set up a child logger with its own file handler.

    Args:
        logger_name: Name of the logger (e.g., 'aiapi.client')
        log_path: Path of the log file
        level: Logging level for this logger
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    file_handler = logging.FileHandler(log_path, delay=True)
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(file_handler)

    # Keep console output through the parent
    logger.propagate = True


def get_client_logger(name: str) -> logging.Logger:
    """Get a logger for client-side operations.

    Args:
        name: Name suffix for the logger (e.g., 'client' -> 'aiapi.client.client')

    Returns:
        Logger under the aiapi.client channel
    """
    _ensure_child_logger_initialized("client")
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.client.{name}")


def get_transport_logger(name: str) -> logging.Logger:
    """Get a logger for network communication.

    Args:
        name: Name suffix for the logger (e.g., 'http' -> 'aiapi.transport.http')

    Returns:
        Logger under the aiapi.transport channel
    """
    _ensure_child_logger_initialized("transport")
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.transport.{name}")
