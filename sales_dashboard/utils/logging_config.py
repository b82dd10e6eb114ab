"""
Logging configuration for the sales dashboard.

Every module asks ``get_logger(__name__)`` for its logger; the root logger is
configured once per process, with a console handler and a timestamped log
file. The log directory and default level can be set through the environment.
"""
import os
import logging
from datetime import datetime
import threading
from typing import List, Union

_logging_initialized = False
_logging_lock = threading.Lock()

DEFAULT_LOG_DIR = os.environ.get("SALES_DASHBOARD_LOG_DIR", "logs")
DEFAULT_LOG_LEVEL = os.environ.get("SALES_DASHBOARD_LOG_LEVEL", "INFO")
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE_PREFIX = "sales_dashboard"


def resolve_log_level(level: Union[int, str, None]) -> int:
    """
    Turn a level given as a number or a name ("debug", "WARNING") into a logging level.

    Args:
        level (Union[int, str, None]): Level to resolve; None means INFO

    Returns:
        int: The logging level

    Raises:
        ValueError: If the name is not a logging level
    """
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def log_file_path(log_dir: str) -> str:
    """Path of a new log file in ``log_dir``, named after the current time."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return os.path.join(log_dir, f"{LOG_FILE_PREFIX}_{timestamp}.log")


def _build_handlers(log_file: str, level: int) -> List[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.FileHandler(log_file), logging.StreamHandler()]
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(log_level=DEFAULT_LOG_LEVEL, log_dir=DEFAULT_LOG_DIR):
    """
    Set up logging configuration.

    Later calls only change the level of the existing handlers, so the CLI's
    --verbose flag still applies after modules have configured logging on import.

    Args:
        log_level: Logging level or level name (default: SALES_DASHBOARD_LOG_LEVEL or INFO)
        log_dir: Directory for log files (default: SALES_DASHBOARD_LOG_DIR or "logs")

    Returns:
        logging.Logger: Configured root logger
    """
    global _logging_initialized

    level = resolve_log_level(log_level)

    with _logging_lock:
        logger = logging.getLogger()
        logger.setLevel(level)

        if _logging_initialized:
            for handler in logger.handlers:
                handler.setLevel(level)
            return logger

        os.makedirs(log_dir, exist_ok=True)
        log_file = log_file_path(log_dir)

        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        for handler in _build_handlers(log_file, level):
            logger.addHandler(handler)

        logger.info(f"Logging initialized. Log file: {log_file}")

        _logging_initialized = True

        return logger


def get_logger(name):
    """
    Get a logger for a specific module, configuring logging on first use.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        logging.Logger: Logger instance
    """
    if not _logging_initialized:
        setup_logging()

    return logging.getLogger(name)
