import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .constants import LOG_DIR

# Constants for log rotation settings
LOG_MAX_SIZE_BYTES = 5 * 1024 * 1024  # 5 MB
LOG_BACKUP_COUNT = 3                  # Keep 3 old log files

DEFAULT_FORMAT = '%(asctime)s - %(levelname)-8s - %(name)s - %(message)s'


def setup_logger(name: Optional[str], level: int, formatter_str: str,
                 console_output: bool = False, file_path: Optional[Path] = None,
                 use_rotation: bool = False) -> logging.Logger:
    """
    A versatile function to configure and retrieve a logger instance.

    :param name: A unique name for the logger (None for the root logger).
    :param level: The minimum logging level for the logger.
    :param formatter_str: The format string for log messages.
    :param console_output: Whether to enable console output.
    :param file_path: The full path to the log file (if file output is enabled).
    :param use_rotation: Whether to enable log file rotation.
    :return: A configured logger object.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if name:
        logger.propagate = False  # Prevent logs from being passed to the root logger

    # Clear previous handlers to avoid duplicate logs on Streamlit reruns
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(formatter_str, datefmt='%Y-%m-%d %H:%M:%S')

    # Configure console handler
    if console_output:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # Configure file handler
    if file_path:
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        if use_rotation:
            handler = RotatingFileHandler(
                file_path,
                maxBytes=LOG_MAX_SIZE_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding='utf-8'
            )
        else:
            handler = logging.FileHandler(file_path, mode='a', encoding='utf-8')

        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger

def configure_app_logging(level: int = logging.INFO, log_to_file: bool = False,
                          log_dir: Path = LOG_DIR) -> logging.Logger:
    """
    Configures the root logger used by every `site_core` module:
    console output always, plus a rotating `site.log` when `log_to_file` is set.
    """
    return setup_logger(
        name=None,
        level=level,
        formatter_str=DEFAULT_FORMAT,
        console_output=True,
        file_path=log_dir / 'site.log' if log_to_file else None,
        use_rotation=True,
    )
