"""
Centralized logging configuration for netdash.

Modules log through ``logging.getLogger(__name__)``; records propagate to
the ``netdash`` logger configured here.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Any

# Default log format
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - [%(filename)s:%(lineno)d] - %(levelname)s - %(message)s"
)

ROOT_LOGGER_NAME = "netdash"

# Log levels mapping
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Global logger cache
_loggers: dict[str, logging.Logger] = {}


def _create_console_handler(
    log_level: int, formatter: logging.Formatter
) -> logging.StreamHandler:
    """Stream handler writing records to stderr at the given level."""
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    return console_handler


def _create_file_handler(
    log_file: str,
    log_dir: str | None,
    log_level: int,
    formatter: logging.Formatter,
    max_bytes: int,
    backup_count: int,
) -> logging.handlers.RotatingFileHandler:
    """
    Rotating file handler for a dashboard log file.

    The directory is created when missing; ``None`` means ``./logs``.
    Rotation happens at ``max_bytes``, keeping ``backup_count`` old files.
    """
    log_dir_path = Path(log_dir) if log_dir is not None else Path("logs")
    log_dir_path.mkdir(parents=True, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        log_dir_path / log_file, maxBytes=max_bytes, backupCount=backup_count
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)
    return file_handler


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: str = "INFO",
    log_file: str | None = None,
    log_dir: str | None = None,
    console: bool = True,
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Set up a standardized logger for netdash.

    Creates a logger with optional file and console handlers. File handlers
    use rotation to prevent unbounded growth.

    :param name: Logger name, ``netdash`` for the package root
    :param level: Logging level as string (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    :param log_file: Optional log file name (created in log_dir)
    :param log_dir: Directory for log files (defaults to ./logs)
    :param console: Whether to output to console
    :param max_bytes: Maximum size of log file before rotation
    :param backup_count: Number of backup files to keep
    :param format_string: Custom format string (uses DEFAULT_FORMAT if None)
    :return: Configured logger instance
    """
    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(name)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    log_level = LOG_LEVELS.get(level.upper(), logging.INFO)
    logger.setLevel(log_level)

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    if console:
        logger.addHandler(_create_console_handler(log_level, formatter))

    if log_file:
        logger.addHandler(
            _create_file_handler(
                log_file, log_dir, log_level, formatter, max_bytes, backup_count
            )
        )

    _loggers[name] = logger

    return logger


def configure_dashboard_logging(
    level: str = "INFO", log_file: str | None = None
) -> logging.Logger:
    """
    Configure the package root logger for a dashboard process.

    Uses the detailed format when a log file is requested so that file
    records carry source locations.

    :param level: Logging level
    :param log_file: Optional rotating log file name
    :return: The configured ``netdash`` logger
    """
    return setup_logger(
        name=ROOT_LOGGER_NAME,
        level=level,
        log_file=log_file,
        format_string=DETAILED_FORMAT if log_file else None,
    )


class LoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter for adding contextual information.

    Used to tag every message of one topology binding with its name.
    """

    def __init__(self, logger: logging.Logger, extra: dict[str, Any]):
        """
        Initialize adapter with extra context.

        :param logger: Base logger
        :param extra: Dictionary of extra context to add to all messages
        """
        super().__init__(logger, extra)

    def process(self, msg: Any, kwargs: Any) -> tuple[str, Any]:
        """
        Add extra context to log messages.

        :param msg: The log message
        :type msg: Any
        :param kwargs: Additional keyword arguments
        :type kwargs: Any
        :return: Processed message and kwargs
        :rtype: tuple[str, Any]
        """
        if self.extra:
            extra_str = " - ".join([f"{k}={v}" for k, v in self.extra.items()])
            return f"[{extra_str}] {msg}", kwargs
        return str(msg), kwargs
