"""Logging configuration for the board grid mapper."""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

from pcbgrid.config.settings import settings


def configure_logging(
    name: str = 'pcbgrid',
    level: Optional[Union[int, str]] = None,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Configure logging for a logger namespace.

    Args:
        name: Logger name (the package name configures every module)
        level: Logging level (default: settings.LOG_LEVEL)
        log_file: Optional log file path (default: settings.LOG_FILE)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level if level is not None else settings.LOG_LEVEL)

    # Avoid duplicate handlers when called more than once
    if logger.handlers:
        logger.handlers.clear()

    # Create formatters and handlers
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler
    log_file = log_file or settings.LOG_FILE
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10485760,  # 10MB
            backupCount=5,
            encoding='utf-8',
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
