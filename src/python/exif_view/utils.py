"""
Utility functions for exif-view.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union


def setup_logging(
    level: Union[str, int] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    format_string: Optional[str] = None,
    include_timestamp: bool = True
) -> None:
    """Set up logging configuration for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file (logs to console if None)
        format_string: Custom format string for log messages
        include_timestamp: Whether to include timestamp in log messages

    Example:
        >>> setup_logging('DEBUG', 'exif.log')
        >>> setup_logging(logging.WARNING)  # Numeric level
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    if format_string is None:
        if include_timestamp:
            format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        else:
            format_string = '%(name)s - %(levelname)s - %(message)s'

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(format_string)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # The decoders are chatty about malformed files
    logging.getLogger('PIL').setLevel(logging.WARNING)
    logging.getLogger('exifread').setLevel(logging.WARNING)


def clean_string(value: Optional[str]) -> Optional[str]:
    """
    Clean and normalize a string value from EXIF.

    Removes trailing nulls, extra whitespace, etc.

    Args:
        value: Raw string value

    Returns:
        Cleaned string or None
    """
    if value is None:
        return None

    value = str(value)

    # Strip whitespace and null characters
    value = value.strip().rstrip("\x00").strip()

    return value or None
