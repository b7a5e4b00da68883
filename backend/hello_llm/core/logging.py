"""
Logging configuration for the application.
"""

import logging
import re
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from hello_llm.core.config import get_config, get_log_path

# Global logger instance
_logger: Optional[logging.Logger] = None


class CredentialRedactingFilter(logging.Filter):
    """
    Mask provider credentials in log messages.

    Covers the Gemini query-string key ("key=...") and bearer tokens
    ("Bearer ..."), the two places a credential appears on the wire.
    """

    PATTERNS = [
        (re.compile(r"(key=)[^&\s\"']+"), r"\1***"),
        (re.compile(r"(Bearer\s+)[^\s\"']+"), r"\1***"),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = message
        for pattern, replacement in self.PATTERNS:
            redacted = pattern.sub(replacement, redacted)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True


def setup_logging() -> logging.Logger:
    """
    Set up application logging with both file and console handlers.

    Returns:
        Configured logger instance.
    """
    global _logger

    if _logger is not None:
        return _logger

    config = get_config()
    log_config = config.logging
    level = getattr(logging, log_config.level.upper())

    logger = logging.getLogger("hello_llm")
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(log_config.format)
    redactor = CredentialRedactingFilter()

    # File handler with rotation
    file_handler = RotatingFileHandler(
        get_log_path(),
        maxBytes=log_config.max_size * 1024 * 1024,  # Convert MB to bytes
        backupCount=log_config.backup_count,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    file_handler.addFilter(redactor)
    logger.addHandler(file_handler)

    # Console handler; stderr so the CLI's JSON on stdout stays clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(redactor)
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """
    Get the application logger.

    Returns:
        Logger instance.
    """
    global _logger
    if _logger is None:
        return setup_logging()
    return _logger
