# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Error handling utilities for the html_accessibility_checker package.

This module provides the package exception hierarchy and the logger setup
used by every module, so that analysis and repair failures are reported
consistently.
"""

import logging
import sys
from typing import Optional, Type


class AccessibilityCheckerError(Exception):
    """Base exception class for all html_accessibility_checker errors."""



class AccessibilityAuditError(AccessibilityCheckerError):
    """Raised when there's an error during accessibility auditing."""



class AccessibilityRemediationError(AccessibilityCheckerError):
    """Raised when there's an error during accessibility remediation."""



class ConfigurationError(AccessibilityCheckerError):
    """Raised when there's an error in configuration."""



class MissingCredentialsError(ConfigurationError):
    """Raised when the text-generation service has no usable credentials."""



# Configure module-level logger
logger = logging.getLogger(__name__)


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Set up a logger with standardized formatting.

    Args:
        name: The logger name, typically __name__ of the calling module
        level: The logging level (default: INFO if not in debug mode)

    Returns:
        A configured logger instance
    """
    logger_obj = logging.getLogger(name)

    if level is None:
        # Check if root logger is in debug mode (set by --debug flag)
        if logging.getLogger().level <= logging.DEBUG:
            level = logging.DEBUG
        else:
            level = logging.INFO

        logger.debug(f"Setting logger {name} level to {logging.getLevelName(level)}")

    logger_obj.setLevel(level)
    logger_obj.propagate = True

    if not logger_obj.handlers:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        logger_obj.addHandler(handler)

    return logger_obj


def set_package_log_level(level: int) -> None:
    """
    Apply a logging level to every logger created for this package.

    Args:
        level: The logging level to apply
    """
    for name in list(logging.Logger.manager.loggerDict):
        if name.startswith("html_accessibility_checker"):
            logger_obj = logging.getLogger(name)
            logger_obj.setLevel(level)
            for handler in logger_obj.handlers:
                handler.setLevel(level)


def log_exception(
    logger: logging.Logger,
    exception: Exception,
    message: str = "An error occurred",
    level: int = logging.ERROR,
    include_traceback: bool = True,
) -> None:
    """
    Log an exception with consistent formatting.

    Args:
        logger: The logger instance to use
        exception: The exception to log
        message: Optional custom message
        level: The logging level to use
        include_traceback: Whether to include the full traceback
    """
    error_type = type(exception).__name__
    error_message = str(exception)

    log_msg = f"{message}: {error_type} - {error_message}"

    if include_traceback:
        logger.log(level, log_msg, exc_info=True)
    else:
        logger.log(level, log_msg)


def handle_exception(
    exc: Exception,
    logger: logging.Logger,
    custom_message: str = None,
    custom_exception: Type[Exception] = None,
) -> None:
    """
    Log an exception and re-raise it, optionally wrapped.

    Args:
        exc: The caught exception
        logger: Logger to use for recording the error
        custom_message: Optional message to include
        custom_exception: Exception type to raise instead of the caught one

    Raises:
        The caught exception, or custom_exception chained from it
    """
    message = custom_message if custom_message else str(exc)

    log_exception(logger, exc, message)

    if custom_exception:
        raise custom_exception(f"{message}: {exc}") from exc
    raise exc
