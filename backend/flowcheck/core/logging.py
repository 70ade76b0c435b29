"""Structured logging configuration for flowcheck.

This module provides the logging setup shared by the validator and the API:
- JSON structured logging for production environments
- Colored console output for development
- Optional rotating file output (10MB max, 5 backups)
- Structured context passed through ``extra={"context": {...}}``
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import ClassVar

from flowcheck.core.config import settings


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Format:
        {
            "timestamp": "2025-01-12T10:30:45.123Z",
            "level": "DEBUG",
            "logger": "flowcheck.services.workflow.validator",
            "message": "Workflow validation completed",
            "service": "Flowcheck API",
            "version": "0.1.0",
            "context": {"node_count": 3, "issue_count": 0, "valid": true}
        }
    """

    def __init__(
        self,
        service_name: str = "Flowcheck API",
        service_version: str = "0.1.0",
    ) -> None:
        """Initialize JSON formatter.

        Args:
            service_name: Name of the service
            service_version: Version of the service
        """
        super().__init__()
        self.service_name = service_name
        self.service_version = service_version

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as a single JSON line."""
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "version": self.service_version,
        }

        if hasattr(record, "context"):
            log_entry["context"] = record.context

        if record.exc_info:
            log_entry["exception"] = {  # type: ignore[assignment]
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info),
            }

        # Source location for ERROR and above
        if record.levelno >= logging.ERROR:
            log_entry["source"] = {  # type: ignore[assignment]
                "function": record.funcName,
                "line": record.lineno,
                "file": record.pathname,
            }

        return json.dumps(log_entry, default=str, ensure_ascii=False)


class ColoredConsoleFormatter(logging.Formatter):
    """Colored console formatter for development environments."""

    COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[41m",  # Red background
    }
    RESET: ClassVar[str] = "\033[0m"

    def __init__(self) -> None:
        """Initialize colored console formatter."""
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors and inline context."""
        color = self.COLORS.get(record.levelname, self.RESET)
        message = super().format(record)
        message = message.replace(
            record.levelname, f"{color}{record.levelname}{self.RESET}", 1
        )

        context = getattr(record, "context", None)
        if context:
            message = f"{message} | Context: {json.dumps(context, default=str)}"

        return message


def setup_logging(
    log_level: str | None = None,
    log_file: str | None = None,
    service_name: str = "Flowcheck API",
    enable_json: bool = True,
    enable_console: bool = True,
) -> logging.Logger:
    """Configure application logging with structured handlers.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to settings.LOG_LEVEL.
        log_file: Path to a rotating log file. No file output when None.
        service_name: Name of the service for log metadata.
        enable_json: Use JSON formatting for the file handler.
        enable_console: Enable console output handler.

    Returns:
        Configured root logger instance.

    Examples:
        >>> logger = setup_logging(log_level="INFO")
        >>> logger.info("Application started", extra={"context": {"port": 8000}})
    """
    if log_level is None:
        log_level = settings.LOG_LEVEL
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    if log_file is not None:
        log_file_path = Path(log_file)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            filename=str(log_file_path),
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)

        if enable_json:
            file_handler.setFormatter(JSONFormatter(service_name=service_name))
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        logger.addHandler(file_handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)

        # Colored output in development, JSON in production
        if settings.DEBUG:
            console_handler.setFormatter(ColoredConsoleFormatter())
        else:
            console_handler.setFormatter(JSONFormatter(service_name=service_name))

        logger.addHandler(console_handler)

    logger.info(
        f"Logging initialized - Level: {log_level}, File: {log_file}",
        extra={
            "context": {
                "log_level": log_level,
                "log_file": log_file,
                "service": service_name,
            }
        },
    )

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the specified name.

    The logger inherits the configuration from setup_logging().

    Args:
        name: Logger name (typically __name__ of the module)

    Examples:
        >>> from flowcheck.core.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Validating workflow")
    """
    return logging.getLogger(name)


__all__ = [
    "ColoredConsoleFormatter",
    "JSONFormatter",
    "get_logger",
    "setup_logging",
]
