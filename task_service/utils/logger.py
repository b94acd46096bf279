"""
Logger module - Logging configuration and utilities

This module provides logging configuration with support for:
- Console logging (on by default)
- Rotating file logging (opt-in)
- Configuration from environment / config.properties
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Optional, Dict, Any

from task_service.config.config_properties import ConfigProperties


CONSOLE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
FILE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ServiceLogger:
    """
    Centralized logging setup with console and rotating file handlers.

    Usage:
        ServiceLogger.initialize(log_level="DEBUG", enable_file=True)
        logger = ServiceLogger.get_logger("api.server")
        logger.info("task created id=%s", task.id)
    """

    _loggers: Dict[str, logging.Logger] = {}
    _log_folder: Optional[str] = None
    _config: Dict[str, Any] = {}
    _initialized: bool = False

    @classmethod
    def initialize(
        cls,
        log_folder: Optional[str] = None,
        log_level: str = "INFO",
        enable_console: bool = True,
        enable_file: bool = False,
        max_bytes: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5
    ) -> None:
        """
        Initialize the logging system.

        Loggers handed out before this call are reconfigured in place.

        Args:
            log_folder: Folder for log files (default: ./logs)
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            enable_console: Enable console logging
            enable_file: Enable rotating file logging
            max_bytes: Max file size before rotation (default: 10MB)
            backup_count: Number of backup files to keep
        """
        cls._log_folder = log_folder or "./logs"
        cls._config = {
            "log_level": log_level.upper(),
            "enable_console": enable_console,
            "enable_file": enable_file,
            "max_bytes": max_bytes,
            "backup_count": backup_count,
        }
        cls._initialized = True

        if enable_file:
            Path(cls._log_folder).mkdir(parents=True, exist_ok=True)

        for logger in cls._loggers.values():
            cls._configure(logger)

    @classmethod
    def initialize_from_env(cls) -> None:
        """Initialize using TASK_SERVICE_* environment variables."""
        cls.initialize(
            log_folder=ConfigProperties.get_env("TASK_SERVICE_LOG_FOLDER", "./logs"),
            log_level=ConfigProperties.get_env("TASK_SERVICE_LOG_LEVEL", "INFO"),
            enable_console=ConfigProperties.get_bool_env("TASK_SERVICE_ENABLE_CONSOLE_LOGGING", True),
            enable_file=ConfigProperties.get_bool_env("TASK_SERVICE_ENABLE_FILE_LOGGING", False),
            max_bytes=ConfigProperties.get_int_env("TASK_SERVICE_LOG_MAX_BYTES", 10 * 1024 * 1024),
            backup_count=ConfigProperties.get_int_env("TASK_SERVICE_LOG_BACKUP_COUNT", 5),
        )

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """
        Get or create a configured logger.

        Args:
            name: Logger name (typically __name__)
        """
        if not cls._initialized:
            cls.initialize_from_env()

        if name not in cls._loggers:
            logger = logging.getLogger(name)
            cls._configure(logger)
            cls._loggers[name] = logger

        return cls._loggers[name]

    @classmethod
    def _configure(cls, logger: logging.Logger) -> None:
        level = cls._config.get("log_level", "INFO")
        logger.setLevel(level)
        logger.propagate = False

        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        if cls._config.get("enable_console"):
            handler = logging.StreamHandler(sys.stdout)
            handler.setLevel(level)
            handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
            logger.addHandler(handler)

        if cls._config.get("enable_file"):
            log_file = os.path.join(cls._log_folder or "./logs", f"{logger.name}.log")
            try:
                handler = logging.handlers.RotatingFileHandler(
                    log_file,
                    maxBytes=cls._config.get("max_bytes", 10 * 1024 * 1024),
                    backupCount=cls._config.get("backup_count", 5),
                    encoding='utf-8'
                )
            except OSError as e:
                logger.error(f"Failed to add file handler: {e}")
            else:
                handler.setLevel(level)
                handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
                logger.addHandler(handler)

    @classmethod
    def reset(cls) -> None:
        """Drop all handlers and forget the configuration."""
        for logger in cls._loggers.values():
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()
        cls._loggers = {}
        cls._config = {}
        cls._log_folder = None
        cls._initialized = False


def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with standard formatting and environment configuration.

    Initializes the ServiceLogger from the environment on first call.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logging.Logger instance
    """
    return ServiceLogger.get_logger(name)
