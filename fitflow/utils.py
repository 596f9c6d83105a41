#!/usr/bin/env python3
"""
FitFlow Utilities Module
"""
import sys
import logging
from pathlib import Path
from typing import Optional

from .const import LOG_LEVEL, LOG_DIR, LOG_FORMAT, LOG_DATE_FORMAT


class LoggingConfig:
    """Centralized logging configuration using standard logging"""

    _initialized = False

    @classmethod
    def setup_logging(cls,
                     log_level: str = "INFO",
                     log_file: Optional[str] = None,
                     log_format: Optional[str] = None,
                     enable_console: bool = True) -> None:
        """
        Setup standard logging configuration

        Args:
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Path to log file (optional)
            log_format: Custom log format
            enable_console: Enable console logging
        """
        if cls._initialized:
            return

        numeric_level = getattr(logging, log_level.upper(), logging.INFO)

        if log_format is None:
            log_format = LOG_FORMAT

        package_logger = logging.getLogger("fitflow")
        package_logger.setLevel(numeric_level)

        if enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(numeric_level)
            console_handler.setFormatter(logging.Formatter(log_format, datefmt=LOG_DATE_FORMAT))
            package_logger.addHandler(console_handler)

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(logging.Formatter(log_format, datefmt=LOG_DATE_FORMAT))
            package_logger.addHandler(file_handler)

        cls._initialized = True
        package_logger.debug(f"Logging initialized - Level: {log_level}")

    @classmethod
    def set_level(cls, log_level: str) -> None:
        """Change the level of the package logger and its handlers"""
        numeric_level = getattr(logging, log_level.upper(), logging.INFO)
        package_logger = logging.getLogger("fitflow")
        package_logger.setLevel(numeric_level)
        for handler in package_logger.handlers:
            handler.setLevel(numeric_level)

    @classmethod
    def get_logger(cls, name: str = None) -> logging.Logger:
        """Get a logger instance"""
        if not cls._initialized:
            cls.setup_logging(log_level=LOG_LEVEL)

        if name:
            return logging.getLogger(name)
        return logging.getLogger("fitflow")


def setup_fitflow_logging(log_level: str = LOG_LEVEL,
                          log_dir: Optional[str] = LOG_DIR) -> None:
    """Setup logging for FitFlow module"""
    log_file = None
    if log_dir:
        log_dir_path = Path(log_dir)
        log_dir_path.mkdir(parents=True, exist_ok=True)
        log_file = str(log_dir_path / "fitflow.log")

    LoggingConfig.setup_logging(
        log_level=log_level,
        log_file=log_file,
        log_format=LOG_FORMAT
    )


def get_logger(module_name: str) -> logging.Logger:
    """Get a logger for a specific module"""
    return LoggingConfig.get_logger(module_name)
