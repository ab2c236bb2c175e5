# region Docstring
"""
clipwatch.logger
Logging configuration for clipwatch.
Overview:
- Builds a logging.config dictConfig with a plain console handler and, when a
    log file is configured, a JSON lines file handler using python-json-logger.
- All package loggers are children of the "clipwatch" logger, so a single
    configure_logging() call covers the engine, the watcher service and the CLI.
Contents:
- LOGGER_NAME: Name of the package root logger.
- build_logging_config(level, log_file): Return the dictConfig mapping.
- configure_logging(settings): Apply the configuration and return the root logger.
- get_logger(name): Return a child of the package logger.
"""
# endregion
# region Imports
import logging
from logging import Logger as T_Logger
from logging.config import dictConfig
from pathlib import Path
from typing import Any, Optional

from pythonjsonlogger.json import JsonFormatter  # type: ignore # noqa F401

from clipwatch.config import ClipboardHistorySettings, get_settings

# endregion

LOGGER_NAME = "clipwatch"


def build_logging_config(level: str, log_file: Optional[Path] = None) -> dict[str, Any]:
    """
    Build the dictConfig mapping for the package logger.

    Args:
        level (str): Log level name, case-insensitive.
        log_file (Optional[Path]): JSON lines log file. Console only when None.

    Returns:
        dict[str, Any]: A mapping accepted by logging.config.dictConfig.
    """
    level = level.upper()
    handlers: dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "level": level,
        },
    }
    if log_file is not None:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "filename": str(log_file),
            "formatter": "json",
            "level": level,
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "fmt": "%(asctime)s %(levelname)s %(name)s %(message)s",
            },
            "standard": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            },
        },
        "handlers": handlers,
        "loggers": {
            LOGGER_NAME: {
                "handlers": list(handlers),
                "level": level,
                "propagate": False,
            },
        },
    }


def configure_logging(settings: Optional[ClipboardHistorySettings] = None) -> T_Logger:
    """Configure the package logger from settings and return it."""
    settings = settings or get_settings(ClipboardHistorySettings)
    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    dictConfig(build_logging_config(settings.log_level, settings.log_file))
    logger = logging.getLogger(LOGGER_NAME)
    logger.getChild("SYSTEM").debug("Logger for clipwatch initialized.")
    return logger


def get_logger(name: str) -> T_Logger:
    """Return a child of the package logger."""
    return logging.getLogger(LOGGER_NAME).getChild(name)


__all__ = ["LOGGER_NAME", "build_logging_config", "configure_logging", "get_logger"]
