"""
clipwatch.config
Configuration and settings management for the clipboard history engine.
Overview:
- Provides Pydantic-based settings classes inheriting from FactoryBaseSettings;
    every field supports an environment variable override via its Field alias.
Contents:
- ClipboardHistorySettings:
    History capacity, preview height, poll interval and logging options for the
    clipboard watcher.
- get_settings: Cached factory for settings instances (re-exported).
Design Notes:
- Defaults allow zero-configuration startup: capacity 20, preview height 70,
    one poll per second.
- capacity may be 0 (an always-empty history); preview_height and
    poll_interval must be strictly positive.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field

from clipwatch.config.base import APP_ENV, APP_ROOT  # noqa: F401
from clipwatch.config.factory import FactoryBaseSettings
from clipwatch.config.factory import get_settings  # noqa: F401  This is used externally

DEFAULT_CAPACITY = 20
DEFAULT_PREVIEW_HEIGHT = 70


class ClipboardHistorySettings(FactoryBaseSettings):
    """
    Configuration for the clipboard history watcher.
    """

    capacity: int = Field(
        default=DEFAULT_CAPACITY,
        ge=0,
        alias="CLIPWATCH_CAPACITY",
        description="Maximum number of history entries kept. [Default: 20]",
    )
    preview_height: int = Field(
        default=DEFAULT_PREVIEW_HEIGHT,
        gt=0,
        alias="CLIPWATCH_PREVIEW_HEIGHT",
        description="Height of image previews in pixels. [Default: 70]",
    )
    poll_interval: float = Field(
        default=1.0,
        gt=0,
        alias="CLIPWATCH_POLL_INTERVAL",
        description="Interval for polling the clipboard. (Seconds) [Default: 1.0]",
    )
    log_level: str = Field(
        default="info",
        alias="CLIPWATCH_LOG_LEVEL",
        description="Log level for the clipboard watcher.",
    )
    log_file: Optional[Path] = Field(
        default=None,
        alias="CLIPWATCH_LOG_FILE",
        description="Optional JSON lines log file. Console only when unset.",
    )


__all__ = [
    "APP_ENV",
    "APP_ROOT",
    "DEFAULT_CAPACITY",
    "DEFAULT_PREVIEW_HEIGHT",
    "ClipboardHistorySettings",
    "FactoryBaseSettings",
    "get_settings",
]
