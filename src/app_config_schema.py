"""Dataclass schema objects used by runtime configuration loading."""

from __future__ import annotations

from dataclasses import dataclass

from pomodoro.constants import DEFAULT_STATE_FILE
from runtime.clock import DEFAULT_UTC_OFFSET_HOURS

DEFAULT_CONFIG_FILE = "config.toml"


class AppConfigurationError(Exception):
    """Raised when application configuration fails."""


@dataclass(frozen=True)
class StorageSettings:
    """Location of the persisted session from `[storage]`."""
    state_file: str = DEFAULT_STATE_FILE


@dataclass(frozen=True)
class NotificationSettings:
    """Desktop alert settings from `[notifications]`."""
    enabled: bool = True
    command: str = "notify-send"


@dataclass(frozen=True)
class DisplaySettings:
    """Pane rendering settings from `[display]`."""
    utc_offset_hours: int = DEFAULT_UTC_OFFSET_HOURS
    focus_events: bool = True


@dataclass(frozen=True)
class LoggingSettings:
    """Log level and optional log file from `[logging]`."""
    level: str = "INFO"
    file: str = ""


@dataclass(frozen=True)
class AppConfig:
    storage: StorageSettings = StorageSettings()
    notifications: NotificationSettings = NotificationSettings()
    display: DisplaySettings = DisplaySettings()
    logging: LoggingSettings = LoggingSettings()
    source_file: str = ""
