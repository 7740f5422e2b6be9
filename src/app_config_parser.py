"""Typed parser for config.toml sections into immutable app settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from app_config_schema import (
    AppConfig,
    AppConfigurationError,
    DisplaySettings,
    LoggingSettings,
    NotificationSettings,
    StorageSettings,
)
from pomodoro.constants import DEFAULT_STATE_FILE
from runtime.clock import DEFAULT_UTC_OFFSET_HOURS

_ALLOWED_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
_MAX_UTC_OFFSET_HOURS = 23


def parse_app_config(
    raw: Mapping[str, Any],
    *,
    base_dir: Path,
    source_file: str,
) -> AppConfig:
    """Parse raw TOML mappings into strongly typed application settings."""
    return AppConfig(
        storage=_parse_storage_settings(_section(raw, "storage"), base_dir=base_dir),
        notifications=_parse_notification_settings(_section(raw, "notifications")),
        display=_parse_display_settings(_section(raw, "display")),
        logging=_parse_logging_settings(_section(raw, "logging"), base_dir=base_dir),
        source_file=source_file,
    )


def _parse_storage_settings(
    section: Mapping[str, Any],
    *,
    base_dir: Path,
) -> StorageSettings:
    state_file = _as_str(
        section.get("state_file", DEFAULT_STATE_FILE),
        "storage.state_file",
    )
    if not state_file:
        raise AppConfigurationError("storage.state_file cannot be empty.")
    return StorageSettings(state_file=_resolve_path(base_dir, state_file))


def _parse_notification_settings(section: Mapping[str, Any]) -> NotificationSettings:
    command = _as_str(section.get("command", "notify-send"), "notifications.command")
    if not command:
        raise AppConfigurationError("notifications.command cannot be empty.")
    return NotificationSettings(
        enabled=_as_bool(section.get("enabled", True), "notifications.enabled"),
        command=command,
    )


def _parse_display_settings(section: Mapping[str, Any]) -> DisplaySettings:
    offset = _as_int(
        section.get("utc_offset_hours", DEFAULT_UTC_OFFSET_HOURS),
        "display.utc_offset_hours",
    )
    if not -_MAX_UTC_OFFSET_HOURS <= offset <= _MAX_UTC_OFFSET_HOURS:
        raise AppConfigurationError(
            f"display.utc_offset_hours must be in "
            f"[-{_MAX_UTC_OFFSET_HOURS}, {_MAX_UTC_OFFSET_HOURS}], got: {offset}"
        )
    return DisplaySettings(
        utc_offset_hours=offset,
        focus_events=_as_bool(section.get("focus_events", True), "display.focus_events"),
    )


def _parse_logging_settings(
    section: Mapping[str, Any],
    *,
    base_dir: Path,
) -> LoggingSettings:
    level = _as_str(section.get("level", "INFO"), "logging.level").upper()
    if level not in _ALLOWED_LOG_LEVELS:
        allowed = ", ".join(sorted(_ALLOWED_LOG_LEVELS))
        raise AppConfigurationError(f"logging.level must be one of: {allowed}.")
    log_file = _as_str(section.get("file", ""), "logging.file")
    return LoggingSettings(level=level, file=_resolve_path(base_dir, log_file))


def _section(root: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    raw = root.get(name, {})
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise AppConfigurationError(f"[{name}] must be a table.")
    return raw


def _as_str(value: Any, field: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    raise AppConfigurationError(f"{field} must be a string.")


def _as_bool(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
    raise AppConfigurationError(f"{field} must be a boolean.")


def _as_int(value: Any, field: str) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be an integer.") from error
    raise AppConfigurationError(f"{field} must be an integer.")


def _resolve_path(base_dir: Path, raw: str) -> str:
    if not raw:
        return ""
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = (base_dir / path).resolve()
    return str(path)
