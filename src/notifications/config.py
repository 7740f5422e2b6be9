"""Configuration model for desktop notification delivery."""

import shlex
from dataclasses import dataclass


class NotificationConfigurationError(Exception):
    """Raised when notification configuration is invalid."""


@dataclass(frozen=True)
class NotificationConfig:
    """Whether phase alerts are shown and which command displays them."""
    enabled: bool = True
    command: str = "notify-send"

    def __post_init__(self) -> None:
        try:
            argv = shlex.split(self.command)
        except ValueError as error:
            raise NotificationConfigurationError(
                f"Notification command cannot be parsed: {error}"
            ) from error
        if not argv:
            raise NotificationConfigurationError("Notification command cannot be empty")

    @property
    def argv(self) -> list[str]:
        return shlex.split(self.command)

    @classmethod
    def from_settings(cls, settings) -> "NotificationConfig":
        command = (getattr(settings, "command", "") or "").strip() or "notify-send"
        return cls(
            enabled=bool(settings.enabled),
            command=command,
        )
