"""Public exports for desktop notification components."""

from .config import NotificationConfig, NotificationConfigurationError
from .service import (
    DesktopNotifier,
    NotificationError,
    Notifier,
    NullNotifier,
    build_notifier,
)

__all__ = [
    "DesktopNotifier",
    "NotificationConfig",
    "NotificationConfigurationError",
    "NotificationError",
    "Notifier",
    "NullNotifier",
    "build_notifier",
]
