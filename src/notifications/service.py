"""Notification sinks used to alert the user about phase changes."""

from __future__ import annotations

import logging
import subprocess
from typing import Optional, Protocol

from .config import NotificationConfig


class NotificationError(Exception):
    """Raised when a notification cannot be handed to the desktop."""


class Notifier(Protocol):
    def notify(self, title: str, body: str) -> None:
        ...


class DesktopNotifier:
    """Spawns a notify-send style command without waiting for it to finish."""

    def __init__(
        self,
        config: NotificationConfig,
        logger: Optional[logging.Logger] = None,
    ):
        self._argv = config.argv
        self._logger = logger or logging.getLogger(__name__)
        self._children: list[subprocess.Popen] = []

    @property
    def pending_children(self) -> int:
        return len(self._children)

    def notify(self, title: str, body: str) -> None:
        self._reap_children()
        argv = [*self._argv, title, body]
        self._logger.debug("Sending notification: %s", argv)
        try:
            child = subprocess.Popen(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as error:
            raise NotificationError(f"Failed to run {self._argv[0]}: {error}") from error
        self._children.append(child)

    def _reap_children(self) -> None:
        running: list[subprocess.Popen] = []
        for child in self._children:
            returncode = child.poll()
            if returncode is None:
                running.append(child)
            elif returncode != 0:
                self._logger.warning(
                    "Notification command %s exited with status %s",
                    self._argv[0],
                    returncode,
                )
        self._children = running


class NullNotifier:
    """Drops notifications, used when desktop alerts are disabled."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def notify(self, title: str, body: str) -> None:
        self._logger.debug("Notification suppressed: %s: %s", title, body)


def build_notifier(
    config: NotificationConfig,
    logger: Optional[logging.Logger] = None,
) -> Notifier:
    if config.enabled:
        return DesktopNotifier(config, logger=logger)
    return NullNotifier(logger=logger)
