"""Session controller wrapping the phase engine with pause, reset, and formatting."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from notifications import NotificationError, Notifier

from .constants import KEY_RESET, KEY_TOGGLE_PAUSE
from .phases import Napping, Phase, Resting, Working, advance, default_phase, phase_name

_KEY_LABELS = {
    KEY_TOGGLE_PAUSE: "<space>",
    KEY_RESET: "<r>",
}


@dataclass
class Session:
    """Persisted unit of pomodoro state: pause flag plus current phase."""
    paused: bool = False
    phase: Phase = field(default_factory=default_phase)


def new_session() -> Session:
    return Session()


class SessionController:
    """Applies elapsed time and user controls to a session."""

    def __init__(
        self,
        notifier: Notifier,
        *,
        logger: Optional[logging.Logger] = None,
    ):
        self._notifier = notifier
        self._logger = logger or logging.getLogger("pomodoro")

    def new_session(self) -> Session:
        return new_session()

    def reset(self) -> Session:
        self._logger.info("Pomodoro session reset")
        return new_session()

    def advance(self, session: Session, elapsed_seconds: float) -> None:
        if session.paused:
            return

        previous = session.phase
        session.phase, notifications = advance(previous, elapsed_seconds)
        if not notifications:
            return

        self._logger.info(
            "Pomodoro phase changed: %s -> %s",
            phase_name(previous),
            phase_name(session.phase),
        )
        for notification in notifications:
            try:
                self._notifier.notify(notification.title, notification.body)
            except NotificationError as error:
                self._logger.error("Notification delivery failed: %s", error)

    def toggle_pause(self, session: Session) -> None:
        session.paused = not session.paused
        self._logger.info(
            "Pomodoro %s: %s",
            "paused" if session.paused else "resumed",
            format_status(session),
        )

    def format_status(self, session: Session) -> str:
        return format_status(session)

    def format_hint(self, session: Session) -> str:
        return format_hint(session)


def format_remaining(seconds: float) -> str:
    """Format a remaining duration as `MM:SS`, dropping fractional seconds."""
    minutes, remainder = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{remainder:02d}"


def format_phase(phase: Phase) -> str:
    match phase:
        case Working(round=index, remaining_seconds=remaining):
            return f"Working(round {index + 1}): remaining {format_remaining(remaining)}"
        case Resting(round=index, remaining_seconds=remaining):
            return f"Resting(round {index + 1}): remaining {format_remaining(remaining)}"
        case Napping(remaining_seconds=remaining):
            return f"Napping: remaining {format_remaining(remaining)}"
    raise TypeError(f"Unsupported phase: {phase!r}")


def format_status(session: Session) -> str:
    suffix = " [paused]" if session.paused else ""
    return f"{format_phase(session.phase)}{suffix}"


def format_hint(session: Session) -> str:
    toggle_label = "resume" if session.paused else "pause"
    return (
        f"Tip: {_KEY_LABELS[KEY_TOGGLE_PAUSE]} => {toggle_label}, "
        f"{_KEY_LABELS[KEY_RESET]} => reset"
    )
