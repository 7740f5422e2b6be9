"""Pane plugin that owns the live session and reacts to host events."""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Callable, Protocol

from pomodoro import Session, SessionController, SessionStore, SessionStoreError
from pomodoro.constants import KEY_RESET, KEY_TOGGLE_PAUSE, TICK_INTERVAL_SECONDS

from .clock import DEFAULT_UTC_OFFSET_HOURS, format_clock, utc_now
from .events import KeyPressEvent, RuntimeEvent, TimerEvent, VisibilityEvent


class SchedulerLike(Protocol):
    def set_timeout(self, seconds: float) -> None:
        ...


@dataclass(frozen=True)
class PluginDependencies:
    """Collaborators required by the pane plugin."""
    store: SessionStore
    controller: SessionController
    scheduler: SchedulerLike
    logger: logging.Logger
    clock: Callable[[], dt.datetime] = utc_now
    utc_offset_hours: int = DEFAULT_UTC_OFFSET_HOURS


class PomodoroPlugin:
    """Application context: the single live session plus its visibility state."""

    def __init__(self, dependencies: PluginDependencies):
        self._dependencies = dependencies
        self._logger = dependencies.logger
        self.active = False
        self.timer_armed = False
        self.session: Session = dependencies.controller.new_session()

    def update(self, event: RuntimeEvent) -> bool:
        """Apply one host event; returns whether the pane should be redrawn."""
        deps = self._dependencies

        if isinstance(event, KeyPressEvent):
            if event.key == KEY_RESET:
                self.session = deps.controller.reset()
                return True
            if event.key == KEY_TOGGLE_PAUSE:
                deps.controller.toggle_pause(self.session)
                return True
            return False

        if isinstance(event, TimerEvent):
            self.timer_armed = False
            if not self.active:
                return False
            deps.controller.advance(self.session, event.elapsed_seconds)
            self._arm_timer()
            return True

        if isinstance(event, VisibilityEvent):
            if event.visible:
                self.active = True
                self._arm_timer()
                self.session = deps.store.load()
                self._logger.info("Pane visible, session restored from %s", deps.store.path)
                return True

            self.active = False
            try:
                deps.store.save(self.session)
            except SessionStoreError as error:
                self._logger.warning("Session not persisted: %s", error)
            else:
                self._logger.info("Pane hidden, session saved to %s", deps.store.path)
            return False

        self._logger.debug("Ignoring unsupported event: %r", event)
        return False

    def render(self, rows: int, cols: int) -> str:
        deps = self._dependencies
        controller = deps.controller
        clock_text = format_clock(deps.clock(), deps.utc_offset_hours)
        lines = [f"{controller.format_status(self.session)} | {clock_text}"]
        if rows > 1:
            lines.append(controller.format_hint(self.session))
        return "\n".join(line[:cols] if cols > 0 else line for line in lines)

    def _arm_timer(self) -> None:
        if self.timer_armed:
            return
        self._dependencies.scheduler.set_timeout(TICK_INTERVAL_SECONDS)
        self.timer_armed = True
