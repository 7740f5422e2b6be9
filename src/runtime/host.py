"""Single-threaded terminal host delivering key, timer, and visibility events."""

from __future__ import annotations

import contextlib
import heapq
import logging
import os
import select
import shutil
import sys
import termios
import time
import tty
from typing import Callable, Iterator, Optional, Protocol, TextIO

from .events import KeyPressEvent, RuntimeEvent, TimerEvent, VisibilityEvent

QUIT_KEYS = frozenset({"q", "\x03"})

_FOCUS_IN = "\x1b[I"
_FOCUS_OUT = "\x1b[O"
_ENABLE_FOCUS_REPORTING = "\x1b[?1004h"
_DISABLE_FOCUS_REPORTING = "\x1b[?1004l"
_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_CLEAR_SCREEN = "\x1b[H\x1b[2J"
_READ_CHUNK_BYTES = 64
# Upper bound on one wait so a stop() from a signal handler is noticed.
IDLE_WAKEUP_SECONDS = 0.5


class PluginLike(Protocol):
    def update(self, event: RuntimeEvent) -> bool:
        ...

    def render(self, rows: int, cols: int) -> str:
        ...


def decode_input(text: str) -> list[RuntimeEvent]:
    """Split raw terminal input into key presses and focus changes.

    Escape sequences other than focus reports (arrow keys and the like) are
    dropped.
    """
    events: list[RuntimeEvent] = []
    index = 0
    while index < len(text):
        if text.startswith(_FOCUS_IN, index):
            events.append(VisibilityEvent(True))
            index += len(_FOCUS_IN)
            continue
        if text.startswith(_FOCUS_OUT, index):
            events.append(VisibilityEvent(False))
            index += len(_FOCUS_OUT)
            continue
        if text.startswith("\x1b[", index):
            index += 2
            # CSI parameters run until a final byte in the 0x40-0x7e range.
            while index < len(text) and not "\x40" <= text[index] <= "\x7e":
                index += 1
            index += 1
            continue
        if text[index] == "\x1b":
            index += 1
            continue
        events.append(KeyPressEvent(text[index]))
        index += 1
    return events


@contextlib.contextmanager
def raw_terminal(fd: int) -> Iterator[None]:
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


class TerminalHost:
    """Cooperative event loop: one event at a time, never blocking in handlers."""

    def __init__(
        self,
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        focus_events: bool = True,
        logger: Optional[logging.Logger] = None,
        monotonic: Callable[[], float] = time.monotonic,
    ):
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._focus_events = focus_events
        self._logger = logger or logging.getLogger("runtime.host")
        self._monotonic = monotonic
        self._timeouts: list[tuple[float, float]] = []
        self._plugin: Optional[PluginLike] = None
        self._running = False
        self._visible = False

    def set_timeout(self, seconds: float) -> None:
        armed_at = self._monotonic()
        heapq.heappush(self._timeouts, (armed_at + seconds, armed_at))

    def stop(self) -> None:
        self._running = False

    @property
    def pending_timeouts(self) -> int:
        return len(self._timeouts)

    def attach(self, plugin: PluginLike) -> None:
        self._plugin = plugin

    def run(self, plugin: PluginLike) -> None:
        self.attach(plugin)
        self._running = True
        fd = self._stdin.fileno()
        with raw_terminal(fd):
            self._write(_HIDE_CURSOR)
            if self._focus_events:
                self._write(_ENABLE_FOCUS_REPORTING)
            try:
                self.dispatch(VisibilityEvent(True))
                self.redraw()
                while self._running:
                    self._wait_for_input(fd)
                    self.fire_expired_timeouts()
            finally:
                if self._visible:
                    self.dispatch(VisibilityEvent(False))
                if self._focus_events:
                    self._write(_DISABLE_FOCUS_REPORTING)
                self._write(_SHOW_CURSOR + "\r\n")
                self._plugin = None
        self._logger.info("Terminal host stopped")

    def dispatch(self, event: RuntimeEvent) -> None:
        if self._plugin is None:
            return
        if isinstance(event, VisibilityEvent):
            if event.visible == self._visible:
                return
            self._visible = event.visible
        if self._plugin.update(event):
            self.redraw()

    def fire_expired_timeouts(self) -> None:
        now = self._monotonic()
        while self._timeouts and self._timeouts[0][0] <= now:
            _, armed_at = heapq.heappop(self._timeouts)
            self.dispatch(TimerEvent(max(0.0, now - armed_at)))

    def redraw(self) -> None:
        if self._plugin is None:
            return
        size = shutil.get_terminal_size()
        text = self._plugin.render(size.lines, size.columns)
        self._write(_CLEAR_SCREEN + text.replace("\n", "\r\n"))

    def _wait_for_input(self, fd: int) -> None:
        timeout = IDLE_WAKEUP_SECONDS
        if self._timeouts:
            timeout = min(timeout, max(0.0, self._timeouts[0][0] - self._monotonic()))

        readable, _, _ = select.select([fd], [], [], timeout)
        if not readable:
            return

        data = os.read(fd, _READ_CHUNK_BYTES)
        if not data:
            self._logger.info("Terminal input closed")
            self.stop()
            return

        for event in decode_input(data.decode("utf-8", errors="replace")):
            if isinstance(event, KeyPressEvent) and event.key in QUIT_KEYS:
                self.stop()
                return
            self.dispatch(event)

    def _write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()
