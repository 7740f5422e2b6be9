"""Runtime exports."""

from .events import KeyPressEvent, RuntimeEvent, TimerEvent, VisibilityEvent
from .host import TerminalHost
from .plugin import PluginDependencies, PomodoroPlugin

__all__ = [
    "KeyPressEvent",
    "PluginDependencies",
    "PomodoroPlugin",
    "RuntimeEvent",
    "TerminalHost",
    "TimerEvent",
    "VisibilityEvent",
]
