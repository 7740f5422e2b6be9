from dataclasses import dataclass


@dataclass(frozen=True)
class KeyPressEvent:
    key: str


@dataclass(frozen=True)
class TimerEvent:
    """One-shot timeout fired, carrying the seconds since it was armed."""
    elapsed_seconds: float


@dataclass(frozen=True)
class VisibilityEvent:
    visible: bool


RuntimeEvent = KeyPressEvent | TimerEvent | VisibilityEvent
