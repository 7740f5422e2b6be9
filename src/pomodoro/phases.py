"""Pure pomodoro phase state machine advanced by elapsed durations."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    MESSAGE_START_WORKING,
    MESSAGE_TAKE_BREAK,
    MESSAGE_TAKE_NAP,
    NAPPING_INTERVAL_SECONDS,
    NOTIFICATION_TITLE,
    PHASE_NAPPING,
    PHASE_RESTING,
    PHASE_WORKING,
    RESTING_INTERVAL_SECONDS,
    ROUNDS_PER_CYCLE,
    WORKING_INTERVAL_SECONDS,
)


@dataclass(frozen=True)
class Working:
    """Focus interval of the given 0-based round."""
    round: int
    remaining_seconds: float


@dataclass(frozen=True)
class Resting:
    """Short break following the work interval of the same round."""
    round: int
    remaining_seconds: float


@dataclass(frozen=True)
class Napping:
    """Long break closing a full cycle of rounds."""
    remaining_seconds: float


Phase = Working | Resting | Napping


@dataclass(frozen=True)
class Notification:
    """Alert emitted when a phase boundary is crossed."""
    title: str
    body: str


def default_phase() -> Phase:
    return Working(0, float(WORKING_INTERVAL_SECONDS))


def phase_name(phase: Phase) -> str:
    match phase:
        case Working():
            return PHASE_WORKING
        case Resting():
            return PHASE_RESTING
        case Napping():
            return PHASE_NAPPING
    raise TypeError(f"Unsupported phase: {phase!r}")


def advance(phase: Phase, elapsed_seconds: float) -> tuple[Phase, list[Notification]]:
    """Apply one elapsed duration to ``phase``.

    At most one phase boundary is crossed per call. Time left over after an
    exhausted phase is dropped rather than carried into the next one, and an
    elapsed duration equal to the remaining time counts as exhaustion.
    """
    if elapsed_seconds < 0:
        raise ValueError("elapsed_seconds must not be negative")

    match phase:
        case Working(round=index, remaining_seconds=remaining):
            if remaining > elapsed_seconds:
                return Working(index, remaining - elapsed_seconds), []
            return (
                Resting(index, float(RESTING_INTERVAL_SECONDS)),
                [Notification(NOTIFICATION_TITLE, MESSAGE_TAKE_BREAK)],
            )

        case Resting(round=index, remaining_seconds=remaining):
            if remaining > elapsed_seconds:
                return Resting(index, remaining - elapsed_seconds), []
            if index + 1 == ROUNDS_PER_CYCLE:
                return (
                    Napping(float(NAPPING_INTERVAL_SECONDS)),
                    [Notification(NOTIFICATION_TITLE, MESSAGE_TAKE_NAP)],
                )
            return (
                Working(index + 1, float(WORKING_INTERVAL_SECONDS)),
                [Notification(NOTIFICATION_TITLE, MESSAGE_START_WORKING)],
            )

        case Napping(remaining_seconds=remaining):
            if remaining > elapsed_seconds:
                return Napping(remaining - elapsed_seconds), []
            return (
                Working(0, float(WORKING_INTERVAL_SECONDS)),
                [Notification(NOTIFICATION_TITLE, MESSAGE_START_WORKING)],
            )

    raise TypeError(f"Unsupported phase: {phase!r}")
