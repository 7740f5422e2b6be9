"""JSON persistence of the pomodoro session across visibility changes."""

from __future__ import annotations

import json
import logging
import math
import os
import tempfile
from pathlib import Path
from typing import Any, Mapping, Optional

from .constants import PHASE_NAPPING, PHASE_RESTING, PHASE_WORKING, ROUNDS_PER_CYCLE
from .errors import SessionDecodeError, SessionStoreError
from .phases import Napping, Phase, Resting, Working, phase_name
from .session import Session, new_session


def session_to_dict(session: Session) -> dict[str, Any]:
    """Serialize a session into the persisted JSON shape."""
    return {
        "paused": session.paused,
        "status": _phase_to_dict(session.phase),
    }


def session_from_dict(raw: Any) -> Session:
    """Rebuild a session from persisted JSON, rejecting malformed content."""
    if not isinstance(raw, Mapping):
        raise SessionDecodeError("Session record must be an object.")

    paused = raw.get("paused")
    if not isinstance(paused, bool):
        raise SessionDecodeError("paused must be a boolean.")

    return Session(paused=paused, phase=_phase_from_dict(raw.get("status")))


class SessionStore:
    """Reads and writes the single persisted session record."""

    def __init__(self, path: str | Path, *, logger: Optional[logging.Logger] = None):
        self._path = Path(path)
        self._logger = logger or logging.getLogger("pomodoro.store")

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Session:
        """Return the stored session, or a fresh one when none can be read."""
        try:
            with open(self._path, "r", encoding="utf-8") as fh:
                raw = json.load(fh)
        except FileNotFoundError:
            self._logger.info("No stored session at %s, starting fresh", self._path)
            return new_session()
        except (OSError, ValueError, RecursionError) as error:
            self._logger.warning("Failed to read stored session %s: %s", self._path, error)
            return new_session()

        try:
            session = session_from_dict(raw)
        except SessionDecodeError as error:
            self._logger.warning("Ignoring malformed stored session %s: %s", self._path, error)
            return new_session()

        self._logger.debug("Loaded session from %s", self._path)
        return session

    def save(self, session: Session) -> None:
        payload = json.dumps(session_to_dict(session))
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.",
                dir=str(self._path.parent),
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                os.replace(temp_name, self._path)
            except BaseException:
                Path(temp_name).unlink(missing_ok=True)
                raise
        except OSError as error:
            raise SessionStoreError(f"Failed to write session to {self._path}: {error}") from error

        self._logger.debug("Saved session to %s", self._path)


def _phase_to_dict(phase: Phase) -> dict[str, Any]:
    payload: dict[str, Any] = {"phase": phase_name(phase)}
    if isinstance(phase, (Working, Resting)):
        payload["round"] = phase.round
    payload["remaining_seconds"] = phase.remaining_seconds
    return payload


def _phase_from_dict(raw: Any) -> Phase:
    if not isinstance(raw, Mapping):
        raise SessionDecodeError("status must be an object.")

    name = raw.get("phase")
    remaining = _as_remaining(raw.get("remaining_seconds"))
    if name == PHASE_WORKING:
        return Working(_as_round(raw.get("round")), remaining)
    if name == PHASE_RESTING:
        return Resting(_as_round(raw.get("round")), remaining)
    if name == PHASE_NAPPING:
        return Napping(remaining)
    raise SessionDecodeError(f"Unknown phase: {name!r}")


def _as_round(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SessionDecodeError("round must be an integer.")
    if not 0 <= value < ROUNDS_PER_CYCLE:
        raise SessionDecodeError(f"round must be in [0, {ROUNDS_PER_CYCLE - 1}], got: {value}")
    return value


def _as_remaining(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SessionDecodeError("remaining_seconds must be a number.")
    try:
        seconds = float(value)
    except OverflowError as error:
        raise SessionDecodeError("remaining_seconds is out of range.") from error
    if not math.isfinite(seconds) or seconds < 0:
        raise SessionDecodeError(f"remaining_seconds must be non-negative, got: {seconds}")
    return seconds
