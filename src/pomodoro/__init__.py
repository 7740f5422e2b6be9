from .errors import PomodoroError, SessionDecodeError, SessionStoreError
from .phases import (
    Napping,
    Notification,
    Phase,
    Resting,
    Working,
    advance,
    default_phase,
    phase_name,
)
from .session import (
    Session,
    SessionController,
    format_hint,
    format_status,
    new_session,
)
from .store import SessionStore, session_from_dict, session_to_dict

__all__ = [
    "Napping",
    "Notification",
    "Phase",
    "PomodoroError",
    "Resting",
    "Session",
    "SessionController",
    "SessionDecodeError",
    "SessionStore",
    "SessionStoreError",
    "Working",
    "advance",
    "default_phase",
    "format_hint",
    "format_status",
    "new_session",
    "phase_name",
    "session_from_dict",
    "session_to_dict",
]
