class PomodoroError(Exception):
    """Base exception for pomodoro session handling."""


class SessionDecodeError(PomodoroError):
    """Raised when persisted session content is malformed."""


class SessionStoreError(PomodoroError):
    """Raised when writing the persisted session fails."""
