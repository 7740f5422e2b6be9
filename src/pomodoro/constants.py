"""Interval, cycle, notification, and key binding constants for the pomodoro cycle."""

from __future__ import annotations

WORKING_INTERVAL_SECONDS = 25 * 60
RESTING_INTERVAL_SECONDS = 5 * 60
NAPPING_INTERVAL_SECONDS = 15 * 60

ROUNDS_PER_CYCLE = 4

PHASE_WORKING = "working"
PHASE_RESTING = "resting"
PHASE_NAPPING = "napping"

NOTIFICATION_TITLE = "pomodoro"
MESSAGE_TAKE_BREAK = "Time to take a break"
MESSAGE_TAKE_NAP = "Time to take some nap"
MESSAGE_START_WORKING = "Time to start working"

KEY_TOGGLE_PAUSE = " "
KEY_RESET = "r"

TICK_INTERVAL_SECONDS = 1.0

DEFAULT_STATE_FILE = "/data/pomo.json"
