import logging
import subprocess
import types
import unittest
from unittest.mock import MagicMock, patch

from notifications import (
    DesktopNotifier,
    NotificationConfig,
    NotificationConfigurationError,
    NotificationError,
    NullNotifier,
    build_notifier,
)


class DesktopNotifierTests(unittest.TestCase):
    def test_notify_spawns_command_with_title_and_body(self) -> None:
        notifier = DesktopNotifier(
            NotificationConfig(command="notify-send -u normal"),
            logger=logging.getLogger("test"),
        )
        with patch("notifications.service.subprocess.Popen") as popen:
            notifier.notify("pomodoro", "Time to take a break")

        argv = popen.call_args.args[0]
        self.assertEqual(["notify-send", "-u", "normal", "pomodoro", "Time to take a break"], argv)
        self.assertEqual(subprocess.DEVNULL, popen.call_args.kwargs["stdout"])

    def test_missing_command_raises_notification_error(self) -> None:
        notifier = DesktopNotifier(NotificationConfig(), logger=logging.getLogger("test"))
        with patch(
            "notifications.service.subprocess.Popen",
            side_effect=FileNotFoundError("notify-send"),
        ):
            with self.assertRaises(NotificationError):
                notifier.notify("pomodoro", "Time to start working")

    def test_empty_command_is_rejected(self) -> None:
        with self.assertRaises(NotificationConfigurationError):
            NotificationConfig(command="  ")

    def test_unbalanced_quotes_are_rejected(self) -> None:
        with self.assertRaises(NotificationConfigurationError) as context:
            NotificationConfig(command="notify-send 'oops")
        self.assertIn("cannot be parsed", str(context.exception))

    def test_from_settings_reports_unparsable_command(self) -> None:
        settings = types.SimpleNamespace(enabled=True, command="notify-send \"oops")
        with self.assertRaises(NotificationConfigurationError):
            NotificationConfig.from_settings(settings)

    def test_finished_children_are_reaped_on_next_notify(self) -> None:
        notifier = DesktopNotifier(NotificationConfig(), logger=logging.getLogger("test"))
        first, second = MagicMock(), MagicMock()
        first.poll.side_effect = [None, 0]
        second.poll.return_value = None
        with patch("notifications.service.subprocess.Popen", side_effect=[first, second, MagicMock()]):
            notifier.notify("pomodoro", "Time to take a break")
            notifier.notify("pomodoro", "Time to start working")
            self.assertEqual(2, notifier.pending_children)
            notifier.notify("pomodoro", "Time to take some nap")

        first.poll.assert_called()
        self.assertEqual(2, notifier.pending_children)

    def test_failed_child_is_logged_when_reaped(self) -> None:
        notifier = DesktopNotifier(NotificationConfig(), logger=logging.getLogger("test"))
        child = MagicMock()
        child.poll.return_value = 1
        with patch("notifications.service.subprocess.Popen", side_effect=[child, MagicMock()]):
            notifier.notify("pomodoro", "Time to take a break")
            with self.assertLogs("test", level="WARNING"):
                notifier.notify("pomodoro", "Time to start working")
        self.assertEqual(1, notifier.pending_children)

    def test_build_notifier_respects_enabled_flag(self) -> None:
        self.assertIsInstance(build_notifier(NotificationConfig(enabled=False)), NullNotifier)
        self.assertIsInstance(build_notifier(NotificationConfig(enabled=True)), DesktopNotifier)

    def test_null_notifier_does_not_spawn(self) -> None:
        with patch("notifications.service.subprocess.Popen") as popen:
            NullNotifier().notify("pomodoro", "Time to take some nap")
        popen.assert_not_called()


if __name__ == "__main__":
    unittest.main()
