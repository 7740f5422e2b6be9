import unittest

from pomodoro.phases import (
    Napping,
    Notification,
    Resting,
    Working,
    advance,
    default_phase,
    phase_name,
)


def _exhaust(phase):
    return advance(phase, phase.remaining_seconds)


class PhaseEngineTests(unittest.TestCase):
    def test_default_phase_is_first_work_round(self) -> None:
        self.assertEqual(Working(0, 1500.0), default_phase())

    def test_subtracts_elapsed_without_notification(self) -> None:
        for phase, expected in (
            (Working(2, 100.0), Working(2, 99.0)),
            (Resting(1, 300.0), Resting(1, 299.0)),
            (Napping(900.0), Napping(899.0)),
        ):
            with self.subTest(phase=phase):
                result, notifications = advance(phase, 1.0)
                self.assertEqual(expected, result)
                self.assertEqual([], notifications)

    def test_zero_elapsed_keeps_phase(self) -> None:
        result, notifications = advance(Working(0, 10.0), 0.0)
        self.assertEqual(Working(0, 10.0), result)
        self.assertEqual([], notifications)

    def test_equal_elapsed_counts_as_exhausted(self) -> None:
        result, notifications = advance(Working(1, 5.0), 5.0)
        self.assertEqual(Resting(1, 300.0), result)
        self.assertEqual([Notification("pomodoro", "Time to take a break")], notifications)

    def test_overshoot_is_dropped(self) -> None:
        result, _ = advance(Working(1, 5.0), 6.0)
        self.assertEqual(Resting(1, 300.0), result)

    def test_large_elapsed_crosses_only_one_boundary(self) -> None:
        result, notifications = advance(Working(0, 1500.0), 10_000.0)
        self.assertEqual(Resting(0, 300.0), result)
        self.assertEqual(1, len(notifications))

    def test_rest_returns_to_next_work_round(self) -> None:
        result, notifications = advance(Resting(2, 1.0), 1.0)
        self.assertEqual(Working(3, 1500.0), result)
        self.assertEqual([Notification("pomodoro", "Time to start working")], notifications)

    def test_fourth_rest_leads_to_nap(self) -> None:
        result, notifications = advance(Resting(3, 1.0), 2.0)
        self.assertEqual(Napping(900.0), result)
        self.assertEqual([Notification("pomodoro", "Time to take some nap")], notifications)

    def test_nap_restarts_cycle(self) -> None:
        result, notifications = advance(Napping(1.0), 1.0)
        self.assertEqual(Working(0, 1500.0), result)
        self.assertEqual([Notification("pomodoro", "Time to start working")], notifications)

    def test_full_cycle_visits_phases_in_order(self) -> None:
        phase = default_phase()
        visited = [phase]
        for _ in range(9):
            phase, notifications = _exhaust(phase)
            self.assertEqual(1, len(notifications))
            visited.append(phase)

        self.assertEqual(
            [
                Working(0, 1500.0),
                Resting(0, 300.0),
                Working(1, 1500.0),
                Resting(1, 300.0),
                Working(2, 1500.0),
                Resting(2, 300.0),
                Working(3, 1500.0),
                Resting(3, 300.0),
                Napping(900.0),
                Working(0, 1500.0),
            ],
            visited,
        )

    def test_negative_elapsed_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            advance(Working(0, 10.0), -1.0)

    def test_unknown_phase_is_rejected(self) -> None:
        with self.assertRaises(TypeError):
            advance("working", 1.0)  # type: ignore[arg-type]

    def test_phase_names(self) -> None:
        self.assertEqual("working", phase_name(Working(0, 1.0)))
        self.assertEqual("resting", phase_name(Resting(0, 1.0)))
        self.assertEqual("napping", phase_name(Napping(1.0)))


if __name__ == "__main__":
    unittest.main()
