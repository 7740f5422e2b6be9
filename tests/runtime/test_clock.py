import datetime as dt
import unittest

from runtime.clock import format_clock


class ClockFormattingTests(unittest.TestCase):
    def test_uses_fixed_utc_plus_eight_by_default(self) -> None:
        now = dt.datetime(2026, 12, 31, 17, 4, 59, tzinfo=dt.timezone.utc)
        self.assertEqual("01:04 2027-01-01 Fri", format_clock(now))

    def test_converts_from_other_offsets(self) -> None:
        now = dt.datetime(2026, 3, 2, 9, 30, tzinfo=dt.timezone(dt.timedelta(hours=-5)))
        self.assertEqual("22:30 2026-03-02 Mon", format_clock(now))

    def test_naive_datetime_is_treated_as_utc(self) -> None:
        self.assertEqual("08:00 2026-03-02 Mon", format_clock(dt.datetime(2026, 3, 2, 0, 0)))

    def test_custom_offset(self) -> None:
        now = dt.datetime(2026, 3, 2, 0, 0, tzinfo=dt.timezone.utc)
        self.assertEqual("21:00 2026-03-01 Sun", format_clock(now, utc_offset_hours=-3))


if __name__ == "__main__":
    unittest.main()
