"""Tests for the week parity engine."""

import unittest
from datetime import date, datetime, timedelta, timezone

from weekly_schedule_bot.entities.calendar import JalaliDate, ReferenceAnchor
from weekly_schedule_bot.entities.parity import Parity
from weekly_schedule_bot.use_cases.week_parity import WeekParityEngine, get_start_of_week
from weekly_schedule_bot.utils.exceptions import ReferenceAnchorError

# 1403/11/20 is Saturday 2025-02-08
ANCHOR = ReferenceAnchor(JalaliDate(1403, 11, 20), Parity.ODD)
ANCHOR_DATE = date(2025, 2, 8)


class TestGetStartOfWeek(unittest.TestCase):
    """Test cases for get_start_of_week."""

    def test_every_day_of_the_week_maps_to_its_saturday(self):
        for offset in range(7):
            with self.subTest(offset=offset):
                self.assertEqual(get_start_of_week(ANCHOR_DATE + timedelta(days=offset)), ANCHOR_DATE)

    def test_friday_before_belongs_to_previous_week(self):
        self.assertEqual(get_start_of_week(date(2025, 2, 7)), date(2025, 2, 1))

    def test_always_saturday_and_idempotent(self):
        start = date(2024, 12, 25)
        for offset in range(60):
            day = start + timedelta(days=offset)
            week_start = get_start_of_week(day)
            with self.subTest(day=day):
                self.assertEqual(week_start.weekday(), 5)
                self.assertEqual(get_start_of_week(week_start), week_start)
                self.assertLessEqual(week_start, day)

    def test_aware_datetime_is_read_in_utc(self):
        # Saturday 01:00 in Tehran is still Friday in UTC
        value = datetime(2025, 2, 7, 21, 30, tzinfo=timezone.utc)
        self.assertEqual(get_start_of_week(value), date(2025, 2, 1))


class TestWeekParityEngine(unittest.TestCase):
    """Test cases for WeekParityEngine."""

    def setUp(self):
        self.engine = WeekParityEngine(ANCHOR)

    def test_reference_date(self):
        self.assertEqual(self.engine.reference_date, ANCHOR_DATE)
        self.assertEqual(self.engine.reference_week_start, ANCHOR_DATE)

    def test_same_week_as_anchor_keeps_parity(self):
        for offset in range(7):
            with self.subTest(offset=offset):
                self.assertEqual(
                    self.engine.compute_parity(ANCHOR_DATE + timedelta(days=offset)),
                    Parity.ODD,
                )

    def test_week_before_anchor_is_flipped(self):
        self.assertEqual(self.engine.compute_parity(date(2025, 2, 7)), Parity.EVEN)
        self.assertEqual(self.engine.compute_parity(date(2025, 2, 1)), Parity.EVEN)
        self.assertEqual(self.engine.compute_parity(date(2025, 1, 31)), Parity.ODD)

    def test_period_is_two_weeks(self):
        start = date(2024, 9, 1)
        for offset in range(0, 200, 3):
            day = start + timedelta(days=offset)
            with self.subTest(day=day):
                parity = self.engine.compute_parity(day)
                self.assertEqual(self.engine.compute_parity(day + timedelta(days=14)), parity)
                self.assertEqual(self.engine.compute_parity(day + timedelta(days=7)), parity.flip())

    def test_weeks_between(self):
        self.assertEqual(WeekParityEngine.weeks_between(ANCHOR_DATE, date(2025, 2, 14)), 0)
        self.assertEqual(WeekParityEngine.weeks_between(ANCHOR_DATE, date(2025, 2, 15)), 1)
        self.assertEqual(WeekParityEngine.weeks_between(ANCHOR_DATE, date(2025, 2, 7)), -1)
        self.assertEqual(self.engine.weeks_since_reference(date(2025, 1, 25)), -2)

    def test_even_anchor(self):
        engine = WeekParityEngine(ReferenceAnchor(JalaliDate(1403, 11, 20), Parity.EVEN))
        self.assertEqual(engine.compute_parity(ANCHOR_DATE), Parity.EVEN)
        self.assertEqual(engine.compute_parity(date(2025, 2, 15)), Parity.ODD)

    def test_invalid_anchor_fails_fast(self):
        with self.assertRaises(ReferenceAnchorError) as raised:
            WeekParityEngine(ReferenceAnchor(JalaliDate(1402, 12, 30), Parity.ODD))
        self.assertIn("1402/12/30", str(raised.exception))

    def test_today_uses_configured_timezone(self):
        # 22:00 UTC on Friday is already Saturday in Tehran
        now = datetime(2025, 2, 7, 22, 0, tzinfo=timezone.utc)
        self.assertEqual(self.engine.today(now), ANCHOR_DATE)
        self.assertEqual(self.engine.current_parity(now), Parity.ODD)
        self.assertEqual(self.engine.next_week_parity(now), Parity.EVEN)

    def test_today_treats_naive_datetime_as_local(self):
        self.assertEqual(self.engine.today(datetime(2025, 2, 8, 0, 30)), ANCHOR_DATE)


if __name__ == "__main__":
    unittest.main()
