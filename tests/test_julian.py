"""Tests for the julian module."""

import datetime
import unittest

from prayertime.julian import J2000, days_since_j2000, julian_day_number


class TestJulianDayNumber(unittest.TestCase):
    def test_j2000_epoch(self):
        self.assertEqual(julian_day_number(2000, 1, 1), 2451545.0)

    def test_unix_epoch(self):
        self.assertEqual(julian_day_number(1970, 1, 1), 2440588.0)

    def test_summer_solstice_2024(self):
        self.assertEqual(julian_day_number(2024, 6, 21), 2460483.0)

    def test_increases_by_one_each_day(self):
        # spans a year end, a leap day and a non-leap February
        day = datetime.date(1999, 12, 1)
        previous = julian_day_number(day.year, day.month, day.day)
        while day < datetime.date(2001, 3, 31):
            day += datetime.timedelta(days=1)
            current = julian_day_number(day.year, day.month, day.day)
            self.assertEqual(current - previous, 1.0, day)
            previous = current

    def test_century_non_leap_year(self):
        # 1900 has no Feb 29, so Mar 1 follows Feb 28
        self.assertEqual(julian_day_number(1900, 3, 1) - julian_day_number(1900, 2, 28), 1.0)

    def test_returns_float(self):
        self.assertIsInstance(julian_day_number(2024, 1, 1), float)


class TestDaysSinceJ2000(unittest.TestCase):
    def test_zero_at_epoch(self):
        self.assertEqual(days_since_j2000(datetime.date(2000, 1, 1)), 0.0)

    def test_matches_date_arithmetic(self):
        day = datetime.date(2024, 6, 21)
        expected = (day - datetime.date(2000, 1, 1)).days
        self.assertEqual(days_since_j2000(day), expected)
        self.assertEqual(julian_day_number(2024, 6, 21) - J2000, expected)


if __name__ == "__main__":
    unittest.main()
