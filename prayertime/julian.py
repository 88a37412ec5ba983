"""Gregorian calendar date to Julian Day Number."""

import datetime

J2000 = 2451545.0  # JDN of 2000-01-01 (J2000.0 epoch, noon UTC)


def julian_day_number(year: int, month: int, day: int) -> float:
    """
    Julian Day Number of a proleptic Gregorian date.

    The year is shifted so that March is month 0 and January/February count
    as months 10/11 of the previous year, which puts the leap day last.
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return float(day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045)


def days_since_j2000(date: datetime.date) -> float:
    """Days elapsed between the J2000.0 epoch and the given date."""
    return julian_day_number(date.year, date.month, date.day) - J2000
