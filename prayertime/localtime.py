"""Project UTC decimal hours onto a calendar date at a fixed UTC offset."""

import datetime
import math

import pytz


def fixed_offset(offset_hours: float) -> datetime.tzinfo:
    """A fixed-offset tzinfo, rounded to whole minutes."""
    return pytz.FixedOffset(int(round(offset_hours * 60)))


def to_datetime(date: datetime.date, hours_utc: float, offset_hours: float) -> datetime.datetime | None:
    """
    Aware datetime for `hours_utc` on `date`, expressed at `offset_hours`.

    Seconds are dropped (minutes are floored). When the local time falls
    before midnight or after 24:00, the calendar date moves with it so the
    instant stays correct. Returns None for NaN or infinite input.
    """
    if not math.isfinite(hours_utc):
        return None
    midnight = datetime.datetime(date.year, date.month, date.day, tzinfo=pytz.utc)
    instant = midnight + datetime.timedelta(minutes=math.floor(hours_utc * 60))
    return instant.astimezone(fixed_offset(offset_hours))


def to_time_string(date: datetime.date, hours_utc: float, offset_hours: float) -> str:
    """ISO-8601 timestamp with numeric offset, e.g. 2024-06-21T12:22:00+03:00, or ""."""
    dt = to_datetime(date, hours_utc, offset_hours)
    if dt is None:
        return ""
    return dt.isoformat()
