"""Prayer times for a saved/detected location, next-prayer lookup and formatting."""

import datetime

from prayertime.calculator import compute, parse_date
from prayertime.localtime import fixed_offset
from prayertime.location import local_date, timezone_offset_hours
from prayertime.models import PRAYERS, Prayer, PrayerTimeSet, UnreachablePolicy
from prayertime.settings import AppSettings

PRAYER_DISPLAY = {
    Prayer.FAJR: "Subuh / Fajr",
    Prayer.DHUHR: "Dzuhur / Dhuhr",
    Prayer.ASR: "Ashar / Asr",
    Prayer.MAGHRIB: "Maghrib",
    Prayer.ISHA: "Isya / Isha",
}


def get_prayer_times(
    location: dict,
    date=None,
    settings: AppSettings = None,
    offset_hours: float = None,
    unreachable=UnreachablePolicy.FALLBACK,
) -> PrayerTimeSet:
    """
    Prayer times for a location dict (lat, lon, timezone) on a date.

    The UTC offset is that of the location's own timezone on that date unless
    offset_hours is given explicitly. Defaults: today, default settings.
    """
    settings = settings or AppSettings()
    day = parse_date(date) if date is not None else datetime.date.today()
    if offset_hours is None:
        offset_hours = timezone_offset_hours(location.get("timezone", "UTC"), day)
    return compute(
        location["lat"],
        location["lon"],
        day,
        method=settings.calculation_method,
        juristic=settings.juristic_method,
        timezone_offset_hours=offset_hours,
        unreachable=unreachable,
    )


def compute_range(
    location: dict,
    start,
    days: int,
    settings: AppSettings = None,
    offset_hours: float = None,
    unreachable=UnreachablePolicy.FALLBACK,
):
    """Yield (date, PrayerTimeSet) for `days` consecutive days from `start`."""
    first = parse_date(start)
    for i in range(days):
        day = first + datetime.timedelta(days=i)
        yield day, get_prayer_times(location, day, settings, offset_hours, unreachable)


def time_str_to_dt(time_str: str) -> datetime.datetime | None:
    """Parse an ISO-8601 prayer time; empty strings give None."""
    if not time_str:
        return None
    return datetime.datetime.fromisoformat(time_str)


def get_next_prayer(times: PrayerTimeSet, now: datetime.datetime) -> tuple:
    """
    Given a PrayerTimeSet and an aware current datetime, return
    (prayer, prayer_datetime) of the next upcoming prayer.
    Returns (None, None) if all prayers passed. Blank prayers are skipped.
    """
    for prayer in PRAYERS:
        prayer_dt = time_str_to_dt(times.get(prayer))
        if prayer_dt is not None and prayer_dt > now:
            return prayer, prayer_dt
    return None, None


def next_prayer(
    location: dict,
    now: datetime.datetime,
    settings: AppSettings = None,
    offset_hours: float = None,
    unreachable=UnreachablePolicy.FALLBACK,
) -> tuple:
    """
    Next prayer after `now` (aware), rolling over to tomorrow's Fajr once
    Isha has passed. Returns (None, None) if no prayer can be determined.

    Without offset_hours, today and tomorrow each use the location zone's own
    offset on that date.
    """
    if offset_hours is None:
        today = local_date(location.get("timezone", "UTC"), now)
    else:
        today = now.astimezone(fixed_offset(offset_hours)).date()
    times = get_prayer_times(location, today, settings, offset_hours, unreachable)
    name, dt = get_next_prayer(times, now)
    if name is not None:
        return name, dt
    tomorrow = get_prayer_times(location, today + datetime.timedelta(days=1), settings, offset_hours, unreachable)
    fajr_dt = time_str_to_dt(tomorrow.fajr)
    if fajr_dt is None or fajr_dt <= now:
        return None, None
    return Prayer.FAJR, fajr_dt


def seconds_until(target_dt: datetime.datetime, now: datetime.datetime = None) -> int:
    """Return seconds from now until target_dt (can be negative if past)."""
    if now is None:
        now = datetime.datetime.now(target_dt.tzinfo)
    delta = target_dt - now
    return int(delta.total_seconds())


def format_time(time_str: str, is_24_hour: bool = False) -> str:
    """'15:04' or '3:04 PM' for an ISO prayer time; '--:--' when blank."""
    dt = time_str_to_dt(time_str)
    if dt is None:
        return "--:--"
    if is_24_hour:
        return dt.strftime("%H:%M")
    hour = dt.hour % 12 or 12
    return f"{hour}:{dt.minute:02d} {'AM' if dt.hour < 12 else 'PM'}"
