"""
Prayer time calculation.

Everything is worked out in UTC decimal hours relative to solar noon and only
projected to local wall-clock time at the very end:

    dhuhr   = 12 - longitude/15 - equation_of_time/60
    fajr    = dhuhr - H(fajr_angle)/15
    asr     = dhuhr + H_asr(shadow_factor)/15
    maghrib = dhuhr + H(0.833 or maghrib_angle)/15  [+ interval]
    isha    = dhuhr + H(isha_angle)/15  or  maghrib + interval
"""

import datetime
import logging
from dataclasses import dataclass

from prayertime.hour_angle import (
    ASR_FALLBACK,
    DEPRESSION_FALLBACK,
    SUNSET_ANGLE,
    HourAngle,
    asr_hour_angle,
    hour_angle,
)
from prayertime.julian import days_since_j2000
from prayertime.localtime import to_time_string
from prayertime.methods import DEFAULT_METHOD, get_calculation_params
from prayertime.models import (
    CalculationParams,
    JuristicMethod,
    PrayerTimeSet,
    UnreachablePolicy,
)
from prayertime.solar import sun_position

logger = logging.getLogger(__name__)


class PrayerTimeError(ValueError):
    """Invalid input to the prayer time calculation."""


class InvalidCoordinateError(PrayerTimeError):
    """Latitude or longitude out of range."""


class InvalidDateError(PrayerTimeError):
    """Date is not a calendar date or not a valid YYYY-MM-DD string."""


class InvalidTimezoneOffsetError(PrayerTimeError):
    """UTC offset is not a finite number of hours within a day."""


@dataclass(frozen=True)
class UtcPrayerHours:
    """Prayer instants as UTC decimal hours of the given date (not wrapped)."""

    fajr: float
    sunrise: float
    dhuhr: float
    asr: float
    maghrib: float
    isha: float


def parse_date(value) -> datetime.date:
    """Accept a datetime.date (or datetime) or an ISO 'YYYY-MM-DD' string."""
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        try:
            return datetime.datetime.strptime(value.strip(), "%Y-%m-%d").date()
        except ValueError as exc:
            raise InvalidDateError(f"date must be YYYY-MM-DD, got {value!r}") from exc
    raise InvalidDateError(f"unsupported date value: {value!r}")


def validate_coordinate(latitude: float, longitude: float) -> tuple[float, float]:
    try:
        lat, lon = float(latitude), float(longitude)
    except (TypeError, ValueError) as exc:
        raise InvalidCoordinateError(f"coordinates must be numbers: {latitude!r}, {longitude!r}") from exc
    if not -90.0 <= lat <= 90.0:
        raise InvalidCoordinateError(f"latitude {latitude} outside [-90, 90]")
    if not -180.0 <= lon <= 180.0:
        raise InvalidCoordinateError(f"longitude {longitude} outside [-180, 180]")
    return lat, lon


def validate_offset(offset_hours: float) -> None:
    try:
        offset = float(offset_hours)
    except (TypeError, ValueError) as exc:
        raise InvalidTimezoneOffsetError(f"timezone offset must be a number: {offset_hours!r}") from exc
    if not -24.0 < offset < 24.0:
        raise InvalidTimezoneOffsetError(f"timezone offset {offset_hours} outside (-24, 24) hours")


def _maghrib(latitude: float, declination: float, params: CalculationParams, dhuhr: float, fallback) -> float:
    if params.maghrib_angle > 0:
        return dhuhr + _hours(hour_angle(latitude, declination, params.maghrib_angle), fallback, "maghrib")
    sunset = dhuhr + _hours(hour_angle(latitude, declination, SUNSET_ANGLE), fallback, "sunset")
    if params.maghrib_interval > 0:
        return sunset + params.maghrib_interval / 60.0
    return sunset


def _isha(latitude: float, declination: float, params: CalculationParams, maghrib: float, dhuhr: float, fallback) -> float:
    if params.isha_interval > 0:
        return maghrib + params.isha_interval / 60.0
    return dhuhr + _hours(hour_angle(latitude, declination, params.isha_angle), fallback, "isha")


def _hours(angle: HourAngle, fallback, label: str) -> float:
    if not angle.reachable:
        logger.debug("Sun never reaches the %s altitude, using %s", label, fallback)
    return angle.hours(fallback)


def compute_utc_hours(
    latitude: float,
    longitude: float,
    date,
    method=DEFAULT_METHOD,
    juristic=JuristicMethod.STANDARD,
    unreachable=UnreachablePolicy.FALLBACK,
) -> UtcPrayerHours:
    """
    Prayer times for one location and date, in UTC decimal hours.

    With UnreachablePolicy.FALLBACK an altitude the sun never reaches is
    replaced by a 0° hour angle (60° for Asr); with EMPTY the affected
    prayers come back as NaN.
    """
    latitude, longitude = validate_coordinate(latitude, longitude)
    day = parse_date(date)
    params = get_calculation_params(method)

    if UnreachablePolicy(unreachable) is UnreachablePolicy.EMPTY:
        twilight_fallback = asr_fallback = None
    else:
        twilight_fallback, asr_fallback = DEPRESSION_FALLBACK, ASR_FALLBACK

    sun = sun_position(days_since_j2000(day))
    dec = sun.declination

    dhuhr = 12.0 - longitude / 15.0 - sun.equation_of_time / 60.0
    fajr = dhuhr - _hours(hour_angle(latitude, dec, params.fajr_angle), twilight_fallback, "fajr")
    sunrise = dhuhr - _hours(hour_angle(latitude, dec, SUNSET_ANGLE), twilight_fallback, "sunrise")
    asr = dhuhr + _hours(asr_hour_angle(latitude, dec, juristic), asr_fallback, "asr")
    maghrib = _maghrib(latitude, dec, params, dhuhr, twilight_fallback)
    isha = _isha(latitude, dec, params, maghrib, dhuhr, twilight_fallback)

    return UtcPrayerHours(fajr=fajr, sunrise=sunrise, dhuhr=dhuhr, asr=asr, maghrib=maghrib, isha=isha)


def compute(
    latitude: float,
    longitude: float,
    date,
    method=DEFAULT_METHOD,
    juristic=JuristicMethod.STANDARD,
    timezone_offset_hours: float = 0.0,
    unreachable=UnreachablePolicy.FALLBACK,
) -> PrayerTimeSet:
    """
    Compute the five prayer times as ISO-8601 strings at a fixed UTC offset.

    The offset is used as given; it is not derived from the coordinate.
    Raises InvalidCoordinateError, InvalidDateError or
    InvalidTimezoneOffsetError for bad input. A prayer that cannot be
    determined is returned as an empty string.
    """
    validate_offset(timezone_offset_hours)
    day = parse_date(date)
    hours = compute_utc_hours(latitude, longitude, day, method, juristic, unreachable)
    offset = float(timezone_offset_hours)
    return PrayerTimeSet(
        fajr=to_time_string(day, hours.fajr, offset),
        dhuhr=to_time_string(day, hours.dhuhr, offset),
        asr=to_time_string(day, hours.asr, offset),
        maghrib=to_time_string(day, hours.maghrib, offset),
        isha=to_time_string(day, hours.isha, offset),
        sunrise=to_time_string(day, hours.sunrise, offset),
    )
