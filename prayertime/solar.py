"""
Low-precision solar coordinates (USNO approximation).

Good to about a minute of time for dates within a couple of centuries of
J2000.0, which is all prayer times need.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class SolarPosition:
    declination: float  # degrees
    equation_of_time: float  # minutes, apparent minus mean solar time


def norm360(degrees: float) -> float:
    """Fold an angle into [0, 360)."""
    d = degrees % 360.0
    # tiny negatives round up to exactly 360.0
    return 0.0 if d == 360.0 else d


def _ecliptic(d: float) -> tuple[float, float, float]:
    """Mean longitude, ecliptic longitude and obliquity (degrees) for day d."""
    g = norm360(357.529 + 0.98560028 * d)
    q = norm360(280.459 + 0.98564736 * d)
    g_rad = math.radians(g)
    lon = norm360(q + 1.915 * math.sin(g_rad) + 0.020 * math.sin(2 * g_rad))
    obliquity = 23.439 - 0.00000036 * d
    return q, lon, obliquity


def equation_of_time(d: float) -> float:
    """Equation of time in minutes for d days since J2000.0."""
    q, lon, obliquity = _ecliptic(d)
    lon_rad = math.radians(lon)
    ra = norm360(math.degrees(math.atan2(
        math.cos(math.radians(obliquity)) * math.sin(lon_rad),
        math.cos(lon_rad),
    )))

    # q and ra are both in [0, 360): q=350, ra=10 means -20, not 340
    eqt = q - ra
    if eqt > 180:
        eqt -= 360
    elif eqt < -180:
        eqt += 360
    return eqt * 4  # 1 degree of right ascension = 4 minutes


def solar_declination(d: float) -> float:
    """Declination of the sun in degrees for d days since J2000.0."""
    _, lon, obliquity = _ecliptic(d)
    return math.degrees(math.asin(
        math.sin(math.radians(obliquity)) * math.sin(math.radians(lon))
    ))


def sun_position(d: float) -> SolarPosition:
    return SolarPosition(
        declination=solar_declination(d),
        equation_of_time=equation_of_time(d),
    )
