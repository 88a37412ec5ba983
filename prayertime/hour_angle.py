"""
Hour angles: how far (in degrees, 15° per hour) from solar noon the sun sits
at a given altitude.

Both solvers return an HourAngle that is either reachable or not. Near the
poles the sun may never dip 18° below the horizon (or never set at all), in
which case there is no angle to report; picking a substitute is left to the
caller.
"""

import math
from dataclasses import dataclass

from prayertime.models import SHADOW_FACTORS, JuristicMethod

SUNSET_ANGLE = 0.833  # refraction + solar semi-diameter

# Historical substitutes for an unreachable altitude
DEPRESSION_FALLBACK = 0.0
ASR_FALLBACK = 60.0  # 4 hours; 0° would put Asr on top of Dhuhr


@dataclass(frozen=True)
class HourAngle:
    degrees: float | None = None  # None when the sun never gets there

    @property
    def reachable(self) -> bool:
        return self.degrees is not None

    def resolve(self, fallback: float | None) -> float:
        """
        Hour angle in degrees, or the fallback when unreachable.
        A fallback of None resolves to NaN, which renders as an empty time.
        """
        if self.degrees is not None:
            return self.degrees
        if fallback is None:
            return math.nan
        return fallback

    def hours(self, fallback: float | None) -> float:
        return self.resolve(fallback) / 15.0


UNREACHABLE = HourAngle()


def _from_cosine(cos_h: float) -> HourAngle:
    # NaN fails both comparisons, so test for the valid range instead
    if not -1.0 <= cos_h <= 1.0:
        return UNREACHABLE
    return HourAngle(math.degrees(math.acos(cos_h)))


def _cos_hour_angle(sin_altitude: float, latitude: float, declination: float) -> float:
    lat = math.radians(latitude)
    dec = math.radians(declination)
    return (sin_altitude - math.sin(lat) * math.sin(dec)) / (math.cos(lat) * math.cos(dec))


def hour_angle(latitude: float, declination: float, angle: float) -> HourAngle:
    """Hour angle when the sun is `angle` degrees below the horizon."""
    return _from_cosine(_cos_hour_angle(-math.sin(math.radians(angle)), latitude, declination))


def asr_hour_angle(latitude: float, declination: float, juristic=JuristicMethod.STANDARD) -> HourAngle:
    """
    Hour angle of Asr: the moment an object's shadow equals its noon shadow
    plus shadow_factor times its height (1 for Standard, 2 for Hanafi).
    """
    factor = SHADOW_FACTORS.get(juristic, 1.0)
    zenith_at_noon = abs(math.radians(latitude) - math.radians(declination))
    cot_altitude = factor + math.tan(zenith_at_noon)
    if cot_altitude == 0:
        return UNREACHABLE
    altitude = math.atan(1.0 / cot_altitude)
    return _from_cosine(_cos_hour_angle(math.sin(altitude), latitude, declination))
