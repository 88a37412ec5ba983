"""Direction of and distance to the Kaaba."""

import math

from prayertime.solar import norm360

MAKKAH_LAT = 21.4225
MAKKAH_LON = 39.8262
EARTH_RADIUS_KM = 6371.0


def qibla_direction(lat: float, lon: float) -> float:
    """Initial great-circle bearing to the Kaaba, degrees clockwise from north in [0, 360)."""
    lat1 = math.radians(lat)
    lat2 = math.radians(MAKKAH_LAT)
    d_lon = math.radians(MAKKAH_LON - lon)

    x = math.sin(d_lon) * math.cos(lat2)
    y = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon)
    return norm360(math.degrees(math.atan2(x, y)))


def distance_to_makkah(lat: float, lon: float) -> float:
    """Haversine distance to the Kaaba in kilometres."""
    lat1 = math.radians(lat)
    lat2 = math.radians(MAKKAH_LAT)
    d_lat = lat2 - lat1
    d_lon = math.radians(MAKKAH_LON - lon)

    a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
