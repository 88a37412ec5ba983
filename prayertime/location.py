"""Location detection using IP geolocation and manual config."""

import datetime
import json
import logging
import os

import pytz
import requests

from prayertime.models import GeoCoordinate

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = {
    "city": "Makkah",
    "region": "Makkah Province",
    "country": "SA",
    "lat": 21.4225,
    "lon": 39.8262,
    "timezone": "Asia/Riyadh",
}

IPAPI_URL = "http://ip-api.com/json/"

CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".prayertime")
CONFIG_FILE = os.path.join(CONFIG_DIR, "location.json")

REQUIRED_KEYS = ("city", "region", "country", "lat", "lon", "timezone")


def get_location(timeout: int = 5) -> dict:
    """
    Detect current location via IP geolocation.

    Returns a dict with: city, region, country, lat, lon, timezone.
    Falls back to DEFAULT_LOCATION on failure.
    """
    try:
        resp = requests.get(
            IPAPI_URL,
            params={"fields": "city,regionName,country,lat,lon,timezone,status,message"},
            timeout=timeout,
        )
        resp.raise_for_status()
        data = resp.json()
    except (requests.RequestException, ValueError) as exc:
        logger.warning("IP geolocation failed (%s), using default location", exc)
        return dict(DEFAULT_LOCATION)

    if data.get("status") != "success":
        logger.warning("IP geolocation refused: %s", data.get("message", data.get("status")))
        return dict(DEFAULT_LOCATION)

    return {
        "city": data.get("city", DEFAULT_LOCATION["city"]),
        "region": data.get("regionName", DEFAULT_LOCATION["region"]),
        "country": data.get("country", DEFAULT_LOCATION["country"]),
        "lat": float(data.get("lat", DEFAULT_LOCATION["lat"])),
        "lon": float(data.get("lon", DEFAULT_LOCATION["lon"])),
        "timezone": data.get("timezone", DEFAULT_LOCATION["timezone"]),
    }


def save_manual_location(location: dict) -> None:
    """Save a manually-set location to the config file."""
    os.makedirs(CONFIG_DIR, exist_ok=True)
    with open(CONFIG_FILE, "w", encoding="utf-8") as f:
        json.dump(location, f, indent=2)


def load_manual_location() -> dict | None:
    """Load a previously saved manual location, or return None."""
    if not os.path.isfile(CONFIG_FILE):
        return None
    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable location file %s: %s", CONFIG_FILE, exc)
        return None
    if isinstance(data, dict) and all(k in data for k in REQUIRED_KEYS):
        return data
    logger.warning("Ignoring location file %s: missing keys", CONFIG_FILE)
    return None


def clear_manual_location() -> None:
    """Remove the saved manual location config."""
    if os.path.isfile(CONFIG_FILE):
        os.remove(CONFIG_FILE)


def resolve_location(timeout: int = 5) -> dict:
    """Saved manual location if there is one, else IP geolocation."""
    return load_manual_location() or get_location(timeout=timeout)


def to_coordinate(location: dict) -> GeoCoordinate:
    return GeoCoordinate(latitude=float(location["lat"]), longitude=float(location["lon"]))


def _zone(tz_name: str):
    try:
        return pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        logger.warning("Unknown timezone %r, using UTC", tz_name)
        return pytz.utc


def timezone_offset_hours(tz_name: str, date: datetime.date) -> float:
    """
    UTC offset in hours of the named zone on the given date, taken at local
    noon so DST transitions in the small hours do not matter.
    Unknown zone names fall back to UTC.
    """
    tz = _zone(tz_name)
    noon = tz.localize(datetime.datetime(date.year, date.month, date.day, 12, 0))
    return noon.utcoffset().total_seconds() / 3600.0


def local_date(tz_name: str, now: datetime.datetime) -> datetime.date:
    """Calendar date of the aware instant `now` in the named zone."""
    return now.astimezone(_zone(tz_name)).date()
