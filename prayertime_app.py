#!/usr/bin/env python3
"""
Prayer Time Terminal Edition
Prints, for the saved or detected location:
  - Current location and date
  - Daily prayer times (or a table for several days)
  - Countdown to the next prayer
  - Qibla direction and distance to Makkah
"""

import argparse
import datetime
import logging
import sys

from prayertime.calculator import PrayerTimeError, parse_date, validate_offset
from prayertime.location import (
    clear_manual_location,
    resolve_location,
    save_manual_location,
    timezone_offset_hours,
    to_coordinate,
)
from prayertime.localtime import fixed_offset
from prayertime.methods import list_calculation_methods
from prayertime.models import PRAYERS, CalculationMethod, JuristicMethod, UnreachablePolicy
from prayertime.prayer_api import (
    PRAYER_DISPLAY,
    compute_range,
    format_time,
    next_prayer,
    seconds_until,
)
from prayertime.qibla import distance_to_makkah, qibla_direction
from prayertime.settings import AppSettings, load_settings, save_settings

logger = logging.getLogger("prayertime")

SEPARATOR = "─" * 52


def _fmt_countdown(seconds: int) -> str:
    """Format seconds into HH:MM:SS countdown string."""
    if seconds < 0:
        return "00:00:00"
    h = seconds // 3600
    m = (seconds % 3600) // 60
    s = seconds % 60
    return f"{h:02d}:{m:02d}:{s:02d}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="prayertime", description="Compute daily prayer times offline.")
    parser.add_argument("--date", help="first day, YYYY-MM-DD (default: today)")
    parser.add_argument("--days", type=int, default=1, help="number of consecutive days to print")
    parser.add_argument("--lat", type=float, help="latitude in degrees (north positive)")
    parser.add_argument("--lon", type=float, help="longitude in degrees (east positive)")
    parser.add_argument("--tz", help="IANA timezone of the location, e.g. Asia/Jakarta")
    parser.add_argument("--offset", type=float, help="fixed UTC offset in hours; overrides --tz")
    parser.add_argument("--method", choices=[m.value for m in CalculationMethod], help="calculation method")
    parser.add_argument("--juristic", choices=[j.value for j in JuristicMethod], help="Asr school")
    parser.add_argument("--24h", dest="is_24_hour", action="store_true", default=None, help="24-hour clock")
    parser.add_argument(
        "--unreachable",
        choices=[p.value for p in UnreachablePolicy],
        default=UnreachablePolicy.FALLBACK.value,
        help="how to report prayers the sun never reaches (polar latitudes)",
    )
    parser.add_argument("--save-location", action="store_true", help="remember --lat/--lon/--tz")
    parser.add_argument("--reset-location", action="store_true", help="forget the saved location")
    parser.add_argument("--save-settings", action="store_true", help="remember --method/--juristic/--24h")
    parser.add_argument("--list-methods", action="store_true", help="list calculation methods and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def _location_from_args(args) -> dict:
    if args.reset_location:
        clear_manual_location()
    if args.lat is None and args.lon is None:
        location = resolve_location()
        if args.tz:
            location = dict(location, timezone=args.tz)
        return location
    if args.lat is None or args.lon is None:
        raise PrayerTimeError("--lat and --lon must be given together")
    location = {
        "city": "Custom",
        "region": "",
        "country": "",
        "lat": args.lat,
        "lon": args.lon,
        "timezone": args.tz or "UTC",
    }
    if args.save_location:
        save_manual_location(location)
    return location


def _settings_from_args(args) -> AppSettings:
    stored = load_settings()
    settings = AppSettings(
        calculation_method=CalculationMethod(args.method) if args.method else stored.calculation_method,
        juristic_method=JuristicMethod(args.juristic) if args.juristic else stored.juristic_method,
        is_24_hour_format=stored.is_24_hour_format if args.is_24_hour is None else args.is_24_hour,
    )
    if args.save_settings:
        save_settings(settings)
    return settings


def _print_header(location: dict, settings: AppSettings) -> None:
    place = ", ".join(p for p in (location.get("city"), location.get("region"), location.get("country")) if p)
    print(SEPARATOR)
    print(f"📍 {place}  ({location['lat']:.4f}, {location['lon']:.4f})  {location.get('timezone', 'UTC')}")
    print(f"   {settings.calculation_method.display_name} · Asr: {settings.juristic_method.display_name}")
    print(SEPARATOR)


def _print_day(day: datetime.date, times, is_24_hour: bool) -> None:
    print(day.strftime("%A %d %B %Y"))
    for prayer in PRAYERS:
        print(f"  {PRAYER_DISPLAY[prayer]:<16} {format_time(times.get(prayer), is_24_hour):>8}")
    print(f"  {'Sunrise / Syuruq':<16} {format_time(times.sunrise, is_24_hour):>8}")


def _print_table(rows, is_24_hour: bool) -> None:
    print("Date        " + " ".join(f"{p.display_name:>8}" for p in PRAYERS))
    for day, times in rows:
        cells = " ".join(f"{format_time(times.get(p), is_24_hour):>8}" for p in PRAYERS)
        print(f"{day.isoformat()}  {cells}")


def run(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list_methods:
        for entry in list_calculation_methods():
            print(f"{entry['value']:<24} {entry['label']}")
        return 0

    try:
        location = _location_from_args(args)
        settings = _settings_from_args(args)
        offset = args.offset
        if offset is None:
            offset = timezone_offset_hours(location.get("timezone", "UTC"), datetime.date.today())
        validate_offset(offset)
        now = datetime.datetime.now(fixed_offset(offset))
        start = parse_date(args.date) if args.date else now.date()
        # without --offset each day gets its own zone offset (DST)
        rows = list(compute_range(location, start, max(args.days, 1), settings, args.offset, args.unreachable))
    except PrayerTimeError as exc:
        logger.error("%s", exc)
        return 2

    _print_header(location, settings)
    if len(rows) == 1:
        _print_day(rows[0][0], rows[0][1], settings.is_24_hour_format)
    else:
        _print_table(rows, settings.is_24_hour_format)

    if args.date is None:
        name, prayer_dt = next_prayer(location, now, settings, args.offset, args.unreachable)
        if name is not None:
            print(SEPARATOR)
            print(f"⏳ Next: {PRAYER_DISPLAY[name]} at {format_time(prayer_dt.isoformat(), settings.is_24_hour_format)}"
                  f"  in {_fmt_countdown(seconds_until(prayer_dt, now))}")

    coord = to_coordinate(location)
    print(SEPARATOR)
    print(f"🕋 Qibla {qibla_direction(coord.latitude, coord.longitude):.1f}° from north, "
          f"{distance_to_makkah(coord.latitude, coord.longitude):,.0f} km to Makkah")
    return 0


# ──────────────────────────────────────────────────────────────────────────────
# Entry point
# ──────────────────────────────────────────────────────────────────────────────
def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
