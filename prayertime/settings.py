"""User preferences: calculation method, Asr school and clock format."""

import json
import logging
import os
from dataclasses import asdict, dataclass

from prayertime.models import CalculationMethod, JuristicMethod

logger = logging.getLogger(__name__)

CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".prayertime")
SETTINGS_FILE = os.path.join(CONFIG_DIR, "settings.json")


@dataclass(frozen=True)
class AppSettings:
    calculation_method: CalculationMethod = CalculationMethod.MUSLIM_WORLD_LEAGUE
    juristic_method: JuristicMethod = JuristicMethod.STANDARD
    is_24_hour_format: bool = False

    def to_dict(self) -> dict:
        data = asdict(self)
        data["calculation_method"] = self.calculation_method.value
        data["juristic_method"] = self.juristic_method.value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        """Build settings from stored values; unknown values keep their default."""
        defaults = cls()
        try:
            method = CalculationMethod(data.get("calculation_method", defaults.calculation_method))
        except ValueError:
            logger.warning("Unknown calculation method %r, using default", data.get("calculation_method"))
            method = defaults.calculation_method
        try:
            juristic = JuristicMethod(data.get("juristic_method", defaults.juristic_method))
        except ValueError:
            logger.warning("Unknown juristic method %r, using default", data.get("juristic_method"))
            juristic = defaults.juristic_method
        is_24_hour = data.get("is_24_hour_format", defaults.is_24_hour_format)
        if not isinstance(is_24_hour, bool):
            logger.warning("Invalid is_24_hour_format %r, using default", is_24_hour)
            is_24_hour = defaults.is_24_hour_format
        return cls(
            calculation_method=method,
            juristic_method=juristic,
            is_24_hour_format=is_24_hour,
        )


def load_settings() -> AppSettings:
    """Load saved settings, or defaults if none are saved or the file is unreadable."""
    if not os.path.isfile(SETTINGS_FILE):
        return AppSettings()
    try:
        with open(SETTINGS_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", SETTINGS_FILE, exc)
        return AppSettings()
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: not a JSON object", SETTINGS_FILE)
        return AppSettings()
    return AppSettings.from_dict(data)


def save_settings(settings: AppSettings) -> None:
    os.makedirs(CONFIG_DIR, exist_ok=True)
    with open(SETTINGS_FILE, "w", encoding="utf-8") as f:
        json.dump(settings.to_dict(), f, indent=2)


def reset_settings() -> None:
    """Remove saved settings so defaults apply again."""
    if os.path.isfile(SETTINGS_FILE):
        os.remove(SETTINGS_FILE)
