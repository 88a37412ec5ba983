"""Value types shared by the calculator, the settings layer and the CLI."""

from dataclasses import asdict, dataclass
from enum import Enum


class Prayer(str, Enum):
    """The five daily prayers, in chronological order."""

    FAJR = "fajr"
    DHUHR = "dhuhr"
    ASR = "asr"
    MAGHRIB = "maghrib"
    ISHA = "isha"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


PRAYERS = tuple(Prayer)


class CalculationMethod(str, Enum):
    MUSLIM_WORLD_LEAGUE = "muslim_world_league"
    ISNA = "isna"
    EGYPTIAN = "egyptian"
    UMM_AL_QURA = "umm_al_qura"
    KARACHI = "karachi"
    TEHRAN = "tehran"
    JAFARI = "jafari"
    GULF = "gulf"
    MOONSIGHTING_COMMITTEE = "moonsighting_committee"
    NORTH_AMERICA = "north_america"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        return METHOD_DISPLAY.get(self, self.value)


METHOD_DISPLAY = {
    CalculationMethod.MUSLIM_WORLD_LEAGUE: "Muslim World League",
    CalculationMethod.ISNA: "Islamic Society of North America (ISNA)",
    CalculationMethod.EGYPTIAN: "Egyptian General Authority",
    CalculationMethod.UMM_AL_QURA: "Umm Al-Qura (Makkah)",
    CalculationMethod.KARACHI: "University of Karachi",
    CalculationMethod.TEHRAN: "Institute of Geophysics, Tehran",
    CalculationMethod.JAFARI: "Shia Ithna-Ashari (Jafari)",
    CalculationMethod.GULF: "Gulf Region",
    CalculationMethod.MOONSIGHTING_COMMITTEE: "Moonsighting Committee",
    CalculationMethod.NORTH_AMERICA: "North America (ISNA)",
}


class JuristicMethod(str, Enum):
    """School used for the Asr shadow rule."""

    STANDARD = "shafii"  # shadow = object length
    HANAFI = "hanafi"  # shadow = 2x object length

    @property
    def display_name(self) -> str:
        if self is JuristicMethod.HANAFI:
            return "Hanafi"
        return "Shafi'i, Maliki, Hanbali"


SHADOW_FACTORS = {
    JuristicMethod.STANDARD: 1.0,
    JuristicMethod.HANAFI: 2.0,
}


class UnreachablePolicy(str, Enum):
    """What to report when the sun never reaches a prayer's altitude."""

    FALLBACK = "fallback"  # 0° for twilight/sunset angles, 60° for Asr
    EMPTY = "empty"  # leave the prayer blank


@dataclass(frozen=True)
class GeoCoordinate:
    latitude: float  # degrees, north positive
    longitude: float  # degrees, east positive


@dataclass(frozen=True)
class CalculationParams:
    """Angles in degrees below the horizon, intervals in minutes.

    A zero Maghrib angle together with a zero Maghrib interval means standard
    sunset. A non-zero Isha interval takes precedence over the Isha angle.
    """

    fajr_angle: float
    isha_angle: float = 0.0
    isha_interval: int = 0  # minutes after Maghrib
    maghrib_angle: float = 0.0
    maghrib_interval: int = 0  # minutes after sunset


@dataclass(frozen=True)
class PrayerTimeSet:
    """ISO-8601 timestamps; an empty string marks an undefined prayer."""

    fajr: str = ""
    dhuhr: str = ""
    asr: str = ""
    maghrib: str = ""
    isha: str = ""
    sunrise: str = ""  # informational, not a prayer

    def get(self, prayer: Prayer) -> str:
        return getattr(self, Prayer(prayer).value)

    def as_dict(self) -> dict:
        return asdict(self)
