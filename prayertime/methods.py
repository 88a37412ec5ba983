"""Twilight angles and intervals for each supported calculation convention."""

import logging

from prayertime.models import CalculationMethod, CalculationParams

logger = logging.getLogger(__name__)

DEFAULT_METHOD = CalculationMethod.MUSLIM_WORLD_LEAGUE
DEFAULT_PARAMS = CalculationParams(fajr_angle=18.0, isha_angle=17.0)

METHOD_PARAMS = {
    CalculationMethod.MUSLIM_WORLD_LEAGUE: DEFAULT_PARAMS,
    CalculationMethod.ISNA: CalculationParams(fajr_angle=15.0, isha_angle=15.0),
    CalculationMethod.NORTH_AMERICA: CalculationParams(fajr_angle=15.0, isha_angle=15.0),
    CalculationMethod.EGYPTIAN: CalculationParams(fajr_angle=19.5, isha_angle=17.5),
    CalculationMethod.UMM_AL_QURA: CalculationParams(fajr_angle=18.5, isha_interval=90),
    CalculationMethod.KARACHI: CalculationParams(fajr_angle=18.0, isha_angle=18.0),
    CalculationMethod.TEHRAN: CalculationParams(fajr_angle=17.7, isha_angle=14.0, maghrib_angle=4.5),
    CalculationMethod.JAFARI: CalculationParams(fajr_angle=16.0, isha_angle=14.0, maghrib_angle=4.0),
    CalculationMethod.GULF: CalculationParams(fajr_angle=19.5, isha_interval=90),
    CalculationMethod.MOONSIGHTING_COMMITTEE: CalculationParams(fajr_angle=18.0, isha_angle=18.0),
}


def get_calculation_params(method) -> CalculationParams:
    """
    Return the parameters for a method given as enum member or string value.
    Unknown or missing methods fall back to DEFAULT_PARAMS (18°/17°).
    """
    params = METHOD_PARAMS.get(method)
    if params is None:
        logger.debug("No parameters for method %r, using default 18°/17°", method)
        return DEFAULT_PARAMS
    return params


def list_calculation_methods() -> list:
    """Selectable methods as [{"value": ..., "label": ...}] for settings menus."""
    return [{"value": m.value, "label": m.display_name} for m in METHOD_PARAMS]
