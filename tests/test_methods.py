"""Tests for the methods module."""

import unittest

from prayertime.methods import (
    DEFAULT_PARAMS,
    METHOD_PARAMS,
    get_calculation_params,
    list_calculation_methods,
)
from prayertime.models import CalculationMethod, CalculationParams


class TestGetCalculationParams(unittest.TestCase):
    def test_muslim_world_league(self):
        params = get_calculation_params(CalculationMethod.MUSLIM_WORLD_LEAGUE)
        self.assertEqual(params, CalculationParams(fajr_angle=18.0, isha_angle=17.0))

    def test_umm_al_qura_uses_isha_interval(self):
        params = get_calculation_params(CalculationMethod.UMM_AL_QURA)
        self.assertEqual(params.fajr_angle, 18.5)
        self.assertEqual(params.isha_interval, 90)
        self.assertEqual(params.isha_angle, 0.0)

    def test_tehran_has_maghrib_angle(self):
        params = get_calculation_params(CalculationMethod.TEHRAN)
        self.assertEqual(params.maghrib_angle, 4.5)
        self.assertEqual(params.isha_angle, 14.0)

    def test_isna_and_north_america_match(self):
        self.assertEqual(
            get_calculation_params(CalculationMethod.ISNA),
            get_calculation_params(CalculationMethod.NORTH_AMERICA),
        )

    def test_accepts_string_value(self):
        self.assertEqual(get_calculation_params("egyptian"), CalculationParams(fajr_angle=19.5, isha_angle=17.5))

    def test_other_falls_back_to_default(self):
        self.assertIs(get_calculation_params(CalculationMethod.OTHER), DEFAULT_PARAMS)

    def test_unknown_falls_back_to_default(self):
        self.assertIs(get_calculation_params("no_such_method"), DEFAULT_PARAMS)
        self.assertIs(get_calculation_params(None), DEFAULT_PARAMS)

    def test_each_group_uses_angle_or_interval(self):
        for method, params in METHOD_PARAMS.items():
            self.assertGreater(params.fajr_angle, 0, method)
            self.assertTrue((params.isha_angle > 0) != (params.isha_interval > 0), method)
            self.assertFalse(params.maghrib_angle > 0 and params.maghrib_interval > 0, method)


class TestListCalculationMethods(unittest.TestCase):
    def test_lists_every_preset_with_label(self):
        entries = list_calculation_methods()
        self.assertEqual(len(entries), len(METHOD_PARAMS))
        by_value = {e["value"]: e["label"] for e in entries}
        self.assertEqual(by_value["muslim_world_league"], "Muslim World League")
        self.assertEqual(by_value["umm_al_qura"], "Umm Al-Qura (Makkah)")
        self.assertNotIn("other", by_value)


if __name__ == "__main__":
    unittest.main()
