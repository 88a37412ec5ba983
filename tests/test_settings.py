"""Tests for the settings module."""

import json
import os
import shutil
import tempfile
import unittest

import prayertime.settings as settings_mod
from prayertime.models import CalculationMethod, JuristicMethod
from prayertime.settings import AppSettings, load_settings, reset_settings, save_settings


class TestAppSettings(unittest.TestCase):
    def test_defaults(self):
        s = AppSettings()
        self.assertEqual(s.calculation_method, CalculationMethod.MUSLIM_WORLD_LEAGUE)
        self.assertEqual(s.juristic_method, JuristicMethod.STANDARD)
        self.assertFalse(s.is_24_hour_format)

    def test_to_dict_uses_plain_values(self):
        data = AppSettings(calculation_method=CalculationMethod.GULF).to_dict()
        self.assertEqual(data["calculation_method"], "gulf")
        self.assertEqual(data["juristic_method"], "shafii")
        json.dumps(data)

    def test_from_dict_unknown_values_keep_defaults(self):
        with self.assertLogs("prayertime.settings", level="WARNING"):
            s = AppSettings.from_dict({"calculation_method": "lunar", "juristic_method": "zahiri"})
        self.assertEqual(s, AppSettings())

    def test_from_dict_string_flag_keeps_default(self):
        with self.assertLogs("prayertime.settings", level="WARNING"):
            s = AppSettings.from_dict({"is_24_hour_format": "false"})
        self.assertFalse(s.is_24_hour_format)

    def test_from_dict_accepts_real_boolean(self):
        self.assertTrue(AppSettings.from_dict({"is_24_hour_format": True}).is_24_hour_format)


class TestSettingsFile(unittest.TestCase):
    def setUp(self):
        self._tmpdir = tempfile.mkdtemp()
        self._orig_config_dir = settings_mod.CONFIG_DIR
        self._orig_settings_file = settings_mod.SETTINGS_FILE
        settings_mod.CONFIG_DIR = self._tmpdir
        settings_mod.SETTINGS_FILE = os.path.join(self._tmpdir, "settings.json")

    def tearDown(self):
        settings_mod.CONFIG_DIR = self._orig_config_dir
        settings_mod.SETTINGS_FILE = self._orig_settings_file
        shutil.rmtree(self._tmpdir, ignore_errors=True)

    def test_defaults_when_no_file(self):
        self.assertEqual(load_settings(), AppSettings())

    def test_save_and_load(self):
        s = AppSettings(
            calculation_method=CalculationMethod.TEHRAN,
            juristic_method=JuristicMethod.HANAFI,
            is_24_hour_format=True,
        )
        save_settings(s)
        self.assertEqual(load_settings(), s)

    def test_invalid_json_gives_defaults(self):
        with open(settings_mod.SETTINGS_FILE, "w") as f:
            f.write("{broken")
        self.assertEqual(load_settings(), AppSettings())

    def test_non_object_gives_defaults(self):
        with open(settings_mod.SETTINGS_FILE, "w") as f:
            json.dump(["isna"], f)
        self.assertEqual(load_settings(), AppSettings())

    def test_partial_file_fills_defaults(self):
        with open(settings_mod.SETTINGS_FILE, "w") as f:
            json.dump({"juristic_method": "hanafi"}, f)
        s = load_settings()
        self.assertEqual(s.juristic_method, JuristicMethod.HANAFI)
        self.assertEqual(s.calculation_method, CalculationMethod.MUSLIM_WORLD_LEAGUE)

    def test_reset(self):
        save_settings(AppSettings(is_24_hour_format=True))
        reset_settings()
        self.assertEqual(load_settings(), AppSettings())


if __name__ == "__main__":
    unittest.main()
