import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from symcalc import config_manager
from symcalc import error as E


class TestConfigManager(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.config_path = Path(self.tmp.name) / "config.json"
        self.strings_path = Path(self.tmp.name) / "ui_strings.json"
        for name, path in (("config_json", self.config_path), ("ui_strings", self.strings_path)):
            patcher = mock.patch.object(config_manager, name, path)
            patcher.start()
            self.addCleanup(patcher.stop)

    def write_config(self, settings):
        self.config_path.write_text(json.dumps(settings), encoding="utf-8")

    def test_defaults_when_file_is_missing(self):
        self.assertEqual(config_manager.load_setting_value("all"), config_manager.DEFAULT_SETTINGS)
        self.assertEqual(config_manager.get_precision(), 6)
        self.assertFalse(config_manager.is_debug())

    def test_defaults_when_file_is_broken(self):
        self.config_path.write_text("{not json", encoding="utf-8")
        self.assertEqual(config_manager.load_setting_value("precision"), 6)

    def test_defaults_when_file_is_not_an_object(self):
        self.write_config([1, 2])
        self.assertEqual(config_manager.load_setting_value("all"), config_manager.DEFAULT_SETTINGS)
        self.strings_path.write_text("[]", encoding="utf-8")
        self.assertEqual(config_manager.load_setting_description("debug"), "Print parser diagnostics")

    def test_defaults_when_file_is_not_utf8(self):
        self.config_path.write_bytes(b"\xff\xfe{\"precision\": 3}")
        self.assertEqual(config_manager.get_precision(), 6)

    def test_file_values_override_defaults(self):
        self.write_config({"precision": 10, "debug": True})
        settings = config_manager.load_setting_value("all")
        self.assertEqual(settings["precision"], 10)
        self.assertTrue(settings["debug"])
        self.assertFalse(settings["darkmode"])
        self.assertTrue(config_manager.is_debug())

    def test_unknown_key(self):
        self.assertEqual(config_manager.load_setting_value("missing"), 0)

    def test_save_setting_round_trip(self):
        saved = config_manager.save_setting({"precision": 4, "darkmode": True})
        self.assertEqual(saved, {"precision": 4, "darkmode": True})
        self.assertEqual(config_manager.get_precision(), 4)
        self.assertTrue(config_manager.load_setting_value("darkmode"))

    def test_save_setting_into_missing_directory(self):
        with mock.patch.object(config_manager, "config_json", Path(self.tmp.name) / "absent" / "config.json"):
            self.assertEqual(config_manager.save_setting({"precision": 4}), {})

    def test_invalid_precision(self):
        for value in (0, -3, 2.5, "6", True):
            with self.subTest(value=value):
                self.write_config({"precision": value})
                with self.assertRaises(E.ConfigurationError) as context:
                    config_manager.get_precision()
                self.assertEqual(context.exception.code, "5001")

    def test_descriptions(self):
        self.assertEqual(config_manager.load_setting_description("precision"), "Significant digits")
        self.strings_path.write_text(json.dumps({"precision": "Digits"}), encoding="utf-8")
        self.assertEqual(config_manager.load_setting_description("precision"), "Digits")
        self.assertEqual(config_manager.load_setting_description("all")["debug"], "Print parser diagnostics")


if __name__ == '__main__':
    unittest.main()
