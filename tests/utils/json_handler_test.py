import json
import os
import tempfile
import unittest

from utils.data_structures import Point, WatermarkSettings
from utils.json_handler import pars_config, settings_from_dict, settings_to_json


class TestSettingsJson(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.config_path = os.path.join(self.tmp.name, 'settings.json')

    def tearDown(self):
        self.tmp.cleanup()

    def test_save_and_load(self):
        settings = WatermarkSettings(font_path='font.ttf', grayscale=200, start_point=Point(-3, 40), resize_width=320)
        settings_to_json(settings, self.config_path)

        with open(self.config_path) as f:
            raw = json.load(f)
        self.assertEqual(raw['start_point'], [-3, 40])
        self.assertEqual(pars_config(self.config_path), settings)

    def test_missing_keys_take_defaults(self):
        settings = settings_from_dict({'grayscale': 128})
        self.assertEqual(settings.grayscale, 128)
        self.assertEqual(settings.font_size, WatermarkSettings().font_size)

    def test_to_json_without_path_returns_dict(self):
        raw = settings_to_json(WatermarkSettings())
        self.assertEqual(raw['start_point'], [0, 0])
        self.assertEqual(raw['dpi'], 72)

    def test_mistyped_values(self):
        for raw in (
            {'grayscale': '40'},
            {'grayscale': True},
            {'font_size': None},
            {'font_path': 12},
            {'start_point': 5},
            {'start_point': [1, 2, 3]},
            {'start_point': ['1', 2]},
        ):
            with self.subTest(raw=raw):
                with self.assertRaises(ValueError):
                    settings_from_dict(raw)

    def test_settings_must_be_an_object(self):
        with self.assertRaises(ValueError):
            settings_from_dict(['grayscale'])

    def test_unknown_key(self):
        with self.assertRaises(ValueError):
            settings_from_dict({'opacity': 0.5})

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            pars_config(self.config_path)

    def test_invalid_json(self):
        with open(self.config_path, 'w') as f:
            f.write('{not json')
        with self.assertRaises(json.JSONDecodeError):
            pars_config(self.config_path)
