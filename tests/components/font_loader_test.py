import os
import tempfile
import unittest

from components.image_processing.errors import FontLoadError, FontParseError
from components.image_processing.font_loader import font_pixel_size, load_font
from tests.font_fixtures import write_test_font


class TestFontLoader(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.font_path = write_test_font(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_pixel_size(self):
        self.assertEqual(font_pixel_size(14, 72), 14)
        self.assertEqual(font_pixel_size(12, 96), 16)

    def test_load_font(self):
        font = load_font(self.font_path, 14, 72)
        self.assertIsNotNone(font)
        self.assertEqual(font.size, 14)

    def test_dpi_scales_font(self):
        font = load_font(self.font_path, 14, 144)
        self.assertEqual(font.size, 28)

    def test_missing_file(self):
        with self.assertRaises(FontLoadError):
            load_font(os.path.join(self.tmp.name, 'missing.ttf'), 14, 72)

    def test_malformed_font(self):
        bad_path = os.path.join(self.tmp.name, 'bad.ttf')
        with open(bad_path, 'wb') as f:
            f.write(b'definitely not a font')
        with self.assertRaises(FontParseError):
            load_font(bad_path, 14, 72)
