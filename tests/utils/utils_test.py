import unittest

from utils.data_structures import OutputFormatEnum
from utils.utils import detect_output_format


class TestDetectOutputFormat(unittest.TestCase):
    def test_known_extensions(self):
        self.assertEqual(detect_output_format('out.PNG'), OutputFormatEnum.PNG)
        self.assertEqual(detect_output_format('out.jpeg'), OutputFormatEnum.JPEG)
        self.assertEqual(detect_output_format('dir/out.tif'), OutputFormatEnum.TIFF)

    def test_unknown_extension(self):
        self.assertIsNone(detect_output_format('out.xyz'))
        self.assertIsNone(detect_output_format('out'))
