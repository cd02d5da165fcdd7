from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from components.image_processing.errors import WatermarkError
from components.image_processing.image_watermark import Watermark
from utils.data_structures import Point, WatermarkSettings
from utils.json_handler import pars_config, settings_to_json

logging.basicConfig(level=logging.INFO, format='%(levelname)s:%(message)s')
logger = logging.getLogger(__name__)

# flag name -> WatermarkSettings field
SETTING_FLAGS = {
    'font': 'font_path',
    'grayscale': 'grayscale',
    'font_size': 'font_size',
    'dpi': 'dpi',
    'resize_width': 'resize_width',
    'resize_height': 'resize_height',
}


def build_settings(args) -> WatermarkSettings:
    settings = pars_config(args.config) if args.config else WatermarkSettings()
    overrides = {
        field: getattr(args, flag)
        for flag, field in SETTING_FLAGS.items()
        if getattr(args, flag) is not None
    }
    if args.x is not None or args.y is not None:
        x = settings.start_point.x if args.x is None else args.x
        y = settings.start_point.y if args.y is None else args.y
        overrides['start_point'] = Point(x, y)
    return replace(settings, **overrides)


def read_text(args):
    if args.text_file:
        # newline='' keeps CRLF line separators intact
        with open(args.text_file, newline='', encoding='utf-8') as f:
            return f.read()
    return args.text or ''


def watermark_image(args):
    settings = build_settings(args)
    if args.save_config:
        settings_to_json(settings, args.save_config)
        logger.info(f"Settings saved to {args.save_config}")

    watermark = Watermark.from_settings(settings)
    watermark.watermark(args.src, args.dst, read_text(args))


def arg_parser(argv=None):
    parser = argparse.ArgumentParser(description='Stamp a text watermark onto an image.')
    parser.add_argument('src', help='Path to the source image')
    parser.add_argument('dst', help='Path of the output image, the format follows its extension')
    parser.add_argument('text', nargs='?', default='', help='Watermark text, lines are split on CRLF')
    parser.add_argument('--text-file', help='Read the watermark text from this file')
    parser.add_argument('--config', help='JSON file with watermark settings')
    parser.add_argument('--save-config', help='Write the effective settings to this JSON file')
    parser.add_argument('--font', help='Path to a TrueType/OpenType font')
    parser.add_argument('--grayscale', type=int, help='Text gray level, 0 (black) to 255 (white)')
    parser.add_argument('--font-size', type=float, help='Font size in points')
    parser.add_argument('--dpi', type=float, help='Resolution used to render the font')
    parser.add_argument('--x', type=int, help='Horizontal offset of the watermark')
    parser.add_argument('--y', type=int, help='Vertical offset of the watermark')
    parser.add_argument('--resize-width', type=int, help='Output width, 0 keeps the source width')
    parser.add_argument('--resize-height', type=int, help='Output height, 0 keeps the aspect ratio')
    return parser.parse_args(argv)


def main(argv=None):
    args = arg_parser(argv)
    try:
        watermark_image(args)
    except (WatermarkError, OSError, ValueError) as e:
        logger.error(f"Watermarking {args.src} failed: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
