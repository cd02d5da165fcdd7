from __future__ import annotations

import logging
import os
from dataclasses import replace

from PIL import Image

from components.image_processing.errors import (
    DestinationOpenError,
    ImageDecodeError,
    ImageSaveError,
    UnsupportedFormatError,
)
from components.image_processing.font_loader import font_pixel_size, load_font
from components.image_processing.text_overlay import render_text_overlay
from components.image_processing.utils import resize_image
from utils.data_structures import (
    DEFAULT_DPI,
    DEFAULT_FONT_PATH,
    DEFAULT_FONT_SIZE,
    DEFAULT_GRAYSCALE,
    DEFAULT_RESIZE_HEIGHT,
    DEFAULT_RESIZE_WIDTH,
    Point,
    WatermarkSettings,
)
from utils.utils import detect_output_format


class Watermark:
    """
    Reusable text watermarker.

    The font is parsed once when the object is built. Everything but the
    start point is fixed after that; resize targets can be overridden per call.
    """

    def __init__(
        self,
        font_path=DEFAULT_FONT_PATH,
        grayscale=DEFAULT_GRAYSCALE,
        font_size=DEFAULT_FONT_SIZE,
        dpi=DEFAULT_DPI,
        start_point: Point | tuple[int, int] = (0, 0),
        resize_width=DEFAULT_RESIZE_WIDTH,
        resize_height=DEFAULT_RESIZE_HEIGHT,
    ):
        self.logger = logging.getLogger(__name__)
        if not isinstance(start_point, Point):
            start_point = Point(*start_point)
        self._settings = WatermarkSettings(
            font_path=str(font_path),
            grayscale=grayscale,
            font_size=font_size,
            dpi=dpi,
            start_point=Point(start_point.x, start_point.y),
            resize_width=resize_width,
            resize_height=resize_height,
        )
        self._start_point = Point(start_point.x, start_point.y)
        self._font = load_font(font_path, font_size, dpi)

    @classmethod
    def default(cls) -> Watermark:
        return cls(font_path=DEFAULT_FONT_PATH)

    @classmethod
    def from_settings(cls, settings: WatermarkSettings) -> Watermark:
        return cls(
            font_path=settings.font_path,
            grayscale=settings.grayscale,
            font_size=settings.font_size,
            dpi=settings.dpi,
            start_point=settings.start_point,
            resize_width=settings.resize_width,
            resize_height=settings.resize_height,
        )

    @property
    def settings(self) -> WatermarkSettings:
        return replace(self._settings, start_point=Point(*self._start_point.as_tuple()))

    @property
    def font(self):
        return self._font

    @property
    def watermark_start_point(self) -> Point:
        return Point(self._start_point.x, self._start_point.y)

    def set_watermark_start_point(self, x, y):
        self._start_point = Point(x, y)

    @property
    def font_pixel_size(self):
        return font_pixel_size(self._settings.font_size, self._settings.dpi)

    @property
    def overlay_height(self):
        return int(self.font_pixel_size) + 1

    def draw_string_image(self, text, width, height):
        return render_text_overlay(
            text,
            width,
            height,
            self._font,
            self._settings.grayscale,
            self.font_pixel_size,
        )

    def watermark(self, src_file, dst_file, text, resize_width=None, resize_height=None):
        """
        Write src_file with text stamped on it to dst_file.

        The output format follows the extension of dst_file. resize_width and
        resize_height override the configured resize for this call only.
        Writing over src_file is refused.
        """
        fmt = detect_output_format(dst_file)
        if fmt is None:
            raise UnsupportedFormatError(f"Unsupported output format: {dst_file}")

        if resize_width is None:
            resize_width = self._settings.resize_width
        if resize_height is None:
            resize_height = self._settings.resize_height
        if resize_width < 0 or resize_height < 0:
            raise ValueError(f"Resize dimensions must not be negative, got {resize_width}x{resize_height}")
        if os.path.realpath(src_file) == os.path.realpath(dst_file):
            raise DestinationOpenError(f"Destination {dst_file} is the source image")

        try:
            output = open(dst_file, 'wb')
        except OSError as e:
            raise DestinationOpenError(f"Can't open {dst_file} for writing: {e}") from e

        with output:
            try:
                with Image.open(src_file) as origin:
                    origin.load()
                    base = origin.convert('RGBA')
            except (OSError, ValueError, Image.DecompressionBombError) as e:
                raise ImageDecodeError(f"image decode error({e})") from e

            dst = resize_image(base, resize_width, resize_height)
            self.logger.debug(f"Resized {src_file} from {base.size} to {dst.size}")

            mask = self.draw_string_image(text, dst.width, self.overlay_height)

            layer = Image.new('RGBA', dst.size, (0, 0, 0, 0))
            layer.paste(mask, self._start_point.as_tuple())
            dst = Image.alpha_composite(dst, layer)

            if not fmt.has_alpha:
                dst = dst.convert('RGB')
            try:
                dst.save(output, format=fmt.value)
            except (OSError, ValueError) as e:
                raise ImageSaveError(f"Can't save {dst_file}: {e}") from e

        self.logger.info(f"Watermarked image saved to {dst_file}")
