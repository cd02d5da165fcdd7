from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class OutputFormatEnum(StrEnum):
    PNG = 'PNG'
    JPEG = 'JPEG'
    GIF = 'GIF'
    BMP = 'BMP'
    TIFF = 'TIFF'

    @property
    def has_alpha(self) -> bool:
        return self not in (OutputFormatEnum.JPEG, OutputFormatEnum.BMP)


OUTPUT_EXTENSIONS = {
    '.png': OutputFormatEnum.PNG,
    '.jpg': OutputFormatEnum.JPEG,
    '.jpeg': OutputFormatEnum.JPEG,
    '.gif': OutputFormatEnum.GIF,
    '.bmp': OutputFormatEnum.BMP,
    '.tif': OutputFormatEnum.TIFF,
    '.tiff': OutputFormatEnum.TIFF,
}

DEFAULT_FONT_PATH = '/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf'
DEFAULT_GRAYSCALE = 0  # black
DEFAULT_FONT_SIZE = 14.0
DEFAULT_DPI = 72.0
DEFAULT_RESIZE_WIDTH = 0  # 0 keeps the source width
DEFAULT_RESIZE_HEIGHT = 0  # 0 keeps the aspect ratio

POINTS_PER_INCH = 72
TEXT_INSET_PX = 10
LINE_SPACING = 1.5
LINE_SEPARATOR = '\r\n'


@dataclass
class Point:
    x: int = 0
    y: int = 0

    def as_tuple(self) -> tuple[int, int]:
        return self.x, self.y


@dataclass(frozen=True)
class WatermarkSettings:
    font_path: str = DEFAULT_FONT_PATH
    grayscale: int = DEFAULT_GRAYSCALE
    font_size: float = DEFAULT_FONT_SIZE
    dpi: float = DEFAULT_DPI
    start_point: Point = field(default_factory=Point)
    resize_width: int = DEFAULT_RESIZE_WIDTH
    resize_height: int = DEFAULT_RESIZE_HEIGHT

    def __post_init__(self):
        if not 0 <= self.grayscale <= 255:
            raise ValueError(f"Grayscale must be within 0-255, got {self.grayscale}")
        if self.font_size <= 0:
            raise ValueError(f"Font size must be positive, got {self.font_size}")
        if self.dpi <= 0:
            raise ValueError(f"DPI must be positive, got {self.dpi}")
        if self.resize_width < 0 or self.resize_height < 0:
            raise ValueError(f"Resize dimensions must not be negative, got {self.resize_width}x{self.resize_height}")
