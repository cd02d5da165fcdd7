import io
import logging

from PIL import ImageFont

from components.image_processing.errors import FontLoadError, FontParseError
from utils.data_structures import POINTS_PER_INCH

logger = logging.getLogger(__name__)


def font_pixel_size(font_size, dpi):
    """Convert a point size to pixels at the given DPI."""
    return font_size * dpi / POINTS_PER_INCH


def load_font(font_path, font_size, dpi):
    """
    Read a TrueType/OpenType font from disk and parse it for rendering.

    Parameters:
    - font_path: str or Path, font file on disk
    - font_size: float, size in points
    - dpi: float, resolution used to turn points into pixels

    Raises FontLoadError when the file can't be read and FontParseError
    when its bytes are not a usable font.
    """
    try:
        with open(font_path, 'rb') as f:
            font_bytes = f.read()
    except OSError as e:
        raise FontLoadError(f"Can't read font {font_path}: {e}") from e

    pixel_size = max(1, round(font_pixel_size(font_size, dpi)))
    try:
        font = ImageFont.truetype(io.BytesIO(font_bytes), pixel_size)
    except (OSError, ValueError) as e:
        raise FontParseError(f"Can't parse font {font_path}: {e}") from e

    logger.debug(f"Loaded font {font_path} at {pixel_size}px")
    return font
