import re

from PIL import Image, ImageDraw

from components.image_processing.errors import TextRenderError
from utils.data_structures import LINE_SEPARATOR, LINE_SPACING, TEXT_INSET_PX

# ImageDraw starts a new line on these by itself
_STRAY_BREAKS = re.compile(r'[\r\n]')


def first_baseline(font_pixel_size):
    return TEXT_INSET_PX + int(font_pixel_size) // 4


def _draw_line(draw, xy, line, font, fill):
    x, y = xy
    for run in _STRAY_BREAKS.split(line):
        if run:
            draw.text((x, y), run, font=font, fill=fill, anchor='ls')
            x += font.getlength(run)


def render_text_overlay(text, width, height, font, grayscale, font_pixel_size):
    """
    Draw text on a fully transparent RGBA image of the given size.

    Lines are split on CRLF only and stacked 1.5 font sizes apart,
    starting 10px from the left edge. Anything outside the image is clipped.
    """
    overlay = Image.new('RGBA', (width, height), (0, 0, 0, 0))
    draw = ImageDraw.Draw(overlay)
    fill = (grayscale, grayscale, grayscale, 255)

    baseline = first_baseline(font_pixel_size)
    for i, line in enumerate(text.split(LINE_SEPARATOR)):
        y = baseline + int(i * LINE_SPACING * font_pixel_size)
        try:
            _draw_line(draw, (TEXT_INSET_PX, y), line, font, fill)
        except (OSError, ValueError) as e:
            raise TextRenderError(f"draw_text({line!r}) error({e})") from e
    return overlay
