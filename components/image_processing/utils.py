import math

from PIL import Image


def target_size(src_size, width=0, height=0):
    """
    Work out the resize target for an image.

    A width of 0 keeps the source width, a height of 0 keeps the
    aspect ratio of the source.
    """
    src_width, src_height = src_size
    if width == 0:
        width = src_width
    if height == 0:
        height = max(1, math.floor(width * src_height / src_width + 0.5))
    return width, height


def resize_image(img, width=0, height=0):
    new_size = target_size(img.size, width, height)
    # Pillow hands back a plain copy when the size doesn't change
    return img.resize(new_size, Image.Resampling.LANCZOS)
