class WatermarkError(Exception):
    """Base class for every failure raised while watermarking."""


class FontLoadError(WatermarkError):
    """The font file could not be read."""


class FontParseError(WatermarkError):
    """The font bytes are not a font FreeType understands."""


class ImageDecodeError(WatermarkError):
    pass


class TextRenderError(WatermarkError):
    pass


class DestinationOpenError(WatermarkError):
    pass


class UnsupportedFormatError(WatermarkError):
    pass


class ImageSaveError(WatermarkError):
    pass
