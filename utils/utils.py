from __future__ import annotations

import os

from utils.data_structures import OUTPUT_EXTENSIONS, OutputFormatEnum


def detect_output_format(filename) -> OutputFormatEnum | None:
    ext = os.path.splitext(str(filename))[1].lower()
    return OUTPUT_EXTENSIONS.get(ext)
