from __future__ import annotations

import json
import logging
from dataclasses import asdict, fields

from utils.data_structures import Point, WatermarkSettings

# Configure logger
logging.basicConfig(level=logging.INFO, format='%(levelname)s:%(message)s')
logger = logging.getLogger(__name__)

START_POINT = 'start_point'

# JSON field -> accepted value types
FIELD_TYPES = {
    'font_path': (str,),
    'grayscale': (int,),
    'font_size': (int, float),
    'dpi': (int, float),
    'resize_width': (int,),
    'resize_height': (int,),
}


def pars_config(file_path):
    # Load JSON and validate structure
    try:
        settings = settings_from_json(file_path)
        logger.info(f"Loaded JSON file: {file_path}")
    except FileNotFoundError:
        logger.error(f"File not found: {file_path}")
        raise
    except json.JSONDecodeError as e:
        logger.error(f"Error decoding JSON: {e}")
        raise

    return settings


def load_json(filepath):
    with open(filepath) as f:
        raw_data = json.load(f)
    return raw_data


def settings_from_dict(raw_data: dict) -> WatermarkSettings:
    if not isinstance(raw_data, dict):
        raise ValueError(f"Watermark settings must be a JSON object, got {type(raw_data).__name__}")
    known = {f.name for f in fields(WatermarkSettings)}
    unknown = sorted(set(raw_data) - known)
    if unknown:
        logger.error(f"Unsupported watermark settings: {unknown}")
        raise ValueError(f"Unsupported watermark settings: {unknown}")

    values = dict(raw_data)
    for name, types in FIELD_TYPES.items():
        # bool is an int subclass but never a valid setting
        if name in values and (isinstance(values[name], bool) or not isinstance(values[name], types)):
            raise ValueError(f"Watermark setting {name} has invalid value {values[name]!r}")
    if START_POINT in values:
        values[START_POINT] = _parse_point(values[START_POINT])
    return WatermarkSettings(**values)


def settings_from_json(filepath) -> WatermarkSettings:
    return settings_from_dict(load_json(filepath))


def settings_to_json(settings: WatermarkSettings, filepath='') -> dict | None:
    json_file = {
        **asdict(settings),
        START_POINT: list(settings.start_point.as_tuple()),
    }

    if filepath != '':
        with open(filepath, 'w') as f:
            json.dump(json_file, f, indent=4)
    else:
        return json_file


def _parse_point(raw):
    if (
        not isinstance(raw, list)
        or len(raw) != 2
        or any(isinstance(v, bool) or not isinstance(v, int) for v in raw)
    ):
        raise ValueError(f"Watermark setting {START_POINT} must be a list of two integers, got {raw!r}")
    return Point(*raw)
