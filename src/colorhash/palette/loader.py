"""
Read a ColorHash configuration from a YAML or JSON file.

Expected layout (every key optional)::

    saturations: [0.4, 0.6]
    lightnesses: [0.5]
    hue_ranges:
      - [0.0, 0.2]
      - [0.5, 0.7]

Missing keys keep the value of the base configuration. Only the structure is
checked here; out-of-range numbers are reported later by `to_color`.
"""

import json
import numbers
import os

import yaml

from colorhash.core import log as CH_log
from colorhash.core.errors import ConfigurationError
from colorhash.palette import model as CH_model

KNOWN_KEYS = ("saturations", "lightnesses", "hue_ranges")


def _read(path):
    ext = os.path.splitext(path)[1].lower()
    with open(path, "r", encoding="utf-8") as f:
        if ext == ".json":
            return json.load(f)
        # YAML is a superset of JSON; anything else goes through PyYAML.
        return yaml.safe_load(f)


def _number_list(data, key):
    values = data[key]
    if not isinstance(values, list):
        CH_log.fail(f"'{key}' must be a list, got {type(values).__name__}", ConfigurationError)
    for v in values:
        if isinstance(v, bool) or not isinstance(v, numbers.Real):
            CH_log.fail(f"'{key}' contains non-numeric value {v!r}", ConfigurationError)
    return [float(v) for v in values]


def _range_list(data):
    ranges = data["hue_ranges"]
    if not isinstance(ranges, list):
        CH_log.fail(f"'hue_ranges' must be a list, got {type(ranges).__name__}", ConfigurationError)
    out = []
    for r in ranges:
        if not isinstance(r, (list, tuple)) or len(r) != 2:
            CH_log.fail(f"'hue_ranges' entry {r!r} is not a [start, end] pair", ConfigurationError)
        if any(isinstance(v, bool) or not isinstance(v, numbers.Real) for v in r):
            CH_log.fail(f"'hue_ranges' entry {r!r} contains non-numeric bounds", ConfigurationError)
        out.append((float(r[0]), float(r[1])))
    return out


def load_config(path, base=None):
    """
    Build a ColorHash from a configuration file.

    :param path: Path to a ``.yaml``/``.yml`` or ``.json`` file.
    :type path: str
    :param base: Configuration to start from (default: ``create()``).
    :type base: ColorHash | None
    :return: `base` with every key present in the file replaced.
    :rtype: ColorHash
    :raises ConfigurationError: If the file is not a mapping, has unknown
        keys, or holds values of the wrong shape.
    :raises FileNotFoundError: If `path` does not exist.
    """
    config = CH_model.create() if base is None else base

    try:
        data = _read(path)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Could not parse {path}: {e}") from e

    if data is None:
        CH_log.warn(f"Empty configuration file {path}, using base configuration")
        return config
    if not isinstance(data, dict):
        CH_log.fail(f"Configuration in {path} must be a mapping", ConfigurationError)

    unknown = sorted(set(data) - set(KNOWN_KEYS), key=str)
    if unknown:
        CH_log.fail(f"Unknown keys in {path}: {', '.join(map(str, unknown))}", ConfigurationError)

    if "saturations" in data:
        config = config.with_saturations(_number_list(data, "saturations"))
    if "lightnesses" in data:
        config = config.with_lightnesses(_number_list(data, "lightnesses"))
    if "hue_ranges" in data:
        config = config.with_hue_ranges(_range_list(data))

    CH_log.info(f"Loaded configuration from {path}")
    return config
