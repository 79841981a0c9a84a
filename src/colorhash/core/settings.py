"""
Default settings for ColorHash.

Overview
--------
- Load the bundled defaults (`colorhash_defaults.json`) into a global
  `SETTINGS` dictionary at import time.
- Normalize types at import: sequences become tuples of floats, hue ranges
  become tuples of (start, end) pairs.
- Provide `get()` for read access by name.

Notes
-----
- The defaults are what an empty user sequence falls back to when a colour
  is derived, and what `create()` starts from.
- Values are stored as tuples so that callers cannot alter the shared
  defaults by mutating what `get()` returns.
"""

import json
import importlib.resources as ir


def load_argument_list(filename):
    """
    Load a JSON resource bundled in the ``colorhash.data`` package.

    :param filename: Name of the JSON resource file.
    :type filename: str
    :return: Parsed JSON content.
    :rtype: dict
    :raises FileNotFoundError: If the file does not exist in the package.
    :raises json.JSONDecodeError: If the file content is not valid JSON.
    """
    path = ir.files("colorhash.data").joinpath(filename)
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


SETTINGS = load_argument_list("colorhash_defaults.json") or {}

# Coerce JSON lists and numbers into the immutable types used downstream.
SETTINGS["saturations"] = tuple(float(x) for x in SETTINGS["saturations"])
SETTINGS["lightnesses"] = tuple(float(x) for x in SETTINGS["lightnesses"])
SETTINGS["hue_ranges"] = tuple((float(a), float(b)) for a, b in SETTINGS["hue_ranges"])


def get(key):
    """
    Retrieve a default setting by name.

    :param key: Setting name (e.g. ``"saturations"``, ``"lightnesses"``).
    :type key: str
    :return: The value, or None if the key is unknown.
    :rtype: Any | None
    """
    return SETTINGS.get(key)
