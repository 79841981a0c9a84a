"""
Logging utilities for ColorHash.

This module centralizes:
- Verbosity control for info/warning/error messages.
- Standardized message formatting with the "(ColorHash)" prefix.
- A helper to report a failure and raise the matching exception.

Public API
----------
- set_verbosity(n): Set verbosity level (1=errors only, 2=errors+warnings,
    3=errors+warnings+info).
- info(msg): Print an info message if verbosity >= 3.
- warn(msg): Print a warning message if verbosity >= 2.
- fail(msg, error=ValidationError): Print an error message and raise `error`.

Notes
-----
- All messages printed include a "(ColorHash)" prefix for easy log filtering.
- Being a library, ColorHash never terminates the interpreter: `fail` raises
  instead of calling `sys.exit`.
"""

from colorhash.core.errors import ValidationError

# ----------------------------------------------------------------------
# Verbosity level:
#   1: Error messages only.
#   2: Errors + warnings.
#   3: Errors + warnings + info.
# ----------------------------------------------------------------------
VERBOSITY = 2


def set_verbosity(n):
    """
    Set the verbosity level for log output.

    :param n: Verbosity mode (1=errors only, 2=errors+warnings, 3=errors+warnings+info).
    :type n: int
    """
    global VERBOSITY
    if n in (1, 2, 3):
        VERBOSITY = n
    else:
        warn(f"Skipping invalid verbosity mode {n}")


def get_verbosity():
    return VERBOSITY


def info(msg):
    """
    Print an informational message if verbosity >= 3.

    :param msg: Message text (without trailing punctuation).
    :type msg: str
    """
    if VERBOSITY > 2:
        print(f"(ColorHash) Info: {msg}.")


def warn(msg):
    """
    Print a warning message if verbosity >= 2.

    :param msg: Message text (without trailing punctuation).
    :type msg: str
    """
    if VERBOSITY > 1:
        print(f"(ColorHash) Warning: {msg}.")


def fail(msg, error=ValidationError):
    """
    Print a failure message and raise `error`.

    :param msg: Message text (without trailing punctuation).
    :type msg: str
    :param error: Exception class to raise, built from `msg`.
    :type error: type[Exception]
    :raises Exception: Always, an instance of `error`.
    """
    print(f"(ColorHash) Failure: {msg}.")
    raise error(msg)
