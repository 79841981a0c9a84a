"""
colorhash.core
==============

Shared plumbing for ColorHash.

Exposed modules and functions:
- **log**: logging utilities (``set_verbosity``, ``info``, ``warn``, ``fail``)
- **errors**: exception types (``ColorHashError``, ``ValidationError``, ``ConfigurationError``)
- **hash**: digest functions (``sha256_digest``)
- **settings**: bundled defaults (``get``)
"""

from .errors import (
    ColorHashError,
    ValidationError,
    ConfigurationError
)

from .log import (
    set_verbosity,
    info,
    warn,
    fail
)

from .hash import (
    HashFunction,
    sha256_digest
)

__all__ = [
    "ColorHashError",
    "ValidationError",
    "ConfigurationError",
    "set_verbosity",
    "info",
    "warn",
    "fail",
    "HashFunction",
    "sha256_digest"
]
