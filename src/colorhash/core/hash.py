"""
Digest functions turning a string into a reproducible integer.

A hash function is any callable ``str -> int`` that is total and
deterministic across processes. It may return negative values: the
derivation takes the absolute value before use.
"""

import hashlib
from typing import Callable

HashFunction = Callable[[str], int]


def sha256_digest(text: str) -> int:
    """
    Default digest: first 4 bytes of SHA-256 over the UTF-8 encoding.

    :param text: Any string, including the empty string.
    :type text: str
    :return: Unsigned 32-bit integer read big-endian.
    :rtype: int
    """
    hash_bytes = hashlib.sha256(text.encode("utf-8")).digest()
    return int.from_bytes(hash_bytes[:4], "big")
