"""Content hashing.

Derives stable values from node text, e.g. FogTrail coordinates that do
not change between runs.
"""

import hashlib


def hash_bytes(data: bytes, algorithm: str = "sha256") -> str:
    """Hex digest of ``data``."""
    return hashlib.new(algorithm, data).hexdigest()


def hash_string(text: str, algorithm: str = "sha256") -> str:
    """Hex digest of the UTF-8 encoding of ``text``."""
    return hash_bytes(text.encode("utf-8"), algorithm)


def hash_to_unit_pair(text: str) -> tuple[float, float]:
    """
    Map a string to two floats in [0, 1).

    The first two 32-bit words of the SHA-256 digest, each divided
    by 2**32.

    Args:
        text: String to map

    Returns:
        (u, v), both in [0, 1)
    """
    digest = hash_string(text)
    scale = float(1 << 32)
    return int(digest[:8], 16) / scale, int(digest[8:16], 16) / scale
