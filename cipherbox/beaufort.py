"""Beaufort cipher over the full byte alphabet."""

from __future__ import annotations

from itertools import cycle

ALPHABET_SIZE = 256


def beaufort_cipher(data: bytes, key: bytes) -> bytes:
    """Map each byte ``d`` to ``(k - d) mod 256`` with the key repeated.

    The transform is its own inverse.
    """
    if not data:
        return b""
    if not key:
        raise ValueError("key must not be empty")
    return bytes((k - d) % ALPHABET_SIZE for d, k in zip(data, cycle(key)))


def encrypt(data: bytes, key: bytes) -> bytes:
    """Encrypt ``data`` with the Beaufort cipher."""
    return beaufort_cipher(data, key)


def decrypt(data: bytes, key: bytes) -> bytes:
    """Decrypt ``data`` with the Beaufort cipher; identical to encryption."""
    return beaufort_cipher(data, key)