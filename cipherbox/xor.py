"""Repeating-key XOR cipher."""

from __future__ import annotations

from itertools import cycle


def xor_cipher(data: bytes, key: bytes) -> bytes:
    """XOR every byte of ``data`` with the key, repeated to the data's length."""
    if not data:
        return b""
    if not key:
        raise ValueError("key must not be empty")
    return bytes(d ^ k for d, k in zip(data, cycle(key)))


def encrypt(data: bytes, key: bytes) -> bytes:
    """Encrypt ``data`` with repeating-key XOR."""
    return xor_cipher(data, key)


def decrypt(data: bytes, key: bytes) -> bytes:
    """Decrypt ``data`` with repeating-key XOR; identical to encryption."""
    return xor_cipher(data, key)