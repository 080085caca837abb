"""Key generation and hexadecimal conversion helpers."""

from __future__ import annotations

import secrets
import string

KEY_SIZE = 16

_HEX_DIGITS = frozenset(string.hexdigits)


def generate_key(size: int = KEY_SIZE) -> bytes:
    """Return ``size`` random bytes suitable for use as a key or IV."""
    if size < 0:
        raise ValueError(f"key size must not be negative: {size}")
    return secrets.token_bytes(size)


def bytes_to_hex(data: bytes) -> str:
    """Encode bytes as an upper-case hexadecimal string, two digits per byte."""
    return bytes(data).hex().upper()


def hex_to_bytes(text: str) -> bytes:
    """Decode a hexadecimal string into bytes.

    Raises ValueError if the string has an odd length or holds a character
    that is not a hexadecimal digit.
    """
    if len(text) % 2:
        raise ValueError("Hex-строка должна содержать четное количество символов")
    pairs = (text[i : i + 2] for i in range(0, len(text), 2))
    result = bytearray()
    for pair in pairs:
        if not all(ch in _HEX_DIGITS for ch in pair):
            raise ValueError(f"Недопустимый hex-символ: {pair}")
        result.append(int(pair, 16))
    return bytes(result)