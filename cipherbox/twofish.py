"""Twofish-style block cipher used in CFB mode.

The key schedule follows the cipher's own layout: the key is zero-padded to
32 bytes. The S-boxes are built from a key-derived vector passed through the
q-permutations and MDS columns. Forty subkeys are derived through the ``h``
function. Data of any length is processed in 128-bit CFB mode, so the
ciphertext is exactly as long as the plaintext.
"""

from __future__ import annotations

import struct
from functools import reduce
from operator import xor

BLOCK_SIZE = 16
MAX_ROUNDS = 16
SUBKEY_COUNT = 40

_RS_GF_FDBK = 0x14D
_SK_STEP = 0x02020202
_SK_ROTL = 9
_MASK = 0xFFFFFFFF
_PADDED_KEY_SIZE = 32

_Q0 = bytes.fromhex(
    "A967B3E804FDA376" "9A928078E4DDD138" "0DC6359818F7EC6C" "43753726FA139448"
    "F2D08B308454DF23" "195B3D59F3AEA282" "6301832ED9519B7C" "A6EBA5BE160CE361"
    "C08C3AF5732C250B" "BB4E896B536AB4F1" "E1E6BD45E2F4B666" "CC950356D41C1ED7"
    "FBC38EB5E9CFBFBA" "EA7739AF33C96271" "817909AD24CDF9D8" "E5C5B94D440886E7"
    "A11DAAED0670B2D2" "417BA01131C22790" "20F660FF965CB1AB" "9E9C521B5F930AEF"
    "918549EE2D4F8F3B" "47876D46D63E6964" "2ACECB2FFC97057A" "AC7FD51A4B0EA75A"
    "28143F29883C4C02" "B8DAB017551F8A7D" "57C78D74B7C49F72" "7E15221258079934"
    "6E50DE6865BCDBF8" "C8A82B40DCFE32A4" "CA1021F0D35D0F00" "6F9D36424A5EC1E0"
)

_Q1 = bytes.fromhex(
    "75F3C6F4DB7BFBC8" "4AD3E66B457DE84B" "D632D8FD3771F1E1" "300FF81B87FA063F"
    "5EBAAE5B8A00BC9D" "6DC1B10E805DD2D5" "A0840714B5902CA3" "B2734C5492743651"
    "38B0BD5AFC606296" "6C42F7107C28278C" "13959CC724463B70" "CAE385CB11D093B8"
    "A68320FF9F77C3CC" "036F08BF40E72BE2" "790CAA82413AEAB9" "E49AA4977EDA7A17"
    "6694A11D3DF0DEB3" "0B72A71CEFD1533E" "8F33265FEC762A49" "8188EE21C41AEBD9"
    "C53999CDAD318B01" "1823DD1F4E2DF948" "4FF2658E785C5819" "8DE59857677F0564"
    "AF63B6FEF5B73CA5" "CEE96844E04D4369" "292EAC1559A80A9E" "6E47DF34356ACFDC"
    "22C9C09B89D4EDAB" "12A20D52BB022FA9" "D7611EB45004F6C2" "1625865655 09BE91".replace(" ", "")
)

_RS = (
    bytes.fromhex("01A455875A58DB9E"),
    bytes.fromhex("A45682F31EC668E5"),
    bytes.fromhex("02A1FCC147AE3D19"),
    bytes.fromhex("A455875A58DB9E03"),
)

_MDS_COLUMNS = (
    bytes.fromhex("01EF5B5BC6C6D8D8"),
    bytes.fromhex("A4723F3F2D2DC0C0"),
    bytes.fromhex("520E7F7FA4A49595"),
    bytes.fromhex("306CADAD3B3B4C4C"),
)

_WORDS = struct.Struct(">4I")


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK


def _rotr(value: int, shift: int) -> int:
    return ((value >> shift) | (value << (32 - shift))) & _MASK


def _mds(column: bytes, value: int) -> int:
    result = 0
    for bit, coefficient in enumerate(column):
        if value >> bit & 1:
            result ^= coefficient << (bit * 4)
    return result & _MASK


def _rs_multiply(a: int, b: int) -> int:
    result = 0
    while b:
        if b & 1:
            result ^= a
        a = ((a << 1) ^ (_RS_GF_FDBK if a & 0x80 else 0)) & 0xFF
        b >>= 1
    return result


def _big_endian_word(b0: int, b1: int, b2: int, b3: int) -> int:
    return (b0 << 24) | (b1 << 16) | (b2 << 8) | b3


class TwofishCfb:
    """A keyed cipher instance offering block encryption and CFB streams."""

    def __init__(self, key: bytes) -> None:
        key = bytes(key)
        if not key:
            raise ValueError("key must not be empty")
        padded = key[:_PADDED_KEY_SIZE].ljust(_PADDED_KEY_SIZE, b"\0")
        self._sboxes = self._build_sboxes(key, padded)
        self._subkeys = self._build_subkeys(padded)
        self._t0_key = self._subkeys[8:12]
        self._t1_key = self._subkeys[10:14]

    @staticmethod
    def _build_sboxes(key: bytes, padded: bytes) -> tuple[list[int], ...]:
        key_vector = [
            reduce(
                xor,
                (_rs_multiply(coef, padded[j % len(key)]) for j, coef in enumerate(row)),
                0,
            )
            for row in _RS
        ]
        if len(key) <= 16:
            q_rounds = 2
        elif len(key) <= 24:
            q_rounds = 3
        else:
            q_rounds = 4

        boxes: tuple[list[int], ...] = ([], [], [], [])
        for value in range(256):
            x = value
            for r in range(q_rounds):
                x = _Q0[x ^ key_vector[r % 4]]
                x = _Q1[x ^ key_vector[(r + 1) % 4]]
            for box, column in zip(boxes, _MDS_COLUMNS):
                box.append(_mds(column, x))
        return boxes

    def _build_subkeys(self, padded: bytes) -> list[int]:
        even = [
            _big_endian_word(padded[2 * i], padded[2 * i + 1], padded[2 * i + 8], padded[2 * i + 9])
            for i in range(4)
        ]
        odd = [
            _big_endian_word(
                padded[2 * i + 16], padded[2 * i + 17], padded[2 * i + 24], padded[2 * i + 25]
            )
            for i in range(4)
        ]
        subkeys: list[int] = []
        for i in range(SUBKEY_COUNT // 2):
            a = self._h((2 * i * _SK_STEP) & _MASK, even)
            b = _rotl(self._h(((2 * i + 1) * _SK_STEP) & _MASK, odd), 8)
            subkeys.append((a + b) & _MASK)
            subkeys.append(_rotl((a + 2 * b) & _MASK, _SK_ROTL))
        return subkeys

    def _h(self, x: int, words: list[int]) -> int:
        result = 0
        for i, (box, word) in enumerate(zip(self._sboxes, words)):
            shift = 24 - 8 * i
            index = ((x >> shift) ^ (word >> shift)) & 0xFF
            result ^= box[index]
        return result

    def _round_function(self, r0: int, r1: int, round_index: int) -> tuple[int, int]:
        t0 = self._h(r0, self._t0_key)
        t1 = self._h(r1, self._t1_key)
        f0 = (t0 + t1 + self._subkeys[2 * round_index + 8]) & _MASK
        f1 = (t0 + 2 * t1 + self._subkeys[2 * round_index + 9]) & _MASK
        return f0, f1

    def encrypt_block(self, block: bytes) -> bytes:
        """Encrypt one 16-byte block and return the result."""
        block = bytes(block)
        if len(block) != BLOCK_SIZE:
            raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(block)}")
        r0, r1, r2, r3 = (
            word ^ subkey for word, subkey in zip(_WORDS.unpack(block), self._subkeys[0:4])
        )
        for round_index in range(MAX_ROUNDS):
            f0, f1 = self._round_function(r0, r1, round_index)
            r2 = _rotl(r2, 1) ^ f0
            r3 = _rotr(r3 ^ f1, 1)
            r0, r1, r2, r3 = r2, r3, r0, r1
        r0, r1, r2, r3 = r2, r3, r0, r1
        words = (w ^ k for w, k in zip((r0, r1, r2, r3), self._subkeys[4:8]))
        return _WORDS.pack(*words)

    @staticmethod
    def _initial_register(iv: bytes) -> bytes:
        iv = bytes(iv)
        if len(iv) < BLOCK_SIZE:
            raise ValueError(f"IV must be at least {BLOCK_SIZE} bytes, got {len(iv)}")
        return iv[:BLOCK_SIZE]

    def _cfb(self, data: bytes, iv: bytes, decrypting: bool) -> bytes:
        register = self._initial_register(iv)
        data = bytes(data)
        output = bytearray()
        for start in range(0, len(data), BLOCK_SIZE):
            keystream = self.encrypt_block(register)
            chunk = data[start : start + BLOCK_SIZE]
            produced = bytes(c ^ k for c, k in zip(chunk, keystream))
            output += produced
            ciphertext = chunk if decrypting else produced
            register = ciphertext + keystream[len(ciphertext) :]
        return bytes(output)

    def encrypt(self, data: bytes, iv: bytes) -> bytes:
        """Encrypt ``data`` in CFB mode starting from ``iv``."""
        return self._cfb(data, iv, decrypting=False)

    def decrypt(self, data: bytes, iv: bytes) -> bytes:
        """Decrypt CFB-mode ``data`` that was encrypted starting from ``iv``."""
        return self._cfb(data, iv, decrypting=True)


def encrypt(data: bytes, key: bytes, iv: bytes) -> bytes:
    """Encrypt ``data`` with ``key`` in CFB mode starting from ``iv``."""
    return TwofishCfb(key).encrypt(data, iv)


def decrypt(data: bytes, key: bytes, iv: bytes) -> bytes:
    """Decrypt CFB-mode ``data`` with ``key`` starting from ``iv``."""
    return TwofishCfb(key).decrypt(data, iv)