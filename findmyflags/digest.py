"""MD5 message digest."""

from __future__ import annotations

import struct
from typing import BinaryIO

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_S = (
    7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22,
    5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20,
    4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23,
    6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21,
)

_K = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_MASK = 0xFFFFFFFF
_BLOCK = 64
_CHUNK = 1024


def rotate_left(x: int, n: int) -> int:
    """Rotate the 32-bit word ``x`` left by ``n`` bits."""
    x &= _MASK
    n %= 32
    return ((x << n) | (x >> (32 - n))) & _MASK


def _compress(state: tuple[int, int, int, int], block: bytes) -> tuple[int, int, int, int]:
    words = struct.unpack("<16I", block)
    a, b, c, d = state
    for i in range(64):
        round_no = i // 16
        if round_no == 0:
            e = (b & c) | (~b & d)
            j = i
        elif round_no == 1:
            e = (b & d) | (c & ~d)
            j = (i * 5 + 1) % 16
        elif round_no == 2:
            e = b ^ c ^ d
            j = (i * 3 + 5) % 16
        else:
            e = c ^ (b | (~d & _MASK))
            j = (i * 7) % 16
        e &= _MASK
        a, b, c, d = d, (b + rotate_left(a + e + _K[i] + words[j], _S[i])) & _MASK, b, c
    return (
        (state[0] + a) & _MASK,
        (state[1] + b) & _MASK,
        (state[2] + c) & _MASK,
        (state[3] + d) & _MASK,
    )


class MD5:
    """Incremental MD5 hasher."""

    digest_size = 16
    block_size = _BLOCK

    def __init__(self, data: bytes = b"") -> None:
        self._state = _INITIAL_STATE
        self._size = 0
        self._pending = b""
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        data = bytes(data)
        self._size += len(data)
        buffered = self._pending + data
        full = len(buffered) - len(buffered) % _BLOCK
        for start in range(0, full, _BLOCK):
            self._state = _compress(self._state, buffered[start:start + _BLOCK])
        self._pending = buffered[full:]

    def digest(self) -> bytes:
        """Return the 16-byte digest of everything fed so far."""
        padding = b"\x80" + b"\x00" * ((55 - self._size) % _BLOCK)
        length = struct.pack("<Q", (self._size * 8) & 0xFFFFFFFFFFFFFFFF)
        tail = self._pending + padding + length
        state = self._state
        for start in range(0, len(tail), _BLOCK):
            state = _compress(state, tail[start:start + _BLOCK])
        return struct.pack("<4I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lowercase hexadecimal text."""
        return self.digest().hex()


def md5_string(text: str | bytes) -> bytes:
    """Digest of a string, up to its first NUL character."""
    raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    raw = raw.split(b"\x00", 1)[0]
    return MD5(raw).digest()


def md5_file(file: BinaryIO) -> bytes:
    """Digest of everything left to read from a binary file."""
    hasher = MD5()
    while chunk := file.read(_CHUNK):
        hasher.update(chunk)
    return hasher.digest()