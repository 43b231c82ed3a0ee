"""Base64 encoding and lenient base64 decoding."""

from __future__ import annotations

import base64

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

# Standard and URL-safe symbols decode alike; anything unknown decodes as zero.
_DECODE = {symbol: value for value, symbol in enumerate(_ALPHABET)}
_DECODE.update({",": 63, "-": 62, ".": 62, "_": 63})


def encode(data: bytes) -> str:
    """Encode ``data`` as padded base64 text.

    Raises ValueError when there is nothing to encode.
    """
    data = bytes(data)
    if not data:
        raise ValueError("cannot encode empty data")
    return base64.b64encode(data).decode("ascii")


def decode(encoded: str | bytes) -> bytes:
    """Decode base64 text into bytes.

    Decoding is lenient: URL-safe symbols are accepted and unknown symbols
    count as zero. The input must be a non-empty multiple of four symbols.
    """
    if isinstance(encoded, (bytes, bytearray)):
        encoded = bytes(encoded).decode("latin-1")
    if not encoded:
        raise ValueError("cannot decode empty input")
    if len(encoded) % 4:
        raise ValueError("base64 input length must be a multiple of 4")

    out = bytearray()
    for start in range(0, len(encoded), 4):
        quad = encoded[start:start + 4]
        value = 0
        for symbol in quad:
            value = (value << 6) | _DECODE.get(symbol, 0)
        out.append(value >> 16)
        if quad[2] != "=":
            out.append((value >> 8) & 0xFF)
        if quad[3] != "=":
            out.append(value & 0xFF)
    return bytes(out)