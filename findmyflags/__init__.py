"""A capture-the-flag puzzle with its own base64 and MD5 helpers."""

__version__ = "0.1.0"
__all__ = ["codec", "digest", "flags"]