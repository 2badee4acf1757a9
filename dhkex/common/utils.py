"""Helper functions: big-endian integer encoding and base64 for JSON output."""

import base64


def int_to_bytes(value: int) -> bytes:
    """Encode a non-negative integer as minimal big-endian bytes (at least one byte)."""
    if value < 0:
        raise ValueError("cannot encode a negative integer")
    return value.to_bytes((value.bit_length() + 7) // 8 or 1, byteorder='big')


def bytes_to_int(data: bytes) -> int:
    """Decode big-endian bytes to an integer."""
    return int.from_bytes(data, byteorder='big')


def b64e(b: bytes) -> str:
    """Base64 encode bytes to string for JSON transmission."""
    return base64.b64encode(b).decode('utf-8')


def b64d(s: str) -> bytes:
    """Base64 decode string to bytes from JSON messages."""
    return base64.b64decode(s)
