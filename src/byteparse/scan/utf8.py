from __future__ import annotations
from .errors import Utf8Error

# Lead byte -> encoded length; 0 marks continuation or invalid lead bytes.
def scalar_width(lead: int) -> int:
    if lead < 0x80: return 1
    if 0xC2 <= lead <= 0xDF: return 2
    if 0xE0 <= lead <= 0xEF: return 3
    if 0xF0 <= lead <= 0xF4: return 4
    return 0

def is_continuation(b: int) -> bool:
    return 0x80 <= b <= 0xBF

def is_boundary(data: bytes, pos: int) -> bool:
    """True if `pos` does not fall inside a multi-byte sequence."""
    return pos >= len(data) or not is_continuation(data[pos])

def decode_scalar(data: bytes, pos: int, end: int) -> tuple[str, int]:
    """
    Decode the scalar value starting at `pos`, never reading past `end`.
    Returns (char, width). Raises Utf8Error without side effects.
    """
    width = scalar_width(data[pos])
    if width == 0:
        raise Utf8Error(pos, f"invalid lead byte 0x{data[pos]:02x}")
    if width == 1:
        return chr(data[pos]), 1
    if pos + width > end:
        raise Utf8Error(pos, "truncated sequence")
    try:
        return data[pos:pos + width].decode("utf-8"), width
    except UnicodeDecodeError as e:
        raise Utf8Error(pos + e.start) from e

def validate(data: bytes) -> None:
    try:
        data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise Utf8Error(e.start, e.reason) from e

def encode(text: str) -> bytes:
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        # lone surrogates are the only way a str can fail here
        raise Utf8Error(len(text[:e.start].encode("utf-8", "surrogatepass")), e.reason) from e
