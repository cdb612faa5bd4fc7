from __future__ import annotations

from pathlib import Path
from typing import Union

from .scan import utf8
from .scan.cursor import Cursor, Unit
from .scan.errors import Utf8Error

BytesLike = Union[bytes, bytearray, memoryview]


def _load_bytes(inp: Union[str, Path, BytesLike]) -> bytes | bytearray:
    if isinstance(inp, (bytes, bytearray)):
        return inp
    if isinstance(inp, memoryview):
        # find() needs a real bytes object behind the view
        return inp.tobytes()
    return Path(str(inp)).read_bytes()


class BytesParser(Cursor):
    """Parser over raw bytes. Units are ints in 0..255."""
    __slots__ = ()

    def __init__(self, data: BytesLike):
        if isinstance(data, str):
            raise TypeError("BytesParser needs bytes; use StrParser for text")
        super().__init__(_load_bytes(data))

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "BytesParser":
        return cls(_load_bytes(Path(path)))


class StrParser(Cursor):
    """
    Parser over UTF-8 text. Units are one-character strings.

    The buffer is validated once at construction; after that every move is by
    a whole scalar value, and restore()/bounded() refuse offsets that would
    land inside a code point, so recorded spans always decode.
    """
    __slots__ = ()

    is_text = True

    def __init__(self, text: Union[str, BytesLike]):
        if isinstance(text, str):
            data = utf8.encode(text)
        else:
            data = _load_bytes(text)
            utf8.validate(data)
        super().__init__(data)

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "StrParser":
        return cls(_load_bytes(Path(path)))

    def _decode(self, pos: int) -> tuple[Unit, int]:
        return utf8.decode_scalar(self.data, pos, self.end)

    def _check_offset(self, pos: int) -> None:
        if not utf8.is_boundary(self.data, pos):
            raise Utf8Error(pos, "offset inside a code point")
