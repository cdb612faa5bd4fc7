from __future__ import annotations
from typing import Optional

from .cursor import DelegatingCursor, ParseCursor, Unit


class IgnoreByte(DelegatingCursor):
    """
    Skips every occurrence of one unit while advancing.
    Recorded spans still contain the skipped bytes.
    """
    __slots__ = ("unit",)

    def __init__(self, inner: ParseCursor, byte):
        super().__init__(inner)
        self.unit = inner.coerce_unit(byte)

    def advance(self) -> Optional[Unit]:
        self.inner.consume_while(self.unit)
        return self.inner.advance()

    def peek(self) -> Optional[Unit]:
        cp = self.inner.checkpoint()
        unit = self.advance()
        self.inner.restore(cp)
        return unit

    def bounded(self, start: int, end: int) -> ParseCursor:
        return IgnoreByte(self.inner.bounded(start, end), self.unit)


class Stop(DelegatingCursor):
    """A view that is always at its end; the wrapped cursor keeps its position."""
    __slots__ = ()

    def peek(self) -> Optional[Unit]: return None
    def advance(self) -> Optional[Unit]: return None
    def remaining(self) -> int: return 0
