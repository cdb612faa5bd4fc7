from __future__ import annotations
from typing import Callable, Iterator, List, TypeVar

from .cursor import ParseCursor

T = TypeVar("T")


class Splitter(Iterator[ParseCursor]):
    """
    Yields successive segments of the parent delimited by a unit or predicate.

    Each segment is an independent cursor bounded to [last_end, delimiter);
    the parent moves past the delimiter as soon as the segment is handed out.
    When no delimiter is left the remainder (possibly empty) is the last
    segment and the splitter is exhausted.
    """
    __slots__ = ("parent", "delimiter", "exhausted")

    def __init__(self, parent: ParseCursor, delimiter):
        parent.matcher(delimiter)  # reject bad delimiters before the first split
        self.parent = parent
        self.delimiter = delimiter
        self.exhausted = False

    def __iter__(self) -> "Splitter":
        return self

    def __next__(self) -> ParseCursor:
        if self.exhausted:
            raise StopIteration
        p = self.parent
        seg_start = p.tell()
        p.consume_until(self.delimiter)
        seg_end = p.tell()
        if p.advance() is None:
            self.exhausted = True
        return p.bounded(seg_start, seg_end)

    def for_each(self, fn: Callable[[ParseCursor], object]) -> "Splitter":
        for seg in self:
            fn(seg)
        return self

    def map_and_collect(self, fn: Callable[[ParseCursor], T]) -> List[T]:
        return [fn(seg) for seg in self]
