from __future__ import annotations
from typing import TYPE_CHECKING, Callable

from .errors import ExpectError, ShortfallError

if TYPE_CHECKING:
    from .cursor import ParseCursor


# Unit predicates usable on both byte (int) and text (str) cursors.
def _code(u) -> int:
    return ord(u) if isinstance(u, str) else u

def is_ascii_digit(u) -> bool: return 0x30 <= _code(u) <= 0x39
def is_ascii_alpha(u) -> bool: c = _code(u) | 0x20; return 0x61 <= c <= 0x7A
def is_ascii_whitespace(u) -> bool: return _code(u) in (0x20, 0x09, 0x0A, 0x0C, 0x0D)


class WhileRun:
    """
    A run predicate bound to a cursor. Nothing moves until a terminal
    method is called; each call scans eagerly from the current position.
    """
    __slots__ = ("cursor", "predicate")

    def __init__(self, cursor: "ParseCursor", predicate: Callable):
        self.cursor = cursor
        self.predicate = predicate

    def consume(self) -> int:
        """Consume the run; returns how many units matched."""
        n = 0
        while self.cursor.next_if(self.predicate) is not None:
            n += 1
        return n

    def consume_at_least(self, n: int) -> int:
        """
        Like consume(), but raise ShortfallError if fewer than n units matched.
        The consumed units are not given back.
        """
        count = self.consume()
        if count < n:
            raise ShortfallError(n, count)
        return count


class ConsumerMixin:
    """Predicate consumers, expressed only through peek/advance/next_if."""
    __slots__ = ()

    def while_byte_fn(self, predicate: Callable) -> WhileRun:
        return WhileRun(self, predicate)

    def while_byte(self, byte) -> WhileRun:
        return WhileRun(self, self.matcher(byte))

    def consume_while(self, byte_or_pred):
        match = self.matcher(byte_or_pred)
        while self.next_if(match) is not None:
            pass
        return self

    def consume_while_fn(self, predicate: Callable):
        if not callable(predicate):
            raise TypeError(f"predicate must be callable, got {type(predicate).__name__}")
        return self.consume_while(predicate)

    def consume_while_byte(self, byte):
        return self.consume_while(self.coerce_unit(byte))

    def consume_until(self, byte_or_pred):
        """Stop before the first match, or at the end; never fails."""
        match = self.matcher(byte_or_pred)
        return self.consume_while(lambda u: not match(u))

    def consume(self):
        while self.advance() is not None:
            pass
        return self

    def consume_count(self) -> int:
        n = 0
        while self.advance() is not None:
            n += 1
        return n

    def consume_len(self, n: int):
        for i in range(n):
            if self.advance() is None:
                raise ShortfallError(n, i)
        return self

    def consume_at_least(self, n: int):
        self.consume_len(n)
        return self.consume()

    def count_byte(self, byte) -> int:
        return self.while_byte(byte).consume()

    def expect(self, byte_or_pred):
        match = self.matcher(byte_or_pred)
        offset = self.tell()
        unit = self.peek()
        if unit is None or not match(unit):
            raise ExpectError(unit, offset)
        self.advance()
        return self

    def expect_end(self):
        unit = self.peek()
        if unit is not None:
            raise ExpectError(unit, self.tell())
        return self

    # consume the rest of the bounds, then materialize the recording
    def consume_to_slice(self) -> memoryview: return self.consume().to_slice()
    def consume_to_bytes(self) -> bytes: return self.consume().to_bytes()
    def consume_to_str(self) -> str: return self.consume().to_str()
    def consume_try_to_str(self): return self.consume().try_to_str()
