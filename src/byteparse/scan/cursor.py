from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, Union

from byteparse.models.span import Span
from .consumers import ConsumerMixin
from .errors import NotRecordingError, ShortfallError, Utf8Error

# int for byte cursors, one-character str for text cursors
Unit = Union[int, str]
Predicate = Callable[[Unit], bool]


@dataclass(frozen=True, order=True)
class Checkpoint:
    pos: int


def _coerce_byte(value) -> int:
    if isinstance(value, int):
        if not 0 <= value <= 0xFF: raise ValueError(f"byte out of range: {value}")
        return value
    if isinstance(value, (bytes, bytearray)) and len(value) == 1:
        return value[0]
    if isinstance(value, str) and len(value) == 1 and ord(value) < 0x80:
        return ord(value)
    raise ValueError(f"not a single byte: {value!r}")

def _coerce_char(value) -> str:
    if isinstance(value, str) and len(value) == 1:
        return value
    if isinstance(value, int):
        return chr(value)
    if isinstance(value, (bytes, bytearray)):
        try:
            s = bytes(value).decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValueError(f"not a single character: {value!r}") from e
        if len(s) == 1:
            return s
    raise ValueError(f"not a single character: {value!r}")


class ParseCursor(ConsumerMixin, ABC):
    """
    Capability set shared by every parser, recorder, segment and adapter.

    Implementations supply the primitives (tell/restore/peek/advance/bounded)
    and the buffer attributes `data`, `buf`, `start`, `end`; everything else,
    including all consumers in ConsumerMixin, is written once on top of them.
    """
    __slots__ = ()

    is_text = False

    @abstractmethod
    def tell(self) -> int: ...

    @abstractmethod
    def restore(self, cp: Checkpoint) -> None: ...

    @abstractmethod
    def peek(self) -> Optional[Unit]: ...

    @abstractmethod
    def advance(self) -> Optional[Unit]: ...

    @abstractmethod
    def bounded(self, start: int, end: int) -> "ParseCursor": ...

    def recording_start(self) -> Optional[int]:
        return None

    # ---- units & predicates

    def coerce_unit(self, value) -> Unit:
        return _coerce_char(value) if self.is_text else _coerce_byte(value)

    def encode_unit(self, unit: Unit) -> bytes:
        return unit.encode("utf-8") if self.is_text else bytes((unit,))

    def matcher(self, byte_or_pred) -> Predicate:
        if callable(byte_or_pred):
            return byte_or_pred
        unit = self.coerce_unit(byte_or_pred)
        return lambda u: u == unit

    # ---- position

    def checkpoint(self) -> Checkpoint:
        return Checkpoint(self.tell())

    def remaining(self) -> int:
        """Bytes left before the end bound; on text cursors this is not a character count."""
        return self.end - self.tell()

    def at_end(self) -> bool:
        return self.peek() is None

    def next_if(self, byte_or_pred) -> Optional[Unit]:
        """Advance one unit only if it matches; otherwise leave the cursor untouched."""
        match = self.matcher(byte_or_pred)
        unit = self.peek()
        if unit is None or not match(unit):
            return None
        return self.advance()

    def advance_if(self, byte_or_pred) -> Optional[bool]:
        """None at end of input, else whether the cursor advanced."""
        if self.peek() is None:
            return None
        return self.next_if(byte_or_pred) is not None

    def peek_at(self, n: int) -> Optional[Unit]:
        """The n-th unit ahead (1-based) without moving."""
        if n < 1: raise ValueError("peek_at n must be >= 1")
        cp = self.checkpoint()
        try:
            unit = None
            for _ in range(n):
                unit = self.advance()
                if unit is None:
                    break
            return unit
        finally:
            self.restore(cp)

    def peek_len(self, n: int) -> Optional[memoryview]:
        """View over the next n units without moving; None if fewer remain."""
        cp = self.checkpoint()
        try:
            self.consume_len(n)
            return self.buf[cp.pos:self.tell()]
        except ShortfallError:
            return None
        finally:
            self.restore(cp)

    # ---- recording

    def record(self):
        from .recorder import Recorder
        return Recorder(self)

    def _recorded_range(self) -> tuple[int, int]:
        start = self.recording_start()
        if start is None:
            raise NotRecordingError("nothing recorded: call record() first")
        end = self.tell()
        if end < start:
            raise NotRecordingError(f"cursor at {end} is before recording start {start}")
        return start, end

    def to_slice(self) -> memoryview:
        start, end = self._recorded_range()
        return self.buf[start:end]

    def to_bytes(self) -> bytes:
        return self.to_slice().tobytes()

    def to_str(self) -> str:
        raw = self.to_slice()
        try:
            return str(raw, "utf-8")
        except UnicodeDecodeError as e:
            raise Utf8Error(self.recording_start() + e.start, e.reason) from e

    def try_to_str(self) -> Optional[str]:
        try:
            return self.to_str()
        except Utf8Error:
            return None

    def span(self) -> Span:
        start, end = self._recorded_range()
        return Span(start=start, end=end)

    # ---- derived cursors

    def split_on_byte(self, byte_or_pred):
        from .split import Splitter
        return Splitter(self, byte_or_pred)

    def ignore_byte(self, byte):
        from .adapters import IgnoreByte
        return IgnoreByte(self, byte)

    def stop(self):
        from .adapters import Stop
        return Stop(self)


class DelegatingCursor(ParseCursor):
    """Base for views that borrow another cursor's buffer and position."""
    __slots__ = ("inner",)

    def __init__(self, inner: ParseCursor):
        self.inner = inner

    @property
    def data(self): return self.inner.data
    @property
    def buf(self) -> memoryview: return self.inner.buf
    @property
    def start(self) -> int: return self.inner.start
    @property
    def end(self) -> int: return self.inner.end
    @property
    def is_text(self) -> bool: return self.inner.is_text

    def tell(self) -> int: return self.inner.tell()
    def restore(self, cp: Checkpoint) -> None: self.inner.restore(cp)
    def peek(self) -> Optional[Unit]: return self.inner.peek()
    def advance(self) -> Optional[Unit]: return self.inner.advance()
    def bounded(self, start: int, end: int) -> ParseCursor: return self.inner.bounded(start, end)
    def recording_start(self) -> Optional[int]: return self.inner.recording_start()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inner!r})"


class Cursor(ParseCursor):
    """Bounded byte cursor over an immutable buffer; units are ints."""
    __slots__ = ("data", "buf", "pos", "start", "end")

    def __init__(self, data: bytes | bytearray):
        self.data = data
        self.buf = memoryview(data)
        self.start, self.end, self.pos = 0, len(data), 0

    def tell(self) -> int: return self.pos

    def _decode(self, pos: int) -> tuple[Unit, int]:
        return self.data[pos], 1

    def _check_offset(self, pos: int) -> None:
        pass

    def restore(self, cp: Checkpoint) -> None:
        if not (self.start <= cp.pos <= self.end):
            raise ValueError(f"checkpoint {cp.pos} outside [{self.start}, {self.end}]")
        self._check_offset(cp.pos)
        self.pos = cp.pos

    def peek(self) -> Optional[Unit]:
        if self.pos >= self.end: return None
        return self._decode(self.pos)[0]

    def advance(self) -> Optional[Unit]:
        if self.pos >= self.end: return None
        unit, width = self._decode(self.pos)
        self.pos += width
        return unit

    def bounded(self, start: int, end: int) -> "Cursor":
        """A fresh cursor of the same kind over [start, end) of this buffer."""
        if not (self.start <= start <= end <= self.end):
            raise ValueError(f"bounds [{start}, {end}) outside [{self.start}, {self.end})")
        self._check_offset(start)
        self._check_offset(end)
        seg = object.__new__(type(self))
        seg.data, seg.buf = self.data, self.buf
        seg.start, seg.end, seg.pos = start, end, start
        return seg

    def consume(self):
        self.pos = self.end
        return self

    def consume_until(self, byte_or_pred):
        if callable(byte_or_pred):
            return super().consume_until(byte_or_pred)
        needle = self.encode_unit(self.coerce_unit(byte_or_pred))
        idx = self.data.find(needle, self.pos, self.end)
        self.pos = self.end if idx < 0 else idx
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pos={self.pos}, start={self.start}, end={self.end})"
