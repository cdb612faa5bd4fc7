from __future__ import annotations
from typing import Optional

from .cursor import Checkpoint, DelegatingCursor, ParseCursor


class Recorder(DelegatingCursor):
    """
    Records the span consumed through it, starting where record() was called.

    Moves go straight to the wrapped cursor, so whatever is consumed here is
    consumed there too. Every record() call makes a new handle with its own
    start, so recordings nest without disturbing each other; rebase() moves
    this handle's start to the current position instead.
    """
    __slots__ = ("record_start",)

    def __init__(self, inner: ParseCursor):
        super().__init__(inner)
        self.record_start = inner.tell()

    def recording_start(self) -> Optional[int]:
        return self.record_start

    def rebase(self) -> "Recorder":
        self.record_start = self.tell()
        return self

    def restore(self, cp: Checkpoint) -> None:
        if cp.pos < self.record_start:
            raise ValueError(f"checkpoint {cp.pos} precedes recording start {self.record_start}")
        self.inner.restore(cp)

    # pure movement: let the wrapped cursor use its own fast paths
    def consume(self):
        self.inner.consume()
        return self

    def consume_until(self, byte_or_pred):
        self.inner.consume_until(byte_or_pred)
        return self

    def __repr__(self) -> str:
        return f"Recorder(start={self.record_start}, {self.inner!r})"
