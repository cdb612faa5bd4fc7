from __future__ import annotations


class ParseError(ValueError):
    pass


class ShortfallError(ParseError):
    """A run consumed fewer units than the grammar requires.

    Consumption is not rolled back: the cursor stays wherever the run stopped.
    """

    def __init__(self, needed: int, consumed: int):
        super().__init__(f"shortfall: needed {needed}, consumed {consumed}")
        self.needed = needed
        self.consumed = consumed


class ExpectError(ParseError):
    def __init__(self, found, offset: int):
        what = "end of input" if found is None else repr(found)
        super().__init__(f"unexpected {what} at {offset}")
        self.found = found
        self.offset = offset


class Utf8Error(ParseError):
    """Invalid or truncated UTF-8 at a byte offset. Always fatal for the parse."""

    def __init__(self, offset: int, reason: str = "invalid utf-8"):
        super().__init__(f"{reason} at {offset}")
        self.offset = offset


class NotRecordingError(RuntimeError):
    pass
