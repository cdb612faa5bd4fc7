from __future__ import annotations
from typing import Optional

import structlog

from byteparse.models.number import Number
from byteparse.parsers import StrParser
from byteparse.scan.consumers import is_ascii_digit
from byteparse.scan.cursor import ParseCursor
from byteparse.scan.errors import ExpectError, ParseError, ShortfallError

logger = structlog.get_logger(__name__)


def parse_number(cur: ParseCursor) -> Optional[Number]:
    """
    Parse `-?digits(.digits*)?` at the cursor.
      - no dot, no sign -> Uint
      - no dot, sign    -> Integer
      - dot             -> Float
    Returns None if there is no digit before the dot; the cursor is then
    put back where it started. Trailing input is left for the caller.
    """
    cp = cur.checkpoint()
    rec = cur.record()

    negative = rec.next_if("-") is not None
    try:
        rec.while_byte_fn(is_ascii_digit).consume_at_least(1)
    except ShortfallError:
        cur.restore(cp)
        return None

    if rec.next_if(".") is None:
        v = int(rec.to_str())
        return Number.integer(v) if negative else Number.uint(v)

    rec.consume_while_fn(is_ascii_digit)
    return Number.float_(float(rec.to_str()))


def number_from_parser(cur: ParseCursor) -> Number:
    """Parse a number that must fill the cursor's bounds exactly."""
    start = cur.tell()
    num = parse_number(cur)
    if num is None:
        logger.debug("number_rejected", reason="no_leading_digit", offset=start)
        raise ParseError(f"no number at {start}")
    try:
        cur.expect_end()
    except ExpectError as e:
        logger.debug("number_rejected", reason="trailing_input", offset=e.offset)
        raise
    return num


def number_from_str(text: str) -> Number:
    return number_from_parser(StrParser(text))
