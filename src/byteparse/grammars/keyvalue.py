from __future__ import annotations
from typing import List

import structlog

from byteparse.models.record import KeyValue
from byteparse.models.span import Span
from byteparse.scan.cursor import ParseCursor

logger = structlog.get_logger(__name__)


def parse_line(line: ParseCursor) -> KeyValue:
    """
    `key: value` -> ("key", "value"). The key is everything before the first
    colon, the value everything after it with leading whitespace removed.
    A line without a colon has an empty key and the stripped line as value.
    """
    span = Span(start=line.start, end=line.end)
    key = line.record().consume_until(":").to_str()

    has_colon = line.advance() is not None
    if not has_colon:
        return KeyValue(key="", value=key.lstrip(), span=span)

    value = line.record().consume_to_str()
    return KeyValue(key=key, value=value.lstrip(), span=span)


def parse_key_values(parser: ParseCursor, delimiter="\n") -> List[KeyValue]:
    out = parser.split_on_byte(delimiter).map_and_collect(parse_line)
    logger.debug("key_values_parsed", lines=len(out))
    return out
