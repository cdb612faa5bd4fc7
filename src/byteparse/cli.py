from __future__ import annotations
import argparse, codecs, json, logging, sys

import structlog

from .grammars.keyvalue import parse_line
from .grammars.numbers import number_from_parser
from .parsers import BytesParser, StrParser
from .scan.errors import ParseError
from .settings import Settings, get_settings

logger = structlog.get_logger(__name__)


def configure_logging(log_level: str) -> None:
    numeric_level = logging.getLevelName(log_level.upper())
    if isinstance(numeric_level, str):
        numeric_level = logging.WARNING
    logging.basicConfig(level=numeric_level, format="%(message)s", stream=sys.stderr)
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        # stdout carries the JSON results
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _delimiter(raw: str) -> str:
    # allow "\n", "\t", "\x00" etc. from the shell
    return codecs.decode(raw, "unicode_escape") if "\\" in raw else raw


def _positive_int(raw: str) -> int:
    n = int(raw)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n


def _segments(args, settings: Settings):
    text = settings.text_mode and not args.bytes
    parser = (StrParser if text else BytesParser).from_path(args.input)
    raw = args.delimiter if args.delimiter is not None else settings.delimiter
    try:
        delim = parser.coerce_unit(_delimiter(raw))
    except ValueError as e:
        raise ParseError(f"bad delimiter {raw!r}: {e}") from e
    limit = args.max_segments if args.max_segments is not None else settings.max_segments
    for i, seg in enumerate(parser.split_on_byte(delim)):
        if limit is not None and i >= limit:
            return
        yield i, seg


def cmd_split(args, settings: Settings) -> int:
    if args.summary:
        print(f"segments={sum(1 for _ in _segments(args, settings))}")
        return 0

    out = []
    for _, seg in _segments(args, settings):
        rec = seg.record().consume()
        text = rec.try_to_str()
        out.append(text if text is not None else {"hex": rec.to_bytes().hex()})
    print(json.dumps(out, indent=2))
    return 0


def cmd_kv(args, settings: Settings) -> int:
    out = [
        parse_line(seg).model_dump(mode="json")
        for _, seg in _segments(args, settings)
        if not seg.at_end()
    ]
    print(json.dumps(out, indent=2))
    return 0


def cmd_numbers(args, settings: Settings) -> int:
    out, failed = [], 0
    for i, seg in _segments(args, settings):
        if seg.at_end():
            continue
        try:
            out.append(number_from_parser(seg).model_dump(mode="json"))
        except ParseError as e:
            failed += 1
            logger.warning("number_parse_failed", segment=i, error=str(e))
            out.append(None)

    if args.summary:
        print(f"numbers={len(out) - failed}, failed={failed}")
        return 0
    print(json.dumps(out, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="byteparse", description="zero-copy line/record scanning utilities")
    p.add_argument("--log-level", default=None, help="override BYTEPARSE_LOG_LEVEL")
    sub = p.add_subparsers(dest="cmd")

    def common(sp):
        sp.add_argument("input", help="Path to the input file")
        sp.add_argument("--delimiter", default=None, help="Segment delimiter (escapes like \\n allowed)")
        sp.add_argument("--max-segments", type=_positive_int, default=None, help="Stop after N segments")
        sp.add_argument("--bytes", action="store_true", help="Scan raw bytes instead of UTF-8 text")

    sp = sub.add_parser("split", help="print the segments between delimiters as JSON")
    common(sp)
    sp.add_argument("--summary", action="store_true", help="Only print the segment count")
    sp.set_defaults(func=cmd_split)

    sp = sub.add_parser("kv", help="parse `key: value` lines as JSON")
    common(sp)
    sp.set_defaults(func=cmd_kv)

    sp = sub.add_parser("numbers", help="parse one number per segment as JSON")
    common(sp)
    sp.add_argument("--summary", action="store_true", help="Only print parsed/failed counts")
    sp.set_defaults(func=cmd_numbers)

    return p


def main(argv=None) -> int:
    settings = get_settings()
    p = build_parser()
    ns = p.parse_args(argv)
    configure_logging(ns.log_level or settings.log_level)
    if not hasattr(ns, "func"):
        p.print_help()
        return 2
    try:
        return ns.func(ns, settings)
    except ParseError as e:
        logger.error("parse_failed", cmd=ns.cmd, input=ns.input, error=str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
