import pytest

from byteparse.models.span import Span
from byteparse.parsers import BytesParser, StrParser
from byteparse.scan.errors import NotRecordingError, Utf8Error


def test_record_then_to_slice_is_empty():
    p = BytesParser(b"abc")
    p.advance()
    rec = p.record()
    assert rec.to_slice() == b""
    assert rec.to_str() == ""


def test_record_rest_after_first_word():
    p = BytesParser(b"my byte str")
    p.consume_while(lambda b: b != ord(" "))
    p.advance()
    assert p.record().consume_to_str() == "byte str"


def test_record_is_in_place():
    p = BytesParser(b"aaaabbb")
    assert p.record().consume_while("a").to_str() == "aaaa"
    assert p.tell() == 4


def test_slice_is_a_view_of_the_buffer():
    data = b"aaaabbb"
    p = BytesParser(data)
    rec = p.record()
    view = rec.consume_while("a").to_slice()
    del rec
    assert view == b"aaaa"
    assert view.obj is data


def test_nested_recordings_are_independent():
    p = StrParser("aaaabbb")
    outer = p.record()
    inner = outer.record()
    assert inner.consume_while("a").to_str() == "aaaa"
    assert outer.consume_to_str() == "aaaabbb"
    assert inner.to_str() == "aaaabbb"


def test_rebase_overwrites_start():
    p = StrParser("abcdef")
    rec = p.record()
    rec.consume_len(2)
    rec.rebase()
    rec.consume_len(2)
    assert rec.to_str() == "cd"
    assert rec.record_start == 2


def test_to_slice_without_record_is_misuse():
    p = BytesParser(b"abc")
    with pytest.raises(NotRecordingError):
        p.to_slice()
    with pytest.raises(NotRecordingError):
        p.consume_to_str()


def test_restore_before_recording_start():
    p = BytesParser(b"abc")
    cp = p.checkpoint()
    p.advance()
    rec = p.record()
    with pytest.raises(ValueError):
        rec.restore(cp)
    rec.advance()
    rec.restore(rec.checkpoint())
    assert rec.to_str() == "b"


def test_span():
    p = BytesParser(b"abcd")
    p.advance()
    rec = p.record()
    rec.consume_len(2)
    assert rec.span() == Span(start=1, end=3)
    assert len(rec.span()) == 2


def test_to_str_on_invalid_bytes():
    p = BytesParser(b"ok\xff")
    rec = p.record().consume()
    with pytest.raises(Utf8Error) as e:
        rec.to_str()
    assert e.value.offset == 2
    assert rec.try_to_str() is None
    assert rec.to_bytes() == b"ok\xff"


def test_recorder_exposes_parent_buffer():
    p = StrParser("xyz")
    rec = p.record()
    assert rec.is_text
    assert rec.start == 0 and rec.end == 3
    assert rec.buf is p.buf
