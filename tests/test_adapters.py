from byteparse.parsers import BytesParser, StrParser


def test_ignore_byte():
    p = BytesParser(b"my byte str")
    ig = p.ignore_byte(" ")
    assert bytes(iter(ig.advance, None)) == b"mybytestr"


def test_ignore_byte_peek():
    p = BytesParser(b"abc").ignore_byte("b")
    assert p.advance() == ord("a")
    assert p.peek() == ord("c")
    assert p.advance() == ord("c")
    assert p.advance() is None


def test_recording_keeps_ignored_bytes():
    p = StrParser("a-b-c")
    rec = p.record()
    assert rec.ignore_byte("-").consume_count() == 3
    assert rec.to_str() == "a-b-c"


def test_ignore_then_split():
    s = b"ab\raaa\r aab\raa"
    counts = (
        BytesParser(s)
        .ignore_byte("\r")
        .split_on_byte(" ")
        .map_and_collect(lambda seg: seg.ignore_byte("b").count_byte("a"))
    )
    assert counts == [4, 4]


def test_stop():
    p = StrParser("123456789")
    rec = p.record()
    rec.consume_len(5)
    assert rec.to_str() == "12345"
    assert rec.stop().consume_to_str() == "12345"
    assert p.tell() == 5
    assert rec.stop().advance() is None


def test_stop_reports_nothing_remaining():
    p = StrParser("héllo")
    assert p.remaining() == 6
    stopped = p.stop()
    assert stopped.at_end()
    assert stopped.remaining() == 0
    assert stopped.consume_count() == 0
    assert p.remaining() == 6
