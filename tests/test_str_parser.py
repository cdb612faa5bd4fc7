import pytest

from byteparse.parsers import StrParser
from byteparse.scan import utf8
from byteparse.scan.cursor import Checkpoint
from byteparse.scan.errors import Utf8Error


def test_units_are_scalar_values():
    p = StrParser("aé€😀")
    assert [p.advance() for _ in range(4)] == ["a", "é", "€", "😀"]
    assert p.advance() is None
    assert p.tell() == 1 + 2 + 3 + 4


def test_every_position_is_a_boundary():
    text = "ça, señor → 東京"
    p = StrParser(text)
    while p.advance() is not None:
        assert utf8.is_boundary(p.data, p.tell())


def test_every_recorded_prefix_decodes():
    text = "héllo wörld"
    p = StrParser(text)
    rec = p.record()
    for i in range(len(text) + 1):
        assert rec.to_str() == text[:i]
        rec.advance()


def test_split_non_ascii():
    segs = StrParser("é,ü").split_on_byte(",").map_and_collect(
        lambda seg: seg.record().consume_to_str()
    )
    assert segs == ["é", "ü"]


def test_split_on_multibyte_delimiter():
    segs = StrParser("a€b€c").split_on_byte("€").map_and_collect(
        lambda seg: seg.record().consume_to_str()
    )
    assert segs == ["a", "b", "c"]


def test_invalid_bytes_rejected_at_construction():
    with pytest.raises(Utf8Error) as e:
        StrParser(b"ab\xff")
    assert e.value.offset == 2


def test_truncated_sequence_rejected():
    with pytest.raises(Utf8Error):
        StrParser(b"\xe2\x82")


def test_lone_surrogate_rejected():
    with pytest.raises(Utf8Error) as e:
        StrParser("a\ud800")
    assert e.value.offset == 1


def test_restore_inside_code_point():
    p = StrParser("é")
    with pytest.raises(Utf8Error):
        p.restore(Checkpoint(1))
    assert p.tell() == 0


def test_bounded_inside_code_point():
    p = StrParser("éa")
    with pytest.raises(Utf8Error):
        p.bounded(1, 3)
    assert p.bounded(2, 3).advance() == "a"


def test_from_bytes_and_path(tmp_path):
    assert StrParser("häh".encode()).record().consume_to_str() == "häh"

    f = tmp_path / "t.txt"
    f.write_text("zürich", encoding="utf-8")
    assert StrParser.from_path(f).record().consume_to_str() == "zürich"


def test_units_coerce_to_characters():
    p = StrParser("aé")
    assert p.next_if(ord("a")) == "a"
    assert p.next_if("é".encode()) == "é"
    with pytest.raises(ValueError):
        p.coerce_unit("ab")


def test_decode_scalar_errors():
    with pytest.raises(Utf8Error):
        utf8.decode_scalar(b"\x80", 0, 1)
    with pytest.raises(Utf8Error):
        utf8.decode_scalar(b"\xe2\x82\xac", 0, 2)
    with pytest.raises(Utf8Error):
        utf8.decode_scalar(b"\xed\xa0\x80", 0, 3)
    assert utf8.decode_scalar(b"\xe2\x82\xac", 0, 3) == ("€", 3)
