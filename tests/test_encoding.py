import pytest

from minedenc.charmaps import charmap_tables
from minedenc.encoding import (
    EncodingState,
    UnknownEncodingError,
    match_part,
    match_prefix,
)


def _table(name):
    return next(t for t in charmap_tables() if t.name == name)


@pytest.mark.parametrize(
    "s, m, expected",
    [
        ("ISO 8859-1", "iso-8859", True),
        ("UTF-8", "utf8", True),
        ("CP1047", "CP1048", False),
        ("ab", "abc", False),
        ("UTF-16LE", "utf_16 le", True),
    ],
)
def test_match_prefix(s, m, expected):
    assert match_prefix(s, m) is expected


def test_match_part_after_separator():
    assert match_part("Big5 / HKSCS", "hkscs")
    assert match_part("A>B-C", "bc")
    assert not match_part("Big5/HKSCS", "GBK")


def test_match_part_empty_never_matches():
    assert match_part("anything", "") is False


def test_default_state():
    state = EncodingState()
    assert state.text_encoding_name() == "ISO 8859-1"
    assert state.term_encoding_name() == "ISO 8859-1"
    assert state.max_char_value() == 0xFF
    assert state.remapping_chars() is False
    assert state.encoded_char(0x100) is None


def test_utf8_text():
    state = EncodingState()
    state.set_text_encoding("UTF-8")
    assert state.text_encoding_name() == "UTF-8"
    assert state.max_char_value() == 0x7FFFFFFF
    assert state.has_combining()
    assert state.encode_char(0xE9) == "\u00e9".encode("utf-8")


def test_utf8_by_tag():
    state = EncodingState()
    state.set_text_encoding(None, "U")
    assert state.text_encoding_name() == "UTF-8"


@pytest.mark.parametrize(
    "charmap, name",
    [(":16", "UTF-16BE"), (":61", "UTF-16LE"), ("utf-16le", "UTF-16LE")],
)
def test_utf16_selection(charmap, name):
    state = EncodingState()
    state.set_text_encoding(charmap)
    assert state.utf16_file
    assert state.text_encoding_name() == name


def test_cp1254_round_trip():
    state = EncodingState()
    state.set_text_encoding("CP1254")
    assert state.mapped_text
    assert state.text_encoding_name() == "CP1254"
    assert state.encoded_char(0x011E) == 0xD0
    for code, unichar in _table("CP1254").entries:
        assert state.lookup_encoded_char(code) == unichar
        assert state.encoded_char(unichar) == code
    assert state.remapping_chars()
    assert not state.has_combining()


def test_select_by_flag():
    table = _table("CP1125")
    state = EncodingState()
    state.set_text_encoding(":" + table.flag)
    assert state.text_encoding_name() == table.name
    assert state.text_encoding_flag == table.flag


def test_arabic_has_combining():
    state = EncodingState()
    state.set_text_encoding("MacArabic")
    assert state.has_combining()


def test_cp1047_becomes_ebcdic_file():
    state = EncodingState()
    state.set_text_encoding("CP1047")
    assert state.code_space == 0x40
    assert state.ebcdic_file
    assert not state.mapped_text
    assert state.text_encoding_name() == "CP1047"


def test_unknown_text_encoding_raises():
    state = EncodingState()
    with pytest.raises(UnknownEncodingError):
        state.set_text_encoding("no such charmap")


def test_cjk_placeholder():
    state = EncodingState()
    state.set_text_encoding(":??")
    assert state.cjk_text
    assert state.text_encoding_name() == "[CJK]"
    assert state.max_char_value() == 0xFFFF
    assert state.encode_char(ord("A")) == b"A"


def test_term_codepage_alias_iso():
    state = EncodingState()
    state.set_term_encoding("CP28591")
    assert state.term_encoding_name() == "ISO 8859-1"


def test_term_codepage_alias_utf8():
    state = EncodingState()
    state.set_term_encoding("CP65001")
    assert state.term_encoding_name() == "UTF-8"
    assert state.utf8_input


def test_term_rejects_ebcdic():
    state = EncodingState()
    with pytest.raises(UnknownEncodingError):
        state.set_term_encoding("CP1047")


def test_term_unknown_codepage_raises():
    state = EncodingState()
    with pytest.raises(UnknownEncodingError):
        state.set_term_encoding("CP9999")


def test_term_mapping_round_trip():
    state = EncodingState()
    state.set_term_encoding("CP1125")
    assert state.mapped_term
    assert state.term_encoding_name() == "CP1125"
    for code, unichar in _table("CP1125").entries:
        assert state.mapped_term_char(unichar) == code
        assert state.lookup_mapped_term_char(code) == unichar
    assert state.remapping_chars()


def test_is_control_latin1_and_mapped():
    state = EncodingState()
    assert state.is_control(0x81)
    assert state.is_control(0x7F)
    assert not state.is_control(ord("A"))
    state.set_text_encoding("CP1254")
    assert not state.is_control(0x81)
    assert state.is_control(0x7F)
    assert state.is_control(0x0A)


def test_is_control_utf8():
    state = EncodingState()
    state.set_text_encoding("UTF-8")
    assert not state.is_control(0x81)
    assert state.is_control(0x1B)