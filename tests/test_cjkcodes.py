import pytest

from minedenc.cjkcodes import (
    cjk_encode,
    gb_to_unicode,
    is_lead_byte,
    is_valid_cjk,
    unicode_to_gb,
)


def test_lead_bytes():
    assert is_lead_byte(0x81, "S")
    assert not is_lead_byte(0xB1, "S")
    assert not is_lead_byte(0xB1, "x")
    assert is_lead_byte(0xB1, "J")
    assert not is_lead_byte(0x41, "J")


@pytest.mark.parametrize(
    "code, tag, length",
    [
        (0x41, "J", 1),
        (0xA4A1, "J", 2),
        (0x8FA2AF, "J", 3),
        (0x8FA2AF, "X", 3),
        (0x8EA1A1A1, "C", 4),
        (0x81308130, "G", 4),
        (0x8140, "S", 2),
        (0xB1, "S", 1),
    ],
)
def test_encode_round_trip(code, tag, length):
    encoded = cjk_encode(code, tag)
    assert len(encoded) == length
    assert int.from_bytes(encoded, "big") == code


def test_encode_rejects_impossible_patterns():
    assert cjk_encode(0xA400, "J") == b""
    assert cjk_encode(0x8FA2AF, "G") == b""
    assert cjk_encode(0xB1, "J") == b""
    assert cjk_encode(0x00, "J") == b""


def test_ascii_always_valid():
    assert is_valid_cjk(0x41, "Z")
    assert is_valid_cjk(0x7F, "G")


@pytest.mark.parametrize(
    "code, tag",
    [
        (0x8140, "G"),
        (0x81308130, "G"),
        (0xA440, "B"),
        (0xA4A1, "C"),
        (0x8EA1A1A1, "C"),
        (0xA4A1, "J"),
        (0x8EB1, "J"),
        (0x8FA2AF, "X"),
        (0xB1, "S"),
        (0x8140, "S"),
        (0xE040, "x"),
        (0xB0A1, "K"),
        (0x8441, "H"),
    ],
)
def test_valid_patterns(code, tag):
    assert is_valid_cjk(code, tag)


@pytest.mark.parametrize(
    "code, tag",
    [
        (0x817F, "G"),
        (0xA47F, "B"),
        (0x8EB0A1A1, "C"),
        (0x8EE0, "J"),
        (0xA07F, "S"),
        (0xB05B, "K"),
        (0xDF41, "H"),
        (0xA4A1, "Z"),
    ],
)
def test_invalid_patterns(code, tag):
    assert not is_valid_cjk(code, tag)


def test_gb18030_known_points():
    assert gb_to_unicode(0x90308130) == 0x10000
    assert unicode_to_gb(0x10000) == 0x90308130
    assert unicode_to_gb(0x10FFFF) == 0xE3329A35


def test_gb18030_errors():
    with pytest.raises(ValueError):
        unicode_to_gb(0x200000)
    with pytest.raises(ValueError):
        unicode_to_gb(0xFFFF)
    with pytest.raises(ValueError):
        gb_to_unicode(0x90418130)
    with pytest.raises(ValueError):
        gb_to_unicode(0x90308030)
    with pytest.raises(ValueError):
        gb_to_unicode(0x81308130)