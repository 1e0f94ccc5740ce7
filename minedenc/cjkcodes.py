"""Byte-level handling of CJK multi-byte character codes.

Encodings are identified by a one-letter tag:
G (GB/GBK/GB18030), B (Big5), C (CNS/EUC-TW), J (EUC-JP),
X (EUC-JIS X 0213), S (Shift-JIS), x (Shift-JIS X 0213),
K (UHC), H (Johab), i (ISCII-like two-byte scheme).
"""

from __future__ import annotations

_DIGIT_LOW = ord("0")
_DIGIT_HIGH = ord("9")


def _is_digit(byte: int) -> bool:
    return _DIGIT_LOW <= byte <= _DIGIT_HIGH


def is_lead_byte(byte: int, tag: str) -> bool:
    """Return True if *byte* starts a multi-byte sequence in encoding *tag*.

    Bytes from 0x80 up qualify, except Shift-JIS half-width katakana.
    """
    byte &= 0xFF
    if byte < 0x80:
        return False
    return tag not in ("S", "x") or not 0xA1 <= byte <= 0xDF


def cjk_encode(code: int, tag: str) -> bytes:
    """Return the byte sequence of CJK character *code* in encoding *tag*.

    An empty result means the code has no byte form in that encoding.
    """
    length = 0
    if code >= 0x1000000:
        second = (code >> 16) & 0xFF
        if tag == "G" and code >= 0x80000000 and _is_digit(second):
            length = 4
        elif tag == "C" and (code >> 24) == 0x8E:
            length = 4
    elif code >= 0x10000:
        if tag in ("J", "X") and (code >> 16) == 0x8F:
            length = 3
    elif code >= 0x8000 and (code & 0xFF) > 0 and is_lead_byte(code >> 8, tag):
        length = 2
    elif 0 <= code < 0x100 and not is_lead_byte(code, tag):
        length = 1

    if length == 0:
        return b""
    encoded = (code & ((1 << (8 * length)) - 1)).to_bytes(length, "big")
    if 0 in encoded:
        return b""
    return encoded


def is_valid_cjk(code: int, tag: str) -> bool:
    """Check that *code* follows the byte pattern of encoding *tag*.

    This checks the structure only, not whether the code is assigned.
    """
    if code < 0x80:
        return True

    b = cjk_encode(code, tag).ljust(5, b"\0")

    if tag == "G":
        if code > 0xFFFF:
            return (
                0x81 <= b[0] <= 0xFE
                and _is_digit(b[1])
                and 0x81 <= b[2] <= 0xFE
                and _is_digit(b[3])
            )
        return 0x81 <= b[0] <= 0xFE and 0x40 <= b[1] <= 0xFE and b[1] != 0x7F
    if tag == "B":
        return (
            0x87 <= b[0] <= 0xFE
            and (0x40 <= b[1] <= 0x7E or 0xA1 <= b[1] <= 0xFE)
            and b[2] == 0
        )
    if tag == "C":
        return (0xA1 <= b[0] <= 0xFE and 0xA1 <= b[1] <= 0xFE and b[2] == 0) or (
            b[0] == 0x8E
            and 0xA1 <= b[1] <= 0xAF
            and 0xA1 <= b[2] <= 0xFE
            and 0xA1 <= b[3] <= 0xFE
        )
    if tag in ("J", "X"):
        return (
            (0xA1 <= b[0] <= 0xFE and 0xA1 <= b[1] <= 0xFE and b[2] == 0)
            or (b[0] == 0x8E and 0xA1 <= b[1] <= 0xDF and b[2] == 0)
            or (
                b[0] == 0x8F
                and 0xA1 <= b[1] <= 0xFE
                and 0xA1 <= b[2] <= 0xFE
                and b[3] == 0
            )
        )
    if tag in ("S", "x"):
        return 0xA1 <= code <= 0xDF or (
            0x40 <= b[1] <= 0xFC
            and b[1] != 0x7F
            and b[2] == 0
            and (0x81 <= b[0] <= 0x9F or 0xE0 <= b[0] <= 0xFC)
        )
    if tag == "K":
        return (
            0x81 <= b[0] <= 0xFE
            and (0x41 <= b[1] <= 0x5A or 0x61 <= b[1] <= 0x7A or 0x81 <= b[1] <= 0xFE)
            and b[2] == 0
        )
    if tag == "H":
        return (
            (0x84 <= b[0] <= 0xDE or 0xE0 <= b[0] <= 0xF9)
            and (0x31 <= b[1] <= 0x7E or 0x81 <= b[1] <= 0xFE)
            and b[2] == 0
        )
    if tag == "i":
        if (b[0] & 0xF0) == 0xC0:
            return 0 < b[1] < 0x80 and b[2] == 0
        return b[1] == 0
    return False


def gb_to_unicode(code: int) -> int:
    """Convert a four-byte GB18030 code from the algorithmic range to Unicode.

    Raises ValueError if *code* is not in that range.
    """
    byte1 = (code >> 24) & 0xFF
    byte2 = (code >> 16) & 0xFF
    byte3 = (code >> 8) & 0xFF
    byte4 = code & 0xFF
    if byte1 < 0x90 or not _is_digit(byte2) or byte3 < 0x81 or not _is_digit(byte4):
        raise ValueError(f"not an algorithmic GB18030 code: {code:#x}")
    return (
        (((byte1 - 0x90) * 10 + (byte2 - 0x30)) * 126 + (byte3 - 0x81)) * 10
        + (byte4 - 0x30)
        + 0x10000
    )


def unicode_to_gb(code: int) -> int:
    """Convert a supplementary-plane Unicode value to a four-byte GB18030 code.

    Raises ValueError for values outside U+10000 .. U+1FFFFF.
    """
    if not 0x10000 <= code < 0x200000:
        raise ValueError(f"no algorithmic GB18030 form for {code:#x}")
    rest = code - 0x10000
    rest, d = divmod(rest, 10)
    rest, c = divmod(rest, 126)
    a, b = divmod(rest, 10)
    return ((0x90 + a) << 24) | ((0x30 + b) << 16) | ((0x81 + c) << 8) | (0x30 + d)