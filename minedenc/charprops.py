"""Character property predicates and simple character transformations."""

from __future__ import annotations

import unicodedata

CHAR_UNKNOWN = -2
"""Marker for a character whose value could not be determined."""

CHAR_INVALID = -1
"""Marker for a character that has no mapping."""

_WHITESPACE_SINGLES = frozenset({0x20, 0x09, 0xA0, 0x3000, 0x202F, 0x205F, 0xFEFF})

_ISOLATED_ALEF = {
    0x0622: 0xFE81,  # ALEF WITH MADDA ABOVE
    0x0623: 0xFE83,  # ALEF WITH HAMZA ABOVE
    0x0625: 0xFE87,  # ALEF WITH HAMZA BELOW
    0x0627: 0xFE8D,  # ALEF
}

_LAM_ALEF = {
    0x0622: 0xFEF5,
    0x0623: 0xFEF7,
    0x0625: 0xFEF9,
    0x0627: 0xFEFB,
}

# (upper bound exclusive, byte count) for the extended UTF-8 scheme
_UTF8_RANGES = (
    (0x80, 1),
    (0x800, 2),
    (0x10000, 3),
    (0x200000, 4),
    (0x4000000, 5),
    (0x80000000, 6),
)


def is_no_char(c: int | None) -> bool:
    """Return True if *c* is one of the 'no character' markers."""
    return c is None or c in (CHAR_UNKNOWN, CHAR_INVALID)


def is_whitespace(c: int) -> bool:
    """Return True for tab, space and the Unicode space characters."""
    return c in _WHITESPACE_SINGLES or 0x2002 <= c <= 0x200B


def is_opening_parenthesis(c: int) -> bool:
    """Return True if *c* has the Unicode general category Ps."""
    if not 0 <= c <= 0x10FFFF:
        return False
    return unicodedata.category(chr(c)) == "Ps"


def control_char(c: int) -> int:
    """Return the caret-notation display character for a control character."""
    if c == 0x7F:
        return ord("?")
    return c + ord("@")


def isolated_alef(c: int) -> int:
    """Return the isolated presentation form of an ALEF character."""
    return _ISOLATED_ALEF.get(c, 0xFE8D)


def ligature_lam_alef(c: int) -> int:
    """Return the isolated LAM-ALEF ligature for an ALEF character."""
    return _LAM_ALEF.get(c, 0xFEFB)


def utf_encode(c: int) -> bytes:
    """Encode *c* in UTF-8, using up to six bytes for values below 2**31.

    Raises ValueError for values outside that range.
    """
    if c < 0:
        raise ValueError(f"negative character value {c}")
    for limit, length in _UTF8_RANGES:
        if c < limit:
            break
    else:
        raise ValueError(f"character value {c:#x} too large for UTF-8")
    if length == 1:
        return bytes((c,))
    lead = ((0xFF << (8 - length)) & 0xFF) | (c >> (6 * (length - 1)))
    trail = (0x80 | ((c >> (6 * shift)) & 0x3F) for shift in reversed(range(length - 1)))
    return bytes((lead, *trail))