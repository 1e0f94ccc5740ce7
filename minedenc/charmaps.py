"""Single-byte character set mapping tables and lookups to and from Unicode.

A table maps encoded character codes to Unicode values. Unicode values
with bit 0x800000 set stand for a pair of characters: the low 16 bits
hold the base character and bits 16..22 select its accent from
UNI2_ACCENTS. A looked-up pair comes back as
``0x80000000 | accent << 16 | base``.
"""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .cjkcodes import gb_to_unicode, unicode_to_gb

UNI2_ACCENTS = (0x309A, 0x0300, 0x0301, 0x02E5, 0x02E9, 0x0304, 0x030C)
"""Second characters (mostly accents) of two-character mappings."""

UNI2_TAG_SHIFT = 16
"""Bit position of the accent selector in a raw table value."""

_PAIR_FLAG = 0x800000


@dataclass(frozen=True)
class CharmapTable:
    """A character set given as (code, Unicode) pairs.

    *name* is the charmap name, *tag* the one-letter encoding tag and
    *flag* the two-letter indication shown to the user.
    """

    name: str
    tag: str
    flag: str
    entries: tuple[tuple[int, int], ...]
    _codes: list[int] = field(init=False, repr=False, compare=False)
    _values: list[int] = field(init=False, repr=False, compare=False)
    _reverse: dict[int, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        ordered = tuple(sorted(self.entries, key=lambda entry: entry[0]))
        reverse: dict[int, int] = {}
        # The first entry for a Unicode value wins, as in an upward scan.
        for code, unichar in self.entries:
            reverse.setdefault(unichar, code)
        object.__setattr__(self, "entries", ordered)
        object.__setattr__(self, "_codes", [code for code, _ in ordered])
        object.__setattr__(self, "_values", [unichar for _, unichar in ordered])
        object.__setattr__(self, "_reverse", reverse)

    def _table_lookup(self, code: int) -> int | None:
        index = bisect_left(self._codes, code)
        if index == len(self._codes) or self._codes[index] != code:
            return None
        raw = self._values[index]
        if raw & _PAIR_FLAG:
            accent = UNI2_ACCENTS[(raw >> UNI2_TAG_SHIFT) & 0x7F]
            return 0x80000000 | (accent << 16) | (raw & 0xFFFF)
        return raw

    def to_unicode(self, code: int) -> int | None:
        """Return the Unicode value of encoded *code*, or None if unmapped.

        Codes in the ASCII range that the table leaves out map to themselves.
        """
        if self.tag == "G" and code >= 0x90000000:
            try:
                return gb_to_unicode(code)
            except ValueError:
                return None
        unichar = self._table_lookup(code)
        if unichar is not None:
            return unichar
        if 0 <= code < 0x80:
            return code
        return None

    def from_unicode(self, unichar: int) -> int | None:
        """Return the encoded code of *unichar*, or None if it has none.

        Control characters pass through unchanged; ASCII characters do too
        unless the table gives their code to another character.
        """
        if unichar < 0:
            return None
        if self.tag == "G" and unichar >= 0x10000:
            try:
                return unicode_to_gb(unichar)
            except ValueError:
                return None
        code = self._reverse.get(unichar)
        if code is not None:
            return code
        if unichar < 0x20:
            return unichar
        if unichar < 0x80:
            return unichar if self.to_unicode(unichar) == unichar else None
        return None

    def is_multi_byte(self) -> bool:
        """Return True if any code of the table needs more than one byte."""
        return any(code > 0xFF for code in self._codes)


def _seq(start: int, values: Iterable[int]) -> Iterator[tuple[int, int]]:
    return ((start + offset, value) for offset, value in enumerate(values))


def _run(start: int, first_unichar: int, count: int) -> Iterator[tuple[int, int]]:
    return ((start + offset, first_unichar + offset) for offset in range(count))


def _pairs(*chunks: Iterable[tuple[int, int]]) -> tuple[tuple[int, int], ...]:
    return tuple(pair for chunk in chunks for pair in chunk)


_ARABIC = _pairs(
    _seq(0x80, (
        0x00C4, 0x00A0, 0x00C7, 0x00C9, 0x00D1, 0x00D6, 0x00DC, 0x00E1,
        0x00E0, 0x00E2, 0x00E4, 0x06BA, 0x00AB, 0x00E7, 0x00E9, 0x00E8,
        0x00EA, 0x00EB, 0x00ED, 0x2026, 0x00EE, 0x00EF, 0x00F1, 0x00F3,
        0x00BB, 0x00F4, 0x00F6, 0x00F7, 0x00FA, 0x00F9, 0x00FB, 0x00FC,
    )),
    [(0xA5, 0x066A), (0xAC, 0x060C)],
    _run(0xB0, 0x0660, 10),
    [(0xBB, 0x061B), (0xBF, 0x061F), (0xC0, 0x066D)],
    _run(0xC1, 0x0621, 26),
    _run(0xE0, 0x0640, 19),
    _seq(0xF3, (0x067E, 0x0679, 0x0686, 0x06D5, 0x06A4, 0x06AF, 0x0688, 0x0691)),
    [(0xFE, 0x0698), (0xFF, 0x06D2)],
)

_CP1047 = _pairs(
    _seq(0x00, (
        0x0000, 0x0001, 0x0002, 0x0003, 0x0153, 0x0009, 0x2020, 0x007F,
        0x2014, 0x008D, 0x017D, 0x000B, 0x000C, 0x000D, 0x000E, 0x000F,
        0x0010, 0x0011, 0x0012, 0x0013, 0x009D, 0x0085, 0x0008, 0x2021,
        0x0018, 0x0019, 0x2019, 0x008F, 0x001C, 0x001D, 0x001E, 0x001F,
        0x20AC, 0x0081, 0x201A, 0x0192, 0x201E, 0x2026, 0x0017, 0x001B,
        0x02C6, 0x2030, 0x0160, 0x2039, 0x0152, 0x0005, 0x0006, 0x0007,
        0x0090, 0x2018, 0x0016, 0x201C, 0x201D, 0x2022, 0x2013, 0x0004,
        0x02DC, 0x2122, 0x0161, 0x203A, 0x0014, 0x0015, 0x017E, 0x001A,
        0x0020, 0x00A0, 0x00E2, 0x00E4, 0x00E0, 0x00E1, 0x00E3, 0x00E5,
        0x00E7, 0x00F1, 0x00A2, 0x002E, 0x003C, 0x0028, 0x002B, 0x007C,
        0x0026, 0x00E9, 0x00EA, 0x00EB, 0x00E8, 0x00ED, 0x00EE, 0x00EF,
        0x00EC, 0x00DF, 0x0021, 0x0024, 0x002A, 0x0029, 0x003B, 0x005E,
        0x002D, 0x002F, 0x00C2, 0x00C4, 0x00C0, 0x00C1, 0x00C3, 0x00C5,
        0x00C7, 0x00D1, 0x00A6, 0x002C, 0x0025, 0x005F, 0x003E, 0x003F,
        0x00F8, 0x00C9, 0x00CA, 0x00CB, 0x00C8, 0x00CD, 0x00CE, 0x00CF,
        0x00CC, 0x0060, 0x003A, 0x0023, 0x0040, 0x0027, 0x003D, 0x0022,
        0x00D8, 0x0061, 0x0062, 0x0063, 0x0064, 0x0065, 0x0066, 0x0067,
        0x0068, 0x0069, 0x00AB, 0x00BB, 0x00F0, 0x00FD, 0x00FE, 0x00B1,
        0x00B0, 0x006A, 0x006B, 0x006C, 0x006D, 0x006E, 0x006F, 0x0070,
        0x0071, 0x0072, 0x00AA, 0x00BA, 0x00E6, 0x00B8, 0x00C6, 0x00A4,
        0x00B5, 0x007E, 0x0073, 0x0074, 0x0075, 0x0076, 0x0077, 0x0078,
        0x0079, 0x007A, 0x00A1, 0x00BF, 0x00D0, 0x005B, 0x00DE, 0x00AE,
        0x00AC, 0x00A3, 0x00A5, 0x00B7, 0x00A9, 0x00A7, 0x00B6, 0x00BC,
        0x00BD, 0x00BE, 0x00DD, 0x00A8, 0x00AF, 0x005D, 0x00B4, 0x00D7,
        0x007B, 0x0041, 0x0042, 0x0043, 0x0044, 0x0045, 0x0046, 0x0047,
        0x0048, 0x0049, 0x00AD, 0x00F4, 0x00F6, 0x00F2, 0x00F3, 0x00F5,
        0x007D, 0x004A, 0x004B, 0x004C, 0x004D, 0x004E, 0x004F, 0x0050,
        0x0051, 0x0052, 0x00B9, 0x00FB, 0x00FC, 0x00F9, 0x00FA, 0x00FF,
        0x005C, 0x00F7, 0x0053, 0x0054, 0x0055, 0x0056, 0x0057, 0x0058,
        0x0059, 0x005A, 0x00B2, 0x00D4, 0x00D6, 0x00D2, 0x00D3, 0x00D5,
    )),
    _run(0xF0, 0x0030, 10),
    _seq(0xFA, (0x00B3, 0x00DB, 0x00DC, 0x00D9, 0x00DA, 0x0178)),
)

_PC_BOX_DRAWING = (
    0x2591, 0x2592, 0x2593, 0x2502, 0x2524, 0x2561, 0x2562, 0x2556,
    0x2555, 0x2563, 0x2551, 0x2557, 0x255D, 0x255C, 0x255B, 0x2510,
    0x2514, 0x2534, 0x252C, 0x251C, 0x2500, 0x253C, 0x255E, 0x255F,
    0x255A, 0x2554, 0x2569, 0x2566, 0x2560, 0x2550, 0x256C, 0x2567,
    0x2568, 0x2564, 0x2565, 0x2559, 0x2558, 0x2552, 0x2553, 0x256B,
    0x256A, 0x2518, 0x250C, 0x2588, 0x2584, 0x258C, 0x2590, 0x2580,
)


def _pc_cyrillic(tail: tuple[int, ...]) -> tuple[tuple[int, int], ...]:
    return _pairs(
        _run(0x80, 0x0410, 48),
        _seq(0xB0, _PC_BOX_DRAWING),
        _run(0xE0, 0x0440, 16),
        _seq(0xF0, tail),
    )


_CP1125 = _pc_cyrillic((
    0x0401, 0x0451, 0x0490, 0x0491, 0x0404, 0x0454, 0x0406, 0x0456,
    0x0407, 0x0457, 0x00B7, 0x221A, 0x2116, 0x00A4, 0x25A0, 0x00A0,
))

_CP1131 = _pc_cyrillic((
    0x0401, 0x0451, 0x0404, 0x0454, 0x0407, 0x0457, 0x040E, 0x045E,
    0x0406, 0x0456, 0x00B7, 0x00A4, 0x0490, 0x0491, 0x2219, 0x00A0,
))

_CP1254_TURKISH = {
    0xD0: 0x011E, 0xDD: 0x0130, 0xDE: 0x015E,
    0xF0: 0x011F, 0xFD: 0x0131, 0xFE: 0x015F,
}

_CP1254 = _pairs(
    [(0x80, 0x20AC)],
    _seq(0x82, (
        0x201A, 0x0192, 0x201E, 0x2026, 0x2020, 0x2021, 0x02C6, 0x2030,
        0x0160, 0x2039, 0x0152,
    )),
    _seq(0x91, (
        0x2018, 0x2019, 0x201C, 0x201D, 0x2022, 0x2013, 0x2014, 0x02DC,
        0x2122, 0x0161, 0x203A, 0x0153,
    )),
    [(0x9F, 0x0178)],
    ((code, _CP1254_TURKISH.get(code, code)) for code in range(0xA0, 0x100)),
)

_TABLES = (
    CharmapTable("MacArabic", "a", "MA", _ARABIC),
    CharmapTable("CP1047", "e", "EB", _CP1047),
    CharmapTable("CP1125", "k", "UK", _CP1125),
    CharmapTable("CP1131", "y", "BY", _CP1131),
    CharmapTable("CP1254", "t", "TR", _CP1254),
)


def charmap_tables() -> tuple[CharmapTable, ...]:
    """Return all built-in mapping tables."""
    return _TABLES