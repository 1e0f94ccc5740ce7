"""Selection of text and terminal encodings and conversions through them."""

from __future__ import annotations

import string
import unicodedata
from dataclasses import dataclass, field

from .charmaps import CharmapTable, charmap_tables
from .charprops import utf_encode
from .cjkcodes import cjk_encode

_SEPARATORS = str.maketrans("", "", "-_ ")
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

_NO_TABLE = CharmapTable("", "-", "??", ())

_CJK_MAX_VALUES = {
    "G": 0xFF39FF39,
    "C": 0x8EFFFFFF,
    "J": 0x8FFFFF,
    "X": 0x8FFFFF,
}

_CODEPAGE_ALIASES = {
    "CP819": "ISO-8859-1",
    "CP912": "ISO-8859-2",
    "CP913": "ISO-8859-3",
    "CP914": "ISO-8859-4",
    "CP915": "ISO-8859-5",
    "CP1089": "ISO-8859-6",
    "CP813": "ISO-8859-7",
    "CP916": "ISO-8859-8",
    "CP920": "ISO-8859-9",
    "CP919": "ISO-8859-10",
    "CP923": "ISO-8859-15",
    "CP28591": "ISO-8859-1",
    "CP28592": "ISO-8859-2",
    "CP28593": "ISO-8859-3",
    "CP28594": "ISO-8859-4",
    "CP28595": "ISO-8859-5",
    "CP28596": "ISO-8859-6",
    "CP28597": "ISO-8859-7",
    "CP28598": "ISO-8859-8",  # visual ordering
    "CP28599": "ISO-8859-9",
    "CP28603": "ISO-8859-13",
    "CP28605": "ISO-8859-15",
    "CP38598": "ISO-8859-8",  # logical ordering
    "CP20000": "CNS",
    "CP20127": "ASCII",
    "CP20866": "KOI8-R",
    "CP20936": "GB2312",
    "CP21866": "KOI8-U",
    "CP51949": "EUC-KR",
    "CP54936": "GB18030",
    "CP65001": "UTF-8",
    "CP932": "Shift-JIS",
    "CP936": "GBK",
    "CP949": "EUC-KR",
    "CP950": "Big5",
    "CP20932": "EUC-JP",
}


class UnknownEncodingError(LookupError):
    """Raised when a charmap name or tag names no known encoding."""


def _normalise(text: str) -> str:
    return text.translate(_SEPARATORS).translate(_ASCII_UPPER)


def match_prefix(s: str, m: str) -> bool:
    """Return True if *m* is an approximate prefix of *s*.

    '-', '_' and spaces are ignored, and ASCII letters match regardless of case.
    """
    return _normalise(s).startswith(_normalise(m))


def match_part(s: str, m: str) -> bool:
    """Return True if non-empty *m* approximately prefixes *s* or a part of it.

    A part is whatever follows a '/' or '>' separator in *s*.
    """
    if not m:
        return False
    candidates = [s]
    candidates.extend(s[pos + 1:] for pos, ch in enumerate(s) if ch in ">/")
    return any(match_prefix(candidate, m) for candidate in candidates)


def _is_combining(unichar: int | None) -> bool:
    if unichar is None or not 0 <= unichar <= 0x10FFFF:
        return False
    return unicodedata.category(chr(unichar)) in ("Mn", "Me")


@dataclass
class EncodingState:
    """The active text and terminal encodings and their conversion tables."""

    utf8_text: bool = False
    utf16_file: bool = False
    utf16_little_endian: bool = False
    cjk_text: bool = False
    mapped_text: bool = False
    ebcdic_text: bool = False
    ebcdic_file: bool = False
    combined_text: bool = False
    utf8_screen: bool = False
    utf8_input: bool = False
    cjk_term: bool = False
    mapped_term: bool = False
    ascii_screen: bool = False
    text_encoding_tag: str = "-"
    text_encoding_flag: str = "??"
    term_encoding_tag: str = "-"
    current_text_encoding: str = ""
    term_encoding: str = ""
    code_space: int | None = 0x20
    code_tab: int | None = 0x09
    code_lf: int | None = 0x0A
    code_nl: int | None = None
    _text_table: CharmapTable = field(default=_NO_TABLE, repr=False)
    _terminal_table: CharmapTable = field(default=_NO_TABLE, repr=False)

    # -- selection ---------------------------------------------------------

    def _setup_mapping(self, term: bool, table: CharmapTable) -> None:
        multi_byte = table.is_multi_byte()
        if term:
            self._terminal_table = table
            self.term_encoding_tag = table.tag
            self.cjk_term = multi_byte
            self.mapped_term = not multi_byte
            return
        self._text_table = table
        self.text_encoding_tag = table.tag
        self.text_encoding_flag = table.flag
        if multi_byte:
            self.cjk_text = True
            self.mapped_text = False
            self.combined_text = self.text_encoding_tag in ("G", "X", "x")
        else:
            self.mapped_text = True
            self.cjk_text = False
            self.combined_text = any(
                _is_combining(self.lookup_encoded_char(code)) for code in range(0x100)
            )

    def _set_char_encoding(self, term: bool, charmap: str | None, tag: str) -> bool:
        if term:
            self.ascii_screen = False
        if charmap is not None and not term:
            if charmap == ":16" or match_part("UTF-16BE", charmap):
                self._select_utf16(little_endian=False)
                return True
            if charmap == ":61" or match_part("UTF-16LE", charmap):
                self._select_utf16(little_endian=True)
                return True
            if charmap == ":??":
                self._text_table = _NO_TABLE
                self.text_encoding_tag = " "
                self.text_encoding_flag = "??"
                self.utf8_text = False
                self.utf16_file = False
                self.cjk_text = True
                self.mapped_text = False
                self.current_text_encoding = "[CJK]"
                return True

        if charmap.startswith("UTF-8") if charmap is not None else tag == "U":
            if term:
                self.utf8_screen = True
                self.utf8_input = True
                self.cjk_term = False
                self.mapped_term = False
                self.term_encoding = "UTF-8"
                self.term_encoding_tag = "U"
            else:
                self.utf8_text = True
                self.utf16_file = False
                self.cjk_text = False
                self.mapped_text = False
                self.current_text_encoding = "UTF-8"
                self.text_encoding_flag = "U8"
            return True

        if match_part("ISO 8859-1", charmap) if charmap is not None else tag == "L":
            if term:
                self.utf8_screen = False
                self.utf8_input = False
                self.cjk_term = False
                self.mapped_term = False
                self.term_encoding = "ISO 8859-1"
                self.term_encoding_tag = "L"
            else:
                self.utf8_text = False
                self.utf16_file = False
                self.cjk_text = False
                self.mapped_text = False
                self.current_text_encoding = "ISO 8859-1"
                self.text_encoding_flag = "L1"
            return True

        for table in charmap_tables():
            if charmap is None:
                found = table.tag == tag
            elif charmap.startswith(":"):
                found = charmap[1:] == table.flag
            else:
                found = match_part(table.name, charmap)
            if not found:
                continue
            if term:
                if table.name == "CP1047":
                    # EBCDIC terminals are not supported
                    return False
                self.utf8_screen = False
                self.utf8_input = False
                self.term_encoding = table.name
                if table.name == "ASCII":
                    self.ascii_screen = True
            else:
                self.utf8_text = False
                self.utf16_file = False
                self.current_text_encoding = table.name
            self._setup_mapping(term, table)
            return True
        return False

    def _select_utf16(self, little_endian: bool) -> None:
        self.utf8_text = True
        self.utf16_file = True
        self.utf16_little_endian = little_endian
        self.cjk_text = False
        self.mapped_text = False
        self.current_text_encoding = "UTF-16LE" if little_endian else "UTF-16BE"
        self.text_encoding_flag = "61" if little_endian else "16"

    def set_text_encoding(self, charmap: str | None, tag: str = "") -> None:
        """Select the text encoding by charmap name, or by *tag* if *charmap* is None.

        Raises UnknownEncodingError if nothing matches; the special
        character codes are recomputed either way.
        """
        found = self._set_char_encoding(False, charmap, tag)

        self.code_space = self.encoded_char(0x20)
        self.code_tab = self.encoded_char(0x09)
        self.code_lf = self.encoded_char(0x0A)
        self.code_nl = self.encoded_char(0x85)
        self.ebcdic_text = False
        if self.code_space == 0x20:
            self.ebcdic_file = False
        else:
            # transform rather than map
            self.ebcdic_file = True
            self.mapped_text = False

        if not found:
            raise UnknownEncodingError(f"unknown text encoding {charmap or tag!r}")

    def set_term_encoding(self, charmap: str | None, tag: str = "") -> None:
        """Select the terminal encoding by charmap name, or by *tag*.

        Generic codepage names ("CPnnn") are resolved through known aliases;
        if that fails the terminal falls back to ASCII and
        UnknownEncodingError is raised.
        """
        if charmap is not None and charmap.startswith("CP"):
            if self._set_char_encoding(True, charmap, tag):
                return
            alias = _CODEPAGE_ALIASES.get(charmap)
            if alias is not None and self._set_char_encoding(True, alias, tag):
                return
            self._set_char_encoding(True, "ASCII", " ")
            raise UnknownEncodingError(f"unknown terminal codepage {charmap!r}")

        if not self._set_char_encoding(True, charmap, tag):
            raise UnknownEncodingError(f"unknown terminal encoding {charmap or tag!r}")

    # -- indications -------------------------------------------------------

    def text_encoding_name(self) -> str:
        """Return the charmap name of the current text encoding."""
        if self.utf8_text:
            if self.utf16_file:
                return "UTF-16LE" if self.utf16_little_endian else "UTF-16BE"
            return "UTF-8"
        if not self.cjk_text and not self.mapped_text:
            return "CP1047" if self.ebcdic_file else "ISO 8859-1"
        return self.current_text_encoding

    def term_encoding_name(self) -> str:
        """Return the charmap name of the terminal encoding."""
        if self.utf8_screen:
            return "UTF-8"
        if not self.cjk_term and not self.mapped_term:
            return "ISO 8859-1"
        return self.term_encoding

    def has_combining(self) -> bool:
        """Return True if the text encoding has combining characters."""
        return self.utf8_text or ((self.mapped_text or self.cjk_text) and self.combined_text)

    def remapping_chars(self) -> bool:
        """Return True if text and terminal use different mapping tables."""
        return self._text_table is not self._terminal_table

    def max_char_value(self) -> int:
        """Return the largest character value of the text encoding."""
        if self.cjk_text:
            return _CJK_MAX_VALUES.get(self.text_encoding_tag, 0xFFFF)
        if self.utf8_text:
            return 0x7FFFFFFF
        return 0xFF

    # -- conversions -------------------------------------------------------

    def encoded_char(self, unichar: int) -> int | None:
        """Convert a Unicode value to the text encoding, or None if unmappable."""
        if self.cjk_text or self.mapped_text:
            return self._text_table.from_unicode(unichar)
        if self.utf8_text or unichar < 0x100:
            return unichar
        return None

    def lookup_encoded_char(self, code: int) -> int | None:
        """Convert a text-encoded character to Unicode, or None if unmapped."""
        if self.cjk_text or self.mapped_text:
            return self._text_table.to_unicode(code)
        if self.utf8_text or code < 0x100:
            return code
        return None

    def mapped_term_char(self, unichar: int) -> int | None:
        """Convert a Unicode value to the terminal encoding, or None."""
        return self._terminal_table.from_unicode(unichar)

    def lookup_mapped_term_char(self, code: int) -> int | None:
        """Convert a terminal-encoded character to Unicode, or None."""
        return self._terminal_table.to_unicode(code)

    def encode_char(self, c: int) -> bytes:
        """Return the byte sequence of character *c* in the text encoding."""
        if self.utf8_text:
            return utf_encode(c)
        if self.cjk_text:
            return cjk_encode(c, self.text_encoding_tag)
        return bytes((c & 0xFF,))

    def is_control(self, c: int) -> bool:
        """Return True if *c* is a control character in the text encoding."""
        if self.mapped_text:
            unichar = self.lookup_encoded_char(c)
            return unichar == 0x7F or (unichar is not None and unichar < 0x20)
        if self.utf8_text or self.cjk_text:
            return c == 0x7F or c < 0x20
        return c == 0x7F or (c & 0x7F) < 0x20