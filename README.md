# minedenc

Character-set handling for a text editor: single-byte mapping tables,
CJK multi-byte character codes, text/terminal encoding selection and
keyboard input maps for non-Latin scripts.

## Installation

```
pip install minedenc
```

The package has no dependencies outside the standard library.

## Character properties

`minedenc.charprops` holds small Unicode helpers:

```python
from minedenc.charprops import is_whitespace, control_char, utf_encode

is_whitespace(0x3000)   # True: IDEOGRAPHIC SPACE
control_char(0x01)      # 0x41, i.e. ord("A") for caret notation ^A
control_char(0x7F)      # 0x3F, i.e. ord("?")
utf_encode(0x20AC)      # b'\xe2\x82\xac'
```

`utf_encode` uses the extended scheme of up to six bytes for values below
2**31 and raises `ValueError` outside that range.

Also available: `is_no_char` (true for `None` and the markers
`CHAR_UNKNOWN` / `CHAR_INVALID`), `is_opening_parenthesis` (Unicode
category Ps), `isolated_alef` and `ligature_lam_alef` (Arabic presentation
forms).

## CJK codes

`minedenc.cjkcodes` works on CJK characters kept as integers, with the
encoding selected by a one-letter tag: `'G'` GB/GBK/GB18030, `'B'` Big5,
`'C'` EUC-TW, `'J'`/`'X'` EUC-JP and EUC-JIS X 0213, `'S'`/`'x'`
Shift-JIS and Shift-JIS X 0213, `'K'` UHC, `'H'` Johab, `'i'` a two-byte
scheme with lead bytes 0xC0–0xCF.

```python
from minedenc.cjkcodes import cjk_encode, is_valid_cjk, gb_to_unicode, unicode_to_gb

cjk_encode(0xB0A1, "G")                 # b'\xb0\xa1'
is_valid_cjk(0xB0A1, "G")               # True
unicode_to_gb(0x10000)                  # 0x90308130
gb_to_unicode(unicode_to_gb(0x10000))   # 0x10000
```

`cjk_encode` returns `b""` when the code has no byte form in that encoding.
`is_valid_cjk` checks the byte pattern only, not whether a code is
assigned. `is_lead_byte` tells whether a byte starts a multi-byte
sequence. `gb_to_unicode` and `unicode_to_gb` raise `ValueError` outside
the algorithmic GB18030 range.

## Mapping tables

`minedenc.charmaps.charmap_tables()` returns the built-in `CharmapTable`
objects: MacArabic, EBCDIC CP1047, CP1125, CP1131 and CP1254. Each
converts in both directions and returns `None` for unmapped values:

```python
from minedenc.charmaps import charmap_tables

table = next(t for t in charmap_tables() if t.name == "CP1254")
table.to_unicode(0xD0)       # 0x011E
table.from_unicode(0x011E)   # 0xD0
table.is_multi_byte()        # False
```

ASCII codes left out of a table map to themselves; control characters
pass through `from_unicode` unchanged.

## Encoding state

`minedenc.encoding.EncodingState` keeps the current text and terminal
encodings of an editor session:

```python
from minedenc.encoding import EncodingState

state = EncodingState()
state.set_text_encoding("CP1254")
state.text_encoding_name()        # 'CP1254'
state.encoded_char(0x011E)        # 0xD0
state.lookup_encoded_char(0xD0)   # 0x011E
state.encode_char(0xD0)           # b'\xd0'

state.set_term_encoding("UTF-8")
state.term_encoding_name()        # 'UTF-8'
```

Text encodings may be given as `"UTF-8"`, `"UTF-16BE"`, `"UTF-16LE"`,
`"ISO 8859-1"`, a table name, or `":"` followed by a two-letter flag; with
`charmap=None` the one-letter `tag` selects instead. Names are matched
loosely by `match_prefix` and `match_part`: case, `-`, `_` and spaces are
ignored, and any part after `/` or `>` can match. An unknown name raises
`UnknownEncodingError`. `set_term_encoding` also resolves generic
`CPnnn` codepage aliases; EBCDIC is not accepted for the terminal.

The state further offers `mapped_term_char`, `lookup_mapped_term_char`,
`is_control`, `max_char_value`, `has_combining` and `remapping_chars`.

## Keyboard maps

`minedenc.keymaps` provides input maps for Bopomofo, Esperanto, Ethiopic,
Hebrew and Kazakh (prefix layout), as `minedenc.keymap.Keymap` objects:

```python
from minedenc.keymaps import get_keymap, keymap_names

keymap_names()   # ['Bopomofo', 'Esperanto', 'Ethiopic', 'Hebrew', 'Kazakh_prefix']
esperanto = get_keymap("Esperanto")
esperanto.lookup("cx")          # 'ĉ'
esperanto.is_prefix("c")        # True
esperanto.completions("c")      # [('cx', 'ĉ')]
```

When a key sequence occurs twice in a map, the first entry wins.
`get_keymap` raises `KeyError` for an unknown name.

## What it does not do

This is a library only: it has no command, no editor and no file
reading or writing. The built-in mapping tables cover only the five
single-byte character sets listed above; there are no CJK multi-byte
tables, so names such as GBK, Big5 or Shift-JIS are not recognised as
text encodings.