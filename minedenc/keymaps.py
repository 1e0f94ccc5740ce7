"""Built-in keyboard mapping tables, looked up by name."""

from __future__ import annotations

from typing import Iterator

from .keymap import ETHIOPIC, Keymap


def _bopomofo_entries() -> Iterator[tuple[str, str]]:
    runs = (
        (
            0x3105,
            (
                "b", "p", "m", "f", "d", "t", "n", "l", "g", "k", "h",
                "j", "q", "x", "zh", "ch", "sh", "r", "z", "c", "s",
                "a", "o", "e", "eh", "ai", "ei", "au", "ou", "an", "en",
                "ang", "eng", "er", "i", "u", "iu", "v", "ng", "gn", "ih",
                "o with dot above", "nn",
            ),
        ),
        (
            0x31A0,
            (
                "bu", "zi", "ji", "gu", "ee", "enn", "oo", "onn", "ir",
                "ann", "inn", "unn", "im", "ngg", "ainn", "aunn", "am",
                "om", "ong", "innn",
            ),
        ),
        (0x31B8, ("gh", "lh", "zy")),
        (0x31BC, ("gw", "kw", "oe", "ah")),
    )
    for base, keys in runs:
        for offset, key in enumerate(keys):
            yield key, chr(base + offset)


def _esperanto_entries() -> Iterator[tuple[str, str]]:
    letters = (
        ("c", "ĉ", "Ĉ"),
        ("g", "ĝ", "Ĝ"),
        ("j", "ĵ", "Ĵ"),
        ("h", "ĥ", "Ĥ"),
        ("s", "ŝ", "Ŝ"),
        ("u", "ŭ", "Ŭ"),
        ("v", "ŭ", "Ŭ"),
    )
    for letter, small, _ in letters:
        yield letter + "x", small
    for letter, _, capital in letters:
        yield letter.upper() + "x", capital
    for letter, _, capital in letters:
        yield letter.upper() + "X", capital
    yield "Sm", "\u20B7"


_ALEF = "\u05D0"
_BET = "\u05D1"
_KAF = "\u05DB"
_PE = "\u05E4"
_YOD = "\u05D9"
_VAV = "\u05D5"
_SHIN = "\u05E9"
_TAV = "\u05EA"
_DOUBLE_YOD = "\u05F2"
_PATAH = "\u05B7"
_QAMATS = "\u05B8"
_HIRIQ = "\u05B4"
_RAFE = "\u05BF"
_DAGESH = "\u05BC"
_SIN_DOT = "\u05C2"

_HEBREW = (
    ("a", _ALEF + _PATAH),
    ("A", _ALEF),
    ("B", _BET + _RAFE),
    ("b", _BET),
    ("c", "\u05E6"),
    ("C", "\u05E5"),
    ("d", "\u05D3"),
    ("e", "\u05E2"),
    ("E", _DOUBLE_YOD),
    ("f", _PE + _RAFE),
    ("F", "\u05E3"),
    ("g", "\u05D2"),
    ("h", "\u05D4"),
    ("H", "\u05D7"),
    ("i", _YOD),
    ("I", _YOD + _HIRIQ),
    ("j", _DOUBLE_YOD),
    ("J", _DOUBLE_YOD + _PATAH),
    ("k", "\u05E7"),
    ("K", _KAF + _DAGESH),
    ("l", "\u05DC"),
    ("m", "\u05DE"),
    ("M", "\u05DD"),
    ("n", "\u05E0"),
    ("N", "\u05DF"),
    ("o", _ALEF + _QAMATS),
    ("O", "\u05F1"),
    ("p", _PE + _DAGESH),
    ("q", _DOUBLE_YOD + _PATAH),
    ("r", "\u05E8"),
    ("s", "\u05E1"),
    ("S", _TAV),
    ("t", "\u05D8"),
    ("T", _TAV + _DAGESH),
    ("u", _VAV),
    ("U", _VAV + _DAGESH),
    ("v", "\u05F0"),
    ("V", _BET + _RAFE),
    ("w", _SHIN),
    ("W", _SHIN + _SIN_DOT),
    ("x", _KAF),
    ("X", "\u05DA"),
    ("y", _YOD),
    ("Y", _DOUBLE_YOD + _PATAH),
    ("z", "\u05D6"),
)

_KAZAKH_PREFIX = (
    ("!", "!"),
    ("@", '"'),
    ("#", "№"),
    ("$", ";"),
    ("%", "%"),
    ("^", ":"),
    ("&", "?"),
    ("*", "*"),
    ("(", "("),
    (")", ")"),
    ("_", "_"),
    ("+", "+"),
    ("Q", "Й"),
    ("`Q", "Ұ"),
    ("W", "Ц"),
    ("E", "У"),
    ("`E", "Ү"),
    ("R", "К"),
    ("`R", "Қ"),
    ("T", "Е"),
    ("`T", "Ё"),
    ("Y", "Н"),
    ("`Y", "Ң"),
    ("U", "Г"),
    ("`U", "Ғ"),
    ("I", "Ш"),
    ("O", "Щ"),
    ("P", "З"),
    ("{", "Х"),
    ("`{", "Һ"),
    ("A", "Ф"),
    ("S", "Ы"),
    ("D", "В"),
    ("F", "А"),
    ("`F", "Ә"),
    ("G", "П"),
    ("H", "Р"),
    ("J", "О"),
    ("`J", "Ө"),
    ("K", "Л"),
    ("L", "Д"),
    (":", "Ж"),
    ('"', "Э"),
    ("|", "/"),
    ("Z", "Я"),
    ("X", "Ч"),
    ("C", "С"),
    ("V", "М"),
    ("B", "И"),
    ("`B", "І"),
    ("N", "Т"),
    ("}", "Ъ"),
    ("M", "Ь"),
    ("<", "Б"),
    (">", "Ю"),
    ("?", ","),
    ("1", "1"),
    ("2", "2"),
    ("3", "3"),
    ("4", "4"),
    ("5", "5"),
    ("6", "6"),
    ("7", "7"),
    ("8", "8"),
    ("9", "9"),
    ("0", "0"),
    ("-", "-"),
    ("0", "="),
    ("q", "й"),
    ("`q", "ұ"),
    ("w", "ц"),
    ("e", "у"),
    ("`e", "ү"),
    ("r", "к"),
    ("`r", "қ"),
    ("t", "е"),
    ("`t", "ё"),
    ("y", "н"),
    ("`y", "ң"),
    ("u", "г"),
    ("`u", "ғ"),
    ("i", "ш"),
    ("o", "щ"),
    ("p", "з"),
    ("[", "х"),
    ("`[", "һ"),
    ("a", "ф"),
    ("s", "ы"),
    ("d", "в"),
    ("f", "а"),
    ("`f", "ә"),
    ("g", "п"),
    ("h", "р"),
    ("j", "о"),
    ("`j", "ө"),
    ("k", "л"),
    ("l", "д"),
    (";", "ж"),
    ("'", "э"),
    ("\\", "\\"),
    ("z", "я"),
    ("x", "ч"),
    ("c", "с"),
    ("v", "м"),
    ("b", "и"),
    ("`b", "і"),
    ("n", "т"),
    ("]", "ъ"),
    ("m", "ь"),
    (",", "б"),
    (".", "ю"),
    ("/", "."),
)

_KEYMAPS = {
    keymap.name: keymap
    for keymap in (
        Keymap("Bopomofo", tuple(_bopomofo_entries())),
        Keymap("Esperanto", tuple(_esperanto_entries())),
        ETHIOPIC,
        Keymap("Hebrew", _HEBREW),
        Keymap("Kazakh_prefix", _KAZAKH_PREFIX),
    )
}


def get_keymap(name: str) -> Keymap:
    """Return the built-in keymap called *name*.

    Raises KeyError if there is no keymap of that name.
    """
    try:
        return _KEYMAPS[name]
    except KeyError:
        raise KeyError(f"unknown keymap {name!r}") from None


def keymap_names() -> list[str]:
    """Return the names of all built-in keymaps."""
    return list(_KEYMAPS)