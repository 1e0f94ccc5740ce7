"""Keyboard mapping tables: typed key sequences that stand for characters.

A keymap is an ordered list of (key sequence, replacement text) pairs.
When a key sequence occurs more than once, the first entry wins.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator


@dataclass(frozen=True)
class Keymap:
    """An ordered keyboard mapping table named *name*."""

    name: str
    entries: tuple[tuple[str, str], ...]
    _lookup: dict[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        entries = tuple(self.entries)
        mapping: dict[str, str] = {}
        for key, value in entries:
            mapping.setdefault(key, value)
        object.__setattr__(self, "entries", entries)
        object.__setattr__(self, "_lookup", mapping)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self._lookup

    def lookup(self, key: str) -> str | None:
        """Return the text mapped to *key*, or None if it has no mapping."""
        return self._lookup.get(key)

    def completions(self, prefix: str) -> list[tuple[str, str]]:
        """Return the entries whose key starts with *prefix*, in table order."""
        return [(key, value) for key, value in self.entries if key.startswith(prefix)]

    def is_prefix(self, prefix: str) -> bool:
        """Return True if *prefix* is a proper prefix of some key.

        That is, typing more keys after *prefix* may still reach a mapping.
        """
        return any(key != prefix and key.startswith(prefix) for key, _ in self.entries)


_VOWELS = ("e", "u", "i", "a", "E", "", "o")
_GLOTTAL_VOWELS = ("e", "u", "i", "a", "E", "I", "o")
_LABIALISED = (("We", 0), ("Wi", 2), ("Wa", 3), ("WE", 4), ("W", 5))
_LABIALISED_WITH_WU = (("We", 0), ("Wu", 1), ("Wi", 2), ("Wa", 3), ("WE", 4), ("W", 5))


def _series(
    prefix: str, base: int, vowels: Iterable[str] = _VOWELS, wa: bool = True
) -> Iterator[tuple[str, str]]:
    for offset, vowel in enumerate(vowels):
        yield prefix + vowel, chr(base + offset)
    if wa:
        yield prefix + "Wa", chr(base + 7)


def _labialised(
    prefix: str, base: int, forms: Iterable[tuple[str, int]] = _LABIALISED
) -> Iterator[tuple[str, str]]:
    for suffix, offset in forms:
        yield prefix + suffix, chr(base + offset)


def _ethiopic_entries() -> Iterator[tuple[str, str]]:
    yield from _series("h", 0x1200, wa=False)
    yield from _series("l", 0x1208)
    yield from _series("H", 0x1210)
    yield from _series("m", 0x1218)
    yield from _series("`s", 0x1220)
    yield from _series("r", 0x1228)
    yield from _series("s", 0x1230)
    yield from _series("x", 0x1238)
    yield from _series("q", 0x1240, wa=False)
    yield from _labialised("q", 0x1248)
    yield from _series("Q", 0x1250, wa=False)
    yield from _labialised("Q", 0x1258)
    yield from _series("b", 0x1260)
    yield from _series("v", 0x1268)
    yield from _series("t", 0x1270)
    yield from _series("c", 0x1278)
    yield from _series("`h", 0x1280, wa=False)
    yield from _labialised("h", 0x1288)
    yield from _series("n", 0x1290)
    yield from _series("N", 0x1298)
    yield from _series("", 0x12A0, _GLOTTAL_VOWELS, wa=False)
    yield "e3", chr(0x12A7)
    yield from _series("k", 0x12A8, wa=False)
    yield from _labialised("k", 0x12B0)
    yield from _series("K", 0x12B8, wa=False)
    yield from _labialised("K", 0x12C0)
    yield from _series("w", 0x12C8, wa=False)
    yield from _series("`", 0x12D0, _GLOTTAL_VOWELS, wa=False)
    yield from _series("z", 0x12D8)
    yield from _series("Z", 0x12E0)
    yield from _series("y", 0x12E8, wa=False)
    yield from _series("d", 0x12F0)
    yield from _series("D", 0x12F8)
    yield from _series("j", 0x1300)
    yield from _series("g", 0x1308, wa=False)
    yield from _labialised("g", 0x1310, _LABIALISED_WITH_WU)
    yield from _series("G", 0x1318, wa=False)
    yield from _series("T", 0x1320)
    yield from _series("C", 0x1328)
    yield from _series("P", 0x1330)
    yield from _series("S", 0x1338)
    yield from _series("`S", 0x1340, wa=False)
    yield from _series("f", 0x1348)
    yield from _series("p", 0x1350)
    yield "rYa", chr(0x1358)
    yield "mYa", chr(0x1359)
    yield "fYa", chr(0x135A)
    punctuation = ('" "', " : ", "::", ",", ";", "-:", ":-", "`?", ":|:")
    for offset, key in enumerate(punctuation):
        yield key, chr(0x1360 + offset)
    yield "<<", "\u00AB"
    yield ">>", "\u00BB"
    for offset, number in enumerate(range(1, 10)):
        yield f"`{number}", chr(0x1369 + offset)
    for offset, number in enumerate(range(10, 100, 10)):
        yield f"`{number}", chr(0x1372 + offset)
    yield "`100", chr(0x137B)
    yield "`10000", chr(0x137C)


ETHIOPIC = Keymap("Ethiopic", tuple(_ethiopic_entries()))
"""Ethiopic syllable input by transliteration."""