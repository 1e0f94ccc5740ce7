import string

import pytest

from minedenc.keymaps import get_keymap, keymap_names


def test_names_cover_all_tables():
    assert set(keymap_names()) == {
        "Bopomofo",
        "Esperanto",
        "Ethiopic",
        "Hebrew",
        "Kazakh_prefix",
    }


@pytest.mark.parametrize("name", ["Bopomofo", "Esperanto", "Ethiopic", "Hebrew", "Kazakh_prefix"])
def test_get_keymap_returns_named_table(name):
    keymap = get_keymap(name)
    assert keymap.name == name
    assert len(keymap) > 0
    assert all(key and value for key, value in keymap)


def test_unknown_keymap_raises():
    with pytest.raises(KeyError):
        get_keymap("Klingon")


def test_table_sizes():
    assert len(get_keymap("Bopomofo")) == 70
    assert len(get_keymap("Esperanto")) == 22
    assert len(get_keymap("Hebrew")) == 45


@pytest.mark.parametrize(
    "key, expected",
    [("b", "ㄅ"), ("zh", "ㄓ"), ("nn", "ㄯ"), ("bu", "ㆠ"), ("gh", "ㆸ"), ("ah", "ㆿ")],
)
def test_bopomofo_values(key, expected):
    assert get_keymap("Bopomofo").lookup(key) == expected


@pytest.mark.parametrize(
    "key, expected",
    [("cx", "ĉ"), ("vx", "ŭ"), ("Gx", "Ĝ"), ("SX", "Ŝ"), ("Sm", "₷")],
)
def test_esperanto_values(key, expected):
    assert get_keymap("Esperanto").lookup(key) == expected


def test_esperanto_case_variants_agree():
    keymap = get_keymap("Esperanto")
    for letter in "cgjhsuv":
        small = keymap.lookup(letter + "x")
        assert keymap.lookup(letter.upper() + "x") == small.upper()
        assert keymap.lookup(letter.upper() + "X") == small.upper()


def test_hebrew_point_sequences():
    keymap = get_keymap("Hebrew")
    assert keymap.lookup("A") == "א"
    assert keymap.lookup("a").startswith(keymap.lookup("A"))
    assert len(keymap.lookup("a")) == 2
    assert keymap.lookup("W").startswith(keymap.lookup("w"))
    assert keymap.lookup("q") == keymap.lookup("J") == keymap.lookup("Y")
    assert keymap.lookup("B") == keymap.lookup("V")


def test_kazakh_duplicate_key_first_wins():
    keymap = get_keymap("Kazakh_prefix")
    assert keymap.lookup("0") == "0"
    assert len(keymap.completions("0")) == 2


def test_kazakh_letter_cases_correspond():
    keymap = get_keymap("Kazakh_prefix")
    for letter in string.ascii_lowercase:
        assert keymap.lookup(letter.upper()).lower() == keymap.lookup(letter)


def test_kazakh_grave_prefix():
    keymap = get_keymap("Kazakh_prefix")
    assert keymap.is_prefix("`")
    assert keymap.lookup("`q") == "ұ"
    assert keymap.lookup("`Q").lower() == keymap.lookup("`q")
    assert keymap.lookup("`") is None


def test_ethiopic_is_shared():
    keymap = get_keymap("Ethiopic")
    assert keymap.lookup("he") == "ሀ"
    assert keymap.lookup("`10000") == "፼"