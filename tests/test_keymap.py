import pytest

from minedenc.keymap import ETHIOPIC, Keymap


@pytest.mark.parametrize(
    "key, expected",
    [
        ("he", "ሀ"),
        ("h", "ህ"),
        ("lWa", "ሏ"),
        ("`sWa", "ሧ"),
        ("qWe", "ቈ"),
        ("QW", "ቝ"),
        ("hWa", "ኋ"),
        ("e3", "ኧ"),
        ("I", "እ"),
        ("`I", "ዕ"),
        ("gWu", "጑"),
        ("KWE", "ዄ"),
        ("`So", "ፆ"),
        ("fYa", "ፚ"),
        ("\" \"", "፠"),
        (" : ", "፡"),
        (":|:", "፨"),
        ("<<", "«"),
        (">>", "»"),
        ("`1", "፩"),
        ("`9", "፱"),
        ("`10", "፲"),
        ("`90", "፺"),
        ("`100", "፻"),
        ("`10000", "፼"),
    ],
)
def test_ethiopic_lookup_matches_table(key, expected):
    assert ETHIOPIC.lookup(key) == expected


def test_lookup_missing_key_gives_none():
    assert ETHIOPIC.lookup("zz") is None
    assert "zz" not in ETHIOPIC


def test_ethiopic_keys_are_unique():
    entries = list(ETHIOPIC)
    keys = [key for key, _ in entries]
    assert len(keys) == len(set(keys))
    assert len(ETHIOPIC) == len(keys)
    for key, value in entries:
        assert ETHIOPIC.lookup(key) == value


def test_ethiopic_values_are_single_ethiopic_or_guillemets():
    for key, _ in ETHIOPIC:
        value = ETHIOPIC.lookup(key)
        assert len(value) == 1
        assert 0x1200 <= ord(value) <= 0x137F or value in "«»", key


def test_every_entry_is_reachable_by_lookup():
    for key, value in ETHIOPIC:
        assert ETHIOPIC.lookup(key) == value


def test_completions_follow_table_order():
    keys = [key for key, _ in ETHIOPIC.completions("qW")]
    assert keys == ["qWe", "qWi", "qWa", "qWE", "qW"]


def test_completions_all_share_prefix():
    result = ETHIOPIC.completions("`")
    assert result
    assert all(key.startswith("`") for key, _ in result)
    assert ("`10000", "፼") in result


def test_completions_of_unknown_prefix_is_empty():
    assert ETHIOPIC.completions("@") == []


def test_is_prefix():
    assert ETHIOPIC.is_prefix("h")
    assert ETHIOPIC.is_prefix("`1")
    assert ETHIOPIC.is_prefix(":")
    assert not ETHIOPIC.is_prefix("he")
    assert not ETHIOPIC.is_prefix("`10000")
    assert not ETHIOPIC.is_prefix("@")


def test_first_duplicate_wins():
    keymap = Keymap("test", (("0", "0"), ("a", "x"), ("0", "=")))
    assert keymap.lookup("0") == "0"
    assert len(keymap) == 3
    assert keymap.completions("0") == [("0", "0"), ("0", "=")]


def test_custom_keymap_iteration_keeps_order():
    entries = (("b", "β"), ("a", "α"), ("ab", "αβ"))
    keymap = Keymap("greek", entries)
    assert list(keymap) == list(entries)
    assert keymap.is_prefix("a")
    assert not keymap.is_prefix("b")
    assert keymap.lookup("ab") == "αβ"