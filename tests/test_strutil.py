import pytest
from hypothesis import given
from hypothesis import strategies as st

from txbutil.strutil import (
    count_char,
    equal_string,
    greater_than_string,
    less_than_string,
    pos_char,
    split_string,
)


def test_split_on_spaces():
    assert split_string("this is a test string", " ") == [
        "this", "is", "a", "test", "string",
    ]


def test_split_on_several_separators():
    assert split_string("and, now, for, something! else?", " ,?") == [
        "and", "now", "for", "something!", "else",
    ]


def test_split_special_cases():
    assert split_string(None, " ") == []
    assert split_string("", " ") == [""]
    assert split_string("a b", "") == ["a b"]
    assert split_string("a b", None) == ["a b"]


def test_split_only_separators():
    assert split_string("  ,, ", " ,") == []


@given(st.text(alphabet="ab ,", max_size=40))
def test_split_pieces_have_no_separators(text):
    pieces = split_string(text, " ,")
    if text:
        for piece in pieces:
            assert piece
            assert " " not in piece and "," not in piece
        assert "".join(pieces) == text.replace(" ", "").replace(",", "")


@given(st.text(alphabet="xy ", min_size=1, max_size=40))
def test_split_matches_filtered_str_split(text):
    assert split_string(text, " ") == [t for t in text.split(" ") if t]


@pytest.mark.parametrize(
    "text, pos, c, expected",
    [
        ("asdf", 0, "s", 1),
        ("qwerty", 0, "s", -1),
        ("asdf", 2, "s", -1),
        ("this not that", 0, "t", 0),
        ("this not that", 1, "t", 7),
        ("this not that", 7, "t", 7),
        ("this not that", 8, "t", 9),
        ("this not that", 10, "t", 12),
        ("this not that", 12, "t", 12),
        ("", 0, "x", -1),
        ("asdf", 5, "f", -1),
        ("zxcvb", -3, "g", -1),
    ],
)
def test_pos_char(text, pos, c, expected):
    assert pos_char(text, pos, c) == expected


def test_pos_char_rejects_multi_character_needle():
    with pytest.raises(ValueError):
        pos_char("asdf", 0, "as")


@pytest.mark.parametrize(
    "text, c, expected",
    [
        ("asdfijkl", "a", 1),
        ("asdfijkl", "l", 1),
        ("asdfasdfasdf", "a", 3),
        ("asdfasdfasdf", "z", 0),
    ],
)
def test_count_char(text, c, expected):
    assert count_char(text, c) == expected


def test_count_char_rejects_empty_needle():
    with pytest.raises(ValueError):
        count_char("asdf", "")


def test_compare_strings():
    dup = "".join(["hel", "lo"])
    assert equal_string("hello", dup)
    assert not less_than_string("hello", dup)
    assert not greater_than_string("hello", dup)
    assert less_than_string("asdf", "f")
    assert not equal_string("asdf", "f")
    assert not greater_than_string("asdf", "f")
    assert greater_than_string("f", "asdf")


def test_compare_with_missing_strings():
    assert not equal_string(None, None)
    assert not equal_string("a", None)
    assert not less_than_string(None, "a")
    assert not greater_than_string("a", None)