import pytest

from fractol.wordtab import find, find_unquoted, words


def test_find_locates_first_occurrence():
    text = "abc xyz abc"
    index = find(text, "abc", 100)
    assert index == 0
    later = find(text[1:], "abc", 100)
    assert text[1:][later : later + 3] == "abc"
    assert "abc" not in text[1:][: later + 2]


def test_find_missing_pattern():
    assert find("hello", "zz", 100) is None


def test_find_pattern_longer_than_limit():
    assert find("abcdef", "abc", 2) is None


def test_find_empty_pattern():
    assert find("abc", "", 5) == 0


def test_find_unquoted_skips_quoted_match():
    text = '"/*" x /*'
    index = find_unquoted(text, "/*", len(text))
    assert index == text.rindex("/*")


def test_find_unquoted_all_quoted():
    text = '"a /* b"'
    assert find_unquoted(text, "/*", len(text)) is None


def test_find_unquoted_respects_limit():
    assert find_unquoted("/*", "/*", 1) is None


def test_find_unquoted_unquoted_at_start():
    assert find_unquoted("/* x */", "/*", 10) == 0


def test_words_splits_on_spaces_and_tabs():
    assert words(" \tab  cd\t") == ["ab", "cd"]


def test_words_keeps_other_whitespace():
    assert words("a\nb c") == ["a\nb", "c"]


@pytest.mark.parametrize("text", ["", "   ", "\t\t"])
def test_words_empty(text):
    assert words(text) == []