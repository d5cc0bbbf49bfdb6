import pytest

from cubkit.text import find, find_unquoted, split_words


def test_split_on_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_keeps_newlines_inside_words():
    assert split_words("a b\n") == ["a", "b\n"]


def test_split_empty_and_blank():
    assert split_words("") == []
    assert split_words(" \t ") == []


def test_find_matches_first_occurrence():
    text = "abc hello world hello"
    assert find(text, "hello", len(text)) == text.index("hello")


def test_find_missing_needle():
    text = "abcdef"
    assert find(text, "xyz", len(text)) == -1


def test_find_needle_longer_than_limit():
    text = "hello world"
    assert find(text, "world", 4) == -1


def test_find_rejects_empty_needle():
    with pytest.raises(ValueError):
        find("abc", "", 3)


def test_find_unquoted_skips_quoted_text():
    text = '"/* inside */" /* outside */'
    assert find_unquoted(text, "/*", len(text)) == text.rindex("/*")


def test_find_unquoted_only_quoted_match():
    text = 'x "//" y'
    assert find_unquoted(text, "//", len(text)) == -1


def test_find_unquoted_without_quotes_behaves_like_find():
    text = "a // b // c"
    assert find_unquoted(text, "//", len(text)) == find(text, "//", len(text))