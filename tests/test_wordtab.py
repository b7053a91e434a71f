import pytest

from solong.wordtab import find_substring, find_unquoted, split_words


def test_split_words_spaces_and_tabs():
    assert split_words("  16 7\t2  1 ") == ["16", "7", "2", "1"]


def test_split_words_keeps_other_whitespace():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_split_words_join_round_trip():
    words = ["alpha", "b", "gamma"]
    assert split_words("\t".join(words)) == words


def test_find_substring_matches_str_find():
    text = 'static char *x = "ab";'
    assert find_substring(text, '"', len(text)) == text.index('"')


def test_find_substring_missing():
    assert find_substring("abcdef", "xyz", 6) == -1


def test_find_substring_limit_too_small():
    assert find_substring("abcdef", "cde", 2) == -1


def test_find_substring_stops_at_nul():
    assert find_substring("ab\0cd", "cd", 5) == -1


def test_find_substring_empty_rejected():
    with pytest.raises(ValueError):
        find_substring("abc", "", 3)


def test_find_unquoted_skips_quoted_text():
    text = '"/* inside */" /* outside */'
    assert find_unquoted(text, "/*", len(text)) == text.rindex("/*")


def test_find_unquoted_plain_match():
    text = "a // b"
    assert find_unquoted(text, "//", len(text)) == text.index("//")


def test_find_unquoted_all_quoted():
    text = '"a // b"'
    assert find_unquoted(text, "//", len(text)) == -1


def test_find_unquoted_limit_too_small():
    assert find_unquoted("a // b", "//", 1) == -1