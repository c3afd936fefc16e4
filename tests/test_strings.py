import pytest

from ftkit.chars import to_upper
from ftkit.strings import (
    index_of_char,
    skip_space_and_quote,
    str_find_char,
    str_rfind_char,
    strjoin,
    strlcat,
    strlcpy,
    strlen_longest,
    strmapi,
    strncmp,
    strnstr,
    striteri,
    strtrim,
    substr,
)


def test_strlcpy_truncates_and_reports_source_length():
    src = "hello"
    assert strlcpy(src, 3) == (src[:2], len(src))


def test_strlcpy_fits_whole_string():
    src = "hello"
    assert strlcpy(src, len(src) + 1) == (src, len(src))


def test_strlcpy_zero_size_copies_nothing():
    assert strlcpy("abc", 0) == ("", len("abc"))


def test_strlcpy_negative_size_raises():
    with pytest.raises(ValueError):
        strlcpy("abc", -1)


def test_strlcat_appends_within_room():
    dst, src = "ab", "cd"
    assert strlcat(dst, src, 10) == (dst + src, len(dst) + len(src))


def test_strlcat_truncates_to_size():
    dst, src = "ab", "cdef"
    result, total = strlcat(dst, src, 4)
    assert result == dst + src[:1]
    assert len(result) == 4 - 1
    assert total == len(dst) + len(src)


def test_strlcat_size_not_past_dst_leaves_it_unchanged():
    dst, src = "abcd", "xy"
    assert strlcat(dst, src, 2) == (dst, 2 + len(src))


def test_strlcat_zero_size_reports_source_length():
    assert strlcat("abcd", "xy", 0) == ("abcd", len("xy"))


def test_str_find_char_first_match():
    s = "hello"
    assert str_find_char(s, "l") == s.index("l")
    assert str_find_char(s, ord("o")) == s.index("o")


def test_str_find_char_terminator_and_missing():
    s = "hello"
    assert str_find_char(s, "\0") == len(s)
    assert str_find_char(s, "z") is None


def test_str_rfind_char_last_match():
    s = "hello"
    assert str_rfind_char(s, "l") == s.rindex("l")
    assert str_rfind_char(s, "\0") == len(s)
    assert str_rfind_char(s, "q") is None


def test_strncmp_results():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 3) == -1
    assert strncmp("abd", "abc", 3) == 1
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_shorter_string_is_smaller():
    assert strncmp("ab", "abc", 5) == -1
    assert strncmp("abc", "ab", 5) == 1
    assert strncmp("x", "y", 0) == 0


def test_strnstr_finds_within_length():
    hay = "hello world"
    assert strnstr(hay, "world", len(hay)) == hay.index("world")


def test_strnstr_match_must_fit_length():
    hay = "hello world"
    assert strnstr(hay, "world", len(hay) - 1) is None
    assert strnstr(hay, "hello", 0) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_substr_cases():
    s = "hello world"
    assert substr(s, 6, 5) == s[6:11]
    assert substr(s, 6, 100) == s[6:]
    assert substr(s, len(s), 3) == ""
    assert substr(s, 0, 0) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_concatenates_and_rejects_none():
    assert strjoin("foo", "bar") == "foo" + "bar"
    with pytest.raises(TypeError):
        strjoin(None, "bar")


def test_strtrim_removes_set_from_both_ends():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xyx", "xy") == ""
    assert strtrim(" a ", "") == " a "


def test_strmapi_uses_index_and_char():
    s = "abc"
    assert strmapi(s, lambda i, ch: to_upper(ch)) == s.upper()
    assert strmapi(s, lambda i, ch: ch * (i + 1)) == "a" + "bb" + "ccc"


def test_striteri_modifies_in_place():
    chars = list("abc")
    result = striteri(chars, lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result is chars
    assert "".join(chars) == "AbC"


def test_index_of_char():
    s = "hello"
    assert index_of_char(s, "e") == s.index("e")
    assert index_of_char(s, "z") == -1
    assert index_of_char(None, "a") == -1


def test_strlen_longest():
    assert strlen_longest("ab", "abcd") == len("abcd")
    assert strlen_longest("abcd", "ab") == len("abcd")


def test_skip_space_and_quote_strips_quotes():
    assert skip_space_and_quote('"hello"') == "hello"
    assert skip_space_and_quote("'abc'") == "abc"


def test_skip_space_and_quote_stops_at_space():
    assert skip_space_and_quote("hi there") == "hi"
    assert skip_space_and_quote("hello") == "hello"


def test_skip_space_and_quote_none():
    assert skip_space_and_quote(None) is None