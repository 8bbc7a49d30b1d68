import pytest

from localkit.strings import (
    NumberBase,
    cut_before_delim,
    cut_before_delims,
    has_extension,
    is_binary,
    is_decimal,
    is_hexadecimal,
    is_ident,
    is_identifier,
    is_letter,
    is_octal,
    is_strictly_valid_number,
    strfind,
    strloc,
    substr,
    substring,
    to_number,
    trim,
    trim_left,
    trim_right,
    truncate_from_left,
)

WHITESPACES = " \t\r\n"


def test_trim_both_sides():
    assert trim("  hello \n", WHITESPACES) == "hello"


def test_trim_all_delims_gives_empty():
    assert trim("    ", " ") == ""


def test_trim_none_handling():
    assert trim(None, " ") is None
    assert trim(" x ", None) == " x "


def test_trim_left_and_right():
    assert trim_left("--a--", "-") == "a--"
    assert trim_right("--a--", "-") == "--a"
    assert trim_left(None, "-") is None
    assert trim_right("x-", None) == "x-"


def test_strloc_finds_first():
    s = "key=value=more"
    idx = strloc(s, "=")
    assert s[idx] == "="
    assert "=" not in s[:idx]


def test_strloc_missing():
    assert strloc("abc", "z") is None
    assert strloc(None, "a") is None


def test_strfind_substring():
    s = "hello world"
    idx = strfind(s, "world")
    assert s[idx:idx + len("world")] == "world"
    assert strfind(s, "xyz") is None


def test_strfind_empty_needle_and_none():
    assert strfind("abc", "") == len("abc")
    assert strfind(None, "a") is None
    assert strfind("a", None) is None


def test_substr():
    assert substr("abcdef", 1, 4) == "bcd"
    assert substr("abcdef", 4, 4) is None
    assert substr("abcdef", 5, 2) is None
    assert substr(None, 0, 1) is None


def test_substring():
    assert substring("abcdef", 2, 3) == "cde"
    assert substring("abcdef", 2, 0) is None
    assert substring(None, 0, 1) is None


@pytest.mark.parametrize(
    "func, yes, no",
    [
        (is_decimal, "7", "a"),
        (is_hexadecimal, "F", "g"),
        (is_octal, "7", "8"),
        (is_binary, "1", "2"),
        (is_letter, "q", "_"),
        (is_ident, "9", "_"),
        (is_identifier, "_", "-"),
    ],
)
def test_character_classes(func, yes, no):
    assert func(yes) is True
    assert func(no) is False
    assert func("") is False


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123", True),
        ("0x1F", True),
        ("0o17", True),
        ("0b101", True),
        ("0", True),
        ("0b102", False),
        ("01", False),
        ("12a", False),
        ("", False),
        ("a1", False),
        (None, False),
    ],
)
def test_is_strictly_valid_number(text, expected):
    assert is_strictly_valid_number(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("0x1F", 0x1F),
        ("0Xff", 0xFF),
        ("0o17", 0o17),
        ("0b101", 0b101),
        ("0", 0),
        ("12abc", 12),
    ],
)
def test_to_number(text, expected):
    assert to_number(text) == expected


def test_to_number_rejects_non_digit_start():
    assert to_number("-5") is None
    assert to_number("abc") is None
    assert to_number(None) is None


def test_to_number_unknown_base():
    with pytest.raises(ValueError):
        to_number("07")


def test_to_number_wraps_to_64_bits():
    assert to_number("0x1" + "0" * 16) == 0


def test_number_base_values_match_prefixed_ten():
    parsed = [to_number(text) for text in ("0b10", "0o10", "10", "0x10")]
    assert parsed == [int(b) for b in NumberBase]


def test_has_extension_matches_source_semantics():
    assert has_extension("notes.txt", ".txt") is False
    assert has_extension("notes.txt", ".md") is True
    assert has_extension("", ".txt") is False
    assert has_extension("README", "") is True
    assert has_extension("a.b", "") is False


def test_cut_before_delim():
    assert cut_before_delim("GET /x HTTP/1.1", " ") == "GET"
    assert cut_before_delim("nodelim", " ") == "nodelim"
    assert cut_before_delim("", " ") == ""
    assert cut_before_delim(None, " ") == ""


def test_cut_before_delims():
    assert cut_before_delims("Host: x\r\nNext", "\r\n") == "Host: x"
    assert cut_before_delims("\r\nrest", "\r\n") == ""
    assert cut_before_delims(None, "\r\n") == ""


def test_truncate_from_left():
    assert truncate_from_left("abcdef", 2) == "cdef"
    assert truncate_from_left("abc", 0) == "abc"
    assert truncate_from_left("abc", 3) is None
    assert truncate_from_left("abc", 10) is None