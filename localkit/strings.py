"""String helpers: trimming, searching, slicing and number parsing."""

from enum import IntEnum
from itertools import takewhile

_DECIMAL = frozenset("0123456789")
_OCTAL = frozenset("01234567")
_BINARY = frozenset("01")
_HEXADECIMAL = frozenset("0123456789abcdefABCDEF")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")

_U64_MODULUS = 1 << 64


class NumberBase(IntEnum):
    """Radixes understood by the number parser."""

    BASE_2 = 2
    BASE_8 = 8
    BASE_10 = 10
    BASE_16 = 16


_BASE_DIGITS = {
    NumberBase.BASE_2: _BINARY,
    NumberBase.BASE_8: _OCTAL,
    NumberBase.BASE_10: _DECIMAL,
    NumberBase.BASE_16: _HEXADECIMAL,
}

_PREFIX_BASES = {
    "x": NumberBase.BASE_16,
    "X": NumberBase.BASE_16,
    "o": NumberBase.BASE_8,
    "O": NumberBase.BASE_8,
    "b": NumberBase.BASE_2,
    "B": NumberBase.BASE_2,
}


def trim(s, delims):
    """Strip any characters of delims from both ends of s."""
    if s is None:
        return None
    if delims is None:
        return s
    return s.strip(delims)


def trim_left(s, delims):
    """Strip any characters of delims from the start of s."""
    if s is None:
        return None
    if delims is None:
        return s
    return s.lstrip(delims)


def trim_right(s, delims):
    """Strip any characters of delims from the end of s."""
    if s is None:
        return None
    if delims is None:
        return s
    return s.rstrip(delims)


def strloc(s, c):
    """Index of the first occurrence of c in s, or None."""
    if s is None:
        return None
    index = s.find(c)
    return index if index >= 0 else None


def strfind(s, tofind):
    """Index of the first occurrence of tofind in s, or None.

    An empty needle is found at the end of s.
    """
    if s is None or tofind is None:
        return None
    if not tofind:
        return len(s)
    index = s.find(tofind)
    return index if index >= 0 else None


def substr(s, start, end):
    """Slice s from start (inclusive) to end (exclusive); None if empty."""
    if s is None or end <= start:
        return None
    return s[start:end]


def substring(s, start, length):
    """Slice length characters of s from start; None if length is zero."""
    if s is None or length == 0:
        return None
    return s[start:start + length]


def is_decimal(c):
    """True for an ASCII decimal digit."""
    return c in _DECIMAL


def is_hexadecimal(c):
    """True for an ASCII hexadecimal digit of either case."""
    return c in _HEXADECIMAL


def is_octal(c):
    """True for an octal digit."""
    return c in _OCTAL


def is_binary(c):
    """True for '0' or '1'."""
    return c in _BINARY


def is_letter(c):
    """True for an ASCII letter."""
    return c in _LETTERS


def is_ident(c):
    """True for an ASCII letter or decimal digit."""
    return is_letter(c) or is_decimal(c)


def is_identifier(c):
    """True for an ASCII letter, decimal digit or underscore."""
    return is_ident(c) or c == "_"


def is_strictly_valid_number(s):
    """True when s is a whole decimal, 0x, 0o or 0b literal and nothing else."""
    if not s or s[0] not in _DECIMAL:
        return False
    if s[0] == "0":
        if len(s) == 1:
            return True
        base = _PREFIX_BASES.get(s[1])
        if base is None:
            return False
        digits = s[2:]
    else:
        base = NumberBase.BASE_10
        digits = s
    return all(ch in _BASE_DIGITS[base] for ch in digits)


def _leading_value(text, base):
    digits = "".join(takewhile(_BASE_DIGITS[base].__contains__, text))
    return int(digits, int(base)) if digits else 0


def to_number(s):
    """Parse the leading number of s as an unsigned 64-bit value.

    Returns None when s does not start with a digit. A leading zero must be
    followed by x, o, b (any case) or end the string; otherwise ValueError.
    Parsing stops at the first character that is not a digit of the base.
    """
    if not s or s[0] not in _DECIMAL:
        return None
    if s[0] == "0":
        if len(s) == 1:
            return 0
        base = _PREFIX_BASES.get(s[1])
        if base is None:
            raise ValueError(f"Un-recognized number base: {s[1]}!")
        value = _leading_value(s[2:], base)
    else:
        value = _leading_value(s, NumberBase.BASE_10)
    return value % _U64_MODULUS


def has_extension(s, ext):
    """Compare the text from the last dot of s with ext.

    Returns True when the first len(ext) characters differ. With an empty
    ext, returns True when s has no dot past its first character.
    """
    if not s:
        return False
    dot = s.rfind(".", 1)
    dot = dot if dot > 0 else 0
    if not ext:
        return dot == 0
    return s[dot:dot + len(ext)] != ext


def cut_before_delim(s, delim):
    """The part of s before the first delim, or all of s."""
    if not s:
        return ""
    if not delim:
        return s
    index = s.find(delim)
    return s if index < 0 else s[:index]


def cut_before_delims(s, delims):
    """The part of s before the first character found in delims."""
    if not s:
        return ""
    return "".join(takewhile(lambda ch: ch not in delims, s))


def truncate_from_left(s, count):
    """Drop count characters from the start of s; None if nothing remains."""
    if count == 0:
        return s
    if len(s) <= count:
        return None
    return s[count:]