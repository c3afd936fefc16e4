"""Character classification and case conversion over ASCII code points.

Every function accepts either a one-character string or an integer code
point. The case converters return a value of the same kind they were given.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

CharLike = Union[str, int]

_UPPER_FIRST = 65
_UPPER_LAST = 90
_LOWER_FIRST = 97
_LOWER_LAST = 122
_CASE_OFFSET = 32


def _code(c: CharLike) -> int:
    """Return the integer code point of a character or integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a str or int, got {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return _UPPER_FIRST <= code <= _UPPER_LAST or _LOWER_FIRST <= code <= _LOWER_LAST


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: CharLike) -> bool:
    """True for code points 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Convert an ASCII lowercase letter to uppercase; leave anything else."""
    code = _code(c)
    if _LOWER_FIRST <= code <= _LOWER_LAST:
        return _same_kind(c, code - _CASE_OFFSET)
    return c


def to_lower(c: CharLike) -> CharLike:
    """Convert an ASCII uppercase letter to lowercase; leave anything else."""
    code = _code(c)
    if _UPPER_FIRST <= code <= _UPPER_LAST:
        return _same_kind(c, code + _CASE_OFFSET)
    return c


def is_in_set(c: CharLike, charset: Optional[Iterable[str]]) -> bool:
    """True if ``c`` is one of the characters in ``charset``.

    A missing set (``None``) contains nothing.
    """
    if charset is None:
        return False
    char = chr(_code(c))
    return any(char == member for member in charset)