"""String helpers with the bounded-copy and search semantics of a small C string library.

Functions that search return an index, or ``None`` when nothing is found.
Functions that would build a new string in a caller's buffer return the new
string instead.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple, Union

CharLike = Union[str, int]

_QUOTES = "'\""


def _as_char(c: CharLike) -> str:
    if isinstance(c, int):
        return chr(c & 0xFF)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``, so a result
    length of at least ``size`` means the copy was truncated.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` so the result fits a buffer of ``size`` slots.

    Returns the new text and the length the caller tried to create. If
    ``size`` leaves no room past ``dst``, ``dst`` comes back unchanged and
    the length reported is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def str_find_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; the terminator ``"\\0"`` is found at ``len(s)``."""
    char = _as_char(c)
    if char == "\0":
        return len(s)
    index = s.find(char)
    return None if index < 0 else index


def str_rfind_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; the terminator ``"\\0"`` is found at ``len(s)``."""
    char = _as_char(c)
    if char == "\0":
        return len(s)
    index = s.rfind(char)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; return -1, 0 or 1.

    A string that ends first compares as smaller.
    """
    for i in range(max(n, 0)):
        left = ord(a[i]) if i < len(a) else 0
        right = ord(b[i]) if i < len(b) else 0
        if left == 0 and right == 0:
            break
        if left != right:
            return 1 if left > right else -1
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if length == 0 or start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(a: str, b: str) -> str:
    """Concatenate two strings."""
    if not isinstance(a, str) or not isinstance(b, str):
        raise TypeError("strjoin expects two strings")
    return a + b


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("strtrim expects two strings")
    return s.strip(charset) if charset else s


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character of ``s``."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str], f: Callable[[int, str], str]
) -> MutableSequence[str]:
    """Replace each character in ``chars`` with ``f(index, char)``, in place."""
    for i, ch in enumerate(chars):
        chars[i] = f(i, ch)
    return chars


def index_of_char(s: Optional[str], c: CharLike) -> int:
    """Index of the first ``c`` in ``s``, or -1; a missing string gives -1."""
    if s is None:
        return -1
    return s.find(_as_char(c))


def strlen_longest(a: str, b: str) -> int:
    """Length of the longer of two strings."""
    return max(len(a), len(b))


def skip_space_and_quote(s: Optional[str]) -> Optional[str]:
    """Take the first word of ``s`` after leading spaces, dropping enclosing quotes.

    A leading double quote is skipped; a quote at the very start or at the
    last position of the text after the spaces is dropped. The word ends at
    the first space.
    """
    if s is None:
        return None
    i = 0
    while i < len(s) and s[i] == " ":
        i += 1
    length = len(s) - i
    if i < len(s) and s[i] == '"':
        i += 1
    out = []
    while i < len(s) and i < length and s[i] != " ":
        if s[i] in _QUOTES and (i == 0 or i == length - 1):
            i += 1
            continue
        out.append(s[i])
        i += 1
    return "".join(out)