"""Splitting strings on a separator and working with the resulting word lists."""

from __future__ import annotations

import sys
from typing import Callable, List, MutableSequence, Optional, Sequence

from ftkit.strings import strncmp

BoundedCompare = Callable[[str, str, int], int]


def _check_sep(sep: str) -> None:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")


def count_words(s: str, sep: str) -> int:
    """Number of non-empty runs of characters other than ``sep`` in ``s``.

    An empty string cannot be counted and raises ``ValueError``.
    """
    _check_sep(sep)
    if not s:
        raise ValueError("cannot count words in an empty string")
    return sum(1 for word in s.split(sep) if word)


def word_length(s: Optional[str], sep: str) -> int:
    """Number of characters of ``s`` before the first ``sep``; 0 for ``None``."""
    _check_sep(sep)
    if s is None:
        return 0
    index = s.find(sep)
    return len(s) if index < 0 else index


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on ``sep``, dropping the empty pieces.

    An empty string cannot be split and raises ``ValueError``.
    """
    _check_sep(sep)
    if s is None:
        raise TypeError("split expects a string, got None")
    if not s:
        raise ValueError("cannot split an empty string")
    return [word for word in s.split(sep) if word]


def split_print(words: Sequence[str]) -> None:
    """Write each word followed by a newline to standard output."""
    for word in words:
        sys.stdout.write(word)
        sys.stdout.write("\n")


def is_split_sorted(words: Sequence[str]) -> bool:
    """True if each word compares no greater than the next one.

    Each pair is compared over the length of the first word.
    """
    return all(
        strncmp(left, right, len(left)) <= 0
        for left, right in zip(words, words[1:])
    )


def _partition(
    words: MutableSequence[str], lo: int, hi: int, cmp: BoundedCompare
) -> int:
    mid = (lo + hi) // 2
    words[mid], words[hi] = words[hi], words[mid]
    pivot = words[hi]
    store = lo
    for i in range(lo, hi):
        if cmp(words[i], pivot, len(words[i])) <= 0:
            words[i], words[store] = words[store], words[i]
            store += 1
    words[store], words[hi] = words[hi], words[store]
    return store


def _quick_sort(
    words: MutableSequence[str], lo: int, hi: int, cmp: BoundedCompare
) -> None:
    while lo < hi:
        p = _partition(words, lo, hi, cmp)
        if p - lo < hi - p:
            _quick_sort(words, lo, p - 1, cmp)
            lo = p + 1
        else:
            _quick_sort(words, p + 1, hi, cmp)
            hi = p - 1


def split_quick_sort(
    words: MutableSequence[str], cmp: Optional[BoundedCompare] = None
) -> MutableSequence[str]:
    """Sort ``words`` in place with quicksort and return them.

    ``cmp(a, b, n)`` compares ``a`` with ``b`` over ``n = len(a)``
    characters; it defaults to :func:`ftkit.strings.strncmp`.
    """
    compare = cmp if cmp is not None else strncmp
    _quick_sort(words, 0, len(words) - 1, compare)
    return words