"""Integer conversion, comparison, searching, sorting and bit display helpers."""

from __future__ import annotations

import random
import sys
from typing import Callable, List, MutableSequence, Optional, Sequence, TypeVar, Union

T = TypeVar("T")
Comparator = Callable[[T, T], int]

_ATOI_SPACES = "\n\t\v\f\r "
_BIT_WIDTHS = (8, 16, 32, 64)


def atoi(s: str) -> int:
    """Parse a leading decimal integer, as C ``atoi`` does.

    Leading whitespace is skipped. A single ``+`` or ``-`` counts only when
    a digit follows it. Parsing stops at the first non-digit; text with no
    digits gives 0.
    """
    i = 0
    while i < len(s) and s[i] in _ATOI_SPACES:
        i += 1
    negative = False
    if i + 1 < len(s) and s[i] in "+-" and s[i + 1].isascii() and s[i + 1].isdigit():
        negative = s[i] == "-"
        i += 1
    start = i
    while i < len(s) and "0" <= s[i] <= "9":
        i += 1
    result = int(s[start:i]) if i > start else 0
    return -result if negative else result


def itoa(n: int) -> str:
    """Decimal text of ``n``."""
    return str(n)


def index_of_int(values: Sequence[int], n: int) -> int:
    """Index of the first occurrence of ``n`` in ``values``, or -1."""
    for index, value in enumerate(values):
        if value == n:
            return index
    return -1


def max_value(values: Sequence[int]) -> int:
    """Largest value in a non-empty sequence."""
    if not values:
        raise ValueError("max_value needs at least one value")
    return max(values)


def cmp_int(a: int, b: int) -> int:
    """Difference ``a - b``: negative, zero or positive."""
    return a - b


def cmp_char(a: Union[str, int], b: Union[str, int]) -> int:
    """Difference of two characters' code points."""
    left = ord(a) if isinstance(a, str) else a
    right = ord(b) if isinstance(b, str) else b
    return left - right


def is_sorted(values: Optional[Sequence[T]], cmp: Comparator) -> bool:
    """True if no element compares greater than the one after it.

    Fewer than two values cannot be judged and raise ``ValueError``.
    """
    if values is None or len(values) < 2:
        raise ValueError("is_sorted needs at least two values")
    return all(cmp(left, right) <= 0 for left, right in zip(values, values[1:]))


def bubble_sort(values: MutableSequence[T], cmp: Comparator) -> MutableSequence[T]:
    """Sort ``values`` in place by swapping out-of-order neighbours.

    After every swap the scan starts again from the front. The sort is
    stable. Returns the same sequence.
    """
    i = 0
    while i < len(values) - 1:
        if cmp(values[i], values[i + 1]) > 0:
            values[i], values[i + 1] = values[i + 1], values[i]
            i = 0
        else:
            i += 1
    return values


def generate_numbers(size: int, rng: Optional[random.Random] = None) -> List[int]:
    """A random ordering of the distinct integers 1 through ``size``."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    source = rng if rng is not None else random
    return source.sample(range(1, size + 1), size)


def _counting_pass(values: MutableSequence[int], exp: int) -> None:
    counts = [0] * 10
    for value in values:
        counts[(value // exp) % 10] += 1
    for digit in range(1, 10):
        counts[digit] += counts[digit - 1]
    ordered = [0] * len(values)
    for value in reversed(values):
        digit = (value // exp) % 10
        counts[digit] -= 1
        ordered[counts[digit]] = value
    values[:] = ordered


def radix_sort(values: MutableSequence[int]) -> MutableSequence[int]:
    """Sort non-negative integers in place, one decimal digit at a time.

    Returns the same sequence. Negative values raise ``ValueError``.
    """
    if not values:
        return values
    if any(value < 0 for value in values):
        raise ValueError("radix_sort handles only non-negative integers")
    largest = max(values)
    exp = 1
    while largest // exp > 0:
        _counting_pass(values, exp)
        exp *= 10
    return values


def bit_string(n: int, width: int) -> str:
    """The lowest ``width`` bits of ``n``, most significant first.

    Negative numbers show their two's-complement bits. ``width`` must be
    8, 16, 32 or 64.
    """
    if width not in _BIT_WIDTHS:
        raise ValueError(f"width must be one of {_BIT_WIDTHS}, got {width}")
    return "".join(str((n >> bit) & 1) for bit in range(width - 1, -1, -1))


def print_bits(n: int, width: int) -> None:
    """Write ``bit_string(n, width)`` and a newline to standard output."""
    sys.stdout.write(bit_string(n, width) + "\n")