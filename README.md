# ftkit

A small library of everyday helpers, grouped by topic. It has no
dependencies beyond the standard library.

## Modules

- `ftkit.chars`: ASCII character tests and case conversion: `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`
  and `is_in_set`. Each accepts a one-character string or an integer code
  point; `to_upper` and `to_lower` return the same kind they were given.
- `ftkit.memory`: operations on `bytearray` (or writable `memoryview`)
  buffers: `mem_set`, `bzero`, `mem_copy`, `mem_move` (overlap-safe, within
  one buffer), `mem_find`, `mem_compare`, `calloc` and `swap_slices`. Spans
  that run past the end of a buffer raise `IndexError`.
- `ftkit.output`: writing to a raw file descriptor with `os.write`:
  `put_char_fd`, `put_str_fd`, `put_endl_fd` and `put_nbr_fd`.
- `ftkit.strings`: `strlcpy` and `strlcat` (returning the new text together
  with the length that was attempted), `str_find_char`, `str_rfind_char`,
  `strncmp` (returns -1, 0 or 1), `strnstr`, `substr`, `strjoin`, `strtrim`,
  `strmapi`, `striteri` (in place on a mutable sequence of characters),
  `index_of_char`, `strlen_longest` and `skip_space_and_quote`. Searches
  return an index, or `None` when nothing is found (`index_of_char` returns
  -1).
- `ftkit.numbers`: `atoi`, `itoa`, `index_of_int`, `max_value`, `cmp_int`,
  `cmp_char`, `is_sorted`, `bubble_sort`, `generate_numbers` (a random
  permutation of 1..n, optionally from a given `random.Random`),
  `radix_sort` (non-negative integers only), `bit_string` and `print_bits`
  (widths 8, 16, 32 or 64).
- `ftkit.split`: `count_words`, `word_length`, `split`, `split_print`,
  `is_split_sorted` and `split_quick_sort`. Splitting drops empty pieces;
  an empty string raises `ValueError`.
- `ftkit.linkedlist`: a singly linked list. `LinkedList` holds `Node`
  objects (`content`, `next`) and offers `push_front`, `push_back`, `last`,
  `clear`, `for_each` and `map`; it is iterable over its contents and
  supports `len()`.

## Installation

```
pip install .
```

## Examples

```python
from ftkit.strings import strtrim, substr, strlcpy
from ftkit.numbers import atoi, itoa, bit_string, radix_sort
from ftkit.split import split
from ftkit.linkedlist import LinkedList

strtrim("--hello--", "-")      # "hello"
substr("hello world", 6, 5)    # "world"
strlcpy("hello", 3)            # ("he", 5)
atoi("  -42abc")               # -42
itoa(-7)                       # "-7"
bit_string(5, 8)               # "00000101"
radix_sort([30, 4, 112])       # [4, 30, 112]
split("  a b  c ", " ")        # ["a", "b", "c"]

items = LinkedList()
items.push_back(1)
items.push_back(2)
items.push_front(0)
doubled = items.map(lambda x: x * 2, None)
list(doubled)                  # [0, 2, 4]
```

## What it does not do

This is a library only: it has no command-line program and keeps no state
between calls.

## Running the tests

```
pip install .[test]
pytest
```