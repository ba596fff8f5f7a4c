# arraykit

Small helpers for working with plain Python lists of integers and matrices
stored as lists of rows: searching, rotating, merging, de-duplicating,
simple statistics and a word abbreviator. No third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `arraykit.matrix`

Matrices are lists of rows. Ragged matrices (rows of different lengths)
raise `ValueError`.

- `multiply(a, b)`: matrix product; raises `ValueError` when the number of
  columns of `a` differs from the number of rows of `b`.
- `add(a, b)`: element-wise sum; raises `ValueError` unless both matrices
  have the same shape.
- `diagonal_sum(matrix)`: sum of the main diagonal; raises `ValueError` for a
  matrix that is not square.
- `transpose(matrix)`: the transpose, as a new list of rows.

```python
from arraykit.matrix import add, multiply, transpose

multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]])   # [[19, 22], [43, 50]]
add([[1, 2], [3, 4]], [[5, 6], [7, 8]])        # [[6, 8], [10, 12]]
transpose([[1, 2], [3, 4]])                     # [[1, 3], [2, 4]]
```

### `arraykit.search`

- `binary_search(items, target)` and `recursive_binary_search(items, target)`:
  an index of `target` in a sorted sequence, or `None` when it is absent.
- `linear_search(items, target)`: index of the first occurrence, or `None`.
- `pair_sum(items, target)`: indices `(i, j)`, `i < j`, of two elements of a
  sorted sequence that add up to `target`, found with two pointers moving
  inward from both ends, or `None`.

```python
from arraykit.search import binary_search, pair_sum

binary_search([1, 3, 5, 7], 5)   # 2
binary_search([1, 3, 5, 7], 4)   # None
pair_sum([2, 7, 11, 15], 13)     # (0, 2)
```

### `arraykit.transform`

Every function returns a new list and leaves its input untouched.

- `reverse(items)`
- `delete_at(items, pos)`: raises `IndexError` unless `0 <= pos < len(items)`.
- `insert_at(items, pos, value)`: raises `IndexError` unless
  `0 <= pos <= len(items)`.
- `rotate_left(items, k)` and `rotate_left_reversal(items, k)`: rotate left
  by `k` positions (taken modulo the length).
- `rotate_right(items, k)` and `rotate_right_reversal(items, k)`: rotate
  right by `k` positions (taken modulo the length).
- `merge_sorted(a, b)`: merge two sorted sequences into one sorted list.
- `remove_adjacent_duplicates(items)`: collapse runs of equal neighbours,
  which removes all duplicates from a sorted sequence.

The rotations of an empty sequence return an empty list.

```python
from arraykit.transform import rotate_left, rotate_right

rotate_left([1, 2, 3, 4, 5], 2)    # [3, 4, 5, 1, 2]
rotate_right([1, 2, 3, 4, 5], 2)   # [4, 5, 1, 2, 3]
```

### `arraykit.stats`

- `count_even_odd(items)`: `(even_count, odd_count)`.
- `largest_two(items)`: the largest value and the largest value strictly
  below it, or `None` in second place when every item is equal; raises
  `ValueError` for an empty sequence.
- `is_prime(n)`: `False` for every `n <= 1`.
- `partition_primes(items)`: `(primes, non_primes)`, each in input order.

```python
from arraykit.stats import largest_two, partition_primes

largest_two([4, 9, 9, 2])            # (9, 4)
partition_primes([1, 2, 3, 4, 5])    # ([2, 3, 5], [1, 4])
```

### `arraykit.words`

- `abbreviate(word)`: words longer than ten characters become first letter,
  number of letters in between, last letter (`"localization"` → `"l10n"`);
  words of ten characters or fewer are returned unchanged.
- `main(argv=None)`: the command-line entry point described below.

## Command line

`arraykit-abbreviate` prints the prompt `Enter the value of n:` (without a
newline), then reads standard input as whitespace-separated tokens: a count
`n` followed by words. It prints the first `n` words, one per line,
abbreviated where they are too long. A missing or non-numeric count raises
`ValueError`.

```
$ printf '2\nword\nlocalization\n' | arraykit-abbreviate
Enter the value of n:word
l10n
```