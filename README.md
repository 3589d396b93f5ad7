# datastruct

Classic data structures and algorithms as plain Python classes and
functions, meant for study and experiments. The package has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Contents

### Algorithms

- `datastruct.recursion`
  - `fibonacci(n)`: doubly recursive Fibonacci, `fibonacci(0) == 0`.
  - `fibonacci_iterative(n)`: the two-variable loop run `n` times; it
    returns `fibonacci(n + 1)`.
  - `hanoi(n, source="A", via="B", target="C")`: yields the moves
    `(disk, from_peg, to_peg)` of the Towers of Hanoi.
  - `factorial(n)` and `triangular(n)` (1 + 2 + ... + n), both for `n >= 1`.
  - `reverse(items, lo, hi)`: reverses `items[lo..hi]` in place, both ends
    inclusive.
  - `range_sum(items, lo, hi)`: sums `items[lo..hi]` by halving the range.
- `datastruct.text`
  - `strend(s, t)`: whether `t` ends `s`.
  - `get_ints(text)`: yields the signed integers at the front of `text`,
    stopping at the first token that is not a number; a number that runs
    into the end of the text is not yielded.
  - `read_lines(stream, max_lines=5000)`: lines without their newlines;
    raises `ValueError` when there are more than `max_lines`.
  - `to_lower(text)`: lower-cases ASCII capitals only.
  - `match(pattern, text)`: brute-force search; a result greater than
    `len(text) - len(pattern)` means no match.
- `datastruct.prime`: `sieve(n)` returns a `Bitmap` with every non-prime in
  `[0, n)` set; `eratosthenes(n, path)` writes that bitmap to a file;
  `prime_nlt(c, n, path)` reads it back to find the smallest prime in
  `[c, n)`; `smallest_prime_not_less(c, n)` does the same in memory.

### Small classes

- `datastruct.log`: `Level` (`ERROR`, `WARNING`, `INFO`) and `Logger`, which
  writes `[error]:`, `[WARNING]:` and `[info]:` lines to a stream (standard
  output by default) when its level allows.
- `datastruct.point`: `Point` (indexable as `p[0]`, `p[1]`, addable),
  `Player` with `move(xa, ya)`, `Student` and `parse_student(text)`.

### Containers

- `datastruct.fixed_array.BoundedArray`: fixed capacity, 1-based `insert`
  and `delete`; raises `OverflowError` when full.
- `datastruct.circle_queue.CircleQueue`: ring buffer of `slots` cells
  (default 6) holding at most `slots - 1` elements.
- `datastruct.linked_list.LinkedList`: singly linked, 1-based `insert` and
  `delete`, `sort`.
- `datastruct.stack`: `Stack` (iterates from top to bottom), `paren(exp,
  lo=0, hi=None)` for parenthesis matching, and `convert(n, base)` for bases
  2 to 16.
- `datastruct.fifo.Queue`: first-in first-out queue.
- `datastruct.vector.Vector`: rank-based `insert`, `remove`,
  `remove_range`, `find`, `deduplicate`, `uniquify`, `disordered`, binary
  `search` (largest rank whose element is not above the key) and
  `bubble_sort`.
- `datastruct.bitmap`: `Bitmap`, a packed bit array that grows on demand and
  can be `dump`ed to and `load`ed from a file; `FastBitmap`, with
  constant-time `reset`.
- `datastruct.bintree`: `BinNode` with `succ` and pre-, in-, post- and
  level-order traversals as generators; `BinTree` keeping size and heights;
  `stature`, `balance_factor` and `random_bin_tree`.
- `datastruct.bst.BST`: binary search tree with `search`, `insert`,
  `remove`, `connect34` and `rotate_at`; `hot` holds the parent of the last
  node reached.
- `datastruct.hashtable`: `Hashtable` with linear probing, lazy deletion and
  rehashing to a prime number of buckets; `get` returns `None` for a missing
  key, `put` returns `False` for a key already present. `hash_code(key)`
  hashes ints and strings.

## Example

```python
from datastruct.bst import BST
from datastruct.hashtable import Hashtable
from datastruct.stack import paren

tree = BST()
for key in (5, 4, 36, 27, 58):
    tree.insert(key)
tree.remove(36)

table = Hashtable()
table.put(7, "A")
assert table.get(7) == "A"

assert paren("(())", 0, 4)
```

## What it does not do

This is a library only: it installs no commands and has no interactive
programs that read from the keyboard. `Hashtable` finds its prime bucket
counts by trial division and does not read a sieve file.