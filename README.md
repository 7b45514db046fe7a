# iterkit

Small iteration tools that work on plain Python iterables. Most of them are
generators, so they produce their results lazily.

## Installation

```
pip install iterkit
```

## What it offers

| Module                 | Function                          | What it does                                                       |
|------------------------|-----------------------------------|--------------------------------------------------------------------|
| `iterkit.accumulate`   | `accumulate(iterable, func)`      | yields running results of `func(total, element)`; `func` defaults to addition |
| `iterkit.chain`        | `chain(*args)`                    | yields every element of each iterable in turn                      |
| `iterkit.chain`        | `chain_from_iterable(iterables)`  | does the same, reading the iterables lazily from an outer iterable |
| `iterkit.compress`     | `compress(data, selectors)`       | yields the elements of `data` whose matching selector is truthy; stops when either runs out |
| `iterkit.groupby`      | `groupby(iterable, key)`          | yields `(key, Group)` pairs for each run of consecutive equal keys; without `key` the elements are their own keys |
| `iterkit.permutations` | `permutations(iterable)`          | yields every distinct ordering as a tuple, in lexicographic order  |
| `iterkit.permutations` | `next_permutation(items, less)`   | rearranges a mutable sequence in place into its next ordering      |
| `iterkit.product`      | `product(*args, repeat=1)`        | yields the Cartesian product as tuples, rightmost position fastest |
| `iterkit.reversed`     | `reversed_view(sequence)`         | returns a re-iterable view of a sequence, last element first       |
| `iterkit.sorted`       | `sorted_view(iterable, less)`     | returns a re-iterable view of the elements in sorted order         |

## Examples

```python
from iterkit.accumulate import accumulate
from iterkit.groupby import groupby
from iterkit.product import product

list(accumulate([1, 2, 3, 4, 5]))
# [1, 3, 6, 10, 15]

list(accumulate([5, 4, 3, 2, 1], lambda a, b: a - b))
# [5, 1, -2, -4, -5]

words = ["hi", "ab", "ho", "abc", "def", "abcde", "efghi"]
[(k, list(g)) for k, g in groupby(words, len)]
# [(2, ['hi', 'ab', 'ho']), (3, ['abc', 'def']), (5, ['abcde', 'efghi'])]

list(product([0, 1], "ab"))
# [(0, 'a'), (0, 'b'), (1, 'a'), (1, 'b')]

list(product("ab", repeat=2))
# [('a', 'a'), ('a', 'b'), ('b', 'a'), ('b', 'b')]
```

## Details

**Groups.** A `Group` is an iterator that shares its source with the
`groupby` generator that made it. Its key is also available as
`group.key`. You can read a group fully, stop part way through, or skip it.
The next pair still starts at the first element of the next run. Once
`groupby` has moved on, an earlier group yields nothing more.

**Permutations.** `permutations` sorts its input with `<` before it starts.
Repeated elements therefore produce no duplicate orderings. An empty input
yields nothing. `next_permutation` returns `True` when it found a next
ordering. On the last ordering it rearranges the items back into sorted
order and returns `False`. The comparison defaults to `<` and can be
replaced with any `less(a, b)` function.

**Product.** `product` reads each argument into a tuple when it is called.
With no arguments it yields a single empty tuple. If any argument is empty
it yields nothing. A negative `repeat` raises `ValueError`, and a `repeat`
that is not an integer raises `TypeError`.

**Views.** `reversed_view` raises `TypeError` straight away for objects that
cannot be reversed. It supports `len()` and reflects later changes to the
sequence. `sorted_view` waits until it is first iterated to sort the
elements, using `less(a, b)` (default `a < b`). It then keeps the result, so
it can be iterated again even over a one-shot source.

## Running the tests

```
pip install -e ".[test]"
pytest
```