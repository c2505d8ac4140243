# dslessons

Textbook data structures and algorithms written plainly in Python, for
studying and experimenting. Each structure keeps the behaviour of the classic
teaching version: how it grows, which order it gives items back in, and which
end each operation works on. The package has no dependencies beyond the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Containers

- `dslessons.stack.Stack`: a LIFO stack with `push`, `pop`, `top` and `copy`.
  Iteration runs from the top down.
- `dslessons.fifo.Queue`: a FIFO queue with `push`, `pop`, `front` and `back`.
- `dslessons.vector.Vector`: a growable array that reports its `capacity()`,
  which grows to `2 * capacity + 1` when full; it has `push_back`, `pop_back`,
  `front`, `back`, `insert`, `erase`, `resize`, indexing and reverse iteration.
- `dslessons.slist.SList`: a singly linked list with `push_front`,
  `push_back`, `pop_front`, `pop_back`, `front`, `back`, `sort`, and
  `insert`/`erase` by position.
- `dslessons.dlist.DList`: a doubly linked list with the same operations,
  `sort(ascending=True)` in either direction, and `reversed()` support.
- `dslessons.priority_queue.PriorityQueue`: a heap-ordered, size-balanced
  binary tree. Its top is the greatest item under `less` (default `<`, so the
  largest first); pass `operator.gt` to get the smallest first.
- `dslessons.bst.TreeSet`: a set of distinct items in an unbalanced binary
  search tree, iterated in the order given by `less`; `add`, `discard` and
  `in`.
- `dslessons.hashtable.HashTable`: a fixed number of buckets with chaining.
  Equal items may be stored more than once; `erase` removes the most recently
  inserted copy.
- `dslessons.segment_tree.MaxSegmentTree`: positions `1..size`, each starting
  at negative infinity; `update(index, value)` raises a position to at least
  `value`, and `query(left, right)` returns the maximum over an inclusive range.
- `dslessons.divisor_tree.DivisorTree`: the tree of moves where each divisor
  pair `a * b` of `n` leads to `(a - 1) * (b + 1)`, with `pre_order`,
  `in_order`, `post_order`, `height`, `total` and `max_children`.
  `reaches(start, target)` tells whether some moves lead from `start` to
  `target`.

## Algorithms

- `dslessons.sorting`: `bubble_sort`, `exchange_sort`, `insertion_sort`,
  `selection_sort`, `merge_sort`, `quick_sort` and `heap_sort`. Each takes any
  iterable and an optional strict `less` predicate and returns a new list.
  Two sample predicates are included: `parity_less` (even numbers first, each
  group ascending) and `odd_desc_even_asc_less` (evens ascending, then odds
  descending).
- `dslessons.searching`: `linear_search`, `binary_search`,
  `recursive_binary_search` (both return an index or `-1`), `lower_bound` and
  `upper_bound`.
- `dslessons.expressions`: `to_postfix` and `evaluate_postfix` for single-digit
  operands with `+ - * /` and parentheses (division rounds toward zero),
  `is_balanced` for `()[]{}`, and `molar_mass` for formulas of C, H, O,
  parentheses and single-digit counts.
- `dslessons.arith`: `gcd`, `gcd_by_subtraction`, `is_prime`, `fibonacci`,
  `fibonacci_doubling`, `to_base` (bases 2 to 16), `factorial_digits`,
  `multiply_digits` (long multiplication on digit strings),
  `add_polynomials`, `series_sum`, `spread`, `compare_sums` and
  `log_step_product`.
- `dslessons.geometry`: `Point` (with `distance` and `cross`) and `Triangle`
  (with `perimeter` and `area`).
- `dslessons.puzzles`: `boxes_needed`, `josephus`, `doubling_queue`,
  `cloning_queue`, `nesting_dolls`, `sliding_window_max`,
  `largest_after_removal`, the text helpers `center` and `right_align`, and
  the `Student` record with `Student.parse`.

## Examples

```python
from dslessons.stack import Stack
from dslessons.expressions import to_postfix, evaluate_postfix
from dslessons.sorting import merge_sort
from dslessons.bst import TreeSet

s = Stack(["ha", "noi", "mua"])
s.push("khai")
print(s.top())          # khai
print(len(s))           # 4

postfix = to_postfix("7+4*(6-2*3)+(2+3)*5")
print(evaluate_postfix(postfix))   # 32

print(merge_sort([432, 636, 23, 46], less=lambda a, b: a > b))
# [636, 432, 46, 23]

print(list(TreeSet([54, 23, 3, 54, 61])))   # [3, 23, 54, 61]
```

## Errors

Errors are raised the usual Python way: taking the top of an empty stack, the
front of an empty queue or popping an empty list raises `IndexError`, and an
unknown character given to `to_postfix`, `evaluate_postfix` or `molar_mass`
raises `ValueError`.

## What it does not do

This is a library only. It has no command-line program and reads nothing from
standard input or files; the exercises are functions that take their input as
arguments and return their answers.