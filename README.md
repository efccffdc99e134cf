# dsakit

A small collection of classic data-structure and algorithm routines in plain
Python, with no dependencies outside the standard library.

## Installation

```
pip install dsakit
```

To run the test suite, install the `test` extra and run pytest:

```
pip install "dsakit[test]"
pytest
```

## Modules

### `dsakit.arrays`

Functions on lists. Most of them change the list in place.

- `left_rotate_one(items)` and `left_rotate(items, d)` rotate left. The second
  uses three reversals and raises `ValueError` unless `0 <= d <= len(items)`.
- `reverse_in_place(items)` reverses a list.
- `move_zeros_to_end(items)` moves zeros to the end and keeps the other values
  in order.
- `remove_duplicates(items)` collapses equal neighbours of a sorted list and
  returns the new length.
- `insert_at(items, x, pos, capacity)` inserts at a 1-based position unless the
  list is already at `capacity`, and returns the resulting length. A position
  outside `1..len(items) + 1` raises `IndexError`.
- `delete_element(items, x)` removes the first `x`, if there is one, and returns
  the resulting length.
- `max_element(items)` returns the largest value and raises `ValueError` on an
  empty list.
- `second_max_index(items)` returns the index of the largest value below the
  maximum, or `None` if there is no such value.
- `is_sorted(items)` is true when the values strictly increase.
- `majority_index(items)` returns the index of the candidate found by the
  voting algorithm. The candidate is not checked, and an empty list raises
  `ValueError`.
- `max_profit(prices)` adds up every rise between neighbouring prices.
- `max_difference(items)` returns the largest `items[j] - items[i]` with
  `j > i`. Fewer than two items raise `ValueError`.
- `longest_even_odd(items)` returns the length of the longest run whose
  neighbours alternate between even and odd.
- `max_consecutive_ones(items)` returns the length of the longest run of
  non-zero values.

### `dsakit.searching`

Lookups on sorted sequences. They return `-1` when the value is not found.

- `binary_search(items, target)`
- `first_occurrence(items, target)` and `last_occurrence(items, target)`
- `count_occurrences(items, target)`
- `count_ones(items)` counts the ones in a sorted run of zeros followed by ones.
- `sqrt_floor(x)` is the integer square root found by bisection. A negative `x`
  raises `ValueError`.

### `dsakit.sorting`

- `bubble_sort`, `selection_sort` and `insertion_sort` sort a list in place.
  Bubble sort stops early once a pass makes no swap.
- `merge_sorted(a, b)` merges two sorted sequences into a new list. When values
  tie, the one from `a` comes first.

### `dsakit.stack`

- `ArrayStack(capacity)` is a stack with a fixed capacity. A push onto a full
  stack raises `StackOverflow`, and a negative capacity raises `ValueError`.
- `ListStack()` is an unbounded stack backed by a list.
- `LinkedStack()` is an unbounded stack backed by linked nodes.

All three have `push`, `pop`, `peek`, `is_empty` and `len()`. A `pop` or `peek`
on an empty stack raises `StackUnderflow`, which is a subclass of `IndexError`.
`StackOverflow` is a subclass of `OverflowError`. `drain(stack)` pops each value
in turn and yields it, top first, until the stack is empty.

### `dsakit.strings`

- `char_frequency(text)` returns a dict that counts each character, ordered by
  character.
- `is_palindrome(text)`
- `is_subsequence(text, sub)`
- `is_anagram(a, b)`

### `dsakit.tree`

- `TreeNode(data, left=None, right=None)` is a binary tree node.
- `inorder(root)`, `preorder(root)` and `postorder(root)` are generators that
  yield the node values.

### `dsakit.singly` and `dsakit.doubly`

Linked list nodes (`Node` in `singly`, `DNode` in `doubly`) and functions that
take a head node and return the new head. `None` stands for an empty list.

- Both modules have `from_iterable(values)`, `iter_values(head)`,
  `delete_head(head)` and `delete_tail(head)`.
- `singly` also has `insert_at_head`, `insert_at_tail`,
  `insert_at_position(head, pos, x)` and `search_position(head, x)`.
  `insert_at_position` takes a 1-based position. It leaves the list unchanged
  when the position is more than one past the end, and raises `ValueError` when
  the position is below 1. `search_position` returns a 1-based position, or
  `-1` if the value is not found.
- `doubly` also has `insert_at_begin`, `insert_at_end` and `reverse`. `reverse`
  reverses the list in place by swapping the links of each node.

## Examples

```python
from dsakit.arrays import left_rotate
from dsakit.searching import count_occurrences
from dsakit.stack import ListStack, drain
from dsakit.tree import TreeNode, inorder
from dsakit import singly

items = [1, 2, 3, 4, 5]
left_rotate(items, 2)
print(items)                                  # [3, 4, 5, 1, 2]

count_occurrences([10, 20, 20, 20, 40], 20)   # 3

stack = ListStack()
for value in (10, 20, 30):
    stack.push(value)
print(list(drain(stack)))                     # [30, 20, 10]

root = TreeNode(20, TreeNode(30, TreeNode(5)), TreeNode(40))
print(list(inorder(root)))                    # [5, 30, 20, 40]

head = singly.from_iterable([10, 20, 30])
head = singly.insert_at_tail(head, 40)
print(list(singly.iter_values(head)))         # [10, 20, 30, 40]
```

## What it does not do

dsakit is a library only. It has no command-line program. It does not read
input or print results; you call its functions from your own code.