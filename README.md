# dsakit

A small collection of classic data structures and algorithms in plain Python.
It has no runtime dependencies.

## What is inside

- `dsakit.sorting`: `bubble_sort`, `insertion_sort`, `selection_sort` and
  `merge_sort` sort a list in place and return the number of steps they took.
  `linear_search` and `binary_search` return a `SearchResult` with the index
  found (or `None`), the number of iterations, and a `found` property.
- `dsakit.stacks`: `StaticStack` and `StaticArray` (bounded), `VectorStack`
  (list-backed) and `ContainerStack` (over any container factory such as
  `list` or `collections.deque`). Pushing onto a full bounded stack raises
  `StackOverflowError`; reading or popping an empty stack raises
  `StackUnderflowError`.
- `dsakit.stack_problems`: `reverse_words`, `is_correctly_bracketed` (with
  `is_opening_bracket`, `is_closing_bracket` and `corresponding_bracket`),
  `reverse_stack`, `merge_stacks`, `sort_stack` and `merge_intervals`, which
  works on `Interval` values. Stacks here are Python lists with the top at the
  end.
- `dsakit.maze`: `solve_maze_recursive` and `solve_maze_stack` report whether
  the end can be reached; `shortest_distance` returns the fewest steps, or
  `None`. A maze is a grid of rows where `0` is open and any other value is a
  wall; positions are `(row, column)` pairs, and `Position` is a named tuple
  for them.
- `dsakit.queues`: `CircularQueue` (default size 16), `LinkedQueue` and
  `CircularDeque` (default capacity 4), with the abstract base `Queue`. A full
  queue or deque raises `QueueOverflowError`; an empty one raises
  `QueueUnderflowError`.
- `dsakit.queue_problems`: `flip_first_k` on a `collections.deque`, plus
  `StackQueue` (a queue kept in stacks) and `QueueStack` (a stack kept in
  queues).
- `dsakit.linked_list`: `LinkedList`, with positional `at`, `push_at_pos` and
  `pop_at_pos` (out-of-range positions raise `IndexError`), and `reverse`,
  `to_set`, `filter`, `map` and `copy`.
- `dsakit.doubly_linked_list`: `DoublyLinkedList`, iterable in both
  directions; popping or peeking an empty list raises `IndexError`.
- `dsakit.list_tasks`: functions on bare `Node` chains: `create_list`,
  `to_list`, `get_middle_node`, `reverse_list`, `split_before`,
  `is_palindrome`, `reorder_list`, `reorder_less_than`, `shuffle` and
  `reverse_k_groups`.
- `dsakit.binary_tree`: `BinaryTree`, with search-tree `insert` and `remove`,
  `in_order`, `pre_order` and `post_order` traversals, `height`, `map`,
  `trim` (drop every leaf) and `bloom` (give every leaf two copies of itself).
- `dsakit.general_tree`: `GeneralTree`, a first-child / next-sibling tree with
  `remove`, `values`, `levels`, `level`, `branching_coeff` and `leaf_count`.
- `dsakit.rose_tree`: `Tree` (a node with a list of children) and
  `BinaryNode`.

## Example

```python
from dsakit.linked_list import LinkedList
from dsakit.stack_problems import is_correctly_bracketed

items = LinkedList([0, 1, 2, 3, 4, 5])
items.filter(lambda x: x % 2 == 0)
print(list(items))                               # [0, 2, 4]

print(is_correctly_bracketed("(3+6)/{54g(p3[jw ][])}"))  # True
```

## Commands

Install the package:

```
pip install .
```

Run the sorting and searching demonstration on two fixed sample arrays. It
prints each array's size with log(n), n·log(n) and n², the merge sort step
counts, and the results of linear and binary searches:

```
dsakit-complexity
```

Run the tree demonstration. It prints the traversals of a sample binary tree,
its values after `trim` and after `bloom`, and then the branching coefficient,
level 1 and the leaf count of a sample general tree:

```
dsakit-trees
```

Both commands work only on their built-in samples; they take no options and
read no input.

## Tests

```
pip install .[test]
pytest
```