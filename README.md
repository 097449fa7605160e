# estruturas

A collection of classic data structures and algorithms, written for studying how
they work. Everything is plain Python with no third-party dependencies.

## Contents

- `estruturas.arrays`: operations on integer sequences. They return new lists and
  leave the input alone.
  - `find_last` and `find_last_recursive` give the index of the last occurrence, or `None`.
  - `invert_permutation` inverts a permutation of `0..n-1`. Other input raises `ValueError`.
  - `remove_at` and `remove_at_recursive` return `(removed, remaining)`.
  - `insert_at` and `insert_at_recursive` insert a value. A bad position raises `IndexError`.
  - `remove_all`, `remove_all_recursive` and `remove_zeros` filter values out.
  - `max_recursive` gives the largest value. An empty sequence raises `ValueError`.
  - `find_pivot_value` returns the first inner element that has only smaller values
    before it and only larger values after it, or `None`.
  - `count_even` counts the even values.
- `estruturas.recursion`:
  - `factorial(n)` for `n >= 1`.
  - `factorial_expansion(n)` returns text such as `"3! = 3*2*1 = 6"`.
  - `fibonacci(n)` is recursive.
  - `fibonacci_sequence(n)` returns `[F(0), ..., F(n)]`.
  - `gcd` and `remainder` work by repeated subtraction.
- `estruturas.sorting`: in-place sorts that return `None`.
  - `insertion_sort`, `bubble_sort`, `bubble_sort_flag`, `selection_sort`,
    `merge_sort`, `shell_sort` and `heap_sort`.
  - `shift_quick_sort` uses the first element as pivot.
  - `quick_sort(values, rng=None)` picks random pivots.
  - The building blocks are available too: `merge`, `partition`,
    `random_partition` and `sift_down`.
- `estruturas.study`:
  - Sorts that return their comparison or shift counts: `counted_bubble_sort`,
    `counted_insertion_sort`, `counted_selection_sort`, `counted_merge_sort` and
    `counted_heap_sort`.
  - `middle_pivot_quick_sort`, which does not count.
  - `linear_search` returns a bool. `binary_search` returns an index or `None`.
  - `sequential_values` and `random_values` build input lists.
  - `time_search` returns the search result and the CPU seconds spent.
  - `explanation(option)` returns the explanation for topics 1 to 10.
  - `main` runs the interactive program.
- `estruturas.linked`:
  - `SinglyLinkedList` has `push_front`, `append`, `find`, `find_recursive`, `remove`
    and `concatenate`. It also has `bubble_sort` and `selection_sort`, which sort by
    relinking nodes.
  - In `CircularLinkedList`, each insertion becomes the new head.
- `estruturas.queues`: `Queue` (FIFO) and `Stack` (LIFO). Taking from an empty one
  raises `QueueEmpty`, which is a subclass of `IndexError`.
- `estruturas.doubly`:
  - `DoublyLinkedList` has `insert_before` among its methods.
  - `CircularDoublyLinkedList`.
  - `SortedCircularDoublyLinkedList` keeps ascending order.
  - All three support `reversed()`.
- `estruturas.grades`: `Student` (a name, a registration number and three grades)
  and `summarize`. `summarize` takes 1 to 100 students and returns a `ClassSummary`
  with the lowest average, the highest average, the class average and the number of
  approvals (an average of at least 7.0). `format_summary` renders it as text.
- `estruturas.trees`:
  - `AVLTree` is self-balancing. Inserting a key it already holds raises
    `DuplicateKey`.
  - `BinarySearchTree` is unbalanced and accepts duplicates.
  - Keys can be any mutually comparable values, such as integers or names.
  - Both trees offer `insert`, `remove` (returns a bool), `find`, `in`, `len`,
    `in_order`, `pre_order`, `post_order`, `draw` and `clear`.

## Examples

```python
from estruturas.sorting import heap_sort
from estruturas.trees import AVLTree
from estruturas.queues import Queue

values = [16, 8, 0, 3, 4, 7]
heap_sort(values)        # sorts in place
print(values)            # [0, 3, 4, 7, 8, 16]

tree = AVLTree([30, 20, 10])
print(tree.in_order())   # [10, 20, 30]
print(20 in tree)        # True

queue = Queue([1, 2, 3])
print(queue.dequeue())   # 1
```

## The study program

The package installs one interactive command, `estruturas-estudo`. Its prompts are
in Portuguese. The program:

1. Fills a list with sequential, random or typed-in values.
2. Sorts the list with the algorithm you choose and reports its count.
3. Times linear and binary search for a value.
4. Explains each algorithm on request.

```
estruturas-estudo
estruturas-estudo --repeats 1000
```

`--repeats` sets how many times each search is run while it is timed. The default is
1,000,000.

## What it does not do

The lists, queues, stacks and trees are library classes only. There is no
interactive menu or command for them, and nothing is stored between runs.

## Tests

```
pip install -e .[test]
pytest
```