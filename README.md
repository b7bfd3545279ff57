# drillbook

A collection of classic data-structure and algorithm drills written as
plain, importable Python: a bounded array and set operations on arrays,
array searches, digit and byte manipulation, linked lists, compact
diagonal and triangular matrices, recursion, string algorithms and
binary-tree traversals. It has no dependencies beyond the standard
library.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `drillbook.array_adt` | `BoundedArray(size=10, items=())`, a fixed-capacity integer array with `insert`, `append`, `delete` (returns the removed element), `linear_search` (returns the index and moves the found element to the front), `binary_search`, `binary_search_recursive`, `get`, `set`, `max`, `min`, `sum`, `average`, `reverse`, `right_shift`, `left_shift`, `insert_sorted`, `is_sorted`, `rearrange` (negatives to the left) and `display`. Failures raise `ArrayError` (a `ValueError`); `get` and `set` raise `IndexError` out of range. |
| `drillbook.array_sets` | `merge_sorted`, `union_sorted`, `union_unsorted`, `intersection_sorted`, `intersection_unsorted`, `difference_sorted`, `difference_unsorted`. Each takes two iterables of integers and returns a new `BoundedArray`. |
| `drillbook.array_algorithms` | `diff_min_max`, `max_of`, duplicate finders (`duplicates_unsorted`, `duplicates_unsorted_hash`, `duplicates_sorted`) returning `(value, count)` pairs, missing-element finders (`missing_elements_sorted`, `missing_elements_unsorted`, `missing_elements_unsorted_hash`) and pair-sum finders (`pairs_with_sum_unsorted`, `pairs_with_sum_unsorted_hash`, `pairs_with_sum_sorted`). |
| `drillbook.bits` | `append_digit`, `digits_to_number`, `reverse_number`, `flip_bytes` (reverses the four bytes of a 32-bit value), `byte_order`, `host_to_network`, `count_ones`. |
| `drillbook.linked_list` | `SinglyLinkedList` with 1-based `add` and `remove` and in-place `reverse`; `DoublyLinkedList` with `head`, `tail` and `from_tail`. Both are iterable and have a length. |
| `drillbook.matrices` | `DiagonalMatrix`, `LowerTriangularMatrix` and `UpperTriangularMatrix`, storing only the cells that may be non-zero, with `set`, `get`, `rows` and `render`; the triangular ones also have `index`. `fill_random` fills the storable cells with random values. |
| `drillbook.recursion` | `factorial`, `ncr`, `ncr_pascal`, `fib_recursive`, `fib_memoized`, `fib_iterative`, and `tower_of_hanoi` returning a `HanoiSolution` (`moves`, `steps`, `function_calls`, `lines()`). |
| `drillbook.text_algorithms` | `duplicates`, `duplicates_hash`, `duplicates_bitwise`, `is_anagram`, `is_anagram_hash`, `permutations`, `permutations_swap`, `remove_spaces`, `compare`, `compare_alt`, `is_palindrome`, `swap_case`, `count_words_vowels_consonants` (returns `TextCounts`), `is_valid_user_name`, `reverse`. |
| `drillbook.binary_tree` | `Node` and `BinaryTree`, built with `from_level_order` (`-1` marks a missing child) or `from_traversals`, with `preorder`, `inorder`, `postorder` and `level_order` plus iterative variants, each returning a list. |
| `drillbook.shapes` | `Shape`, `PaintCost` and `Rectangle`, a short multiple-inheritance example: `Rectangle(7, 5).area()` is 35 and `paint_cost(area)` charges 70 per unit. |

## A few examples

```python
from drillbook.recursion import factorial, ncr, fib_iterative, tower_of_hanoi
from drillbook.text_algorithms import is_anagram, is_palindrome
from drillbook.binary_tree import BinaryTree
from drillbook.array_sets import merge_sorted

factorial(5)                      # 120
ncr(5, 3)                         # 10
fib_iterative(10)                 # 55
is_anagram("listen", "silent")    # True
is_palindrome("level")            # True

list(merge_sorted([1, 4, 9], [2, 3, 10]))   # [1, 2, 3, 4, 9, 10]

tree = BinaryTree.from_traversals([3, 2, 4, 1, 6, 5, 7], [1, 2, 3, 4, 5, 6, 7])
tree.preorder()                   # [1, 2, 3, 4, 5, 6, 7]

solution = tower_of_hanoi(3, "A", "B", "C")
solution.steps                    # 7
solution.function_calls           # 15
```

## Commands

Two interactive programs are installed. Both read standard input.

```
drillbook-array-menu
```

asks for the capacity of an array and then shows a menu to insert,
append, delete, search, sum and display its elements. It ends when you
choose 7 (or any higher number) or when input runs out. Errors such as a
full array or a missing element are reported and the menu continues.

```
drillbook-tree
```

builds a binary tree from values you type in level order, using `-1`
for a missing child, and prints its preorder, inorder, postorder and
level-order traversals, recursive and iterative. It then prints the
preorder of a second tree rebuilt from fixed inorder and preorder
traversals.

## What it does not do

Apart from these two commands, every drill is a library function or
class; there is no command-line front end for the others, and nothing is
stored between runs.