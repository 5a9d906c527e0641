# puzzlekit

A library of compact solutions to classic algorithm puzzles. The functions take
and return plain Python values: lists, strings and integers. Two small node
classes, `TreeNode` and `ListNode`, cover binary trees and singly linked lists.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `puzzlekit.tree` | `TreeNode`, `tree_from_level_order`, `serialize_level_order`, `serialize_preorder`, `is_same_tree`, traversals (`preorder_traversal`, `inorder_traversal`, `postorder_traversal`, `level_order`, `zigzag_level_order`, `level_order_bottom`, `right_side_view`), `sorted_array_to_bst`, `invert_tree`, `invert_tree_recursive` |
| `puzzlekit.tree_build` | `build_tree_from_preorder_inorder`, `build_tree_from_inorder_postorder`, `shift_tree`, `generate_trees` (every search tree on `1..n`), `compact_level_order` |
| `puzzlekit.tree_props` | `is_symmetric`, `max_depth`, `min_depth`, `is_balanced`, `has_path_sum`, `is_valid_bst`, `count_nodes`, `kth_smallest`, `lowest_common_ancestor` |
| `puzzlekit.linked_list` | `ListNode`, `build_list`, `list_values`, and list operations: adding, merging, rotating, reversing, removing, palindrome checks, cycle and intersection detection |
| `puzzlekit.expressions` | `is_valid_parentheses`, `eval_rpn` (reverse Polish notation, division truncating toward zero) |
| `puzzlekit.strings` | Roman numerals, zigzag conversion, KMP and brute-force search, count-and-say, number validation, binary addition, word reversal, version comparison, spreadsheet column titles, isomorphic strings |
| `puzzlekit.string_dp` | `min_distance` (edit distance), `num_decodings`, `word_break` |
| `puzzlekit.arrays` | searching (plain, rotated, rotated with repeats), deduplication, rotation, subarray sums and products, k-th largest, duplicates, range summaries, `plus_one` |
| `puzzlekit.numbers` | `my_pow`, bit tricks, happy numbers, prime counting, rectangle area, integer reversal, `my_atoi`, Pascal's triangle |
| `puzzlekit.grid_dp` | `unique_paths`, `unique_paths_with_obstacles`, `min_path_sum`, `climb_stairs`, `minimum_total` |
| `puzzlekit.queens` | `solve_n_queens` boards and `total_n_queens` counts |

## Examples

```python
from puzzlekit.tree import tree_from_level_order, zigzag_level_order, inorder_traversal

root = tree_from_level_order([3, 9, 20, None, None, 15, 7])
zigzag_level_order(root)   # [[3], [20, 9], [15, 7]]
inorder_traversal(root)    # [9, 3, 15, 20, 7]
```

```python
from puzzlekit.linked_list import build_list, list_values, add_two_numbers

total = add_two_numbers(build_list([2, 4, 5]), build_list([5, 6, 4, 9, 9]))
list_values(total)         # [7, 0, 0, 0, 0, 1]
```

```python
from puzzlekit.strings import int_to_roman, roman_to_int
from puzzlekit.queens import total_n_queens

int_to_roman(2014)         # "MMXIV"
roman_to_int("MMXV")       # 2015
total_n_queens(8)          # 92
```

Functions that rearrange a list in place, such as `rotate`, `merge_sorted`,
`remove_duplicates` and `remove_element`, change the list you pass in, as their
docstrings say. Several tree and linked-list functions likewise relink the
nodes they are given.

Invalid input, such as an empty sequence where a value is needed or an
out-of-range position, raises `ValueError`.

## What it does not do

puzzlekit is a library only: it has no command-line tool and prints nothing.
Call its functions from your own code.