# algodrills

A small library of classic algorithm exercises, written as plain Python
functions. It covers binary searches over rotated arrays, linked-list
manipulation, binary tree traversals, string puzzles, bit tricks, matrix walks
and the N-Queens problem. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Modules

- `algodrills.nodes`: the `ListNode` and `TreeNode` node types. `from_values`
  builds a linked list from an iterable. `to_list` reads a linked list back
  into a Python list and raises `ValueError` if the list loops.
  `tree_from_level_order` builds a tree from level-order values, with `None`
  marking a missing child. Iterating over a `ListNode` yields the values from
  that node onwards.
- `algodrills.linked_lists`: `reverse_list`, `merge_two_lists` (which builds a
  new list), `swap_pairs`, `partition`, `odd_even_list`, `has_cycle` and
  `binary_list_value`.
- `algodrills.trees`: `preorder`, `inorder` and `postorder` traversals,
  `is_same_tree`, `kth_smallest` and `root_equals_sum_of_children`.
  `kth_smallest` raises `ValueError` when `k` is out of range.
- `algodrills.searching`: `search_rotated`, `search_rotated_with_duplicates`,
  `find_min_rotated`, `find_min_rotated_with_duplicates`, `search_insert`,
  `single_non_duplicate` and `search_matrix`.
- `algodrills.arrays`: `plus_one`, `max_profit`, `majority_element`,
  `majority_elements`, `is_sorted_and_rotated`, `rotate`,
  `contains_duplicate`, `rearrange_by_sign`, `remove_duplicates`,
  `missing_number`, `remove_element`, `move_zeroes`, `next_permutation`,
  `find_disappeared_numbers`, `max_consecutive_ones`, `max_subarray`,
  `subarray_sum`, `sort_colors`, `sort_by_parity` and `sort_by_parity_ii`.
- `algodrills.strings`: `remove_outer_parentheses`, `is_palindrome`,
  `roman_to_int`, `max_depth`, `largest_odd_number`, `largest_good_integer`,
  `is_anagram`, `str_str`, `reverse_string`, `fizz_buzz`, `add_binary` and
  `rotate_string`.
- `algodrills.bits`: `is_power_of_two`, `is_power_of_three`,
  `is_power_of_four` and `count_bits`.
- `algodrills.matrices`: `diagonal_sum`, `construct_2d_array`, `rotate_image`,
  `spiral_order`, `reshape` and `generate_spiral`.
- `algodrills.queens`: `solve_n_queens` and `total_n_queens`.

Some functions work in place and return `None`: `rotate`, `move_zeroes`,
`next_permutation`, `sort_colors`, `reverse_string` and `rotate_image`.
`remove_duplicates` and `remove_element` also change the list they are given,
and they return its new useful length. When an input has no valid answer
(an empty sequence, no majority element, unbalanced counts for interleaving),
the function raises `ValueError`.

## Example

```python
from algodrills.nodes import from_values, to_list
from algodrills.linked_lists import reverse_list
from algodrills.searching import search_rotated
from algodrills.strings import roman_to_int
from algodrills.queens import total_n_queens

to_list(reverse_list(from_values([1, 2, 3])))   # [3, 2, 1]
search_rotated([4, 5, 6, 7, 0, 1, 2], 0)        # 4
roman_to_int("MCMXCIV")                         # 1994
total_n_queens(8)                               # 92
```

## Scope

This is a library only. It has no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```