# algokit

A small library of classic algorithms with no third-party dependencies. The functions are grouped
into modules by the kind of data they work on. Every function is pure except where noted: the
tree functions `reverse_odd_levels` and `replace_value_in_tree` change the tree they are given and
return its root.

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

- `algokit.arrays`: integer sequences: `maximum_swap`, `max_chunks_to_sorted`,
  `shortest_subarray`, `check_if_exist`, `final_prices`, `find_length_of_shortest_subarray`,
  `decrypt`, `minimum_mountain_removals`, `maximum_subarray_sum`, `longest_square_streak`,
  `max_jump`, `count_fair_pairs`, `prime_sub_operation`, `continuous_subarrays`,
  `maximum_beauty`, `is_array_special`, `results_array`.
- `algokit.strings`: text: `rotate_string`, `parse_bool_expr`, `make_fancy_string`,
  `longest_diverse_string`, `remove_subfolders`, `is_prefix_of_word`, `find_kth_bit`,
  `max_unique_split`, `add_spaces`, `repeat_limited_string`, `can_change`, `take_characters`,
  `can_make_subsequence`, `minimum_steps`, `maximum_length`, `compressed_string`.
- `algokit.bits`: bitwise techniques: `get_maximum_xor`, `count_max_or_subsets`,
  `largest_combination`, `can_sort_array`, `minimum_subarray_length`, `min_end`.
- `algokit.grids`: two-dimensional boards and matrices: `sliding_puzzle`,
  `max_equal_rows_after_flips`, `count_squares`, `rotate_the_box`, `max_matrix_sum`,
  `count_unguarded`, `minimum_obstacles`, `minimum_time`, `max_moves`.
- `algokit.graphs`: directed graphs given as edge lists: `valid_arrangement`, `find_champion`,
  `shortest_distance_after_queries`.
- `algokit.optimize`: greedy, heap, binary-search and dynamic-programming problems:
  `minimum_size`, `max_average_ratio`, `max_two_events`, `item_beauty_queries`,
  `minimized_maximum`, `minimum_total_distance`, `max_kelements`, `max_count`, `pick_gifts`,
  `find_score`, `get_final_state`.
- `algokit.trees`: binary trees: the `TreeNode` dataclass, `build_tree` and `tree_to_list` for
  converting to and from level-order lists, and `flip_equiv`, `reverse_odd_levels`,
  `tree_queries`, `kth_largest_level_sum`, `replace_value_in_tree`.

Several functions report "no answer" with `-1`, as their docstrings say. Invalid input that has no
such answer raises `ValueError`, for example an empty `pairs` list in `valid_arrangement`, a board
that is not 2 x 3 in `sliding_puzzle`, or a `k` outside the string in `find_kth_bit`.

## Examples

```python
from algokit.arrays import maximum_swap
from algokit.strings import parse_bool_expr
from algokit.trees import build_tree, tree_to_list, reverse_odd_levels

maximum_swap(2736)                      # 7236
parse_bool_expr("&(|(f),t)")            # False

root = build_tree([2, 3, 5, 8, 13, 21, 34])
tree_to_list(reverse_odd_levels(root))  # [2, 5, 3, 8, 13, 21, 34]
```

Binary trees are written as level-order lists, with `None` standing for a missing child.
`tree_to_list` drops trailing `None` entries.

## What it does not do

algokit is a library only. It has no command-line tool. It does not read input files, and it does
not store anything.