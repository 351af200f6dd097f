# algosuite

A library of well-known algorithms written in plain Python, with no
third-party dependencies. Every algorithm is a plain function; the only
classes are the node types `TreeNode` and `ListNode` and the `BSTIterator`.

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
| `algosuite.trees` | `TreeNode`, `BSTIterator`, `binary_tree_paths`, `kth_largest_level_sum`, `replace_value_in_tree`, `serialize`/`deserialize` (level order), `find_target`, `width_of_binary_tree`, `search_bst`, `inorder_traversal`, `flip_equiv`, `is_valid_bst`, `vertical_traversal` |
| `algosuite.linked_lists` | `ListNode` (iterable over its values), `build_list`, `list_values`, `insert_greatest_common_divisors`, `modified_list`, `split_list_to_parts` |
| `algosuite.grids` | `minimum_time`, `max_moves`, `maximum_safeness_factor`, `update_matrix`, `flood_fill`, `sliding_puzzle`, `oranges_rotting`, `unique_paths`, `min_path_sum`, `min_falling_path_sum`, `robot_sim` |
| `algosuite.graphs` | `find_circle_num`, `find_champion`, `shortest_distance_after_queries` |
| `algosuite.strings` | `min_extra_char`, `minimum_steps`, `compressed_string`, `is_match` (wildcards), `lcs_length`, `longest_palindrome_subseq`, `find_min_difference`, `check_inclusion`, `min_delete_distance`, `edit_distance`, `rotate_string`, `uncommon_from_sentences`, `min_add_to_make_valid`, `longest_common_prefix`, `maximum_swap` |
| `algosuite.backtracking` | `beautiful_subsets`, `combination_sum`, `combination_sum2`, `permute`, `solve_n_queens`, `get_permutation`, `subsets_with_dup` |
| `algosuite.numbers` | `prime_sub_operation`, `can_sort_array`, `minimum_subarray_length`, `min_end`, `lexical_order`, `find_kth_number`, `maximize_greatness` |
| `algosuite.arrays` | `find_median_sorted_arrays`, `find_content_children`, `smallest_range`, `kth_smallest_prime_fraction`, `lemonade_change`, `shortest_subarray`, `max_width_ramp`, `coin_change`, `can_partition`, `find_target_sum_ways` |

## Examples

```python
from algosuite.trees import serialize, deserialize, inorder_traversal
from algosuite.linked_lists import build_list, list_values, insert_greatest_common_divisors
from algosuite.strings import edit_distance
from algosuite.backtracking import solve_n_queens
from algosuite.arrays import coin_change

root = deserialize("2,1,3,#,#,#,#,")
print(inorder_traversal(root))          # [1, 2, 3]
print(serialize(root))                  # 2,1,3,#,#,#,#,

head = insert_greatest_common_divisors(build_list([18, 6, 10, 3]))
print(list_values(head))                # [18, 6, 6, 2, 10, 1, 3]

print(edit_distance("horse", "ros"))    # 3
print(len(solve_n_queens(4)))           # 4-queens has 2 solutions
print(coin_change([1, 2, 5], 11))       # 3
```

## Results and errors

Where a problem defines "no answer" as `-1` or an empty result, the function
returns that (for example `coin_change`, `sliding_puzzle`, `oranges_rotting`,
`shortest_subarray`). Input that the algorithm cannot work with at all, such
as an empty pair of arrays for `find_median_sorted_arrays`, a `k` out of range
for `kth_largest_level_sum` or `get_permutation`, or negative values where
only non-negative ones make sense, raises `ValueError`.

## What the package does not do

The package holds no stateful container classes: there is no running median,
bounded deque, k-th-largest stream, booking calendar or bit trie. It offers
no command-line program either; it is used by importing its functions.