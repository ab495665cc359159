# leetsolve

A collection of compact solutions to well-known algorithm exercises, grouped
by topic. The code is plain Python and has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest tests
```

## Modules

| Module | Contents |
| --- | --- |
| `leetsolve.nodes` | `TreeNode`, `ListNode`, `tree_from_level_order`, `list_from_values`, `list_to_values` |
| `leetsolve.binarytree` | `preorder_traversal`, `inorder_traversal`, `postorder_traversal`, `level_order`, `search_bst`, `max_depth`, `has_path_sum`, `is_symmetric`, `is_same_tree` |
| `leetsolve.recursion` | `reverse_string`, `get_row`, `fib`, `climb_stairs`, `my_pow` |
| `leetsolve.linkedlist` | `swap_pairs`, `reverse_list`, `is_palindrome`, `is_palindrome_sequence` |
| `leetsolve.treepaths` | `path_sum`, `count_path_sums`, `distance_k` |
| `leetsolve.graphs` | `GraphNode`, `clone_graph`, `can_finish`, `find_order`, `is_bipartite`, `find_judge` |
| `leetsolve.heaps` | `MedianFinder`, `KthLargest`, `max_events`, `find_kth_largest`, `find_kth_largest_sorted`, `find_kth_largest_heap`, `top_k_frequent`, `find_relative_ranks` |
| `leetsolve.text` | `ComplexNumber`, `gcd_of_strings`, `merge_alternately`, `convert_to_title`, `count_points`, `find_substring`, `find_anagrams`, `check_inclusion`, `complex_number_multiply`, `longest_common_subsequence` |
| `leetsolve.dynamic` | `num_squares`, `coin_change`, `count_bits`, `can_partition`, `delete_and_earn`, `min_subarray` |
| `leetsolve.searching` | `search_matrix`, `binary_search`, `first_bad_version`, `search`, `min_operations` |
| `leetsolve.rainwater` | `trap`, `is_local_maxima`, `is_local_minima`, `water_between` |
| `leetsolve.permutations` | `next_permutation`, `reverse_in_place`, `get_permutation`, `permute_unique`, `combine`, `combination_sum`, `are_permutation` |

## Examples

Trees are built from level-order lists. `None`, or any entry that is not an
integer such as `"null"`, marks a missing child:

```python
from leetsolve.nodes import tree_from_level_order
from leetsolve.binarytree import level_order, max_depth

root = tree_from_level_order([3, 9, 20, None, None, 15, 7])
level_order(root)   # [[3], [9, 20], [15, 7]]
max_depth(root)     # 3
```

Linked lists go to and from Python sequences, and a `ListNode` can be
iterated over directly:

```python
from leetsolve.nodes import list_from_values, list_to_values
from leetsolve.linkedlist import reverse_list

list_to_values(reverse_list(list_from_values([1, 2, 3])))  # [3, 2, 1]
```

Streaming structures keep their state between calls:

```python
from leetsolve.heaps import MedianFinder, KthLargest

finder = MedianFinder()
finder.add_num(1)
finder.add_num(2)
finder.find_median()  # 1.5

kth = KthLargest(3, [4, 5, 8, 2])
kth.add(3)            # 4
```

`first_bad_version` takes the predicate to test versions with:

```python
from leetsolve.searching import first_bad_version

first_bad_version(5, lambda version: version >= 4)  # 4
```

A few more:

```python
from leetsolve.text import convert_to_title, complex_number_multiply
from leetsolve.dynamic import coin_change
from leetsolve.permutations import get_permutation

convert_to_title(28)                       # "AB"
complex_number_multiply("1+1i", "1+1i")    # "0+2i"
coin_change([1, 2, 5], 11)                 # 3
get_permutation(4, 9)                      # "2314"
```

## Errors

Inputs outside a function's range raise `ValueError`, for example an empty
tree passed to `has_path_sum` or `is_symmetric`, a `k` outside `1..len(nums)`
for the `find_kth_largest*` functions, a negative amount or a non-positive
coin for `coin_change`, or a string that is not of the form `a+bi` for
`ComplexNumber.parse`.

## What it does not do

This is a library only: it has no command-line tool, and nothing is read from
or written to files.