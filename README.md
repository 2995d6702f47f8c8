# purgatory

A small collection of well-known algorithm problems solved with plain Python
functions and a few small classes. Nothing outside the standard library is
needed.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `purgatory.arrays` | `increasing_triplet`, `merge`, `remove_duplicates`, `rotate`, `candy`, `remove_element`, `can_jump`, `product_except_self`, `full_justify` |
| `purgatory.hashing` | `can_construct`, `group_anagrams`, `longest_consecutive`, `find_substring` |
| `purgatory.twopointers` | `is_palindrome`, `two_sum`, `max_area`, `trap` |
| `purgatory.slidingwindow` | `contains_nearby_duplicate`, `min_subarray_len`, `length_of_longest_substring` |
| `purgatory.prefixsum` | `NumArray`, `NumMatrix`, `max_sum_submatrix` |
| `purgatory.binarytree` | `TreeNode`, `build_tree`, `average_of_levels`, `right_side_view`, `level_order`, `Codec` |
| `purgatory.stacks` | `is_valid`, `simplify_path`, `eval_rpn`, `calculate` |
| `purgatory.cli` | `main`, behind the `purgatory` command |

`merge`, `remove_duplicates`, `rotate` and `remove_element` work on the list
they are given, in place. `remove_duplicates` and `remove_element` return how
many items are kept at the front; items past that count are left as they were.

A few functions raise `ValueError` on input they cannot handle:

- `rotate` on an empty list;
- `full_justify` when a word is longer than the line width;
- `find_substring` when `words` is empty;
- `max_sum_submatrix` on an empty matrix, or when no rectangle sums to at
  most `k`;
- `eval_rpn` on an empty expression or an operator without two operands;
- `calculate` on an unmatched `)`.

`build_tree` takes a level-order listing in which `None` marks a missing child.
`Codec.serialize` writes a preorder listing with every entry followed by a
comma and `null` for a missing child; `Codec.deserialize` reads it back.

## Examples

```python
from purgatory.arrays import increasing_triplet, full_justify
from purgatory.twopointers import two_sum, trap
from purgatory.prefixsum import NumArray, NumMatrix
from purgatory.binarytree import build_tree, level_order, Codec
from purgatory.stacks import calculate, eval_rpn, simplify_path

increasing_triplet([1, 2, 3, 4, 5])          # True
full_justify(
    ["This", "is", "an", "example", "of", "text", "justification."], 16
)
# ['This    is    an', 'example  of text', 'justification.  ']

two_sum([2, 7, 11, 15], 9)                    # [1, 2]  (1-based positions)
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])    # 6

NumArray([-2, 0, 3, -5, 2, -1]).sum_range(0, 2)   # 1
matrix = [
    [3, 0, 1, 4, 2],
    [5, 6, 3, 2, 1],
    [1, 2, 0, 1, 5],
    [4, 1, 0, 1, 7],
    [1, 0, 3, 0, 5],
]
NumMatrix(matrix).sum_region(2, 1, 4, 3)      # 8

root = build_tree([3, 9, 20, None, None, 15, 7])
level_order(root)                             # [[3], [9, 20], [15, 7]]
Codec().serialize(build_tree([1, 2, 3]))      # '1,2,null,null,3,null,null,'

calculate("1 + (2 - 3)")                      # 0
eval_rpn(["4", "13", "5", "/", "+"])          # 6
simplify_path("/home/")                       # '/home'
```

## Command line

Installing the package provides a `purgatory` command. It checks whether a
list of integers holds an increasing triplet and prints `1` if it does and
`0` if it does not. With no arguments it checks `1 2 3 4 5`:

```
purgatory
purgatory 5 4 3 2 1
```

The command only demonstrates `increasing_triplet`; the other functions are
used from Python.