# dsakit

A collection of classic data-structure and algorithm exercises written as
plain Python functions and classes: graph traversal, a singly linked list,
matrix traversals, binary-search problems, sorting algorithms and partition
schemes, recursion exercises and array puzzles. It has no runtime
dependencies.

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
| `dsakit.graph` | `Graph` (undirected, vertices `0 .. n-1`) with `add_edge`, `adjacency_lines`, `bfs`, `dfs_recursive`, `dfs_stack`; the `dsakit-graph` command |
| `dsakit.linked_list` | `LinkedList` with `insert_at_beginning`, `insert_at_end`, `insert_after`, iteration, `len()` and `render`; the `dsakit-linked-list` command |
| `dsakit.matrix` | `make_matrix`, `flatten`, `snake_order`, `spiral_order`, `boundary_elements`, `rotate90_anticlockwise`, `rotate90_in_place`, `transpose`, `transpose_in_place`, `search_linear`, `search_sorted`, `median_of_row_sorted` |
| `dsakit.searching` | `first_occurrence`, `last_occurrence`, `linear_first_occurrence`, `count_occurrences`, `count_ones`, `count_pairs_with_sum`, `peak_naive`, `peak_index`, `search_rotated`, `search_unbounded`, `min_pages`, `min_pages_naive`, `median_of_two_sorted`, `find_repeating`, `find_repeating_naive`, `isqrt_floor` |
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`, `merge_sorted`, `quick_sort`, `heap_sort`, `cycle_sort`, `counting_sort`, `radix_sort`, `bucket_sort`, `dutch_flag_sort`; `hoare_partition`, `lomuto_partition`, `naive_partition`; `kth_smallest` |
| `dsakit.arrays` | `count_inversions`, `count_inversions_naive`, `union`, `intersection`, `merge_intervals`, `max_guests`, `min_chocolate_difference`, `min_difference` |
| `dsakit.recursion` | `josephus`, `factorial`, `fibonacci`, `power`, `fast_power`, `count_up`, `count_down`, `binary_search_contains` |
| `dsakit.problems` | `fibonacci_series`, `longest_palindrome`, `find_closest_elements`, `concatenated_binary`, `num_jewels_in_stones`, `majority_element`, `is_number_palindrome`, `min_chars_to_append`, `zco_scholarship` |

The sort functions return a new sorted list and leave their input alone. The
partition functions rearrange the given list in place and return an index.
Invalid input such as a negative count, an out-of-range index or an empty
array where a value is needed raises `ValueError` or `IndexError`.

## Examples

```python
from dsakit.graph import Graph
from dsakit.recursion import factorial, josephus
from dsakit.searching import isqrt_floor
from dsakit.problems import longest_palindrome
from dsakit.sorting import merge_sort

g = Graph(4)
g.add_edge(0, 1)
g.add_edge(1, 2)
g.add_edge(2, 3)
print(g.bfs(0))              # [0, 1, 2, 3]
print(g.dfs_recursive(0))    # [0, 1, 2, 3]

factorial(5)                 # 120
josephus(7, 3)               # 4
isqrt_floor(10)              # 3
longest_palindrome("babad")  # "bab"
merge_sort([5, 2, 9, 1])     # [1, 2, 5, 9]
```

```python
from dsakit.linked_list import LinkedList

items = LinkedList(1)
items.insert_at_end(3)
items.insert_at_beginning(0)
print(list(items), len(items))  # [0, 1, 3] 3
print(items.render())           # 0->1->3->
```

`render` writes each value followed by `->`; a list holding only its first
value shows that value twice.

## Command-line programs

Two interactive programs are installed with the package. Both read
whitespace-separated input from standard input.

```
dsakit-graph
```

asks for a vertex count and then for edges, two vertex numbers at a time,
continuing while the answer to "more edges" is `y`. It then prints each
vertex's adjacency list, the BFS order and both DFS orders, always starting
from vertex 0.

```
dsakit-linked-list
```

asks for a first value and then shows a menu: `1` inserts at the beginning,
`2` at the end, `3` after a given position, `4` displays the list and `69`
quits. The program also stops at the end of its input.