# algokit

A collection of classic data structures and algorithms in plain Python,
with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.linked_list` | Singly linked `Node`; `from_list`, `to_list`, `iter_values`, `length`, `contains`, `format_list`, insertion and removal at head, tail and position k |
| `algokit.doubly_linked_list` | Doubly linked `DNode`; head, tail and k-th removal, `delete_node`, and `remove_kth_safe`, which raises `IndexError` for a missing position |
| `algokit.binary_tree` | `TreeNode` with recursive and iterative pre/in/post-order traversals and `level_order` |
| `algokit.arrays` | Sortedness check with deduplication, intersections, largest/smallest two, rotation, linear search, merging, moving zeros, reversing, matrix rotation, Pascal's triangle |
| `algokit.collections_ops` | Subsets, duplicate counts, distances between repeats, first unique value, anagrams, common and missing elements |
| `algokit.strings` | Word counting and capitalisation, isomorphism, longest word, most frequent character, longest palindrome, distinct palindromic substrings |
| `algokit.conversion` | Binary digits to decimal, and decimal to binary, octal and hexadecimal |
| `algokit.patterns` | Text patterns returned as lists of lines: pyramid, checkerboard, rotated numbers, hollow rectangle |
| `algokit.sorting` | `partition`, `quick_sort` and `randomized_quick_sort` (returning sorted copies) |
| `algokit.dp` | Stairs, coin change, Fibonacci, frog jumps, picking at most k values, travelling salesman |
| `algokit.shortest_paths` | Multistage graphs, Floyd–Warshall with `NegativeCycleError`, `WeightedDigraph.dijkstra` with the path taken |
| `algokit.dag` | Longest path in a DAG, minimum project cost |
| `algokit.optimal_bst` | `OptimalBST`: minimum search cost, chosen roots, a text description of the tree |
| `algokit.graph` | Undirected adjacency-list `Graph` |
| `algokit.records` | Small value types: `ComplexPair`, `Shop`, `EmployeeRegistry`, `ones_complement` |
| `algokit.airline` | A flight booking system stored in a plain text file |

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from algokit.arrays import merge_sorted, pascal_triangle
from algokit.dp import climb_stairs, fib, min_coins, tsp
from algokit.conversion import decimal_to_binary, decimal_to_hex
from algokit.linked_list import from_list, insert_head, to_list

print(merge_sorted([1, 3, 5, 7], [2, 4, 6, 8]))  # [1, 2, 3, 4, 5, 6, 7, 8]
print(pascal_triangle(3))                          # [[1], [1, 1], [1, 2, 1]]

print(climb_stairs(4))            # 5
print(fib(10))                    # 55
print(min_coins([1, 2, 5], 11))   # 3

graph = [
    [0, 10, 15, 20],
    [10, 0, 35, 25],
    [15, 35, 0, 30],
    [20, 25, 30, 0],
]
print(tsp(graph))                 # 80

print(decimal_to_binary(10))      # 1010
print(decimal_to_hex(255))        # FF

head = insert_head(from_list([2, 3, 4, 5]), 100)
print(to_list(head))              # [100, 2, 3, 4, 5]
```

Shortest paths on a weighted directed graph, with the route taken.
`dijkstra` returns `(cost, path)`, or `None` when the target is unreachable:

```python
from algokit.shortest_paths import WeightedDigraph

g = WeightedDigraph(4)
g.add_edge(0, 1, 1)
g.add_edge(1, 2, 2)
g.add_edge(0, 2, 5)
g.add_edge(2, 3, 1)
print(g.dijkstra(0, 3))           # (4, [0, 1, 2, 3])
```

`floyd_warshall_checked` raises `NegativeCycleError` when the graph contains
a cycle of negative total weight; `math.inf` marks a missing edge:

```python
from algokit.shortest_paths import NegativeCycleError, floyd_warshall_checked

try:
    floyd_warshall_checked([[0, 1], [-3, 0]])
except NegativeCycleError:
    print("negative cycle")
```

Booking seats in a flight file:

```python
from algokit.airline import BookingError, book_seats, load_flights, write_initial_flights

write_initial_flights("flights.txt")
print(book_seats("flights.txt", "F101", 3))   # 47
try:
    book_seats("flights.txt", "F103", 5)
except BookingError as error:
    print(error)                               # Not enough seats available!
```

## Command-line tools

Convert a binary number to decimal, binary, octal and hexadecimal. The
number may be given as an argument; otherwise the command prompts for it:

```
algokit-convert 1010
```

Run the interactive airline booking menu. It writes the starting flights to
`Flight.txt` in the current directory (or to the file named as the first
argument), overwriting any earlier contents, and then lets you display the
flights and book seats:

```
algokit-airline
```