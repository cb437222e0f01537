# algokit

A small collection of classic algorithms written as plain Python with no
dependencies outside the standard library.

## Installation

```
pip install .
```

The tests use pytest, available through the `test` extra:

```
pip install ".[test]"
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.dynamic` | `count_change_ways`: number of coin combinations that make an amount |
| `algokit.greedy` | `Item`, `fractional_knapsack`, `min_platforms` |
| `algokit.arrays` | `spiral_order`, `reverse_range`, `rotate_left`, `rotate_right_by_one`, `has_triplet_sum`, `max_pairwise_product`, `max_pairwise_product_fast`, `sort_012` |
| `algokit.searching` | `count_occurrences`, `merge_sorted`, `median_of_sorted`, `floor_sqrt` |
| `algokit.sorting` | `radix_sort`, `bubble_sort`, `counting_sort`, `heap_sort`, `quick_sort` |
| `algokit.bst` | `BinarySearchTree` |
| `algokit.stack` | `Stack` |
| `algokit.best_first` | `Graph`, `best_first_search` |
| `algokit.lines` | `bresenham_line`, `dda_line`, `line_equation`, `classify_point`, `PointPosition` |
| `algokit.polyhedron` | `Vertex`, `Polyhedron`: back-face culling, perspective projection and rotation |

The sorting functions leave their input alone and return a new list.
`radix_sort` and `counting_sort` accept non-negative integers only.
`quick_sort` takes an optional `random.Random` for pivot selection, which
makes runs reproducible.

## Examples

```python
from algokit.dynamic import count_change_ways
from algokit.greedy import Item, fractional_knapsack, min_platforms
from algokit.arrays import spiral_order
from algokit.searching import floor_sqrt, median_of_sorted
from algokit.sorting import radix_sort

count_change_ways([1, 2, 3], 4)                                         # 4
fractional_knapsack(50, [Item(60, 10), Item(100, 20), Item(120, 30)])   # 240.0
min_platforms([900, 940, 950, 1100, 1500, 1800],
              [910, 1200, 1120, 1130, 1900, 2000])                      # 3
spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])    # [1, 2, 3, 6, 9, 8, 7, 4, 5]
floor_sqrt(16)                                     # 4
median_of_sorted([1, 2], [3, 4, 5])                # 3.0
radix_sort([170, 45, 75, 90, 802, 24, 2, 66], 10)  # [2, 24, 45, 66, 75, 90, 170, 802]
```

Trees and stacks behave like Python containers:

```python
from algokit.bst import BinarySearchTree
from algokit.stack import Stack

tree = BinarySearchTree([50, 30, 70, 20, 40])
40 in tree                # True
list(tree)                # [20, 30, 40, 50, 70]
tree.delete(30)
tree.inorder()            # [20, 40, 50, 70]

stack = Stack()
stack.push("a")
stack.push("b")
stack.top()               # "b"
stack.pop()               # "b"
len(stack)                # 1
```

Greedy best-first search always expands the frontier vertex with the lowest
heuristic and stops when it reaches a heuristic of 0:

```python
from algokit.best_first import Graph, best_first_search

graph = Graph()
graph.add_vertex(1, 10, [(2, 5), (3, 3)])
graph.add_vertex(2, 5, [(4, 0)])
graph.add_vertex(3, 3, [(4, 0)])
graph.add_vertex(4, 0)
best_first_search(graph, 1)   # [(1, 10), (3, 3), (4, 0)]
```

Line rasterisation returns pixel coordinates:

```python
from algokit.lines import bresenham_line, dda_line, classify_point

bresenham_line(0, 0, 4, 2)   # [(0, 0), (1, 1), (2, 1), (3, 2), (4, 2)]
dda_line(0, 0, 4, 2)         # [(0, 0), (1, 0), (2, 1), (3, 1)]
classify_point(0, 5, 0, 0, 10, 10)
# PointPosition(on_line=False, vertical='lower', horizontal='left')
```

A polyhedron can be culled against a light source, projected and rotated:

```python
from algokit.polyhedron import Polyhedron

solid = Polyhedron.pyramid()
solid.visible_surfaces()      # one bool per surface
solid.visible_edges()         # projected 2-D edges of the visible faces
turned = solid.rotate_y(0.1)  # a new, rotated Polyhedron
```

## Errors

Operations that cannot succeed raise exceptions: deleting a value missing from
a tree raises `KeyError`, popping or peeking at an empty stack raises
`IndexError`, and invalid inputs such as negative amounts, non-positive
weights, a radix base below 2 or the median of no values raise `ValueError`.

## What it does not do

algokit is a library only. It has no command-line program and no interactive
prompts, and it draws nothing on screen: the line and polyhedron functions
return coordinates that the caller is left to render. It does not include
backtracking solvers for chessboard puzzles.