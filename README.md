# dsakit

A small library of classic algorithm and data-structure routines. It is
written in plain Python and has no third-party dependencies.

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

### `dsakit.arrays`

These functions take any sequence of integers. The ones that transform a
list return a new list and leave the input unchanged.

- `min_operations(nums, k)` returns the number of operations needed to bring
  every value down to `k`. It returns `-1` if some value is already below
  `k`, and raises `ValueError` for an empty input.
- `three_sum(nums)` returns every distinct triplet that sums to zero. The
  triplets come out in ascending order, and each triplet is sorted.
- `move_zeroes(nums)` returns the values with the zeros moved to the end.
  The other values keep their order.
- `remove_duplicates(nums)` returns a sorted sequence with each run of
  repeated values collapsed to one value.
- `rotate_right(nums, k)` and `rotate_left(nums, k)` return the values
  rotated by `k` places. `k` may be larger than the length of the list.
- `next_permutation(nums)` returns the next permutation in lexicographic
  order. After the last permutation it wraps round to the first.

```python
from dsakit.arrays import three_sum, next_permutation, remove_duplicates

three_sum([-1, 0, 1, 2, -1, -4])        # [[-1, -1, 2], [-1, 0, 1]]
next_permutation([2, 1, 5, 4, 3, 0, 0])  # [2, 3, 0, 0, 1, 4, 5]
remove_duplicates([1, 1, 2, 2, 2, 3, 3]) # [1, 2, 3]
```

### `dsakit.lru`

`LRUCache(capacity)` is a fixed-size cache. When it is full, it evicts the
entry that was used least recently.

- `get(key)` returns the stored value and marks the entry as recently used.
  For a missing key it returns `-1`.
- `put(key, value)` stores or replaces the value for `key`.
- `len(cache)` gives the number of entries, and `key in cache` tests for a
  key without marking it as used.

A capacity below 1 raises `ValueError`.

```python
from dsakit.lru import LRUCache

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)     # 1
cache.put(3, 3)  # evicts key 2
cache.get(2)     # -1
```

### `dsakit.recursion`

- `subsets(nums)` returns every subset. At each element, the subsets that
  include it come before the subsets that leave it out.
- `generate_parenthesis(n)` returns every well-formed string of `n` pairs
  of parentheses.
- `combination_sum(candidates, target)` returns every combination of
  candidates that sums to `target`. A candidate may be used more than
  once. A candidate that is not positive raises `ValueError`.

### `dsakit.stack`

- `is_valid(s)` returns `True` when the brackets `()[]{}` in `s` are
  balanced and properly nested. Any other character makes the string
  invalid.
- `trap(height)` returns the units of rain water trapped by an elevation
  map.

### `dsakit.graphs`

- `find_order(num_courses, prerequisites)` returns a valid course order, or
  `[]` if there is none. A pair `[a, b]` means that `b` comes before `a`.
- `can_finish(num_tasks, prerequisites)` returns `True` when all the tasks
  can be ordered. A pair `(a, b)` means that `a` comes before `b`.
- `count_islands(grid)` counts the islands of land cells. Cells connect in
  all eight directions.
- `count_distinct_islands(grid)` counts the distinct island shapes. Cells
  connect in the four straight directions, and two shapes are the same
  when one can be shifted onto the other.
- `ladder_length(begin_word, end_word, word_list)` returns the number of
  words in the shortest ladder from `begin_word` to `end_word`. Each step
  changes one lowercase letter. It returns `0` when no ladder exists.
- `cheapest_flight(n, flights, src, dst, k)` returns the cheapest price of
  a route that makes at most `k` stops, or `-1` if there is none. Each
  flight is given as `[from, to, price]`.
- `dijkstra(adj, src)` returns the shortest distance from `src` to every
  node. `adj[node]` lists `(neighbour, weight)` pairs. Nodes that cannot
  be reached get `math.inf`.

```python
from dsakit.graphs import cheapest_flight

flights = [[0, 1, 100], [1, 2, 100], [2, 0, 100], [1, 3, 600], [2, 3, 200]]
cheapest_flight(4, flights, 0, 3, 1)  # 700
```

### `dsakit.trees`

`TreeNode(val, left=None, right=None)` is a binary tree node. Nodes compare
and hash by identity.

- `inorder(root)` and `morris_inorder(root)` return the values in inorder.
  `morris_inorder` threads the tree while it walks and restores it before
  returning.
- `level_order(root)` returns the values level by level.
- `bottom_view(root)` returns the bottom value on each vertical line, from
  left to right.
- `right_side_view(root)` and `left_side_view(root)` return the rightmost
  and leftmost value on each level.
- `build_tree(preorder, inorder)` rebuilds a tree of distinct values from
  its two traversals. It raises `ValueError` when the traversals do not
  match.
- `min_burn_time(root, target)` returns the number of seconds a fire that
  starts at `target` takes to burn the whole tree. Each second the fire
  spreads to the children and parent of every burning node. A missing
  target raises `ValueError`.

```python
from dsakit.trees import build_tree, level_order

root = build_tree([3, 9, 20, 15, 7], [9, 3, 15, 20, 7])
level_order(root)  # [[3], [9, 20], [15, 7]]
```

## What it does not do

dsakit is a library only. It has no command-line interface, and it does not
read input or print results.