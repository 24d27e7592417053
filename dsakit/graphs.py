"""Graph algorithms: topological ordering, islands, word ladders and shortest paths."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence
from string import ascii_lowercase


def _kahn_order(count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return a topological order of the nodes ``0..count-1`` (partial if cyclic)."""
    adjacency: list[list[int]] = [[] for _ in range(count)]
    indegree = [0] * count
    for start, end in edges:
        adjacency[start].append(end)
        indegree[end] += 1

    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            indegree[neighbour] -= 1
            if indegree[neighbour] == 0:
                queue.append(neighbour)
    return order


def find_order(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """Return an order in which every course can be taken, or [] if none exists.

    Each prerequisite ``[a, b]`` means course ``b`` must come before course ``a``.
    """
    order = _kahn_order(num_courses, ((pair[1], pair[0]) for pair in prerequisites))
    return order if len(order) == num_courses else []


def can_finish(num_tasks: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Return True when the tasks can all be ordered.

    Each pair ``(a, b)`` means task ``a`` must come before task ``b``.
    """
    order = _kahn_order(num_tasks, ((pair[0], pair[1]) for pair in prerequisites))
    return len(order) == num_tasks


def count_islands(grid: Sequence[Sequence[int]]) -> int:
    """Return the number of islands of land cells, joined in all eight directions."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    seen: set[tuple[int, int]] = set()
    islands = 0
    for r in range(rows):
        for c in range(cols):
            if grid[r][c] != 1 or (r, c) in seen:
                continue
            islands += 1
            seen.add((r, c))
            queue = deque([(r, c)])
            while queue:
                row, col = queue.popleft()
                for dr in (-1, 0, 1):
                    for dc in (-1, 0, 1):
                        nr, nc = row + dr, col + dc
                        if (
                            0 <= nr < rows
                            and 0 <= nc < cols
                            and (nr, nc) not in seen
                            and grid[nr][nc] != 0
                        ):
                            seen.add((nr, nc))
                            queue.append((nr, nc))
    return islands


_STEPS = ((1, 0), (0, -1), (-1, 0), (0, 1))


def count_distinct_islands(grid: Sequence[Sequence[int]]) -> int:
    """Return how many differently shaped islands the grid holds.

    Cells join in the four straight directions; two islands are alike when
    one can be shifted onto the other without rotating or mirroring it.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    seen: set[tuple[int, int]] = set()
    shapes: set[frozenset[tuple[int, int]]] = set()
    for r in range(rows):
        for c in range(cols):
            if grid[r][c] != 1 or (r, c) in seen:
                continue
            seen.add((r, c))
            stack = [(r, c)]
            shape: set[tuple[int, int]] = set()
            while stack:
                row, col = stack.pop()
                shape.add((row - r, col - c))
                for dr, dc in _STEPS:
                    nr, nc = row + dr, col + dc
                    if (
                        0 <= nr < rows
                        and 0 <= nc < cols
                        and grid[nr][nc] == 1
                        and (nr, nc) not in seen
                    ):
                        seen.add((nr, nc))
                        stack.append((nr, nc))
            shapes.add(frozenset(shape))
    return len(shapes)


def ladder_length(begin_word: str, end_word: str, word_list: Iterable[str]) -> int:
    """Return the number of words in the shortest ladder to ``end_word``, or 0.

    Each step changes one letter and must land on a word from ``word_list``.
    """
    remaining = set(word_list)
    remaining.discard(begin_word)
    queue = deque([(begin_word, 1)])
    while queue:
        word, steps = queue.popleft()
        if word == end_word:
            return steps
        for i in range(len(word)):
            prefix, suffix = word[:i], word[i + 1:]
            for letter in ascii_lowercase:
                candidate = prefix + letter + suffix
                if candidate in remaining:
                    remaining.remove(candidate)
                    queue.append((candidate, steps + 1))
    return 0


def cheapest_flight(
    n: int,
    flights: Iterable[Sequence[int]],
    src: int,
    dst: int,
    k: int,
) -> int:
    """Return the cheapest price from ``src`` to ``dst`` with at most ``k`` stops, or -1.

    Each flight is ``[from, to, price]``.
    """
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for start, end, price in flights:
        adjacency[start].append((end, price))

    cost_to = [math.inf] * n
    cost_to[src] = 0
    queue = deque([(0, src, 0)])
    while queue:
        stops, node, cost = queue.popleft()
        if stops > k:
            continue
        for neighbour, price in adjacency[node]:
            if cost + price < cost_to[neighbour]:
                cost_to[neighbour] = cost + price
                queue.append((stops + 1, neighbour, cost + price))
    return -1 if cost_to[dst] == math.inf else int(cost_to[dst])


def dijkstra(adj: Sequence[Iterable[Sequence[int]]], src: int) -> list[float]:
    """Return the shortest distance from ``src`` to every node.

    ``adj[node]`` lists ``(neighbour, weight)`` pairs; unreachable nodes get
    ``math.inf``.
    """
    distance: list[float] = [math.inf] * len(adj)
    distance[src] = 0
    heap: list[tuple[float, int]] = [(0, src)]
    while heap:
        dist, node = heapq.heappop(heap)
        for neighbour, weight in adj[node]:
            if dist + weight < distance[neighbour]:
                distance[neighbour] = dist + weight
                heapq.heappush(heap, (dist + weight, neighbour))
    return distance