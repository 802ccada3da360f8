"""Graph puzzles: bipartite splits, cheapest cycles, random walks and wormholes."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict
from collections.abc import Iterable, Sequence

_STEP_MINUTES = 10

Point = tuple[int, int]


def bipartite_partition(matrix: Sequence[Sequence[int]]) -> list[int] | None:
    """Vertices on one side of a two-colouring of an adjacency matrix, or None."""
    n = len(matrix)
    neighbours = [[j for j, edge in enumerate(row) if edge == 1] for row in matrix]
    colour: dict[int, int] = {}

    def paint(u: int, shade: int) -> bool:
        colour[u] = shade
        for v in neighbours[u]:
            if v not in colour:
                if not paint(v, shade ^ 1):
                    return False
            elif colour[v] == colour[u]:
                return False
        return True

    for vertex in range(n):
        if vertex not in colour and not paint(vertex, 0):
            return None
    return [vertex for vertex in range(n) if colour[vertex] == 0]


def _adjacency(n: int, edges: Iterable[tuple[int, int]], directed: bool) -> dict[int, list[int]]:
    adjacency: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    for u, v in edges:
        if u not in adjacency or v not in adjacency:
            raise ValueError(f"edge ({u}, {v}) names a node outside 1..{n}")
        adjacency[u].append(v)
        if not directed:
            adjacency[v].append(u)
    return adjacency


class _CycleTracker:
    def __init__(self) -> None:
        self.best: list[int] | None = None
        self.best_sum = math.inf

    def offer(self, cycle: list[int]) -> None:
        total = sum(cycle)
        if total < self.best_sum:
            self.best_sum = total
            self.best = cycle

    def result(self) -> list[int] | None:
        return sorted(self.best) if self.best is not None else None


def min_cycle_undirected(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Nodes of the lightest cycle a depth-first search finds, sorted, or None."""
    adjacency = _adjacency(n, edges, directed=False)
    tracker = _CycleTracker()
    visited: set[int] = set()
    for root in range(1, n + 1):
        if root in visited:
            continue
        visited.add(root)
        path = [root]
        position = {root: 0}
        stack = [(root, None, iter(adjacency[root]))]
        while stack:
            u, parent, pending = stack[-1]
            for v in pending:
                if v not in visited:
                    visited.add(v)
                    position[v] = len(path)
                    path.append(v)
                    stack.append((v, u, iter(adjacency[v])))
                    break
                if v != parent and v in position:
                    tracker.offer(path[position[v]:])
            else:
                stack.pop()
                path.pop()
                del position[u]
    return tracker.result()


def min_cycle_directed(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Nodes of the directed cycle with the smallest node sum, sorted, or None."""
    adjacency = _adjacency(n, edges, directed=True)
    tracker = _CycleTracker()
    for root in range(1, n + 1):
        path = [root]
        position = {root: 0}
        stack = [(root, iter(adjacency[root]))]
        while stack:
            u, pending = stack[-1]
            for v in pending:
                if v in position:
                    tracker.offer(path[position[v]:])
                    continue
                position[v] = len(path)
                path.append(v)
                stack.append((v, iter(adjacency[v])))
                break
            else:
                stack.pop()
                path.pop()
                del position[u]
    return tracker.result()


def doctor_probability(
    n: int, edges: Iterable[tuple[int, int, float]], time: int
) -> tuple[int, float]:
    """Division with the highest accumulated probability after ``time`` minutes.

    The doctor starts at division 1 and moves along an edge every ten minutes
    with that edge's probability. Ties go to the lowest division.
    """
    if n < 1:
        raise ValueError("at least one division is needed")
    if time < 0 or time % _STEP_MINUTES:
        raise ValueError(f"time must be a non-negative multiple of {_STEP_MINUTES}")
    outgoing: dict[int, list[tuple[int, float]]] = defaultdict(list)
    for u, v, p in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) names a division outside 1..{n}")
        outgoing[u].append((v, p))

    probability = [0.0] * (n + 1)
    frontier: dict[int, float] = {1: 1.0}
    elapsed = 0
    while frontier:
        for node, mass in frontier.items():
            probability[node] += mass
        if elapsed == time:
            break
        following: dict[int, float] = defaultdict(float)
        for node, mass in frontier.items():
            if not outgoing[node]:
                if elapsed + _STEP_MINUTES == time:
                    probability[node] += mass
                continue
            for target, weight in outgoing[node]:
                following[target] += mass * weight
        frontier = following
        elapsed += _STEP_MINUTES

    best = max(range(1, n + 1), key=lambda node: (probability[node], -node))
    return best, probability[best]


def _manhattan(a: Point, b: Point) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def wormhole_min_cost(
    source: Point, target: Point, wormholes: Iterable[tuple[Point, Point, int]]
) -> int:
    """Cheapest trip on a plane where walking costs Manhattan distance.

    Each wormhole joins two points in both directions at a fixed cost.
    """
    start = tuple(source)
    goal = tuple(target)
    links: dict[Point, list[tuple[Point, int]]] = defaultdict(list)
    nodes: list[Point] = [start, goal]
    for entry, exit_, cost in wormholes:
        a, b = tuple(entry), tuple(exit_)
        links[a].append((b, cost))
        links[b].append((a, cost))
        nodes.extend((a, b))
    unique = list(dict.fromkeys(nodes))

    distance: dict[Point, float] = {node: math.inf for node in unique}
    distance[start] = 0
    heap: list[tuple[float, Point]] = [(0, start)]
    while heap:
        reached, current = heapq.heappop(heap)
        if reached > distance[current]:
            continue
        moves = [(node, _manhattan(node, current)) for node in unique]
        moves.extend(links[current])
        for node, cost in moves:
            candidate = distance[current] + cost
            if candidate < distance[node]:
                distance[node] = candidate
                heapq.heappush(heap, (candidate, node))
    return int(distance[goal])