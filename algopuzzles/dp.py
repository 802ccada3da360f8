"""Dynamic-programming and exhaustive-search puzzles."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from functools import cache
from itertools import permutations

_NO_SPLIT = 100000
_GRID_WIDTH = 5
_BLAST_ROWS = 5
_COIN = 1
_ENEMY = 2

_Gain = Callable[[list[int], int, int, int, bool], int]


def _interval_best(values: Sequence[int], gain: _Gain) -> int:
    n = len(values)
    padded = [1, *values, 1]
    best = [[0] * (n + 2) for _ in range(n + 2)]
    for length in range(1, n + 1):
        whole = length == n
        for i in range(1, n - length + 2):
            j = i + length - 1
            best[i][j] = max(
                [
                    0,
                    *(
                        best[i][k - 1] + best[k + 1][j] + gain(padded, i, j, k, whole)
                        for k in range(i, j + 1)
                    ),
                ]
            )
    return best[1][n] if n else 0


def burst_balloons(values: Sequence[int]) -> int:
    """Most points from bursting balloons, each scoring left * self * right."""
    return _interval_best(values, lambda a, i, j, k, whole: a[i - 1] * a[k] * a[j + 1])


def burst_balloons_edge(values: Sequence[int]) -> int:
    """Most points when a burst scores left * right, and the last one its own value."""
    return _interval_best(
        values, lambda a, i, j, k, whole: a[k] if whole else a[i - 1] * a[j + 1]
    )


def tsp_min_cost(matrix: Sequence[Sequence[int]]) -> int:
    """Cheapest closed tour from city 0 that visits every city."""
    n = len(matrix)
    if n == 0:
        raise ValueError("cost matrix is empty")
    full = (1 << n) - 1
    cost = [[math.inf] * n for _ in range(1 << n)]
    cost[1][0] = 0
    for mask in range(1 << n):
        for u in range(n):
            if not mask >> u & 1:
                continue
            for v in range(n):
                if cost[mask][u] == math.inf:
                    continue
                extended = mask | 1 << v
                candidate = cost[mask][u] + matrix[u][v]
                if candidate < cost[extended][v]:
                    cost[extended][v] = candidate
    tours = [cost[full][i] + matrix[i][0] for i in range(n) if cost[full][i] != math.inf]
    if not tours:
        raise ValueError("no tour exists")
    return min(tours)


def fisherman_min_distance(
    spots: int, gates: Sequence[int], fishermen: Sequence[int]
) -> int:
    """Least total walking distance to seat every fisherman, gates opened in any order.

    Gates are 1-based spot numbers; walking to the spot at a gate costs 1.
    """
    if len(gates) != len(fishermen):
        raise ValueError("each gate needs a fisherman count")
    if any(count < 0 for count in fishermen):
        raise ValueError("fisherman counts must not be negative")
    if sum(fishermen) > spots:
        raise ValueError("more fishermen than spots")

    distances = [
        sorted((abs(position - 1 - spot) + 1, spot) for spot in range(spots))
        for position in gates
    ]
    best = math.inf
    for order in permutations(range(len(gates))):
        stages = len(order)
        table: list[dict[tuple[int, int], int]] = [{} for _ in range(1 << spots)]
        table[0][(0, 0)] = 0
        for mask, states in enumerate(table):
            for stage, gate in enumerate(order):
                need = fishermen[gate]
                for seated in range(need + 1):
                    cost = states.get((stage, seated))
                    if cost is None:
                        continue
                    if seated == need:
                        key = (stage + 1, 0)
                        states[key] = min(states.get(key, math.inf), cost)
                        continue
                    for distance, spot in distances[gate]:
                        if mask >> spot & 1:
                            continue
                        target = table[mask | 1 << spot]
                        key = (stage, seated + 1)
                        target[key] = min(target.get(key, math.inf), cost + distance)
        best = min(best, min(states.get((stages, 0), math.inf) for states in table))
    return int(best)


def oil_mine_min_difference(companies: int, mines: Sequence[int]) -> int:
    """Smallest spread between company totals when a ring of mines is cut into runs.

    Returns -1 when there are fewer mines than companies.
    """
    if companies < 1:
        raise ValueError("at least one company is needed")
    count = len(mines)
    if count < companies:
        return -1

    shares = [0] * companies
    best = _NO_SPLIT

    def record() -> None:
        nonlocal best
        best = min(best, max(shares) - min(shares))

    def split(current: int, end: int, company: int, remaining: int) -> None:
        if remaining < companies - company:
            return
        following = (current + 1) % count
        if following == end:
            if company == companies - 1:
                shares[company] += mines[current]
                record()
                shares[company] -= mines[current]
            return
        if company >= companies:
            return
        shares[company] += mines[current]
        split(following, end, company, remaining - 1)
        split(following, end, company + 1, remaining - 1)
        shares[company] -= mines[current]
        if shares[company] > 0:
            split(current, end, company + 1, remaining)

    for start in range(count):
        split(start, start, 0, count)
    return best


def _detonate(rows: tuple[tuple[int, ...], ...], row: int) -> tuple[tuple[int, ...], ...]:
    first = max(row - _BLAST_ROWS, 0)
    return tuple(
        tuple(0 if cell == _ENEMY else cell for cell in line) if first <= index < row else line
        for index, line in enumerate(rows)
    )


def max_coins_with_bomb(grid: Sequence[Sequence[int]]) -> int:
    """Most coins a plane collects flying up a five-wide grid with one bomb.

    Cells hold 0 (empty), 1 (coin) or 2 (enemy). The plane starts below the
    middle column, moves one row up and at most one column aside each step,
    and a bomb clears the enemies from the five rows ahead.
    """
    rows = tuple(tuple(line) for line in grid)
    if any(len(line) != _GRID_WIDTH for line in rows):
        raise ValueError(f"every row must have {_GRID_WIDTH} cells")
    rows += ((0,) * _GRID_WIDTH,)

    @cache
    def fly(state: tuple[tuple[int, ...], ...], i: int, j: int, bomb: bool) -> int:
        if i < 0:
            return 0
        cell = state[i][j]
        if cell == _ENEMY:
            return 0
        here = 1 if cell == _COIN else 0
        options = [advance(state, i, j, False)]
        if bomb:
            options = [advance(_detonate(state, i), i, j, False), advance(state, i, j, True)]
        return here + max(options)

    def advance(state: tuple[tuple[int, ...], ...], i: int, j: int, bomb: bool) -> int:
        return max(
            fly(state, i - 1, column, bomb)
            for column in (j - 1, j, j + 1)
            if 0 <= column < _GRID_WIDTH
        )

    return fly(rows, len(rows) - 1, _GRID_WIDTH // 2, True)