"""Binary-search and greedy puzzles: cow stalls, root finding, pots and crossings."""

from __future__ import annotations

import math
from collections.abc import Sequence

_ROOT_LOW = 1
_ROOT_HIGH = 1_000_000


def can_place(positions: Sequence[int], gap: int, count: int) -> bool:
    """Tell whether a greedy sweep from the first position reaches ``count`` items.

    An item is added whenever a position lies at least ``gap`` past the last
    chosen one. Success is only reported when an added item brings the total
    to ``count``; the first position alone never does.
    """
    if not positions:
        return False
    last = positions[0]
    placed = 1
    for position in positions[1:]:
        if position - last >= gap:
            last = position
            placed += 1
            if placed == count:
                return True
    return False


def max_min_distance(positions: Sequence[int], count: int) -> int:
    """Largest gap at which ``count`` items can be placed, or -1 if none works."""
    low, high = 0, max([0, *positions])
    best = -1
    while low <= high:
        mid = (low + high) // 2
        if can_place(positions, mid, count):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def _equation_value(a: int, b: int, c: int, n: int) -> int:
    return int(a * n + b * n * math.log2(n) + c * n * n * n)


def smallest_root(a: int, b: int, c: int, x: int) -> int:
    """Smallest n in [1, 10**6] with a*n + b*n*log2(n) + c*n**3 >= x, or -1."""
    low, high = _ROOT_LOW, _ROOT_HIGH
    best = -1
    while low <= high:
        mid = (low + high) // 2
        if _equation_value(a, b, c, mid) >= x:
            best = mid
            high = mid - 1
        else:
            low = mid + 1
    return best


def min_throws(pots: Sequence[int], k: int) -> int:
    """Stones needed, in the worst case, to be sure of filling ``k`` of the pots."""
    if not 0 <= k <= len(pots):
        raise ValueError(f"k must lie between 0 and {len(pots)}, got {k}")
    ordered = sorted(pots)
    total = 0
    previous = 0
    for unknown, height in zip(range(len(ordered), 0, -1), ordered[:k]):
        total += (height - previous) * unknown
        previous = height
    return total


def min_crossing_time(times: Sequence[int]) -> int:
    """Least total time for everyone to cross when at most two travel together."""
    ordered = sorted(times)
    remaining = len(ordered)
    total = 0
    while remaining > 3:
        fastest, second = ordered[0], ordered[1]
        slowest, next_slowest = ordered[remaining - 1], ordered[remaining - 2]
        pair_escort = fastest + 2 * second + slowest
        single_escort = 2 * fastest + slowest + next_slowest
        total += min(pair_escort, single_escort)
        remaining -= 2
    if remaining == 3:
        total += sum(ordered[:3])
    elif remaining == 2:
        total += ordered[1]
    elif remaining == 1:
        total += ordered[0]
    return total