"""Grid puzzles: knight moves, pipe networks, frog jumps, jewel mazes and spreading laughter."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence

_KNIGHT_MOVES = ((-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1))

# Directions in the order up, right, down, left.
_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))

_PIPE_OPENINGS: dict[int, frozenset[int]] = {
    1: frozenset({0, 1, 2, 3}),
    2: frozenset({0, 2}),
    3: frozenset({1, 3}),
    4: frozenset({0, 1}),
    5: frozenset({1, 2}),
    6: frozenset({2, 3}),
    7: frozenset({3, 0}),
}

# Row moves are free for the frog; column moves cost one jump.
_FROG_MOVES = ((1, 0, 0), (0, 1, 1), (-1, 0, 0), (0, -1, 1))

_WALL = 1
_JEWEL = 2
_MARK = 3

# Maze search order: up, down, left, right.
_MAZE_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))

_NEIGHBOURS = ((1, 0), (0, 1), (-1, 0), (0, -1))

Cell = tuple[int, int]


def _inside(grid: Sequence[Sequence[int]], x: int, y: int) -> bool:
    return 0 <= x < len(grid) and 0 <= y < len(grid[x])


def knight_distance(rows: int, cols: int, start: Cell, target: Cell) -> int:
    """Fewest knight moves between two squares of a 1-based board, or -1."""
    origin = tuple(start)
    goal = tuple(target)
    seen = {origin}
    queue: deque[tuple[Cell, int]] = deque([(origin, 0)])
    while queue:
        (x, y), moves = queue.popleft()
        if (x, y) == goal:
            return moves
        for dx, dy in _KNIGHT_MOVES:
            nx, ny = x + dx, y + dy
            if 1 <= nx <= rows and 1 <= ny <= cols and (nx, ny) not in seen:
                seen.add((nx, ny))
                queue.append(((nx, ny), moves + 1))
    return -1


def endoscopy_reach(grid: Sequence[Sequence[int]], start: Cell, length: int) -> int:
    """Number of pipe cells an endoscope of ``length`` reaches from ``start``.

    Cells hold a pipe type from 1 to 7 or 0 for no pipe. Two neighbouring
    pipes connect when each is open towards the other. The start cell is
    always counted.
    """
    row, col = start
    if not _inside(grid, row, col):
        raise ValueError(f"start {start} lies outside the grid")
    seen = {(row, col)}
    queue: deque[tuple[Cell, int]] = deque([((row, col), 1)])
    while queue:
        (x, y), depth = queue.popleft()
        if depth >= length:
            break
        for direction in _PIPE_OPENINGS.get(grid[x][y], frozenset()):
            dx, dy = _STEPS[direction]
            nx, ny = x + dx, y + dy
            if not _inside(grid, nx, ny) or (nx, ny) in seen or grid[nx][ny] == 0:
                continue
            opposite = (direction + 2) % 4
            if opposite in _PIPE_OPENINGS.get(grid[nx][ny], frozenset()):
                seen.add((nx, ny))
                queue.append(((nx, ny), depth + 1))
    return len(seen)


def frog_jump_cost(grid: Sequence[Sequence[int]], start: Cell, target: Cell) -> int:
    """Fewest column changes for a frog moving over cells that hold 1.

    Moving to another row in the same column is free. An unreachable target
    yields 0.
    """
    origin = tuple(start)
    goal = tuple(target)
    cost: dict[Cell, int] = {origin: 0}
    queue: deque[Cell] = deque([origin])
    while queue:
        x, y = queue.popleft()
        for dx, dy, step in _FROG_MOVES:
            nx, ny = x + dx, y + dy
            if not _inside(grid, nx, ny) or grid[nx][ny] != 1:
                continue
            candidate = cost[(x, y)] + step
            if candidate < cost.get((nx, ny), math.inf):
                cost[(nx, ny)] = candidate
                if step:
                    queue.append((nx, ny))
                else:
                    queue.appendleft((nx, ny))
    return cost.get(goal, 0)


def jewel_maze(grid: Sequence[Sequence[int]]) -> tuple[list[list[int]], int]:
    """Most jewels on a simple path from the top-left to the bottom-right corner.

    Cells hold 0 (open), 1 (wall) or 2 (jewel). Returns a copy of the grid
    with the best path and the exit marked 3, and the number of jewels on it.
    """
    n = len(grid)
    if n == 0 or any(len(line) != n for line in grid):
        raise ValueError("the maze must be a non-empty square grid")

    best_jewels = 0
    best_path: list[Cell] = []
    path: list[Cell] = []
    visited: set[Cell] = set()
    exit_cell = (n - 1, n - 1)

    def explore(x: int, y: int, jewels: int) -> None:
        nonlocal best_jewels, best_path
        if (x, y) == exit_cell:
            if jewels > best_jewels:
                best_jewels = jewels
                best_path = list(path)
            return
        visited.add((x, y))
        path.append((x, y))
        for dx, dy in _MAZE_STEPS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < n and 0 <= ny < n and (nx, ny) not in visited and grid[nx][ny] != _WALL:
                explore(nx, ny, jewels + (1 if grid[nx][ny] == _JEWEL else 0))
        visited.discard((x, y))
        path.pop()

    explore(0, 0, 1 if grid[0][0] == _JEWEL else 0)

    marked = [list(line) for line in grid]
    for x, y in [*best_path, exit_cell]:
        marked[x][y] = _MARK
    return marked, best_jewels


def laughing_bomb_time(grid: Sequence[Sequence[int]], start: Cell) -> int:
    """Time for laughter to reach every connected 1-cell from a 1-based start.

    The start laughs at time 1 and each step spreads to the four neighbours.
    """
    row, col = start[0] - 1, start[1] - 1
    if not _inside(grid, row, col):
        raise ValueError(f"start {start} lies outside the grid")
    times = {(row, col): 1}
    queue: deque[Cell] = deque([(row, col)])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _NEIGHBOURS:
            nx, ny = x + dx, y + dy
            if _inside(grid, nx, ny) and (nx, ny) not in times and grid[nx][ny] == 1:
                times[(nx, ny)] = times[(x, y)] + 1
                queue.append((nx, ny))
    return max(times.values())