# algopuzzles

Solvers for classic algorithmic interview puzzles. Each solver is a plain
Python function that takes lists, tuples and integers and returns a value.
Bad input raises `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algopuzzles.search`: binary search and greedy

- `can_place(positions, gap, count)`: greedy check that `count` items fit with
  at least `gap` between neighbours, sweeping from the first position.
- `max_min_distance(positions, count)`: the largest gap at which `count` items
  can be placed (the "aggressive cows" problem), or `-1`. The positions must be
  given in ascending order.
- `smallest_root(a, b, c, x)`: the smallest `n` in `1..1_000_000` with
  `a*n + b*n*log2(n) + c*n**3 >= x`, or `-1`.
- `min_throws(pots, k)`: stones a crow needs in the worst case to be sure of
  filling `k` pots. `k` must lie between 0 and the number of pots.
- `min_crossing_time(times)`: the bridge-and-torch crossing time, with at most
  two people crossing at once.

### `algopuzzles.dp`: dynamic programming and exhaustive search

- `burst_balloons(values)`: most points when a burst scores
  `left * self * right`.
- `burst_balloons_edge(values)`: most points when a burst scores
  `left * right` and the last balloon scores its own value.
- `tsp_min_cost(matrix)`: cheapest closed tour from city 0 over a cost matrix.
  Raises `ValueError` for an empty matrix or when no tour exists.
- `fisherman_min_distance(spots, gates, fishermen)`: least total walking
  distance to seat every fisherman. Gates are 1-based spot numbers and may be
  opened in any order.
- `oil_mine_min_difference(companies, mines)`: smallest spread between company
  totals when a ring of mines is cut into contiguous runs. Returns `-1` when
  there are fewer mines than companies.
- `max_coins_with_bomb(grid)`: most coins a plane collects flying up a
  five-wide grid of 0 (empty), 1 (coin) and 2 (enemy). The plane may use one
  bomb, which clears the enemies from the five rows ahead.

### `algopuzzles.grid`: grid traversal

- `knight_distance(rows, cols, start, target)`: fewest knight moves on a
  1-based board, or `-1`.
- `endoscopy_reach(grid, start, length)`: number of pipe cells (types 1–7) an
  endoscope of the given length reaches from `start`.
- `frog_jump_cost(grid, start, target)`: fewest column changes for a frog
  moving over cells holding 1. Moves within a column are free. An unreachable
  target gives `0`.
- `jewel_maze(grid)`: most jewels on a simple path from the top-left to the
  bottom-right corner of a square maze. Returns the grid with the path marked
  `3`, and the jewel count.
- `laughing_bomb_time(grid, start)`: time for laughter to spread from a 1-based
  start to every connected 1-cell. The start laughs at time 1.

### `algopuzzles.graphs`: graph problems

- `bipartite_partition(matrix)`: vertices of one colour in a two-colouring of
  an adjacency matrix, or `None` when the graph is not bipartite.
- `min_cycle_undirected(n, edges)` and `min_cycle_directed(n, edges)`: sorted
  nodes of the cycle with the smallest node sum found, or `None`. Nodes are
  numbered `1..n`.
- `doctor_probability(n, edges, time)`: the division with the highest
  accumulated probability after `time` minutes, returned with that
  probability. One step takes ten minutes. Ties go to the lowest division.
- `wormhole_min_cost(source, target, wormholes)`: cheapest trip on a plane.
  Walking costs Manhattan distance, and each wormhole `(entry, exit, cost)`
  can be used in both directions.

### `algopuzzles.puzzles`: assorted puzzles

- `restroom_occupancy(n)`: the state of `n` stalls after each arrival, as
  strings of `_` (free) and `X` (taken).
- `count_valid_numbers(low, high, limit, banned)`: how many numbers in
  `[low, high]` contain fewer than `limit` banned digits.
- `Node`, `parse_tree(text)` and `sum_at_depth(root, depth)`: read a bracketed
  binary tree such as `(1(2()())(3()()))` and sum the values at one depth.

## Example

```python
from algopuzzles.search import max_min_distance
from algopuzzles.puzzles import parse_tree, sum_at_depth

print(max_min_distance([1, 2, 4, 8, 9], 3))   # 3

root = parse_tree("(0(5(6()())(4()(9()())))(7(1()())(3()())))")
print(sum_at_depth(root, 2))                  # 6 + 4 + 1 + 3 = 14
```

## Command line

Installing the package provides an `algopuzzles` command with two
subcommands. Both read whitespace-separated integers from standard input.

```
echo "24 12943 3 3 1 3 5" | algopuzzles ominous
```

`ominous` reads `low high limit`, then a count of banned digits, then the
digits. It prints how many numbers in the range are valid.

```
echo 5 | algopuzzles restroom
```

`restroom` reads a stall count. It prints the stalls after each arrival, one
line per arrival, with a space after each stall.

## Limitations

Only the stall and banned-digit puzzles can be run from the command line. To
use the other solvers, call the functions from Python. The package does not
read their puzzle input formats and has no batch or test-case runner.