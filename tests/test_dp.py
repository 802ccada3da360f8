import pytest

from algopuzzles.dp import (
    burst_balloons,
    burst_balloons_edge,
    fisherman_min_distance,
    max_coins_with_bomb,
    oil_mine_min_difference,
    tsp_min_cost,
)


def test_burst_balloons_known_example():
    assert burst_balloons([3, 1, 5, 8]) == 167


def test_burst_balloons_single():
    assert burst_balloons([7]) == 7


def test_burst_balloons_empty():
    assert burst_balloons([]) == 0


def test_burst_balloons_reversal_symmetric():
    values = [2, 9, 4, 1, 6]
    assert burst_balloons(values) == burst_balloons(values[::-1])


def test_burst_balloons_edge_single():
    assert burst_balloons_edge([7]) == 7


def test_burst_balloons_edge_reversal_symmetric():
    values = [1, 2, 3, 4]
    assert burst_balloons_edge(values) == burst_balloons_edge(values[::-1])


MATRIX = [
    [0, 10, 15, 20],
    [5, 0, 9, 10],
    [6, 13, 0, 12],
    [8, 8, 9, 0],
]


def test_tsp_single_city():
    assert tsp_min_cost([[4]]) == 4


def test_tsp_empty_raises():
    with pytest.raises(ValueError):
        tsp_min_cost([])


def test_tsp_no_worse_than_fixed_tour():
    order = [0, 1, 2, 3, 0]
    fixed = sum(MATRIX[a][b] for a, b in zip(order, order[1:]))
    assert tsp_min_cost(MATRIX) <= fixed


def test_tsp_scales_linearly():
    doubled = [[2 * x for x in row] for row in MATRIX]
    assert tsp_min_cost(doubled) == 2 * tsp_min_cost(MATRIX)


def test_tsp_relabel_invariant():
    perm = [0, 3, 1, 2]
    relabeled = [[MATRIX[perm[i]][perm[j]] for j in range(4)] for i in range(4)]
    assert tsp_min_cost(relabeled) == tsp_min_cost(MATRIX)


def test_fisherman_single_at_gate():
    assert fisherman_min_distance(5, [3], [1]) == 1


def test_fisherman_gate_order_irrelevant():
    first = fisherman_min_distance(10, [1, 5, 10], [2, 1, 3])
    second = fisherman_min_distance(10, [10, 1, 5], [3, 2, 1])
    assert first == second


def test_fisherman_more_people_costs_more():
    fewer = fisherman_min_distance(8, [2, 4, 7], [1, 1, 1])
    more = fisherman_min_distance(8, [2, 4, 7], [2, 1, 1])
    assert more > fewer


def test_fisherman_too_many_raises():
    with pytest.raises(ValueError):
        fisherman_min_distance(3, [1, 2, 3], [2, 1, 1])


def test_fisherman_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        fisherman_min_distance(5, [1, 2], [1])


def test_oil_too_few_mines():
    assert oil_mine_min_difference(4, [1, 2, 3]) == -1


def test_oil_rotation_invariant():
    mines = [6, 13, 10, 2, 7]
    rotated = mines[2:] + mines[:2]
    assert oil_mine_min_difference(2, mines) == oil_mine_min_difference(2, rotated)


def test_oil_reversal_invariant():
    mines = [4, 9, 1, 7, 3, 5]
    assert oil_mine_min_difference(3, mines) == oil_mine_min_difference(3, mines[::-1])


def test_oil_result_bounded():
    mines = [6, 13, 10, 2, 7]
    result = oil_mine_min_difference(2, mines)
    assert 0 <= result <= sum(mines)


def test_bomb_all_coins():
    grid = [[1] * 5 for _ in range(4)]
    assert max_coins_with_bomb(grid) == len(grid)


def test_bomb_clears_blocking_row():
    coins = [[1] * 5 for _ in range(3)]
    grid = coins + [[2] * 5]
    assert max_coins_with_bomb(grid) == len(coins)


def test_bomb_removing_enemies_never_hurts():
    grid = [
        [0, 1, 2, 1, 0],
        [2, 2, 1, 2, 2],
        [1, 0, 2, 0, 1],
        [2, 1, 0, 1, 2],
        [0, 2, 2, 2, 0],
        [1, 0, 1, 0, 1],
    ]
    peaceful = [[0 if c == 2 else c for c in row] for row in grid]
    result = max_coins_with_bomb(grid)
    assert result <= max_coins_with_bomb(peaceful) <= len(grid)


def test_bomb_rejects_wrong_width():
    with pytest.raises(ValueError):
        max_coins_with_bomb([[1, 1, 1]])