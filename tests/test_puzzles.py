import pytest

from algopuzzles.puzzles import (
    Node,
    count_valid_numbers,
    parse_tree,
    restroom_occupancy,
    sum_at_depth,
)


def test_restroom_empty():
    assert restroom_occupancy(0) == []


def test_restroom_single():
    assert restroom_occupancy(1) == ["X"]


def test_restroom_three_stalls():
    assert restroom_occupancy(3) == ["_X_", "XX_", "XXX"]


@pytest.mark.parametrize("n", [2, 5, 8, 13])
def test_restroom_each_arrival_takes_one_stall(n):
    states = restroom_occupancy(n)
    assert len(states) == n
    for count, state in enumerate(states, start=1):
        assert len(state) == n
        assert state.count("X") == count
    assert states[-1] == "X" * n
    for before, after in zip(states, states[1:]):
        changed = [i for i, (a, b) in enumerate(zip(before, after)) if a != b]
        assert len(changed) == 1
        assert before[changed[0]] == "_"


def test_restroom_first_arrival_in_middle_leaning_left():
    assert restroom_occupancy(10)[0].index("X") == (10 - 1) // 2


def test_restroom_negative():
    with pytest.raises(ValueError):
        restroom_occupancy(-1)


def test_two_digit_numbers_all_valid():
    assert count_valid_numbers(10, 99, 3, [1, 3, 5]) == 99 - 10 + 1


@pytest.mark.parametrize("number", [111, 113, 115, 311, 331, 333, 511, 533, 555, 11223])
def test_invalid_numbers(number):
    assert count_valid_numbers(number, number, 3, [1, 3, 5]) == 0


def test_valid_number_from_example():
    assert count_valid_numbers(11222, 11222, 3, [1, 3, 5]) == 1


def test_count_bounded_by_range():
    result = count_valid_numbers(24, 12943, 3, [1, 3, 5])
    assert 0 < result <= 12943 - 24 + 1
    assert result < count_valid_numbers(24, 12943, 4, [1, 3, 5])


def test_empty_range():
    assert count_valid_numbers(50, 40, 1, [1]) == 0


def test_bad_banned_digit():
    with pytest.raises(ValueError):
        count_valid_numbers(1, 10, 1, [10])


def test_parse_tree_structure():
    root = parse_tree("(1(2()())(3()()))")
    assert root == Node(1, Node(2), Node(3))


def test_parse_empty_tree():
    assert parse_tree("()") is None


def test_sum_at_depth_levels():
    root = parse_tree("(1(2()())(3()()))")
    assert sum_at_depth(root, 0) == 1
    assert sum_at_depth(root, 1) == 5
    assert sum_at_depth(root, 2) == 0


def test_sum_over_all_depths_equals_total():
    root = parse_tree("(10(20(40()())())(30()(50()())))")
    assert sum(sum_at_depth(root, d) for d in range(5)) == 10 + 20 + 40 + 30 + 50


def test_sum_of_empty_tree():
    assert sum_at_depth(None, 0) == 0


@pytest.mark.parametrize("text", ["abc", "(1(2()())", "(x()())", "(1()()())", "(1)x"])
def test_parse_tree_rejects_bad_text(text):
    with pytest.raises(ValueError):
        parse_tree(text)