import itertools

import pytest

from algokit.dp import climb_stairs, fib, max_value, min_coins, min_jumps, tsp


def test_fib_base_cases():
    assert fib(0) == 0
    assert fib(1) == 1


def test_fib_small_value():
    assert fib(10) == 55


@pytest.mark.parametrize("n", range(2, 25))
def test_fib_recurrence(n):
    assert fib(n) == fib(n - 1) + fib(n - 2)


def test_climb_stairs_base_cases():
    assert climb_stairs(0) == 1
    assert climb_stairs(1) == 1


@pytest.mark.parametrize("n", range(2, 25))
def test_climb_stairs_recurrence(n):
    assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)


@pytest.mark.parametrize("n", range(0, 20))
def test_climb_stairs_matches_shifted_fibonacci(n):
    assert climb_stairs(n) == fib(n + 1)


def test_min_coins_example():
    assert min_coins([1, 2, 5], 11) == 3


def test_min_coins_zero_amount():
    assert min_coins([1, 2, 5], 0) == 0


@pytest.mark.parametrize("coin", [1, 2, 5])
def test_min_coins_single_coin(coin):
    assert min_coins([1, 2, 5], coin) == 1


@pytest.mark.parametrize("amount", range(0, 15))
def test_min_coins_only_ones(amount):
    assert min_coins([1], amount) == amount


def test_min_coins_unreachable():
    assert min_coins([2], 3) == -1
    assert min_coins([], 4) == -1


def test_min_coins_negative_amount():
    with pytest.raises(ValueError):
        min_coins([1, 2], -1)


def test_min_jumps_short_distance_returns_n():
    assert min_jumps(3, 5) == 3


def test_min_jumps_example():
    assert min_jumps(10, 3) == 4


@pytest.mark.parametrize("n", range(2, 12))
def test_min_jumps_unit_distance(n):
    assert min_jumps(n, 1) == n


def test_min_jumps_zero_distance_unreachable():
    assert min_jumps(7, 0) == -1


@pytest.mark.parametrize("n", range(5, 30))
def test_min_jumps_never_increases_with_longer_reach(n):
    assert min_jumps(n, 4) <= min_jumps(n, 3)


def test_max_value_zero_picks():
    assert max_value([4, 9, 2], 0) == 0


def test_max_value_one_pick():
    values = [3, -1, 7, -5, 2]
    assert max_value(values, 1) == max(values)


def test_max_value_order_independent():
    values = [5, 1, 8, 3, 6]
    assert max_value(values, 2) == max_value(values[::-1], 2)


def test_max_value_negative_k():
    with pytest.raises(ValueError):
        max_value([1, 2], -1)


def test_tsp_single_city():
    assert tsp([[0]]) == 0


def test_tsp_two_cities():
    assert tsp([[0, 6], [9, 0]]) == 6 + 9


def test_tsp_invariant_under_relabelling():
    graph = [
        [0, 10, 15, 20],
        [10, 0, 35, 25],
        [15, 35, 0, 30],
        [20, 25, 30, 0],
    ]
    expected = tsp(graph)
    for perm in itertools.permutations([1, 2, 3]):
        order = [0, *perm]
        relabelled = [[graph[order[i]][order[j]] for j in range(4)] for i in range(4)]
        assert tsp(relabelled) == expected


def test_tsp_empty_graph():
    with pytest.raises(ValueError):
        tsp([])