import random

import pytest

from pushswap.indexer import rank_values


def test_small_example():
    assert rank_values([30, 10, 20]) == [2, 0, 1]


def test_empty():
    assert rank_values([]) == []


def test_sorted_input_ranks_in_order():
    values = [-5, 0, 3, 8, 100]
    assert rank_values(values) == list(range(len(values)))


@pytest.mark.parametrize("seed", range(5))
def test_ranks_are_a_permutation_that_orders_values(seed):
    rng = random.Random(seed)
    values = rng.sample(range(-1000, 1000), 50)
    ranks = rank_values(values)
    assert sorted(ranks) == list(range(len(values)))
    ordered = [value for _, value in sorted(zip(ranks, values))]
    assert ordered == sorted(values)


def test_extreme_values():
    values = [2147483647, -2147483648]
    assert rank_values(values) == [1, 0]