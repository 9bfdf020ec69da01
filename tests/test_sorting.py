import itertools
import random

import pytest

from pushswap.indexer import rank_values
from pushswap.sorting import (
    find_min_pos,
    max_index,
    radix_pass,
    radix_sort,
    sort_2,
    sort_3,
    sort_4,
    sort_5,
    sort_small,
)
from pushswap.stacks import Stacks

_VALID_OPS = {"sa", "ra", "rra", "pa", "pb"}


def _ranked(values):
    return Stacks(values, rank_values(values))


def _replay(values, operations):
    replay = Stacks(values)
    for op in operations:
        assert op in _VALID_OPS
        getattr(replay, op)()
    return replay


def _assert_solves(values, stacks):
    assert stacks.values() == sorted(values)
    assert list(stacks.b) == []
    replay = _replay(values, stacks.operations)
    assert replay.values() == sorted(values)
    assert list(replay.b) == []


def test_max_index_and_find_min_pos():
    s = _ranked([40, -3, 17, 8])
    assert max_index(s) == 3
    assert find_min_pos(s) == 1


def test_empty_stack_rejected():
    with pytest.raises(ValueError):
        max_index(Stacks([]))
    with pytest.raises(ValueError):
        find_min_pos(Stacks([]))


def test_sort_2():
    values = [9, 4]
    s = _ranked(values)
    sort_2(s)
    assert s.operations == ["sa"]
    _assert_solves(values, s)


@pytest.mark.parametrize("values", list(itertools.permutations([1, 2, 3])))
def test_sort_3_all_orders(values):
    s = _ranked(list(values))
    sort_3(s)
    _assert_solves(list(values), s)
    assert len(s.operations) <= 2


def test_sort_3_reverse_example():
    s = _ranked([3, 2, 1])
    sort_3(s)
    assert s.operations == ["sa", "rra"]


@pytest.mark.parametrize("values", list(itertools.permutations([10, 20, 30, 40])))
def test_sort_4_all_orders(values):
    s = _ranked(list(values))
    sort_4(s)
    _assert_solves(list(values), s)


@pytest.mark.parametrize("values", list(itertools.permutations([-2, 0, 5, 7, 11])))
def test_sort_5_all_orders(values):
    s = _ranked(list(values))
    sort_5(s)
    _assert_solves(list(values), s)


@pytest.mark.parametrize("size", range(0, 6))
def test_sort_small_sorted_input_does_nothing(size):
    values = list(range(size))
    s = _ranked(values)
    sort_small(s)
    assert s.operations == []
    assert s.values() == values


@pytest.mark.parametrize("values", list(itertools.permutations([3, 1, 4, 2, 5])))
def test_sort_small_five(values):
    s = _ranked(list(values))
    sort_small(s)
    _assert_solves(list(values), s)


def test_radix_pass_splits_on_bit():
    values = [4, 1, 3, 2]
    s = _ranked(values)
    radix_pass(s, 0)
    assert list(s.b) == []
    assert sorted(s.values()) == sorted(values)
    bits = [index & 1 for index in s.indices()]
    assert bits == sorted(bits)


def test_radix_sort_sorted_input():
    s = _ranked([1, 2, 3, 4, 5, 6, 7])
    assert radix_sort(s) == 0
    assert s.operations == []


@pytest.mark.parametrize("seed", range(6))
def test_radix_sort_random(seed):
    rng = random.Random(seed)
    values = rng.sample(range(-500, 500), rng.randint(6, 120))
    s = _ranked(values)
    passes = radix_sort(s)
    _assert_solves(values, s)
    assert passes == (len(values) - 1).bit_length()