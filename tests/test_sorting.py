from collections import deque
from itertools import permutations
import random

import pytest

from pushswap.sorting import (
    best_sort,
    max_bits,
    radix_sort,
    selection_sort,
    sort_five,
    sort_three,
)
from pushswap.stacks import Node, Stacks, build_stacks


def replay(values, moves):
    stacks = build_stacks(values)
    for move in moves:
        stacks.apply(move)
    return stacks


def sample(size, seed):
    rng = random.Random(seed)
    return rng.sample(range(-1000, 1000), size)


def test_max_bits_values():
    assert max_bits([]) == 0
    assert max_bits([0, 1]) == 1
    assert max_bits([5, 2]) == 3


@pytest.mark.parametrize("size,seed", [(2, 1), (4, 2), (10, 3), (50, 4), (100, 5)])
def test_radix_sort_sorts(size, seed):
    values = sample(size, seed)
    stacks = build_stacks(values)
    moves = radix_sort(stacks)
    assert stacks.values() == sorted(values)
    assert not stacks.b
    assert moves.count("pb") == moves.count("pa")
    bits = max_bits(stacks.indexes())
    assert moves.count("pb") + moves.count("ra") == bits * size
    assert replay(values, moves).values() == sorted(values)


@pytest.mark.parametrize("size,seed", [(2, 6), (4, 7), (10, 8), (30, 9)])
def test_selection_sort_sorts(size, seed):
    values = sample(size, seed)
    stacks = build_stacks(values)
    moves = selection_sort(stacks)
    assert stacks.values() == sorted(values)
    assert not stacks.b
    assert moves.count("pb") == size
    assert moves.count("pa") == size
    assert set(moves) <= {"pb", "pa", "ra"}


@pytest.mark.parametrize("size,seed", [(2, 10), (4, 11), (6, 12), (20, 13), (100, 14)])
def test_best_sort_uses_cheaper_strategy(size, seed):
    values = sample(size, seed)
    stacks = build_stacks(values)
    cheapest = min(
        len(selection_sort(stacks.copy())), len(radix_sort(stacks.copy()))
    )
    moves = best_sort(stacks)
    assert len(moves) == cheapest
    assert stacks.values() == sorted(values)
    assert replay(values, moves).values() == sorted(values)


def test_copy_is_left_untouched_by_sort():
    values = sample(8, 15)
    stacks = build_stacks(values)
    snapshot = stacks.copy()
    radix_sort(snapshot)
    assert stacks.values() == values


@pytest.mark.parametrize("values", list(permutations([10, 20, 30])))
def test_sort_three_every_order(values):
    stacks = build_stacks(values)
    moves = sort_three(stacks, 0)
    assert stacks.values() == [10, 20, 30]
    assert len(moves) <= 2
    assert replay(values, moves).values() == [10, 20, 30]


def test_sort_three_sorted_needs_nothing():
    stacks = build_stacks([1, 2, 3])
    assert sort_three(stacks, 0) == []
    assert stacks.values() == [1, 2, 3]


def test_sort_three_reverse_order():
    stacks = build_stacks([3, 2, 1])
    assert sort_three(stacks, 0) == ["ra", "sa"]


def test_sort_three_with_base():
    stacks = Stacks(a=deque([Node(30, 4), Node(10, 2), Node(20, 3)]), size=3)
    moves = sort_three(stacks, 2)
    assert moves == ["ra"]
    assert stacks.values() == [10, 20, 30]


@pytest.mark.parametrize("values", list(permutations([5, -3, 8, 0, 2])))
def test_sort_five_every_order(values):
    stacks = build_stacks(values)
    moves = sort_five(stacks)
    assert stacks.values() == sorted(values)
    assert not stacks.b
    assert moves[-2:] == ["pa", "pa"]
    assert replay(values, moves).values() == sorted(values)