import io
import itertools
import random

import pytest

from pushswap.sorting import (
    best_part_size,
    choose_in_b,
    decide_result,
    is_sorted,
    presort,
    push_swap,
    rank,
    search_opti,
    search_path,
    sort_stacks,
    sort_three,
)
from pushswap.stacks import Stacks


def _quiet(a=(), b=()):
    return Stacks(a, b, stream=io.StringIO())


def _replay(values, instructions):
    stacks = _quiet(values)
    for name in instructions:
        getattr(stacks, name)()
    return stacks


def test_rank_example():
    assert rank([42, -5, 7]) == [3, 1, 2]


def test_rank_preserves_order_and_covers_range():
    values = [900, -3, 15, 0, 77, -1000]
    ranks = rank(values)
    assert sorted(ranks) == list(range(1, len(values) + 1))
    for (v1, r1), (v2, r2) in itertools.combinations(zip(values, ranks), 2):
        assert (v1 < v2) == (r1 < r2)


def test_is_sorted():
    assert is_sorted([1, 2, 3]) is True
    assert is_sorted([2, 1]) is False
    assert is_sorted([]) is True
    assert is_sorted([5]) is True


@pytest.mark.parametrize("size", [1, 2, 3, 4, 9, 10, 16, 17, 100, 500])
def test_best_part_size_is_ceiling_root(size):
    part = best_part_size(size)
    assert part * part >= size
    assert part == 1 or (part - 1) * (part - 1) < size


def test_choose_in_b():
    stacks = _quiet(a=[1, 2], b=[3, 4])
    assert choose_in_b(stacks, 4) is True
    assert choose_in_b(stacks, 1) is False


def test_search_path_prefers_shorter_direction():
    assert search_path([5, 1, 2, 3], 3) == -1
    assert search_path([5, 1, 2, 3], 1) == 1
    assert search_path([5, 1, 2, 3], 5) == 0


def test_search_path_missing_value():
    with pytest.raises(ValueError):
        search_path([1, 2, 3], 9)


def test_decide_result_returns_one_of_inputs():
    assert decide_result(2, -5, 4, -6) == 2
    assert decide_result(7, -5, 3, -6) == 3
    assert decide_result(7, -1, 3, -6) == -1
    assert decide_result(7, -5, 6, -4) == -4


def test_search_opti_zero_when_top_in_band():
    stacks = _quiet(a=[5, 1, 2, 3, 9, 10, 8, 4, 6, 7])
    assert search_opti(stacks, 5, 10, 4) == 0


def test_search_opti_zero_for_small_stack():
    stacks = _quiet(a=[3, 1, 2])
    assert search_opti(stacks, 1, 3, 1) == 0


@pytest.mark.parametrize("perm", list(itertools.permutations([1, 2, 3])))
def test_sort_three_sorts_every_permutation(perm):
    stacks = _quiet(perm)
    sort_three(stacks)
    assert list(stacks.a) == [1, 2, 3]
    assert len(stacks.history) <= 2


def test_presort_leaves_three_largest_sorted():
    ranks = rank(random.Random(3).sample(range(1000), 30))
    stacks = _quiet(ranks)
    presort(stacks)
    assert list(stacks.a) == sorted(ranks)[-3:]
    assert sorted(stacks.b) == sorted(ranks)[:-3]


def test_sort_stacks_writes_its_history():
    stream = io.StringIO()
    stacks = Stacks(rank([4, 3, 2, 1, 8, 6, 5, 7]), stream=stream)
    presort(stacks)
    sort_stacks(stacks)
    assert list(stacks.a) == list(range(1, 9))
    assert not stacks.b
    assert stream.getvalue() == "".join(name + "\n" for name in stacks.history)


def test_push_swap_sorted_input_needs_nothing():
    assert push_swap([1, 5, 9, 12]) == []


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_push_swap_all_permutations(size):
    for perm in itertools.permutations(range(size)):
        instructions = push_swap(perm)
        stacks = _replay(perm, instructions)
        assert list(stacks.a) == sorted(perm)
        assert not stacks.b


@pytest.mark.parametrize("size, seed", [(10, 1), (25, 2), (100, 3), (150, 4)])
def test_push_swap_random_inputs(size, seed):
    values = random.Random(seed).sample(range(-10000, 10000), size)
    stacks = _replay(values, push_swap(values))
    assert list(stacks.a) == sorted(values)
    assert not stacks.b