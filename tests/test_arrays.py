from collections import deque
from itertools import permutations

import pytest

from dsakit.arrays import (
    min_operations,
    move_zeroes,
    next_permutation,
    remove_duplicates,
    rotate_left,
    rotate_right,
    three_sum,
)


def test_min_operations_example():
    assert min_operations([5, 2, 5, 4, 5], 2) == 2


def test_min_operations_below_k_is_impossible():
    assert min_operations([2, 1, 2], 2) == -1


def test_min_operations_counts_distinct_above_k():
    nums = [9, 7, 7, 8, 9]
    assert min_operations(nums, 1) == len(set(nums))


def test_min_operations_all_equal_k():
    assert min_operations([4, 4, 4], 4) == 0


def test_min_operations_empty_raises():
    with pytest.raises(ValueError):
        min_operations([], 1)


def test_three_sum_example():
    assert three_sum([-1, 0, 1, 2, -1, -4]) == [[-1, -1, 2], [-1, 0, 1]]


def test_three_sum_invariants():
    nums = [-4, -2, -2, -1, 0, 0, 0, 1, 2, 2, 3, 4, 6]
    result = three_sum(nums)
    assert result
    assert all(sum(t) == 0 for t in result)
    assert all(t == sorted(t) for t in result)
    assert len({tuple(t) for t in result}) == len(result)
    assert result == sorted(result)


def test_three_sum_does_not_mutate_input():
    nums = [3, -3, 0]
    three_sum(nums)
    assert nums == [3, -3, 0]


def test_three_sum_no_match():
    assert three_sum([1, 2, 3]) == []


def test_move_zeroes_keeps_order():
    nums = [0, 1, 0, 3, 12, 0, -5]
    result = move_zeroes(nums)
    assert len(result) == len(nums)
    assert result[: len(nums) - nums.count(0)] == [v for v in nums if v]
    assert result[len(nums) - nums.count(0):] == [0] * nums.count(0)


def test_remove_duplicates_example():
    assert remove_duplicates([1, 1, 2, 2, 2, 3, 3]) == [1, 2, 3]


def test_remove_duplicates_matches_set_for_sorted():
    nums = sorted([5, 1, 5, 2, 9, 9, 9, 0])
    assert remove_duplicates(nums) == sorted(set(nums))


def test_remove_duplicates_empty():
    assert remove_duplicates([]) == []


@pytest.mark.parametrize("k", [0, 1, 2, 3, 7, 10])
def test_rotate_right_matches_deque(k):
    nums = [1, 2, 3, 4, 5, 6, 7]
    expected = deque(nums)
    expected.rotate(k)
    assert rotate_right(nums, k) == list(expected)


@pytest.mark.parametrize("k", [0, 2, 5, 9])
def test_rotate_left_matches_deque(k):
    nums = [1, 2, 3, 4, 5, 6, 7]
    expected = deque(nums)
    expected.rotate(-k)
    assert rotate_left(nums, k) == list(expected)


def test_rotate_round_trip():
    nums = [4, 8, 15, 16, 23, 42]
    assert rotate_left(rotate_right(nums, 4), 4) == nums


def test_rotate_empty():
    assert rotate_right([], 3) == []


@pytest.mark.parametrize(
    "nums",
    [[1, 2, 3], [3, 2, 1], [1, 1, 5], [2, 1, 5, 4, 3, 0, 0], [1, 3, 2, 2]],
)
def test_next_permutation_follows_sorted_order(nums):
    ordered = sorted(set(permutations(nums)))
    index = ordered.index(tuple(nums))
    expected = ordered[(index + 1) % len(ordered)]
    assert next_permutation(nums) == list(expected)


def test_next_permutation_cycles_through_all():
    start = [1, 2, 3, 4]
    seen = [tuple(start)]
    current = next_permutation(start)
    while current != start:
        seen.append(tuple(current))
        current = next_permutation(current)
    assert sorted(seen) == sorted(permutations(start))