"""Array algorithms: counting, two-pointer searches, rotations and permutations."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby


def min_operations(nums: Sequence[int], k: int) -> int:
    """Return the number of operations needed to make every value equal to ``k``.

    Each operation lowers every value above some valid threshold to that
    threshold. The answer is -1 when a value is already below ``k``.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    distinct = set(nums)
    smallest = min(distinct)
    if smallest < k:
        return -1
    return len(distinct) - (1 if smallest == k else 0)


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct triplet of values that sums to zero.

    Triplets come out in ascending order, each triplet itself sorted.
    """
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i and first == values[i - 1]:
            continue
        lo, hi = i + 1, n - 1
        while lo < hi:
            total = first + values[lo] + values[hi]
            if total < 0:
                lo += 1
            elif total > 0:
                hi -= 1
            else:
                result.append([first, values[lo], values[hi]])
                lo += 1
                hi -= 1
                while lo < hi and values[lo] == values[lo - 1]:
                    lo += 1
                while lo < hi and values[hi] == values[hi + 1]:
                    hi -= 1
    return result


def move_zeroes(nums: Sequence[int]) -> list[int]:
    """Return the values with every zero moved to the end, order otherwise kept."""
    non_zero = [value for value in nums if value != 0]
    return non_zero + [0] * (len(nums) - len(non_zero))


def remove_duplicates(nums: Sequence[int]) -> list[int]:
    """Return a sorted sequence with repeated values collapsed to one each."""
    return [value for value, _ in groupby(nums)]


def _rotated(nums: Sequence[int], split: int) -> list[int]:
    items = list(nums)
    if not items:
        return items
    split %= len(items)
    return items[split:] + items[:split]


def rotate_right(nums: Sequence[int], k: int) -> list[int]:
    """Return the values rotated ``k`` places to the right."""
    return _rotated(nums, -k)


def rotate_left(nums: Sequence[int], k: int) -> list[int]:
    """Return the values rotated ``k`` places to the left."""
    return _rotated(nums, k)


def next_permutation(nums: Sequence[int]) -> list[int]:
    """Return the next lexicographic permutation, wrapping to the smallest."""
    items = list(nums)
    pivot = next(
        (i for i in range(len(items) - 2, -1, -1) if items[i] < items[i + 1]),
        None,
    )
    if pivot is None:
        return items[::-1]
    swap = next(j for j in range(len(items) - 1, pivot, -1) if items[j] > items[pivot])
    items[pivot], items[swap] = items[swap], items[pivot]
    items[pivot + 1:] = reversed(items[pivot + 1:])
    return items