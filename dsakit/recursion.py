"""Backtracking generators: subsets, balanced parentheses, combination sums."""

from __future__ import annotations

from collections.abc import Sequence


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return every subset, taking each element before leaving it out."""
    items = list(nums)
    result: list[list[int]] = []

    def walk(index: int, chosen: list[int]) -> None:
        if index == len(items):
            result.append(list(chosen))
            return
        chosen.append(items[index])
        walk(index + 1, chosen)
        chosen.pop()
        walk(index + 1, chosen)

    walk(0, [])
    return result


def generate_parenthesis(n: int) -> list[str]:
    """Return every well-formed string of ``n`` pairs of parentheses."""
    result: list[str] = []

    def walk(current: str, opened: int, closed: int) -> None:
        if len(current) == 2 * n:
            result.append(current)
            return
        if opened < n:
            walk(current + "(", opened + 1, closed)
        if closed < opened:
            walk(current + ")", opened, closed + 1)

    walk("", 0, 0)
    return result


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return every combination of candidates, reusable, that sums to ``target``."""
    items = list(candidates)
    if any(value <= 0 for value in items):
        raise ValueError("candidates must be positive")
    result: list[list[int]] = []

    def walk(index: int, remaining: int, chosen: list[int]) -> None:
        if index == len(items):
            if remaining == 0:
                result.append(list(chosen))
            return
        if items[index] <= remaining:
            chosen.append(items[index])
            walk(index, remaining - items[index], chosen)
            chosen.pop()
        walk(index + 1, remaining, chosen)

    walk(0, target, [])
    return result