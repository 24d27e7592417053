import pytest

from dsakit.recursion import combination_sum, generate_parenthesis, subsets


def _balanced(text):
    depth = 0
    for ch in text:
        depth += 1 if ch == "(" else -1
        if depth < 0:
            return False
    return depth == 0


def test_subsets_count_and_uniqueness():
    nums = [1, 2, 3, 4]
    result = subsets(nums)
    assert len(result) == 2 ** len(nums)
    assert len({tuple(s) for s in result}) == len(result)


def test_subsets_order_takes_before_skips():
    nums = [7, 8, 9]
    result = subsets(nums)
    assert result[0] == nums
    assert result[-1] == []


def test_subsets_empty():
    assert subsets([]) == [[]]


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_generate_parenthesis_all_balanced(n):
    result = generate_parenthesis(n)
    assert all(len(s) == 2 * n and _balanced(s) for s in result)
    assert len(set(result)) == len(result)
    assert result[0] == "(" * n + ")" * n


def test_generate_parenthesis_three_count():
    assert len(generate_parenthesis(3)) == 5


def test_generate_parenthesis_sorted_order():
    result = generate_parenthesis(4)
    assert result == sorted(result)


def test_combination_sum_example():
    assert combination_sum([2, 3, 6, 7], 7) == [[2, 2, 3], [7]]


def test_combination_sum_invariants():
    candidates = [2, 3, 5]
    target = 8
    result = combination_sum(candidates, target)
    assert result
    assert all(sum(c) == target for c in result)
    assert all(set(c) <= set(candidates) for c in result)
    assert len({tuple(c) for c in result}) == len(result)


def test_combination_sum_unreachable():
    assert combination_sum([4, 6], 5) == []


def test_combination_sum_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum([0, 1], 3)