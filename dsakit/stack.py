"""Stack and two-pointer problems: bracket matching and trapped rain water."""

from __future__ import annotations

from collections.abc import Sequence

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = set(_PAIRS.values())


def is_valid(s: str) -> bool:
    """Return True when every bracket in ``s`` is closed in the right order.

    Any character that is not an opening bracket is treated as a closer,
    so strings holding other characters are not valid.
    """
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
        elif not stack or stack.pop() != _PAIRS.get(ch):
            return False
    return not stack


def trap(height: Sequence[int]) -> int:
    """Return the units of rain water held between the bars of ``height``."""
    left, right = 0, len(height) - 1
    max_left = max_right = 0
    water = 0
    while left <= right:
        if height[left] <= height[right]:
            if height[left] >= max_left:
                max_left = height[left]
            else:
                water += max_left - height[left]
            left += 1
        else:
            if height[right] >= max_right:
                max_right = height[right]
            else:
                water += max_right - height[right]
            right -= 1
    return water