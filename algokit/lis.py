"""Longest strictly increasing subsequence."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def lis_length_dp(nums: Sequence[int]) -> int:
    """Return the length of the longest increasing subsequence in O(n^2)."""
    lengths: list[int] = []
    for i, value in enumerate(nums):
        lengths.append(
            1 + max((lengths[j] for j in range(i) if nums[j] < value), default=0)
        )
    return max(lengths, default=0)


def lis_length(nums: Sequence[int]) -> int:
    """Return the length of the longest increasing subsequence in O(n log n)."""
    tails: list[int] = []
    for value in nums:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def longest_increasing_subsequence(nums: Sequence[int]) -> list[int]:
    """Return one longest strictly increasing subsequence of ``nums``."""
    if not nums:
        return []

    lengths = [1] * len(nums)
    parents: list[int | None] = [None] * len(nums)
    for i, value in enumerate(nums):
        for j in range(i):
            if nums[j] < value and lengths[j] + 1 > lengths[i]:
                lengths[i] = lengths[j] + 1
                parents[i] = j

    best_length = max(lengths)
    current: int | None = lengths.index(best_length)
    result: list[int] = []
    while current is not None:
        result.append(nums[current])
        current = parents[current]
    result.reverse()
    return result