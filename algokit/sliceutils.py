"""Small helpers for lists of integers."""

from __future__ import annotations

from collections.abc import Iterable


def find_max(numbers: Iterable[int]) -> int:
    """Return the largest value, or 0 when there are no values."""
    return max(numbers, default=0)


def remove_duplicates(numbers: Iterable[int]) -> list[int]:
    """Return the values with repeats dropped, keeping first-seen order."""
    return list(dict.fromkeys(numbers))


def reverse_slice(items: Iterable[int]) -> list[int]:
    """Return a new list holding the values in reverse order."""
    return list(items)[::-1]


def filter_even(numbers: Iterable[int]) -> list[int]:
    """Return a new list holding only the even values, in order."""
    return [number for number in numbers if number % 2 == 0]