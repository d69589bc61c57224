"""Linear and binary search over sequences."""

from __future__ import annotations

from typing import Any, Sequence


def linear_search(items: Sequence[Any], element: Any) -> int:
    """Return the index of the first occurrence of ``element``, or -1."""
    for index, value in enumerate(items):
        if value == element:
            return index
    return -1


def binary_search(items: Sequence[Any], element: Any) -> int:
    """Return an index of ``element`` in the ascending ``items``, or -1."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        value = items[mid]
        if value == element:
            return mid
        if value > element:
            high = mid - 1
        else:
            low = mid + 1
    return -1