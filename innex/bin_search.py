"""Binary searches over sorted sequences."""

from collections.abc import Sequence
from typing import Any, Optional


def _bounds(arr: Sequence[Any]) -> tuple[int, int]:
    if not arr:
        raise ValueError("cannot search an empty sequence")
    return 0, len(arr) - 1


def bin_search(arr: Sequence[Any], target: Any) -> Optional[int]:
    """Return the index of an element equal to ``target``, or None."""
    left, right = _bounds(arr)
    while left <= right:
        mid = left + (right - left) // 2
        value = arr[mid]
        if value < target:
            left = mid + 1
        elif value > target:
            right = mid - 1
        else:
            return mid
    return None


def nomore_tar(arr: Sequence[Any], target: Any) -> Optional[int]:
    """Return the index of the largest element not greater than ``target``.

    An element equal to ``target`` is returned as soon as it is met.
    """
    left, right = _bounds(arr)
    best: Optional[int] = None
    while left <= right:
        mid = left + (right - left) // 2
        value = arr[mid]
        if value < target:
            best = mid
            left = mid + 1
        elif value > target:
            right = mid - 1
        else:
            return mid
    return best


def noless_tar(arr: Sequence[Any], target: Any) -> Optional[int]:
    """Return the index of the smallest element not less than ``target``.

    An element equal to ``target`` is returned as soon as it is met.
    """
    left, right = _bounds(arr)
    best: Optional[int] = None
    while left <= right:
        mid = left + (right - left) // 2
        value = arr[mid]
        if value < target:
            left = mid + 1
        elif value > target:
            best = mid
            right = mid - 1
        else:
            return mid
    return best