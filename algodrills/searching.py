"""Binary searches over sorted, rotated and row-sorted sequences."""

from __future__ import annotations

from bisect import bisect_left
from typing import Sequence


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted sequence of distinct values, or -1."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[lo] <= nums[mid]:
            if nums[lo] <= target < nums[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        elif nums[mid] < target <= nums[hi]:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def find_min_rotated(nums: Sequence[int]) -> int:
    """Smallest value of a rotated sorted sequence of distinct values."""
    if not nums:
        raise ValueError("sequence is empty")
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if nums[mid] < nums[hi]:
            hi = mid
        else:
            lo = mid + 1
    return nums[lo]


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` occurs in a rotated sorted sequence that may repeat values."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return True
        if nums[lo] == nums[mid] == nums[hi]:
            lo += 1
            hi -= 1
        elif nums[lo] <= nums[mid]:
            if nums[lo] <= target < nums[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        elif nums[mid] < target <= nums[hi]:
            lo = mid + 1
        else:
            hi = mid - 1
    return False


def find_min_rotated_with_duplicates(nums: Sequence[int]) -> int:
    """Smallest value of a rotated sorted sequence that may repeat values."""
    if not nums:
        raise ValueError("sequence is empty")
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if nums[mid] == nums[hi]:
            hi -= 1
        elif nums[mid] < nums[hi]:
            hi = mid
        else:
            lo = mid + 1
    return nums[lo]


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a sorted sequence, or where it would be inserted."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            hi = mid - 1
        else:
            lo = mid + 1
    return lo


def single_non_duplicate(nums: Sequence[int]) -> int:
    """The one value appearing once in a sorted sequence where all others appear twice."""
    n = len(nums)
    if n == 0:
        raise ValueError("sequence is empty")
    if n == 1 or nums[0] != nums[1]:
        return nums[0]
    if nums[-1] != nums[-2]:
        return nums[-1]
    lo, hi = 1, n - 2
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] != nums[mid + 1] and nums[mid] != nums[mid - 1]:
            return nums[mid]
        pair_starts_left = (mid % 2 == 1 and nums[mid - 1] == nums[mid]) or (
            mid % 2 == 0 and nums[mid] == nums[mid + 1]
        )
        if pair_starts_left:
            lo = mid + 1
        else:
            hi = mid - 1
    raise ValueError("no value appears exactly once")


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` occurs in a matrix whose rows are each sorted."""
    for row in matrix:
        if not row or target < row[0] or target > row[-1]:
            continue
        index = bisect_left(row, target)
        if index < len(row) and row[index] == target:
            return True
    return False