"""Counting, partitioning and rearranging operations on integer lists."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate, groupby, pairwise
from typing import MutableSequence, Sequence


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as decimal digits, most significant first."""
    result = list(digits)
    for index in range(len(result) - 1, -1, -1):
        if result[index] < 9:
            result[index] += 1
            return result
        result[index] = 0
    return [1, *result]


def max_profit(prices: Sequence[int]) -> int:
    """Best gain from one buy followed by one later sale, or 0."""
    lowest = None
    profit = 0
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        else:
            profit = max(profit, price - lowest)
    return profit


def majority_element(nums: Sequence[int]) -> int:
    """The value occurring more than ``len(nums) // 2`` times."""
    threshold = len(nums) // 2
    for value, count in Counter(nums).items():
        if count > threshold:
            return value
    raise ValueError("no majority element")


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """Tell whether the sequence is a rotation of a non-decreasing sequence."""
    values = list(nums)
    drops = sum(a > b for a, b in pairwise(values + values[:1]))
    return drops <= 1


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate the list right by ``k`` steps, in place."""
    n = len(nums)
    if n == 0:
        return
    k %= n
    if k:
        nums[:] = list(nums[-k:]) + list(nums[:-k])


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Tell whether any value occurs more than once."""
    seen = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def _interleave(first: list[int], second: list[int], total: int, what: str) -> list[int]:
    if len(first) != (total + 1) // 2:
        raise ValueError(f"cannot interleave: unbalanced counts of {what}")
    result = [0] * total
    result[0::2] = first
    result[1::2] = second
    return result


def rearrange_by_sign(nums: Sequence[int]) -> list[int]:
    """Alternate non-negative and negative values, keeping each group's order."""
    positives = [value for value in nums if value >= 0]
    negatives = [value for value in nums if value < 0]
    return _interleave(positives, negatives, len(nums), "positive and negative values")


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Values occurring more than ``len(nums) // 3`` times, by first appearance."""
    threshold = len(nums) // 3
    return [value for value, count in Counter(nums).items() if count > threshold]


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted list so its first k slots hold the distinct values; return k."""
    if not nums:
        return 0
    write = 0
    for value in nums[1:]:
        if value != nums[write]:
            write += 1
            nums[write] = value
    return write + 1


def missing_number(nums: Sequence[int]) -> int:
    """The value of ``0..len(nums)`` absent from ``nums``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Delete every occurrence of ``val`` in place and return the new length."""
    nums[:] = [value for value in nums if value != val]
    return len(nums)


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move zeros to the end in place, keeping the order of other values."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange in place into the next lexicographic permutation, wrapping to the first."""
    n = len(nums)
    pivot = next((i for i in range(n - 2, -1, -1) if nums[i] < nums[i + 1]), None)
    if pivot is None:
        nums.reverse()
        return
    successor = next(i for i in range(n - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1:] = list(nums[pivot + 1:])[::-1]


def find_disappeared_numbers(nums: Sequence[int]) -> list[int]:
    """Values in ``1..len(nums)`` that do not occur, in increasing order."""
    present = set(nums)
    return [value for value in range(1, len(nums) + 1) if value not in present]


def max_consecutive_ones(nums: Sequence[int]) -> int:
    """Length of the longest run of ones."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == 1),
        default=0,
    )


def max_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous slice."""
    if not nums:
        raise ValueError("sequence is empty")
    best = nums[0]
    current = 0
    for value in nums:
        current += value
        best = max(best, current)
        if current < 0:
            current = 0
    return best


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Number of non-empty contiguous slices summing to ``k``."""
    seen = Counter({0: 1})
    count = 0
    for prefix in accumulate(nums):
        count += seen[prefix - k]
        seen[prefix] += 1
    return count


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a list of 0, 1 and 2 in place in a single pass."""
    low = mid = 0
    high = len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def sort_by_parity(nums: MutableSequence[int]) -> MutableSequence[int]:
    """Move even values before odd ones in place and return the list."""
    boundary = 0
    for index, value in enumerate(nums):
        if value % 2 == 0:
            nums[index], nums[boundary] = nums[boundary], nums[index]
            boundary += 1
    return nums


def sort_by_parity_ii(nums: Sequence[int]) -> list[int]:
    """Place even values at even indices and odd values at odd indices."""
    evens = [value for value in nums if value % 2 == 0]
    odds = [value for value in nums if value % 2 != 0]
    return _interleave(evens, odds, len(nums), "even and odd values")