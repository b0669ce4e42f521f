"""Classic array problems: sums, searches, partitions and permutations."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct triplet of values from nums that sums to zero.

    Each triplet is in ascending order, and the triplets come in ascending
    order of their first, then second element.
    """
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i and first == values[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = first + values[j] + values[k]
            if total < 0:
                j += 1
            elif total > 0:
                k -= 1
            else:
                result.append([first, values[j], values[k]])
                j += 1
                k -= 1
                while j < k and values[j] == values[j - 1]:
                    j += 1
                while j < k and values[k] == values[k + 1]:
                    k -= 1
    return result


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sell, or 0."""
    if not prices:
        raise ValueError("prices must not be empty")
    it = iter(prices)
    lowest = next(it)
    best = 0
    for price in it:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def can_ship(weights: Sequence[int], days: int, capacity: int) -> bool:
    """Tell whether the packages, in order, fit into `days` loads of `capacity`."""
    loads = 1
    current = 0
    for weight in weights:
        if current + weight > capacity:
            loads += 1
            current = weight
        else:
            current += weight
    return loads <= days


def ship_within_days(weights: Sequence[int], days: int) -> int:
    """Return the least ship capacity that carries all packages within `days`."""
    if not weights:
        raise ValueError("weights must not be empty")
    low, high = max(weights), sum(weights)
    while low <= high:
        mid = low + (high - low) // 2
        if can_ship(weights, days, mid):
            high = mid - 1
        else:
            low = mid + 1
    return low


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the k-th largest value of nums, counting duplicates."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    return heapq.nlargest(k, nums)[-1]


def majority_element(nums: Sequence[int]) -> list[int]:
    """Return the values that occur more than len(nums) // 3 times."""
    threshold = len(nums) // 3
    return [value for value, count in Counter(nums).items() if count > threshold]


def max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest running total over the prefixes of nums, never below 0."""
    total = 0
    best = 0
    for value in nums:
        total += value
        best = max(best, total)
    return best


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping [start, end] intervals and return them sorted."""
    merged: list[list[int]] = []
    for start, end in sorted(list(interval) for interval in intervals):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(end, merged[-1][1])
        else:
            merged.append([start, end])
    return merged


def next_permutation(nums: list[int]) -> None:
    """Rearrange nums in place into its next lexicographic permutation.

    The last permutation wraps round to the first, ascending one.
    """
    n = len(nums)
    pivot = next((i for i in range(n - 2, -1, -1) if nums[i] < nums[i + 1]), None)
    if pivot is None:
        nums.reverse()
        return
    swap = next(i for i in range(n - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[swap] = nums[swap], nums[pivot]
    nums[pivot + 1:] = reversed(nums[pivot + 1:])


def rotate(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    matrix[:] = [list(reversed(column)) for column in zip(*matrix)]


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of target in a rotated sorted sequence, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[left] <= nums[mid]:
            if nums[left] <= target <= nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] <= target <= nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in one pass.

    Any value other than 0 or 1 is placed with the 2s.
    """
    low, mid, high = 0, 0, len(nums) - 1
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


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the indices of two values that add up to target, or None."""
    pairs = sorted((value, index) for index, value in enumerate(nums))
    left, right = 0, len(pairs) - 1
    while left < right:
        total = pairs[left][0] + pairs[right][0]
        if total == target:
            return pairs[left][1], pairs[right][1]
        if total < target:
            left += 1
        else:
            right -= 1
    return None