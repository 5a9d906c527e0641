"""Array puzzles: in-place edits, searching, selection and scanning."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from functools import reduce
from itertools import groupby, pairwise
from operator import xor


def remove_duplicates(nums: list[int]) -> int:
    """Collapse runs of equal values in a sorted list in place.

    The first ``k`` items of ``nums`` then hold the distinct values in order;
    ``k`` is returned and the rest of the list is left as it was.
    """
    unique = [value for value, _ in groupby(nums)]
    nums[:len(unique)] = unique
    return len(unique)


def remove_element(nums: list[int], val: int) -> int:
    """Move every ``val`` to the end of ``nums`` in place and return the count kept.

    Each removed item is swapped with the last item still under consideration,
    so the kept items do not keep their original order.
    """
    length = len(nums)
    i = 0
    while i < length:
        if nums[i] == val:
            length -= 1
            nums[i], nums[length] = nums[length], nums[i]
        else:
            i += 1
    return length


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated ascending sequence, or -1."""
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


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in an ascending sequence, or where it would go."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            lo = mid + 1
        else:
            hi = mid - 1
    return lo


def max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``nums``."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = nums[0]
    local = 0
    for value in nums:
        local = max(local + value, value)
        best = max(best, local)
    return best


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Return whether ``target`` occurs in a rotated ascending sequence with repeats."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return True
        if nums[lo] < nums[mid]:
            if nums[lo] <= target < nums[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        elif nums[lo] > nums[mid]:
            if nums[mid] < target <= nums[hi]:
                lo = mid + 1
            else:
                hi = mid - 1
        else:
            # Which half is sorted is unknown; the middle can equal ``lo``,
            # so shrinking from the left always makes progress.
            lo += 1
    return False


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1`` in place.

    ``nums1`` must have room for ``m + n`` items; the merged values fill
    its first ``m + n`` places in ascending order.
    """
    if m < 0 or n < 0:
        raise ValueError("counts must not be negative")
    if len(nums1) < m + n or len(nums2) < n:
        raise ValueError("lists are too short for the given counts")
    nums1[:m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from any number of buy-then-sell trades."""
    return sum(max(later - earlier, 0) for earlier, later in pairwise(prices))


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers in ``nums``.

    An empty sequence gives 0.
    """
    values = set(nums)
    best = 0
    for value in values:
        if value - 1 in values:
            continue
        length = 1
        while value + length in values:
            length += 1
        best = max(best, length)
    return best


def single_number(nums: Sequence[int]) -> int:
    """Return the one value that appears an odd number of times when all others pair up."""
    return reduce(xor, nums, 0)


def max_product(nums: Sequence[int]) -> int:
    """Return the largest product of a non-empty contiguous run of ``nums``."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = high = low = nums[0]
    for value in nums[1:]:
        candidates = (high * value, low * value, value)
        high, low = max(candidates), min(candidates)
        best = max(best, high)
    return best


def maximum_gap(nums: Sequence[int]) -> int:
    """Return the largest difference between neighbours once ``nums`` is sorted.

    Values must be non-negative; fewer than two values give 0.
    """
    if any(value < 0 for value in nums):
        raise ValueError("values must not be negative")
    if len(nums) < 2:
        return 0
    return max(later - earlier for earlier, later in pairwise(sorted(nums)))


def majority_element(nums: Sequence[int]) -> int:
    """Return the value held by more than half of ``nums`` (Boyer-Moore vote)."""
    if not nums:
        raise ValueError("nums must not be empty")
    candidate = nums[0]
    count = 1
    for value in nums[1:]:
        count += 1 if value == candidate else -1
        if count == 0:
            candidate = value
            count = 1
    return candidate


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` places in place."""
    if not nums:
        return
    k %= len(nums)
    nums[:] = nums[-k:] + nums[:-k] if k else nums[:]


def rob(nums: Sequence[int]) -> int:
    """Return the largest sum of values taken with no two neighbours both taken."""
    before, best = 0, 0
    for value in nums:
        before, best = best, max(best, before + value)
    return best


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the k-th largest value (1-based) of ``nums``."""
    if not 1 <= k <= len(nums):
        raise ValueError("k must lie between 1 and the number of values")
    return heapq.nlargest(k, nums)[-1]


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Return whether any value occurs more than once."""
    return len(set(nums)) != len(nums)


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Return whether two equal values sit at most ``k`` places apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        previous = last_seen.get(value)
        if previous is not None and index - previous <= k:
            return True
        last_seen[value] = index
    return False


def summary_ranges(nums: Sequence[int]) -> list[str]:
    """Summarise runs of consecutive integers as ``"a->b"`` or ``"a"``."""
    if not nums:
        return []
    ranges: list[str] = []
    start = previous = nums[0]
    for value in [*nums[1:], None]:
        if value is not None and value == previous + 1:
            previous = value
            continue
        ranges.append(f"{start}->{previous}" if start != previous else f"{start}")
        if value is not None:
            start = previous = value
    return ranges


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as decimal digits, most significant first."""
    result: list[int] = []
    carry = 1
    for digit in reversed(digits):
        carry, digit = divmod(digit + carry, 10)
        result.append(digit)
    if carry:
        result.append(carry)
    return result[::-1]