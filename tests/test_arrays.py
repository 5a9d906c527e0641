from bisect import bisect_left
from collections import deque
from math import prod

import pytest

from puzzlekit.arrays import (
    contains_duplicate,
    contains_nearby_duplicate,
    find_kth_largest,
    longest_consecutive,
    majority_element,
    max_product,
    max_profit,
    max_sub_array,
    maximum_gap,
    merge_sorted,
    plus_one,
    remove_duplicates,
    remove_element,
    rob,
    rotate,
    search_insert,
    search_rotated,
    search_rotated_with_duplicates,
    single_number,
    summary_ranges,
)


def _all_runs(nums):
    return [nums[i:j] for i in range(len(nums)) for j in range(i + 1, len(nums) + 1)]


def test_remove_duplicates_keeps_distinct_values_in_front():
    nums = [1, 1, 1, 2, 2, 2, 3, 3, 4, 5, 5]
    expected = sorted(set(nums))
    k = remove_duplicates(nums)
    assert k == len(expected)
    assert nums[:k] == expected


def test_remove_duplicates_empty():
    nums = []
    assert remove_duplicates(nums) == 0


def test_remove_element_moves_value_to_the_end():
    nums = [3, 1, 2, 3, 3, 4, 5, 3, 6]
    original = list(nums)
    k = remove_element(nums, 3)
    assert k == original.count(3) and False or k == len(original) - original.count(3)
    assert sorted(nums[:k]) == sorted(x for x in original if x != 3)
    assert all(x == 3 for x in nums[k:])


def test_remove_element_absent_value_keeps_everything():
    nums = [1, 2, 3]
    assert remove_element(nums, 9) == 3
    assert nums == [1, 2, 3]


def test_search_rotated_source_case():
    assert search_rotated([1, 3, 5], 1) == 0


def test_search_rotated_finds_every_index():
    nums = [4, 5, 6, 7, 0, 1, 2]
    for index, value in enumerate(nums):
        assert search_rotated(nums, value) == index
    assert search_rotated(nums, 3) == -1
    assert search_rotated([], 1) == -1


def test_search_insert_source_case():
    assert search_insert([1], 4) == 1


@pytest.mark.parametrize("target", [-1, 0, 1, 2, 3, 4, 5, 6, 8, 10])
def test_search_insert_matches_bisect(target):
    nums = [1, 3, 5, 6, 9]
    assert search_insert(nums, target) == bisect_left(nums, target)


@pytest.mark.parametrize(
    "nums", [[-3, -2, 0, -1], [-2, 1, -3, 4, -1, 2, 1, -5, 4], [5], [-7, -1, -9]]
)
def test_max_sub_array_matches_every_run(nums):
    assert max_sub_array(nums) == max(sum(run) for run in _all_runs(nums))


def test_max_sub_array_empty_raises():
    with pytest.raises(ValueError):
        max_sub_array([])


def test_search_rotated_with_duplicates_source_case():
    assert search_rotated_with_duplicates([1, 3, 1, 1, 1], 3) is True


def test_search_rotated_with_duplicates_present_and_missing():
    nums = [2, 5, 6, 0, 0, 1, 2]
    for value in nums:
        assert search_rotated_with_duplicates(nums, value) is True
    assert search_rotated_with_duplicates(nums, 3) is False
    assert search_rotated_with_duplicates([], 3) is False


def test_merge_sorted_source_case():
    nums1 = [4, 5, 6, 0, 0, 0]
    nums2 = [1, 2, 3]
    expected = sorted(nums1[:3] + nums2)
    merge_sorted(nums1, 3, nums2, 3)
    assert nums1 == expected


def test_merge_sorted_into_empty_prefix():
    nums1 = [0, 0]
    merge_sorted(nums1, 0, [7, 8], 2)
    assert nums1 == [7, 8]


def test_merge_sorted_too_short_raises():
    with pytest.raises(ValueError):
        merge_sorted([1, 2], 2, [3], 1)


def test_max_profit_source_case():
    assert max_profit([1, 2, 3, 2, 4]) == 4


def test_max_profit_invariants():
    rising = [2, 5, 9, 11]
    assert max_profit(rising) == rising[-1] - rising[0]
    assert max_profit([9, 7, 4, 1]) == 0
    assert max_profit([]) == 0


def test_longest_consecutive_source_cases():
    assert longest_consecutive([100, 4, 200, 1, 3, 2]) == 4
    assert longest_consecutive([2, 3, 4, 5, 6, 7, 1]) == 7


def test_longest_consecutive_empty():
    assert longest_consecutive([]) == 0


def test_longest_consecutive_ignores_repeats():
    nums = [5, 5, 5]
    assert longest_consecutive(nums) == longest_consecutive([5])


def test_single_number_source_case():
    assert single_number([1, 2, 1, 3, 4, 3, 4]) == 2


@pytest.mark.parametrize(
    "nums", [[1, -2, 3, -2, -3], [2, 3, -2, 4], [-2, 0, -1], [-4], [0, 2]]
)
def test_max_product_matches_every_run(nums):
    assert max_product(nums) == max(prod(run) for run in _all_runs(nums))


def test_max_product_empty_raises():
    with pytest.raises(ValueError):
        max_product([])


def test_maximum_gap_source_case():
    assert maximum_gap([4, 5, 3, 2, 9, 12, 32, 5]) == 20


def test_maximum_gap_small_inputs():
    assert maximum_gap([]) == 0
    assert maximum_gap([42]) == 0


def test_maximum_gap_negative_raises():
    with pytest.raises(ValueError):
        maximum_gap([1, -1])


def test_majority_element_source_cases():
    assert majority_element([1, 2, 2, 3, 3, 3, 3, 4]) == 3
    assert majority_element([4, 5, 4]) == 4


def test_majority_element_empty_raises():
    with pytest.raises(ValueError):
        majority_element([])


@pytest.mark.parametrize(
    "nums, k", [([1, 2, 3, 4, 5, 6, 7], 4), ([1, 2, 3, 4, 5, 6], 3), ([1, 2, 3], 7), ([1, 2], 0)]
)
def test_rotate_matches_deque(nums, k):
    expected = deque(nums)
    expected.rotate(k)
    rotate(nums, k)
    assert nums == list(expected)


def test_rotate_empty_is_noop():
    nums = []
    rotate(nums, 3)
    assert nums == []


def test_rob_source_cases():
    assert rob([1, 2, 3, 4, 5]) == 9
    assert rob([]) == 0


def test_rob_single_house():
    assert rob([17]) == 17


def test_find_kth_largest_source_case():
    assert find_kth_largest([3, 7, 8, 1, 2, 5, 6, 9], 3) == 7


def test_find_kth_largest_every_rank_and_no_mutation():
    nums = [3, 7, 8, 1, 2, 5, 6, 9]
    original = list(nums)
    ranked = sorted(nums, reverse=True)
    for k in range(1, len(nums) + 1):
        assert find_kth_largest(nums, k) == ranked[k - 1]
    assert nums == original


@pytest.mark.parametrize("k", [0, 9, -1])
def test_find_kth_largest_out_of_range_raises(k):
    with pytest.raises(ValueError):
        find_kth_largest([3, 7, 8, 1, 2, 5, 6, 9], k)


def test_contains_duplicate():
    assert contains_duplicate([1, 3, 5, 7, 9, 7]) is True
    assert contains_duplicate([1, 2, 3]) is False
    assert contains_duplicate([]) is False


def test_contains_nearby_duplicate_source_cases():
    nums = [1, 3, 5, 7, 9, 2, 7, 4, 7]
    assert contains_nearby_duplicate(nums, 2) is True
    assert contains_nearby_duplicate(nums, 1) is False


def test_contains_nearby_duplicate_short_input():
    assert contains_nearby_duplicate([1], 5) is False


def test_summary_ranges_source_case():
    assert summary_ranges([0, 1, 2, 4, 5, 7]) == ["0->2", "4->5", "7"]


def test_summary_ranges_edges():
    assert summary_ranges([]) == []
    assert summary_ranges([5]) == ["5"]


@pytest.mark.parametrize("digits", [[9, 9, 9], [1, 2, 3], [0], [4, 9]])
def test_plus_one_round_trip(digits):
    original = list(digits)
    result = plus_one(digits)
    assert int("".join(map(str, result))) == int("".join(map(str, original))) + 1
    assert all(0 <= d <= 9 for d in result)
    assert digits == original