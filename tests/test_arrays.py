import pytest

from algokit.arrays import (
    check_if_exist,
    continuous_subarrays,
    count_fair_pairs,
    decrypt,
    final_prices,
    find_length_of_shortest_subarray,
    is_array_special,
    longest_square_streak,
    max_chunks_to_sorted,
    max_jump,
    maximum_beauty,
    maximum_subarray_sum,
    maximum_swap,
    minimum_mountain_removals,
    prime_sub_operation,
    results_array,
    shortest_subarray,
)


def test_maximum_swap_worked_example():
    assert maximum_swap(2736) == 7236


@pytest.mark.parametrize("num", [9973, 0, 5, 98654])
def test_maximum_swap_keeps_non_increasing(num):
    assert maximum_swap(num) == num


@pytest.mark.parametrize("num", [1993, 120, 4305, 1111, 98368])
def test_maximum_swap_invariants(num):
    result = maximum_swap(num)
    assert result >= num
    assert sorted(str(result)) == sorted(str(num))


def test_max_chunks_sorted_and_reversed():
    ascending = [0, 1, 2, 3, 4]
    assert max_chunks_to_sorted(ascending) == len(ascending)
    assert max_chunks_to_sorted([4, 3, 2, 1, 0]) == 1


def test_shortest_subarray_cases():
    assert shortest_subarray([1], 1) == 1
    assert shortest_subarray([1, 2], 4) == -1
    nums = [2, -1, 2, 5, -3]
    length = shortest_subarray(nums, 5)
    assert any(sum(nums[i:i + length]) >= 5 for i in range(len(nums) - length + 1))
    assert all(sum(nums[i:i + length - 1]) < 5 for i in range(len(nums) - length + 2))


def test_check_if_exist():
    assert check_if_exist([10, 2, 5, 3]) is True
    assert check_if_exist([3, 1, 7, 11]) is False
    assert check_if_exist([0, 0]) is True
    assert check_if_exist([0]) is False


def test_final_prices_invariants():
    prices = [8, 4, 6, 2, 3]
    result = final_prices(prices)
    assert len(result) == len(prices)
    assert all(0 <= r <= p for r, p in zip(result, prices))
    assert result[-1] == prices[-1]
    assert prices == [8, 4, 6, 2, 3]


def test_final_prices_increasing_unchanged():
    prices = [1, 2, 3, 4, 5]
    assert final_prices(prices) == prices


def test_shortest_removal_sorted_is_zero():
    assert find_length_of_shortest_subarray([1, 2, 3]) == 0
    assert find_length_of_shortest_subarray([]) == 0


def test_shortest_removal_leaves_sorted_array():
    arr = [1, 2, 3, 10, 4, 2, 3, 5]
    length = find_length_of_shortest_subarray(arr)
    remains = [arr[:i] + arr[i + length:] for i in range(len(arr) - length + 1)]
    assert any(r == sorted(r) for r in remains)
    shorter = [arr[:i] + arr[i + length - 1:] for i in range(len(arr) - length + 2)]
    assert not any(r == sorted(r) for r in shorter)


def test_decrypt_zero_and_uniform():
    assert decrypt([5, 7, 1, 4], 0) == [0, 0, 0, 0]
    assert decrypt([1, 1, 1, 1, 1], 3) == [3] * 5
    assert decrypt([1, 1, 1, 1, 1], -2) == [2] * 5


def test_decrypt_forward_and_backward_totals():
    code = [2, 4, 9, 3]
    assert sum(decrypt(code, 2)) == 2 * sum(code)
    assert sum(decrypt(code, -3)) == 3 * sum(code)


def test_minimum_mountain_removals_mountain_is_zero():
    assert minimum_mountain_removals([1, 3, 1]) == 0
    assert minimum_mountain_removals([1, 2, 5, 4, 2]) == 0


def test_maximum_subarray_sum_cases():
    assert maximum_subarray_sum([4, 4, 4], 3) == 0
    nums = [3, 9, 2, 7]
    assert maximum_subarray_sum(nums, 1) == max(nums)
    assert maximum_subarray_sum(nums, len(nums)) == sum(nums)


def test_longest_square_streak():
    assert longest_square_streak([2, 3, 5, 6, 7]) == -1
    chain = [16, 2, 4]
    assert longest_square_streak(chain) == len(chain)


def test_max_jump():
    assert max_jump([0, 10]) == 10
    stones = [0, 3, 9]
    assert max_jump(stones) == stones[2] - stones[0]


def test_count_fair_pairs_everything_fits():
    nums = [0, 1, 7, 4, 4, 5]
    n = len(nums)
    assert count_fair_pairs(nums, -100, 100) == n * (n - 1) // 2
    assert count_fair_pairs(nums, 50, 100) == 0
    assert count_fair_pairs([], 0, 1) == 0


def test_prime_sub_operation():
    assert prime_sub_operation([4, 9, 6, 10]) is True
    assert prime_sub_operation([5, 8, 3]) is False
    assert prime_sub_operation([6, 8, 11, 12]) is True


def test_continuous_subarrays_constant():
    nums = [7] * 5
    n = len(nums)
    assert continuous_subarrays(nums) == n * (n + 1) // 2


def test_continuous_subarrays_spread_values():
    nums = [1, 10, 20, 30]
    assert continuous_subarrays(nums) == len(nums)


def test_maximum_beauty():
    nums = [4, 6, 1, 2]
    assert maximum_beauty(nums, 100) == len(nums)
    assert maximum_beauty([1, 10, 20], 0) == 1
    assert maximum_beauty([], 3) == 0


def test_is_array_special():
    nums = [4, 3, 1, 6]
    queries = [[i, i] for i in range(len(nums))]
    assert is_array_special(nums, queries) == [True] * len(nums)
    assert is_array_special(nums, [[0, 1], [1, 2], [0, 3]]) == [True, False, False]


def test_results_array():
    assert results_array([1, 2, 3, 4], 2) == [2, 3, 4]
    assert results_array([2, 2, 2], 2) == [-1, -1]
    nums = [5, 9, 3]
    assert results_array(nums, 1) == nums


def test_results_array_rejects_bad_k():
    with pytest.raises(ValueError):
        results_array([1, 2], 3)
    with pytest.raises(ValueError):
        results_array([1, 2], 0)