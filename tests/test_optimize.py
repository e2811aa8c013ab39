import math

import pytest

from algokit.optimize import (
    find_score,
    get_final_state,
    item_beauty_queries,
    max_average_ratio,
    max_count,
    max_kelements,
    max_two_events,
    minimized_maximum,
    minimum_size,
    minimum_total_distance,
    pick_gifts,
)


@pytest.mark.parametrize(
    "bags, ops",
    [([9], 2), ([2, 4, 8, 2], 4), ([7, 17], 2), ([1, 1, 1], 5), ([100, 3, 55], 7)],
)
def test_minimum_size_is_smallest_feasible(bags, ops):
    result = minimum_size(bags, ops)
    assert sum((b - 1) // result for b in bags) <= ops
    assert result == 1 or sum((b - 1) // (result - 1) for b in bags) > ops


def test_minimum_size_without_operations_is_largest_bag():
    assert minimum_size([3, 11, 6], 0) == 11


def test_max_average_ratio_without_extra_is_plain_mean():
    classes = [[1, 2], [3, 5], [2, 2]]
    expected = (1 / 2 + 3 / 5 + 2 / 2) / 3
    assert max_average_ratio(classes, 0) == pytest.approx(expected)


def test_max_average_ratio_improves_and_stays_bounded():
    classes = [[2, 4], [3, 9], [4, 5], [2, 10]]
    base = max_average_ratio(classes, 0)
    improved = max_average_ratio(classes, 4)
    assert base < improved <= 1.0


def test_max_average_ratio_full_classes_stay_at_one():
    assert max_average_ratio([[3, 3], [5, 5]], 10) == pytest.approx(1.0)


def test_max_average_ratio_empty_raises():
    with pytest.raises(ValueError):
        max_average_ratio([], 1)


def test_max_two_events_single_event():
    assert max_two_events([[1, 3, 7]]) == 7


def test_max_two_events_non_overlapping_sum():
    assert max_two_events([[1, 2, 4], [3, 5, 6]]) == 4 + 6


def test_max_two_events_touching_counts_as_overlap():
    assert max_two_events([[1, 3, 4], [3, 5, 6]]) == 6


def test_max_two_events_at_least_best_single():
    events = [[1, 5, 3], [1, 5, 1], [6, 6, 5], [2, 9, 8]]
    assert max_two_events(events) >= max(value for _, _, value in events)


def test_item_beauty_queries_bounds_and_monotone():
    items = [[1, 2], [3, 2], [2, 4], [5, 6], [3, 5]]
    queries = [0, 1, 2, 3, 4, 5, 6, 100]
    answers = item_beauty_queries(items, queries)
    assert answers[0] == 0
    assert answers[-1] == max(beauty for _, beauty in items)
    assert answers == sorted(answers)


def test_item_beauty_queries_no_items():
    assert item_beauty_queries([], [1, 2]) == [0, 0]


def test_minimized_maximum_one_store_per_type():
    quantities = [15, 10, 10]
    assert minimized_maximum(len(quantities), quantities) == max(quantities)


@pytest.mark.parametrize("n, quantities", [(6, [11, 6]), (7, [15, 10, 10]), (1, [100000])])
def test_minimized_maximum_is_smallest_feasible(n, quantities):
    result = minimized_maximum(n, quantities)
    assert sum(math.ceil(q / result) for q in quantities) <= n
    assert result == 1 or sum(math.ceil(q / (result - 1)) for q in quantities) > n


def test_minimum_total_distance_robots_at_factories():
    assert minimum_total_distance([4, 1, 9], [[1, 1], [4, 1], [9, 1]]) == 0


def test_minimum_total_distance_single_robot():
    assert minimum_total_distance([0], [[5, 1]]) == 5


def test_minimum_total_distance_insufficient_capacity():
    with pytest.raises(ValueError):
        minimum_total_distance([1, 2, 3], [[2, 2]])


def test_max_kelements_single_pick_takes_max():
    assert max_kelements([3, 8, 5], 1) == 8


def test_max_kelements_equal_values():
    assert max_kelements([10, 10, 10, 10, 10], 5) == 50


def test_max_kelements_empty_raises():
    with pytest.raises(ValueError):
        max_kelements([], 1)


def test_max_count_example():
    assert max_count([1, 6, 5], 5, 6) == 2


def test_max_count_edges():
    assert max_count([], 3, 1000) == 3
    assert max_count([], 3, 0) == 0
    assert max_count([1, 2, 3], 3, 1000) == 0


def test_pick_gifts_example():
    assert pick_gifts([25, 64, 9, 4, 100], 4) == 29


def test_pick_gifts_no_turns_and_ones():
    assert pick_gifts([5, 7, 2], 0) == 14
    assert pick_gifts([1, 1, 1, 1], 4) == 4


def test_pick_gifts_empty_raises():
    with pytest.raises(ValueError):
        pick_gifts([], 2)


def test_find_score_example():
    assert find_score([2, 1, 3, 4, 5, 2]) == 7


def test_find_score_single_and_bounds():
    assert find_score([9]) == 9
    nums = [5, 3, 8, 1, 4, 7, 2]
    score = find_score(nums)
    assert min(nums) <= score <= sum(nums)


def test_get_final_state_product_invariant():
    nums = [2, 1, 3, 5, 6]
    result = get_final_state(nums, 5, 2)
    assert math.prod(result) == math.prod(nums) * 2**5
    assert nums == [2, 1, 3, 5, 6]


def test_get_final_state_identity_cases():
    assert get_final_state([4, 2, 9], 0, 3) == [4, 2, 9]
    assert get_final_state([4, 2, 9], 5, 1) == [4, 2, 9]


def test_get_final_state_ties_take_earliest():
    assert get_final_state([3, 3], 1, 2) == [6, 3]