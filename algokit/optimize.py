"""Greedy, heap, binary-search and dynamic-programming optimisation problems."""

from __future__ import annotations

import heapq
from bisect import bisect_right
from itertools import accumulate
from math import inf, isqrt
from typing import Sequence


def _smallest_feasible(low: int, high: int, feasible) -> int:
    """Smallest value in [low, high] for which ``feasible`` holds, assuming monotonicity."""
    while low < high:
        mid = (low + high) // 2
        if feasible(mid):
            high = mid
        else:
            low = mid + 1
    return low


def minimum_size(bags: Sequence[int], max_operations: int) -> int:
    """Smallest possible largest bag after at most ``max_operations`` splits."""
    return _smallest_feasible(
        1,
        max(bags, default=1),
        lambda limit: sum((balls - 1) // limit for balls in bags) <= max_operations,
    )


def _gain(passed: int, total: int) -> float:
    return (total - passed) / (total * (total + 1.0))


def max_average_ratio(classes: Sequence[Sequence[int]], extra_students: int) -> float:
    """Best average pass ratio after placing brilliant students who always pass."""
    if not classes:
        raise ValueError("classes must not be empty")
    total = 0.0
    heap = []
    for passed, size in classes:
        total += passed / size
        heap.append((-_gain(passed, size), -passed, -size))
    heapq.heapify(heap)
    for _ in range(extra_students):
        neg_gain, neg_passed, neg_size = heap[0]
        if neg_gain == 0:
            break
        total -= neg_gain
        passed, size = 1 - neg_passed, 1 - neg_size
        heapq.heapreplace(heap, (-_gain(passed, size), -passed, -size))
    return total / len(classes)


def max_two_events(events: Sequence[Sequence[int]]) -> int:
    """Largest total value of at most two events that do not overlap."""
    ordered = sorted(tuple(event) for event in events)
    starts = [start for start, _, _ in ordered]
    values = [value for _, _, value in ordered]
    best_after = list(accumulate(reversed(values), max))[::-1] + [0]
    best = 0
    for index, (_, end, value) in enumerate(ordered):
        following = bisect_right(starts, end, index)
        best = max(best, value + best_after[following])
    return best


def item_beauty_queries(items: Sequence[Sequence[int]], queries: Sequence[int]) -> list[int]:
    """For each query, the best beauty among items priced at or below it, or 0."""
    ordered = sorted(tuple(item) for item in items)
    prices = [price for price, _ in ordered]
    best = list(accumulate((beauty for _, beauty in ordered), max))
    answers = []
    for query in queries:
        count = bisect_right(prices, query)
        answers.append(best[count - 1] if count else 0)
    return answers


def minimized_maximum(n: int, quantities: Sequence[int]) -> int:
    """Smallest possible largest share when spreading product types over n stores."""
    return _smallest_feasible(
        1,
        max(quantities, default=1),
        lambda limit: sum(-(-amount // limit) for amount in quantities) <= n,
    )


def minimum_total_distance(robots: Sequence[int], factories: Sequence[Sequence[int]]) -> int:
    """Least total distance for all robots to reach factories with limited capacity."""
    robots = sorted(robots)
    plants = sorted(tuple(factory) for factory in factories)
    n = len(robots)
    previous = [0] + [inf] * n
    for position, limit in plants:
        current = [0] * (n + 1)
        for done in range(1, n + 1):
            best = previous[done]
            cost = 0
            for taken in range(1, min(limit, done) + 1):
                cost += abs(robots[done - taken] - position)
                before = previous[done - taken]
                if before != inf:
                    best = min(best, before + cost)
            current[done] = best
        previous = current
    if previous[n] == inf:
        raise ValueError("factories cannot repair every robot")
    return int(previous[n])


def max_kelements(nums: Sequence[int], k: int) -> int:
    """Score of k greedy picks, each taking the largest value and replacing it by its third rounded up."""
    if k > 0 and not nums:
        raise ValueError("nums must not be empty")
    heap = [-num for num in nums]
    heapq.heapify(heap)
    score = 0
    for _ in range(k):
        value = -heap[0]
        score += value
        heapq.heapreplace(heap, -(-value // 3))
    return score


def max_count(banned: Sequence[int], n: int, max_sum: int) -> int:
    """Most distinct unbanned integers in [1, n] whose sum stays within ``max_sum``."""
    forbidden = set(banned)
    total = 0
    count = 0
    for value in range(1, n + 1):
        if value in forbidden:
            continue
        total += value
        if total > max_sum:
            break
        count += 1
    return count


def pick_gifts(gifts: Sequence[int], k: int) -> int:
    """Gifts left after k times replacing the richest pile by its integer square root."""
    if k > 0 and not gifts:
        raise ValueError("gifts must not be empty")
    heap = [-gift for gift in gifts]
    heapq.heapify(heap)
    for _ in range(k):
        heapq.heapreplace(heap, -isqrt(-heap[0]))
    return -sum(heap)


def find_score(nums: Sequence[int]) -> int:
    """Score from repeatedly taking the smallest unmarked value and marking its neighbours."""
    score = 0
    falling: list[int] = []
    for num in nums:
        if falling and num >= falling[-1]:
            score += sum(falling[::-2])
            falling.clear()
            continue
        falling.append(num)
    return score + sum(falling[::-2])


def get_final_state(nums: Sequence[int], k: int, multiplier: int) -> list[int]:
    """Values after k times multiplying the smallest (earliest on ties) entry."""
    heap = [(value, index) for index, value in enumerate(nums)]
    heapq.heapify(heap)
    for _ in range(k):
        value, index = heap[0]
        heapq.heapreplace(heap, (value * multiplier, index))
    result = list(nums)
    for value, index in heap:
        result[index] = value
    return result