"""Array algorithms: scans, sliding windows and prefix techniques."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import Counter, deque
from math import isqrt
from typing import Sequence


def maximum_swap(num: int) -> int:
    """Largest number reachable by swapping at most two digits of ``num``."""
    digits = [int(char) for char in str(num)]
    last = {digit: index for index, digit in enumerate(digits)}
    for index, digit in enumerate(digits):
        for larger in range(9, digit, -1):
            where = last.get(larger, -1)
            if where > index:
                digits[index], digits[where] = digits[where], digits[index]
                return int("".join(map(str, digits)))
    return num


def max_chunks_to_sorted(arr: Sequence[int]) -> int:
    """Most chunks the array splits into so that sorting each chunk sorts it all."""
    ordered = sorted(arr)
    chunks = 0
    reach = -1
    for index, value in enumerate(arr):
        reach = max(reach, bisect_left(ordered, value))
        if reach == index:
            chunks += 1
    return chunks


def shortest_subarray(nums: Sequence[int], k: int) -> int:
    """Length of the shortest non-empty subarray with sum at least k, or -1."""
    prefix = [0]
    for num in nums:
        prefix.append(prefix[-1] + num)
    best = len(nums) + 1
    window: deque[int] = deque()
    for right, total in enumerate(prefix):
        while window and total <= prefix[window[-1]]:
            window.pop()
        while window and total - prefix[window[0]] >= k:
            best = min(best, right - window.popleft())
        window.append(right)
    return -1 if best == len(nums) + 1 else best


def check_if_exist(arr: Sequence[int]) -> bool:
    """Tell whether two different positions hold a number and its double."""
    seen: set[int] = set()
    for num in arr:
        if num * 2 in seen or (num % 2 == 0 and num // 2 in seen):
            return True
        seen.add(num)
    return False


def final_prices(prices: Sequence[int]) -> list[int]:
    """Each price less the first later price not above it."""
    return [
        price - next((later for later in prices[index + 1:] if later <= price), 0)
        for index, price in enumerate(prices)
    ]


def find_length_of_shortest_subarray(arr: Sequence[int]) -> int:
    """Length of the shortest subarray whose removal leaves a non-decreasing array."""
    n = len(arr)
    if n <= 1:
        return 0
    left = 0
    while left + 1 < n and arr[left] <= arr[left + 1]:
        left += 1
    if left == n - 1:
        return 0
    right = n - 1
    while right > 0 and arr[right - 1] <= arr[right]:
        right -= 1
    result = min(n - left - 1, right)
    i, j = 0, right
    while i <= left and j < n:
        if arr[i] <= arr[j]:
            result = min(result, j - i - 1)
            i += 1
        else:
            j += 1
    return result


def decrypt(code: Sequence[int], k: int) -> list[int]:
    """Replace each entry of a circular code by the sum of k neighbours."""
    n = len(code)
    if k == 0 or n == 0:
        return [0] * n
    offsets = range(1, k + 1) if k > 0 else range(k, 0)
    return [sum(code[(index + offset) % n] for offset in offsets) for index in range(n)]


def minimum_mountain_removals(nums: Sequence[int]) -> int:
    """Fewest removals that leave a mountain array."""
    n = len(nums)
    rising = [1] * n
    for i in range(n):
        for j in range(i):
            if nums[i] > nums[j]:
                rising[i] = max(rising[i], rising[j] + 1)
    falling = [1] * n
    for i in reversed(range(n)):
        for j in range(n - 1, i, -1):
            if nums[i] > nums[j]:
                falling[i] = max(falling[i], falling[j] + 1)
    return min(
        (n - (up + down - 1) for up, down in zip(rising[1:-1], falling[1:-1]) if up > 1 and down > 1),
        default=n,
    )


def maximum_subarray_sum(nums: Sequence[int], k: int) -> int:
    """Largest sum of a length-k window of distinct values, or 0 if none."""
    best = 0
    total = 0
    counts: Counter[int] = Counter()
    for right, num in enumerate(nums):
        total += num
        counts[num] += 1
        left = right - k + 1
        if left >= 0:
            if len(counts) == k:
                best = max(best, total)
            outgoing = nums[left]
            total -= outgoing
            counts[outgoing] -= 1
            if not counts[outgoing]:
                del counts[outgoing]
    return best


def longest_square_streak(nums: Sequence[int]) -> int:
    """Length of the longest chain where each value squares to the next, or -1."""
    streaks: dict[int, int] = {}
    best = -1
    for num in sorted(nums):
        root = isqrt(num) if num >= 0 else -1
        if root >= 0 and root * root == num and root in streaks:
            streaks[num] = streaks[root] + 1
            best = max(best, streaks[num])
        else:
            streaks[num] = 1
    return best


def max_jump(stones: Sequence[int]) -> int:
    """Smallest possible longest jump of a frog going to the last stone and back."""
    if len(stones) == 2:
        return stones[-1]
    return max((b - a for a, b in zip(stones, stones[2:])), default=0)


def count_fair_pairs(nums: Sequence[int], lower: int, upper: int) -> int:
    """Count index pairs whose sum lies in [lower, upper]."""
    values = sorted(nums)
    return sum(
        bisect_right(values, upper - value, index + 1) - bisect_left(values, lower - value, index + 1)
        for index, value in enumerate(values[:-1])
    )


def _is_prime(value: int) -> bool:
    return all(value % divisor for divisor in range(2, isqrt(value) + 1))


def prime_sub_operation(nums: Sequence[int]) -> bool:
    """Tell whether subtracting a smaller prime from entries can make the array strictly increasing."""
    previous = 0
    for index, num in enumerate(nums):
        bound = num if index == 0 else num - previous
        if bound <= 0:
            return False
        prime = next((candidate for candidate in range(bound - 1, 1, -1) if _is_prime(candidate)), 0)
        previous = num - prime
    return True


def continuous_subarrays(nums: Sequence[int]) -> int:
    """Count subarrays whose maximum and minimum differ by at most two."""
    lows: deque[int] = deque()
    highs: deque[int] = deque()
    left = 0
    total = 0
    for right, num in enumerate(nums):
        while lows and nums[lows[-1]] >= num:
            lows.pop()
        while highs and nums[highs[-1]] <= num:
            highs.pop()
        lows.append(right)
        highs.append(right)
        while nums[highs[0]] - nums[lows[0]] > 2:
            left += 1
            if lows[0] < left:
                lows.popleft()
            if highs[0] < left:
                highs.popleft()
        total += right - left + 1
    return total


def maximum_beauty(nums: Sequence[int], k: int) -> int:
    """Most equal values reachable by moving each number by at most k."""
    values = sorted(nums)
    best = 0
    left = 0
    for right, value in enumerate(values):
        while value - values[left] > 2 * k:
            left += 1
        best = max(best, right - left + 1)
    return best


def is_array_special(nums: Sequence[int], queries: Sequence[Sequence[int]]) -> list[bool]:
    """For each [start, end] query, whether neighbours in that range alternate parity."""
    breaks = [0]
    for previous, current in zip(nums, nums[1:]):
        breaks.append(breaks[-1] + ((previous & 1) == (current & 1)))
    return [breaks[start] == breaks[end] for start, end in queries]


def results_array(nums: Sequence[int], k: int) -> list[int]:
    """Power of every length-k window: its last value if consecutive ascending, else -1."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    answers = [-1] * (len(nums) - k + 1)
    run = 0
    for index, num in enumerate(nums):
        run = run + 1 if index > 0 and num - nums[index - 1] == 1 else 1
        if run >= k:
            answers[index - k + 1] = num
    return answers