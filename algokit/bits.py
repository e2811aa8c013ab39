"""Bit manipulation algorithms."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from itertools import groupby
from operator import or_, xor
from typing import Iterator, Sequence

_WIDTH = 32


def _set_bits(value: int) -> Iterator[int]:
    value &= (1 << _WIDTH) - 1
    return (bit for bit in range(_WIDTH) if value >> bit & 1)


def get_maximum_xor(nums: Sequence[int], maximum_bit: int) -> list[int]:
    """For each shrinking prefix, the k below 2**maximum_bit maximising its XOR."""
    mask = (1 << maximum_bit) - 1
    running = reduce(xor, nums, 0)
    answers = []
    for num in reversed(nums):
        answers.append(running ^ mask)
        running ^= num
    return answers


def count_max_or_subsets(nums: Sequence[int]) -> int:
    """Count subsets whose bitwise OR equals the OR of all numbers."""
    target = reduce(or_, nums, 0)
    counts: Counter[int] = Counter({0: 1})
    for num in nums:
        extended = counts.copy()
        for value, count in counts.items():
            extended[value | num] += count
        counts = extended
    return counts[target]


def largest_combination(candidates: Sequence[int]) -> int:
    """Size of the largest subset whose bitwise AND is positive."""
    counts = Counter(bit for candidate in candidates for bit in _set_bits(candidate))
    return max(counts.values(), default=0)


def can_sort_array(nums: Sequence[int]) -> bool:
    """Tell whether swapping neighbours with equal popcount can sort the array."""
    previous_max = None
    for _, run in groupby(nums, key=int.bit_count):
        values = list(run)
        if previous_max is not None and min(values) < previous_max:
            return False
        previous_max = max(values)
    return True


def minimum_subarray_length(nums: Sequence[int], k: int) -> int:
    """Length of the shortest subarray whose OR is at least k, or -1."""
    bit_counts = [0] * _WIDTH
    current = 0
    left = 0
    best = None
    for right, num in enumerate(nums):
        current |= num
        for bit in _set_bits(num):
            bit_counts[bit] += 1
        while left <= right and current >= k:
            length = right - left + 1
            best = length if best is None else min(best, length)
            for bit in _set_bits(nums[left]):
                bit_counts[bit] -= 1
            current = sum(1 << bit for bit, count in enumerate(bit_counts) if count > 0)
            left += 1
    return -1 if best is None else best


def min_end(n: int, x: int) -> int:
    """Smallest last element of a strictly increasing n-array whose AND is x."""
    result = x
    remaining = n - 1
    position = 1
    while remaining:
        if not x & position:
            if remaining & 1:
                result |= position
            remaining >>= 1
        position <<= 1
    return result