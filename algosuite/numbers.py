"""Integer and bit manipulation puzzles."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import groupby
from typing import Optional


def _prime_table(limit: int) -> list[bool]:
    """Sieve of Eratosthenes over 0..limit; 0 and 1 are not prime."""
    size = max(limit + 1, 2)
    table = [True] * size
    table[0] = table[1] = False
    candidate = 2
    while candidate * candidate < size:
        if table[candidate]:
            table[candidate * candidate :: candidate] = [False] * len(
                range(candidate * candidate, size, candidate)
            )
        candidate += 1
    return table


def prime_sub_operation(nums: Iterable[int]) -> bool:
    """Tell whether subtracting from each value at most one prime below it can make the
    sequence strictly increasing."""
    values = list(nums)
    if not values:
        return True
    is_prime = _prime_table(max(values))
    current = 1
    for num in values:
        while True:
            difference = num - current
            if difference < 0:
                return False
            current += 1
            if difference == 0 or is_prime[difference]:
                break
    return True


def can_sort_array(nums: Iterable[int]) -> bool:
    """Tell whether swapping adjacent values with equal set-bit counts can sort nums."""
    previous_max = 0
    for _, group in groupby(nums, key=lambda value: bin(value).count("1")):
        values = list(group)
        if min(values) < previous_max:
            return False
        previous_max = max(values)
    return True


def _set_bits(value: int) -> Iterable[int]:
    return (bit for bit in range(value.bit_length()) if value >> bit & 1)


def minimum_subarray_length(nums: Iterable[int], k: int) -> int:
    """Length of the shortest non-empty run whose bitwise OR is at least k, or -1.

    Raises ValueError for negative values.
    """
    values = list(nums)
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")
    bit_counts: Counter[int] = Counter()

    def window_or() -> int:
        return sum(1 << bit for bit, count in bit_counts.items() if count)

    best: Optional[int] = None
    start = 0
    for end, value in enumerate(values):
        bit_counts.update(_set_bits(value))
        while start <= end and window_or() >= k:
            length = end - start + 1
            best = length if best is None else min(best, length)
            bit_counts.subtract(_set_bits(values[start]))
            start += 1
    return -1 if best is None else best


def min_end(n: int, x: int) -> int:
    """Last element of the smallest strictly increasing sequence of n values whose AND is x.

    Raises ValueError when n < 1 or x < 0.
    """
    if n < 1 or x < 0:
        raise ValueError("n must be positive and x must not be negative")
    remaining = n - 1
    result = x
    bit = 1
    while remaining:
        if not x & bit:
            if remaining & 1:
                result |= bit
            remaining >>= 1
        bit <<= 1
    return result


def lexical_order(n: int) -> list[int]:
    """The numbers 1..n in lexicographic order of their decimal text."""
    result: list[int] = []
    current = 1
    for _ in range(n):
        result.append(current)
        if current * 10 <= n:
            current *= 10
        else:
            if current >= n:
                current //= 10
            current += 1
            while current % 10 == 0:
                current //= 10
    return result


def _count_steps(prefix: int, n: int) -> int:
    """How many numbers in 1..n start with the decimal prefix."""
    steps = 0
    first, after = prefix, prefix + 1
    while first <= n:
        steps += min(n + 1, after) - first
        first *= 10
        after *= 10
    return steps


def find_kth_number(n: int, k: int) -> int:
    """The k-th number of 1..n in lexicographic order.

    Raises ValueError when k is not between 1 and n.
    """
    if not 1 <= k <= n:
        raise ValueError(f"k must lie between 1 and {n}")
    current = 1
    k -= 1
    while k > 0:
        steps = _count_steps(current, n)
        if steps <= k:
            current += 1
            k -= steps
        else:
            current *= 10
            k -= 1
    return current


def maximize_greatness(nums: Iterable[int]) -> int:
    """Most positions where a rearrangement of nums exceeds the original value."""
    ordered = sorted(nums)
    matched = 0
    for value in ordered:
        if value > ordered[matched]:
            matched += 1
    return matched