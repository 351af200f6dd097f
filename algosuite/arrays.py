"""Array algorithms: medians, greedy choices, sliding windows and subset counts."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence
from typing import Optional


def find_median_sorted_arrays(a: Sequence[int], b: Sequence[int]) -> float:
    """Median of the union of two sorted sequences, by binary search on the shorter one.

    Raises ValueError when both are empty.
    """
    if len(a) > len(b):
        a, b = b, a
    n1, n2 = len(a), len(b)
    total = n1 + n2
    if total == 0:
        raise ValueError("both sequences are empty")
    left_size = (total + 1) // 2
    low, high = 0, n1
    while low <= high:
        cut1 = (low + high) // 2
        cut2 = left_size - cut1
        l1 = a[cut1 - 1] if cut1 > 0 else float("-inf")
        l2 = b[cut2 - 1] if cut2 > 0 else float("-inf")
        r1 = a[cut1] if cut1 < n1 else float("inf")
        r2 = b[cut2] if cut2 < n2 else float("inf")
        if l1 <= r2 and l2 <= r1:
            if total % 2:
                return float(max(l1, l2))
            return (max(l1, l2) + min(r1, r2)) / 2.0
        if l1 > r2:
            high = cut1 - 1
        else:
            low = cut1 + 1
    raise ValueError("sequences are not sorted")


def find_content_children(g: Iterable[int], s: Iterable[int]) -> int:
    """Most children whose greed g[i] can be met by a distinct cookie of size s[j] >= g[i]."""
    greeds = sorted(g)
    content = 0
    for size in sorted(s):
        if content == len(greeds):
            break
        if size >= greeds[content]:
            content += 1
    return content


def smallest_range(nums: Sequence[Sequence[int]]) -> list[int]:
    """Smallest [low, high] holding at least one value from each sorted list.

    Raises ValueError when no lists are given or one of them is empty.
    """
    if not nums or any(not row for row in nums):
        raise ValueError("every list must hold at least one value")
    heap = [(row[0], index, 0) for index, row in enumerate(nums)]
    heapq.heapify(heap)
    largest = max(row[0] for row in nums)
    best: Optional[tuple[int, int]] = None
    while True:
        smallest, row, col = heapq.heappop(heap)
        if best is None or largest - smallest < best[1] - best[0]:
            best = (smallest, largest)
        if col + 1 == len(nums[row]):
            break
        following = nums[row][col + 1]
        heapq.heappush(heap, (following, row, col + 1))
        largest = max(largest, following)
    return list(best)


def kth_smallest_prime_fraction(arr: Sequence[int], k: int) -> list[int]:
    """The k-th smallest fraction arr[i] / arr[j] with i < j, as [numerator, denominator].

    arr must be sorted ascending. Raises ValueError when k is out of range
    or no fraction can be singled out.
    """
    n = len(arr)
    if not 1 <= k <= n * (n - 1) // 2:
        raise ValueError(f"k must lie between 1 and {n * (n - 1) // 2}")
    low, high = 0.0, 1.0
    while low < high:
        mid = (low + high) / 2
        if mid in (low, high):
            break
        largest = 0.0
        numerator = denominator = 0
        below = 0
        j = 1
        for i in range(n - 1):
            while j < n and arr[i] >= mid * arr[j]:
                j += 1
            below += n - j
            if j == n:
                break
            fraction = arr[i] / arr[j]
            if fraction > largest:
                numerator, denominator, largest = i, j, fraction
        if below == k:
            return [arr[numerator], arr[denominator]]
        if below > k:
            high = mid
        else:
            low = mid
    raise ValueError("no fraction found for k")


def lemonade_change(bills: Iterable[int]) -> bool:
    """Tell whether a stand selling at 5 can give change to every customer in turn."""
    fives = tens = 0
    for bill in bills:
        if bill == 5:
            fives += 1
        elif bill == 10:
            if not fives:
                return False
            fives -= 1
            tens += 1
        elif fives and tens:
            fives -= 1
            tens -= 1
        elif fives >= 3:
            fives -= 3
        else:
            return False
    return True


def shortest_subarray(nums: Iterable[int], k: int) -> int:
    """Length of the shortest non-empty run summing to at least k, or -1."""
    best: Optional[int] = None
    running = 0
    window: deque[tuple[int, int]] = deque()  # (prefix sum, end index), increasing sums
    for end, value in enumerate(nums):
        running += value
        if running >= k:
            best = end + 1 if best is None else min(best, end + 1)
        while window and running - window[0][0] >= k:
            _, start = window.popleft()
            best = end - start if best is None else min(best, end - start)
        while window and window[-1][0] > running:
            window.pop()
        window.append((running, end))
    return -1 if best is None else best


def max_width_ramp(nums: Sequence[int]) -> int:
    """Largest j - i with i < j and nums[i] <= nums[j]; 0 when there is none."""
    widest = 0
    earliest = len(nums)
    for _, index in sorted((value, index) for index, value in enumerate(nums)):
        widest = max(widest, index - earliest)
        earliest = min(earliest, index)
    return widest


def coin_change(coins: Iterable[int], amount: int) -> int:
    """Fewest coins summing to amount, each denomination usable freely, or -1.

    Raises ValueError for no coins, a non-positive coin or a negative amount.
    """
    values = list(coins)
    if not values or any(value <= 0 for value in values):
        raise ValueError("coins must be positive and at least one must be given")
    if amount < 0:
        raise ValueError("amount must not be negative")
    unreachable = amount + 1
    fewest = [0] + [unreachable] * amount
    for coin in values:
        for target in range(coin, amount + 1):
            fewest[target] = min(fewest[target], fewest[target - coin] + 1)
    return -1 if fewest[amount] >= unreachable else fewest[amount]


def can_partition(nums: Iterable[int]) -> bool:
    """Tell whether non-negative nums split into two groups of equal sum."""
    values = list(nums)
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")
    total = sum(values)
    if total % 2:
        return False
    reachable = 1  # bit s set when some subset sums to s
    for value in values:
        reachable |= reachable << value
    return bool(reachable >> (total // 2) & 1)


def find_target_sum_ways(nums: Iterable[int], target: int) -> int:
    """Number of ways to sign each non-negative value so that the sum equals target."""
    values = list(nums)
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")
    total = sum(values)
    if total - target < 0 or (total - target) % 2:
        return 0
    goal = (total - target) // 2
    ways = [1] + [0] * goal
    for value in values:
        for s in range(goal, value - 1, -1):
            ways[s] += ways[s - value]
    return ways[goal]