"""Backtracking searches: subsets, combinations, permutations and queens."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import permutations
from math import factorial


def beautiful_subsets(nums: Iterable[int], k: int) -> int:
    """Count the non-empty subsets in which no two values differ by exactly k."""
    values = list(nums)
    present: Counter[int] = Counter()

    def count(index: int) -> int:
        if index == len(values):
            return 1
        num = values[index]
        total = 0
        if present[num - k] == 0 and present[num + k] == 0:
            present[num] += 1
            total += count(index + 1)
            present[num] -= 1
        return total + count(index + 1)

    return count(0) - 1  # the empty subset does not count


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """All combinations of candidates, each usable any number of times, summing to target.

    Combinations keep the candidates' order. Raises ValueError for non-positive candidates.
    """
    values = list(candidates)
    if any(value <= 0 for value in values):
        raise ValueError("candidates must be positive")
    results: list[list[int]] = []
    chosen: list[int] = []

    def explore(index: int, remaining: int) -> None:
        if index == len(values):
            if remaining == 0:
                results.append(list(chosen))
            return
        value = values[index]
        if value <= remaining:
            chosen.append(value)
            explore(index, remaining - value)
            chosen.pop()
        explore(index + 1, remaining)

    explore(0, target)
    return results


def combination_sum2(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Distinct combinations summing to target, each candidate used at most once.

    Combinations are ascending and come in lexicographic order.
    """
    values = sorted(candidates)
    results: list[list[int]] = []
    chosen: list[int] = []

    def explore(start: int, remaining: int) -> None:
        if remaining == 0:
            results.append(list(chosen))
            return
        for index in range(start, len(values)):
            value = values[index]
            if index > start and value == values[index - 1]:
                continue
            if value > remaining:
                break
            chosen.append(value)
            explore(index + 1, remaining - value)
            chosen.pop()

    explore(0, target)
    return results


def permute(nums: Iterable[int]) -> list[list[int]]:
    """All orderings of nums, in order of the positions picked."""
    return [list(ordering) for ordering in permutations(nums)]


def solve_n_queens(n: int) -> list[list[str]]:
    """Every placement of n non-attacking queens, each board as rows of 'Q' and '.'."""
    if n < 0:
        raise ValueError("board size must not be negative")
    solutions: list[list[str]] = []
    queen_rows: list[int] = []  # row of the queen in each filled column
    used_rows: set[int] = set()
    rising: set[int] = set()
    falling: set[int] = set()

    def place(col: int) -> None:
        if col == n:
            solutions.append(
                ["".join("Q" if queen_row == row else "." for queen_row in queen_rows) for row in range(n)]
            )
            return
        for row in range(n):
            if row in used_rows or row + col in rising or col - row in falling:
                continue
            queen_rows.append(row)
            used_rows.add(row)
            rising.add(row + col)
            falling.add(col - row)
            place(col + 1)
            queen_rows.pop()
            used_rows.discard(row)
            rising.discard(row + col)
            falling.discard(col - row)

    place(0)
    return solutions


def get_permutation(n: int, k: int) -> str:
    """The k-th (1-based) permutation of 1..n in lexicographic order, as joined digits.

    Raises ValueError when n < 1 or k is out of range.
    """
    if n < 1:
        raise ValueError("n must be positive")
    if not 1 <= k <= factorial(n):
        raise ValueError(f"k must lie between 1 and {factorial(n)}")
    numbers = list(range(1, n + 1))
    rank = k - 1
    parts: list[str] = []
    while numbers:
        index, rank = divmod(rank, factorial(len(numbers) - 1))
        parts.append(str(numbers.pop(index)))
    return "".join(parts)


def subsets_with_dup(nums: Iterable[int]) -> list[list[int]]:
    """All distinct subsets of nums, each ascending, in depth-first order."""
    values = sorted(nums)
    results: list[list[int]] = []
    chosen: list[int] = []

    def explore(start: int) -> None:
        results.append(list(chosen))
        for index in range(start, len(values)):
            if index > start and values[index] == values[index - 1]:
                continue
            chosen.append(values[index])
            explore(index + 1)
            chosen.pop()

    explore(0)
    return results