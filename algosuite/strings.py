"""String algorithms: matching, edit distances, compression and digit tricks."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import chain, groupby, pairwise

_MINUTES_PER_DAY = 1440
_MAX_RUN = 9


def min_extra_char(s: str, dictionary: Iterable[str]) -> int:
    """Fewest characters of s left over after splitting it into dictionary words."""
    words = set(dictionary)
    n = len(s)
    best = [0] * (n + 1)
    for i in reversed(range(n)):
        best[i] = 1 + best[i + 1]
        for j in range(i + 1, n + 1):
            if s[i:j] in words:
                best[i] = min(best[i], best[j])
    return best[0]


def minimum_steps(s: str) -> int:
    """Adjacent swaps needed to move every '1' to the right of every '0'."""
    steps = 0
    black = 0
    for ch in s:
        if ch == "0":
            steps += black
        else:
            black += 1
    return steps


def compressed_string(word: str) -> str:
    """Run-length encode word as count-then-character, runs at most nine long."""
    parts: list[str] = []
    for ch, group in groupby(word):
        run = sum(1 for _ in group)
        while run > 0:
            take = min(run, _MAX_RUN)
            parts.append(f"{take}{ch}")
            run -= take
    return "".join(parts)


def is_match(s: str, p: str) -> bool:
    """Match s against a pattern where '?' is any character and '*' any sequence."""
    previous = [True]
    for ch in p:
        previous.append(previous[-1] and ch == "*")
    for sc in s:
        current = [False]
        for j, pc in enumerate(p, 1):
            if pc == sc or pc == "?":
                current.append(previous[j - 1])
            elif pc == "*":
                current.append(previous[j] or current[j - 1])
            else:
                current.append(False)
        previous = current
    return previous[-1]


def lcs_length(s1: str, s2: str) -> int:
    """Length of the longest common subsequence of two strings."""
    previous = [0] * (len(s2) + 1)
    for a in s1:
        current = [0]
        for j, b in enumerate(s2, 1):
            current.append(previous[j - 1] + 1 if a == b else max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def longest_palindrome_subseq(s: str) -> int:
    """Length of the longest palindromic subsequence of s."""
    return lcs_length(s, s[::-1])


def _to_minutes(time_point: str) -> int:
    return int(time_point[0:2]) * 60 + int(time_point[3:5])


def find_min_difference(time_points: Iterable[str]) -> int:
    """Smallest gap in minutes between two "HH:MM" times on a 24-hour clock.

    Raises ValueError for no times or a malformed time.
    """
    minutes = sorted(_to_minutes(point) for point in time_points)
    if not minutes:
        raise ValueError("no time points given")
    gaps = (later - earlier for earlier, later in pairwise(minutes))
    wrap = _MINUTES_PER_DAY + minutes[0] - minutes[-1]
    return min(chain(gaps, [wrap]))


def check_inclusion(s1: str, s2: str) -> bool:
    """Tell whether some permutation of s1 is a substring of s2."""
    width = len(s1)
    if width > len(s2):
        return False
    needed = Counter(s1)
    window = Counter(s2[:width])
    if window == needed:
        return True
    for entering, leaving in zip(s2[width:], s2):
        window[entering] += 1
        window[leaving] -= 1
        if window == needed:
            return True
    return False


def min_delete_distance(word1: str, word2: str) -> int:
    """Fewest character deletions that make the two words equal."""
    common = lcs_length(word1, word2)
    return len(word1) + len(word2) - 2 * common


def edit_distance(word1: str, word2: str) -> int:
    """Fewest insertions, deletions and replacements turning word1 into word2."""
    if not word1:
        return len(word2)
    if not word2:
        return len(word1)
    previous = list(range(len(word2) + 1))
    for i, a in enumerate(word1, 1):
        current = [i]
        for j, b in enumerate(word2, 1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j - 1], previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def rotate_string(s: str, goal: str) -> bool:
    """Tell whether goal is a rotation of s."""
    return len(s) == len(goal) and goal in s + s


def uncommon_from_sentences(s1: str, s2: str) -> list[str]:
    """Words occurring exactly once across both sentences, in order of first appearance."""
    counts = Counter(s1.split())
    counts.update(s2.split())
    return [word for word, count in counts.items() if count == 1]


def min_add_to_make_valid(s: str) -> int:
    """Fewest parentheses to add so that s becomes balanced.

    Raises ValueError for characters other than parentheses.
    """
    open_count = 0
    unmatched_closing = 0
    for ch in s:
        if ch == "(":
            open_count += 1
        elif ch == ")":
            if open_count:
                open_count -= 1
            else:
                unmatched_closing += 1
        else:
            raise ValueError(f"unexpected character {ch!r}")
    return open_count + unmatched_closing


def longest_common_prefix(arr1: Iterable[int], arr2: Iterable[int]) -> int:
    """Longest decimal prefix shared by a number of arr1 and a number of arr2."""
    prefixes = {
        text[:size]
        for text in map(str, arr1)
        for size in range(1, len(text) + 1)
    }
    best = 0
    for text in map(str, arr2):
        best = max(
            best,
            next((size for size in range(len(text), 0, -1) if text[:size] in prefixes), 0),
        )
    return best


def maximum_swap(num: int) -> int:
    """Largest number reachable by swapping two digits of num at most once.

    Raises ValueError for negative numbers.
    """
    if num < 0:
        raise ValueError("number must not be negative")
    digits = list(str(num))
    last = {digit: index for index, digit in enumerate(digits)}
    for index, digit in enumerate(digits):
        for bigger in map(str, range(9, int(digit), -1)):
            position = last.get(bigger, -1)
            if position > index:
                digits[index], digits[position] = digits[position], digits[index]
                return int("".join(digits))
    return num