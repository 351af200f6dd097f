"""Singly linked list node type and list algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from math import gcd
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list from values; an empty input gives None."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list as a Python list."""
    return list(head) if head is not None else []


def insert_greatest_common_divisors(head: Optional[ListNode]) -> Optional[ListNode]:
    """Insert between each pair of adjacent nodes a node holding their gcd, in place."""
    current = head
    while current is not None and current.next is not None:
        following = current.next
        current.next = ListNode(gcd(current.val, following.val), following)
        current = following
    return head


def modified_list(nums: Iterable[int], head: Optional[ListNode]) -> Optional[ListNode]:
    """Remove every node whose value is in nums and return the new head."""
    banned = set(nums)
    dummy = ListNode(0, head)
    current = dummy
    while current.next is not None:
        if current.next.val in banned:
            current.next = current.next.next
        else:
            current = current.next
    return dummy.next


def split_list_to_parts(head: Optional[ListNode], k: int) -> list[Optional[ListNode]]:
    """Split a list into k consecutive parts whose sizes differ by at most one.

    Earlier parts are the larger ones; missing parts are None.
    """
    length = sum(1 for _ in head) if head is not None else 0
    size, extra = divmod(length, k)
    parts: list[Optional[ListNode]] = [None] * k
    current = head
    for index in range(k):
        if current is None:
            break
        parts[index] = current
        for _ in range(size + (1 if index < extra else 0) - 1):
            current = current.next
        current.next, current = None, current.next
    return parts