from math import gcd

import pytest

from algosuite.linked_lists import (
    ListNode,
    build_list,
    insert_greatest_common_divisors,
    list_values,
    modified_list,
    split_list_to_parts,
)

VALUES = [18, 6, 10, 3, 9, 12, 8]


def test_build_and_read_round_trip():
    assert list_values(build_list(VALUES)) == VALUES
    assert build_list([]) is None
    assert list_values(None) == []


def test_iterating_a_node():
    head = ListNode(1, ListNode(2))
    assert list(head) == [1, 2]


def test_insert_gcd_structure():
    result = list_values(insert_greatest_common_divisors(build_list(VALUES)))
    assert len(result) == 2 * len(VALUES) - 1
    assert result[::2] == VALUES
    for left, middle, right in zip(result[::2], result[1::2], result[2::2]):
        assert middle == gcd(left, right)


def test_insert_gcd_short_lists():
    single = build_list([7])
    assert insert_greatest_common_divisors(single) is single
    assert list_values(single) == [7]
    assert insert_greatest_common_divisors(None) is None


def test_modified_list_removes_members():
    head = build_list([1, 2, 3, 4, 5])
    assert list_values(modified_list([1, 2, 3], head)) == [4, 5]


def test_modified_list_keeps_order_and_excludes():
    banned = {6, 9, 8}
    result = list_values(modified_list(banned, build_list(VALUES)))
    assert not banned & set(result)
    assert [v for v in VALUES if v in set(result)] == result
    assert list_values(modified_list([], build_list(VALUES))) == VALUES
    assert modified_list(VALUES, build_list(VALUES)) is None


@pytest.mark.parametrize("k", [1, 2, 3, 5, 7, 10])
def test_split_list_invariants(k):
    parts = split_list_to_parts(build_list(VALUES), k)
    assert len(parts) == k
    pieces = [list_values(part) for part in parts]
    assert [v for piece in pieces for v in piece] == VALUES
    sizes = [len(piece) for piece in pieces]
    assert sizes == sorted(sizes, reverse=True)
    assert max(sizes) - min(sizes) <= 1


def test_split_more_parts_than_nodes():
    parts = split_list_to_parts(build_list([1, 2]), 4)
    assert [list_values(p) for p in parts[:2]] == [[1], [2]]
    assert parts[2:] == [None, None]


def test_split_empty_list():
    assert split_list_to_parts(None, 3) == [None, None, None]