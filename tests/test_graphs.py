import pytest

from algosuite.graphs import (
    find_champion,
    find_circle_num,
    shortest_distance_after_queries,
)


@pytest.mark.parametrize("size", [1, 3, 6])
def test_identity_matrix_has_one_group_per_node(size):
    adj = [[int(i == j) for j in range(size)] for i in range(size)]
    assert find_circle_num(adj) == size


def test_fully_linked_matrix_is_one_group():
    assert find_circle_num([[1] * 4 for _ in range(4)]) == 1


def test_circle_num_worked_example():
    assert find_circle_num([[1, 1, 0], [1, 1, 0], [0, 0, 1]]) == 2


def test_champion_of_chain_is_its_head():
    edges = [[0, 1], [1, 2]]
    assert find_champion(3, edges) == edges[0][0]


def test_champion_ambiguous():
    assert find_champion(4, [[0, 2], [1, 3], [1, 2]]) == -1


def test_champion_is_never_beaten():
    edges = [[3, 0], [3, 1], [1, 2], [0, 2]]
    champion = find_champion(4, edges)
    assert 0 <= champion < 4
    assert all(loser != champion for _, loser in edges)


def test_shortest_distance_worked_example():
    assert shortest_distance_after_queries(5, [[2, 4], [0, 2], [0, 4]]) == [3, 2, 1]


def test_shortest_distance_direct_road():
    assert shortest_distance_after_queries(7, [[0, 6]]) == [1]


def test_shortest_distance_never_grows():
    n = 8
    answers = shortest_distance_after_queries(n, [[1, 4], [3, 7], [0, 2], [2, 5]])
    assert all(later <= earlier for earlier, later in zip(answers, answers[1:]))
    assert all(1 <= value <= n - 1 for value in answers)


def test_shortest_distance_useless_road_keeps_chain_length():
    n = 6
    assert shortest_distance_after_queries(n, [[2, 3]]) == [n - 1]