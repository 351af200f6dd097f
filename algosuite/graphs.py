"""Graph algorithms on adjacency matrices and edge lists."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def find_circle_num(adj: Sequence[Sequence[int]]) -> int:
    """Count the connected groups described by an adjacency matrix."""
    size = len(adj)
    seen = [False] * size
    provinces = 0
    for start in range(size):
        if seen[start]:
            continue
        provinces += 1
        seen[start] = True
        stack = [start]
        while stack:
            node = stack.pop()
            for other, linked in enumerate(adj[node]):
                if linked == 1 and not seen[other]:
                    seen[other] = True
                    stack.append(other)
    return provinces


def find_champion(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Return the only team no edge points to, or -1 when there is not exactly one."""
    beaten = {loser for _, loser in edges}
    unbeaten = [team for team in range(n) if team not in beaten]
    return unbeaten[0] if len(unbeaten) == 1 else -1


def shortest_distance_after_queries(n: int, queries: Iterable[Sequence[int]]) -> list[int]:
    """Shortest path length from 0 to n-1 along the chain after each added road."""
    distances = list(range(n - 1, -1, -1))
    incoming: list[list[int]] = [[] for _ in range(n)]
    for city in range(n - 1):
        incoming[city + 1].append(city)
    answers: list[int] = []
    for source, target in queries:
        incoming[target].append(source)
        distances[source] = min(distances[source], distances[target] + 1)
        pending = [source]
        while pending:
            current = pending.pop()
            reach = distances[current] + 1
            for neighbour in incoming[current]:
                if distances[neighbour] > reach:
                    distances[neighbour] = reach
                    pending.append(neighbour)
        answers.append(distances[0])
    return answers