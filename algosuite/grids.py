"""Grid and matrix algorithms: shortest paths, fills, simulations and path sums."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from math import comb
from typing import Optional

Grid = Sequence[Sequence[int]]

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_HEADINGS = ((0, 1), (1, 0), (0, -1), (-1, 0))  # north, east, south, west
_PUZZLE_TARGET = "123450"
# For each position of the blank on the 2x3 board, the positions it may swap with.
_PUZZLE_SWAPS = ((1, 3), (0, 2, 4), (1, 5), (0, 4), (1, 3, 5), (2, 4))


def _neighbours(i: int, j: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for di, dj in _STEPS:
        r, c = i + di, j + dj
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def _bfs_distances(
    sources: Iterable[tuple[int, int]], rows: int, cols: int
) -> list[list[Optional[int]]]:
    """Steps from the nearest source to every cell; None where no source reaches."""
    distance: list[list[Optional[int]]] = [[None] * cols for _ in range(rows)]
    queue: deque[tuple[int, int]] = deque()
    for i, j in sources:
        distance[i][j] = 0
        queue.append((i, j))
    while queue:
        i, j = queue.popleft()
        step = distance[i][j] + 1  # type: ignore[operator]
        for r, c in _neighbours(i, j, rows, cols):
            if distance[r][c] is None:
                distance[r][c] = step
                queue.append((r, c))
    return distance


def minimum_time(grid: Grid) -> int:
    """Earliest time to reach the bottom-right cell, entering a cell no sooner than its value.

    Moving back and forth is allowed to wait. Returns -1 when the start is stuck.
    """
    rows, cols = len(grid), len(grid[0])
    if rows * cols > 1 and all(grid[r][c] > 1 for r, c in _neighbours(0, 0, rows, cols)):
        return -1
    best = [[float("inf")] * cols for _ in range(rows)]
    best[0][0] = 0
    heap: list[tuple[int, int, int]] = [(0, 0, 0)]
    while heap:
        t, i, j = heapq.heappop(heap)
        if (i, j) == (rows - 1, cols - 1):
            return t
        if t > best[i][j]:
            continue
        for r, c in _neighbours(i, j, rows, cols):
            wait = 0 if (grid[r][c] - t) % 2 else 1
            arrival = max(t + 1, grid[r][c] + wait)
            if arrival < best[r][c]:
                best[r][c] = arrival
                heapq.heappush(heap, (arrival, r, c))
    return -1


def max_moves(grid: Grid) -> int:
    """Most moves rightwards (up-right, right, down-right) onto strictly larger values.

    The walk may start in any cell of the first column.
    """
    rows, cols = len(grid), len(grid[0])
    reachable = set(range(rows))
    moves = 0
    for j in range(1, cols):
        reachable = {
            i
            for i in range(rows)
            if any(r in reachable and grid[i][j] > grid[r][j - 1] for r in (i - 1, i, i + 1))
        }
        if not reachable:
            break
        moves = j
    return moves


def maximum_safeness_factor(grid: Grid) -> int:
    """Largest achievable minimum distance to a thief (cell 1) on a path across the square grid.

    Raises ValueError when the grid holds no thief.
    """
    n = len(grid)
    if grid[0][0] or grid[n - 1][n - 1]:
        return 0
    thieves = [(i, j) for i, row in enumerate(grid) for j, cell in enumerate(row) if cell]
    if not thieves:
        raise ValueError("grid holds no thief")
    distance = _bfs_distances(thieves, n, n)
    seen = [[False] * n for _ in range(n)]
    seen[0][0] = True
    heap: list[tuple[int, int, int]] = [(-distance[0][0], 0, 0)]  # type: ignore[operator]
    while heap:
        negative, i, j = heapq.heappop(heap)
        safe = -negative
        if (i, j) == (n - 1, n - 1):
            return safe
        for r, c in _neighbours(i, j, n, n):
            if not seen[r][c]:
                seen[r][c] = True
                heapq.heappush(heap, (-min(safe, distance[r][c]), r, c))  # type: ignore[type-var]
    raise RuntimeError("far corner cannot be reached")


def update_matrix(grid: Grid) -> list[list[int]]:
    """Distance from every cell to the nearest 0; cells no 0 reaches stay 0."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    zeros = [(i, j) for i, row in enumerate(grid) for j, cell in enumerate(row) if cell == 0]
    return [
        [d if d is not None else 0 for d in row]
        for row in _bfs_distances(zeros, rows, cols)
    ]


def flood_fill(image: Grid, sr: int, sc: int, new_color: int) -> list[list[int]]:
    """Return a copy of image with the region around (sr, sc) painted new_color."""
    rows, cols = len(image), len(image[0])
    original = image[sr][sc]
    filled = [list(row) for row in image]
    filled[sr][sc] = new_color
    stack = [(sr, sc)]
    while stack:
        i, j = stack.pop()
        for r, c in _neighbours(i, j, rows, cols):
            if image[r][c] == original and filled[r][c] != new_color:
                filled[r][c] = new_color
                stack.append((r, c))
    return filled


def sliding_puzzle(board: Grid) -> int:
    """Fewest moves to bring a 2x3 board to 1 2 3 / 4 5 0, or -1 if impossible.

    Raises ValueError unless the board is 2x3 holding the tiles 0 to 5.
    """
    start = "".join(str(value) for row in board for value in row)
    if len(board) != 2 or any(len(row) != 3 for row in board) or sorted(start) != sorted(
        _PUZZLE_TARGET
    ):
        raise ValueError("board must be 2x3 holding the tiles 0 to 5")
    seen = {start}
    queue: deque[tuple[str, int]] = deque([(start, 0)])
    while queue:
        state, moves = queue.popleft()
        if state == _PUZZLE_TARGET:
            return moves
        blank = state.index("0")
        for other in _PUZZLE_SWAPS[blank]:
            cells = list(state)
            cells[blank], cells[other] = cells[other], cells[blank]
            following = "".join(cells)
            if following not in seen:
                seen.add(following)
                queue.append((following, moves + 1))
    return -1


def oranges_rotting(grid: Grid) -> int:
    """Minutes until no fresh orange (1) is left beside rotten ones (2), or -1 if some never rot."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    state = [list(row) for row in grid]
    level = [(i, j) for i, row in enumerate(state) for j, cell in enumerate(row) if cell == 2]
    fresh = sum(cell == 1 for row in state for cell in row)
    minutes = 0
    while level:
        next_level: list[tuple[int, int]] = []
        for i, j in level:
            for r, c in _neighbours(i, j, rows, cols):
                if state[r][c] == 1:
                    state[r][c] = 2
                    fresh -= 1
                    next_level.append((r, c))
        if next_level:
            minutes += 1
        level = next_level
    return minutes if fresh == 0 else -1


def unique_paths(m: int, n: int) -> int:
    """Number of right/down paths across an m by n grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    return comb(m + n - 2, m - 1)


def min_path_sum(matrix: Grid) -> int:
    """Smallest sum along a right/down path from the top-left to the bottom-right cell."""
    previous: list[int] = []
    for row in matrix:
        current: list[int] = []
        for j, value in enumerate(row):
            candidates = []
            if previous:
                candidates.append(previous[j])
            if current:
                candidates.append(current[-1])
            current.append(value + (min(candidates) if candidates else 0))
        previous = current
    return previous[-1]


def min_falling_path_sum(matrix: Grid) -> int:
    """Smallest sum of a top-to-bottom path moving straight or diagonally down."""
    previous = list(matrix[0])
    for row in matrix[1:]:
        previous = [
            value + min(previous[max(j - 1, 0) : j + 2]) for j, value in enumerate(row)
        ]
    return min(previous)


def robot_sim(commands: Iterable[int], obstacles: Iterable[Sequence[int]]) -> int:
    """Largest squared distance from the origin a robot reaches.

    -2 turns left, -1 turns right, a positive number walks that many steps
    unless an obstacle blocks the way.
    """
    blocked = {(ox, oy) for ox, oy in obstacles}
    heading = 0
    x = y = 0
    farthest = 0
    for command in commands:
        if command == -1:
            heading = (heading + 1) % 4
        elif command == -2:
            heading = (heading + 3) % 4
        else:
            dx, dy = _HEADINGS[heading]
            for _ in range(command):
                if (x + dx, y + dy) in blocked:
                    break
                x += dx
                y += dy
                farthest = max(farthest, x * x + y * y)
    return farthest