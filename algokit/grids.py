"""Grid and matrix algorithms: searches, sweeps and dynamic programming."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from math import inf
from typing import Sequence

_SOLVED = "123450"
_PUZZLE_NEIGHBOURS = (
    (1, 3),
    (0, 2, 4),
    (1, 5),
    (0, 4),
    (1, 3, 5),
    (2, 4),
)
_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))
_FREE, _GUARD, _WALL, _WATCHED = range(4)


def sliding_puzzle(board: Sequence[Sequence[int]]) -> int:
    """Fewest moves that solve a 2x3 sliding puzzle, or -1 if it cannot be solved."""
    if len(board) != 2 or any(len(row) != 3 for row in board):
        raise ValueError("board must have 2 rows of 3 tiles")
    start = "".join(str(tile) for row in board for tile in row)
    if sorted(start) != sorted(_SOLVED):
        raise ValueError("board must hold each of the tiles 0 to 5 once")

    seen = {start}
    queue = deque([(start, 0)])
    while queue:
        state, moves = queue.popleft()
        if state == _SOLVED:
            return moves
        blank = state.index("0")
        for other in _PUZZLE_NEIGHBOURS[blank]:
            tiles = list(state)
            tiles[blank], tiles[other] = tiles[other], tiles[blank]
            following = "".join(tiles)
            if following not in seen:
                seen.add(following)
                queue.append((following, moves + 1))
    return -1


def max_equal_rows_after_flips(matrix: Sequence[Sequence[int]]) -> int:
    """Most rows that can be made all-equal by flipping some columns."""
    patterns = Counter(
        tuple(bit ^ row[0] for bit in row) for row in matrix if row
    )
    return max(patterns.values(), default=0)


def count_squares(matrix: Sequence[Sequence[int]]) -> int:
    """Number of square submatrices made only of ones."""
    total = 0
    above: list[int] = []
    for row in matrix:
        current: list[int] = []
        for col, cell in enumerate(row):
            if cell == 0:
                size = 0
            elif col == 0 or not above:
                size = 1
            else:
                size = 1 + min(above[col], current[col - 1], above[col - 1])
            current.append(size)
            total += size
        above = current
    return total


def rotate_the_box(box: Sequence[Sequence[str]]) -> list[list[str]]:
    """Rotate a box clockwise and let its stones ('#') fall onto obstacles ('*')."""
    rows = len(box)
    cols = len(box[0]) if rows else 0
    result = [["."] * rows for _ in range(cols)]
    for r, row in enumerate(box):
        target_col = rows - r - 1
        landing = cols - 1
        for c in range(cols - 1, -1, -1):
            cell = row[c]
            if cell == "#":
                result[landing][target_col] = "#"
                landing -= 1
            elif cell == "*":
                result[c][target_col] = "*"
                landing = c - 1
    return result


def max_matrix_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Largest sum reachable by negating pairs of adjacent entries any number of times."""
    values = [value for row in matrix for value in row]
    if not values:
        return 0
    magnitude = sum(abs(value) for value in values)
    negatives = sum(1 for value in values if value < 0)
    if negatives % 2 == 0:
        return magnitude
    return magnitude - 2 * min(abs(value) for value in values)


def count_unguarded(
    m: int,
    n: int,
    guards: Sequence[Sequence[int]],
    walls: Sequence[Sequence[int]],
) -> int:
    """Cells of an m x n grid that are neither occupied nor seen by a guard."""
    grid = [[_FREE] * n for _ in range(m)]
    for r, c in guards:
        grid[r][c] = _GUARD
    for r, c in walls:
        grid[r][c] = _WALL

    for r, c in guards:
        for dr, dc in _STEPS:
            row, col = r + dr, c + dc
            while 0 <= row < m and 0 <= col < n and grid[row][col] not in (_GUARD, _WALL):
                grid[row][col] = _WATCHED
                row += dr
                col += dc

    return sum(cell == _FREE for row in grid for cell in row)


def minimum_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Fewest obstacles (ones) to remove to walk from the top-left to the bottom-right."""
    rows, cols = len(grid), len(grid[0])
    distance = [[inf] * cols for _ in range(rows)]
    distance[0][0] = 0
    queue = deque([(0, 0)])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _STEPS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < rows and 0 <= ny < cols:
                candidate = distance[x][y] + grid[nx][ny]
                if candidate < distance[nx][ny]:
                    distance[nx][ny] = candidate
                    if grid[nx][ny] == 0:
                        queue.appendleft((nx, ny))
                    else:
                        queue.append((nx, ny))
    return int(distance[-1][-1])


def minimum_time(grid: Sequence[Sequence[int]]) -> int:
    """Earliest time to reach the bottom-right cell, moving every second, or -1."""
    rows, cols = len(grid), len(grid[0])
    first_steps = [grid[r][c] for r, c in ((0, 1), (1, 0)) if r < rows and c < cols]
    if first_steps and all(value > 1 for value in first_steps):
        return -1

    seen = [[False] * cols for _ in range(rows)]
    seen[0][0] = True
    heap = [(0, 0, 0)]
    while heap:
        time, row, col = heapq.heappop(heap)
        if row == rows - 1 and col == cols - 1:
            return time
        for dr, dc in _STEPS:
            nr, nc = row + dr, col + dc
            if 0 <= nr < rows and 0 <= nc < cols and not seen[nr][nc]:
                opens = grid[nr][nc]
                wait = 1 if (opens - time) % 2 == 0 else 0
                heapq.heappush(heap, (max(time + 1, opens + wait), nr, nc))
                seen[nr][nc] = True
    return -1


def max_moves(grid: Sequence[Sequence[int]]) -> int:
    """Most rightward moves into strictly larger cells, starting in the first column."""
    rows = len(grid)
    if rows == 0:
        return 0
    cols = len(grid[0])
    moves = [0] * rows
    for col in range(cols - 2, -1, -1):
        following = moves
        moves = []
        for row in range(rows):
            here = grid[row][col]
            best = 0
            for nr in (row - 1, row, row + 1):
                if 0 <= nr < rows and grid[nr][col + 1] > here:
                    best = max(best, 1 + following[nr])
            moves.append(best)
    return max(moves)