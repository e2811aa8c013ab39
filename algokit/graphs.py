"""Graph algorithms over edge lists."""

from __future__ import annotations

from collections import defaultdict
from typing import Sequence


def valid_arrangement(pairs: Sequence[Sequence[int]]) -> list[list[int]]:
    """Order pairs so that each pair's end is the next pair's start."""
    if not pairs:
        raise ValueError("pairs must not be empty")
    adjacency: dict[int, list[int]] = defaultdict(list)
    balance: dict[int, int] = defaultdict(int)
    for start, end in pairs:
        adjacency[start].append(end)
        balance[start] += 1
        balance[end] -= 1

    first = next((node for node, degree in balance.items() if degree == 1), pairs[0][0])

    path: list[int] = []
    stack = [first]
    while stack:
        neighbours = adjacency[stack[-1]]
        if neighbours:
            stack.append(neighbours.pop())
        else:
            path.append(stack.pop())
    path.reverse()
    return [[a, b] for a, b in zip(path, path[1:])]


def find_champion(n: int, edges: Sequence[Sequence[int]]) -> int:
    """The only team nobody beats, or -1 if there is not exactly one."""
    beaten = {loser for _, loser in edges}
    unbeaten = [team for team in range(n) if team not in beaten]
    return unbeaten[0] if len(unbeaten) == 1 else -1


def shortest_distance_after_queries(n: int, queries: Sequence[Sequence[int]]) -> list[int]:
    """Distance from city 0 to city n - 1 after each added one-way road."""
    distances = list(range(n - 1, -1, -1))
    incoming: list[list[int]] = [[] for _ in range(n)]
    for node in range(1, n):
        incoming[node].append(node - 1)

    answers = []
    for source, target in queries:
        incoming[target].append(source)
        distances[source] = min(distances[source], distances[target] + 1)
        stack = [source]
        while stack:
            current = stack.pop()
            candidate = distances[current] + 1
            for neighbour in incoming[current]:
                if distances[neighbour] > candidate:
                    distances[neighbour] = candidate
                    stack.append(neighbour)
        answers.append(distances[0])
    return answers