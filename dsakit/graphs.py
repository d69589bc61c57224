"""Breadth-first and depth-first traversal of adjacency-matrix graphs."""

from __future__ import annotations

from collections import deque
from typing import Iterator, List, Sequence, Tuple

AdjacencyMatrix = Sequence[Sequence[int]]


def _validate(adjacency: AdjacencyMatrix, start: int) -> int:
    size = len(adjacency)
    if any(len(row) != size for row in adjacency):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < size:
        raise IndexError(f"start vertex {start} out of range")
    return size


def bfs(adjacency: AdjacencyMatrix, start: int) -> List[int]:
    """Return vertices in breadth-first order from ``start``; an edge is an entry equal to 1."""
    size = _validate(adjacency, start)
    visited = [False] * size
    visited[start] = True
    order = [start]
    pending = deque([start])
    while pending:
        node = pending.popleft()
        for neighbour, edge in enumerate(adjacency[node]):
            if edge == 1 and not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                pending.append(neighbour)
    return order


def dfs(adjacency: AdjacencyMatrix, start: int) -> List[int]:
    """Return vertices in depth-first order from ``start``; an edge is an entry equal to 1."""
    size = _validate(adjacency, start)
    visited = [False] * size
    visited[start] = True
    order = [start]
    path: List[Tuple[int, Iterator[int]]] = [(start, iter(range(size)))]
    while path:
        node, candidates = path[-1]
        for neighbour in candidates:
            if adjacency[node][neighbour] == 1 and not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                path.append((neighbour, iter(range(size))))
                break
        else:
            path.pop()
    return order