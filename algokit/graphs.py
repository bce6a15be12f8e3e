"""Shortest paths from one vertex in adjacency-list graphs.

A graph is a list whose entry ``u`` lists the vertices that ``u`` has edges
to. Weighted graphs come with a parallel list of edge weights of the same
shape. Vertices that cannot be reached get the distance ``UNREACHABLE`` and
the predecessor -1.
"""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Sequence

UNREACHABLE = 1_000_000_000
NO_PREDECESSOR = -1


def _check_source(graph: Sequence[Sequence[int]], source: int) -> None:
    if not 0 <= source < len(graph):
        raise ValueError(f"source vertex {source} is not in the graph")


def _check_weights(
    graph: Sequence[Sequence[int]], weights: Sequence[Sequence[int]]
) -> None:
    if len(weights) != len(graph) or any(
        len(edge_weights) != len(targets)
        for targets, edge_weights in zip(graph, weights)
    ):
        raise ValueError("weights must have the same shape as the graph")


def _edges(
    graph: Sequence[Sequence[int]], weights: Sequence[Sequence[int]]
) -> list[tuple[int, int, int]]:
    return [
        (u, v, w)
        for u, (targets, edge_weights) in enumerate(zip(graph, weights))
        for v, w in zip(targets, edge_weights)
    ]


def breadth_first_search(
    graph: Sequence[Sequence[int]], source: int
) -> tuple[list[int], list[int]]:
    """Return hop counts and predecessors of the shortest paths from ``source``."""
    _check_source(graph, source)
    distances = [UNREACHABLE] * len(graph)
    predecessors = [NO_PREDECESSOR] * len(graph)
    distances[source] = 0
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in graph[u]:
            if distances[v] == UNREACHABLE:
                distances[v] = distances[u] + 1
                predecessors[v] = u
                queue.append(v)
    return distances, predecessors


def dijkstra(
    graph: Sequence[Sequence[int]],
    weights: Sequence[Sequence[int]],
    source: int,
) -> tuple[list[int], list[int]]:
    """Return distances and predecessors for non-negative edge weights."""
    _check_source(graph, source)
    _check_weights(graph, weights)
    if any(w < 0 for edge_weights in weights for w in edge_weights):
        raise ValueError("Dijkstra's algorithm needs non-negative weights")

    distances = [UNREACHABLE] * len(graph)
    predecessors = [NO_PREDECESSOR] * len(graph)
    distances[source] = 0
    heap = [(0, source)]
    done = [False] * len(graph)
    while heap:
        distance, u = heapq.heappop(heap)
        if done[u]:
            continue
        done[u] = True
        for v, w in zip(graph[u], weights[u]):
            candidate = distance + w
            if candidate < distances[v]:
                distances[v] = candidate
                predecessors[v] = u
                heapq.heappush(heap, (candidate, v))
    return distances, predecessors


def bellman_ford(
    graph: Sequence[Sequence[int]],
    weights: Sequence[Sequence[int]],
    source: int,
) -> tuple[list[int], list[bool], list[int]]:
    """Return distances, path flags and predecessors; weights may be negative.

    ``has_path[v]`` is true when ``v`` is reachable from ``source`` and no
    negative cycle lies on the way to it.
    """
    _check_source(graph, source)
    _check_weights(graph, weights)
    n = len(graph)
    edges = _edges(graph, weights)

    reached = [False] * n
    distances = [UNREACHABLE] * n
    predecessors = [NO_PREDECESSOR] * n
    reached[source] = True
    distances[source] = 0

    def improves(u: int, v: int, w: int) -> bool:
        return reached[u] and (not reached[v] or distances[u] + w < distances[v])

    for _ in range(n - 1):
        changed = False
        for u, v, w in edges:
            if improves(u, v, w):
                reached[v] = True
                distances[v] = distances[u] + w
                predecessors[v] = u
                changed = True
        if not changed:
            break

    tainted = deque(v for u, v, w in edges if improves(u, v, w))
    in_cycle_reach = set(tainted)
    while tainted:
        u = tainted.popleft()
        for v in graph[u]:
            if v not in in_cycle_reach:
                in_cycle_reach.add(v)
                tainted.append(v)

    has_path = [reached[v] and v not in in_cycle_reach for v in range(n)]
    return distances, has_path, predecessors