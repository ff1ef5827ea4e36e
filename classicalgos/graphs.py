"""Graph algorithms on adjacency matrices and edge lists.

In an adjacency matrix a weight of 0 means that there is no edge.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = [
    "Edge",
    "NegativeCycleError",
    "prim_mst",
    "floyd_warshall",
    "bellman_ford",
    "dijkstra",
    "color_graph",
]

Matrix = Sequence[Sequence[int]]


@dataclass(frozen=True)
class Edge:
    """A weighted edge from ``u`` to ``v``."""

    u: int
    v: int
    weight: int


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""

    def __init__(self) -> None:
        super().__init__("graph contains negative weight cycle")


def _order(graph: Matrix) -> int:
    n = len(graph)
    if any(len(row) != n for row in graph):
        raise ValueError("adjacency matrix must be square")
    return n


def _check_vertex(vertex: int, n: int) -> None:
    if not 0 <= vertex < n:
        raise ValueError(f"vertex {vertex} is out of range for {n} vertices")


def prim_mst(graph: Matrix) -> list[Edge]:
    """Return a minimum spanning tree rooted at vertex 0.

    Each edge joins a vertex's parent to the vertex, one edge for every
    vertex after 0, in vertex order. Raises ValueError if the graph is
    not connected.
    """
    n = _order(graph)
    if n == 0:
        return []

    key: list[float] = [math.inf] * n
    parent: list[int | None] = [None] * n
    in_tree = [False] * n
    key[0] = 0

    for _ in range(n - 1):
        candidates = [v for v in range(n) if not in_tree[v] and key[v] < math.inf]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=key.__getitem__)
        in_tree[u] = True
        for v, weight in enumerate(graph[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight

    tree: list[Edge] = []
    for vertex, root in enumerate(parent[1:], start=1):
        if root is None:
            raise ValueError("graph is not connected")
        tree.append(Edge(root, vertex, graph[vertex][root]))
    return tree


def floyd_warshall(graph: Matrix) -> list[list[float]]:
    """Return the matrix of shortest distances between every pair of vertices.

    Unreachable pairs are ``math.inf``.
    """
    n = _order(graph)
    dist: list[list[float]] = [
        [math.inf if weight == 0 and i != j else weight for j, weight in enumerate(row)]
        for i, row in enumerate(graph)
    ]
    for k in range(n):
        via = dist[k]
        for row in dist:
            to_k = row[k]
            if to_k == math.inf:
                continue
            for j, onward in enumerate(via):
                if onward != math.inf and to_k + onward < row[j]:
                    row[j] = to_k + onward
    return dist


def bellman_ford(edges: Iterable[Edge], vertex_count: int, source: int) -> list[float]:
    """Return shortest distances from ``source`` over directed, possibly negative edges.

    Unreachable vertices are ``math.inf``. Raises NegativeCycleError when a
    negative cycle is reachable.
    """
    edges = list(edges)
    _check_vertex(source, vertex_count)
    for edge in edges:
        _check_vertex(edge.u, vertex_count)
        _check_vertex(edge.v, vertex_count)

    dist: list[float] = [math.inf] * vertex_count
    dist[source] = 0

    for _ in range(vertex_count - 1):
        for edge in edges:
            if dist[edge.u] != math.inf and dist[edge.u] + edge.weight < dist[edge.v]:
                dist[edge.v] = dist[edge.u] + edge.weight

    if any(
        dist[edge.u] != math.inf and dist[edge.u] + edge.weight < dist[edge.v]
        for edge in edges
    ):
        raise NegativeCycleError()
    return dist


def dijkstra(graph: Matrix, source: int) -> list[float]:
    """Return shortest distances from ``source``; unreachable vertices are ``math.inf``."""
    n = _order(graph)
    _check_vertex(source, n)

    dist: list[float] = [math.inf] * n
    dist[source] = 0
    done = [False] * n

    for _ in range(n - 1):
        u = min((v for v in range(n) if not done[v]), key=dist.__getitem__)
        if dist[u] == math.inf:
            break
        done[u] = True
        for v, weight in enumerate(graph[u]):
            if not done[v] and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def color_graph(graph: Matrix, colors: int) -> list[int] | None:
    """Colour vertices with colours 1..``colors`` so no neighbours share one.

    Returns the colour of each vertex, or None when no such colouring exists.
    """
    n = _order(graph)
    assignment = [0] * n

    def safe(vertex: int, color: int) -> bool:
        return not any(
            adjacent and assignment[other] == color
            for other, adjacent in enumerate(graph[vertex])
        )

    def solve(vertex: int) -> bool:
        if vertex == n:
            return True
        for color in range(1, colors + 1):
            if safe(vertex, color):
                assignment[vertex] = color
                if solve(vertex + 1):
                    return True
                assignment[vertex] = 0
        return False

    return assignment if solve(0) else None