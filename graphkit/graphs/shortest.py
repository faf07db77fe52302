"""
Shortest path algorithms: Dijkstra and Bellman-Ford.

Dijkstra's algorithm for non-negative edge weights.
Bellman-Ford algorithm for general weights (detects negative cycles).

Distances are returned as a list indexed by vertex; None marks a vertex
that cannot be reached from the source.

Single-destination shortest paths reduce to single-source shortest paths
by running either algorithm on the reversed graph (``Graph.reversed``).

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 24.3 (Dijkstra) and 24.1 (Bellman-Ford).
"""

import heapq
from typing import Any, Iterable, List, Optional, Tuple

from ..diagnostics import assert_non_negative_weights, is_debug_enabled
from ..logging import get_logger
from .core import Edge, Graph, W, check_vertex

logger = get_logger(__name__)


def _dijkstra(
    graph: Graph[W], source: int, zero: Any
) -> Tuple[List[Optional[W]], List[Optional[int]]]:
    graph.check_vertex(source)
    if is_debug_enabled():
        assert_non_negative_weights(graph, zero)

    dist: List[Optional[W]] = [None] * graph.vertex_count
    parent: List[Optional[int]] = [None] * graph.vertex_count
    dist[source] = zero

    pq: List[Tuple[Any, int]] = [(zero, source)]

    while pq:
        d, u = heapq.heappop(pq)

        # Stale entry: u was already settled with a shorter distance
        if dist[u] < d:
            continue

        for edge in graph.adjacency[u]:
            new_dist = d + edge.weight
            best = dist[edge.target]
            if best is not None and best <= new_dist:
                continue
            dist[edge.target] = new_dist
            parent[edge.target] = u
            heapq.heappush(pq, (new_dist, edge.target))

    return dist, parent


def dijkstra(graph: Graph[W], source: int, zero: Any = 0) -> List[Optional[W]]:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Computes shortest distances from source to every vertex of a graph with
    non-negative arc weights, using a binary heap with lazy deletion of
    stale entries.

    Args:
        graph: Graph with non-negative arc weights.
        source: Source vertex.
        zero: Additive identity of the weight type (default 0).

    Returns:
        List mapping vertex -> shortest distance from source, or None if the
        vertex is unreachable.

    Raises:
        IndexError: If source is out of range.
        ValueError: If debug mode is enabled and a negative weight is found.

    Complexity: O(E log V) using binary heap priority queue.

    Example:
        >>> g = Graph(4)
        >>> g.add_edge(0, 1, 4)
        >>> g.add_edge(1, 2, 3)
        >>> g.add_edge(0, 2, 1)
        >>> g.add_edge(2, 3, 2)
        >>> dijkstra(g, 0)
        [0, 3, 1, 3]

    Note:
        Negative weights are not checked unless debug mode is on; with a
        negative weight the result may be silently wrong.
    """
    dist, _ = _dijkstra(graph, source, zero)
    return dist


def dijkstra_with_parents(
    graph: Graph[W], source: int, zero: Any = 0
) -> Tuple[List[Optional[W]], List[Optional[int]]]:
    """
    Dijkstra's algorithm that also records the shortest-path tree.

    Args:
        graph: Graph with non-negative arc weights.
        source: Source vertex.
        zero: Additive identity of the weight type (default 0).

    Returns:
        Tuple of:
        - dist: as returned by ``dijkstra``
        - parent: List mapping vertex -> previous vertex on a shortest path
          (None for the source and unreachable vertices)

    Raises:
        IndexError: If source is out of range.
        ValueError: If debug mode is enabled and a negative weight is found.

    Complexity: O(E log V).

    Example:
        >>> dist, parent = dijkstra_with_parents(g, 0)
        >>> reconstruct_path(parent, 0, 3)
        [0, 2, 3]
    """
    return _dijkstra(graph, source, zero)


def bellman_ford(
    edges: Iterable[Edge[W]], vertex_count: int, source: int, zero: Any = 0
) -> List[Optional[W]]:
    """
    Bellman-Ford algorithm for single-source shortest paths.

    Relaxes every edge ``vertex_count - 1`` times, then makes one more pass:
    if any edge can still be relaxed, a negative cycle is reachable from the
    source.

    Args:
        edges: Iterable of Edge (an EdgeList or plain list). Edges are
            directed; add both directions for an undirected edge.
        vertex_count: Number of vertices.
        source: Source vertex.
        zero: Additive identity of the weight type (default 0).

    Returns:
        List mapping vertex -> shortest distance from source (None if never
        reached), or an empty list if a negative cycle is reachable from the
        source. Check for emptiness before using the distances.

    Raises:
        IndexError: If source or an edge endpoint is out of range.

    Complexity: O(VE) where V is vertices and E is edges.

    Example:
        >>> edges = EdgeList()
        >>> edges.add(0, 1, 1)
        >>> edges.add(1, 2, -2)
        >>> bellman_ford(edges, 3, 0)
        [0, 1, -1]

    Note:
        A negative cycle that the source cannot reach does not affect the
        result; vertices on it stay None.
    """
    check_vertex(source, vertex_count)
    edge_list = list(edges)
    for edge in edge_list:
        check_vertex(edge.source, vertex_count)
        check_vertex(edge.target, vertex_count)

    logger.debug(
        "bellman_ford: %d vertices, %d edges, source %d",
        vertex_count,
        len(edge_list),
        source,
    )

    dist: List[Optional[W]] = [None] * vertex_count
    dist[source] = zero

    for _ in range(vertex_count - 1):
        for edge in edge_list:
            d = dist[edge.source]
            if d is None:
                continue
            new_dist = d + edge.weight
            best = dist[edge.target]
            if best is None or new_dist < best:
                dist[edge.target] = new_dist

    for edge in edge_list:
        d = dist[edge.source]
        if d is None:
            continue
        best = dist[edge.target]
        if best is None or d + edge.weight < best:
            logger.debug(
                "bellman_ford: negative cycle reachable from %d via edge (%d, %d)",
                source,
                edge.source,
                edge.target,
            )
            return []

    return dist
