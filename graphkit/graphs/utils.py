"""
Utility functions for graph algorithms.

Provides conversion from adjacency lists to flat edge lists and path
reconstruction from predecessor lists.
"""

from typing import List, Optional

from .core import EdgeList, Graph, W, check_vertex


def edges_from_graph(graph: Graph[W], undirected: bool = False) -> EdgeList[W]:
    """
    Flatten a graph's adjacency lists into an EdgeList.

    Args:
        graph: Graph instance.
        undirected: If True, the graph is read as undirected and each edge is
            emitted once, as its arc with ``source < target``. Self-loops are
            dropped. Use this to feed Kruskal from a graph built with
            ``add_edge``.

    Returns:
        EdgeList in adjacency order (by source vertex, then insertion).

    Example:
        >>> g = Graph(3)
        >>> g.add_edge(0, 1, 5)
        >>> len(edges_from_graph(g))
        2
        >>> len(edges_from_graph(g, undirected=True))
        1
    """
    edges: EdgeList[W] = EdgeList()
    for edge in graph.arcs():
        if undirected and edge.source >= edge.target:
            continue
        edges.append(edge)
    return edges


def reconstruct_path(
    parent: List[Optional[int]], source: int, target: int
) -> Optional[List[int]]:
    """
    Reconstruct the path from source to target using a predecessor list.

    The predecessor list should come from a shortest-path algorithm such as
    ``dijkstra_with_parents``, where ``parent[v]`` is the previous vertex on
    the shortest path to ``v`` and None for the source or unreachable
    vertices.

    Args:
        parent: Predecessor list indexed by vertex.
        source: Vertex the search started from.
        target: Vertex to reconstruct the path to.

    Returns:
        List of vertices from source to target (inclusive), or None if
        target is unreachable.

    Raises:
        IndexError: If source or target is out of range.

    Example:
        >>> reconstruct_path([None, 0, 1], 0, 2)
        [0, 1, 2]
    """
    check_vertex(source, len(parent))
    check_vertex(target, len(parent))

    path = [target]
    current = target
    while current != source:
        previous = parent[current]
        # More steps than vertices means the list is not a shortest-path tree
        if previous is None or len(path) > len(parent):
            return None
        path.append(previous)
        current = previous

    path.reverse()
    return path
