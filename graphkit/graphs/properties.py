"""
Structural graph properties: topological order and bipartiteness.

Both algorithms are depth-first searches driven by an explicit stack, so
long paths do not run into Python's recursion limit.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.3 (DFS) and 22.4 (Topological sort).
"""

from typing import Iterable, Iterator, List, Optional, Tuple

from ..logging import get_logger
from .core import Edge, Graph

logger = get_logger(__name__)

_UNVISITED = 0
_IN_PROGRESS = 1
_FINISHED = 2


def topological_sort(graph: Graph) -> Optional[List[int]]:
    """
    Topological order of a directed graph.

    Three-colour depth-first search: a vertex is in progress while its
    descendants are explored and finished afterwards. Reaching an
    in-progress vertex means the graph has a cycle. Vertices are recorded
    when finished and the record is reversed at the end.

    Args:
        graph: Graph whose arcs are read as directed.

    Returns:
        List of all vertices such that every arc (u, v) has u before v, or
        None if the graph contains a cycle (including a self-loop).

    Complexity: O(V + E) where V is vertices and E is edges.

    Example:
        >>> g = Graph(3)
        >>> g.add_arc(2, 0)
        >>> g.add_arc(0, 1)
        >>> topological_sort(g)
        [2, 0, 1]

    Note:
        An undirected edge is two opposite arcs and therefore a cycle.
    """
    n = graph.vertex_count
    color = [_UNVISITED] * n
    order: List[int] = []

    for root in range(n):
        if color[root] != _UNVISITED:
            continue
        color[root] = _IN_PROGRESS
        stack: List[Tuple[int, Iterator[Edge]]] = [(root, iter(graph.adjacency[root]))]

        while stack:
            v, arcs = stack[-1]
            for edge in arcs:
                w = edge.target
                if color[w] == _FINISHED:
                    continue
                if color[w] == _IN_PROGRESS:
                    logger.debug("topological_sort: cycle through arc (%d, %d)", v, w)
                    return None
                color[w] = _IN_PROGRESS
                stack.append((w, iter(graph.adjacency[w])))
                break
            else:
                stack.pop()
                color[v] = _FINISHED
                order.append(v)

    order.reverse()
    return order


def _two_color(graph: Graph, roots: Iterable[int]) -> Tuple[List[Optional[int]], bool]:
    """Colour every vertex reachable from roots with 0/1; report whether no arc joins equal colours."""
    color: List[Optional[int]] = [None] * graph.vertex_count
    ok = True

    for root in roots:
        if color[root] is not None:
            continue
        color[root] = 0
        stack = [root]
        while stack:
            v = stack.pop()
            for edge in graph.adjacency[v]:
                w = edge.target
                if color[w] is None:
                    color[w] = 1 - color[v]
                    stack.append(w)
                elif color[w] == color[v]:
                    if ok:
                        logger.debug("two-colouring conflict on arc (%d, %d)", v, w)
                    ok = False

    return color, ok


def is_bipartite(graph: Graph, all_components: bool = True) -> bool:
    """
    Check whether a graph is two-colourable.

    Colours alternate across arcs. A conflict marks the graph as not
    bipartite, but the traversal still runs to completion.

    Args:
        graph: Graph, normally undirected (built with ``add_edge``).
        all_components: If True (default), every connected component is
            checked. If False, only the component reachable from vertex 0 is
            checked and other vertices are assumed fine.

    Returns:
        True if no arc joins two vertices of the same colour.

    Complexity: O(V + E).

    Example:
        >>> g = Graph(3)
        >>> g.add_edge(0, 1)
        >>> g.add_edge(1, 2)
        >>> g.add_edge(2, 0)
        >>> is_bipartite(g)
        False

    Note:
        An empty graph is bipartite. A self-loop never is.
    """
    n = graph.vertex_count
    if all_components:
        roots: Iterable[int] = range(n)
    else:
        roots = [0] if n else []
    _, ok = _two_color(graph, roots)
    return ok


def bipartite_coloring(graph: Graph) -> Optional[List[int]]:
    """
    Two-colouring of a bipartite graph.

    Each component's lowest-numbered vertex gets colour 0.

    Args:
        graph: Graph, normally undirected.

    Returns:
        List mapping vertex -> 0 or 1, or None if the graph is not
        bipartite.

    Complexity: O(V + E).

    Example:
        >>> coloring = bipartite_coloring(g)
        >>> side = coloring.count(0)  # size of one side
    """
    color, ok = _two_color(graph, range(graph.vertex_count))
    if not ok:
        return None
    return [c for c in color if c is not None]
