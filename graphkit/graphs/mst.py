"""
Minimum spanning tree algorithms: Kruskal and Prim.

Kruskal uses a disjoint-set (union-find) structure. Prim uses a priority
queue. Both return the total weight of a minimum spanning forest, so a
disconnected graph yields the sum over its components.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties), 23.2 (Kruskal), 23.2 (Prim).
"""

import heapq
from typing import Any, Callable, Iterable, List, Protocol, Tuple

from ..diagnostics import assert_symmetric_weights, is_debug_enabled
from ..logging import get_logger
from .core import Edge, Graph, W, check_vertex

logger = get_logger(__name__)


class DisjointSet(Protocol):
    """Capability Kruskal needs from a union-find structure."""

    def find(self, x: int) -> int:
        ...

    def unite(self, x: int, y: int) -> bool:
        ...


class UnionFind:
    """
    Union-Find (Disjoint Set) data structure with path compression and union by size.

    Elements are the integers ``0 .. n - 1``. Used by Kruskal's algorithm
    for cycle detection.
    """

    def __init__(self, n: int):
        """
        Initialize n singleton sets.

        Args:
            n: Number of elements.

        Raises:
            ValueError: If n is negative.
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        self.parent: List[int] = list(range(n))
        self._size: List[int] = [1] * n

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, x: int) -> int:
        """
        Find the root of x, compressing the path on the way.

        Args:
            x: Element to find root for.

        Returns:
            Root element.

        Raises:
            IndexError: If x is out of range.
        """
        check_vertex(x, len(self.parent))
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def unite(self, x: int, y: int) -> bool:
        """
        Merge the sets containing x and y, attaching the smaller under the larger.

        Args:
            x: First element.
            y: Second element.

        Returns:
            True if the sets were merged (x and y were in different sets),
            False if they were already in the same set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self._size[root_x] < self._size[root_y]:
            root_x, root_y = root_y, root_x
        self.parent[root_y] = root_x
        self._size[root_x] += self._size[root_y]
        return True

    def same(self, x: int, y: int) -> bool:
        """Return True if x and y are in the same set."""
        return self.find(x) == self.find(y)

    def size(self, x: int) -> int:
        """Return the number of elements in the set containing x."""
        return self._size[self.find(x)]


def _select_edges(
    edges: Iterable[Edge[W]],
    vertex_count: int,
    disjoint_set: Callable[[int], DisjointSet],
) -> List[Edge[W]]:
    edge_list = list(edges)
    for edge in edge_list:
        check_vertex(edge.source, vertex_count)
        check_vertex(edge.target, vertex_count)

    # sorted() is stable, so equal weights keep input order
    edge_list = sorted(edge_list, key=lambda e: e.weight)

    forest = disjoint_set(vertex_count)
    return [edge for edge in edge_list if forest.unite(edge.source, edge.target)]


def kruskal(
    edges: Iterable[Edge[W]],
    vertex_count: int,
    zero: Any = 0,
    disjoint_set: Callable[[int], DisjointSet] = UnionFind,
) -> W:
    """
    Kruskal's algorithm for the weight of a minimum spanning tree.

    Takes edges in ascending weight order and keeps each one whose endpoints
    are still in different components.

    Args:
        edges: Iterable of Edge (direction is ignored). Not reordered.
        vertex_count: Number of vertices.
        zero: Additive identity of the weight type (default 0).
        disjoint_set: Factory building a DisjointSet over ``vertex_count``
            elements (default UnionFind).

    Returns:
        Total weight of the minimum spanning tree, or of the minimum spanning
        forest if the graph is disconnected.

    Raises:
        IndexError: If an edge endpoint is out of range.

    Complexity: O(E log E) for sorting, near O(1) amortized per union-find
        operation.

    Example:
        >>> edges = EdgeList()
        >>> edges.add(0, 1, 4)
        >>> edges.add(1, 2, 3)
        >>> edges.add(0, 2, 1)
        >>> edges.add(2, 3, 2)
        >>> kruskal(edges, 4)
        6
    """
    total = zero
    for edge in _select_edges(edges, vertex_count, disjoint_set):
        total = total + edge.weight
    return total


def kruskal_edges(
    edges: Iterable[Edge[W]],
    vertex_count: int,
    disjoint_set: Callable[[int], DisjointSet] = UnionFind,
) -> List[Edge[W]]:
    """
    Kruskal's algorithm returning the selected edges.

    Args:
        edges: Iterable of Edge (direction is ignored).
        vertex_count: Number of vertices.
        disjoint_set: Factory building a DisjointSet (default UnionFind).

    Returns:
        Edges of a minimum spanning forest in ascending weight order. A
        connected graph yields ``vertex_count - 1`` edges.

    Raises:
        IndexError: If an edge endpoint is out of range.

    Complexity: O(E log E).
    """
    return _select_edges(edges, vertex_count, disjoint_set)


def prim(graph: Graph[W], zero: Any = 0) -> W:
    """
    Prim's algorithm for the weight of a minimum spanning forest.

    Grows a tree from each not yet visited vertex in index order, always
    taking the lightest arc leaving the tree.

    Args:
        graph: Undirected Graph (built with ``add_edge``).
        zero: Additive identity of the weight type (default 0).

    Returns:
        Total weight of the minimum spanning forest.

    Raises:
        ValueError: If debug mode is enabled and the graph is not undirected.

    Complexity: O(E log V) using binary heap.

    Example:
        >>> prim(g)
        6
    """
    if is_debug_enabled():
        assert_symmetric_weights(graph)

    n = graph.vertex_count
    in_tree = [False] * n
    total = zero

    for start in range(n):
        if in_tree[start]:
            continue
        pq: List[Tuple[Any, int]] = [(zero, start)]
        first = True
        while pq:
            weight, v = heapq.heappop(pq)
            if in_tree[v]:
                continue
            in_tree[v] = True
            if not first:
                total = total + weight
            first = False
            for edge in graph.adjacency[v]:
                if not in_tree[edge.target]:
                    heapq.heappush(pq, (edge.weight, edge.target))

    logger.debug("prim: %d vertices, forest weight %s", n, total)
    return total
