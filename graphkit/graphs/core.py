"""
Core graph data structures.

Provides Edge, Graph and EdgeList. Vertices are the integers
``0 .. vertex_count - 1``; the vertex count is fixed when a Graph is
created and only edges are added afterwards. Weights are generic: any type
that supports ``<`` and ``+`` works (int, float, Fraction, Decimal).

Example:
    >>> g = Graph(4)
    >>> add_edge(g, 0, 1, 4)      # undirected edge 0-1 with weight 4
    >>> add_arc(g, 1, 2, 3)       # directed arc 1->2 with weight 3
    >>> edges = EdgeList()
    >>> add_to_edge_list(edges, 0, 2, 1)
"""

from dataclasses import dataclass
from typing import Generic, Iterator, List, TypeVar

W = TypeVar("W")


@dataclass(frozen=True)
class Edge(Generic[W]):
    """
    Weighted arc from ``source`` to ``target``.

    Attributes:
        source: Tail vertex index.
        target: Head vertex index.
        weight: Arc weight (default 1).
    """

    source: int
    target: int
    weight: W = 1  # type: ignore[assignment]

    def reversed(self) -> "Edge[W]":
        """Return the same arc pointing the other way."""
        return Edge(self.target, self.source, self.weight)


class Graph(Generic[W]):
    """
    Fixed-size graph with adjacency-list representation.

    ``graph[v]`` is the list of Edge objects leaving ``v``. An undirected
    edge is stored as two arcs of identical weight, a directed edge as one.

    Attributes:
        adjacency: Per-vertex lists of outgoing arcs.

    Complexity:
        - add_edge / add_arc: O(1) amortized
        - arcs: O(V + E)
        - reversed: O(V + E)
    """

    def __init__(self, vertex_count: int):
        """
        Initialize a graph with no edges.

        Args:
            vertex_count: Number of vertices.

        Raises:
            ValueError: If vertex_count is negative.
        """
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be non-negative, got {vertex_count}")
        self.adjacency: List[List[Edge[W]]] = [[] for _ in range(vertex_count)]

    @property
    def vertex_count(self) -> int:
        return len(self.adjacency)

    def __len__(self) -> int:
        return len(self.adjacency)

    def __iter__(self) -> Iterator[List[Edge[W]]]:
        return iter(self.adjacency)

    def __getitem__(self, vertex: int) -> List[Edge[W]]:
        self.check_vertex(vertex)
        return self.adjacency[vertex]

    def __repr__(self) -> str:
        return f"Graph(vertex_count={self.vertex_count}, arcs={sum(map(len, self.adjacency))})"

    def check_vertex(self, vertex: int) -> None:
        """
        Validate a vertex index.

        Raises:
            IndexError: If vertex is outside ``[0, vertex_count)``.
        """
        check_vertex(vertex, self.vertex_count)

    def add_edge(self, source: int, target: int, weight: W = 1) -> None:  # type: ignore[assignment]
        """
        Add an undirected edge as the arcs source->target and target->source.

        Args:
            source: First endpoint.
            target: Second endpoint.
            weight: Edge weight (default 1).

        Raises:
            IndexError: If either endpoint is out of range. The graph is
                left unchanged.
        """
        self.check_vertex(source)
        self.check_vertex(target)
        self.adjacency[source].append(Edge(source, target, weight))
        self.adjacency[target].append(Edge(target, source, weight))

    def add_arc(self, source: int, target: int, weight: W = 1) -> None:  # type: ignore[assignment]
        """
        Add a directed arc source->target.

        Raises:
            IndexError: If either endpoint is out of range.
        """
        self.check_vertex(source)
        self.check_vertex(target)
        self.adjacency[source].append(Edge(source, target, weight))

    def arcs(self) -> List[Edge[W]]:
        """
        Return every stored arc, grouped by source vertex.

        An undirected edge contributes both of its arcs.
        """
        return [edge for edges in self.adjacency for edge in edges]

    def reversed(self) -> "Graph[W]":
        """
        Return a new graph with every arc flipped.

        Single-destination shortest paths become single-source shortest
        paths on the reversed graph.

        Example:
            >>> to_target = dijkstra(g.reversed(), target)
        """
        result: Graph[W] = Graph(self.vertex_count)
        for edge in self.arcs():
            result.adjacency[edge.target].append(edge.reversed())
        return result


class EdgeList(List[Edge[W]]):
    """
    Flat, unordered list of edges.

    Input representation for Bellman-Ford and Kruskal. Behaves as a plain
    list; ``add`` builds the Edge record.
    """

    def add(self, source: int, target: int, weight: W = 1) -> None:  # type: ignore[assignment]
        """
        Append the edge (source, target, weight).

        Raises:
            IndexError: If either endpoint is negative. Upper bounds are
                checked by the algorithm that receives the list.
        """
        add_to_edge_list(self, source, target, weight)


def check_vertex(vertex: int, vertex_count: int) -> None:
    """
    Validate that ``vertex`` lies in ``[0, vertex_count)``.

    Raises:
        IndexError: If it does not.
    """
    if not 0 <= vertex < vertex_count:
        raise IndexError(f"Vertex {vertex} out of range for graph with {vertex_count} vertices")


def add_edge(graph: Graph[W], source: int, target: int, weight: W = 1) -> None:  # type: ignore[assignment]
    """Add an undirected edge to ``graph``. See Graph.add_edge."""
    graph.add_edge(source, target, weight)


def add_arc(graph: Graph[W], source: int, target: int, weight: W = 1) -> None:  # type: ignore[assignment]
    """Add a directed arc to ``graph``. See Graph.add_arc."""
    graph.add_arc(source, target, weight)


def add_to_edge_list(edges: List[Edge[W]], source: int, target: int, weight: W = 1) -> None:  # type: ignore[assignment]
    """
    Append the edge (source, target, weight) to a flat edge list.

    Works with an EdgeList or any plain list.

    Raises:
        IndexError: If either endpoint is negative.
    """
    for vertex in (source, target):
        if vertex < 0:
            raise IndexError(f"Vertex {vertex} out of range: indices must be non-negative")
    edges.append(Edge(source, target, weight))
