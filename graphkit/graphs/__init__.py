"""
Graph algorithms package for graphkit.

This package provides classic graph algorithms on integer-indexed graphs:
- Graph data structures (Edge, Graph, EdgeList)
- Shortest path algorithms (Dijkstra, Bellman-Ford)
- All-pairs shortest paths (Warshall-Floyd) with incremental edge insertion
- Minimum spanning trees (Kruskal, Prim) and union-find
- Topological sort and bipartite check

Distances use None for "unreachable" instead of a large sentinel value.
"""

from .allpairs import DistanceMatrix, insert_edge_into_matrix, warshall_floyd
from .core import Edge, EdgeList, Graph, add_arc, add_edge, add_to_edge_list
from .mst import DisjointSet, UnionFind, kruskal, kruskal_edges, prim
from .properties import bipartite_coloring, is_bipartite, topological_sort
from .shortest import bellman_ford, dijkstra, dijkstra_with_parents
from .utils import edges_from_graph, reconstruct_path

__all__ = [
    "Edge",
    "EdgeList",
    "Graph",
    "add_edge",
    "add_arc",
    "add_to_edge_list",
    "dijkstra",
    "dijkstra_with_parents",
    "bellman_ford",
    "DistanceMatrix",
    "warshall_floyd",
    "insert_edge_into_matrix",
    "DisjointSet",
    "UnionFind",
    "kruskal",
    "kruskal_edges",
    "prim",
    "topological_sort",
    "is_bipartite",
    "bipartite_coloring",
    "edges_from_graph",
    "reconstruct_path",
]

# Example usage:
# from graphkit.graphs import Graph, EdgeList, dijkstra, kruskal
#
# g = Graph(4)
# g.add_edge(0, 1, 4)
# g.add_edge(1, 2, 3)
# g.add_edge(0, 2, 1)
# g.add_edge(2, 3, 2)
# dijkstra(g, 0)                                 # [0, 3, 1, 3]
# kruskal(edges_from_graph(g, undirected=True), 4)  # 6
