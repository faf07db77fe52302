"""graphkit - shortest paths, spanning trees and graph properties on integer-indexed graphs."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

# Graph algorithms
from .graphs import (
    DisjointSet,
    DistanceMatrix,
    Edge,
    EdgeList,
    Graph,
    UnionFind,
    add_arc,
    add_edge,
    add_to_edge_list,
    bellman_ford,
    bipartite_coloring,
    dijkstra,
    dijkstra_with_parents,
    edges_from_graph,
    insert_edge_into_matrix,
    is_bipartite,
    kruskal,
    kruskal_edges,
    prim,
    reconstruct_path,
    topological_sort,
    warshall_floyd,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Diagnostics
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Graph algorithms
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
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
