"""Precondition checks for graphs and distance matrices.

These run only when debug mode is on; the algorithms themselves treat the
conditions as caller responsibility.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Tuple

if TYPE_CHECKING:
    from ..graphs.allpairs import DistanceMatrix
    from ..graphs.core import Graph


def assert_non_negative_weights(graph: "Graph", zero: Any = 0) -> None:
    """
    Assert that every arc of a graph carries a non-negative weight.

    Parameters
    ----------
    graph:
        Graph to inspect.
    zero:
        Additive identity of the weight type.

    Raises
    ------
    ValueError
        On the first arc whose weight is below ``zero``.
    """
    for edge in graph.arcs():
        if edge.weight < zero:
            raise ValueError(
                f"Dijkstra requires non-negative weights. "
                f"Found negative weight {edge.weight} on arc "
                f"({edge.source}, {edge.target})"
            )


def is_symmetric(graph: "Graph") -> bool:
    """
    Check whether every arc u->v is matched by an arc v->u of equal weight.

    Parallel arcs are matched as multisets, so an undirected multigraph
    built with ``add_edge`` is symmetric.

    Parameters
    ----------
    graph:
        Graph to inspect.

    Returns
    -------
    bool
        True if the graph models an undirected graph.
    """
    balance: Dict[Tuple[int, int, Any], int] = {}
    for edge in graph.arcs():
        if edge.source == edge.target:
            continue
        forward = (edge.source, edge.target, edge.weight)
        backward = (edge.target, edge.source, edge.weight)
        if balance.get(backward, 0) > 0:
            balance[backward] -= 1
        else:
            balance[forward] = balance.get(forward, 0) + 1
    return all(count == 0 for count in balance.values())


def assert_symmetric_weights(graph: "Graph") -> None:
    """
    Assert that a graph models an undirected graph.

    Raises
    ------
    ValueError
        If some arc has no reverse arc of identical weight.
    """
    if not is_symmetric(graph):
        raise ValueError(
            "Graph is not undirected: some arc has no reverse arc "
            "with identical weight."
        )


def assert_square_matrix(matrix: "DistanceMatrix") -> None:
    """
    Assert that a distance matrix is square.

    Parameters
    ----------
    matrix:
        Distance matrix to inspect.

    Raises
    ------
    ValueError
        If any row length differs from the number of rows.
    """
    n = len(matrix)
    for i, row in enumerate(matrix):
        if len(row) != n:
            raise ValueError(
                f"Distance matrix must be square: row {i} has {len(row)} "
                f"entries, expected {n}."
            )
