"""
All-pairs shortest path algorithms: Warshall-Floyd and incremental update.

``warshall_floyd`` computes the full distance matrix. ``insert_edge_into_matrix``
keeps an existing matrix up to date when one undirected edge is added,
without recomputing from scratch.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

from typing import Any, Generic, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from ..diagnostics import assert_square_matrix, is_debug_enabled
from ..logging import get_logger
from .core import Graph, W, check_vertex

logger = get_logger(__name__)


class MatrixRow(Generic[W]):
    """
    Bounds-checked view of one row of a ``DistanceMatrix``.

    Reads and writes go straight to the underlying row, so
    ``matrix[i][j] = d`` updates the matrix. Negative or too-large column
    indices raise IndexError instead of wrapping around.
    """

    def __init__(self, row: List[Optional[W]]):
        self._row = row

    def __len__(self) -> int:
        return len(self._row)

    def __iter__(self) -> Iterator[Optional[W]]:
        return iter(self._row)

    def __getitem__(self, column: int) -> Optional[W]:
        check_vertex(column, len(self._row))
        return self._row[column]

    def __setitem__(self, column: int, value: Optional[W]) -> None:
        check_vertex(column, len(self._row))
        self._row[column] = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MatrixRow):
            return self._row == other._row
        if isinstance(other, list):
            return self._row == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"MatrixRow({self._row!r})"


class DistanceMatrix(Generic[W]):
    """
    Square matrix of pairwise shortest distances.

    ``matrix[i][j]`` (or ``matrix[i, j]``) is the distance from i to j, or
    None when j is unreachable from i. Both forms check i and j against the
    matrix size. The matrix is mutable so it can be maintained with
    ``insert_edge_into_matrix``.

    Attributes:
        rows: Row-major list of lists of Optional distances.
    """

    def __init__(self, rows: Sequence[Sequence[Optional[W]]]):
        """
        Build a matrix from nested sequences (copied).

        Raises:
            ValueError: If the rows do not form a square matrix.
        """
        self.rows: List[List[Optional[W]]] = [list(row) for row in rows]
        n = len(self.rows)
        for i, row in enumerate(self.rows):
            if len(row) != n:
                raise ValueError(
                    f"Distance matrix must be square: row {i} has {len(row)} "
                    f"entries, expected {n}."
                )

    @classmethod
    def unreachable(cls, size: int, zero: Any = 0) -> "DistanceMatrix[W]":
        """Return a size x size matrix with ``zero`` on the diagonal and None elsewhere."""
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        rows: List[List[Any]] = [[None] * size for _ in range(size)]
        for i in range(size):
            rows[i][i] = zero
        return cls(rows)

    @property
    def size(self) -> int:
        return len(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[List[Optional[W]]]:
        return iter(self.rows)

    def __getitem__(self, key: Union[int, Tuple[int, int]]) -> Any:
        if isinstance(key, tuple):
            i, j = key
            check_vertex(i, self.size)
            check_vertex(j, self.size)
            return self.rows[i][j]
        check_vertex(key, self.size)
        return MatrixRow(self.rows[key])

    def __setitem__(self, key: Tuple[int, int], value: Optional[W]) -> None:
        i, j = key
        check_vertex(i, self.size)
        check_vertex(j, self.size)
        self.rows[i][j] = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DistanceMatrix):
            return self.rows == other.rows
        return NotImplemented

    def __repr__(self) -> str:
        return f"DistanceMatrix({self.rows!r})"

    def has_negative_cycle(self, zero: Any = 0) -> bool:
        """Return True if some vertex has a negative distance to itself."""
        return any(
            self.rows[v][v] is not None and self.rows[v][v] < zero
            for v in range(self.size)
        )

    def to_lists(self) -> List[List[Optional[W]]]:
        """Return a deep copy of the rows."""
        return [list(row) for row in self.rows]

    def to_numpy(self) -> np.ndarray:
        """
        Return the matrix as a float array with ``inf`` for unreachable pairs.

        Example:
            >>> warshall_floyd(g).to_numpy().shape
            (4, 4)
        """
        return np.array(
            [[np.inf if d is None else float(d) for d in row] for row in self.rows],
            dtype=float,
        ).reshape(self.size, self.size)


def _relax_through(rows: List[List[Any]], k: int) -> None:
    """Relax every pair (i, j) through pivot k, skipping unreachable legs."""
    row_k = rows[k]
    for row_i in rows:
        d_ik = row_i[k]
        if d_ik is None:
            continue
        for j, d_kj in enumerate(row_k):
            if d_kj is None:
                continue
            new_dist = d_ik + d_kj
            current = row_i[j]
            if current is None or new_dist < current:
                row_i[j] = new_dist


def warshall_floyd(graph: Graph[W], zero: Any = 0) -> DistanceMatrix[W]:
    """
    Warshall-Floyd algorithm for all-pairs shortest paths.

    Starts from ``zero`` on the diagonal and the lightest direct arc
    between each pair, then relaxes every pair through each pivot vertex.

    Args:
        graph: Graph (arcs may have negative weights).
        zero: Additive identity of the weight type (default 0).

    Returns:
        DistanceMatrix where entry (i, j) is the shortest distance from i to
        j, or None if j is unreachable from i.

    Complexity: O(V^3) where V is the number of vertices.

    Example:
        >>> g = Graph(3)
        >>> g.add_arc(0, 1, 1)
        >>> g.add_arc(1, 2, 2)
        >>> warshall_floyd(g)[0][2]
        3

    Note:
        With a negative cycle the distances are meaningless, but some
        diagonal entry becomes negative; check
        ``DistanceMatrix.has_negative_cycle``.
    """
    n = graph.vertex_count
    logger.debug("warshall_floyd: %d vertices", n)

    matrix: DistanceMatrix[W] = DistanceMatrix.unreachable(n, zero)
    rows = matrix.rows

    for edge in graph.arcs():
        current = rows[edge.source][edge.target]
        if current is None or edge.weight < current:
            rows[edge.source][edge.target] = edge.weight

    for k in range(n):
        _relax_through(rows, k)

    return matrix


def insert_edge_into_matrix(
    matrix: DistanceMatrix[W], source: int, target: int, weight: W = 1  # type: ignore[assignment]
) -> None:
    """
    Update an all-pairs distance matrix in place with a new undirected edge.

    Lowers (source, target) and (target, source) to ``weight`` where each is
    currently longer or unreachable, then re-closes the matrix through the
    two pivots ``source`` and ``target``. A new edge can only shorten paths
    that pass through one of its endpoints, so two pivots suffice.

    Args:
        matrix: Transitively closed matrix, e.g. from ``warshall_floyd``.
        source: First endpoint.
        target: Second endpoint.
        weight: Edge weight (default 1).

    Raises:
        IndexError: If source or target is out of range.
        ValueError: If debug mode is enabled and the matrix is not square.

    Complexity: O(V^2).

    Example:
        >>> wf = warshall_floyd(g)
        >>> insert_edge_into_matrix(wf, 0, 3, 1)

    Note:
        The result is only correct when the input matrix was already closed.
        Edge removal and weight increases are not supported.
    """
    if is_debug_enabled():
        assert_square_matrix(matrix)

    n = len(matrix)
    check_vertex(source, n)
    check_vertex(target, n)

    rows = matrix.rows
    for i, j in ((source, target), (target, source)):
        current = rows[i][j]
        if current is None or weight < current:
            rows[i][j] = weight

    for k in (source, target):
        _relax_through(rows, k)
