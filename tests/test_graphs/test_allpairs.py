"""Tests for all-pairs shortest path algorithms."""

import numpy as np
import pytest

from graphkit.diagnostics import debug_context
from graphkit.graphs import DistanceMatrix, Graph, insert_edge_into_matrix, warshall_floyd


class TestDistanceMatrix:
    """Tests for the DistanceMatrix container."""

    def test_unreachable(self):
        """Test the initial matrix layout."""
        m = DistanceMatrix.unreachable(3)
        assert m.to_lists() == [[0, None, None], [None, 0, None], [None, None, 0]]
        assert m.size == 3

    def test_indexing(self):
        """Test row and pair indexing."""
        m = DistanceMatrix([[0, 1], [None, 0]])
        assert m[0][1] == 1
        assert m[1, 0] is None
        m[1, 0] = 7
        assert m[1][0] == 7

    def test_index_out_of_range(self):
        """Test bounds checking on indexing."""
        m = DistanceMatrix.unreachable(2)
        with pytest.raises(IndexError):
            m[2]
        with pytest.raises(IndexError):
            m[0, -1]
        with pytest.raises(IndexError):
            m[-1, 0] = 3

    def test_row_index_out_of_range(self):
        """Test that row views reject columns outside the matrix."""
        m = warshall_floyd(Graph(3))
        with pytest.raises(IndexError):
            m[0][-1]
        with pytest.raises(IndexError):
            m[0][3]
        with pytest.raises(IndexError):
            m[1][-2] = 4
        assert m.to_lists() == DistanceMatrix.unreachable(3).to_lists()

    def test_row_view_writes_through(self):
        """Test that writing through a row view updates the matrix."""
        m = DistanceMatrix.unreachable(2)
        row = m[0]
        row[1] = 4
        assert m[0, 1] == 4
        assert len(row) == 2
        assert list(row) == [0, 4]
        assert m[0] == [0, 4]

    def test_not_square(self):
        """Test that ragged input is rejected."""
        with pytest.raises(ValueError, match="square"):
            DistanceMatrix([[0, 1], [0]])

    def test_copy_on_construction(self):
        """Test that the caller's rows are not aliased."""
        rows = [[0, 1], [1, 0]]
        m = DistanceMatrix(rows)
        m[0, 1] = 5
        assert rows[0][1] == 1

    def test_to_numpy(self):
        """Test conversion to a float array with inf for unreachable."""
        m = DistanceMatrix([[0, 2], [None, 0]])
        arr = m.to_numpy()
        assert arr.shape == (2, 2)
        assert arr[0, 1] == 2.0
        assert np.isinf(arr[1, 0])

    def test_to_numpy_empty(self):
        """Test conversion of an empty matrix."""
        assert DistanceMatrix.unreachable(0).to_numpy().shape == (0, 0)


class TestWarshallFloyd:
    """Tests for Warshall-Floyd algorithm."""

    def test_warshall_floyd_simple(self):
        """Test Warshall-Floyd on a directed chain."""
        g = Graph(3)
        g.add_arc(0, 1, 1)
        g.add_arc(1, 2, 2)

        dist = warshall_floyd(g)

        assert dist[0][0] == 0
        assert dist[0][1] == 1
        assert dist[0][2] == 3
        assert dist[1][2] == 2
        assert dist[2][0] is None

    def test_warshall_floyd_scenario(self):
        """Test the undirected reference graph."""
        g = Graph(4)
        g.add_edge(0, 1, 4)
        g.add_edge(1, 2, 3)
        g.add_edge(0, 2, 1)
        g.add_edge(2, 3, 2)

        dist = warshall_floyd(g)

        assert dist.to_lists() == [
            [0, 3, 1, 3],
            [3, 0, 3, 5],
            [1, 3, 0, 2],
            [3, 5, 2, 0],
        ]

    def test_warshall_floyd_shorter_indirect(self):
        """Test that an indirect path beats a heavier direct arc."""
        g = Graph(3)
        g.add_arc(0, 1, 1)
        g.add_arc(1, 2, 2)
        g.add_arc(0, 2, 4)

        assert warshall_floyd(g)[0][2] == 3

    def test_warshall_floyd_parallel_arcs(self):
        """Test that the lightest direct arc is used."""
        g = Graph(2)
        g.add_arc(0, 1, 5)
        g.add_arc(0, 1, 2)
        assert warshall_floyd(g)[0][1] == 2

    def test_warshall_floyd_negative_weights(self):
        """Test negative weights without a negative cycle."""
        g = Graph(3)
        g.add_arc(0, 1, 1)
        g.add_arc(1, 2, -2)

        dist = warshall_floyd(g)

        assert dist[0][2] == -1
        assert not dist.has_negative_cycle()

    def test_warshall_floyd_negative_cycle(self):
        """Test that a negative cycle shows on the diagonal."""
        g = Graph(3)
        g.add_arc(0, 1, 1)
        g.add_arc(1, 2, -3)
        g.add_arc(2, 1, 1)

        dist = warshall_floyd(g)

        assert dist.has_negative_cycle()
        assert dist[1][1] < 0

    def test_warshall_floyd_single_vertex(self):
        """Test Warshall-Floyd on one vertex."""
        assert warshall_floyd(Graph(1)).to_lists() == [[0]]

    def test_warshall_floyd_empty(self):
        """Test Warshall-Floyd on an empty graph."""
        assert len(warshall_floyd(Graph(0))) == 0

    def test_zero_diagonal_random(self, random_edges):
        """Test dist[v][v] == 0 for non-negative random graphs."""
        n = 8
        g = Graph(n)
        for u, v, w in random_edges(n, 20):
            g.add_arc(u, v, w)

        dist = warshall_floyd(g)
        assert all(dist[v][v] == 0 for v in range(n))


class TestInsertEdgeIntoMatrix:
    """Tests for incremental edge insertion."""

    def test_insert_shortcut(self):
        """Test that a new edge shortens paths through both endpoints."""
        g = Graph(4)
        g.add_edge(0, 1, 5)
        g.add_edge(1, 2, 5)
        g.add_edge(2, 3, 5)

        dist = warshall_floyd(g)
        insert_edge_into_matrix(dist, 0, 3, 1)

        assert dist[0][3] == 1
        assert dist[3][0] == 1
        assert dist[1][3] == 6
        assert dist[0][2] == 6

    def test_insert_heavier_edge_is_noop(self):
        """Test that a heavier edge leaves the matrix unchanged."""
        g = Graph(2)
        g.add_edge(0, 1, 2)

        dist = warshall_floyd(g)
        before = dist.to_lists()
        insert_edge_into_matrix(dist, 0, 1, 10)

        assert dist.to_lists() == before

    def test_insert_connects_components(self):
        """Test joining two components."""
        g = Graph(4)
        g.add_edge(0, 1, 1)
        g.add_edge(2, 3, 1)

        dist = warshall_floyd(g)
        assert dist[0][3] is None

        insert_edge_into_matrix(dist, 1, 2)
        assert dist[0][3] == 3

    def test_insert_out_of_range(self):
        """Test bounds checking."""
        dist = warshall_floyd(Graph(2))
        with pytest.raises(IndexError):
            insert_edge_into_matrix(dist, 0, 2, 1)

    def test_insert_debug_checks_square(self):
        """Test that debug mode rejects a matrix made ragged after construction."""
        dist = warshall_floyd(Graph(2))
        dist.rows[1].append(0)
        with debug_context(True):
            with pytest.raises(ValueError, match="square"):
                insert_edge_into_matrix(dist, 0, 1, 1)

    @pytest.mark.parametrize("n, m, extra", [(5, 4, 3), (8, 10, 5), (10, 12, 8)])
    def test_insert_matches_full_recomputation(self, random_edges, n, m, extra):
        """Test incremental insertion against recomputing from scratch."""
        g = Graph(n)
        for u, v, w in random_edges(n, m, low=1):
            g.add_edge(u, v, w)

        dist = warshall_floyd(g)
        for u, v, w in random_edges(n, extra, low=1):
            insert_edge_into_matrix(dist, u, v, w)
            g.add_edge(u, v, w)
            assert dist == warshall_floyd(g)

    def test_insert_keeps_shorter_reverse_distance(self):
        """Test that a heavy edge does not lengthen the opposite direction."""
        g = Graph(2)
        g.add_arc(1, 0, 1)

        dist = warshall_floyd(g)
        insert_edge_into_matrix(dist, 0, 1, 5)
        g.add_edge(0, 1, 5)

        assert dist[0][1] == 5
        assert dist[1][0] == 1
        assert dist == warshall_floyd(g)

    @pytest.mark.parametrize("n, m, extra", [(5, 6, 3), (8, 14, 5), (10, 20, 8)])
    def test_insert_into_directed_matches_full_recomputation(self, random_edges, n, m, extra):
        """Test insertion into a matrix built from a directed graph."""
        g = Graph(n)
        for u, v, w in random_edges(n, m, low=1):
            g.add_arc(u, v, w)

        dist = warshall_floyd(g)
        for u, v, w in random_edges(n, extra, low=1):
            insert_edge_into_matrix(dist, u, v, w)
            g.add_edge(u, v, w)
            assert dist == warshall_floyd(g)
