"""Tests for cycle construction and random edge emission."""

import numpy as np
import pytest

from gfagen.config import ConfigurationError
from gfagen.graph.edges import cycle_edges, random_edges
from gfagen.graph.gfa import ORIENTATIONS
from gfagen.graph.types import EdgeRecord


class TestCycleEdges:
    """The connectivity cycle visits every node once, all forward."""

    def test_cycle_over_three_nodes(self) -> None:
        assert list(cycle_edges(3)) == [
            EdgeRecord(1, "+", 2, "+"),
            EdgeRecord(2, "+", 3, "+"),
            EdgeRecord(3, "+", 1, "+"),
        ]

    def test_single_node_self_loop(self) -> None:
        assert list(cycle_edges(1)) == [EdgeRecord(1, "+", 1, "+")]

    def test_cycle_length_and_closure(self) -> None:
        edges = list(cycle_edges(100))
        assert len(edges) == 100
        assert [e.from_id for e in edges] == list(range(1, 101))
        assert [e.to_id for e in edges] == list(range(2, 101)) + [1]
        assert all(e.from_sign == "+" and e.to_sign == "+" for e in edges)

    def test_zero_nodes_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            next(cycle_edges(0))


class TestRandomEdges:
    """Random links are uniform, unfiltered, and drawn in a fixed order."""

    def test_count(self) -> None:
        rng = np.random.default_rng(42)
        assert len(list(random_edges(10, 57, rng))) == 57

    def test_endpoints_in_range(self) -> None:
        rng = np.random.default_rng(42)
        for edge in random_edges(7, 500, rng):
            assert 1 <= edge.from_id <= 7
            assert 1 <= edge.to_id <= 7

    def test_orientation_domain(self) -> None:
        rng = np.random.default_rng(42)
        edges = list(random_edges(5, 200, rng))
        signs = {e.from_sign for e in edges} | {e.to_sign for e in edges}
        assert signs == set(ORIENTATIONS)

    def test_single_node_yields_self_loops(self) -> None:
        """Self-loops are kept, not filtered."""
        rng = np.random.default_rng(3)
        edges = list(random_edges(1, 10, rng))
        assert all(e.from_id == 1 and e.to_id == 1 for e in edges)

    def test_duplicates_kept(self) -> None:
        rng = np.random.default_rng(3)
        edges = list(random_edges(2, 50, rng))
        assert len(set(edges)) < len(edges)

    def test_draw_order(self) -> None:
        """Per edge: from, to, from_sign, to_sign."""
        edges = list(random_edges(9, 3, np.random.default_rng(123)))
        rng = np.random.default_rng(123)
        for edge in edges:
            assert edge.from_id == rng.integers(1, 9, endpoint=True)
            assert edge.to_id == rng.integers(1, 9, endpoint=True)
            assert edge.from_sign == ORIENTATIONS[rng.integers(0, 2)]
            assert edge.to_sign == ORIENTATIONS[rng.integers(0, 2)]

    def test_empty_node_set_rejected_before_drawing(self) -> None:
        rng = np.random.default_rng(5)
        state = rng.bit_generator.state
        with pytest.raises(ConfigurationError, match="empty node set"):
            next(random_edges(0, 1, rng))
        assert rng.bit_generator.state == state

    def test_zero_budget_over_no_nodes(self) -> None:
        rng = np.random.default_rng(5)
        assert list(random_edges(0, 0, rng)) == []
