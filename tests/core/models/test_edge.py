"""
Tests for edge models.
"""

import math

import pytest

from labelgraph.core.models import Edge, Node


@pytest.fixture
def endpoints():
    """Fixture providing two unattached nodes."""
    return Node("P"), Node("Q")


def test_edge_creation(endpoints):
    """Test basic edge creation and properties."""
    p, q = endpoints
    edge = Edge("c1", p, q)

    assert edge.label == "c1"
    assert edge.source is p
    assert edge.destination is q
    assert edge.source_label == "P"
    assert edge.destination_label == "Q"
    assert edge.weight == pytest.approx(1.0)
    assert isinstance(edge.weight, float)
    assert not edge.is_self_loop


def test_edge_weight_is_coerced_to_float(endpoints):
    """Integer weights are accepted and stored as floats."""
    p, q = endpoints
    edge = Edge("c1", p, q, weight=3)
    assert edge.weight == 3.0
    assert isinstance(edge.weight, float)


@pytest.mark.parametrize("weight", [-1.0, math.nan, math.inf])
def test_edge_rejects_bad_weight(endpoints, weight):
    """Test weight validation."""
    p, q = endpoints
    with pytest.raises(ValueError):
        Edge("c1", p, q, weight=weight)


def test_edge_rejects_non_numeric_weight(endpoints):
    p, q = endpoints
    with pytest.raises(TypeError, match="weight must be a numeric value"):
        Edge("c1", p, q, weight="heavy")


def test_edge_validation(endpoints):
    """Test edge validation of label and endpoints."""
    p, q = endpoints
    with pytest.raises(ValueError, match="label must not be None"):
        Edge(None, p, q)
    with pytest.raises(ValueError, match="label must be a non-empty string"):
        Edge("  ", p, q)
    with pytest.raises(ValueError, match="endpoints must not be None"):
        Edge("c1", None, q)
    with pytest.raises(TypeError, match="endpoints must be Node instances"):
        Edge("c1", "P", q)


def test_edge_is_immutable(endpoints):
    p, q = endpoints
    edge = Edge("c1", p, q)
    with pytest.raises(AttributeError):
        edge.label = "c2"


def test_edge_equality_ignores_weight_and_node_instance():
    """Edges are equal when label, source label and destination label match."""
    a = Edge("c1", Node("P"), Node("Q"), weight=1.0)
    b = Edge("c1", Node("P"), Node("Q"), weight=7.5)

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != Edge("c2", Node("P"), Node("Q"))
    assert a != Edge("c1", Node("Q"), Node("P"))


def test_edge_ordering():
    """Edges sort by label, then source label, then destination label."""
    p, q, r = Node("P"), Node("Q"), Node("R")
    edges = [Edge("c2", p, q), Edge("c1", q, r), Edge("c1", p, r), Edge("c1", p, q)]

    assert [e.sort_key for e in sorted(edges)] == [
        ("c1", "P", "Q"),
        ("c1", "P", "R"),
        ("c1", "Q", "R"),
        ("c2", "P", "Q"),
    ]
    assert Edge("a", r, r) < Edge("b", p, p)
    assert Edge("a", p, q) <= Edge("a", p, q)


def test_self_loop(endpoints):
    p, _ = endpoints
    assert Edge("c1", p, p).is_self_loop
