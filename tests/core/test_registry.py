"""
Tests for the named graph registry.
"""

import pytest

from labelgraph.core.exceptions import DuplicateResourceError, GraphNotFoundError
from labelgraph.core.graph import Graph
from labelgraph.core.models import Node
from labelgraph.core.registry import GraphRegistry


def test_create_and_get():
    registry = GraphRegistry()
    graph = registry.create("g1")

    assert isinstance(graph, Graph)
    assert registry.get("g1") is graph
    assert "g1" in registry
    assert len(registry) == 1


def test_registries_are_independent():
    first, second = GraphRegistry(), GraphRegistry()
    first.create("g1").add_node(Node("A"))

    assert "g1" not in second
    assert second.find("g1") is None


def test_duplicate_name_rejected_unless_replacing():
    registry = GraphRegistry()
    registry.create("g1")

    with pytest.raises(DuplicateResourceError):
        registry.create("g1")

    replacement = Graph()
    registry.put("g1", replacement, replace=True)
    assert registry.get("g1") is replacement


def test_missing_graph():
    registry = GraphRegistry()
    with pytest.raises(GraphNotFoundError):
        registry.get("nope")
    with pytest.raises(GraphNotFoundError):
        registry.remove("nope")


def test_names_sorted():
    registry = GraphRegistry()
    for name in ("b", "c", "a"):
        registry.create(name)
    registry.remove("c")

    assert registry.names() == ["a", "b"]
    assert list(registry) == ["a", "b"]
