"""Fixtures for core graph tests."""

import pytest

from labelgraph.core.graph import Graph
from labelgraph.core.models import Node


@pytest.fixture
def diamond_graph() -> Graph:
    """
    Fixture providing a weighted diamond with equal-cost routes:

        A --x(1)--> B --z(1)--> D
        A --y(1)--> C --a(1)--> D
        A --w(5)--> D
    """
    graph = Graph()
    for label in "ABCD":
        graph.add_node(Node(label))
    graph.connect("A", "B", "x")
    graph.connect("A", "C", "y")
    graph.connect("B", "D", "z")
    graph.connect("C", "D", "a")
    graph.connect("A", "D", "w", weight=5)
    return graph
