"""Shared test fixtures."""

import pytest

from labelgraph.core.graph import Graph
from labelgraph.core.models import Edge, Node


@pytest.fixture
def chain_graph() -> Graph:
    """
    Fixture providing P -> Q -> R with both edges labelled "c1".
    There is no direct P -> R edge.
    """
    graph = Graph()
    for label in ("P", "Q", "R"):
        graph.add_node(Node(label))
    graph.connect("P", "Q", "c1")
    graph.connect("Q", "R", "c1")
    return graph


@pytest.fixture
def parallel_graph() -> Graph:
    """Fixture providing two equally weighted parallel edges P -> Q, "c2" added first."""
    graph = Graph()
    p = graph.add_node(Node("P"))
    q = graph.add_node(Node("Q"))
    graph.add_edge(Edge("c2", p, q))
    graph.add_edge(Edge("c1", p, q))
    return graph


@pytest.fixture
def staff_contexts() -> dict:
    """Fixture providing a small co-occurrence table, book id -> characters."""
    return {
        "CSE331": [
            "Ernst-the-Bicycling-Wizard",
            "Notkin-of-the-Superhuman-Beard",
            "Perkins-the-Magical-Singing-Instructor",
        ],
        "CSE403": ["Ernst-the-Bicycling-Wizard", "Notkin-of-the-Superhuman-Beard"],
        "CSE401": ["Notkin-of-the-Superhuman-Beard", "Grossman-the-Youngest-of-them-all"],
        "CSE501": ["Grossman-the-Youngest-of-them-all"],
    }


@pytest.fixture
def campus_data() -> dict:
    """
    Fixture providing a small campus map:

        CSE --10-- MGH --10-- SUZ
          \\                  /
           ------- 25 -------
    """
    return {
        "buildings": [
            {"short_name": "CSE", "long_name": "Allen Center", "x": 0.0, "y": 0.0},
            {"short_name": "MGH", "long_name": "Mary Gates Hall", "x": 10.0, "y": 0.0},
            {"short_name": "SUZ", "long_name": "Suzzallo Library", "x": 20.0, "y": 0.0},
            {"short_name": "KNE", "long_name": "Kane Hall", "x": 50.0, "y": 50.0},
        ],
        "paths": [
            {"start": "CSE", "end": "MGH", "distance": 10},
            {"start": "MGH", "end": "SUZ", "distance": 10.0},
            {"start": "CSE", "end": "SUZ", "distance": 25.0},
        ],
    }
