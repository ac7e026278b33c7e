"""
Tests for the co-occurrence graph loader.
"""

import pytest

from labelgraph.core.exceptions import ValidationError
from labelgraph.core.graph import Graph
from labelgraph.core.graph_paths import PathFinding
from labelgraph.core.models import Node
from labelgraph.loaders import build_cooccurrence_graph, invert_appearances, load_dataset


def test_invert_appearances_groups_by_context():
    rows = [("A", "b1"), ("B", "b1"), ("A", "b2"), ("A", "b1")]
    assert invert_appearances(rows) == {"b1": ["A", "B"], "b2": ["A"]}


def test_builds_nodes_and_edges(staff_contexts):
    graph = build_cooccurrence_graph(staff_contexts)

    assert graph.node_count() == 4
    # 6 from CSE331, 2 each from CSE403 and CSE401, none from CSE501
    assert graph.edge_count() == 10
    assert graph.list_children("Grossman-the-Youngest-of-them-all") == [
        ("Notkin-of-the-Superhuman-Beard", "CSE401")
    ]


def test_pairs_are_linked_both_ways(staff_contexts):
    graph = build_cooccurrence_graph(staff_contexts)
    ernst = graph.require_node("Ernst-the-Bicycling-Wizard")
    notkin = graph.require_node("Notkin-of-the-Superhuman-Beard")

    assert [e.label for e in ernst.find_edges(notkin)] == ["CSE331", "CSE403"]
    assert [e.label for e in notkin.find_edges(ernst)] == ["CSE331", "CSE403"]


def test_no_self_loops_for_repeated_labels():
    graph = build_cooccurrence_graph({"b1": ["A", "A", "B"]})

    assert graph.edge_count() == 2
    assert all(not edge.is_self_loop for edge in graph.list_edges())


def test_shortest_path_through_loaded_graph(staff_contexts):
    graph = build_cooccurrence_graph(staff_contexts)
    result = PathFinding.shortest_path(
        graph, "Ernst-the-Bicycling-Wizard", "Grossman-the-Youngest-of-them-all"
    )

    assert result.edge_labels == ["CSE331", "CSE401"]
    assert result.total_weight == 2.0


def test_extends_existing_graph():
    graph = Graph()
    graph.add_node(Node("A"))
    build_cooccurrence_graph({"b1": ["A", "B"]}, graph=graph)
    build_cooccurrence_graph({"b1": ["A", "B"], "b2": ["B", "C"]}, graph=graph)

    assert graph.node_count() == 3
    assert graph.edge_count() == 4


@pytest.mark.parametrize(
    "contexts",
    [
        {"b1": "A"},
        {"b1": ["A", 3]},
        {"b1": ["A", ""]},
        ["A", "B"],
    ],
)
def test_invalid_contexts_rejected(contexts):
    graph = Graph()
    with pytest.raises(ValidationError):
        build_cooccurrence_graph(contexts, graph=graph)
    assert graph.node_count() == 0


def test_load_dataset_dispatches_on_kind(staff_contexts):
    graph = load_dataset({"kind": "cooccurrence", "contexts": staff_contexts})
    assert graph.node_count() == 4


@pytest.mark.parametrize("data", [{"kind": "movies"}, {}, ["cooccurrence"]])
def test_load_dataset_rejects_unknown_kind(data):
    with pytest.raises(ValidationError):
        load_dataset(data)
