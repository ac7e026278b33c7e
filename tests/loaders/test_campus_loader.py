"""
Tests for the campus route graph loader.
"""

import pytest

from labelgraph.core.exceptions import ValidationError
from labelgraph.core.graph import Graph
from labelgraph.core.graph_paths import PathFinding, PathStatus
from labelgraph.loaders import build_campus_graph, load_dataset
from labelgraph.loaders.campus import walkway_label


def test_buildings_become_nodes_with_coordinates(campus_data):
    graph = build_campus_graph(campus_data)

    assert [node.label for node in graph.list_nodes()] == ["CSE", "MGH", "SUZ", "KNE"]
    mgh = graph.require_node("MGH")
    assert mgh.attributes == {"long_name": "Mary Gates Hall", "x": 10.0, "y": 0.0}


def test_walkways_are_bidirectional(campus_data):
    graph = build_campus_graph(campus_data)

    assert graph.edge_count() == 6
    assert graph.list_children("MGH") == [("CSE", "MGH-CSE"), ("SUZ", "MGH-SUZ")]
    edge = graph.require_node("CSE").find_edges(graph.require_node("MGH"))[0]
    assert edge.label == walkway_label("CSE", "MGH")
    assert edge.weight == 10.0


def test_shortest_route_prefers_lower_distance(campus_data):
    graph = build_campus_graph(campus_data)
    result = PathFinding.shortest_path(graph, "SUZ", "CSE")

    assert result.node_labels == ["SUZ", "MGH", "CSE"]
    assert result.total_weight == 20.0


def test_isolated_building_unreachable(campus_data):
    graph = build_campus_graph(campus_data)
    result = PathFinding.shortest_path(graph, "CSE", "KNE")

    assert result.status is PathStatus.NO_PATH


def test_explicit_walkway_label():
    data = {
        "buildings": [
            {"short_name": "A", "x": 0, "y": 0},
            {"short_name": "B", "x": 1, "y": 1},
        ],
        "paths": [{"start": "A", "end": "B", "distance": 2, "label": "Quad"}],
    }
    graph = build_campus_graph(data)

    assert graph.list_children("A") == [("B", "Quad")]
    assert graph.list_children("B") == [("A", "Quad")]
    assert graph.require_node("A").attributes["long_name"] == "A"


def test_unknown_building_rejected(campus_data):
    campus_data["paths"].append({"start": "CSE", "end": "HUB", "distance": 3})
    graph = Graph()

    with pytest.raises(ValidationError, match="unknown building 'HUB'"):
        build_campus_graph(campus_data, graph=graph)
    assert graph.node_count() == 0


@pytest.mark.parametrize(
    "mutate",
    [
        lambda d: d.pop("paths"),
        lambda d: d["buildings"][0].pop("x"),
        lambda d: d["paths"][0].update(distance=-1),
    ],
)
def test_malformed_dataset_rejected(campus_data, mutate):
    mutate(campus_data)
    with pytest.raises(ValidationError):
        build_campus_graph(campus_data)


def test_load_dataset_campus(campus_data):
    graph = load_dataset({"kind": "campus", **campus_data})
    assert graph.node_count() == 4
