"""Command Line Interface for labelgraph.

Loads a JSON dataset into a graph and answers queries about it.

The CLI supports the following commands:
    - find-path: Print the shortest path between two nodes
    - list-nodes: Print every node label, alphabetically
    - list-children: Print the children of a node with the connecting edge labels

Datasets are JSON files tagged with their kind:
    {"kind": "cooccurrence", "contexts": {"book-1": ["A", "B"], ...}}
    {"kind": "campus", "buildings": [...], "paths": [...]}

Example Usage:
    python -m labelgraph find-path data/marvel.json "CAPTAIN AMERICA" "IRON MAN"
    python -m labelgraph find-path data/campus.json CSE MGH --json
    python -m labelgraph list-children data/marvel.json HULK
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .core.exceptions import DuplicateResourceError, ResourceNotFoundError, ValidationError
from .core.graph import Graph
from .core.graph_paths import PathFinding
from .core.registry import GraphRegistry
from .loaders import load_dataset

logger = logging.getLogger(__name__)


def read_dataset(path: str) -> dict:
    """Read a JSON dataset from a file.

    Raises:
        ValueError: If the file is missing or does not hold valid JSON.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise ValueError(f"File not found: {file_path}")
    try:
        with file_path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON input: {e}")


def load_graph(registry: GraphRegistry, path: str) -> Graph:
    """Load the dataset at ``path`` into ``registry``, once per path."""
    graph = registry.find(path)
    if graph is None:
        graph = registry.put(path, load_dataset(read_dataset(path)))
    return graph


def _label(value: str, underscores: bool) -> str:
    return value.replace("_", " ") if underscores else value


def find_path(
    registry: GraphRegistry,
    dataset: str,
    start: str,
    end: str,
    as_json: bool = False,
    noun: str = "node",
) -> List[str]:
    graph = load_graph(registry, dataset)
    result = PathFinding.shortest_path(graph, start, end)
    if as_json:
        return [json.dumps(result.to_dict(), indent=2)]
    return result.format_lines(noun=noun)


def list_nodes(registry: GraphRegistry, dataset: str) -> List[str]:
    graph = load_graph(registry, dataset)
    labels = sorted(node.label for node in graph.list_nodes())
    return [f"{dataset} contains: " + " ".join(labels)]


def list_children(registry: GraphRegistry, dataset: str, parent: str) -> List[str]:
    graph = load_graph(registry, dataset)
    children = " ".join(f"{child}({edge})" for child, edge in graph.list_children(parent))
    return [f"the children of {parent} in {dataset} are: {children}"]


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser."""
    parser = argparse.ArgumentParser(prog="labelgraph", description="Label graph CLI")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    parser.add_argument(
        "--underscores",
        action="store_true",
        help="Treat '_' in node labels as spaces",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    find = subparsers.add_parser("find-path", help="Find the shortest path between two nodes")
    find.add_argument("dataset", help="JSON dataset file")
    find.add_argument("start", help="Start node label")
    find.add_argument("end", help="Destination node label")
    find.add_argument("--json", action="store_true", help="Print the result as JSON")
    find.add_argument("--noun", default="node", help="Word used in 'unknown <noun>' messages")

    nodes = subparsers.add_parser("list-nodes", help="List all node labels")
    nodes.add_argument("dataset", help="JSON dataset file")

    children = subparsers.add_parser("list-children", help="List the children of a node")
    children.add_argument("dataset", help="JSON dataset file")
    children.add_argument("parent", help="Parent node label")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        Process exit status: 0 on success, 1 on a usage or data error.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    registry = GraphRegistry()
    try:
        if args.command == "find-path":
            lines = find_path(
                registry,
                args.dataset,
                _label(args.start, args.underscores),
                _label(args.end, args.underscores),
                as_json=args.json,
                noun=args.noun,
            )
        elif args.command == "list-nodes":
            lines = list_nodes(registry, args.dataset)
        else:
            lines = list_children(
                registry, args.dataset, _label(args.parent, args.underscores)
            )
    except (ValueError, ValidationError, DuplicateResourceError, ResourceNotFoundError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0
