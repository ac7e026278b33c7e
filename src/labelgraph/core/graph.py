"""
Core graph data structure keyed by unique node labels.

This module provides the Graph class, a mutable directed multigraph. Nodes are
looked up by label and every edge is attached to both its source's outgoing
set and its destination's incoming set. Parallel edges between the same pair
of nodes are allowed as long as their labels differ.

The graph also keeps an LRU cache of path query results. Any mutation clears it,
including edges attached straight to a held node with ``Node.add_outgoing`` or
``Node.add_incoming``. Such node-level additions are not journalled, so an open
transaction does not roll them back.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from threading import RLock
from typing import Dict, Generator, Iterable, Iterator, List, Optional, Set, Tuple, Union

from ..infrastructure.cache import LRUCache
from .exceptions import DuplicateEdgeError, DuplicateNodeError, NodeNotFoundError
from .models import DEFAULT_WEIGHT, Edge, Node

logger = logging.getLogger(__name__)

# Path cache defaults
PATH_CACHE_SIZE = 1000
PATH_CACHE_TTL = 3600


@dataclass
class GraphState:
    """Encapsulates the state of a graph."""

    nodes: Dict[str, Node] = field(default_factory=dict)


class Graph:
    """
    Mutable container of label-addressed nodes.

    Attributes:
        _state (GraphState): Internal state of the graph
        _state_lock (RLock): Lock guarding state access
        _journal (Optional[List]): Undo log while a transaction is open
        _path_cache (LRUCache): Cache for path query results
    """

    def __init__(
        self,
        nodes: Optional[Iterable[Node]] = None,
        cache_size: int = PATH_CACHE_SIZE,
        cache_ttl: float = PATH_CACHE_TTL,
    ):
        """
        Create a graph, optionally seeded with nodes.

        Args:
            nodes: Nodes to add; their existing edges are not re-attached
            cache_size: Maximum number of cached path results (0 disables the cache)
            cache_ttl: Time-to-live for cached path results in seconds
        """
        self._state = GraphState()
        self._state_lock = RLock()
        self._journal: Optional[List[Tuple[str, Union[Node, Edge]]]] = None
        self._path_cache = LRUCache(max_size=cache_size, ttl=cache_ttl)
        for node in nodes or ():
            self.add_node(node)

    def _mutated(self) -> None:
        self._path_cache.clear()

    def add_node(self, node: Node) -> Node:
        """
        Add a node to the graph.

        Raises:
            TypeError: If ``node`` is not a Node
            DuplicateNodeError: If a node with the same label already exists
        """
        if node is None:
            raise ValueError("node must not be None")
        if not isinstance(node, Node):
            raise TypeError(f"expected a Node, got {type(node).__name__}")
        with self._state_lock:
            if node.label in self._state.nodes:
                raise DuplicateNodeError(f"node {node.label!r} already exists")
            self._state.nodes[node.label] = node
            node._watch(self._mutated)
            if self._journal is not None:
                self._journal.append(("node", node))
            self._mutated()
        logger.debug("Added node %r", node.label)
        return node

    def get_or_add_node(self, label: str) -> Node:
        """Return the node held for ``label``, creating it if necessary."""
        with self._state_lock:
            node = self._state.nodes.get(label)
            if node is None:
                node = self.add_node(Node(label))
            return node

    def add_edge(self, edge: Edge) -> Edge:
        """
        Attach an edge to its source's outgoing set and destination's incoming set.

        The endpoints must be the node instances this graph holds for their
        labels. Nothing is changed if the edge is rejected.

        Raises:
            NodeNotFoundError: If an endpoint is not held by this graph
            DuplicateEdgeError: If an equal edge is already attached
        """
        if edge is None:
            raise ValueError("edge must not be None")
        if not isinstance(edge, Edge):
            raise TypeError(f"expected an Edge, got {type(edge).__name__}")
        with self._state_lock:
            for role, node in (("source", edge.source), ("destination", edge.destination)):
                if self._state.nodes.get(node.label) is not node:
                    raise NodeNotFoundError(
                        f"{role} node {node.label!r} of edge {edge.label!r} is not in the graph"
                    )

            # Check before touching either side so a rejected edge leaves no trace.
            if edge.source.has_outgoing(edge) or edge.destination.has_incoming(edge):
                raise DuplicateEdgeError(
                    f"edge {edge.label!r} from {edge.source_label!r} to "
                    f"{edge.destination_label!r} already exists"
                )

            edge.source.add_outgoing(edge)
            edge.destination.add_incoming(edge)
            if self._journal is not None:
                self._journal.append(("edge", edge))
            self._mutated()
        logger.debug(
            "Added edge %r from %r to %r", edge.label, edge.source_label, edge.destination_label
        )
        return edge

    def connect(
        self,
        source: str,
        destination: str,
        label: str,
        weight: float = DEFAULT_WEIGHT,
    ) -> Edge:
        """
        Create and add an edge between two nodes named by label.

        Raises:
            NodeNotFoundError: If either label is not in the graph
            DuplicateEdgeError: If an equal edge is already attached
        """
        with self._state_lock:
            edge = Edge(
                label=label,
                source=self.require_node(source),
                destination=self.require_node(destination),
                weight=weight,
            )
            return self.add_edge(edge)

    def add_edges_batch(self, edges: Iterable[Edge]) -> None:
        """Add several edges; if any is rejected none of them are kept."""
        with self.transaction():
            for edge in edges:
                self.add_edge(edge)

    @contextmanager
    def transaction(self) -> Generator["Graph", None, None]:
        """
        Context manager for atomic graph operations.

        Nodes and edges added inside the block are removed again if the block
        raises. Transactions do not nest; an inner block joins the outer one.
        """
        with self._state_lock:
            if self._journal is not None:
                yield self
                return
            self._journal = []
            try:
                yield self
            except BaseException:
                self._rollback(self._journal)
                raise
            finally:
                self._journal = None

    def _rollback(self, journal: List[Tuple[str, Union[Node, Edge]]]) -> None:
        for kind, item in reversed(journal):
            if kind == "edge":
                item.source._discard_outgoing(item)
                item.destination._discard_incoming(item)
            else:
                del self._state.nodes[item.label]
                item._unwatch(self._mutated)
        self._mutated()
        logger.debug("Rolled back %d graph changes", len(journal))

    def get_node(self, label: str) -> Optional[Node]:
        """Get the node held for ``label``, or None."""
        with self._state_lock:
            return self._state.nodes.get(label)

    def require_node(self, label: str) -> Node:
        """Get the node held for ``label``, raising an error if it doesn't exist."""
        node = self.get_node(label)
        if node is None:
            raise NodeNotFoundError(f"node {label!r} not found in the graph")
        return node

    def has_node(self, label: str) -> bool:
        """Check if a node exists in the graph."""
        with self._state_lock:
            return label in self._state.nodes

    def list_nodes(self) -> List[Node]:
        """All nodes in the graph, in insertion order."""
        with self._state_lock:
            return list(self._state.nodes.values())

    def list_edges(self) -> Set[Edge]:
        """Every edge in the graph, each counted once."""
        with self._state_lock:
            return {edge for node in self._state.nodes.values() for edge in node.get_outgoing()}

    def iter_edges(self) -> Iterator[Edge]:
        """Iterate over all edges in node insertion order, then edge order."""
        for node in self.list_nodes():
            yield from node.get_outgoing()

    def list_children(self, label: str) -> List[Tuple[str, str]]:
        """
        Get (child label, edge label) pairs for the outgoing edges of a node.

        Self-loops are left out. Pairs are sorted alphabetically.

        Raises:
            NodeNotFoundError: If ``label`` is not in the graph
        """
        node = self.require_node(label)
        return sorted(
            (edge.destination_label, edge.label)
            for edge in node.get_outgoing()
            if not edge.is_self_loop
        )

    def node_count(self) -> int:
        with self._state_lock:
            return len(self._state.nodes)

    def edge_count(self) -> int:
        with self._state_lock:
            return sum(node.out_degree() for node in self._state.nodes.values())

    def __len__(self) -> int:
        return self.node_count()

    def __contains__(self, label: object) -> bool:
        return isinstance(label, str) and self.has_node(label)

    @property
    def path_cache(self) -> LRUCache:
        return self._path_cache

    def clear_path_cache(self) -> None:
        """Clear the path cache."""
        self._path_cache.clear()

    def get_path_cache_stats(self) -> Dict[str, float]:
        """Get statistics about the path cache."""
        return self._path_cache.get_metrics()

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
