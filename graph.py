"""
Capability interfaces for weighted graphs.

Nodes are hashable identifiers (see nodes.Node).
Edges are u -> v with a float weight; undirected graphs store both directions.

Lookups of absent nodes or edges are routine and report a found flag
instead of raising.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Tuple

from nodes import Node


class NeighborSource(ABC):
    """The minimal view a traversal needs of a graph."""

    @abstractmethod
    def has_node(self, node: Node) -> bool:
        """Return True if node has at least one adjacency entry."""
        raise NotImplementedError

    @abstractmethod
    def get_neighbors(self, node: Node) -> Tuple[Dict[Node, float], bool]:
        """
        Outgoing neighbors and edge weights for a given node.

        Returns: (dict[Node, float], found)
        """
        raise NotImplementedError


class EdgeSink(ABC):
    """Anything an edge-list loader can feed edges into."""

    @abstractmethod
    def add_edge(self, src: Node, tgt: Node, weight: float = 1.0) -> None:
        raise NotImplementedError


class Graph(NeighborSource, EdgeSink):
    """Weighted graph over hashable node identifiers."""

    @abstractmethod
    def remove_edge(self, src: Node, tgt: Node) -> None:
        """Remove src -> tgt if present; a missing edge is a no-op."""
        raise NotImplementedError

    @abstractmethod
    def remove_node(self, node: Node) -> None:
        """Remove every edge touching node."""
        raise NotImplementedError

    @abstractmethod
    def get_nodes(self) -> List[Node]:
        """Return all nodes in the graph, each once."""
        raise NotImplementedError

    @abstractmethod
    def has_edge(self, src: Node, tgt: Node) -> bool:
        raise NotImplementedError

    @abstractmethod
    def get_edge_weight(self, src: Node, tgt: Node) -> Tuple[float, bool]:
        raise NotImplementedError

    @abstractmethod
    def format_adj(self) -> str:
        """Human readable adjacency listing."""
        raise NotImplementedError

    def add_edges(self, edges: Iterable[tuple]) -> None:
        """Add (src, tgt) or (src, tgt, weight) tuples in order."""
        for edge in edges:
            self.add_edge(*edge)
