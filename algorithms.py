"""
Algorithm interfaces for graph traversal.

Keeps traversal algorithms separate from graph storage: engines only see
the NeighborSource capability, so they run over directed and undirected
graphs alike.
"""

from abc import ABC, abstractmethod
from typing import List

from graph import NeighborSource
from nodes import Node


class TraversalEngine(ABC):
    """
    Interface for single-source reachability.
    """

    @abstractmethod
    def reachable(self, graph: NeighborSource, start: Node) -> List[Node]:
        """
        Collect every node reachable from start by following outgoing edges.

        Returns:
            Reachable nodes including start, each once, in no particular
            order. Empty if start is not in the graph.
        """
        raise NotImplementedError
