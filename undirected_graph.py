"""
Undirected, weighted graph stored as a symmetric adjacency map.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from adjacency import WeightedAdjacency
from graph import Graph
from nodes import Node

logger = logging.getLogger(__name__)


class UndirectedGraph(Graph):
    """
    Every edge a -- b is stored as a -> b and b -> a with the same weight.
    A self-loop is a single entry.
    """

    def __init__(self, name: str = "", edges: Optional[Iterable[tuple]] = None) -> None:
        self.name = name
        self.adj = WeightedAdjacency()
        if edges is not None:
            self.add_edges(edges)

    def add_edge(self, src: Node, tgt: Node, weight: float = 1.0) -> None:
        self.adj.add_edge(src, tgt, weight)
        self.adj.add_edge(tgt, src, weight)

    def remove_edge(self, src: Node, tgt: Node) -> None:
        self.adj.remove_edge(src, tgt)
        self.adj.remove_edge(tgt, src)

    def remove_node(self, node: Node) -> None:
        nbrs, _ = self.get_neighbors(node)
        for nbr in nbrs:
            self.remove_edge(node, nbr)
        logger.debug("graph %r: removed node %r (%d edges)", self.name, node, len(nbrs))

    def has_node(self, node: Node) -> bool:
        return node in self.adj

    def get_nodes(self) -> List[Node]:
        return list(self.adj)

    def get_neighbors(self, node: Node) -> Tuple[Dict[Node, float], bool]:
        return self.adj.get_neighbors(node)

    def get_degree(self, node: Node) -> Tuple[float, bool]:
        """
        Sum of the weights in node's neighbor map. A self-loop is one entry
        in that map and so contributes its weight once.
        """
        return self.adj.get_out_degree(node)

    def has_edge(self, src: Node, tgt: Node) -> bool:
        return self.adj.has_edge(src, tgt)

    def get_edge_weight(self, src: Node, tgt: Node) -> Tuple[float, bool]:
        return self.adj.get_edge_weight(src, tgt)

    def format_adj(self) -> str:
        return self.adj.format()

    def __repr__(self) -> str:
        return f"UndirectedGraph(name={self.name!r}, nodes={len(self.adj)})"
