"""
Directed, weighted graph with an inverse index for O(1) in-neighbor lookup.

Every mutation is applied to the forward and inverse adjacency together, so
(s, t, w) is in out_adj exactly when (t, s, w) is in in_adj.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from adjacency import WeightedAdjacency
from graph import Graph
from nodes import Node

logger = logging.getLogger(__name__)


class DirectedGraph(Graph):
    """
    Directed graph backed by forward and inverse WeightedAdjacency maps.
    """

    def __init__(self, name: str = "", edges: Optional[Iterable[tuple]] = None) -> None:
        self.name = name
        self.out_adj = WeightedAdjacency()
        self.in_adj = WeightedAdjacency()  # inverse index of out_adj
        if edges is not None:
            self.add_edges(edges)

    # --- Mutation ------------------------------------------------------------

    def add_edge(self, src: Node, tgt: Node, weight: float = 1.0) -> None:
        """Add or update src -> tgt; weight defaults to 1.0."""
        self.out_adj.add_edge(src, tgt, weight)
        self.in_adj.add_edge(tgt, src, weight)

    def remove_edge(self, src: Node, tgt: Node) -> None:
        self.out_adj.remove_edge(src, tgt)
        self.in_adj.remove_edge(tgt, src)

    def remove_node(self, node: Node) -> None:
        """
        Retract every edge into and out of node, one edge at a time, so the
        node disappears from both adjacencies.
        """
        in_nbrs, _ = self.get_in_neighbors(node)
        for nbr in in_nbrs:
            self.remove_edge(nbr, node)
        out_nbrs, _ = self.get_out_neighbors(node)
        for nbr in out_nbrs:
            self.remove_edge(node, nbr)
        logger.debug(
            "graph %r: removed node %r (%d in, %d out edges)",
            self.name, node, len(in_nbrs), len(out_nbrs),
        )

    # --- Nodes and neighbors -------------------------------------------------

    def has_node(self, node: Node) -> bool:
        return node in self.out_adj or node in self.in_adj

    def get_nodes(self) -> List[Node]:
        nodes = list(self.out_adj)
        seen = set(nodes)
        for node in self.in_adj:
            if node not in seen:
                seen.add(node)
                nodes.append(node)
        return nodes

    def get_neighbors(self, node: Node) -> Tuple[Dict[Node, float], bool]:
        return self.get_out_neighbors(node)

    def get_out_neighbors(self, node: Node) -> Tuple[Dict[Node, float], bool]:
        return self.out_adj.get_neighbors(node)

    def get_in_neighbors(self, node: Node) -> Tuple[Dict[Node, float], bool]:
        return self.in_adj.get_neighbors(node)

    # --- Degrees -------------------------------------------------------------

    def get_out_degree(self, node: Node) -> Tuple[float, bool]:
        return self.out_adj.get_out_degree(node)

    def get_in_degree(self, node: Node) -> Tuple[float, bool]:
        return self.in_adj.get_out_degree(node)

    def get_total_degree(self, node: Node) -> Tuple[float, bool]:
        """
        Sum of the weights of all edges from and to node.

        A self-loop appears in both adjacencies but is one edge, so it is
        counted on the outgoing side only.
        """
        if not self.has_node(node):
            return 0.0, False
        out_nbrs, _ = self.get_out_neighbors(node)
        in_nbrs, _ = self.get_in_neighbors(node)
        deg = sum(out_nbrs.values())
        for src, wgt in in_nbrs.items():
            if src == node:
                continue
            deg += wgt
        return deg, True

    # --- Edges ---------------------------------------------------------------

    def has_edge(self, src: Node, tgt: Node) -> bool:
        return self.out_adj.has_edge(src, tgt)

    def get_edge_weight(self, src: Node, tgt: Node) -> Tuple[float, bool]:
        return self.out_adj.get_edge_weight(src, tgt)

    # --- Display -------------------------------------------------------------

    def format_adj(self) -> str:
        return self.format_out_adj()

    def format_out_adj(self) -> str:
        return self.out_adj.format()

    def format_in_adj(self) -> str:
        return self.in_adj.format()

    def __repr__(self) -> str:
        return f"DirectedGraph(name={self.name!r}, nodes={len(self.get_nodes())})"
