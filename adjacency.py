"""
Weighted adjacency map shared by the directed and undirected graphs.

Backed by a source -> (target -> weight) mapping. A source key is present
only while it has at least one outgoing edge.
"""

from typing import Dict, Iterator, Set, Tuple

from nodes import Node


class WeightedAdjacency:
    """
    Directed, weighted adjacency storage with no empty neighbor maps.
    """

    def __init__(self) -> None:
        self._adj: Dict[Node, Dict[Node, float]] = {}

    # --- Mutation ------------------------------------------------------------

    def add_edge(self, src: Node, tgt: Node, weight: float) -> None:
        """Add or update the edge src -> tgt."""
        self._adj.setdefault(src, {})[tgt] = float(weight)

    def remove_edge(self, src: Node, tgt: Node) -> None:
        """
        Remove src -> tgt, dropping src once its last edge is gone.
        Missing source or target is a no-op.
        """
        nbrs = self._adj.get(src)
        if nbrs is None:
            return
        nbrs.pop(tgt, None)
        if not nbrs:
            del self._adj[src]

    # --- Queries -------------------------------------------------------------

    def get_neighbors(self, node: Node) -> Tuple[Dict[Node, float], bool]:
        nbrs = self._adj.get(node)
        if nbrs is None:
            return {}, False
        return dict(nbrs), True  # defensive copy

    def has_edge(self, src: Node, tgt: Node) -> bool:
        return tgt in self._adj.get(src, {})

    def get_edge_weight(self, src: Node, tgt: Node) -> Tuple[float, bool]:
        nbrs = self._adj.get(src, {})
        if tgt not in nbrs:
            return 0.0, False
        return nbrs[tgt], True

    def get_out_degree(self, node: Node) -> Tuple[float, bool]:
        """Sum of the weights of all edges with node as the source."""
        nbrs = self._adj.get(node)
        if nbrs is None:
            return 0.0, False
        return sum(nbrs.values()), True

    def get_source_nodes(self) -> Set[Node]:
        return set(self._adj)

    def format(self) -> str:
        lines = []
        for node, nbrs in self._adj.items():
            lines.append(f"{node}:")
            for tgt, wgt in nbrs.items():
                lines.append(f" -->  {tgt}: {wgt:f}")
        return "\n".join(lines)

    def __contains__(self, node: object) -> bool:
        return node in self._adj

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self._adj))

    def __len__(self) -> int:
        return len(self._adj)
