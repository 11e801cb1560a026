"""
Stack- and queue-based reachability search.

Both engines share one loop and differ only in the frontier container:
a NodeStack gives depth-first order, a NodeQueue breadth-first order.
Visitation order is not part of the result; the reachable set is.
"""

import logging
from typing import List, Union

from algorithms import TraversalEngine
from graph import NeighborSource
from nodes import Node, NodeQueue, NodeSet, NodeStack

logger = logging.getLogger(__name__)

Frontier = Union[NodeStack, NodeQueue]


def _traverse(graph: NeighborSource, start: Node, frontier: Frontier) -> List[Node]:
    if not graph.has_node(start):
        return []

    visited = NodeSet()
    frontier.push(start)

    while len(frontier) > 0:
        node = frontier.pop()  # cannot be empty here
        # A node can be pushed once per incoming edge; expand it only once.
        if visited.contains(node):
            continue
        visited.add(node)

        nbrs, found = graph.get_neighbors(node)
        if not found:
            continue
        for nbr in nbrs:
            frontier.push(nbr)

    logger.debug("reached %d nodes from %r", len(visited), start)
    return visited.to_list()


class DepthFirstSearch(TraversalEngine):
    """
    Reachability using a LIFO frontier.

    Complexity:
        O(V + E) over the nodes reachable from start.
    """

    def reachable(self, graph: NeighborSource, start: Node) -> List[Node]:
        return _traverse(graph, start, NodeStack())


class BreadthFirstSearch(TraversalEngine):
    """
    Reachability using a FIFO frontier; same result set as DepthFirstSearch.
    """

    def reachable(self, graph: NeighborSource, start: Node) -> List[Node]:
        return _traverse(graph, start, NodeQueue())


def dfs(graph: NeighborSource, start: Node) -> List[Node]:
    return DepthFirstSearch().reachable(graph, start)


def bfs(graph: NeighborSource, start: Node) -> List[Node]:
    return BreadthFirstSearch().reachable(graph, start)


ENGINES = {
    "dfs": DepthFirstSearch,
    "bfs": BreadthFirstSearch,
}
