"""
Node identifiers and traversal frontier containers.

A node is any hashable, immutable identifier (strings in practice). There is
no node object: a node exists in a graph only through its adjacency entries.

The containers below are used as the frontier and visited-set during
traversal. Each call takes the container's own lock, so incidental sharing
across threads is safe; compound sequences (len() then pop()) are not atomic.
"""

from collections import deque
from typing import Deque, Hashable, List, Set
import threading

Node = Hashable


class EmptyContainerError(IndexError):
    """Raised when popping from an empty NodeStack or NodeQueue."""


class NodeStack:
    """LIFO stack of nodes."""

    def __init__(self) -> None:
        self._nodes: List[Node] = []
        self._lock = threading.Lock()

    def push(self, node: Node) -> None:
        with self._lock:
            self._nodes.append(node)

    def pop(self) -> Node:
        """
        Remove and return the most recently pushed node.

        Raises:
            EmptyContainerError: the stack holds no nodes.
        """
        with self._lock:
            if not self._nodes:
                raise EmptyContainerError("cannot pop from empty stack")
            return self._nodes.pop()

    def __len__(self) -> int:
        with self._lock:
            return len(self._nodes)


class NodeQueue:
    """FIFO queue of nodes."""

    def __init__(self) -> None:
        self._nodes: Deque[Node] = deque()
        self._lock = threading.Lock()

    def push(self, node: Node) -> None:
        with self._lock:
            self._nodes.append(node)

    def pop(self) -> Node:
        """
        Remove and return the earliest pushed node.

        Raises:
            EmptyContainerError: the queue holds no nodes.
        """
        with self._lock:
            if not self._nodes:
                raise EmptyContainerError("cannot pop from empty queue")
            return self._nodes.popleft()

    def __len__(self) -> int:
        with self._lock:
            return len(self._nodes)


class NodeSet:
    """Set of nodes; iteration order of to_list() is unspecified."""

    def __init__(self) -> None:
        self._set: Set[Node] = set()
        self._lock = threading.Lock()

    def add(self, node: Node) -> None:
        with self._lock:
            self._set.add(node)

    def contains(self, node: Node) -> bool:
        with self._lock:
            return node in self._set

    def __contains__(self, node: object) -> bool:
        return self.contains(node)  # type: ignore[arg-type]

    def __len__(self) -> int:
        with self._lock:
            return len(self._set)

    def to_list(self) -> List[Node]:
        """Snapshot of all members, each exactly once."""
        with self._lock:
            return list(self._set)
