"""
Unit tests for the traversal frontier containers.
"""

import threading

import pytest

from nodes import EmptyContainerError, NodeQueue, NodeSet, NodeStack


def test_stack_is_lifo():
    s = NodeStack()
    for n in ("a", "b", "c"):
        s.push(n)

    assert len(s) == 3
    assert [s.pop(), s.pop(), s.pop()] == ["c", "b", "a"]
    assert len(s) == 0


def test_queue_is_fifo():
    q = NodeQueue()
    for n in ("a", "b", "c"):
        q.push(n)

    assert [q.pop(), q.pop(), q.pop()] == ["a", "b", "c"]
    assert len(q) == 0


@pytest.mark.parametrize("container", [NodeStack, NodeQueue])
def test_pop_empty_raises(container):
    c = container()
    with pytest.raises(EmptyContainerError):
        c.pop()

    c.push("x")
    c.pop()
    with pytest.raises(IndexError):
        c.pop()


def test_set_has_set_semantics():
    s = NodeSet()
    s.add("a")
    s.add("b")
    s.add("a")

    assert len(s) == 2
    assert s.contains("a")
    assert "b" in s
    assert not s.contains("z")
    assert sorted(s.to_list()) == ["a", "b"]


def test_containers_survive_concurrent_pushes():
    """Per-call locking keeps every push from many threads."""
    stack = NodeStack()
    seen = NodeSet()

    def worker(prefix: str) -> None:
        for i in range(200):
            node = f"{prefix}{i}"
            stack.push(node)
            seen.add(node)

    threads = [threading.Thread(target=worker, args=(p,)) for p in "abcd"]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(stack) == 800
    assert len(seen) == 800
