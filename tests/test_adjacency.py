"""
Unit tests for WeightedAdjacency.
"""

from adjacency import WeightedAdjacency


def test_add_edges_and_query():
    adj = WeightedAdjacency()
    adj.add_edge("a", "b", 1.0)
    adj.add_edge("a", "c", 2.0)
    adj.add_edge("b", "c", 3.0)

    assert adj.get_source_nodes() == {"a", "b"}
    assert adj.get_neighbors("a") == ({"b": 1.0, "c": 2.0}, True)
    assert adj.get_neighbors("b") == ({"c": 3.0}, True)
    # c only appears as a target
    assert adj.get_neighbors("c") == ({}, False)

    assert adj.has_edge("a", "b")
    assert not adj.has_edge("b", "a")
    assert adj.get_edge_weight("b", "c") == (3.0, True)
    assert adj.get_edge_weight("c", "b") == (0.0, False)
    assert adj.get_edge_weight("a", "z") == (0.0, False)


def test_add_edge_upserts_weight():
    adj = WeightedAdjacency()
    adj.add_edge("a", "b", 1.0)
    adj.add_edge("a", "b", 4.5)

    assert adj.get_neighbors("a") == ({"b": 4.5}, True)


def test_get_neighbors_returns_copy():
    adj = WeightedAdjacency()
    adj.add_edge("a", "b", 1.0)

    nbrs, _ = adj.get_neighbors("a")
    nbrs.clear()

    # internal structure must remain intact
    assert adj.get_neighbors("a") == ({"b": 1.0}, True)


def test_out_degree_sums_weights():
    adj = WeightedAdjacency()
    adj.add_edge("a", "b", 1.5)
    adj.add_edge("a", "c", 2.0)
    adj.add_edge("a", "a", 0.5)

    assert adj.get_out_degree("a") == (4.0, True)
    assert adj.get_out_degree("b") == (0.0, False)


def test_remove_last_edge_drops_source():
    adj = WeightedAdjacency()
    adj.add_edge("a", "b", 1.0)
    adj.add_edge("a", "c", 1.0)

    adj.remove_edge("a", "b")
    assert "a" in adj
    adj.remove_edge("a", "c")
    assert "a" not in adj
    assert adj.get_source_nodes() == set()
    assert len(adj) == 0


def test_remove_missing_edge_is_noop():
    adj = WeightedAdjacency()
    adj.add_edge("a", "b", 1.0)

    adj.remove_edge("z", "b")
    adj.remove_edge("a", "z")
    adj.remove_edge("a", "z")

    assert adj.get_neighbors("a") == ({"b": 1.0}, True)
    assert adj.get_source_nodes() == {"a"}


def test_format_lists_each_edge():
    adj = WeightedAdjacency()
    adj.add_edge("a", "b", 1.5)

    assert adj.format() == "a:\n -->  b: 1.500000"
    assert WeightedAdjacency().format() == ""
