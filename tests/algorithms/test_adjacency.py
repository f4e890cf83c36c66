import math

import pytest

from graphwalk.algorithms.adjacency import build_adjacency
from graphwalk.model.graph import Edge, Graph
from graphwalk.types.errors import GraphError, InvalidWeight, MalformedGraph


def test_adjacency_symmetric_in_edge_order(triangle_tail):
    adj = build_adjacency(triangle_tail)
    assert adj == {
        "A": [("B", 4), ("C", 3)],
        "B": [("A", 4), ("C", 2)],
        "C": [("B", 2), ("A", 3), ("D", 5)],
        "D": [("C", 5)],
    }


def test_adjacency_keys_follow_node_order(triangle_tail_isolated):
    adj = build_adjacency(triangle_tail_isolated)
    assert list(adj) == ["A", "B", "C", "D", "E"]
    assert adj["E"] == []


def test_adjacency_parallel_edges_and_self_loop():
    g = Graph.build(["A", "B"], [("A", "B", 1), ("A", "B", 9), ("A", "A", 3)])
    adj = build_adjacency(g)
    assert adj["A"] == [("B", 1), ("B", 9), ("A", 3), ("A", 3)]
    assert adj["B"] == [("A", 1), ("A", 9)]


def test_adjacency_zero_and_float_weights_allowed():
    g = Graph.build(["A", "B", "C"], [("A", "B", 0), ("B", "C", 2.5)])
    adj = build_adjacency(g)
    assert adj["B"] == [("A", 0), ("C", 2.5)]


def test_adjacency_is_rebuilt_per_call(triangle_tail):
    first = build_adjacency(triangle_tail)
    first["A"].clear()
    second = build_adjacency(triangle_tail)
    assert second["A"] == [("B", 4), ("C", 3)]


@pytest.mark.parametrize(
    "edge",
    [("A", "Z", 1), ("Z", "A", 1)],
)
def test_adjacency_unknown_node_is_malformed(edge):
    g = Graph.build(["A", "B"], [edge])
    with pytest.raises(MalformedGraph, match="unknown node 'Z'"):
        build_adjacency(g)


@pytest.mark.parametrize("weight", [-1, -0.5, math.nan, math.inf, True, "3", None])
def test_adjacency_rejects_invalid_weights(weight):
    g = Graph(nodes=("A", "B"), edges=(Edge("A", "B", weight),))
    with pytest.raises(InvalidWeight) as exc_info:
        build_adjacency(g)
    assert exc_info.value.edge == Edge("A", "B", weight)
    assert isinstance(exc_info.value, GraphError)
    assert isinstance(exc_info.value, ValueError)


def test_adjacency_unknown_node_checked_in_edge_order():
    # The unknown node comes first, the bad weight second
    g = Graph.build(["A", "B"], [("A", "Q", 1), ("A", "B", -1)])
    with pytest.raises(MalformedGraph):
        build_adjacency(g)
