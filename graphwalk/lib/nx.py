"""NetworkX graph conversion utilities.

Example:
    >>> import networkx as nx
    >>> from graphwalk.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B", weight=4)
    >>> G.add_edge("B", "C", weight=2)
    >>>
    >>> graph = from_networkx(G)
    >>> graph.nodes
    ('A', 'B', 'C')
    >>>
    >>> G_out = to_networkx(graph)
"""

from __future__ import annotations

from typing import Any, List

import networkx as nx

from graphwalk.model.graph import Edge, Graph


def from_networkx(
    G: Any,
    *,
    weight_attr: str = "weight",
    default_weight: float = 1.0,
) -> Graph:
    """Convert a NetworkX graph to a :class:`Graph` snapshot.

    Node ids are converted with ``str()``. Node order follows ``G.nodes`` and
    edge order follows ``G.edges``. Directed inputs are accepted, but edge
    orientation is dropped since graph edges are undirected.

    Args:
        G: NetworkX graph (Graph, MultiGraph, DiGraph or MultiDiGraph).
        weight_attr: Edge attribute holding the weight (default: "weight").
        default_weight: Weight used when the attribute is missing.

    Returns:
        Graph with one edge per NetworkX edge, parallel edges included.

    Raises:
        TypeError: If G is not a NetworkX graph.
        MalformedGraph: If two nodes collapse to the same string id.
    """
    if not isinstance(G, nx.Graph):
        raise TypeError(f"Expected a NetworkX graph, got {type(G).__name__}")

    nodes = [str(n) for n in G.nodes]
    edges: List[Edge] = []
    for u, v, data in G.edges(data=True):
        edges.append(Edge(str(u), str(v), data.get(weight_attr, default_weight)))
    return Graph(nodes=tuple(nodes), edges=tuple(edges))


def to_networkx(graph: Graph, *, weight_attr: str = "weight") -> nx.MultiGraph:
    """Convert a :class:`Graph` to an undirected NetworkX MultiGraph.

    Parallel edges are kept as separate multi-edges in input order.
    """
    G = nx.MultiGraph()
    G.add_nodes_from(graph.nodes)
    for edge in graph.edges:
        G.add_edge(edge.source, edge.target, **{weight_attr: edge.weight})
    return G
