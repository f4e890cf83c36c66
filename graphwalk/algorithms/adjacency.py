"""Adjacency construction for undirected graphs."""

from __future__ import annotations

import math
from typing import Dict, List, Tuple

from graphwalk.logging import get_logger
from graphwalk.model.graph import Edge, Graph
from graphwalk.types.base import NodeID, Weight
from graphwalk.types.errors import InvalidWeight, MalformedGraph

#: Node id -> ordered ``(neighbor, weight)`` pairs.
AdjacencyMap = Dict[NodeID, List[Tuple[NodeID, Weight]]]

logger = get_logger(__name__)


def check_weight(edge: Edge) -> None:
    """Raise :class:`InvalidWeight` unless the edge weight is a finite, non-negative number."""
    weight = edge.weight
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise InvalidWeight(edge, weight)
    if math.isnan(weight) or math.isinf(weight) or weight < 0:
        raise InvalidWeight(edge, weight)


def build_adjacency(graph: Graph) -> AdjacencyMap:
    """Build a symmetric neighbor map preserving edge input order.

    Every node gets an entry, possibly empty, before edges are processed.
    For each edge ``(s, t, w)`` in order, ``(t, w)`` is appended to
    ``adj[s]`` and then ``(s, w)`` to ``adj[t]``. A self-loop therefore
    contributes two entries to its node.

    Args:
        graph: Graph snapshot.

    Returns:
        A freshly built adjacency map owned by the caller.

    Raises:
        MalformedGraph: If an edge references a node outside ``graph.nodes``.
        InvalidWeight: If an edge weight is negative, non-finite or not a number.
    """
    adj: AdjacencyMap = {node: [] for node in graph.nodes}
    for edge in graph.edges:
        if edge.source not in adj or edge.target not in adj:
            unknown = edge.source if edge.source not in adj else edge.target
            raise MalformedGraph(
                f"Edge ({edge.source!r}, {edge.target!r}) references unknown node '{unknown}'"
            )
        check_weight(edge)
        adj[edge.source].append((edge.target, edge.weight))
        adj[edge.target].append((edge.source, edge.weight))

    logger.debug(
        f"Built adjacency for {len(graph.nodes)} nodes and {len(graph.edges)} edges"
    )
    return adj
