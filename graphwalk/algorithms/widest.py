"""Widest-path (maximum bottleneck) search.

A Dijkstra variant that maximizes the minimum edge weight along a path
instead of minimizing the sum. The frontier is a binary heap keyed on
negated capacity with lazy deletion: a superseded entry stays in the heap
and is discarded when popped with a capacity below the node's best known
value. No decrease-key is needed.

Notes:
    Only strictly better candidates update a node, so the first predecessor
    that achieves a node's final capacity is kept. Heap entries carry an
    insertion counter, so equal capacities pop in push order and node ids are
    never compared.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Optional, Tuple

from graphwalk.algorithms.adjacency import AdjacencyMap, build_adjacency
from graphwalk.algorithms.cancel import CancelToken
from graphwalk.algorithms.paths import reconstruct_path
from graphwalk.logging import get_logger
from graphwalk.model.graph import Graph
from graphwalk.types.base import UNBOUNDED, Capacity, NodeID
from graphwalk.types.dto import WidestPathResult
from graphwalk.types.errors import NodeNotFound

logger = get_logger(__name__)


def _widest_search(
    adj: AdjacencyMap,
    src_node: NodeID,
    cancel: Optional[CancelToken] = None,
) -> Tuple[Dict[NodeID, Capacity], Dict[NodeID, NodeID]]:
    capacity: Dict[NodeID, Capacity] = {node: 0 for node in adj}
    capacity[src_node] = UNBOUNDED
    pred: Dict[NodeID, NodeID] = {}

    seq = count()
    max_pq: List[Tuple[Capacity, int, NodeID]] = [(-UNBOUNDED, next(seq), src_node)]
    pops = 0
    while max_pq:
        if cancel is not None:
            cancel.check()
        neg_cap, _, node_id = heappop(max_pq)
        pops += 1
        current_cap = -neg_cap
        if current_cap < capacity[node_id]:
            # stale entry
            continue

        for neighbor_id, weight in adj[node_id]:
            candidate = min(current_cap, weight)
            if candidate > capacity[neighbor_id]:
                capacity[neighbor_id] = candidate
                pred[neighbor_id] = node_id
                heappush(max_pq, (-candidate, next(seq), neighbor_id))

    logger.debug(
        f"Widest search from '{src_node}' reached {len(pred)} nodes in {pops} heap pops"
    )
    return capacity, pred


def widest_capacities(
    graph: Graph,
    src_node: NodeID,
    cancel: Optional[CancelToken] = None,
) -> Tuple[Dict[NodeID, Capacity], Dict[NodeID, NodeID]]:
    """Compute bottleneck capacities from a source to every node.

    Args:
        graph: Graph snapshot.
        src_node: Source node.
        cancel: Optional token checked once per heap pop.

    Returns:
        A tuple of (capacity, pred):
          - capacity: Maps every node to the best bottleneck capacity from
            ``src_node``; ``0`` for unreachable nodes and ``UNBOUNDED`` for
            the source itself.
          - pred: Maps every node reached with positive capacity to the node
            it was reached from. The source has no entry.

    Raises:
        NodeNotFound: If ``src_node`` is not in the graph.
        MalformedGraph: If an edge references an unknown node.
        InvalidWeight: If an edge weight is invalid.
        Cancelled: If ``cancel`` fires before the search completes.
    """
    if not graph.has_node(src_node):
        raise NodeNotFound(src_node)
    return _widest_search(build_adjacency(graph), src_node, cancel)


def widest_path(
    graph: Graph,
    src_node: NodeID,
    dst_node: NodeID,
    cancel: Optional[CancelToken] = None,
) -> WidestPathResult:
    """Find a path from ``src_node`` to ``dst_node`` maximizing its bottleneck.

    Args:
        graph: Graph snapshot.
        src_node: Source node.
        dst_node: Destination node.
        cancel: Optional token checked once per heap pop.

    Returns:
        WidestPathResult with:
          - the path and its oriented edges, and the bottleneck capacity;
          - ``path=(src_node,)``, no edges and ``UNBOUNDED`` capacity when
            ``src_node == dst_node``;
          - the empty result with capacity ``0`` when no path of positive
            capacity exists.

    Raises:
        NodeNotFound: If ``src_node`` or ``dst_node`` is not in the graph.
        MalformedGraph: If an edge references an unknown node.
        InvalidWeight: If an edge weight is invalid.
        Cancelled: If ``cancel`` fires before the search completes.
    """
    for node in (src_node, dst_node):
        if not graph.has_node(node):
            raise NodeNotFound(node)
    adj = build_adjacency(graph)

    if src_node == dst_node:
        return WidestPathResult(path=(src_node,), edges=(), capacity=UNBOUNDED)

    capacity, pred = _widest_search(adj, src_node, cancel)
    if capacity[dst_node] == 0:
        logger.debug(f"No positive-capacity path from '{src_node}' to '{dst_node}'")
        return WidestPathResult.empty()

    path, edges = reconstruct_path(pred, src_node, dst_node)
    logger.debug(
        f"Widest path '{src_node}' -> '{dst_node}': {len(edges)} hops, "
        f"capacity {capacity[dst_node]}"
    )
    return WidestPathResult(
        path=tuple(path), edges=tuple(edges), capacity=capacity[dst_node]
    )
