"""Breadth-first and depth-first visitation order.

Both traversals visit neighbors in adjacency order, which is the edge input
order of the graph. No other tie-break applies, so results are fully
determined by the graph snapshot and the start node.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, List, Optional, Set, Tuple

from graphwalk.algorithms.adjacency import build_adjacency
from graphwalk.algorithms.cancel import CancelToken
from graphwalk.logging import get_logger
from graphwalk.model.graph import Graph
from graphwalk.types.base import NodeID, Weight
from graphwalk.types.errors import NodeNotFound

logger = get_logger(__name__)


def bfs(
    graph: Graph,
    start: NodeID,
    cancel: Optional[CancelToken] = None,
) -> List[NodeID]:
    """Breadth-first visitation order from ``start``.

    Args:
        graph: Graph snapshot.
        start: Node to start from.
        cancel: Optional token checked once per queue pop.

    Returns:
        Nodes reachable from ``start`` in visitation order, each exactly once.

    Raises:
        NodeNotFound: If ``start`` is not in the graph.
        MalformedGraph: If an edge references an unknown node.
        InvalidWeight: If an edge weight is invalid.
        Cancelled: If ``cancel`` fires before the traversal completes.
    """
    if not graph.has_node(start):
        raise NodeNotFound(start)
    adj = build_adjacency(graph)

    visited: Set[NodeID] = set()
    order: List[NodeID] = []
    queue: Deque[NodeID] = deque([start])
    while queue:
        if cancel is not None:
            cancel.check()
        node = queue.popleft()
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        for neighbor, _ in adj[node]:
            if neighbor not in visited:
                queue.append(neighbor)

    logger.debug(f"BFS from '{start}' visited {len(order)} of {len(adj)} nodes")
    return order


def dfs(
    graph: Graph,
    start: NodeID,
    cancel: Optional[CancelToken] = None,
) -> List[NodeID]:
    """Depth-first preorder visitation from ``start``.

    Uses an explicit stack of neighbor iterators, so the order matches the
    recursive formulation (visit a node, then descend into each unvisited
    neighbor in adjacency order) without recursion depth limits.

    Args:
        graph: Graph snapshot.
        start: Node to start from.
        cancel: Optional token checked once per stack step.

    Returns:
        Nodes reachable from ``start`` in preorder, each exactly once.

    Raises:
        NodeNotFound: If ``start`` is not in the graph.
        MalformedGraph: If an edge references an unknown node.
        InvalidWeight: If an edge weight is invalid.
        Cancelled: If ``cancel`` fires before the traversal completes.
    """
    if not graph.has_node(start):
        raise NodeNotFound(start)
    adj = build_adjacency(graph)

    visited: Set[NodeID] = {start}
    order: List[NodeID] = [start]
    stack: List[Iterator[Tuple[NodeID, Weight]]] = [iter(adj[start])]
    while stack:
        if cancel is not None:
            cancel.check()
        step = next(stack[-1], None)
        if step is None:
            stack.pop()
            continue
        neighbor = step[0]
        if neighbor in visited:
            continue
        visited.add(neighbor)
        order.append(neighbor)
        stack.append(iter(adj[neighbor]))

    logger.debug(f"DFS from '{start}' visited {len(order)} of {len(adj)} nodes")
    return order
