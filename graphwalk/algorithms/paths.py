"""Path reconstruction from a single-predecessor map."""

from __future__ import annotations

from typing import Dict, List, Tuple

from graphwalk.types.base import NodeID
from graphwalk.types.dto import PathEdge


def reconstruct_path(
    pred: Dict[NodeID, NodeID],
    src: NodeID,
    dst: NodeID,
) -> Tuple[List[NodeID], List[PathEdge]]:
    """Walk a predecessor map back from ``dst`` to ``src``.

    Edges are oriented along the path (predecessor -> successor) regardless
    of how the underlying undirected edge was stored.

    Args:
        pred: Maps each reached node to the node it was reached from. The
            source has no entry.
        src: Source node the walk must end at.
        dst: Destination node to start the walk from.

    Returns:
        A tuple ``(path, edges)`` with ``path[0] == src`` and
        ``path[-1] == dst``.

    Raises:
        ValueError: If the walk does not end at ``src`` or revisits a node.
    """
    path: List[NodeID] = []
    edges: List[PathEdge] = []
    seen = set()
    node = dst
    while True:
        if node in seen:
            raise ValueError(f"Predecessor map has a cycle through '{node}'")
        seen.add(node)
        path.append(node)
        if node not in pred:
            break
        prev = pred[node]
        edges.append(PathEdge(prev, node))
        node = prev

    if node != src:
        raise ValueError(
            f"Predecessor chain from '{dst}' ends at '{node}', not at source '{src}'"
        )
    path.reverse()
    edges.reverse()
    return path, edges
