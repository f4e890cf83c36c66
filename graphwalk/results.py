"""Result documents for engine operations.

Each algorithm produces a flat JSON-serializable dictionary:

- ``bfs``: ``{"bfs_order": [...]}``
- ``dfs``: ``{"dfs_order": [...]}``
- ``widest``: ``{"widest_path": [...], "widest_path_edges": [{"from", "to"}],
  "widest_path_capacity": number | "unbounded"}``
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from graphwalk.algorithms.cancel import CancelToken
from graphwalk.algorithms.traversal import bfs, dfs
from graphwalk.algorithms.widest import widest_path
from graphwalk.logging import get_logger
from graphwalk.model.graph import Graph
from graphwalk.types.base import Algorithm, NodeID
from graphwalk.types.dto import WidestPathResult

logger = get_logger(__name__)


def widest_document(result: WidestPathResult) -> Dict[str, Any]:
    """Return the result document for a widest-path result."""
    data = result.to_dict()
    return {
        "widest_path": data["path"],
        "widest_path_edges": data["edges"],
        "widest_path_capacity": data["capacity"],
    }


def run_algorithm(
    algorithm: Union[Algorithm, str],
    graph: Graph,
    *,
    start: Optional[NodeID] = None,
    src: Optional[NodeID] = None,
    dest: Optional[NodeID] = None,
    cancel: Optional[CancelToken] = None,
) -> Dict[str, Any]:
    """Run one algorithm and return its result document.

    Args:
        algorithm: Algorithm member or its case-insensitive name.
        graph: Graph snapshot.
        start: Start node for ``bfs`` and ``dfs``.
        src: Source node for ``widest``.
        dest: Destination node for ``widest``.
        cancel: Optional cancellation token.

    Returns:
        The result document for the algorithm.

    Raises:
        ValueError: If the algorithm is unknown or a required node is missing.
    """
    if isinstance(algorithm, str):
        algorithm = Algorithm.from_string(algorithm)

    if algorithm in (Algorithm.BFS, Algorithm.DFS):
        if start is None:
            raise ValueError(f"{algorithm.name.lower()} requires a start node")
        logger.debug(f"Running {algorithm.name.lower()} from '{start}'")
        if algorithm == Algorithm.BFS:
            return {"bfs_order": bfs(graph, start, cancel=cancel)}
        return {"dfs_order": dfs(graph, start, cancel=cancel)}

    if src is None or dest is None:
        raise ValueError("widest requires both src and dest nodes")
    logger.debug(f"Running widest from '{src}' to '{dest}'")
    return widest_document(widest_path(graph, src, dest, cancel=cancel))
