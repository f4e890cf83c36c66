"""graphwalk: traversal and widest-path analysis for weighted undirected graphs.

Primary API:
    Graph, Edge - immutable graph snapshot
    bfs(), dfs() - visitation order from a start node
    widest_path() - maximum-bottleneck path between two nodes
    load_graph() - read a JSON/YAML graph document
    from_networkx(), to_networkx() - NetworkX conversion

Example:
    from graphwalk import Graph, bfs, widest_path

    graph = Graph.build(
        ["A", "B", "C", "D"],
        [("A", "B", 4), ("B", "C", 2), ("A", "C", 3), ("C", "D", 5)],
    )
    bfs(graph, "A")                  # ['A', 'B', 'C', 'D']
    widest_path(graph, "A", "D")     # path ('A', 'C', 'D'), capacity 3
"""

from __future__ import annotations

from graphwalk import logging
from graphwalk._version import __version__
from graphwalk.algorithms.adjacency import AdjacencyMap, build_adjacency
from graphwalk.algorithms.cancel import CancelToken
from graphwalk.algorithms.paths import reconstruct_path
from graphwalk.algorithms.traversal import bfs, dfs
from graphwalk.algorithms.widest import widest_capacities, widest_path
from graphwalk.dsl.loader import load_graph, load_graph_document
from graphwalk.lib.nx import from_networkx, to_networkx
from graphwalk.model.graph import Edge, Graph
from graphwalk.results import run_algorithm
from graphwalk.types.base import UNBOUNDED, Algorithm, is_unbounded
from graphwalk.types.dto import PathEdge, WidestPathResult
from graphwalk.types.errors import (
    Cancelled,
    GraphError,
    InvalidWeight,
    MalformedGraph,
    NodeNotFound,
)

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "Edge",
    # Algorithms
    "AdjacencyMap",
    "build_adjacency",
    "bfs",
    "dfs",
    "widest_path",
    "widest_capacities",
    "reconstruct_path",
    "run_algorithm",
    "CancelToken",
    # Types
    "Algorithm",
    "UNBOUNDED",
    "is_unbounded",
    "PathEdge",
    "WidestPathResult",
    # Errors
    "GraphError",
    "NodeNotFound",
    "MalformedGraph",
    "InvalidWeight",
    "Cancelled",
    # I/O and integrations
    "load_graph",
    "load_graph_document",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
