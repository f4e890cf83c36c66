"""Error kinds raised by the engine.

All errors derive from :class:`GraphError`. Lookup and validation failures
also derive from the matching builtin (``KeyError`` / ``ValueError``) so that
callers catching the builtin keep working.
"""

from __future__ import annotations

from typing import Any


class GraphError(Exception):
    """Base class for engine errors."""


class NodeNotFound(GraphError, KeyError):
    """A start, source or destination node is not part of the graph."""

    def __init__(self, node: Any) -> None:
        self.node = node
        super().__init__(f"Node '{node}' is not in the graph.")

    def __str__(self) -> str:
        # KeyError.__str__ would wrap the message in quotes
        return str(self.args[0])


class MalformedGraph(GraphError, ValueError):
    """The graph structure is inconsistent (unknown or duplicate node ids)."""


class InvalidWeight(GraphError, ValueError):
    """An edge weight is negative or not a real number."""

    def __init__(self, edge: Any, weight: Any) -> None:
        self.edge = edge
        self.weight = weight
        super().__init__(
            f"Edge {edge!r} has invalid weight {weight!r}; "
            "weights must be non-negative real numbers."
        )


class Cancelled(GraphError):
    """The computation was aborted by its caller."""
