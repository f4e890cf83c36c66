"""Immutable graph snapshot consumed by the algorithms.

A :class:`Graph` is a node tuple plus an ordered edge tuple. Edges are
undirected. Edge order is significant: it fixes the order in which
neighbors are visited and therefore every traversal tie-break.

Two dictionary forms are understood by :meth:`Graph.from_dict`:

Flat form::

    {"nodes": ["A", "B"], "edges": [{"source": "A", "target": "B", "weight": 4}]}

Element form, as stored by graph editors that wrap every element in
``data``::

    {"nodes": [{"data": {"id": "A", "label": "A"}}],
     "edges": [{"data": {"source": "A", "target": "B", "weight": 4}}]}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Tuple

from graphwalk.types.base import NodeID, Weight
from graphwalk.types.errors import MalformedGraph


@dataclass(frozen=True)
class Edge:
    """Undirected weighted edge.

    Attributes:
        source: One endpoint, as given in the input.
        target: The other endpoint.
        weight: Non-negative weight shared by both directions.
    """

    source: NodeID
    target: NodeID
    weight: Weight

    def to_dict(self) -> Dict[str, Any]:
        return {"source": self.source, "target": self.target, "weight": self.weight}


@dataclass(frozen=True)
class Graph:
    """Read-only node set and ordered edge list for one computation.

    Attributes:
        nodes: Unique node ids in input order.
        edges: Edges in input order.
    """

    nodes: Tuple[NodeID, ...] = field(default_factory=tuple)
    edges: Tuple[Edge, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable but store tuples so the snapshot stays immutable
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "edges", tuple(self.edges))
        seen = set()
        for node in self.nodes:
            if node in seen:
                raise MalformedGraph(f"Duplicate node id '{node}'")
            seen.add(node)

    @cached_property
    def node_set(self) -> FrozenSet[NodeID]:
        return frozenset(self.nodes)

    def has_node(self, node: NodeID) -> bool:
        return node in self.node_set

    @classmethod
    def build(
        cls,
        nodes: Iterable[NodeID],
        edges: Iterable[Tuple[NodeID, NodeID, Weight]] = (),
    ) -> "Graph":
        """Create a graph from node ids and ``(source, target, weight)`` tuples."""
        return cls(
            nodes=tuple(nodes),
            edges=tuple(Edge(s, t, w) for s, t, w in edges),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Graph":
        """Create a graph from its flat or element dictionary form.

        Args:
            data: Mapping with optional ``nodes`` and ``edges`` lists.

        Returns:
            A new Graph.

        Raises:
            MalformedGraph: If a node or edge entry lacks a required field.
        """
        nodes = tuple(_node_id(entry) for entry in data.get("nodes") or ())
        edges = tuple(_edge(entry) for entry in data.get("edges") or ())
        return cls(nodes=nodes, edges=edges)

    def to_dict(self) -> Dict[str, Any]:
        """Return the flat dictionary form."""
        return {
            "nodes": list(self.nodes),
            "edges": [e.to_dict() for e in self.edges],
        }


def _unwrap(entry: Any) -> Any:
    if isinstance(entry, Mapping) and isinstance(entry.get("data"), Mapping):
        return entry["data"]
    return entry


def _node_id(entry: Any) -> NodeID:
    entry = _unwrap(entry)
    if isinstance(entry, Mapping):
        if "id" not in entry:
            raise MalformedGraph(f"Node entry {dict(entry)!r} has no 'id'")
        entry = entry["id"]
    if not isinstance(entry, str):
        raise MalformedGraph(f"Node id must be a string, got {entry!r}")
    return entry


def _edge(entry: Any) -> Edge:
    entry = _unwrap(entry)
    if not isinstance(entry, Mapping):
        raise MalformedGraph(f"Edge entry must be a mapping, got {entry!r}")
    missing = [k for k in ("source", "target", "weight") if k not in entry]
    if missing:
        raise MalformedGraph(
            f"Edge entry {dict(entry)!r} is missing {', '.join(missing)}"
        )
    return Edge(entry["source"], entry["target"], entry["weight"])
