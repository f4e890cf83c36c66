"""Result containers for engine operations.

Defines immutable result values and their wire encoding. The unbounded
capacity of a self-path is kept as ``UNBOUNDED`` in memory and written as a
tagged string on the wire, since JSON has no representation for infinity.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple, Union

from graphwalk.config import ENGINE_CONFIG
from graphwalk.types.base import UNBOUNDED, Capacity, NodeID, is_unbounded


def encode_capacity(value: Capacity) -> Union[int, float, str]:
    """Return a JSON-safe representation of a capacity value.

    Args:
        value: Finite non-negative capacity or ``UNBOUNDED``.

    Returns:
        The number itself, or the configured unbounded label.

    Raises:
        ValueError: If ``value`` is NaN or negative.
    """
    if is_unbounded(value):
        return ENGINE_CONFIG.unbounded_label
    if isinstance(value, float) and math.isnan(value):
        raise ValueError("Capacity cannot be NaN")
    if value < 0:
        raise ValueError(f"Capacity cannot be negative, got {value}")
    return value


def decode_capacity(value: Union[int, float, str]) -> Capacity:
    """Inverse of :func:`encode_capacity`."""
    if isinstance(value, str):
        if value == ENGINE_CONFIG.unbounded_label:
            return UNBOUNDED
        raise ValueError(f"Unrecognized capacity label '{value}'")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Capacity must be a number, got {value!r}")
    return value


@dataclass(frozen=True)
class PathEdge:
    """One traversal step of a widest path, oriented along the path.

    Attributes:
        from_node: Node the step leaves.
        to_node: Node the step enters.
    """

    from_node: NodeID
    to_node: NodeID

    def to_dict(self) -> Dict[str, NodeID]:
        return {"from": self.from_node, "to": self.to_node}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PathEdge":
        return cls(from_node=data["from"], to_node=data["to"])


@dataclass(frozen=True)
class WidestPathResult:
    """Result of a widest-path query between two nodes.

    Attributes:
        path: Nodes from source to destination; empty when unreachable.
        edges: Steps along ``path``; one fewer than ``path`` when non-empty.
        capacity: Bottleneck capacity of ``path``. ``0`` when unreachable,
            ``UNBOUNDED`` when source and destination coincide.
    """

    path: Tuple[NodeID, ...] = field(default_factory=tuple)
    edges: Tuple[PathEdge, ...] = field(default_factory=tuple)
    capacity: Capacity = 0

    @classmethod
    def empty(cls) -> "WidestPathResult":
        """Return the result for an unreachable destination."""
        return cls(path=(), edges=(), capacity=0)

    @property
    def is_empty(self) -> bool:
        return not self.path

    @property
    def is_unbounded(self) -> bool:
        return is_unbounded(self.capacity)

    def edge_pairs(self) -> List[Tuple[NodeID, NodeID]]:
        """Return ``edges`` as plain ``(from, to)`` tuples."""
        return [(e.from_node, e.to_node) for e in self.edges]

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary.

        The capacity is encoded with :func:`encode_capacity` so an unbounded
        value survives serialization.
        """
        return {
            "path": list(self.path),
            "edges": [e.to_dict() for e in self.edges],
            "capacity": encode_capacity(self.capacity),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WidestPathResult":
        """Rebuild a result from :meth:`to_dict` output."""
        return cls(
            path=tuple(data.get("path", ())),
            edges=tuple(PathEdge.from_dict(e) for e in data.get("edges", ())),
            capacity=decode_capacity(data.get("capacity", 0)),
        )
