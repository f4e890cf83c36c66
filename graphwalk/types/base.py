"""Base aliases and enums for graph traversal and widest-path algorithms."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Union

#: Opaque node identifier.
NodeID = str

#: Edge weight. Non-negative real number.
Weight = Union[int, float]

#: Bottleneck capacity of a path; either a finite weight or ``UNBOUNDED``.
Capacity = Union[int, float]

#: Capacity of the empty path from a node to itself. Orders above every
#: finite weight, so it can seed a max-priority frontier directly.
UNBOUNDED: float = math.inf


def is_unbounded(value: Capacity) -> bool:
    """Return True if ``value`` is the unbounded capacity sentinel."""
    return isinstance(value, float) and math.isinf(value) and value > 0


class Algorithm(IntEnum):
    """Algorithms exposed by the engine."""

    BFS = 1
    DFS = 2
    WIDEST = 3

    @classmethod
    def from_string(cls, value: str) -> "Algorithm":
        """Parse a string into an Algorithm enum value.

        Args:
            value: Case-insensitive string name (e.g., "bfs", "WIDEST").

        Returns:
            The corresponding Algorithm enum member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name.lower() for e in cls)
            raise ValueError(
                f"Invalid algorithm '{value}'. Valid values are: {valid}"
            ) from None
