"""YAML/JSON loader + schema validation for graph documents.

Provides a single entrypoint to parse a document string, validate it against
the packaged JSON schema, and return a :class:`~graphwalk.model.graph.Graph`.
YAML is a superset of JSON, so both formats go through ``yaml.safe_load``.
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Union

import jsonschema
import yaml

from graphwalk.algorithms.adjacency import check_weight
from graphwalk.logging import get_logger
from graphwalk.model.graph import Graph
from graphwalk.types.errors import MalformedGraph

logger = get_logger(__name__)

RECOGNIZED_KEYS = frozenset({"nodes", "edges"})


@lru_cache(maxsize=1)
def graph_schema() -> Dict[str, Any]:
    """Return the packaged graph document JSON schema."""
    with (
        resources.files("graphwalk.schemas")
        .joinpath("graph.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_graph_document(text: str) -> Graph:
    """Load and validate a graph document string.

    Args:
        text: JSON or YAML document.

    Returns:
        The graph described by the document. An empty document yields an
        empty graph.

    Raises:
        ValueError: If the text is not valid YAML/JSON or its top level is
            not a mapping.
        MalformedGraph: If the document does not match the graph schema,
            has unrecognized top-level keys, or repeats a node id.
        InvalidWeight: If an edge weight is negative, NaN or infinite.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"Graph document is not valid YAML/JSON: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The graph document must map to a dictionary at top-level.")

    extra = set(data.keys()) - RECOGNIZED_KEYS
    if extra:
        raise MalformedGraph(
            f"Unrecognized top-level key(s) in graph document: "
            f"{', '.join(sorted(map(str, extra)))}. "
            f"Allowed keys are {sorted(RECOGNIZED_KEYS)}"
        )

    try:
        jsonschema.validate(data, graph_schema())
    except jsonschema.ValidationError as exc:
        location = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise MalformedGraph(
            f"Graph document failed validation at {location}: {exc.message}"
        ) from exc

    graph = Graph.from_dict(data)
    for edge in graph.edges:
        check_weight(edge)
    logger.debug(
        f"Loaded graph document with {len(graph.nodes)} nodes and {len(graph.edges)} edges"
    )
    return graph


def load_graph(path: Union[str, Path]) -> Graph:
    """Read a graph document from ``path``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """
    return load_graph_document(Path(path).read_text(encoding="utf-8"))
