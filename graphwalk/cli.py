"""Command-line interface for graphwalk."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, NoReturn, Optional

import networkx as nx

from graphwalk.algorithms.adjacency import build_adjacency
from graphwalk.algorithms.cancel import CancelToken
from graphwalk.config import ENGINE_CONFIG
from graphwalk.dsl.loader import load_graph
from graphwalk.lib.nx import to_networkx
from graphwalk.logging import get_logger, level_from_flags, set_global_log_level
from graphwalk.model.graph import Graph
from graphwalk.results import run_algorithm
from graphwalk.types.base import Algorithm
from graphwalk.types.errors import GraphError
from graphwalk.utils.output_paths import ensure_parent_dir, results_path_for_run

logger = get_logger(__name__)


def _format_table(headers: List[str], rows: List[List[str]], min_width: int = 8) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    if n == 1:
        return singular
    return plural or (singular + "s")


def _fail(message: str) -> NoReturn:
    logger.error(message)
    print(f"❌ ERROR: {message}")
    sys.exit(1)


def _inspect_graph(path: Path, detail: bool = False) -> None:
    """Print a structural summary of a graph document."""
    logger.info(f"Inspecting graph document: {path}")
    try:
        graph = load_graph(path)
        adj = build_adjacency(graph)
    except FileNotFoundError:
        _fail(f"Graph file not found: {path}")
    except OSError as e:
        _fail(f"Cannot read graph file {path}: {e}")
    except (GraphError, ValueError) as e:
        _fail(f"Invalid graph: {type(e).__name__}: {e}")

    isolated = [node for node, neighbors in adj.items() if not neighbors]
    components = nx.number_connected_components(to_networkx(graph))

    print(f"\nGraph: {path}")
    print(f"   Nodes: {len(graph.nodes)}")
    print(f"   Edges: {len(graph.edges)}")
    print(f"   Connected components: {components}")
    if isolated:
        preview = ", ".join(isolated[:5])
        if len(isolated) > 5:
            preview += ", ..."
        print(
            f"   Isolated {_plural(len(isolated), 'node')}: {len(isolated)} ({preview})"
        )

    if detail and graph.edges:
        rows = [[e.source, e.target, str(e.weight)] for e in graph.edges]
        print("\nEdges:")
        print(_format_table(["Source", "Target", "Weight"], rows))
    print("\n✅ Graph is valid")


def _run_algorithm(
    algorithm: Algorithm,
    path: Path,
    node_args: Dict[str, Optional[str]],
    results_override: Optional[Path],
    no_results: bool,
    stdout: bool,
    output_dir: Optional[Path] = None,
    timeout: Optional[float] = None,
) -> None:
    """Run one algorithm on a graph document and export its result document.

    Args:
        algorithm: Algorithm to run.
        path: Graph document path.
        node_args: Node arguments for the algorithm (``start`` or ``src``/``dest``).
        results_override: Explicit results file path.
        no_results: Whether to disable results file generation.
        stdout: Whether to also print results to stdout.
        output_dir: Optional directory for the default results file.
        timeout: Optional time budget in seconds.
    """
    name = algorithm.name.lower()
    logger.info(f"Loading graph from: {path}")
    start_time = perf_counter()

    try:
        graph: Graph = load_graph(path)
        budget = ENGINE_CONFIG.effective_timeout(timeout)
        cancel = CancelToken.with_timeout(budget) if budget is not None else None
        logger.info(f"Running {name}")
        results = run_algorithm(algorithm, graph, cancel=cancel, **node_args)
    except FileNotFoundError:
        _fail(f"Graph file not found: {path}")
    except OSError as e:
        _fail(f"Cannot read graph file {path}: {e}")
    except (GraphError, ValueError) as e:
        _fail(f"Failed to run {name}: {type(e).__name__}: {e}")

    json_str = json.dumps(results, indent=ENGINE_CONFIG.json_indent)
    if not no_results:
        effective_output = results_path_for_run(
            graph_path=path,
            output_dir=output_dir,
            results_override=results_override,
        )
        logger.info(f"Writing results to: {effective_output}")
        try:
            ensure_parent_dir(effective_output)
            effective_output.write_text(json_str)
        except OSError as e:
            _fail(f"Cannot write results to {effective_output}: {e}")
        print(f"✅ Results written to: {effective_output}")
    if stdout:
        print(json_str)

    logger.info(
        f"Algorithm '{name}' completed successfully in "
        f"{_format_duration(perf_counter() - start_time)}"
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``graphwalk`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="graphwalk",
        description="Traverse weighted undirected graphs and find widest paths.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress console output (logs only)"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{bfs,dfs,widest,inspect}",
        help="Available commands",
    )

    bfs_parser = subparsers.add_parser("bfs", help="Breadth-first visitation order")
    dfs_parser = subparsers.add_parser("dfs", help="Depth-first visitation order")
    widest_parser = subparsers.add_parser(
        "widest", help="Maximum-bottleneck path between two nodes"
    )
    inspect_parser = subparsers.add_parser(
        "inspect", help="Inspect and validate a graph document"
    )

    for p in (bfs_parser, dfs_parser):
        p.add_argument("--start", "-s", required=True, help="Start node id")
    widest_parser.add_argument("--src", required=True, help="Source node id")
    widest_parser.add_argument("--dest", required=True, help="Destination node id")

    for p in (bfs_parser, dfs_parser, widest_parser):
        p.add_argument("graph", type=Path, help="Path to graph document (JSON/YAML)")
        p.add_argument(
            "--results",
            "-r",
            type=Path,
            default=None,
            help=(
                "Export results to JSON file (default: <graph_name>.results.json;"
                " placed under --output when provided)"
            ),
        )
        p.add_argument(
            "--no-results",
            action="store_true",
            help="Disable results file generation",
        )
        p.add_argument("--stdout", action="store_true", help="Print results to stdout")
        p.add_argument(
            "--output",
            "-o",
            type=Path,
            default=None,
            help="Output directory for the results file",
        )
        p.add_argument(
            "--timeout",
            type=float,
            default=None,
            help="Abort the computation after this many seconds",
        )

    inspect_parser.add_argument(
        "graph", type=Path, help="Path to graph document (JSON/YAML)"
    )
    inspect_parser.add_argument(
        "--detail", "-d", action="store_true", help="Show the full edge table"
    )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(level_from_flags(args.verbose, args.quiet))
    if args.verbose:
        logger.debug("Debug logging enabled")

    if args.command == "inspect":
        _inspect_graph(args.graph, args.detail)
        return

    algorithm = Algorithm.from_string(args.command)
    if algorithm == Algorithm.WIDEST:
        node_args: Dict[str, Any] = {"src": args.src, "dest": args.dest}
    else:
        node_args = {"start": args.start}
    _run_algorithm(
        algorithm=algorithm,
        path=args.graph,
        node_args=node_args,
        results_override=args.results,
        no_results=args.no_results,
        stdout=args.stdout,
        output_dir=args.output,
        timeout=args.timeout,
    )


if __name__ == "__main__":
    main()
