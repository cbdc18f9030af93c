"""Command-line interface for wgraph."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from wgraph.algorithms import (
    BreadthFirstSearch,
    DijkstraSearch,
    SearchAlgorithm,
    path_weight,
    search_fabric,
)
from wgraph.config import GraphConfig
from wgraph.graph.store import InvalidWeightError, WeightedGraph
from wgraph.logging import get_logger, set_global_log_level

logger = get_logger(__name__)

#: Edges of the sample graph used by ``wgraph demo``.
SAMPLE_EDGES: Tuple[Tuple[str, str, float], ...] = (
    ("A", "B", 1.0),
    ("A", "C", 4.0),
    ("B", "C", 2.0),
    ("B", "D", 5.0),
    ("C", "D", 1.0),
)


def build_sample_graph() -> WeightedGraph:
    """Return the four-vertex sample graph A, B, C, D."""
    graph = WeightedGraph()
    for name in ("A", "B", "C", "D"):
        graph.add_vertex(name)
    for source_id, dest_id, weight in SAMPLE_EDGES:
        graph.add_edge(source_id, dest_id, weight)
    return graph


def _format_path(path: Sequence[object]) -> str:
    if not path:
        return "(no path)"
    return " -> ".join(str(v) for v in path)


def _format_weight(value: float) -> str:
    """Return weight with up to three decimals, trailing zeros trimmed.

    Examples:
        4.0 -> "4"; 0.125 -> "0.125"; 1234.5 -> "1,234.5".
    """
    s = f"{value:,.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _run_demo(source_id: str, destination_id: str) -> None:
    graph = build_sample_graph()
    logger.debug(f"Sample graph built: {graph!r}")

    bfs_path = BreadthFirstSearch(graph).find_path(source_id, destination_id)
    dijkstra_path = DijkstraSearch(graph).find_path(source_id, destination_id)

    print(f"BFS Path from {source_id} to {destination_id}: {_format_path(bfs_path)}")
    print(
        f"Dijkstra Path from {source_id} to {destination_id}: "
        f"{_format_path(dijkstra_path)}"
    )


def _build_graph_from_edges(
    edges: Sequence[Tuple[str, str, str]], config: GraphConfig
) -> WeightedGraph:
    graph = WeightedGraph(config)
    for source_id, dest_id, _weight in edges:
        graph.add_vertex(source_id)
        graph.add_vertex(dest_id)
    for source_id, dest_id, weight in edges:
        try:
            value = float(weight)
        except ValueError:
            raise InvalidWeightError(
                f"Edge '{source_id}' -> '{dest_id}' has non-numeric weight {weight!r}."
            ) from None
        graph.add_edge(source_id, dest_id, value)
    return graph


def _run_path(
    source_id: str,
    destination_id: str,
    edges: Sequence[Tuple[str, str, str]],
    algorithm: SearchAlgorithm,
) -> None:
    # Negative weights are rejected regardless of algorithm
    config = GraphConfig(reject_negative_weights=True)
    try:
        graph = _build_graph_from_edges(edges, config)
    except InvalidWeightError as exc:
        logger.error(f"Invalid graph: {exc}")
        sys.exit(1)

    logger.info(f"Searching {source_id} -> {destination_id} with {algorithm.name}")
    path = search_fabric(graph, algorithm).find_path(source_id, destination_id)
    if not path:
        print(f"No path from {source_id} to {destination_id}")
        return

    print(_format_path(path))
    weight = _format_weight(path_weight(graph, path))
    print(f"hops: {len(path) - 1}, weight: {weight}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``wgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="wgraph",
        description="Find paths in small weighted graphs.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{demo,path}",
        help="Available commands",
    )

    demo_parser = subparsers.add_parser(
        "demo", help="Print BFS and Dijkstra paths on the sample graph"
    )
    demo_parser.add_argument("--source", "-s", default="A", help="Source vertex")
    demo_parser.add_argument(
        "--destination", "-d", default="D", help="Destination vertex"
    )

    path_parser = subparsers.add_parser(
        "path", help="Find a path in a graph given on the command line"
    )
    path_parser.add_argument("source", help="Source vertex")
    path_parser.add_argument("destination", help="Destination vertex")
    path_parser.add_argument(
        "--edge",
        "-e",
        nargs=3,
        action="append",
        default=[],
        metavar=("SRC", "DST", "WEIGHT"),
        help="Directed edge; repeat for each edge",
    )
    path_parser.add_argument(
        "--algorithm",
        "-a",
        default="dijkstra",
        choices=[a.name.lower() for a in SearchAlgorithm],
        help="Search algorithm (default: dijkstra)",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "demo":
        _run_demo(args.source, args.destination)
    elif args.command == "path":
        _run_path(
            args.source,
            args.destination,
            [tuple(e) for e in args.edge],
            SearchAlgorithm.from_string(args.algorithm),
        )


if __name__ == "__main__":
    main()
