#!/usr/bin/env python3
"""
Interactive shortest-path finder for the travel network.

TO RUN:
    travelnet
    (or: cd src && python3 -m travelnet.core.main)

Pick a starting and a destination city from the menu; the shortest path is
printed leg by leg with distance, travel time and cost.
"""

import argparse
import logging
import sys
from pathlib import Path

from travelnet.config import DEFAULT_WEIGHT, LOG_LEVEL, OUTPUTS_DIR, ensure_directories
from travelnet.core.data.graph import TravelGraph
from travelnet.core.graph_io import city_names, load_network
from travelnet.core.routing.weighting import WEIGHT_ATTRIBUTES, default_weight
from travelnet.core.utils.visualize_route import visualize

_logger = logging.getLogger(__name__)


def prompt_city(label, names, input_fn=None):
    """Show the city menu until a number in 1..len(names) is entered."""
    input_fn = input_fn or input
    n = len(names)
    while True:
        print(f"Select your {label} city:")
        for number, name in enumerate(names, 1):
            print(f"{number}. {name}")
        raw = input_fn(f"Enter your choice (1-{n}): ")
        try:
            choice = int(raw.strip())
        except ValueError:
            print("Invalid input: please enter a number.")
            continue
        if 1 <= choice <= n:
            return choice


def build_parser():
    parser = argparse.ArgumentParser(
        prog="travelnet",
        description="Find the shortest path between two cities of the travel network.",
    )
    parser.add_argument("--start", type=int, help="starting city number (skips the prompt)")
    parser.add_argument("--end", type=int, help="destination city number (skips the prompt)")
    parser.add_argument(
        "--weight",
        choices=list(WEIGHT_ATTRIBUTES),
        default=default_weight(DEFAULT_WEIGHT),
        help="edge weight used for the search (default: %(default)s)",
    )
    parser.add_argument("--network", type=Path, help="network JSON file to load instead of the configured one")
    parser.add_argument("--plot", type=Path, help="save a PNG of the network with the path highlighted")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="logging level (default: %(default)s)")
    return parser


def _plot_target(path: Path) -> Path:
    # bare file names land in OUTPUTS_DIR
    if path.parent == Path("."):
        ensure_directories()
        return OUTPUTS_DIR / path
    return path


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, str(args.log_level).upper(), logging.WARNING)
    logging.basicConfig(level=level)
    logging.getLogger().setLevel(level)

    try:
        network = load_network(args.network)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading network: {e}", file=sys.stderr)
        return 1

    names = city_names(network)
    for flag in ("start", "end"):
        value = getattr(args, flag)
        if value is not None and not 1 <= value <= len(names):
            parser.error(f"--{flag} must be between 1 and {len(names)}")

    try:
        start = args.start if args.start is not None else prompt_city("starting", names)
        end = args.end if args.end is not None else prompt_city("destination", names)
    except (EOFError, KeyboardInterrupt):
        print("\nNo input received.")
        return 1

    try:
        travel_graph = TravelGraph(network)
    except ValueError as e:
        print(f"Error building network: {e}", file=sys.stderr)
        return 1

    _logger.info("Shortest path query %d -> %d by %s", start, end, args.weight)
    travel_graph.display_shortest_path(start, end, weight=args.weight)

    if args.plot is not None:
        target = _plot_target(args.plot)
        nodes = travel_graph.shortest_path(start - 1, end - 1, weight=args.weight)["nodes"]
        visualize(travel_graph, nodes, show=False, save_path=target)
        print(f"\nSaved network plot to {target}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
