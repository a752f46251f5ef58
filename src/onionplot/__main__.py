"""Command-line interface."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from onionplot.config import DEFAULT_HALF_WIDTH, DEFAULT_RESOLUTION, EnvelopeConfig
from onionplot.logging_config import setup_logging
from onionplot.model.envelope import generate_gauss_points
from onionplot.model.path import generate_gauss_path
from onionplot.model.projector import bitstring_to_onion_coords, project_to_view
from onionplot.model.task import StatusUpdate
from onionplot.model.tsp import parse_euc2d, parse_permutation

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="onionplot", description="Onion plot coordinates for bitstring genotypes.")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")
    parser.add_argument("--half-width", type=float, default=DEFAULT_HALF_WIDTH,
                        help="Half-width D of the gaussian domain")
    parser.add_argument("--resolution", type=int, default=DEFAULT_RESOLUTION,
                        help="Number of envelope sampling intervals")

    commands = parser.add_subparsers(dest="command", required=True)

    project = commands.add_parser("project", help="Print the position of each bitstring as 'x,y,bitstring'")
    project.add_argument("bitstrings", nargs="+")
    project.add_argument("--view", action="store_true", help="Print view coordinates instead of percentages")

    commands.add_parser("envelope", help="Print the outline path string")

    plot = commands.add_parser("plot", help="Save an onion plot of the given bitstrings")
    plot.add_argument("bitstrings", nargs="+")
    plot.add_argument("--output", required=True, help="Image file to write (format from the extension)")
    plot.add_argument("--annotate", action="store_true", help="Label each point with its bitstring")

    tour = commands.add_parser("tour", help="Save a plot of a TSP tour")
    tour.add_argument("instance", help="TSPLIB EUC_2D instance file")
    tour.add_argument("permutation", help="Comma-separated node order, e.g. 0,3,1,2")
    tour.add_argument("--output", required=True, help="Image file to write")

    fitness = commands.add_parser("fitness", help="Save a fitness curve from status updates")
    fitness.add_argument("updates", help="JSON Lines file, one status update object per line")
    fitness.add_argument("--output", required=True, help="Image file to write")

    return parser


def run(args: argparse.Namespace) -> None:
    config = EnvelopeConfig(half_width=args.half_width, resolution=args.resolution)

    if args.command == "project":
        for bitstring in args.bitstrings:
            if args.view:
                point = project_to_view(bitstring, bitstring, config)
            else:
                point = bitstring_to_onion_coords(bitstring, bitstring)
            print(f"{point.x},{point.y},{point.tooltip}")

    elif args.command == "envelope":
        print(generate_gauss_path(generate_gauss_points(config), config))

    elif args.command == "plot":
        # Imported lazily, matplotlib is slow to load
        from onionplot.view.onion_figure import plot_onion, save_figure

        points = [project_to_view(b, b, config) for b in args.bitstrings]
        save_figure(plot_onion(points, config, annotate=args.annotate), args.output)

    elif args.command == "tour":
        from onionplot.view.onion_figure import plot_tour, save_figure

        with open(args.instance, encoding="utf-8") as f:
            nodes = parse_euc2d(f.read())
        save_figure(plot_tour(nodes, parse_permutation(args.permutation)), args.output)

    elif args.command == "fitness":
        from onionplot.view.onion_figure import plot_fitness, save_figure

        updates = []
        with open(args.updates, encoding="utf-8") as f:
            for line_no, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                try:
                    updates.append(StatusUpdate.from_dict(json.loads(line)))
                except (json.JSONDecodeError, KeyError, TypeError) as e:
                    raise ValueError(f"Line {line_no}: invalid status update: {e}") from e
        save_figure(plot_fitness(updates), args.output)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    try:
        run(args)
    except (ValueError, IndexError, OSError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"onionplot: error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
