"""Command-line entry point: solve, inspect, benchmark or watch a valley."""

from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from bench import benchmark, format_results
from core import BlizzardBasinError
from navigator import NavigatorConfig, single_trip
from problem import BlizzardBasin
from render import render_snapshot, render_trip
from serialization import solution_to_json


def read_input(path: str) -> str:
    """Read puzzle input from a file, or from stdin when `path` is `-`."""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="blizzard-basin",
        description="Find the fastest way through a valley of moving blizzards",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Log search progress (-v for legs, -vv for everything)",
    )

    # Options shared by every subcommand that runs the search
    search_options = argparse.ArgumentParser(add_help=False)
    search_options.add_argument("input", help="Path to the puzzle input, or - for stdin")
    search_options.add_argument(
        "--precompute",
        action="store_true",
        help="Build the whole occupancy table up front instead of on demand",
    )
    search_options.add_argument(
        "--max-expansions",
        type=int,
        default=None,
        help="Abort a search after this many expanded states (default: all states)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser(
        "run", parents=[search_options], help="Solve both parts"
    )
    run_parser.add_argument("--json", action="store_true", help="Print the answers as JSON")

    show_parser = subparsers.add_parser(
        "show", parents=[search_options], help="Draw the valley at a given minute"
    )
    show_parser.add_argument(
        "--minute", type=int, default=0, help="Minute to draw (default: 0)"
    )
    show_parser.add_argument(
        "--trip",
        action="store_true",
        help="Draw every minute of the fastest single trip instead",
    )

    bench_parser = subparsers.add_parser(
        "bench", parents=[search_options], help="Time parsing and both parts"
    )
    bench_parser.add_argument(
        "--iterations", type=int, default=10, help="Runs per stage (default: 10)"
    )

    subparsers.add_parser(
        "view", parents=[search_options], help="Watch the round trip in a window"
    )

    args = parser.parse_args(argv)

    if args.max_expansions is not None and args.max_expansions < 1:
        parser.error("--max-expansions must be positive")
    if args.command == "show" and args.minute < 0:
        parser.error("--minute must not be negative")
    if args.command == "bench" and args.iterations < 1:
        parser.error("--iterations must be positive")

    return args


def config_from_args(args: argparse.Namespace) -> NavigatorConfig:
    return NavigatorConfig(
        precompute_occupancy=args.precompute,
        max_expansions=args.max_expansions,
    )


def run_command(args: argparse.Namespace) -> None:
    text = read_input(args.input)
    config = config_from_args(args)

    if args.command == "run":
        solution = BlizzardBasin.solve(text, config)
        print(solution_to_json(solution) if args.json else solution)
    elif args.command == "show":
        problem = BlizzardBasin.from_str(text, config)
        if args.trip:
            trip = single_trip(problem.valley, config, problem.occupancy)
            print(render_trip(problem.valley, trip, problem.occupancy))
        else:
            print(render_snapshot(problem.valley, args.minute, occupancy=problem.occupancy))
    elif args.command == "bench":
        print(format_results(benchmark(text, args.iterations, config)))
    elif args.command == "view":
        from ui import open_viewer

        open_viewer(BlizzardBasin.from_str(text, config))


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose > 1 else logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )
    try:
        run_command(args)
    except (BlizzardBasinError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
