"""Command-line entry point: parse flags, set up logging, write one graph.

Usage:
    gfagen -n 100 -e 300 -c -s 42 -o graph.gfa
    gfagen --node-count 10 --edge-count 20 > graph.gfa
"""

import argparse
import logging
import os
import sys

from gfagen.config import ConfigurationError, spec_from_dict, spec_hash, spec_to_json
from gfagen.graph import STDOUT_SENTINEL, TRACE, open_sink, write_graph
from gfagen.reproducibility import MAX_SEED

log = logging.getLogger(__name__)

LOG_LEVELS = {
    "off": logging.CRITICAL + 1,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}


def unsigned_int(value: str) -> int:
    """argparse type for non-negative integers."""
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid unsigned integer: {value!r}")
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {parsed}")
    return parsed


def seed_value(value: str) -> int:
    """argparse type for 64-bit unsigned seeds."""
    parsed = unsigned_int(value)
    if parsed > MAX_SEED:
        raise argparse.ArgumentTypeError(f"seed must be < 2**64, got {parsed}")
    return parsed


def log_level(value: str) -> int:
    """argparse type mapping a level name to a logging level."""
    try:
        return LOG_LEVELS[value.lower()]
    except KeyError:
        raise argparse.ArgumentTypeError(
            f"invalid log level {value!r} (choose from {', '.join(LOG_LEVELS)})"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gfagen",
        description="Generate a random GFA graph for testing graph tools",
    )
    parser.add_argument(
        "-o",
        "--output-file",
        default=STDOUT_SENTINEL,
        help="File to write the graph to; '-' (default) writes to stdout",
    )
    parser.add_argument(
        "-n",
        "--node-count",
        type=unsigned_int,
        required=True,
        help="Number of nodes in the graph",
    )
    parser.add_argument(
        "-e",
        "--edge-count",
        type=unsigned_int,
        required=True,
        help="Number of edges in the graph",
    )
    parser.add_argument(
        "-c",
        "--ensure-strongly-connected",
        action="store_true",
        help="Guarantee strong connectivity by threading a cycle through all "
        "nodes (without it the graph may still be strongly connected by chance)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=seed_value,
        default=None,
        help="Seed for the random number generator; random if omitted",
    )
    parser.add_argument(
        "-l",
        "--log-level",
        type=log_level,
        default="info",
        help="One of error, warn, info, debug, trace (default: info)",
    )
    return parser


def configure_logging(level: int) -> None:
    """One-time logging setup on stderr, keeping stdout for graph data."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        # Validation happens here, before the destination is opened
        spec = spec_from_dict(
            {
                "node_count": args.node_count,
                "edge_count": args.edge_count,
                "ensure_strongly_connected": args.ensure_strongly_connected,
                "seed": args.seed,
            }
        )
        log.debug("Spec %s:\n%s", spec_hash(spec), spec_to_json(spec))

        with open_sink(args.output_file) as sink:
            write_graph(spec, sink)
    except BrokenPipeError:
        # Reader closed the pipe; the flush at interpreter exit must hit devnull
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        log.error("Output stream closed before the graph was fully written")
        sys.exit(1)
    except (ConfigurationError, OSError) as exc:
        log.error("%s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
