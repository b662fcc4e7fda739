#!/usr/bin/env python3
"""
Friend Recommender

Builds a social network from a token stream and prints friend
recommendations for every user, or serves the HTTP API.
"""

import argparse
import logging
import sys

from friendrec.config import load_config
from friendrec.network_input import parse_network, NetworkInputError
from friendrec.services import create_services, ServiceContext


def setup_logging(verbose: bool = False, level_name: str = "INFO"):
    """Configure logging. Log records go to stderr, reports to stdout."""
    level = logging.DEBUG if verbose else getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def read_input(path: str) -> str:
    """Read the network description from a file, or stdin for '-'."""
    if path == "-":
        return sys.stdin.read()
    with open(path, "r") as f:
        return f.read()


def run_recommend(args, config) -> int:
    """Load a network and print its structure and every user's recommendations."""
    logger = logging.getLogger(__name__)

    try:
        description = parse_network(read_input(args.input))
    except NetworkInputError as e:
        logger.error(f"Invalid network input: {e}")
        return 1
    except OSError as e:
        logger.error(f"Cannot read input: {e}")
        return 1

    context = ServiceContext.create(config=config)
    _, network, recommendations = create_services(context)
    network.load(description)

    max_distance = args.max_distance if args.max_distance is not None else description.max_distance
    for line in recommendations.build_report(max_distance):
        print(line)
    return 0


def run_serve(args, config) -> int:
    """Start the HTTP API."""
    import uvicorn

    host = args.host or config.api.host
    port = args.port or config.api.port
    uvicorn.run("api.main:app", host=host, port=port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Friend recommendations over a social network"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    recommend = subparsers.add_parser(
        "recommend",
        help="Print recommendations for a network read from a file or stdin"
    )
    recommend.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Network description file (default: stdin)"
    )
    recommend.add_argument(
        "--max-distance",
        type=int,
        help="Override the max distance given in the input"
    )

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", type=str, help="Bind address")
    serve.add_argument("--port", type=int, help="Bind port")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "max_distance", None) is not None and args.max_distance < 0:
        parser.error("--max-distance must be >= 0")

    try:
        config = load_config()
    except ValueError as e:
        setup_logging(args.verbose)
        logging.getLogger(__name__).error(f"Invalid configuration: {e}")
        return 1

    setup_logging(args.verbose, config.log_level)

    if args.command == "serve":
        return run_serve(args, config)
    return run_recommend(args, config)


if __name__ == "__main__":
    sys.exit(main())
