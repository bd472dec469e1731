"""Main CLI entry point for dotdash."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .. import __version__
from ..bench import benchmark_strategies
from ..codec.decoder import DEFAULT_STRATEGY, STRATEGIES
from ..config import TranscoderConfig
from ..exceptions import DotdashError
from ..transcoder import decode_message, encode_message
from ..utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the dotdash CLI."""
    parser = argparse.ArgumentParser(
        prog="dotdash",
        description="dotdash: Morse code transcoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  echo "Hello World" | dotdash encode
  echo ".... .. / - .... . .-. ." | dotdash decode
  dotdash bench --iterations 200
        """,
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        metavar="LEVEL",
        help="Logging level for diagnostics on stderr (default: WARNING)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"dotdash {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    encode_parser = subparsers.add_parser("encode", help="Encode plaintext read from stdin")
    encode_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unencodable characters instead of dropping them",
    )

    decode_parser = subparsers.add_parser("decode", help="Decode Morse read from stdin")
    decode_parser.add_argument(
        "--strategy",
        choices=STRATEGIES,
        default=DEFAULT_STRATEGY,
        help=f"Code lookup strategy (default: {DEFAULT_STRATEGY})",
    )

    bench_parser = subparsers.add_parser("bench", help="Time the decode strategies")
    bench_parser.add_argument(
        "--iterations",
        type=int,
        default=100,
        help="Passes over 1000 codes per strategy (default: 100)",
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the dotdash CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(args.log_level)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.command == "encode":
            config = TranscoderConfig(strict=args.strict)
            print(encode_message(sys.stdin.read(), config))
        elif args.command == "decode":
            config = TranscoderConfig(strategy=args.strategy)
            print(decode_message(sys.stdin.read(), config))
        elif args.command == "bench":
            results = benchmark_strategies(args.iterations)
            for strategy, seconds in results.items():
                print(f"{strategy:<8}{seconds:.6f} s")
    except (DotdashError, ValueError) as e:
        logger.debug("%s failed", args.command, exc_info=True)
        print(e, file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
