"""Command-line calculator for exact decimal arithmetic.

Usage:
    bn add 0.1 0.2             # 0.3
    bn mul 1.234 1.234         # 1.522756
    bn cmp -- -5 3             # -1
    bn round 2.5               # 3
    bn parse 1e-10             # 0.0000000001

Configuration via environment variables:
- BN_LOG_LEVEL: Log level when --verbose is not given (default: WARNING)

Exit codes:
    0 - Success
    1 - Invalid literal or unsupported operation
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Callable, Sequence

import structlog

from bn.errors import BnError
from bn.number import Bn

logger = structlog.get_logger()

LOG_LEVEL = os.environ.get("BN_LOG_LEVEL", "WARNING").upper()

# Operations over a variable number of operands (first one is the receiver)
_VARIADIC: dict[str, Callable[[Bn, Sequence[str]], Bn]] = {
    "add": lambda first, rest: first.add(*rest) if rest else first,
    "sub": lambda first, rest: first.subtract(*rest) if rest else first,
    "mul": lambda first, rest: first.multiply(*rest) if rest else first,
}

# Operations on a single operand
_UNARY: dict[str, Callable[[Bn], Bn]] = {
    "parse": Bn.clone,
    "neg": Bn.negate,
    "abs": Bn.abs,
    "trunc": Bn.truncate,
    "floor": Bn.floor,
    "ceil": Bn.ceiling,
    "round": Bn.round,
    "not": Bn.bitwise_not,
}


def configure_logging(verbose: bool) -> None:
    """Configure structlog for console output."""
    log_level = logging.DEBUG if verbose else logging.getLevelName(LOG_LEVEL)
    if not isinstance(log_level, int):
        log_level = logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bn",
        description="Exact decimal arithmetic on the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bn add 0.1 0.2
  bn mul 1e-3 1e3
  bn cmp -- -1.5 -1.25

Negative operands must follow "--".
        """,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    for name in _VARIADIC:
        sub = commands.add_parser(name, help=f"{name} operands left to right")
        sub.add_argument("operands", nargs="+", help="Decimal literals")

    cmp = commands.add_parser("cmp", help="Compare two values (-1, 0 or 1)")
    cmp.add_argument("operands", nargs=2, help="Decimal literals")
    cmp.add_argument(
        "--ignore-sign",
        action="store_true",
        help="Compare absolute values",
    )

    for name in _UNARY:
        sub = commands.add_parser(name, help=f"{name} a single value")
        sub.add_argument("operands", nargs=1, help="Decimal literal")

    return parser


def run(args: argparse.Namespace) -> str:
    """Evaluate the parsed command and return the text to print.

    Raises:
        FormatError: If an operand is not a decimal literal
    """
    first = Bn(args.operands[0])
    rest = args.operands[1:]

    if args.command == "cmp":
        return str(first.compare(rest[0], ignore_sign=args.ignore_sign))
    if args.command in _VARIADIC:
        return str(_VARIADIC[args.command](first, rest))
    return str(_UNARY[args.command](first))


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        result = run(args)
    except BnError as err:
        logger.debug("command_failed", command=args.command, error=str(err))
        print(f"Error: {err}", file=sys.stderr)
        return 1

    print(result)
    return 0

