#!/usr/bin/env python3
"""Quick timing of Bn kernels against decimal.Decimal.

Usage:
    python scripts/quick_timing.py [--digits 200] [--rounds 200]
"""

import argparse
import random
import sys
import time
from decimal import Decimal, localcontext
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from bn import Bn


def random_literal(rng: random.Random, digits: int) -> str:
    """Random signed literal with about half its digits after the point."""
    body = "".join(rng.choice("0123456789") for _ in range(digits))
    point = rng.randint(1, digits - 1)
    sign = "-" if rng.random() < 0.5 else ""
    return f"{sign}{body[:point]}.{body[point:]}"


def time_op(label: str, func, rounds: int) -> float:
    start = time.perf_counter()
    for _ in range(rounds):
        func()
    elapsed = time.perf_counter() - start
    print(f"  {label:<24} {elapsed / rounds * 1e6:10.1f}us/op")
    return elapsed


def main():
    parser = argparse.ArgumentParser(description="Time Bn against decimal.Decimal")
    parser.add_argument("--digits", type=int, default=200, help="Digits per operand")
    parser.add_argument("--rounds", type=int, default=200, help="Repetitions per operation")
    parser.add_argument("--seed", type=int, default=1, help="Random seed")
    args = parser.parse_args()

    rng = random.Random(args.seed)
    left_text = random_literal(rng, args.digits)
    right_text = random_literal(rng, args.digits)

    print(f"Operands: {args.digits} digits, {args.rounds} rounds")

    left, right = Bn(left_text), Bn(right_text)
    print("\nBn:")
    time_op("parse", lambda: Bn(left_text), args.rounds)
    time_op("add", lambda: left + right, args.rounds)
    time_op("multiply", lambda: left * right, args.rounds)
    time_op("compare", lambda: left.compare(right), args.rounds)
    time_op("to_string", lambda: str(left), args.rounds)

    with localcontext() as ctx:
        ctx.prec = 4 * args.digits
        d_left, d_right = Decimal(left_text), Decimal(right_text)
        print("\ndecimal.Decimal:")
        time_op("parse", lambda: Decimal(left_text), args.rounds)
        time_op("add", lambda: d_left + d_right, args.rounds)
        time_op("multiply", lambda: d_left * d_right, args.rounds)
        time_op("compare", lambda: d_left.compare(d_right), args.rounds)
        time_op("to_string", lambda: str(d_left), args.rounds)

        # Both sides must agree exactly
        if Decimal(str(left * right)) != d_left * d_right:
            print("\nMISMATCH: Bn product differs from Decimal")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
