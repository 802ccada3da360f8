"""Command line for the stall and banned-digit puzzles; input comes from stdin."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from algopuzzles.puzzles import count_valid_numbers, restroom_occupancy


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algopuzzles")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser(
        "ominous", help="read 'low high limit', a count and banned digits; print valid numbers"
    )
    commands.add_parser("restroom", help="read a stall count; print each state")
    return parser


def _read_ints(parser: argparse.ArgumentParser) -> list[int]:
    try:
        return [int(token) for token in sys.stdin.read().split()]
    except ValueError as error:
        parser.error(f"input must be whole numbers: {error}")
    return []


def main(argv: Sequence[str] | None = None) -> int:
    """Run a puzzle named on the command line."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    numbers = _read_ints(parser)

    if args.command == "ominous":
        if len(numbers) < 4:
            parser.error("expected low, high, limit and a count of banned digits")
        low, high, limit, count = numbers[:4]
        banned = numbers[4 : 4 + count]
        if count < 0 or len(banned) != count:
            parser.error(f"expected {count} banned digits")
        try:
            print(count_valid_numbers(low, high, limit, banned))
        except ValueError as error:
            parser.error(str(error))
    else:
        if not numbers:
            parser.error("expected a stall count")
        try:
            states = restroom_occupancy(numbers[0])
        except ValueError as error:
            parser.error(str(error))
        for state in states:
            print("".join(f"{stall} " for stall in state))
    return 0