"""
Mass Balance CLI — Interactive Interface for the Twelve Masses Puzzle.

Commands:
    massbalance play                    — Menu with restart loop (default)
    massbalance manual                  — One manual session
    massbalance auto [-n N] [--verbose] — Decision tree, N sessions
    massbalance iterative               — One iterative deduction session

Global options:
    --seed N         Seed the choice of odd mass (repeatable runs)
    --log-level LVL  Engine log level (default WARNING)

Malformed numbers and internal invariant violations abort the run
with exit code 1.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Optional

from ..domain import GameResult, PuzzleError, SolveOutcome
from .session import (
    BatchResult,
    SolveMethod,
    play,
    run_auto_batch,
    run_session,
)


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_result_badge(result: GameResult) -> str:
    """Format a verdict as a visual badge."""
    badges = {
        GameResult.WIN: "[WIN]",
        GameResult.LOSE: "[LOSE]",
    }
    return badges.get(result, "[?]")


def format_outcome(outcome: SolveOutcome) -> str:
    """One-line summary of a finished session."""
    line = (
        f"{format_result_badge(outcome.result)} "
        f"guess: {outcome.guess} | answer: {outcome.answer} | "
        f"weighings: {len(outcome.weighings)}"
    )
    if outcome.lucky:
        line += " | lucky"
    return line


def format_batch_summary(batch: BatchResult) -> str:
    """Win/loss totals for an auto batch."""
    return f"Total: {len(batch.record)} | Wins: {batch.wins} | Losses: {batch.losses}"


def _make_rng(args: argparse.Namespace) -> Optional[random.Random]:
    seed = getattr(args, "seed", None)
    return random.Random(seed) if seed is not None else None


def _fail(error: PuzzleError) -> int:
    print("ERROR: Run aborted")
    print(f"Reason: {error}")
    return 1


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_play(args: argparse.Namespace) -> int:
    """Interactive menu with restart loop."""
    try:
        play(rng=_make_rng(args))
    except PuzzleError as e:
        return _fail(e)
    return 0


def cmd_manual(args: argparse.Namespace) -> int:
    """One manual session."""
    try:
        outcome = run_session(SolveMethod.MANUAL, rng=_make_rng(args))
    except PuzzleError as e:
        return _fail(e)
    print()
    print(format_outcome(outcome))
    return 0


def cmd_auto(args: argparse.Namespace) -> int:
    """Run the decision tree one or more times."""
    if args.attempts < 0:
        print(f"ERROR: attempts must not be negative, got {args.attempts}")
        return 1

    try:
        batch = run_auto_batch(args.attempts, verbose=args.verbose, rng=_make_rng(args))
    except PuzzleError as e:
        return _fail(e)

    print(batch.format_record())
    print(format_batch_summary(batch))
    return 0


def cmd_iterative(args: argparse.Namespace) -> int:
    """One iterative deduction session."""
    try:
        outcome = run_session(SolveMethod.ITERATIVE, rng=_make_rng(args))
    except PuzzleError as e:
        return _fail(e)
    print()
    print(format_outcome(outcome))
    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="massbalance",
        description="Twelve masses, one odd, three weighings",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for picking the odd mass",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Engine log level",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    # Play command
    play_parser = subparsers.add_parser(
        "play",
        help="Interactive menu with restart loop",
    )
    play_parser.set_defaults(func=cmd_play)

    # Manual command
    manual_parser = subparsers.add_parser(
        "manual",
        help="Solve by hand in three weighings",
    )
    manual_parser.set_defaults(func=cmd_manual)

    # Auto command
    auto_parser = subparsers.add_parser(
        "auto",
        help="Let the decision tree solve the puzzle",
    )
    auto_parser.add_argument(
        "-n", "--attempts",
        type=int,
        default=1,
        help="How many puzzles to solve",
    )
    auto_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show every weighing",
    )
    auto_parser.set_defaults(func=cmd_auto)

    # Iterative command
    iterative_parser = subparsers.add_parser(
        "iterative",
        help="Narrow down the odd mass by confirming groups",
    )
    iterative_parser.set_defaults(func=cmd_iterative)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        return cmd_play(args)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
