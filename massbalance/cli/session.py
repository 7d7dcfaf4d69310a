"""
Session Orchestrator for the Mass Balance Puzzle.

One session = one fresh registry, one solver, one verdict.

Session kinds:
    1. Manual     (player picks both pans)
    2. Auto       (fixed decision tree, optionally repeated in a batch)
    3. Iterative  (player picks group sizes, solver partitions)

Nothing is persisted. The registry is discarded with the session.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from ..domain import GameResult, SolveOutcome, setup_registry
from ..solvers.auto import auto_solve
from ..solvers.iterative import iterative_solve
from ..solvers.manual import manual_solve
from ..validation import parse_int

logger = logging.getLogger(__name__)


class SolveMethod(Enum):
    MANUAL = "manual"
    AUTO = "auto"
    ITERATIVE = "iterative"

    @classmethod
    def from_answer(cls, text: str) -> Optional[SolveMethod]:
        """Menu answers match on their first letter ('m', 'a', 'i')."""
        answer = text.strip().lower()
        for method in cls:
            if answer and method.value.startswith(answer[0]):
                return method
        return None


# =============================================================================
# BATCH RESULT
# =============================================================================

@dataclass
class BatchResult:
    """Record of repeated auto-solve sessions."""
    record: list[GameResult] = field(default_factory=list)

    @property
    def wins(self) -> int:
        return sum(1 for r in self.record if r is GameResult.WIN)

    @property
    def losses(self) -> int:
        return len(self.record) - self.wins

    def format_record(self) -> str:
        return "Results: [" + ", ".join(r.value for r in self.record) + "]"


# =============================================================================
# SESSION EXECUTION
# =============================================================================

def run_session(
    method: SolveMethod,
    rng: Optional[random.Random] = None,
    input_fn: Callable[[], str] = input,
    output_fn: Callable[[str], None] = print,
    verbose: bool = True,
) -> SolveOutcome:
    """Create a fresh registry and solve it with the chosen method."""
    registry = setup_registry(rng)
    logger.info("Starting %s session", method.value)

    if method is SolveMethod.MANUAL:
        return manual_solve(registry, input_fn, output_fn)
    elif method is SolveMethod.AUTO:
        return auto_solve(registry, verbose=verbose, output_fn=output_fn)
    else:
        return iterative_solve(registry, input_fn, output_fn)


def run_auto_batch(
    attempts: int,
    verbose: bool = False,
    rng: Optional[random.Random] = None,
    output_fn: Callable[[str], None] = print,
) -> BatchResult:
    """Run the decision tree `attempts` times, each on a new registry."""
    batch = BatchResult()
    for _ in range(attempts):
        outcome = run_session(SolveMethod.AUTO, rng=rng, output_fn=output_fn, verbose=verbose)
        batch.record.append(outcome.result)
    logger.info("Auto batch finished: %d win(s), %d loss(es)", batch.wins, batch.losses)
    return batch


# =============================================================================
# INTERACTIVE MENU
# =============================================================================

def play(
    input_fn: Callable[[], str] = input,
    output_fn: Callable[[str], None] = print,
    rng: Optional[random.Random] = None,
) -> int:
    """
    The restart menu: pick a method, solve, ask to start over.

    Returns:
        Number of menu rounds played

    Raises:
        InputError: If a numeric answer is not an integer
    """
    rounds = 0
    start_over = True

    while start_over:
        rounds += 1
        output_fn("12 Masses Puzzle")
        output_fn("-------------------\n")
        output_fn("Would you like to solve the puzzle manually, automatically or iteratively?")
        output_fn("Type 'manual', 'auto' or 'iterative' and press Enter. (m, a or i works)")

        method = SolveMethod.from_answer(input_fn())

        if method is SolveMethod.AUTO:
            output_fn("How many times should the computer solve the puzzle?")
            attempts = parse_int(input_fn())
            output_fn("Would you like to see the steps? (y/n)")
            verbose = input_fn().strip().lower().startswith("y")
            batch = run_auto_batch(attempts, verbose=verbose, rng=rng, output_fn=output_fn)
            output_fn(batch.format_record())
        elif method is not None:
            run_session(method, rng=rng, input_fn=input_fn, output_fn=output_fn)
        else:
            output_fn("Invalid input.")

        output_fn("\n\nWould you like to start over? (y/anything else)")
        start_over = input_fn().strip().lower().startswith("y")

    return rounds
