"""
Manual Solve Loop.

The player picks both sides of the scale for each weighing, then names
the odd mass once the weighings are used up.

States:
    WEIGHING  — weighings left > 0, ask for left and right groups
    GUESSING  — weighings left == 0, ask for a single label
"""

from __future__ import annotations

import logging
from typing import Callable

from ..domain import MAX_WEIGHINGS, SEPARATOR, MassRegistry, SolveOutcome, format_labels
from ..scale import weigh_labels
from ..validation import check_guess, parse_selection

logger = logging.getLogger(__name__)


def manual_solve(
    registry: MassRegistry,
    input_fn: Callable[[], str] = input,
    output_fn: Callable[[str], None] = print,
    weighings: int = MAX_WEIGHINGS,
) -> SolveOutcome:
    """
    Run one manual session against the registry.

    Unknown characters in a selection are silently dropped, so an empty
    side is possible and simply weighs nothing.
    """
    records = []
    remaining = weighings

    while remaining > 0:
        output_fn(SEPARATOR)
        output_fn(f"Measurements left: {remaining}")

        output_fn("Which masses would you like to put on the left side of the scale?")
        left = parse_selection(registry, input_fn())
        output_fn(f"Left side: {format_labels(left)}")

        output_fn("Which masses would you like to put on the right side of the scale?")
        right = parse_selection(registry, input_fn())
        output_fn(f"Right side: {format_labels(right)}")

        record = weigh_labels(registry, left, right)
        records.append(record)
        output_fn(f"The balance is: {record.outcome.value}")
        remaining -= 1

    output_fn(SEPARATOR)
    output_fn("You have no more measurements left.")
    output_fn("What do you think the different mass is?")

    answer = registry.odd_label
    raw_guess = input_fn()
    guess = answer if check_guess(raw_guess, answer) else raw_guess.strip().upper()

    outcome = SolveOutcome(guess=guess, answer=answer, weighings=records)
    if outcome.won:
        output_fn("You found the different mass!")
    else:
        output_fn("You didn't find the different mass.")
    output_fn(f"The different mass was: {answer}")

    logger.debug("Manual session finished: %s", outcome.result.value)
    return outcome
