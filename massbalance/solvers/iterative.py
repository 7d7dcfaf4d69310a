"""
Iterative Deduction Loop.

Instead of choosing pans directly, the player chooses how many masses
to weigh and how many of those should come from the masses already
confirmed normal. The weighed group is split into two halves:

- Balanced:   every weighed mass is confirmed normal
- Unbalanced: every mass left out is confirmed normal

The session ends when eleven masses are confirmed (the twelfth is odd
by elimination) or the weighings run out.

Pair shortcut: weighing exactly two masses where one was already
confirmed names the other one as odd as soon as the scale tips. When
fewer than eleven masses had been confirmed beforehand this is reported
as a lucky finish, since not every mass was individually ruled out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from ..domain import (
    MAX_WEIGHINGS,
    Balance,
    SEPARATOR,
    MassRegistry,
    SolveOutcome,
    WeighingRecord,
    format_labels,
)
from ..scale import weigh_labels
from ..validation import (
    check_guess,
    is_valid_confirmed_count,
    is_valid_group_size,
    read_bounded_int,
)

logger = logging.getLogger(__name__)


# =============================================================================
# PARTITIONING
# =============================================================================

def partition_masses(
    registry: MassRegistry,
    group_size: int,
    from_confirmed: int,
) -> tuple[list[str], list[str]]:
    """
    Split the registry into a weighed group and a left-out group.

    Takes `from_confirmed` confirmed masses first, then unconfirmed ones.
    If the unconfirmed masses run out, further confirmed masses fill the
    group. Both lists follow registry order; the registry is not touched.

    Returns:
        (weighed labels, left-out labels)
    """
    confirmed = registry.confirmed_labels()
    unconfirmed = registry.unconfirmed_labels()

    chosen = confirmed[:from_confirmed]
    chosen += unconfirmed[:group_size - len(chosen)]
    if len(chosen) < group_size:
        spare = [label for label in confirmed if label not in chosen]
        chosen += spare[:group_size - len(chosen)]

    chosen_set = set(chosen)
    weighed = [label for label in registry.labels if label in chosen_set]
    left_out = [label for label in registry.labels if label not in chosen_set]
    return weighed, left_out


# =============================================================================
# ONE ITERATION
# =============================================================================

@dataclass
class IterationStep:
    """Everything one iteration did to the registry."""
    weighed: list[str]
    left_out: list[str]
    record: WeighingRecord
    newly_confirmed: int
    solved: bool = False
    odd_label: Optional[str] = None
    lucky: bool = False


def apply_weighing(
    registry: MassRegistry,
    weighed: list[str],
    left_out: list[str],
) -> IterationStep:
    """
    Weigh the two halves of `weighed` and update the confirmed set.

    The lucky flag is judged on the confirmed count before this weighing.
    """
    confirmed_before = set(registry.confirmed_labels())
    half = len(weighed) // 2
    record = weigh_labels(registry, weighed[:half], weighed[half:])

    pair_shortcut = (
        len(weighed) == 2
        and sum(1 for label in weighed if label in confirmed_before) == 1
    )

    if record.outcome is Balance.BALANCED:
        newly = registry.confirm(weighed)
    else:
        newly = registry.confirm(left_out)

    step = IterationStep(
        weighed=list(weighed),
        left_out=list(left_out),
        record=record,
        newly_confirmed=newly,
    )

    if record.outcome is not Balance.BALANCED and pair_shortcut:
        step.solved = True
        step.odd_label = next(label for label in weighed if label not in confirmed_before)
        step.lucky = len(confirmed_before) < len(registry) - 1
    elif registry.confirmed_count >= len(registry) - 1:
        step.solved = True
        step.odd_label = registry.unconfirmed_labels()[0]

    logger.debug(
        "Iteration weighed %s: %s, %d newly confirmed, solved=%s",
        format_labels(weighed), record.outcome.value, newly, step.solved,
    )
    return step


# =============================================================================
# SESSION LOOP
# =============================================================================

def iterative_solve(
    registry: MassRegistry,
    input_fn: Callable[[], str] = input,
    output_fn: Callable[[str], None] = print,
    weighings: int = MAX_WEIGHINGS,
) -> SolveOutcome:
    """
    Run one iterative deduction session.

    Raises:
        InputError: If a numeric answer is not an integer
    """
    total = len(registry)
    records: list[WeighingRecord] = []
    remaining = weighings
    last_step: Optional[IterationStep] = None

    while remaining > 0:
        output_fn(SEPARATOR)
        output_fn(f"Measurements left: {remaining}")
        confirmed = registry.confirmed_count
        output_fn(
            f"Confirmed normal ({confirmed}): "
            f"{format_labels(registry.confirmed_labels()) or '-'}"
        )

        group_size = read_bounded_int(
            f"How many masses should be weighed? (even number, 1-{total})",
            lambda n: is_valid_group_size(n, total),
            input_fn,
            output_fn,
        )
        limit = min(confirmed, group_size)
        from_confirmed = read_bounded_int(
            f"How many of them should be confirmed normal masses? (0-{limit})",
            lambda n: is_valid_confirmed_count(n, confirmed, group_size),
            input_fn,
            output_fn,
        )

        weighed, left_out = partition_masses(registry, group_size, from_confirmed)
        last_step = apply_weighing(registry, weighed, left_out)
        records.append(last_step.record)

        for line in last_step.record.describe():
            output_fn(line)
        output_fn(f"Left out: {format_labels(left_out) or '-'}")
        remaining -= 1

        if last_step.solved:
            break

    answer = registry.odd_label
    output_fn(SEPARATOR)

    if last_step is not None and last_step.solved:
        guess = last_step.odd_label
        output_fn(f"The different mass must be: {guess}")
        if last_step.lucky:
            output_fn("Lucky! Not every other mass was ruled out individually.")
        outcome = SolveOutcome(
            guess=guess, answer=answer, weighings=records, lucky=last_step.lucky
        )
    else:
        output_fn("You have no more measurements left.")
        output_fn("What do you think the different mass is?")
        raw_guess = input_fn()
        guess = answer if check_guess(raw_guess, answer) else raw_guess.strip().upper()
        outcome = SolveOutcome(guess=guess, answer=answer, weighings=records)

    if outcome.won:
        output_fn("You found the different mass!")
    else:
        output_fn("You didn't find the different mass.")
    output_fn(f"The different mass was: {answer}")

    logger.debug("Iterative session finished: %s", outcome.result.value)
    return outcome
