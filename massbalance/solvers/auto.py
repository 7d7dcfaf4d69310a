"""
Auto Solve Decision Tree.

A fixed plan of at most three weighings over masses labelled A to L.
The odd mass is modelled as the heavier one, so each branch below can
be checked by hand:

    1. ABCD vs EFGH
       Balanced -> odd in IJKL
           2. IJ vs KA
              Balanced -> L
              else 3. JK vs AB, compare(2, 3):
                  Balanced -> I   (I sits out step 3)
                  Same     -> J   (J on the left both times)
                  Opposite -> K   (K switches from right to left)
       Unbalanced -> odd in A..H
           2. ABE vs CDF
              Balanced -> G or H; 3. G vs I, Balanced -> H else G
              else 3. ED vs FB, lookup (compare(1, 2), compare(2, 3))
"""

from __future__ import annotations

import logging
from typing import Callable

from ..domain import (
    Balance,
    Comparison,
    DecisionTreeError,
    SEPARATOR,
    MassRegistry,
    SolveOutcome,
    WeighingRecord,
)
from ..scale import compare_results, weigh_labels

logger = logging.getLogger(__name__)


# =============================================================================
# THE PLAN
# =============================================================================

FIRST_WEIGHING = ("ABCD", "EFGH")

# Odd mass among I..L; A and B are known normal here
BALANCED_SECOND = ("IJ", "KA")
BALANCED_THIRD = ("JK", "AB")
BALANCED_THIRD_VERDICT = {
    Comparison.BALANCED: "I",
    Comparison.SAME: "J",
    Comparison.OPPOSITE: "K",
}

# Odd mass among A..H; I is known normal here
UNBALANCED_SECOND = ("ABE", "CDF")
LEFT_OUT_THIRD = ("G", "I")
UNBALANCED_THIRD = ("ED", "FB")

# (compare(first, second), compare(second, third)) -> odd mass
UNBALANCED_VERDICT = {
    (Comparison.SAME, Comparison.BALANCED): "A",
    (Comparison.SAME, Comparison.SAME): "F",
    (Comparison.SAME, Comparison.OPPOSITE): "B",
    (Comparison.OPPOSITE, Comparison.BALANCED): "C",
    (Comparison.OPPOSITE, Comparison.SAME): "E",
    (Comparison.OPPOSITE, Comparison.OPPOSITE): "D",
}


# =============================================================================
# DECISION TREE
# =============================================================================

def _record_deduction(registry: MassRegistry, record: WeighingRecord) -> None:
    """Both pans of a balanced weighing hold only normal masses."""
    if record.outcome is Balance.BALANCED:
        registry.confirm(record.left + record.right)


def decide(registry: MassRegistry) -> tuple[str, list[WeighingRecord]]:
    """
    Walk the decision tree against the registry.

    Returns:
        (guessed label, weighings performed)

    Raises:
        DecisionTreeError: If the outcomes form a pair that cannot occur
    """
    records: list[WeighingRecord] = []

    def measure(plan: tuple[str, str]) -> Balance:
        record = weigh_labels(registry, plan[0], plan[1])
        records.append(record)
        _record_deduction(registry, record)
        return record.outcome

    result_1 = measure(FIRST_WEIGHING)

    if result_1 is Balance.BALANCED:
        result_2 = measure(BALANCED_SECOND)
        if result_2 is Balance.BALANCED:
            return "L", records

        result_3 = measure(BALANCED_THIRD)
        comparison = compare_results(result_2, result_3)
        return BALANCED_THIRD_VERDICT[comparison], records

    # Masses left off an unbalanced first weighing are normal
    registry.confirm("IJKL")

    result_2 = measure(UNBALANCED_SECOND)
    if result_2 is Balance.BALANCED:
        result_3 = measure(LEFT_OUT_THIRD)
        return ("H" if result_3 is Balance.BALANCED else "G"), records

    result_3 = measure(UNBALANCED_THIRD)
    comparisons = (
        compare_results(result_1, result_2),
        compare_results(result_2, result_3),
    )
    verdict = UNBALANCED_VERDICT.get(comparisons)
    if verdict is None:
        raise DecisionTreeError(
            f"Impossible outcome pair ({comparisons[0].value}, {comparisons[1].value})"
        )
    return verdict, records


def auto_solve(
    registry: MassRegistry,
    verbose: bool = False,
    output_fn: Callable[[str], None] = print,
) -> SolveOutcome:
    """Solve the registry with the decision tree and report the verdict."""
    answer = registry.odd_label
    guess, records = decide(registry)

    if verbose:
        for record in records:
            for line in record.describe():
                output_fn(line)
            output_fn(SEPARATOR)

    output_fn(f"Auto-solve result: {guess}")
    output_fn(f"The different mass was: {answer}")

    outcome = SolveOutcome(guess=guess, answer=answer, weighings=records)
    logger.debug(
        "Auto-solve used %d weighing(s), guessed %s: %s",
        len(records), guess, outcome.result.value,
    )
    return outcome
