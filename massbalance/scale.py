"""
Balance Scale for the Mass Balance Puzzle.

Two pure functions:
    weigh            — compare two groups by units of oddness
    compare_results  — relate two earlier outcomes to each other

The scale does not check that the groups are disjoint or the same size.
Callers supply equal, disjoint groups when they want a physical weighing.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .domain import (
    Balance,
    Comparison,
    Mass,
    MassRegistry,
    WeighingRecord,
)

logger = logging.getLogger(__name__)


def _units(group: Iterable[Mass]) -> int:
    """An odd mass contributes one unit, a normal mass none."""
    return sum(1 for mass in group if mass.is_odd)


def weigh(left: Iterable[Mass], right: Iterable[Mass]) -> Balance:
    """
    Compare two groups of masses.

    Ties are BALANCED, including two empty groups.
    """
    left_units = _units(left)
    right_units = _units(right)

    if left_units > right_units:
        return Balance.LEFT_HEAVY
    elif left_units < right_units:
        return Balance.RIGHT_HEAVY
    else:
        return Balance.BALANCED


def weigh_labels(
    registry: MassRegistry,
    left: Iterable[str],
    right: Iterable[str],
) -> WeighingRecord:
    """Weigh two groups given by label and record the result."""
    left = tuple(left)
    right = tuple(right)
    outcome = weigh(registry.resolve(left), registry.resolve(right))
    logger.debug("Weighed %s vs %s: %s", "".join(left), "".join(right), outcome.value)
    return WeighingRecord(left=left, right=right, outcome=outcome)


def compare_results(first: Balance, second: Balance) -> Comparison:
    """
    Classify how `second` relates to `first`.

    A balanced second outcome wins over everything else; otherwise the
    heavier side either repeated or flipped.
    """
    if second is Balance.BALANCED:
        return Comparison.BALANCED
    elif first is second:
        return Comparison.SAME
    else:
        return Comparison.OPPOSITE
