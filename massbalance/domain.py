"""
Core Domain Objects for the Mass Balance Puzzle.

The registry is the single owner of mass state for one solve session.
Groups handed to the scale are lists of labels, never mass handles;
status changes always go back through the registry.

Domain Objects:
    Mass           — One labelled mass with ground truth and deduced status
    MassRegistry   — The fixed, ordered set of twelve masses
    WeighingRecord — One use of the balance scale and its outcome
    SolveOutcome   — Verdict of a finished solve session
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

MASS_LABELS = "ABCDEFGHIJKL"
MAX_WEIGHINGS = 3
SEPARATOR = "\n-------------------\n"


# =============================================================================
# ERRORS
# =============================================================================

class PuzzleError(Exception):
    """Base class for all puzzle failures."""
    pass


class InputError(PuzzleError):
    """Raised when user text cannot be read as the expected value. Fatal for the run."""
    pass


class UnknownMassError(PuzzleError):
    """Raised when a label passed by code does not name a mass in the registry."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Unknown mass label: {label!r}")


class DecisionTreeError(PuzzleError):
    """
    Raised when the decision tree reaches an outcome combination that
    cannot occur with exactly one odd mass.

    This is a programming defect, never a user error.
    """
    pass


# =============================================================================
# ENUMERATIONS
# =============================================================================

class MassClass(Enum):
    """Ground truth weight class. Set once at setup."""
    NORMAL = "normal"
    ODD = "odd"


class MassStatus(Enum):
    """Deduced state. Only ever moves from UNKNOWN to CONFIRMED_NORMAL."""
    UNKNOWN = "unknown"
    CONFIRMED_NORMAL = "confirmed_normal"


class Balance(Enum):
    """The three possible outcomes of a weighing."""
    BALANCED = "Balanced"
    LEFT_HEAVY = "LeftHeavy"
    RIGHT_HEAVY = "RightHeavy"


class Comparison(Enum):
    """Relationship between two weighing outcomes."""
    SAME = "Same"
    OPPOSITE = "Opposite"
    BALANCED = "Balanced"


class GameResult(Enum):
    WIN = "Win"
    LOSE = "Lose"


# =============================================================================
# MASS
# =============================================================================

@dataclass
class Mass:
    """
    A single labelled mass.

    `true_class` is ground truth and must not change after setup.
    `status` is what the solver has deduced so far.
    """
    label: str
    true_class: MassClass = MassClass.NORMAL
    status: MassStatus = MassStatus.UNKNOWN

    @property
    def is_odd(self) -> bool:
        return self.true_class is MassClass.ODD

    @property
    def is_confirmed(self) -> bool:
        return self.status is MassStatus.CONFIRMED_NORMAL


# =============================================================================
# MASS REGISTRY
# =============================================================================

class MassRegistry:
    """
    The fixed, ordered set of masses for one puzzle instance.

    INVARIANT: exactly one mass has true_class ODD.
    INVARIANT: registry order never changes; masses are addressed by label.
    """

    def __init__(self, masses: list[Mass]):
        odd = [m.label for m in masses if m.is_odd]
        if len(odd) != 1:
            raise PuzzleError(f"Expected exactly one odd mass, found {len(odd)}")
        self._masses = list(masses)
        self._by_label = {m.label: m for m in self._masses}

    def __len__(self) -> int:
        return len(self._masses)

    def __iter__(self):
        return iter(self._masses)

    def __contains__(self, label: object) -> bool:
        return label in self._by_label

    @property
    def labels(self) -> list[str]:
        return [m.label for m in self._masses]

    @property
    def odd_label(self) -> str:
        """Ground truth: the label of the odd mass."""
        for mass in self._masses:
            if mass.is_odd:
                return mass.label
        raise PuzzleError("Registry has no odd mass")

    def get(self, label: str) -> Mass:
        """Look up a mass by label (case-insensitive)."""
        mass = self._by_label.get(label.upper())
        if mass is None:
            raise UnknownMassError(label)
        return mass

    def resolve(self, labels: Iterable[str]) -> list[Mass]:
        """Map a group of labels back to the masses they name."""
        return [self.get(label) for label in labels]

    def confirm(self, labels: Iterable[str]) -> int:
        """
        Mark masses as confirmed normal.

        Confirming an already confirmed mass is a no-op.

        Returns:
            Number of masses newly confirmed by this call
        """
        newly = 0
        for mass in self.resolve(labels):
            if not mass.is_confirmed:
                mass.status = MassStatus.CONFIRMED_NORMAL
                newly += 1
        if newly:
            logger.debug("Confirmed %d new mass(es), %d total", newly, self.confirmed_count)
        return newly

    def confirmed_labels(self) -> list[str]:
        return [m.label for m in self._masses if m.is_confirmed]

    def unconfirmed_labels(self) -> list[str]:
        return [m.label for m in self._masses if not m.is_confirmed]

    @property
    def confirmed_count(self) -> int:
        return sum(1 for m in self._masses if m.is_confirmed)


def setup_registry(
    rng: Optional[random.Random] = None,
    odd_label: Optional[str] = None,
    labels: str = MASS_LABELS,
) -> MassRegistry:
    """
    Create a fresh registry with one odd mass.

    Args:
        rng: Entropy source for picking the odd mass (module random if None)
        odd_label: Force a specific odd mass instead of picking one
        labels: Mass labels, in registry order

    Raises:
        UnknownMassError: If odd_label is not one of labels
    """
    masses = [Mass(label=c) for c in labels]

    if odd_label is None:
        index = (rng or random).randrange(len(masses))
    else:
        upper = odd_label.upper()
        if upper not in labels:
            raise UnknownMassError(odd_label)
        index = labels.index(upper)

    masses[index].true_class = MassClass.ODD
    logger.debug("Registry created with %d masses", len(masses))
    return MassRegistry(masses)


def format_labels(labels: Iterable[str]) -> str:
    """Concatenate labels for display, e.g. ['A', 'B'] -> 'AB'."""
    return "".join(labels)


# =============================================================================
# WEIGHING RECORD
# =============================================================================

@dataclass(frozen=True)
class WeighingRecord:
    """One use of the balance scale."""
    left: tuple[str, ...]
    right: tuple[str, ...]
    outcome: Balance

    def describe(self) -> list[str]:
        """Status lines reported to the player after a weighing."""
        return [
            f"Left side: {format_labels(self.left)}",
            f"Right side: {format_labels(self.right)}",
            f"The balance is: {self.outcome.value}",
        ]


# =============================================================================
# SOLVE OUTCOME
# =============================================================================

@dataclass
class SolveOutcome:
    """
    Verdict of one solve session.

    Exposes every weighing performed so a session can be replayed.
    """
    guess: str
    answer: str
    weighings: list[WeighingRecord] = field(default_factory=list)
    lucky: bool = False

    @property
    def result(self) -> GameResult:
        return GameResult.WIN if self.guess == self.answer else GameResult.LOSE

    @property
    def won(self) -> bool:
        return self.result is GameResult.WIN
