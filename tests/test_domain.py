"""
Tests for the Mass Registry and the Balance Scale.

These tests verify that:
1. A registry always holds exactly one odd mass
2. Confirmation is monotonic and has set semantics
3. The scale compares units of oddness, not mass counts
4. The outcome comparator follows its three rules
"""

import random

import pytest

from massbalance.domain import (
    MASS_LABELS,
    Balance,
    Comparison,
    Mass,
    MassClass,
    MassRegistry,
    MassStatus,
    PuzzleError,
    UnknownMassError,
    WeighingRecord,
    format_labels,
    setup_registry,
)
from massbalance.scale import compare_results, weigh, weigh_labels


# =============================================================================
# REGISTRY TESTS
# =============================================================================

class TestRegistrySetup:
    """Test registry creation."""

    def test_twelve_masses_in_label_order(self):
        """Registry holds A..L in order."""
        registry = setup_registry(odd_label="C")

        assert len(registry) == 12
        assert registry.labels == list(MASS_LABELS)

    @pytest.mark.parametrize("label", list(MASS_LABELS))
    def test_exactly_one_odd_mass(self, label):
        """Forcing a label makes exactly that mass odd."""
        registry = setup_registry(odd_label=label)

        odd = [m.label for m in registry if m.true_class is MassClass.ODD]
        assert odd == [label]
        assert registry.odd_label == label

    def test_odd_label_is_case_insensitive(self):
        registry = setup_registry(odd_label="f")

        assert registry.odd_label == "F"

    def test_unknown_odd_label_rejected(self):
        with pytest.raises(UnknownMassError):
            setup_registry(odd_label="Z")

    def test_seeded_rng_is_repeatable(self):
        """Same seed, same odd mass."""
        first = setup_registry(rng=random.Random(42))
        second = setup_registry(rng=random.Random(42))

        assert first.odd_label == second.odd_label

    def test_all_masses_start_unknown(self):
        registry = setup_registry(odd_label="A")

        assert all(m.status is MassStatus.UNKNOWN for m in registry)
        assert registry.confirmed_count == 0

    def test_registry_requires_single_odd_mass(self):
        """Two odd masses break the core invariant."""
        masses = [Mass(label=c) for c in "ABC"]
        masses[0].true_class = MassClass.ODD
        masses[1].true_class = MassClass.ODD

        with pytest.raises(PuzzleError, match="exactly one odd mass"):
            MassRegistry(masses)


class TestConfirmation:
    """Test the confirmed-normal status transitions."""

    def test_confirm_marks_masses(self):
        registry = setup_registry(odd_label="L")

        newly = registry.confirm(["A", "B"])

        assert newly == 2
        assert registry.confirmed_labels() == ["A", "B"]
        assert registry.get("A").status is MassStatus.CONFIRMED_NORMAL

    def test_confirm_twice_is_idempotent(self):
        """Confirming again neither grows the set nor counts as new."""
        registry = setup_registry(odd_label="L")
        registry.confirm("ABC")

        newly = registry.confirm("ABC")

        assert newly == 0
        assert registry.confirmed_count == 3

    def test_confirm_does_not_reorder_registry(self):
        registry = setup_registry(odd_label="L")
        registry.confirm("KJ")

        assert registry.labels == list(MASS_LABELS)
        assert registry.unconfirmed_labels() == list("ABCDEFGHIL")

    def test_confirm_unknown_label_raises(self):
        registry = setup_registry(odd_label="L")

        with pytest.raises(UnknownMassError):
            registry.confirm(["Q"])


# =============================================================================
# SCALE TESTS
# =============================================================================

class TestWeigh:
    """Test the balance rule."""

    @pytest.mark.parametrize("odd", list(MASS_LABELS))
    def test_outcome_follows_odd_mass(self, odd):
        """Odd on the left tips left, on the right tips right, elsewhere balances."""
        registry = setup_registry(odd_label=odd)
        left = registry.resolve("ABCDEF")
        right = registry.resolve("GHIJKL")

        expected = Balance.LEFT_HEAVY if odd in "ABCDEF" else Balance.RIGHT_HEAVY
        assert weigh(left, right) is expected

    @pytest.mark.parametrize("odd", list(MASS_LABELS))
    def test_groups_without_odd_mass_balance(self, odd):
        registry = setup_registry(odd_label=odd)
        others = [label for label in MASS_LABELS if label != odd]

        outcome = weigh(registry.resolve(others[:5]), registry.resolve(others[5:10]))

        assert outcome is Balance.BALANCED

    def test_empty_groups_balance(self):
        assert weigh([], []) is Balance.BALANCED

    def test_unequal_sizes_compare_units_only(self):
        """Three normal masses do not outweigh one odd mass."""
        registry = setup_registry(odd_label="A")

        outcome = weigh(registry.resolve("A"), registry.resolve("BCD"))

        assert outcome is Balance.LEFT_HEAVY

    def test_weigh_labels_records_the_weighing(self):
        registry = setup_registry(odd_label="F")

        record = weigh_labels(registry, "ABCD", "EFGH")

        assert record == WeighingRecord(
            left=("A", "B", "C", "D"),
            right=("E", "F", "G", "H"),
            outcome=Balance.RIGHT_HEAVY,
        )
        assert record.describe() == [
            "Left side: ABCD",
            "Right side: EFGH",
            "The balance is: RightHeavy",
        ]

    def test_weighing_does_not_change_status(self):
        registry = setup_registry(odd_label="F")

        weigh_labels(registry, "ABCD", "EFGH")

        assert registry.confirmed_count == 0


class TestCompareResults:
    """Test the outcome comparator."""

    @pytest.mark.parametrize("first", list(Balance))
    def test_balanced_second_is_balanced(self, first):
        assert compare_results(first, Balance.BALANCED) is Comparison.BALANCED

    def test_same_direction(self):
        assert compare_results(Balance.LEFT_HEAVY, Balance.LEFT_HEAVY) is Comparison.SAME
        assert compare_results(Balance.RIGHT_HEAVY, Balance.RIGHT_HEAVY) is Comparison.SAME

    def test_opposite_direction(self):
        assert compare_results(Balance.LEFT_HEAVY, Balance.RIGHT_HEAVY) is Comparison.OPPOSITE
        assert compare_results(Balance.RIGHT_HEAVY, Balance.LEFT_HEAVY) is Comparison.OPPOSITE

    def test_balanced_first_then_tipped_is_opposite(self):
        """Only a balanced *second* outcome short-circuits."""
        assert compare_results(Balance.BALANCED, Balance.LEFT_HEAVY) is Comparison.OPPOSITE


def test_format_labels():
    assert format_labels(["A", "B", "C"]) == "ABC"
    assert format_labels([]) == ""
