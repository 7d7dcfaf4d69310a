"""
Tests for player input interpretation.

These tests verify:
1. Unknown characters in a selection are silently dropped
2. Malformed integers are fatal
3. Out-of-range integers are re-prompted without limit
"""

import pytest

from massbalance.domain import InputError, setup_registry
from massbalance.validation import (
    check_guess,
    is_valid_confirmed_count,
    is_valid_group_size,
    parse_int,
    parse_selection,
    read_bounded_int,
)


@pytest.fixture
def registry():
    return setup_registry(odd_label="A")


class TestParseSelection:
    """Test group selection from free-form text."""

    def test_plain_labels(self, registry):
        assert parse_selection(registry, "ABCD") == ["A", "B", "C", "D"]

    def test_case_insensitive(self, registry):
        assert parse_selection(registry, "abCd") == ["A", "B", "C", "D"]

    def test_non_letters_ignored(self, registry):
        assert parse_selection(registry, "a, b; 3-c\n") == ["A", "B", "C"]

    def test_unknown_letters_dropped(self, registry):
        """Letters past L do not name a mass."""
        assert parse_selection(registry, "AXYZM") == ["A"]

    def test_duplicates_dropped(self, registry):
        assert parse_selection(registry, "aAbBa") == ["A", "B"]

    def test_empty_selection(self, registry):
        assert parse_selection(registry, "") == []
        assert parse_selection(registry, "123 !?") == []


class TestIntegers:
    """Test integer prompts."""

    def test_parse_int(self):
        assert parse_int(" 6\n") == 6

    def test_parse_int_malformed_is_fatal(self):
        with pytest.raises(InputError, match="whole number"):
            parse_int("six")

    @pytest.mark.parametrize("size,valid", [
        (0, False), (1, False), (2, True), (3, False),
        (6, True), (12, True), (13, False), (14, False),
    ])
    def test_group_size_range(self, size, valid):
        assert is_valid_group_size(size, 12) is valid

    def test_confirmed_count_bounded_by_confirmed_and_group(self):
        assert is_valid_confirmed_count(0, 0, 4)
        assert not is_valid_confirmed_count(1, 0, 4)
        assert is_valid_confirmed_count(2, 6, 2)
        assert not is_valid_confirmed_count(3, 6, 2)
        assert not is_valid_confirmed_count(-1, 6, 2)

    def test_read_bounded_int_reprompts_until_valid(self):
        answers = iter(["3", "14", "6"])
        prompts = []

        value = read_bounded_int(
            "Size?",
            lambda n: is_valid_group_size(n, 12),
            lambda: next(answers),
            prompts.append,
        )

        assert value == 6
        assert len(prompts) == 3
        assert prompts[1] == "3 is out of range. Size?"

    def test_read_bounded_int_does_not_retry_parse_failure(self):
        answers = iter(["3", "oops", "6"])

        with pytest.raises(InputError):
            read_bounded_int(
                "Size?",
                lambda n: is_valid_group_size(n, 12),
                lambda: next(answers),
                lambda line: None,
            )


class TestCheckGuess:

    def test_exact_match_any_case(self):
        assert check_guess("f\n", "F")
        assert check_guess("  F ", "F")

    def test_wrong_or_extra_labels_lose(self):
        assert not check_guess("G", "F")
        assert not check_guess("FG", "F")
        assert not check_guess("", "F")
