"""
Input Interpretation for the Mass Balance Puzzle.

Player text is read in three shapes:
1. A free-form string of mass labels (group selection)
2. An integer (group size, confirmed count, number of attempts)
3. A single label (the final guess)

Rules:
- Characters that do not name a mass are dropped, never an error
- Malformed integers are fatal for the run (InputError)
- Out-of-range integers are re-prompted until a valid value arrives
"""

from __future__ import annotations

from typing import Callable

from .domain import InputError, MassRegistry


# =============================================================================
# LABEL SELECTION
# =============================================================================

def parse_selection(registry: MassRegistry, text: str) -> list[str]:
    """
    Turn free-form text into a group of mass labels.

    Case-insensitive. Non-letters, unknown letters and repeats are dropped.
    Order of first appearance is kept.

    Example:
        "a, b; zz a" -> ['A', 'B']
    """
    selected: list[str] = []
    for c in text.upper():
        if c.isalpha() and c in registry and c not in selected:
            selected.append(c)
    return selected


def check_guess(text: str, answer: str) -> bool:
    """A guess wins only on an exact, case-insensitive match."""
    return text.strip().upper() == answer.upper()


# =============================================================================
# INTEGER INPUT
# =============================================================================

def parse_int(text: str) -> int:
    """
    Parse an integer answer.

    Raises:
        InputError: If the text is not an integer
    """
    try:
        return int(text.strip())
    except ValueError:
        raise InputError(f"Expected a whole number, got {text.strip()!r}") from None


def is_valid_group_size(size: int, total: int) -> bool:
    """Group sizes are even and between 1 and the number of masses."""
    return 1 <= size <= total and size % 2 == 0


def is_valid_confirmed_count(count: int, confirmed: int, group_size: int) -> bool:
    """A group cannot draw more confirmed masses than exist or than it holds."""
    return 0 <= count <= min(confirmed, group_size)


def read_bounded_int(
    prompt: str,
    is_valid: Callable[[int], bool],
    input_fn: Callable[[], str],
    output_fn: Callable[[str], None],
) -> int:
    """
    Ask for an integer until one is in range.

    There is no retry limit. Parse failures are not retried.

    Raises:
        InputError: If an answer is not an integer
    """
    output_fn(prompt)
    value = parse_int(input_fn())
    while not is_valid(value):
        output_fn(f"{value} is out of range. {prompt}")
        value = parse_int(input_fn())
    return value
