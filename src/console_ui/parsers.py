"""Built-in input parsers.

Each parser turns the raw line a user typed into an Outcome. Parsers never
raise on bad input; they return Failure with a message for the user.
"""

from __future__ import annotations

from console_ui import strings
from console_ui.outcome import Failure, InputParser, Outcome, Success


def text(raw: str) -> Outcome[str]:
    """Accept any input verbatim, whitespace included."""
    return Success(raw)


def yes_or_no(raw: str) -> Outcome[bool]:
    """Parse a yes/no answer.

    Leading and trailing whitespace is ignored and matching is case
    insensitive. "y" and "yes" give True, "n" and "no" give False.
    Anything else is rejected.
    """
    normalized = raw.strip().lower()

    if normalized in strings.INPUTS_MEANING_YES:
        return Success(True)
    if normalized in strings.INPUTS_MEANING_NO:
        return Success(False)
    return Failure(strings.YES_OR_NO_ERROR)


def multi_choice(raw: str) -> Outcome[frozenset[int]]:
    """Parse comma separated 1-based positions into zero-based indexes.

    Whitespace around tokens and empty tokens are ignored, duplicates
    collapse. No range checking happens here, see
    multi_choice_with_validation. Empty input yields an empty set.

    Example:
        >>> multi_choice(" 1 , 3,3")
        Success(value=frozenset({0, 2}))
    """
    tokens = (token.strip() for token in raw.split(strings.MULTI_CHOICE_SEPARATOR))
    try:
        # Users see options numbered from 1
        selections = frozenset(int(token) - 1 for token in tokens if token)
    except ValueError:
        return Failure(strings.MULTIPLE_SELECTION_ERROR)
    return Success(selections)


def multi_choice_with_validation(
    option_count: int,
    min_allowed: int,
    max_allowed: int,
) -> InputParser[frozenset[int]]:
    """Build a multi choice parser that also validates the selections.

    The returned parser wraps multi_choice and checks, in this order, that:
    - every index is in [0, option_count)
    - the amount of selections is in [min_allowed, max_allowed]

    Args:
        option_count: Amount of options shown to the user.
        min_allowed: Minimal amount of selections (inclusive).
        max_allowed: Maximal amount of selections (inclusive).

    Returns:
        A parser producing a validated set of zero-based indexes.
    """

    def parse(raw: str) -> Outcome[frozenset[int]]:
        outcome = multi_choice(raw)
        if isinstance(outcome, Failure):
            return outcome

        selections = outcome.value
        if not all(0 <= i < option_count for i in selections):
            return Failure(strings.SELECTIONS_OUT_OF_BOUNDS_ERROR)
        if not min_allowed <= len(selections) <= max_allowed:
            return Failure(strings.AMOUNT_OF_SELECTIONS_OUT_OF_BOUNDS_ERROR)
        return Success(selections)

    return parse
