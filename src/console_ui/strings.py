"""Text shown to users.

These strings are for display only. They are not part of the programmatic
API and may change.
"""

from __future__ import annotations

from collections.abc import Sequence

DEFAULT_PROMPT = ">>> "
MULTI_CHOICE_SEPARATOR = ","

INPUTS_MEANING_YES = frozenset({"yes", "y"})
INPUTS_MEANING_NO = frozenset({"no", "n"})

YES_OR_NO_HINT = "\t(y / n)"

_sep = MULTI_CHOICE_SEPARATOR
MULTI_CHOICE_INPUT_EXAMPLE = f"Example: 1{_sep}2{_sep}3..."

_ERROR_PREFIX = "\n!!! Error !!!\t"

YES_OR_NO_ERROR = (
    _ERROR_PREFIX + "Type y or n for yes or no respectively and press Enter\n"
)
MULTIPLE_SELECTION_ERROR = (
    f"{_ERROR_PREFIX}Type whole numbers separated by {_sep}. "
    f"{MULTI_CHOICE_INPUT_EXAMPLE}\n"
)
SELECTIONS_OUT_OF_BOUNDS_ERROR = (
    _ERROR_PREFIX
    + "Selections must be between 1 and the amount of options provided\n"
)
AMOUNT_OF_SELECTIONS_OUT_OF_BOUNDS_ERROR = (
    _ERROR_PREFIX + "Choose the specified amount of options\n"
)


def augment_yes_or_no_instruction(instruction: str) -> str:
    """Append the y/n hint to a question."""
    return instruction + YES_OR_NO_HINT


def create_options_text(options: Sequence[str]) -> str:
    """Render options one per line, numbered from 1.

    Example:
        >>> create_options_text(["red", "blue"])
        '1) red\\n2) blue'
    """
    return "\n".join(f"{i}) {option}" for i, option in enumerate(options, start=1))


def _selection_count_hint(min_allowed: int, max_allowed: int) -> str:
    if min_allowed == max_allowed:
        return (
            f"Choose {min_allowed} options. Separate with {_sep}. "
            f"{MULTI_CHOICE_INPUT_EXAMPLE}"
        )
    return (
        f"Choose between {min_allowed} and {max_allowed} options. "
        f"{MULTI_CHOICE_INPUT_EXAMPLE}"
    )


def augment_multi_choice_instruction(
    instruction: str,
    options: Sequence[str],
    min_allowed: int,
    max_allowed: int,
) -> str:
    """Render an instruction, its numbered options and the selection-count hint.

    The parenthesized hint is omitted entirely when exactly one selection
    is required.

    Args:
        instruction: Text shown above the options.
        options: Option labels, in display order.
        min_allowed: Minimal amount of selections.
        max_allowed: Maximal amount of selections.

    Returns:
        The text to display.
    """
    text = instruction + "\n" + create_options_text(options)
    if (min_allowed, max_allowed) == (1, 1):
        return text
    return text + "\n(" + _selection_count_hint(min_allowed, max_allowed) + ")"
