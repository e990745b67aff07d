"""Actions and factory functions for the common kinds of prompt.

Factory-made actions describe the expected form of input in their
instruction text, and their parsers reject illegal input so the
communicator re-prompts.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from console_ui import parsers, strings
from console_ui.outcome import Failure, InputParser, Outcome, Success

T = TypeVar("T")


@dataclass(frozen=True)
class Action(Generic[T]):
    """An instruction for the user paired with a parser for their reply.

    Holds no state, so the same action can be prompted for repeatedly.
    """

    instruction: str
    parser: InputParser[T]


def text(instruction: str) -> Action[str]:
    """Prompt for free text."""
    return Action(instruction, parsers.text)


def yes_or_no(question: str) -> Action[bool]:
    """Prompt a yes or no question, answered as a boolean."""
    return Action(strings.augment_yes_or_no_instruction(question), parsers.yes_or_no)


def single_choice(instruction: str, options: Sequence[str]) -> Action[int]:
    """Prompt the user to choose exactly one of several options.

    Options are displayed numbered from 1, the parsed result is the
    zero-based index.

    Raises:
        ValueError: If options is empty.
    """
    if not options:
        raise ValueError("options must not be empty")

    validated = parsers.multi_choice_with_validation(len(options), 1, 1)

    def parse(raw: str) -> Outcome[int]:
        outcome = validated(raw)
        if isinstance(outcome, Failure):
            return outcome
        (index,) = outcome.value
        return Success(index)

    return Action(
        strings.augment_multi_choice_instruction(instruction, options, 1, 1),
        parse,
    )


def multi_choice(
    instruction: str,
    options: Sequence[str],
    min_allowed: int,
    max_allowed: int,
) -> Action[frozenset[int]]:
    """Prompt the user to choose between min_allowed and max_allowed options.

    Options are displayed numbered from 1, the parsed result is a set of
    zero-based indexes.

    Args:
        instruction: Text shown above the options.
        options: Option labels, in display order.
        min_allowed: Minimal amount of selections.
        max_allowed: Maximal amount of selections.

    Returns:
        The action.

    Raises:
        ValueError: If options is empty, min_allowed is negative,
            max_allowed is smaller than min_allowed or max_allowed is
            larger than the amount of options.
    """
    check_multi_choice_arguments(options, min_allowed, max_allowed)

    return Action(
        strings.augment_multi_choice_instruction(
            instruction, options, min_allowed, max_allowed
        ),
        parsers.multi_choice_with_validation(len(options), min_allowed, max_allowed),
    )


def check_multi_choice_arguments(
    options: Sequence[str], min_allowed: int, max_allowed: int
) -> None:
    """Raise ValueError naming the first violated multi choice precondition."""
    if not options:
        raise ValueError("options must not be empty")
    if min_allowed < 0:
        raise ValueError(f"min_allowed must not be negative, got {min_allowed}")
    if max_allowed < min_allowed:
        raise ValueError(
            f"max_allowed ({max_allowed}) must not be smaller than "
            f"min_allowed ({min_allowed})"
        )
    if max_allowed > len(options):
        raise ValueError(
            f"max_allowed ({max_allowed}) must not exceed the amount of "
            f"options ({len(options)})"
        )
