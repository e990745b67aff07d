"""Convenience prompts for simple console interfaces.

Every function displays the expected form of input and re-prompts on
illegal input. Pass a communicator to control where input comes from;
otherwise one bound to the console is created with basic_communicator().
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from console_ui import actions
from console_ui.communicator import Communicator
from console_ui.config import get_settings
from console_ui.dsl import Dsl
from console_ui.io import ConsoleAdapter


def basic_communicator(env_path: Path | None = None) -> Dsl:
    """Create a communicator using standard input and output.

    The prompt marker comes from settings (CUI_PROMPT, default ">>> ").

    Args:
        env_path: Optional specific .env file to load settings from.

    Returns:
        A Dsl-capable communicator bound to the console.
    """
    settings = get_settings(env_path)
    return Dsl(ConsoleAdapter(), settings.prompt)


def prompt_for_text(
    instruction: str, communicator: Communicator | None = None
) -> str:
    """Display an instruction and return the user's response."""
    communicator = communicator or basic_communicator()
    return communicator.prompt_for(actions.text(instruction))


def prompt_for_yes_or_no(
    question: str, communicator: Communicator | None = None
) -> bool:
    """Display a yes or no question and return the answer.

    Returns:
        True if the user answered yes, False otherwise.
    """
    communicator = communicator or basic_communicator()
    return communicator.prompt_for(actions.yes_or_no(question))


def prompt_for_single_choice(
    instruction: str,
    options: Sequence[str],
    communicator: Communicator | None = None,
) -> int:
    """Display options and return the zero-based index of the chosen one.

    Raises:
        ValueError: If options is empty.
    """
    action = actions.single_choice(instruction, options)
    communicator = communicator or basic_communicator()
    return communicator.prompt_for(action)


def prompt_for_multi_choice(
    instruction: str,
    options: Sequence[str],
    min_allowed: int,
    max_allowed: int,
    communicator: Communicator | None = None,
) -> frozenset[int]:
    """Display options and return the zero-based indexes of the chosen ones.

    Args:
        instruction: Text shown above the options.
        options: Option labels, in display order.
        min_allowed: Minimal amount of selections.
        max_allowed: Maximal amount of selections.
        communicator: Optional communicator. Uses the console if None.

    Returns:
        Set of selected indexes.

    Raises:
        ValueError: If the options or bounds are invalid.
    """
    action = actions.multi_choice(instruction, options, min_allowed, max_allowed)
    communicator = communicator or basic_communicator()
    return communicator.prompt_for(action)
