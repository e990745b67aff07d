"""The prompt loop: display, read, parse, retry."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from loguru import logger

from console_ui.outcome import Failure
from console_ui.strings import DEFAULT_PROMPT

if TYPE_CHECKING:
    from console_ui.actions import Action
    from console_ui.io import IOAdapter

T = TypeVar("T")


class Communicator:
    """Communicates actions to the user through an IOAdapter.

    See prompts.basic_communicator for a communicator bound to the console.
    """

    def __init__(self, io: IOAdapter, prompt: str = DEFAULT_PROMPT) -> None:
        """Initialize the communicator.

        Args:
            io: Adapter used for reading lines and displaying output
            prompt: Marker displayed whenever the user is expected to type
        """
        self._io = io
        self._prompt = prompt

    @property
    def io(self) -> IOAdapter:
        return self._io

    @property
    def prompt(self) -> str:
        return self._prompt

    def prompt_for(self, action: Action[T]) -> T:
        """Display an action's instruction and block until the user types valid input.

        Whenever the action's parser returns Failure, its message is displayed
        and the user is prompted again. There is no retry limit.

        Args:
            action: The instruction and parser to use

        Returns:
            The parsed value of the first accepted line

        Raises:
            EOFError: If the input source is exhausted before valid input arrives
        """
        attempt = 1
        while True:
            self._io.output(action.instruction)
            line = self._io.input(self._prompt)

            outcome = action.parser(line)
            if not isinstance(outcome, Failure):
                logger.debug("prompt.accepted attempt={}", attempt)
                return outcome.value

            logger.debug("prompt.rejected attempt={} input={!r}", attempt, line)
            self._io.output(outcome.message)
            attempt += 1
