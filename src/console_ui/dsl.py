"""A small fluent layer for menus built from labelled alternatives.

Example:

    comm = Dsl(ConsoleAdapter())
    alts = Alternatives[None]()
    alts.will("Option A", lambda: print("You chose option A"))
    alts.will("Option B", lambda: print(f"You chose {alts.label}"))
    comm.ask("A or B?").suggest(alts)

Alternatives can also produce values, and can be nested:

    sure = Alternatives[int]().returns("Yes", 3).returns("No", 1)
    how_many = comm.ask("How many?").suggest(
        Alternatives[int]()
        .returns("Only one", 1)
        .will("Three", lambda: comm.ask("Really three?").suggest(sure))
    )

'will' registers a callable that runs only if its label is chosen.
'returns' registers a plain value.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, NamedTuple, TypeVar

from loguru import logger

from console_ui import actions
from console_ui.communicator import Communicator

T = TypeVar("T")


class UnboundSelectionError(RuntimeError):
    """Raised when the selected alternative is read before a selection was made."""


class Selection(NamedTuple):
    """The alternative the user chose."""

    index: int
    label: str


class Alternatives(Generic[T]):
    """Ordered registry of labels and the results they lead to.

    While the chosen alternative runs, index, label and selection describe
    the choice. Reading them at any other time raises UnboundSelectionError.
    """

    def __init__(self) -> None:
        self._alternatives: list[tuple[str, Callable[[], T]]] = []
        self._bindings: list[Selection] = []

    def will(self, label: str, func: Callable[[], T]) -> Alternatives[T]:
        """Register func to run when label is chosen."""
        self._alternatives.append((label, func))
        return self

    def returns(self, label: str, value: T) -> Alternatives[T]:
        """Register value as the result for label."""
        return self.will(label, lambda: value)

    @property
    def labels(self) -> list[str]:
        return [label for label, _ in self._alternatives]

    def __len__(self) -> int:
        return len(self._alternatives)

    @property
    def selection(self) -> Selection:
        if not self._bindings:
            raise UnboundSelectionError(
                "The selection is only available while the chosen alternative runs"
            )
        return self._bindings[-1]

    @property
    def index(self) -> int:
        """Zero-based index of the chosen alternative."""
        return self.selection.index

    @property
    def label(self) -> str:
        """Label of the chosen alternative."""
        return self.selection.label

    def run(self, index: int) -> T:
        """Run the alternative at index with the selection bound to it."""
        label, func = self._alternatives[index]
        self._bindings.append(Selection(index, label))
        try:
            return func()
        finally:
            self._bindings.pop()


class Question(Generic[T]):
    """A question waiting for its alternatives."""

    def __init__(self, communicator: Communicator, question: str) -> None:
        self._communicator = communicator
        self._question = question

    def suggest(self, alternatives: Alternatives[T]) -> T:
        """Let the user pick one alternative and return its result.

        Raises:
            ValueError: If no alternatives were registered.
        """
        action = actions.single_choice(self._question, alternatives.labels)
        index = self._communicator.prompt_for(action)
        logger.debug("dsl.selected index={} question={!r}", index, self._question)
        return alternatives.run(index)


class Dsl(Communicator):
    """Communicator with a fluent ask/suggest interface."""

    def ask(self, question: str) -> Question:
        return Question(self, question)
