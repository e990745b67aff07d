"""Abstract base class for I/O adapters."""

from abc import ABC, abstractmethod


class IOAdapter(ABC):
    """Abstract base class for line-oriented input/output.

    This allows a communicator to work with different backends
    (the console, in-memory streams, etc.).
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Display a message to the user, followed by a newline.

        Args:
            message: The message to display
        """
        ...

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Display a prompt without a newline and read one line.

        Args:
            prompt: The prompt to display

        Returns:
            The line the user typed, without its line terminator

        Raises:
            EOFError: If the input source is exhausted
        """
        ...
