"""Console I/O adapter implementation."""

from .base import IOAdapter


class ConsoleAdapter(IOAdapter):
    """Adapter bound to standard input and standard output.

    Exhausted standard input surfaces as EOFError from input().
    """

    def output(self, message: str) -> None:
        """Print message to standard output."""
        print(message)

    def input(self, prompt: str) -> str:
        """Show prompt and read one line from standard input."""
        return input(prompt)
