"""Text stream I/O adapter implementation."""

from __future__ import annotations

from typing import TextIO

from .base import IOAdapter


class StreamAdapter(IOAdapter):
    """I/O adapter reading and writing arbitrary text streams.

    Useful for feeding controlled input in tests:

        adapter = StreamAdapter(io.StringIO("first\\nsecond"), io.StringIO())
    """

    def __init__(self, in_stream: TextIO, out_stream: TextIO) -> None:
        """Initialize the stream adapter.

        Args:
            in_stream: Stream lines are read from
            out_stream: Stream output is written to
        """
        self.in_stream = in_stream
        self.out_stream = out_stream

    def output(self, message: str) -> None:
        """Write message and a newline to the output stream."""
        self.out_stream.write(message + "\n")
        self.out_stream.flush()

    def input(self, prompt: str) -> str:
        """Write prompt to the output stream and read one line.

        Raises:
            EOFError: If the input stream has no more lines
        """
        self.out_stream.write(prompt)
        self.out_stream.flush()

        line = self.in_stream.readline()
        if not line:
            raise EOFError("Input stream exhausted")

        if line.endswith("\r\n"):
            return line[:-2]
        if line.endswith("\n"):
            return line[:-1]
        return line
