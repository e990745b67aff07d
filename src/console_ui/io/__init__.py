"""I/O abstraction layer for console and stream interfaces."""

from .base import IOAdapter
from .console import ConsoleAdapter
from .stream import StreamAdapter

__all__ = [
    "IOAdapter",
    "ConsoleAdapter",
    "StreamAdapter",
]
