"""Typed results of parsing a line of user input."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Input was converted to a value."""

    value: T


@dataclass(frozen=True)
class Failure:
    """Input was rejected. The message is shown to the user before re-prompting."""

    message: str


Outcome = Union[Success[T], Failure]

# Raw line in, outcome out. Parsers receive the exact line read, whitespace included.
InputParser = Callable[[str], Outcome[T]]
