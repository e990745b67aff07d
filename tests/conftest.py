"""Shared fixtures."""

import io
from collections.abc import Callable

import pytest

from console_ui.dsl import Dsl
from console_ui.io import StreamAdapter

CommunicatorFactory = Callable[..., tuple[Dsl, io.StringIO]]


@pytest.fixture
def communicator_for_testing() -> CommunicatorFactory:
    """Return a factory for communicators with controlled input and captured output.

    Example:
        comm, out = communicator_for_testing("someInput")
        comm.prompt_for(actions.text("instruction"))
        assert out.getvalue() == "instruction\\n"
    """

    def factory(user_input: str, prompt: str = "") -> tuple[Dsl, io.StringIO]:
        out = io.StringIO()
        comm = Dsl(StreamAdapter(io.StringIO(user_input), out), prompt)
        return comm, out

    return factory
