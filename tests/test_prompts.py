"""Tests for the convenience prompt functions."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from console_ui import prompts
from console_ui.dsl import Dsl
from console_ui.io import ConsoleAdapter


class TestBasicCommunicator:
    """Tests for the console communicator factory."""

    def test_uses_console_and_configured_prompt(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"CUI_PROMPT": "? "}, clear=True):
            comm = prompts.basic_communicator(tmp_path / "missing.env")
        assert isinstance(comm, Dsl)
        assert isinstance(comm.io, ConsoleAdapter)
        assert comm.prompt == "? "

    def test_returns_a_new_instance_each_time(self, tmp_path: Path) -> None:
        env_path = tmp_path / "missing.env"
        assert prompts.basic_communicator(env_path) is not prompts.basic_communicator(
            env_path
        )


class TestPromptFunctions:
    """Tests for prompt_for_* wrappers."""

    def test_text(self, communicator_for_testing) -> None:
        comm, out = communicator_for_testing(" hi ")
        assert prompts.prompt_for_text("Say something", comm) == " hi "
        assert out.getvalue() == "Say something\n"

    def test_yes_or_no(self, communicator_for_testing) -> None:
        comm, out = communicator_for_testing("what\nYES")
        assert prompts.prompt_for_yes_or_no("Proceed?", comm) is True
        assert "Type y or n" in out.getvalue()

    def test_single_choice(self, communicator_for_testing) -> None:
        comm, _ = communicator_for_testing("3\n2")
        assert prompts.prompt_for_single_choice("Pick", ["A", "B"], comm) == 1

    def test_multi_choice(self, communicator_for_testing) -> None:
        comm, _ = communicator_for_testing("1,2,3\n1,3")
        result = prompts.prompt_for_multi_choice("Pick", ["A", "B", "C"], 1, 2, comm)
        assert result == frozenset({0, 2})

    def test_multi_choice_validates_before_output(
        self, communicator_for_testing
    ) -> None:
        comm, out = communicator_for_testing("1")
        with pytest.raises(ValueError):
            prompts.prompt_for_multi_choice("Pick", ["A"], 0, 2, comm)
        assert out.getvalue() == ""

    def test_defaults_to_console(self) -> None:
        """Without a communicator, the console is used."""
        with patch(
            "console_ui.prompts.basic_communicator",
            return_value=Dsl(ConsoleAdapter(), ""),
        ), patch("builtins.input", return_value="n"):
            assert prompts.prompt_for_yes_or_no("Proceed?") is False
