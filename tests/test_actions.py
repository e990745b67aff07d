"""Tests for the action factory."""

import pytest

from console_ui import actions, parsers, strings
from console_ui.outcome import Failure, Success

SOME_TEXT = "Some text"


class TestAction:
    """Tests for the Action value object."""

    def test_action_is_immutable(self) -> None:
        action = actions.Action(SOME_TEXT, parsers.text)
        with pytest.raises(AttributeError):
            action.instruction = "changed"  # type: ignore[misc]


class TestText:
    def test_instruction_is_not_augmented(self) -> None:
        action = actions.text(SOME_TEXT)
        assert action.instruction == SOME_TEXT
        assert action.parser(" raw ") == Success(" raw ")


class TestYesOrNo:
    def test_instruction_has_hint(self) -> None:
        action = actions.yes_or_no("Continue?")
        assert action.instruction == "Continue?\t(y / n)"
        assert action.parser("Y") == Success(True)


class TestSingleChoice:
    """Tests for single choice actions."""

    def test_returns_zero_based_index(self) -> None:
        action = actions.single_choice(SOME_TEXT, ["A", "B"])
        assert action.parser("1") == Success(0)
        assert action.parser(" 2 ") == Success(1)

    def test_rejects_more_than_one_selection(self) -> None:
        action = actions.single_choice(SOME_TEXT, [SOME_TEXT, SOME_TEXT])
        assert action.parser("1, 2") == Failure(
            strings.AMOUNT_OF_SELECTIONS_OUT_OF_BOUNDS_ERROR
        )

    def test_rejects_empty_input(self) -> None:
        action = actions.single_choice(SOME_TEXT, ["A", "B"])
        assert action.parser("") == Failure(
            strings.AMOUNT_OF_SELECTIONS_OUT_OF_BOUNDS_ERROR
        )

    def test_rejects_out_of_range(self) -> None:
        action = actions.single_choice(SOME_TEXT, ["A", "B"])
        assert action.parser("3") == Failure(strings.SELECTIONS_OUT_OF_BOUNDS_ERROR)

    def test_instruction_has_no_trailing_parenthesis(self) -> None:
        action = actions.single_choice(SOME_TEXT, ["A", "B"])
        assert action.instruction == "Some text\n1) A\n2) B"

    def test_rejects_empty_options_list(self) -> None:
        with pytest.raises(ValueError, match="options"):
            actions.single_choice(SOME_TEXT, options=[])


class TestMultiChoice:
    """Tests for multi choice actions."""

    def test_returns_zero_based_indexes(self) -> None:
        action = actions.multi_choice(SOME_TEXT, ["A", "B", "C"], 1, 2)
        assert action.parser("3,1") == Success(frozenset({0, 2}))

    def test_instruction_describes_range(self) -> None:
        action = actions.multi_choice(SOME_TEXT, ["A", "B", "C"], 1, 2)
        assert "Choose between 1 and 2 options" in action.instruction

    def test_rejects_empty_options_list(self) -> None:
        with pytest.raises(ValueError, match="options must not be empty"):
            actions.multi_choice(SOME_TEXT, options=[], min_allowed=1, max_allowed=1)

    def test_rejects_negative_min_allowed(self) -> None:
        with pytest.raises(ValueError, match="min_allowed must not be negative"):
            actions.multi_choice(SOME_TEXT, [SOME_TEXT], min_allowed=-1, max_allowed=1)

    def test_rejects_min_allowed_above_max_allowed(self) -> None:
        with pytest.raises(ValueError, match="must not be smaller than"):
            actions.multi_choice(SOME_TEXT, [SOME_TEXT], 6, 5)

    def test_rejects_max_allowed_above_option_count(self) -> None:
        with pytest.raises(ValueError, match="must not exceed"):
            actions.multi_choice(SOME_TEXT, [SOME_TEXT, SOME_TEXT], 1, 3)
