"""Line-oriented console prompts that validate input and re-prompt until it is valid."""

from loguru import logger

from console_ui.actions import Action
from console_ui.communicator import Communicator
from console_ui.dsl import Alternatives, Dsl, Selection, UnboundSelectionError
from console_ui.outcome import Failure, InputParser, Outcome, Success
from console_ui.prompts import (
    basic_communicator,
    prompt_for_multi_choice,
    prompt_for_single_choice,
    prompt_for_text,
    prompt_for_yes_or_no,
)

# Library logging stays silent unless an application enables it
logger.disable("console_ui")

__all__ = [
    "Action",
    "Alternatives",
    "Communicator",
    "Dsl",
    "Failure",
    "InputParser",
    "Outcome",
    "Selection",
    "Success",
    "UnboundSelectionError",
    "basic_communicator",
    "prompt_for_multi_choice",
    "prompt_for_single_choice",
    "prompt_for_text",
    "prompt_for_yes_or_no",
]
