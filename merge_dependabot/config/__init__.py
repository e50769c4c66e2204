"""Action input configuration.

Key Components:
    - ActionInputs: Frozen, typed configuration for one action run
    - get_inputs: Build ActionInputs from raw string inputs
    - read_action_inputs: Collect raw inputs from ``INPUT_*`` variables

Example:
    >>> from merge_dependabot.config import get_inputs, read_action_inputs
    >>> inputs = get_inputs(read_action_inputs())
"""

from merge_dependabot.config.inputs import (
    INPUT_NAMES,
    ActionInputs,
    RawInputs,
    get_inputs,
    parse_input_assignment,
    read_action_inputs,
)

__all__ = [
    "INPUT_NAMES",
    "ActionInputs",
    "RawInputs",
    "get_inputs",
    "parse_input_assignment",
    "read_action_inputs",
]
