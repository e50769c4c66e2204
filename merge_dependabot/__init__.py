"""merge-dependabot: typed inputs for the dependency pull request auto-merge action."""

from merge_dependabot.config.inputs import ActionInputs, get_inputs
from merge_dependabot.utils.normalizers import parse_comma_or_semicolon_separated_value

__all__ = ["ActionInputs", "get_inputs", "parse_comma_or_semicolon_separated_value"]
