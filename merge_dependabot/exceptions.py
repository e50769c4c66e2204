"""Custom exception hierarchy for merge-dependabot.

Exception Hierarchy:
    MergeDependabotError (base)
    ├── ConfigurationError
    └── InvalidArgumentError

Only caller-contract violations are raised. Malformed action inputs are
recovered from by falling back to their defaults, see
``merge_dependabot.config.inputs``.

Example Usage:
    >>> from merge_dependabot.exceptions import InvalidArgumentError
    >>> try:
    ...     get_inputs(None)
    ... except InvalidArgumentError as e:
    ...     print(e.message)
"""


class MergeDependabotError(Exception):
    """Base exception for all merge-dependabot errors.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str) -> None:
        """Initialize exception.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(message)


class ConfigurationError(MergeDependabotError):
    """Configuration-related errors.

    Raised when inputs handed to the CLI cannot be interpreted at all,
    for example a ``--input`` option that is not a ``name=value`` pair.
    """

    pass


class InvalidArgumentError(MergeDependabotError, TypeError):
    """A function was called with an argument that breaks its contract.

    Raised when ``get_inputs`` receives no input mapping. An empty mapping
    is valid; a missing one is a programming error in the caller.

    Attributes:
        argument: Name of the offending argument
    """

    def __init__(self, message: str, argument: str | None = None) -> None:
        """Initialize exception.

        Args:
            message: Error message
            argument: Name of the offending argument
        """
        self.argument = argument

        full_message = message
        if argument:
            full_message = f"{message} (argument: {argument})"

        super().__init__(full_message)
        # Preserve original message
        self.message = message
