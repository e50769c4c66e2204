"""Normalization helpers for list-valued action inputs."""

import re

_SEPARATOR = re.compile(r"[,;]")


def parse_comma_or_semicolon_separated_value(value: str) -> list[str]:
    """Split a comma or semicolon separated string into clean tokens.

    Surrounding whitespace is stripped from every token and empty tokens are
    dropped. Order is preserved and duplicates are kept.

    Args:
        value: Raw input such as ``"react, vue"`` or ``"react;vue"``

    Returns:
        List of tokens, empty when ``value`` holds no tokens

    Example:
        >>> parse_comma_or_semicolon_separated_value("  a; b ; c")
        ['a', 'b', 'c']
    """
    return [token for token in (part.strip() for part in _SEPARATOR.split(value)) if token]
