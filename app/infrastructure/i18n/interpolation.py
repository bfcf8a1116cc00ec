"""Positional placeholder substitution for translation texts."""

import re
from typing import Any

PLACEHOLDER_PATTERN = re.compile(r"\$(\d+)")


def patch(template: str, *values: Any) -> str:
    """Substitute ``$n`` placeholders with positional values.

    Placeholders are 1-based. The same placeholder may appear several
    times and every occurrence receives the same value. A placeholder
    without a supplied value (out of range, ``$0`` or ``None``) stays
    in the text unchanged.

    Args:
        template: Text with ``$1``, ``$2``, ... placeholders.
        *values: Substitution values, converted with ``str()``.

    Returns:
        The patched text.

    Example:
        >>> patch("Welcome back, $1. There are $2 messages for you, $1.", "Eric", 2)
        'Welcome back, Eric. There are 2 messages for you, Eric.'
        >>> patch("Hi $1, $3", "A")
        'Hi A, $3'
    """

    def replace(match: re.Match) -> str:
        index = int(match.group(1))
        if 1 <= index <= len(values) and values[index - 1] is not None:
            return str(values[index - 1])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replace, template)
