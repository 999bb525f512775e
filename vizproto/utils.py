"""Small string helpers shared across the package."""

from __future__ import annotations

import re

# Characters that the C locale classifies as whitespace.
_WHITESPACE = " \t\n\v\f\r"


def ltrim(text: str) -> str:
    """Return ``text`` without leading whitespace."""
    return text.lstrip(_WHITESPACE)


def rtrim(text: str) -> str:
    """Return ``text`` without trailing whitespace."""
    return text.rstrip(_WHITESPACE)


def trim(text: str) -> str:
    """Return ``text`` without leading and trailing whitespace."""
    return text.strip(_WHITESPACE)


def string_to_bool(text: str) -> bool:
    """Convert the literal strings ``"true"`` and ``"false"`` to booleans."""
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"Could not cast '{text}' to boolean")


def compile_regular_expression(pattern: str) -> re.Pattern[str]:
    """Compile ``pattern``, raising ``ValueError`` with the reason on failure."""
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ValueError(
            f"Could not create regular expression because of: '{exc}'"
        ) from exc