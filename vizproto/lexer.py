"""Helpers for recognising and splitting directive lines."""

from __future__ import annotations

import re

from .tokens import TokenKind
from .utils import trim

_CONTINUOUS = re.compile(r".*\\\s*")
_DIRECTIVE = re.compile(r"\s*#pragma\s+vp\s+.*")
_SEPARATORS = frozenset("() ,\t\n\r")


def join_lines(head: str, tail: str) -> str:
    """Join a line ending in a backslash continuation with the line after it."""
    joined = trim(head)[:-1]
    return f"{trim(joined)} {trim(tail)}"


def is_continuous(line: str) -> bool:
    """Return whether ``line`` ends in a backslash, optionally followed by whitespace."""
    return _CONTINUOUS.fullmatch(line) is not None


def is_directive(line: str) -> bool:
    """Return whether ``line`` is a ``#pragma vp`` directive."""
    return _DIRECTIVE.fullmatch(line) is not None


def is_separator(char: str) -> bool:
    """Return whether ``char`` separates lexemes in a directive."""
    return char in _SEPARATORS


def map_token_kind(text: str) -> TokenKind:
    """Return the keyword kind of ``text``, or ``IDENTIFIER`` for anything else."""
    kind = TokenKind.from_lexeme(text)
    return TokenKind.IDENTIFIER if kind is None else kind