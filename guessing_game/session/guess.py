"""
Guess parsing and comparison.

Parsing is deliberately strict: only a non-negative integer written in
ASCII digits (optionally prefixed with '+') counts as a guess. Anything
else, including an empty line or a number too long to convert, is the
player's way of quitting.
"""

from __future__ import annotations
import re

from .state import Outcome


_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def parse_guess(line: str | None) -> int | None:
    """
    Parse one input line as an unsigned integer.

    Args:
        line: Raw line, or None for end-of-input

    Returns:
        The guess, or None if the line is not a number
    """
    if line is None:
        return None
    text = line.strip()
    if not _UNSIGNED_RE.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # Digit strings past the interpreter's int conversion limit
        return None


def compare_guess(guess: int, secret: int) -> Outcome:
    """Compare a guess against the secret."""
    if guess < secret:
        return Outcome.TOO_SMALL
    if guess > secret:
        return Outcome.TOO_LARGE
    return Outcome.CORRECT
