"""
errors.py

Exceptions raised by the solver. Malformed core input (wrong lengths,
unknown outcome codes) uses plain ValueError/TypeError.
"""

from __future__ import annotations


class ClueParseError(ValueError):
    """Clue text that cannot be turned into (word, score) pairs."""

    def __init__(self, token: str, reason: str) -> None:
        super().__init__(f"bad clue token {token!r}: {reason}")
        self.token = token
        self.reason = reason


class EmptyDistributionError(ValueError):
    """An information metric was asked to summarize zero outcomes."""


class NoPlausibleAnswerError(RuntimeError):
    """The clue history rules out every answer in the vocabulary."""

    def __init__(self, clues) -> None:
        super().__init__(f"no answer is consistent with {len(clues)} clue(s)")
        self.clues = clues


class SelfPlayError(RuntimeError):
    """A simulated game ran past its round bound."""
