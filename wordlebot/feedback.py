"""
feedback.py

Wordle feedback: scoring a guess against an answer, plus the text form
used on the command line.

A score is a tuple with one outcome code per letter position:
    1 = ABSENT  (letter not present, or over-used relative to the answer)
    2 = PRESENT (letter present but in a different position)
    3 = EXACT   (letter matches the answer at that position)

Clue text is a comma-separated list of ``word:codes`` tokens, e.g.
``"crane:11213,doubt:11133"``.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Sequence, Tuple

from wordlebot.errors import ClueParseError

ABSENT = 1
PRESENT = 2
EXACT = 3

OUTCOMES = (ABSENT, PRESENT, EXACT)

# display-only placeholder for a position with no outcome yet
UNSET = "-"

Score = Tuple[int, ...]
Clue = Tuple[str, Score]

_CODE_CHARS = {
    "1": ABSENT, "2": PRESENT, "3": EXACT,
    "b": ABSENT, "y": PRESENT, "g": EXACT,
}


def score(guess: str, answer: str) -> Score:
    """
    Compute the feedback for `guess` against `answer`.

    Two passes over the positions:
      1) exact matches are marked first and their answer letters consumed,
      2) each remaining guess letter consumes one unused occurrence of the
         same letter in the answer (PRESENT) or is marked ABSENT.

    So a repeated guess letter never collects more PRESENT/EXACT marks than
    the answer has occurrences, and an exact match is never taken by an
    earlier position holding the same letter.

    Raises ValueError if the words differ in length.
    """
    if len(guess) != len(answer):
        raise ValueError(
            f"guess and answer lengths differ: {guess!r} vs {answer!r}"
        )

    result = [ABSENT] * len(answer)
    remaining = Counter()

    # Pass 1: exact matches
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            result[i] = EXACT
        else:
            remaining[a] += 1

    # Pass 2: present elsewhere, while unused occurrences last
    for i, g in enumerate(guess):
        if result[i] == EXACT:
            continue
        if remaining[g] > 0:
            result[i] = PRESENT
            remaining[g] -= 1

    return tuple(result)


def is_solved(pattern: Sequence[int]) -> bool:
    """True iff every position is EXACT."""
    return len(pattern) > 0 and all(p == EXACT for p in pattern)


def pattern_to_int(pattern: Sequence[int]) -> int:
    """
    Encode a score as a base-3 integer (ABSENT=0, PRESENT=1, EXACT=2 digits).
    A 5-letter score maps into [0, 242].
    """
    value = 0
    for p in pattern:
        if p not in OUTCOMES:
            raise ValueError(f"outcome codes must be in {OUTCOMES}, got {p!r}")
        value = value * 3 + (p - 1)
    return value


# -----------------------------
# Clue text
# -----------------------------

def parse_score(text: str, length: int | None = None) -> Score:
    """
    Parse feedback text such as ``"11213"`` (or ``"bbygb"``) into a score.
    Raises ClueParseError on an unknown character or a wrong length.
    """
    s = text.strip().lower()
    if not s:
        raise ClueParseError(text, "empty feedback")
    if length is not None and len(s) != length:
        raise ClueParseError(text, f"expected {length} outcome codes, got {len(s)}")
    try:
        return tuple(_CODE_CHARS[ch] for ch in s)
    except KeyError as e:
        raise ClueParseError(text, f"unknown outcome code {e.args[0]!r} (use 1/2/3)") from None


def parse_clue(token: str, length: int | None = None) -> Clue:
    """Parse one ``word:codes`` token, optionally requiring a word length."""
    word, sep, codes = token.strip().partition(":")
    word = word.strip().lower()
    if not sep:
        raise ClueParseError(token, "expected word:codes")
    if not word.isalpha():
        raise ClueParseError(token, "word must be alphabetic")
    if length is not None and len(word) != length:
        raise ClueParseError(token, f"word must have {length} letters")
    try:
        return word, parse_score(codes, len(word))
    except ClueParseError as e:
        raise ClueParseError(token, e.reason) from None


def parse_clues(text: str, length: int | None = None) -> List[Clue]:
    """Parse a comma-separated clue list. Blank input is the empty history."""
    if not text.strip():
        return []
    return [parse_clue(token, length) for token in text.split(",")]


def format_score(pattern: Iterable[int | None]) -> str:
    return "".join(UNSET if p is None else str(p) for p in pattern)


def format_clues(clues: Iterable[Tuple[str, Sequence[int]]]) -> str:
    return ",".join(f"{word}:{format_score(pattern)}" for word, pattern in clues)
