"""
constraints.py

Keeps track of Wordle-style constraints and filters candidate words.
"""

from __future__ import annotations

import string
from collections import Counter
from typing import Dict, Iterable, List, Sequence, Set, Tuple

from wordlebot.feedback import EXACT, OUTCOMES, PRESENT


class ConstraintState:
    def __init__(self, word_length: int = 5, alphabet: str = string.ascii_lowercase):
        # slot-level allowance: the letters still possible in each position
        self.word_length = word_length
        self.alphabet = alphabet
        self.pos_allowed: List[Set[str]] = [set(alphabet) for _ in range(word_length)]
        # only letters seen in a clue get bounds
        self.min_counts: Dict[str, int] = {}
        self.max_counts: Dict[str, int] = {}

    @classmethod
    def from_clues(
        cls,
        clues: Iterable[Tuple[str, Sequence[int]]],
        word_length: int = 5,
        alphabet: str = string.ascii_lowercase,
    ) -> "ConstraintState":
        """Fold a clue history, oldest first, into a fresh state."""
        state = cls(word_length, alphabet)
        for guess, pattern in clues:
            state.apply_feedback(guess, pattern)
        return state

    def apply_feedback(self, guess: str, pattern: Sequence[int]) -> None:
        """
        Update constraints based on one clue.
        - Exact   = fix the letter at that slot
        - Present = letter must be included but not in that slot
        - Absent  = letter is not in that slot; it is missing entirely unless
                    the same clue also marks it present/exact, in which case
                    its count is capped
        """
        if len(guess) != self.word_length:
            raise ValueError(f"guess must have length {self.word_length}: {guess!r}")
        if len(pattern) != self.word_length:
            raise ValueError(f"pattern must have length {self.word_length}")
        if any(p not in OUTCOMES for p in pattern):
            raise ValueError(f"pattern elements must be in {OUTCOMES}: {tuple(pattern)}")

        # Pass 1: slot-level constraints, and per-letter counts within this clue
        positive: Counter = Counter()   # present + exact occurrences per letter
        negative: Counter = Counter()   # absent occurrences per letter

        for i, (ch, p) in enumerate(zip(guess, pattern)):
            if p == EXACT:
                self.pos_allowed[i] &= {ch}
                positive[ch] += 1
            elif p == PRESENT:
                self.pos_allowed[i].discard(ch)
                positive[ch] += 1
            else:
                self.pos_allowed[i].discard(ch)
                negative[ch] += 1

        # Absent and never required in this clue: gone everywhere
        for ch in negative:
            if positive[ch] == 0:
                for allowed in self.pos_allowed:
                    allowed.discard(ch)

        # Pass 2: global bounds
        for ch, k in positive.items():
            self.min_counts[ch] = max(self.min_counts.get(ch, 0), k)
            # absent next to present/exact in one clue: exactly k copies
            if negative[ch] > 0:
                self.max_counts[ch] = min(self.max_counts.get(ch, self.word_length), k)

    def permits(self, word: str) -> bool:
        if len(word) != self.word_length:
            return False
        if any(ch not in allowed for ch, allowed in zip(word, self.pos_allowed)):
            return False
        counts = Counter(word)
        for ch, k in self.min_counts.items():
            if counts[ch] < k:
                return False
        for ch, k in self.max_counts.items():
            if counts[ch] > k:
                return False
        return True

    def filter(self, words: Iterable[str]) -> List[str]:
        return [w for w in words if self.permits(w)]
