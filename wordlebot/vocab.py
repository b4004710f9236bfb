from __future__ import annotations

import string
from typing import Iterable, List, Sequence

import pandas as pd


class WordVocab:
    """
    An immutable, deduplicated list of equal-length words.

    Words keep their first-seen order; later duplicates are dropped. Every
    word must be non-empty, share one length, and use only letters from
    `alphabet`.
    """

    def __init__(self, words: Iterable[str], alphabet: str = string.ascii_lowercase) -> None:
        if isinstance(words, str):
            raise TypeError("`words` must be an iterable of strings, not a string")

        clean: List[str] = []
        seen = set()
        for w in words:
            if not isinstance(w, str):
                raise TypeError(f"all items in `words` must be str, got {type(w).__name__}")
            if w in seen:
                continue
            seen.add(w)
            clean.append(w)

        if not clean:
            raise ValueError("no words provided")

        word_length = len(clean[0])
        allowed = set(alphabet)
        for w in clean:
            if len(w) != word_length or not w:
                raise ValueError(f"all words must have length {word_length}: {w!r}")
            if not set(w) <= allowed:
                raise ValueError(f"word {w!r} uses letters outside the alphabet")

        self._words: tuple = tuple(clean)
        self._members = frozenset(self._words)
        self.word_length = word_length
        self.alphabet = alphabet

    # ---------- Construction helpers ----------

    @classmethod
    def from_csv(
        cls,
        path: str,
        column: str = "word",
        *,
        word_len: int = 5,
        lowercase: bool = True,
        alpha_only: bool = True,
        require: str | None = None,
    ) -> "WordVocab":
        """
        Load words from a CSV and build a WordVocab.

        Parameters
        ----------
        path : str
            Path to CSV file.
        column : str
            Column name containing words.
        word_len : int, default=5
            Required word length; other rows are skipped.
        lowercase : bool, default=True
            If True, lowercase words before validation.
        alpha_only : bool, default=True
            If True, keep only alphabetic words (str.isalpha()).
        require : str, optional
            If given, keep only rows where this column is not null.

        Raises
        ------
        FileNotFoundError, KeyError, ValueError
        """
        df = pd.read_csv(path)
        if column not in df.columns:
            raise KeyError(f"column '{column}' not found in {path}")
        if require is not None:
            if require not in df.columns:
                raise KeyError(f"column '{require}' not found in {path}")
            df = df[df[require].notna()]
        return cls(_clean_words(df[column].tolist(), word_len, lowercase, alpha_only))

    @classmethod
    def from_txt(cls, path: str, *, word_len: int | None = None) -> "WordVocab":
        """Load one word per line; blank lines are ignored."""
        with open(path, "r", encoding="utf-8") as f:
            words = [line.strip().lower() for line in f if line.strip()]
        if word_len is not None:
            words = [w for w in words if len(w) == word_len]
        return cls(words)

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._members

    def words(self) -> List[str]:
        """Return a copy of the word list."""
        return list(self._words)

    def union(self, other: Iterable[str]) -> "WordVocab":
        """This vocabulary followed by any words of `other` it lacks."""
        return WordVocab(list(self._words) + list(other), self.alphabet)


def _clean_words(raw: Sequence[object], word_len: int, lowercase: bool, alpha_only: bool) -> List[str]:
    clean: List[str] = []
    for val in raw:
        if not isinstance(val, str):
            val = str(val) if val is not None else ""
        w = val.strip().lower() if lowercase else val.strip()
        if len(w) != word_len:
            continue
        if alpha_only and not w.isalpha():
            continue
        clean.append(w)
    if not clean:
        raise ValueError("no valid words after filtering")
    return clean
