"""
bot.py

Picks the next guess that tells us the most about the hidden answer.

For a clue history the bot narrows the answer vocabulary to the plausible
answers, scores every candidate guess against each of them, and ranks the
candidates by the information in the resulting feedback distribution:
expected entropy by default, or the worst-case (adversarial) surprise.

Ties are broken in favour of guesses that could themselves be the answer,
then alphabetically, so the choice is reproducible run to run. Choices are
cached per clue history for the lifetime of the bot.
"""

from __future__ import annotations

import logging
import os
import threading
from collections import Counter
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import Callable, Dict, FrozenSet, Iterable, List, NamedTuple, Sequence, Tuple

from wordlebot.constraints import ConstraintState
from wordlebot.errors import NoPlausibleAnswerError
from wordlebot.feedback import Score, pattern_to_int, score
from wordlebot.information import MICROBITS, expected_entropy, min_surprise, to_microbits
from wordlebot.vocab import WordVocab

log = logging.getLogger(__name__)

# at or below this many plausible answers, only they are considered as guesses
SMALL_POOL = 3

# chunks handed to each worker per choice
CHUNKS_PER_WORKER = 4

# fewer candidates than this are evaluated in the calling process
PARALLEL_THRESHOLD = 64

History = Tuple[Tuple[str, Score], ...]


class Evaluation(NamedTuple):
    guess: str
    microbits: int
    plausible: bool

    @property
    def bits(self) -> float:
        return self.microbits / MICROBITS


def _rank_key(evaluation: Evaluation):
    return (-evaluation.microbits, not evaluation.plausible, evaluation.guess)


def best_evaluation(evaluations: Iterable[Evaluation]) -> Evaluation:
    """Most informative first, then plausible answers, then alphabetical."""
    return min(evaluations, key=_rank_key)


def history_key(clues: Iterable[Tuple[str, Sequence[int]]]) -> History:
    return tuple((word, tuple(pattern)) for word, pattern in clues)


def _evaluate_chunk(
    guesses: Sequence[str],
    plausible: Sequence[str],
    plausible_set: FrozenSet[str],
    metric: Callable[[Dict[int, int]], float],
) -> List[Evaluation]:
    out: List[Evaluation] = []
    for guess in guesses:
        distribution = Counter(pattern_to_int(score(guess, answer)) for answer in plausible)
        out.append(Evaluation(guess, to_microbits(metric(distribution)), guess in plausible_set))
    return out


def _chunks(seq: Sequence[str], n: int) -> List[Sequence[str]]:
    size = max(1, -(-len(seq) // n))
    return [seq[i:i + size] for i in range(0, len(seq), size)]


class Bot:
    """
    Parameters
    ----------
    guesses : iterable of str or WordVocab
        Words that may be played. The answers are added if missing.
    answers : iterable of str or WordVocab
        Words that may be the hidden answer.
    adversarial : bool, default=False
        Rank by worst-case surprise instead of expected entropy.
    max_workers : int, optional
        Worker processes used to evaluate candidates; defaults to the CPU
        count. 1 evaluates in the calling process.
    small_pool : int, default=3
        At or below this many plausible answers, guess only among them.
    """

    def __init__(
        self,
        guesses: Iterable[str],
        answers: Iterable[str],
        *,
        adversarial: bool = False,
        max_workers: int | None = None,
        small_pool: int = SMALL_POOL,
    ) -> None:
        self.answers = answers if isinstance(answers, WordVocab) else WordVocab(answers)
        guesses = guesses if isinstance(guesses, WordVocab) else WordVocab(guesses)
        if guesses.word_length != self.answers.word_length:
            raise ValueError(
                f"guess words have length {guesses.word_length}, "
                f"answer words have length {self.answers.word_length}"
            )
        self.guesses = guesses.union(self.answers)
        self.word_length = self.answers.word_length
        self.adversarial = bool(adversarial)
        self.metric = min_surprise if self.adversarial else expected_entropy
        self.max_workers = max_workers or os.cpu_count() or 1
        self.small_pool = int(small_pool)

        self._cache: Dict[History, str] = {}
        self._lock = threading.Lock()
        self.cache_hits = 0
        self.cache_misses = 0

    def plausible_answers(self, clues: Iterable[Tuple[str, Sequence[int]]]) -> List[str]:
        constraint = ConstraintState.from_clues(clues, self.word_length, self.answers.alphabet)
        return constraint.filter(self.answers)

    def choice(self, clues: Iterable[Tuple[str, Sequence[int]]] = ()) -> str:
        """
        Return the best next guess for this clue history.

        Raises NoPlausibleAnswerError if no answer fits the clues, and
        ValueError for clues of the wrong length or with unknown codes.
        """
        key = history_key(clues)
        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                self.cache_hits += 1
        if cached is not None:
            log.debug("cache hit after %d clue(s): %s", len(key), cached)
            return cached

        best = best_evaluation(self._evaluate(key))
        log.debug("chose %s (%.6f bits) after %d clue(s)", best.guess, best.bits, len(key))

        with self._lock:
            self.cache_misses += 1
            self._cache.setdefault(key, best.guess)
        return best.guess

    def rank(self, clues: Iterable[Tuple[str, Sequence[int]]] = ()) -> List[Evaluation]:
        """Every candidate guess for this history, best first. Not cached."""
        return sorted(self._evaluate(history_key(clues)), key=_rank_key)

    def _evaluate(self, clues: History) -> List[Evaluation]:
        plausible = self.plausible_answers(clues)
        if not plausible:
            raise NoPlausibleAnswerError(list(clues))

        candidates = plausible if len(plausible) <= self.small_pool else self.guesses.words()
        log.debug("%d plausible answer(s), %d candidate guess(es)", len(plausible), len(candidates))

        evaluate = partial(
            _evaluate_chunk,
            plausible=tuple(plausible),
            plausible_set=frozenset(plausible),
            metric=self.metric,
        )
        workers = min(self.max_workers, len(candidates))
        if workers <= 1 or len(candidates) < PARALLEL_THRESHOLD:
            return evaluate(candidates)

        chunks = _chunks(candidates, workers * CHUNKS_PER_WORKER)
        with ProcessPoolExecutor(max_workers=workers) as executor:
            results = executor.map(evaluate, chunks)
            return [e for chunk in results for e in chunk]
