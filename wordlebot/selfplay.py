"""
selfplay.py

Play the bot against itself: for a known answer, keep asking for a guess,
score it, and feed the clue back until the answer is found. Over a whole
answer list this gives the guesses-needed histogram used to judge a
strategy.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, Iterable, List

import pandas as pd

from wordlebot.bot import Bot
from wordlebot.errors import SelfPlayError
from wordlebot.feedback import Clue, format_clues, score

log = logging.getLogger(__name__)

# a correct bot over a consistent vocabulary never gets near this
MAX_ROUNDS = 20


def play(bot: Bot, answer: str, *, max_rounds: int = MAX_ROUNDS) -> List[Clue]:
    """Return the clue history of one game; the last clue is all EXACT."""
    clues: List[Clue] = []
    for _ in range(max_rounds):
        guess = bot.choice(clues)
        clues.append((guess, score(guess, answer)))
        if guess == answer:
            log.debug("solved %s in %d: %s", answer, len(clues), format_clues(clues))
            return clues
    raise SelfPlayError(
        f"{answer!r} not solved within {max_rounds} rounds: {format_clues(clues)}"
    )


def histogram(bot: Bot, answers: Iterable[str], *, max_rounds: int = MAX_ROUNDS) -> Dict[int, int]:
    """Map guesses-needed to the number of answers solved in that many."""
    counts: Counter = Counter()
    for answer in answers:
        counts[len(play(bot, answer, max_rounds=max_rounds))] += 1
    result = dict(sorted(counts.items()))
    log.info(
        "histogram %s (cache hits=%d, misses=%d)", result, bot.cache_hits, bot.cache_misses
    )
    return result


def histogram_frame(hist: Dict[int, int]) -> pd.DataFrame:
    """Histogram as a table with `guesses` and `answers` columns."""
    return pd.DataFrame(
        {"guesses": list(hist.keys()), "answers": list(hist.values())},
        columns=["guesses", "answers"],
    )


def mean_guesses(hist: Dict[int, int]) -> float:
    total = sum(hist.values())
    if total == 0:
        return float("nan")
    return sum(k * v for k, v in hist.items()) / total
