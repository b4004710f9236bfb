import pytest

from wordlebot.bot import Bot

TOY = ["aa", "ab", "ba", "bb"]

ANSWERS = [
    "cigar", "rebut", "sissy", "humph", "awake", "blush", "focal", "evade",
    "naval", "serve", "heath", "dwarf", "model", "karma", "stink", "grade",
    "quiet", "bench", "abate", "total",
]

GUESSES = ANSWERS + ["crane", "slate", "roate", "allot", "stoal", "speed"]


@pytest.fixture
def toy_bot():
    return Bot(TOY, TOY, max_workers=1)


@pytest.fixture
def bot():
    return Bot(GUESSES, ANSWERS, max_workers=2)
