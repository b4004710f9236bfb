from collections import Counter
from concurrent.futures import ThreadPoolExecutor

import pytest

import wordlebot.bot as bot_module
from wordlebot.bot import Bot, Evaluation, best_evaluation
from wordlebot.errors import NoPlausibleAnswerError
from wordlebot.feedback import score
from wordlebot.information import expected_entropy, min_surprise, to_microbits

from conftest import ANSWERS, GUESSES, TOY


def _value(metric, guess, answers):
    return to_microbits(metric(Counter(score(guess, a) for a in answers)))


def test_toy_opening_has_maximum_entropy(toy_bot):
    guess = toy_bot.choice([])
    best = max(_value(expected_entropy, g, TOY) for g in TOY)
    assert _value(expected_entropy, guess, TOY) == best
    # all four split the answers into four buckets; alphabetical wins
    assert guess == "aa"


def test_opening_matches_brute_force(bot):
    guess = bot.choice([])
    values = {g: _value(expected_entropy, g, ANSWERS) for g in bot.guesses}
    assert values[guess] == max(values.values())


def test_adversarial_opening_matches_brute_force():
    bot = Bot(GUESSES, ANSWERS, adversarial=True, max_workers=2)
    guess = bot.choice([])
    values = {g: _value(min_surprise, g, ANSWERS) for g in bot.guesses}
    assert values[guess] == max(values.values())


def test_worker_processes_do_not_change_the_result(monkeypatch):
    # small enough that the pool would normally be skipped
    monkeypatch.setattr(bot_module, "PARALLEL_THRESHOLD", 0)
    sequential = Bot(GUESSES, ANSWERS, max_workers=1)
    parallel = Bot(GUESSES, ANSWERS, max_workers=3)
    assert parallel.rank([]) == sequential.rank([])
    assert parallel.choice([]) == sequential.choice([])


def test_rank_is_best_first(bot):
    ranked = bot.rank([])
    assert len(ranked) == len(bot.guesses)
    assert ranked[0].guess == bot.choice([])
    values = [e.microbits for e in ranked]
    assert values == sorted(values, reverse=True)


def test_uninformative_guess_scores_zero():
    bot = Bot(["zz"] + TOY, TOY, max_workers=1)
    ranked = {e.guess: e for e in bot.rank([])}
    assert ranked["zz"].microbits == 0
    assert not ranked["zz"].plausible
    assert ranked["aa"].bits == pytest.approx(2.0)


def test_choice_is_cached(toy_bot):
    first = toy_bot.choice([])
    second = toy_bot.choice([])
    assert first == second
    assert toy_bot.cache_hits == 1
    assert toy_bot.cache_misses == 1


def test_concurrent_callers_share_one_cache():
    bot = Bot(GUESSES, ANSWERS, max_workers=1)
    calls = 12
    with ThreadPoolExecutor(max_workers=6) as executor:
        results = list(executor.map(lambda _: bot.choice([]), range(calls)))
    assert len(set(results)) == 1
    assert bot.cache_hits + bot.cache_misses == calls
    assert bot.cache_misses >= 1
    assert bot.choice([]) == results[0]


def test_cache_key_compares_by_value(toy_bot):
    toy_bot.choice([("aa", [3, 1])])
    toy_bot.choice((("aa", (3, 1)),))
    assert toy_bot.cache_hits == 1


def test_small_pool_guesses_a_plausible_answer(toy_bot):
    assert toy_bot.plausible_answers([("aa", (3, 1))]) == ["ab"]
    assert toy_bot.choice([("aa", (3, 1))]) == "ab"


def test_contradictory_clues_fail_without_caching(toy_bot):
    clues = [("aa", (1, 1)), ("bb", (1, 1))]
    with pytest.raises(NoPlausibleAnswerError) as info:
        toy_bot.choice(clues)
    assert info.value.clues == clues
    assert toy_bot.cache_misses == 0
    with pytest.raises(NoPlausibleAnswerError):
        toy_bot.choice(clues)


def test_bad_outcome_code_fails_fast(toy_bot):
    with pytest.raises(ValueError):
        toy_bot.choice([("aa", (0, 1))])


def test_guesses_include_answers():
    bot = Bot(["zz", "aa"], TOY)
    assert bot.guesses.words() == ["zz", "aa", "ab", "ba", "bb"]
    assert bot.answers.words() == TOY


def test_mismatched_lengths_are_rejected():
    with pytest.raises(ValueError):
        Bot(["aa", "abc"], TOY)
    with pytest.raises(ValueError):
        Bot(["aaa"], TOY)


def test_best_evaluation_tie_breaks():
    evaluations = [
        Evaluation("zz", 100, False),
        Evaluation("bb", 100, True),
        Evaluation("aa", 100, False),
        Evaluation("cc", 50, True),
    ]
    assert best_evaluation(evaluations).guess == "bb"
    assert best_evaluation([Evaluation("zz", 100, False), Evaluation("aa", 100, False)]).guess == "aa"
    assert best_evaluation([Evaluation("zz", 101, False), Evaluation("aa", 100, True)]).guess == "zz"
