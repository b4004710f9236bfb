from __future__ import annotations

from typing import Tuple

from wordlebot.vocab import WordVocab


def load_vocabularies(guesses_path: str, answers_path: str) -> Tuple[WordVocab, WordVocab]:
    """
    Load (guesses, answers) from two one-word-per-line files.
    Answers are folded into the guesses so every answer is a legal guess.
    """
    answers = WordVocab.from_txt(answers_path)
    guesses = WordVocab.from_txt(guesses_path, word_len=answers.word_length).union(answers)
    return guesses, answers


def load_csv_vocabularies(csv_path: str) -> Tuple[WordVocab, WordVocab]:
    """
    Load (guesses, answers) from a word_list.csv with `word` and `day` columns.
    Every row is a legal guess; rows where 'day' is not null are the answers.
    """
    answers = WordVocab.from_csv(csv_path, require="day")
    guesses = WordVocab.from_csv(csv_path).union(answers)
    return guesses, answers
