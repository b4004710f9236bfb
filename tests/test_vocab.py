import pytest

from wordlebot.data_utils import load_csv_vocabularies, load_vocabularies
from wordlebot.vocab import WordVocab


def test_dedupes_keeping_first_occurrence():
    v = WordVocab(["crane", "slate", "crane", "trace"])
    assert v.words() == ["crane", "slate", "trace"]
    assert len(v) == 3
    assert list(v) == ["crane", "slate", "trace"]
    assert "slate" in v
    assert "zzzzz" not in v


def test_rejects_bad_input():
    with pytest.raises(ValueError):
        WordVocab([])
    with pytest.raises(ValueError):
        WordVocab(["crane", "cran"])
    with pytest.raises(ValueError):
        WordVocab(["Crane"])
    with pytest.raises(TypeError):
        WordVocab("crane")


def test_load_vocabularies(tmp_path):
    guesses = tmp_path / "guesses.txt"
    answers = tmp_path / "answers.txt"
    guesses.write_text("roate\nsoare\n\ncranes\n", encoding="utf-8")
    answers.write_text("Cigar\nrebut\n", encoding="utf-8")

    g, a = load_vocabularies(str(guesses), str(answers))
    assert a.words() == ["cigar", "rebut"]
    assert g.words() == ["roate", "soare", "cigar", "rebut"]


def test_load_csv_vocabularies(tmp_path):
    path = tmp_path / "word_list.csv"
    path.write_text("word,day\ncrane,\nslate,1\nTRACE,2\nab1de,\n", encoding="utf-8")

    guesses, answers = load_csv_vocabularies(str(path))
    assert answers.words() == ["slate", "trace"]
    assert guesses.words() == ["crane", "slate", "trace"]


def test_from_csv(tmp_path):
    path = tmp_path / "words.csv"
    path.write_text("word\ncrane\nslate\ncrane\nhi\n", encoding="utf-8")
    assert WordVocab.from_csv(str(path)).words() == ["crane", "slate"]
    with pytest.raises(KeyError):
        WordVocab.from_csv(str(path), column="nope")


def test_from_csv_keeps_rows_with_required_column(tmp_path):
    path = tmp_path / "word_list.csv"
    path.write_text("word,day\ncrane,\nslate,1\n", encoding="utf-8")
    assert WordVocab.from_csv(str(path), require="day").words() == ["slate"]
    with pytest.raises(KeyError):
        WordVocab.from_csv(str(path), require="nope")
