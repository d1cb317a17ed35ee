import random

import pytest

from data_loader import Dictionary, load_words
from word import Word


def write(path, text):
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_load_words_filters_lines(tmp_path):
    path = write(tmp_path / "words.txt", "Crane\n  theta \nabc\nhello1\ncrêpe\n\nsteak\n")
    assert load_words(path) == ["crane", "theta", "steak"]


def test_load_words_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_words(str(tmp_path / "missing.txt"))
    with pytest.raises(ValueError):
        load_words(write(tmp_path / "empty.txt", "\nabc\n"))


def test_contains_covers_both_lists():
    dictionary = Dictionary(["theta", "crane"], ["beast"])
    assert dictionary.contains("theta")
    assert dictionary.contains(Word("beast"))
    assert "crane" in dictionary
    assert not dictionary.contains("steal")
    assert not dictionary.contains("cranes")
    assert not dictionary.contains("cra")
    assert 5 not in dictionary


def test_iteration_and_size():
    dictionary = Dictionary(["theta", "crane", "theta"], ["beast", "crane"])
    assert [str(w) for w in dictionary] == ["beast", "crane", "theta"]
    assert len(dictionary) == 3
    assert dictionary.answers == (Word("crane"), Word("theta"))


def test_random_picks_answers_only():
    dictionary = Dictionary(["theta", "crane"], ["beast", "steal", "steak"])
    rng = random.Random(7)
    picks = {dictionary.random(rng) for _ in range(50)}
    assert picks <= set(dictionary.answers)
    assert dictionary.random() in dictionary.answers


def test_from_files(tmp_path):
    answers = write(tmp_path / "answers.txt", "theta\ncrane\n")
    guesses = write(tmp_path / "guesses.txt", "beast\n")
    dictionary = Dictionary.from_files(answers, guesses)
    assert dictionary.contains("beast")
    assert len(dictionary.answers) == 2
    assert len(Dictionary.from_files(answers)) == 2


def test_constructor_drops_malformed_entries():
    dictionary = Dictionary(["CRANE", "cr4ne", "theta"], ["BEAST", "ab"])
    assert dictionary.answers == (Word("theta"),)
    assert [str(w) for w in dictionary] == ["theta"]
    assert not dictionary.contains("ZZZZZ")
    assert not dictionary.contains(Word.empty())
    assert dictionary.random() == Word("theta")
