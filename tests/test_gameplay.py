import random
import threading

from data_loader import Dictionary
from gameplay import GameSession, GameState, GuessError, Phase, play_wordle
from word import Word

DICTIONARY = Dictionary(["theta", "steal", "steak", "crane", "tamed"], ["beast", "tears"])


def type_word(game, text, submit=True):
    for c in text:
        game.input(c)
    if submit:
        game.input("enter")


def test_submit_valid_guess():
    game = GameState("theta", DICTIONARY)
    type_word(game, "beast")
    assert game.guesses == [Word("beast")]
    assert game.guess == Word.empty()
    assert game.phase == Phase.PLAYING
    assert game.error == GuessError.NONE


def test_invalid_guess_keeps_typed_word():
    game = GameState("theta", DICTIONARY)
    type_word(game, "zzzzz")
    assert game.error == GuessError.INVALID_GUESS
    assert game.guesses == []
    assert game.guess == Word("zzzzz")
    game.input("backspace")
    assert game.error == GuessError.NONE
    assert game.guess == Word("zzzz")


def test_incomplete_guess_is_ignored():
    game = GameState("theta", DICTIONARY)
    type_word(game, "the")
    assert game.guesses == []
    assert game.guess == Word("the")


def test_win_stops_input():
    game = GameState("theta", DICTIONARY)
    type_word(game, "theta")
    assert game.phase == Phase.WON
    type_word(game, "crane")
    assert game.guesses == [Word("theta")]
    assert game.guess == Word.empty()


def test_loss_when_board_fills():
    game = GameState("theta", DICTIONARY, max_guesses=2)
    type_word(game, "beast")
    type_word(game, "tears")
    assert game.is_full()
    assert game.phase == Phase.LOST


def test_win_on_last_guess():
    game = GameState("theta", DICTIONARY, max_guesses=1)
    type_word(game, "theta")
    assert game.phase == Phase.WON


def test_non_letter_keys_are_ignored():
    game = GameState("theta", DICTIONARY)
    game.input("1")
    game.input("")
    assert game.guess == Word.empty()


def test_remaining_rows_and_hints():
    game = GameState("theta", DICTIONARY)
    assert len(game.remaining()) == len(DICTIONARY.answers)
    type_word(game, "beast")
    assert game.remaining() == [Word("tamed"), Word("theta")]
    assert game.rows() == [(Word("beast"), ["B", "Y", "Y", "B", "Y"])]
    hints = game.hints(limit=1)
    assert len(hints) == 1
    assert hints[0][0] in game.remaining()


def test_new_random_uses_answers():
    game = GameState.new_random(DICTIONARY, random.Random(3))
    assert game.answer in DICTIONARY.answers
    assert game.phase == Phase.PLAYING


def test_session_serializes_moves():
    session = GameSession(DICTIONARY, random.Random(1))
    assert session.phase() == Phase.PLAYING
    results = []

    def worker():
        results.append(len(session.remaining()))

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert results == [len(DICTIONARY.answers)] * 4

    for c in "beast":
        session.input(c)
    assert session.input("enter") == Phase.PLAYING
    assert [str(w) for w, _ in session.rows()] == ["beast"]
    session.reset()
    assert session.rows() == []


def test_play_wordle_solves_targets():
    for target in DICTIONARY.answers:
        attempts = play_wordle(target, DICTIONARY, verbose=False)
        assert 1 <= attempts <= len(DICTIONARY.answers)
    assert play_wordle("crane", DICTIONARY, verbose=False) == 1


def test_play_wordle_without_opening_word():
    dictionary = Dictionary(["theta", "steal", "steak", "tamed"])
    assert play_wordle("steak", dictionary, verbose=False) <= 4
