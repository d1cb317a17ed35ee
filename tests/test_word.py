import pytest

from letterset import LetterSet
from word import BLANK, Word, as_word


def test_at_and_str():
    word = Word("theta")
    assert [word.at(i) for i in range(5)] == list("theta")
    assert str(word) == "theta"
    assert repr(word) == "Word('theta')"


def test_short_words_are_padded():
    word = Word("ab")
    assert str(word) == "ab   "
    assert word.at(2) == BLANK
    assert word.length == 2
    assert not word.is_complete()


def test_extra_characters_ignored():
    assert Word("cranes") == Word("crane")


def test_non_letters_leave_slot_unset():
    word = Word("a1cde")
    assert word.at(1) == BLANK
    assert not word.is_complete()


def test_slot_index_out_of_range():
    word = Word("crane")
    with pytest.raises(IndexError):
        word.at(5)
    with pytest.raises(IndexError):
        word.at(-1)
    with pytest.raises(IndexError):
        word.set(7, "a")


def test_set_replaces_slot():
    word = Word("crane")
    assert word.set(0, "b") == Word("brane")
    assert word.set(4, "z").set(4, "a") == Word("crana")
    assert word.set(2, BLANK) == Word("cr ne")
    assert word == Word("crane")


def test_put_and_erase_saturate():
    word = Word.empty()
    for c in "abc":
        word = word.put(c)
    assert word == Word("abc")
    assert word.erase() == Word("ab")
    assert Word.empty().erase() == Word.empty()
    assert Word("crane").put("x") == Word("crane")
    assert Word("crane").erase().put("y") == Word("crany")


def test_put_ignores_non_letters():
    assert Word.empty().put("1") == Word.empty()
    assert Word("ab").put("A") == Word("ab")


def test_contains():
    word = Word("theta")
    assert word.contains("t")
    assert word.contains("a")
    assert not word.contains("s")


def test_charset_collapses_repeats():
    assert Word("sheep").charset() == LetterSet.from_str("shep")
    assert Word("abcde").charset() == Word("edcba").charset()
    assert Word("ab").charset() == LetterSet.from_str("ab")


def test_equality_includes_blanks():
    assert Word("ab") != Word("ab c")
    assert Word("ab") == Word("ab   ")
    assert hash(Word("theta")) == hash(Word("theta"))
    assert {Word("theta"): 1}[Word("theta")] == 1


def test_packed_bits():
    assert Word("a").bits == 1
    assert Word("b").bits == 2
    assert Word(" a").bits == 1 << 5
    assert Word("zzzzz").bits < 1 << 25
    assert Word.from_bits(Word("crane").bits) == Word("crane")
    assert Word.from_bits(1 << 30) == Word.empty()


def test_as_word():
    word = Word("crane")
    assert as_word(word) is word
    assert as_word("crane") == word
