"""Tests for character normalization and collapsing."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from profanity_censor.collapse import Collapser
from profanity_censor.normalize import CharClass, Normalizer, canonical, fold, spelling


def collapse(text, replacement="*"):
    norm = Normalizer(replacement)
    c = Collapser()
    units = []
    for i, ch in enumerate(text):
        units.extend(c.push(norm(i, ch)))
    units.extend(c.flush())
    return c, units


# ── Normalizer ───────────────────────────────────────────────────────

def test_plain_letters_lowercase():
    assert fold("A") == (CharClass.LETTER, "a")
    assert fold("z") == (CharClass.LETTER, "z")


def test_accents_stripped():
    assert fold("É") == (CharClass.LETTER, "e")
    assert fold("ü") == (CharClass.LETTER, "u")


def test_digits_are_letters():
    assert fold("1") == (CharClass.LETTER, "il")
    assert fold("0") == (CharClass.LETTER, "o")


def test_symbols_and_wildcards():
    assert fold("@") == (CharClass.SYMBOL, "a")
    assert fold("*") == (CharClass.SYMBOL, "")
    assert Normalizer("*")(0, "*").wildcard
    assert Normalizer("*")(0, "@").wildcard
    assert not Normalizer("*")(0, "!").wildcard


def test_replacement_is_wildcard():
    g = Normalizer("~")(3, "~")
    assert g.kind is CharClass.SYMBOL
    assert g.wildcard
    assert g.index == 3


def test_filler_boundary_ignored():
    assert fold(" ")[0] is CharClass.FILLER
    assert fold(".")[0] is CharClass.FILLER
    assert fold("\n")[0] is CharClass.BOUNDARY
    assert fold("\u2028")[0] is CharClass.BOUNDARY
    assert fold("\u200b")[0] is CharClass.IGNORED    # zero-width space
    assert fold("\u202e")[0] is CharClass.IGNORED    # right-to-left override
    assert fold("\u0301")[0] is CharClass.IGNORED    # combining acute


def test_homoglyphs():
    assert fold("с") == (CharClass.LETTER, "c")      # Cyrillic
    assert fold("ο") == (CharClass.LETTER, "o")      # Greek
    assert fold("ｆ") == (CharClass.LETTER, "f")     # fullwidth


def test_canonical():
    assert canonical("Hello!") == "hello"
    assert canonical("thank you") == "thankyou"
    assert canonical("***") == ""


# ── Collapser ────────────────────────────────────────────────────────

def test_long_run_collapses_to_repeat():
    c, units = collapse("craaaap")
    assert [u.letter for u in units] == ["c", "r", "a", "p"]
    assert units[2].repeat
    assert (units[2].start, units[2].end) == (2, 6)
    assert c.tokens()[0].text == "crap"


def test_short_run_kept():
    _, units = collapse("craap")
    assert len(units) == 5
    assert not any(u.repeat for u in units)


def test_spaced_letters_merge_into_one_token():
    c, _ = collapse("c r a p")
    tokens = c.tokens()
    assert len(tokens) == 1
    assert tokens[0].text == "crap"
    assert (tokens[0].start, tokens[0].end) == (0, 7)


def test_words_stay_separate():
    c, _ = collapse("push it")
    assert [t.text for t in c.tokens()] == ["push", "it"]


def test_boundary_breaks_merge():
    c, units = collapse("a\nb")
    assert units[1].broken
    assert len(c.tokens()) == 2


def test_long_gap_breaks():
    _, units = collapse("f    u")
    assert units[1].gap == 4
    assert units[1].broken


def test_ignored_chars_do_not_split_words():
    c, units = collapse("f\u200bu")
    assert len(units) == 2
    assert units[1].word == 0
    assert c.tokens()[0].text == "fu"
    assert units[1].start == 2


def test_word_end_unknown_until_closed():
    norm = Normalizer()
    c = Collapser()
    for i, ch in enumerate("ab"):
        c.push(norm(i, ch))
    c.push(norm(2, " "))
    assert c.is_word_end(0) is False
    assert c.is_word_end(1) is True
    c.push(norm(3, "c"))
    c.push(norm(4, "d"))
    assert c.is_word_end(2) is None


# ── Ligatures ────────────────────────────────────────────────────────

def test_ligature_spelling():
    assert spelling("ﬀ") == "ff"
    assert spelling("ﬁ") == "fi"
    assert spelling("a") == ""
    assert spelling("ｆ") == ""       # fullwidth f is one letter
    assert fold("ﬀ") == (CharClass.LETTER, "f")


def test_ligature_canonical():
    assert canonical("ﬀuck") == "ffuck"


def test_ligature_expands_to_letters():
    c, units = collapse("ﬀuck")
    assert [u.letter for u in units] == ["f", "f", "u", "c", "k"]
    assert units[0].start == units[1].start == 0
    assert units[0].end == units[1].end == 1
    assert c.tokens()[0].text == "ffuck"
