"""Tests for the word dictionary."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from concurrent.futures import ThreadPoolExecutor

import pytest

import profanity_censor.dictionary as dictionary_module
import profanity_censor.wordlist as wordlist_module
from profanity_censor import DictionaryError, Type, build_dictionary, default_dictionary


# ── Default pack ─────────────────────────────────────────────────────

def test_default_is_shared():
    assert default_dictionary() is default_dictionary()


def test_default_shared_across_threads():
    with ThreadPoolExecutor(max_workers=8) as pool:
        seen = list(pool.map(lambda _: default_dictionary(), range(32)))
    assert all(d is seen[0] for d in seen)


def test_failed_default_build_not_published(monkeypatch):
    good = wordlist_module.default_entries
    monkeypatch.setattr(dictionary_module, "_default", None)
    monkeypatch.setattr(wordlist_module, "default_entries", lambda: [])
    with pytest.raises(DictionaryError):
        default_dictionary()
    assert dictionary_module._default is None

    monkeypatch.setattr(wordlist_module, "default_entries", good)
    d = default_dictionary()
    assert len(d) > 0
    assert d.lookup("crap").flagged


def test_lookup_flagged():
    d = default_dictionary()
    entry = d.lookup("crap")
    assert entry.type == Type.PROFANE.at(2)
    assert entry.flagged
    assert not entry.suppresses


def test_lookup_is_canonical():
    d = default_dictionary()
    assert d.lookup("CRAP") == d.lookup("crap")


def test_false_positive_entries_suppress():
    entry = default_dictionary().lookup("assassin")
    assert not entry.flagged
    assert entry.suppresses
    assert entry.type == Type.NONE


def test_safe_phrase():
    entry = default_dictionary().lookup("thank you")
    assert entry.safe
    assert entry.suppresses
    assert entry.words == 2
    assert default_dictionary().lookup("hello").words == 1


def test_unknown_word():
    assert default_dictionary().lookup("keyboard") is None


# ── Custom dictionaries ──────────────────────────────────────────────

def test_build_and_walk():
    d = build_dictionary([("frick", Type.PROFANE.at(1))])
    node = d.ROOT
    for letter in "frick":
        node = d.child(node, letter)
    assert d.entry(node).word == "frick"
    assert not d.has_children(node)
    assert len(d) == 1
    assert d.node_count == 6


def test_duplicates_merge():
    d = build_dictionary([("frick", Type.PROFANE.at(1)), ("Frick", Type.MEAN.at(1))])
    assert d.lookup("frick").type == Type.PROFANE.at(1) | Type.MEAN.at(1)
    assert len(d) == 1


def test_empty_dictionary_rejected():
    with pytest.raises(DictionaryError):
        build_dictionary([])


def test_word_without_letters_rejected():
    with pytest.raises(DictionaryError):
        build_dictionary([("***", Type.PROFANE)])


def test_safe_and_flagged_rejected():
    with pytest.raises(DictionaryError):
        build_dictionary([("frick", Type.SAFE), ("frick", Type.PROFANE.at(1))])
