"""Tests for the Type bitset and threshold parsing."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from profanity_censor import Analysis, InvalidOptionError, DictionaryError, Type, parse_type


# ── Bit layout ───────────────────────────────────────────────────────

def test_category_bits_do_not_overlap():
    cats = [Type.PROFANE, Type.OFFENSIVE, Type.SEXUAL, Type.MEAN, Type.EVASIVE, Type.SPAM, Type.SAFE]
    for i, a in enumerate(cats):
        for b in cats[i + 1:]:
            assert int(a & b) == 0


def test_severity_masks():
    assert Type.PROFANE & Type.SEVERE == 0b100
    assert Type.PROFANE & Type.MODERATE == 0b110
    assert Type.PROFANE & Type.MILD == 0b111


def test_inappropriate_composition():
    assert Type.INAPPROPRIATE.is_(Type.PROFANE & Type.MILD)
    assert Type.INAPPROPRIATE.is_(Type.MEAN & Type.SEVERE)
    assert Type.INAPPROPRIATE.isnt(Type.MEAN.at(1))
    assert Type.INAPPROPRIATE.isnt(Type.EVASIVE)
    assert Type.INAPPROPRIATE.isnt(Type.SPAM)


def test_operators_return_type():
    assert isinstance(Type.PROFANE | Type.SEXUAL, Type)
    assert isinstance(Type.PROFANE & Type.SEVERE, Type)
    assert isinstance(~Type.SAFE, Type)


def test_invert_stays_in_range():
    assert ~Type.NONE == Type.ANY | Type.SAFE
    assert ~(Type.ANY | Type.SAFE) == Type.NONE


def test_is_and_isnt_are_complements():
    t = Type.from_weights((3, 0, 2, 0, 0))
    for mask in (Type.PROFANE, Type.SEXUAL & Type.SEVERE, Type.OFFENSIVE, Type.ANY, Type.NONE):
        assert t.is_(mask) == (not t.isnt(mask))


def test_is_means_any_shared_bit():
    t = Type.PROFANE.at(2)
    assert t.is_(Type.PROFANE | Type.SEXUAL)
    assert t.isnt(Type.PROFANE & Type.SEVERE)
    assert Type.NONE.isnt(Type.ANY)


# ── Weights ──────────────────────────────────────────────────────────

def test_from_weights():
    t = Type.from_weights((3, 0, 2, 0, 0))
    assert t == 0b100 | (0b010 << 6)
    assert t.to_weights() == (3, 0, 2, 0, 0)


def test_from_weights_wrong_length():
    with pytest.raises(DictionaryError):
        Type.from_weights((1, 2))


def test_at_picks_one_severity():
    assert Type.SPAM.at(2) == 0b010 << 15
    assert Type.PROFANE.at(1) == 0b001
    with pytest.raises(InvalidOptionError):
        Type.PROFANE.at(0)


def test_describe():
    t = Type.from_weights((3, 0, 2, 0, 0))
    assert t.describe() == "severely profane, moderately sexual"
    assert Type.NONE.describe() == "no detections"
    assert (Type.SAFE | Type.SPAM.at(1)).describe() == "mildly spam, safe"


def test_analysis_delegates_to_type():
    a = Analysis(type=Type.PROFANE.at(3))
    assert a.is_(Type.PROFANE)
    assert a.isnt(Type.SEXUAL)
    assert a.describe() == "severely profane"
    assert Analysis().type == Type.NONE


# ── parse_type ───────────────────────────────────────────────────────

def test_parse_type_names():
    assert parse_type("PROFANE") == Type.PROFANE
    assert parse_type("inappropriate") == Type.INAPPROPRIATE


def test_parse_type_precedence():
    assert parse_type("PROFANE & SEVERE | SEXUAL") == (Type.PROFANE & Type.SEVERE) | Type.SEXUAL


def test_parse_type_int():
    assert parse_type(0b100) == Type.PROFANE & Type.SEVERE


@pytest.mark.parametrize("bad", ["", "PROFANE &", "FOO", "PROFANE SEXUAL", "& MILD", True, -1, 1 << 19, None])
def test_parse_type_rejects(bad):
    with pytest.raises(InvalidOptionError):
        parse_type(bad)
