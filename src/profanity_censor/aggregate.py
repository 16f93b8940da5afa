"""Analysis aggregator: folds confirmed matches and whole-text heuristics.

Besides OR-ing match types together, the aggregator keeps a few counters
over the raw characters to spot spam (SHOUTING, loooong repetition,
home-row gibberish, l33t replacements) and heavy self-censoring ("****").
"""

from __future__ import annotations

from .normalize import CONFUSABLES, CharClass, Glyph
from .types import Match, Type

# Inputs shorter than this are not judged as spam; one acronym would
# dominate the percentages.
MIN_SPAM_LENGTH = 6
# Added to the length so a few words in a short text do not spike the ratio.
LENGTH_BIAS = 6

_HOME_ROW = frozenset("asdfjkl;")


class Aggregator:
    """Accumulates the Type of one input."""

    __slots__ = (
        "type", "_replacement", "_self_censoring", "_length", "_last",
        "_separate", "uppercase", "repetitions", "gibberish", "replacements",
        "self_censored",
    )

    def __init__(self, *, replacement: str = "*", self_censoring: bool = True) -> None:
        self.type = Type.NONE
        self._replacement = replacement
        self._self_censoring = self_censoring
        self._length = 0
        self._last: str | None = None
        self._separate = True
        self.uppercase = 0
        self.repetitions = 0
        self.gibberish = 0
        self.replacements = 0
        self.self_censored = 0

    def fold(self, match: Match) -> None:
        self.type |= match.type

    def observe(self, glyph: Glyph) -> None:
        if glyph.kind is CharClass.IGNORED:
            return
        raw = glyph.char
        c = raw.lower()
        self._length += 1

        if raw.isupper():
            self.uppercase += 1
        if raw == self._replacement and (not self._separate or self._last == raw):
            self.self_censored += 1

        last = self._last
        if last is not None:
            if c == last:
                self.repetitions += 1
            # Digit runs and plain letters are not replacements.
            if (
                c in CONFUSABLES
                and not ("a" <= c <= "z")
                and not (c.isdigit() and last.isdigit())
            ):
                self.replacements += 1
            if c in _HOME_ROW and last in _HOME_ROW:
                self.gibberish += 1

        self._last = c
        self._separate = glyph.kind is not CharClass.LETTER

    def result(self, *, safe: bool = False) -> Type:
        typ = self.type | (Type.SAFE if safe else Type.NONE)
        last_pos = self._length - 1
        if last_pos < MIN_SPAM_LENGTH:
            return typ

        total = last_pos + LENGTH_BIAS
        spam = max(self.uppercase, self.repetitions, self.gibberish // 2, self.replacements)
        percent_spam = 100 * spam // total
        percent_censored = 100 * self.self_censored // total

        if percent_spam >= 70 and last_pos >= 20:
            typ |= Type.SPAM.at(3)
        elif percent_spam >= 50 and last_pos >= 10:
            typ |= Type.SPAM.at(2)
        elif percent_spam >= 30:
            typ |= Type.SPAM.at(1)

        if self._self_censoring and percent_censored > 20:
            typ |= Type.PROFANE.at(1)
        return typ
