"""Repetition & spacing collapser: glyphs in, compacted units out.

    "craaaap"  ->  c r a(repeat) p          one word
    "c r a p"  ->  c | r | a | p            four one-letter words, one token
    "push it"  ->  p u s h | i t            two words, two tokens

A unit remembers the original index span it covers, so a match over units
maps back onto the exact characters to censor, inner filler included.
"""

from __future__ import annotations
from dataclasses import dataclass, replace

from .normalize import CharClass, Glyph
from .types import Token

# Longest filler run (spaces, dots, dashes...) a word may be spread over.
MAX_FILLER = 3
# Runs at least this long collapse into one repeated unit.
REPEAT_CAP = 3


@dataclass(frozen=True, slots=True)
class Unit:
    """One letter position of the compacted stream."""
    index: int
    candidates: str
    wildcard: bool
    symbol: bool            # punctuation read as a letter
    repeat: bool            # collapsed run, may be read once or twice
    start: int              # original index, inclusive
    end: int                # original index, exclusive
    word: int
    gap: int                # filler characters since the previous unit
    broken: bool            # boundary or over-long gap before this unit

    @property
    def first_in_word(self) -> bool:
        return self.index == 0 or self.gap > 0

    @property
    def letter(self) -> str:
        return self.candidates[0] if self.candidates else "*"


class Collapser:
    """Incremental collapser.  Holds back at most one run of repeated glyphs."""

    __slots__ = (
        "units", "word_sizes", "word_first", "closed_words",
        "_max_filler", "_repeat_cap", "_run", "_run_gap", "_run_broken",
        "_gap", "_broken",
    )

    def __init__(self, *, max_filler: int = MAX_FILLER, repeat_cap: int = REPEAT_CAP) -> None:
        self.units: list[Unit] = []
        self.word_sizes: list[int] = []
        self.word_first: list[int] = []
        self.closed_words = 0
        self._max_filler = max_filler
        self._repeat_cap = repeat_cap
        self._run: list[Glyph] = []
        self._run_gap = 0
        self._run_broken = False
        self._gap = 0
        self._broken = False

    # ------------------------------------------------------------------
    # Feeding
    # ------------------------------------------------------------------

    def push(self, glyph: Glyph) -> list[Unit]:
        """Consume one glyph, return the units that became final."""
        kind = glyph.kind
        if kind is CharClass.IGNORED:
            return []
        if glyph.spelled:
            # A ligature is several letters sharing one original index.
            out: list[Unit] = []
            for letter in glyph.spelled:
                out.extend(self.push(replace(glyph, candidates=letter, spelled="")))
            return out

        if kind is CharClass.LETTER or kind is CharClass.SYMBOL:
            if self._run and _same_letter(self._run[0], glyph):
                self._run.append(glyph)
                return []
            out = self._flush_run()
            self._run = [glyph]
            self._run_gap, self._run_broken = self._gap, self._broken
            self._gap, self._broken = 0, False
            return out

        # FILLER or BOUNDARY: the current word is over.
        out = self._flush_run()
        self.closed_words = len(self.word_sizes)
        self._gap += 1
        if kind is CharClass.BOUNDARY:
            self._broken = True
        return out

    def flush(self) -> list[Unit]:
        """End of input: release the held run and close the last word."""
        out = self._flush_run()
        self.closed_words = len(self.word_sizes)
        return out

    @property
    def gap(self) -> int:
        """Filler characters seen since the last letter."""
        return self._gap

    @property
    def gap_broken(self) -> bool:
        return self._broken or self._gap > self._max_filler

    def pending_start(self) -> int | None:
        """Original index of the first glyph not yet turned into a unit."""
        return self._run[0].index if self._run else None

    def _flush_run(self) -> list[Unit]:
        run = self._run
        if not run:
            return []
        self._run = []

        if len(run) >= self._repeat_cap:
            spans = [(run[0], run[-1], True)]
        else:
            spans = [(g, g, False) for g in run]

        new_word = not self.word_sizes or self._run_gap > 0
        if new_word:
            self.word_first.append(len(self.units))
            self.word_sizes.append(0)
        word = len(self.word_sizes) - 1

        out: list[Unit] = []
        for i, (first, last, repeat) in enumerate(spans):
            unit = Unit(
                index=len(self.units),
                candidates=first.candidates,
                wildcard=first.wildcard,
                symbol=first.kind is CharClass.SYMBOL,
                repeat=repeat,
                start=first.index,
                end=last.index + 1,
                word=word,
                gap=self._run_gap if i == 0 else 0,
                broken=(self._run_broken or self._run_gap > self._max_filler) if i == 0 else False,
            )
            self.units.append(unit)
            self.word_sizes[word] += 1
            out.append(unit)
        return out

    # ------------------------------------------------------------------
    # Queries used by the suppressor
    # ------------------------------------------------------------------

    def is_word_end(self, unit_index: int) -> bool | None:
        """Whether the unit ends its word, or None while the word is still open."""
        unit = self.units[unit_index]
        if unit.word >= self.closed_words:
            return None
        return unit_index == self.word_first[unit.word] + self.word_sizes[unit.word] - 1

    def mergeable(self, word: int) -> bool:
        """Whether ``word`` continues the previous one as spaced-out letters."""
        if word == 0:
            return False
        first = self.units[self.word_first[word]]
        return (
            self.word_sizes[word - 1] == 1
            and self.word_sizes[word] == 1
            and not first.broken
        )

    def spans_one_token(self, first_unit: int, last_unit: int) -> bool:
        first_word = self.units[first_unit].word
        last_word = self.units[last_unit].word
        return all(self.mergeable(w) for w in range(first_word + 1, last_word + 1))

    def tokens(self) -> list[Token]:
        """Compacted tokens of everything collapsed so far."""
        tokens: list[Token] = []
        for word, first in enumerate(self.word_first):
            last = first + self.word_sizes[word] - 1
            text = "".join(u.letter for u in self.units[first:last + 1])
            if tokens and self.mergeable(word):
                prev = tokens[-1]
                tokens[-1] = Token(
                    first_unit=prev.first_unit,
                    last_unit=last,
                    start=prev.start,
                    end=self.units[last].end,
                    text=prev.text + text,
                )
            else:
                tokens.append(Token(
                    first_unit=first,
                    last_unit=last,
                    start=self.units[first].start,
                    end=self.units[last].end,
                    text=text,
                ))
        return tokens


def _same_letter(a: Glyph, b: Glyph) -> bool:
    return (a.candidates, a.wildcard) == (b.candidates, b.wildcard) and (
        a.candidates or a.wildcard
    )
