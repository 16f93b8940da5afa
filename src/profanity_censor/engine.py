"""Scanner: the single pipeline behind both the batch and streaming APIs.

    normalize -> collapse -> match -> suppress -> {aggregate, render}

Characters go in one at a time.  Output comes out as soon as no live
candidate or undecided match could still reach it, so the batch API is just
the streaming one fed to the end and flushed.
"""

from __future__ import annotations
from dataclasses import replace
from typing import TYPE_CHECKING

from .aggregate import Aggregator
from .collapse import Collapser, Unit
from .dictionary import Dictionary
from .matcher import Matcher
from .normalize import Normalizer
from .render import Renderer
from .suppress import Suppressor
from .types import Analysis, Match, Token, Type

if TYPE_CHECKING:
    from .censor import CensorConfig


class Scanner:
    """Single-use, single-threaded scan of one input."""

    __slots__ = (
        "_normalize", "_collapser", "_matcher", "_suppressor", "_aggregator",
        "_renderer", "_chars", "_emitted", "_pending", "_confirmed",
        "_safe_end", "_check_safe", "_finished", "_dictionary",
    )

    def __init__(self, config: CensorConfig, dictionary: Dictionary) -> None:
        config.validate()
        self._normalize = Normalizer(config.censor_replacement)
        self._collapser = Collapser()
        self._matcher = Matcher(
            dictionary,
            self._collapser.units,
            self_censoring=not config.ignore_self_censoring,
        )
        self._suppressor = Suppressor(
            self._collapser, enabled=not config.ignore_false_positives,
        )
        self._aggregator = Aggregator(
            replacement=config.censor_replacement,
            self_censoring=not config.ignore_self_censoring,
        )
        self._renderer = Renderer(
            threshold=Type(config.censor_threshold),
            first_character_threshold=Type(config.censor_first_character_threshold),
            replacement=config.censor_replacement,
        )
        self._chars: list[str] = []
        self._emitted = 0
        self._pending: list[Match] = []
        self._confirmed: list[Match] = []
        self._safe_end = -1     # last unit of a safe phrase starting the input
        self._check_safe = not config.ignore_false_positives
        self._finished = False
        self._dictionary = dictionary

    # ------------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------------

    def feed(self, ch: str) -> str:
        """Consume one character, return the output that became final."""
        if self._finished:
            raise RuntimeError("scanner already finished")
        glyph = self._normalize(len(self._chars), ch)
        self._chars.append(ch)
        self._aggregator.observe(glyph)
        for unit in self._collapser.push(glyph):
            self._push_unit(unit)
        self._settle()
        return self._emit(self._frontier())

    def finish(self) -> str:
        """End of input: decide everything and return the remaining output."""
        if self._finished:
            return ""
        for unit in self._collapser.flush():
            self._push_unit(unit)
        self._matcher.finish()
        self._settle()
        self._finished = True
        return self._emit(len(self._chars))

    def analysis(self) -> Analysis:
        """Classification so far; SAFE is only decided once finished."""
        return Analysis(
            type=self._aggregator.result(safe=self._is_safe()),
            matches=tuple(self._confirmed),
        )

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def tokens(self) -> list[Token]:
        return self._collapser.tokens()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _push_unit(self, unit: Unit) -> None:
        for match in self._matcher.push(unit):
            if match.type.is_(Type.ANY):
                self._pending.append(match)
                continue
            self._suppressor.add_safe(match)
            if match.type.is_(Type.SAFE) and match.first_unit == 0 and self._whole_phrase(match):
                self._safe_end = max(self._safe_end, match.last_unit)

    def _whole_phrase(self, match: Match) -> bool:
        # "hell o" spells "hello" but is two words; "thank you" must be two.
        entry = self._dictionary.lookup(match.word)
        units = self._collapser.units
        spanned = units[match.last_unit].word - units[match.first_unit].word + 1
        return entry is not None and spanned == entry.words

    def _confirm(self, match: Match) -> None:
        # Repeated letters ("ccrraapp") reach the same word from several
        # starts and ends; report one match over their union.
        for i, other in enumerate(self._confirmed):
            if other.word == match.word and match.start < other.end and match.end > other.start:
                self._confirmed[i] = replace(
                    other,
                    first_unit=min(other.first_unit, match.first_unit),
                    last_unit=max(other.last_unit, match.last_unit),
                    start=min(other.start, match.start),
                    end=max(other.end, match.end),
                    spaced=other.spaced and match.spaced,
                    self_censored=other.self_censored and match.self_censored,
                )
                break
        else:
            self._confirmed.append(match)

    def _earliest(self) -> int | None:
        collapser = self._collapser
        return self._matcher.earliest_start(
            gap=collapser.gap, broken=collapser.gap_broken,
        )

    def _settle(self) -> None:
        earliest = self._earliest()
        waiting: list[Match] = []
        for match in self._pending:
            if not self._suppressor.ready(match, earliest):
                waiting.append(match)
            elif self._suppressor.keep(match):
                self._confirm(match)
                self._aggregator.fold(match)
                self._renderer.mark(match)
        self._pending = waiting

        horizon = len(self._collapser.units)
        if earliest is not None:
            horizon = min(horizon, earliest)
        for match in waiting:
            horizon = min(horizon, match.first_unit)
        self._suppressor.trim(horizon)

    def _frontier(self) -> int:
        limit = len(self._chars)
        held = self._collapser.pending_start()
        if held is not None:
            limit = min(limit, held)
        earliest = self._earliest()
        if earliest is not None:
            limit = min(limit, self._collapser.units[earliest].start)
        for match in self._pending:
            limit = min(limit, match.start)
        return limit

    def _emit(self, upto: int) -> str:
        if upto <= self._emitted:
            return ""
        out = self._renderer.render(self._chars, self._emitted, upto)
        self._emitted = upto
        return out

    def _is_safe(self) -> bool:
        if not (self._finished and self._check_safe) or self._safe_end < 0:
            return False
        if self._confirmed:
            return False
        # Trailing "!" or "?" may follow the phrase: "thanks!".
        units = self._collapser.units
        return all(u.symbol for u in units[self._safe_end + 1:])
