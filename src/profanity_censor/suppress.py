"""False-positive suppression.

Two rules decide whether a flagged match survives:

  containment   "ass" inside "assassin" is dropped because a known-safe
                word covers it.
  word split    "shit" read across "push it" is dropped because it glues
                the tail of one word to the head of the next.

A match can only be judged once no live candidate could still grow into a
safe word covering it, and once its last word is known to be complete.
"""

from __future__ import annotations

from .collapse import Collapser
from .types import Match


class Suppressor:
    """Holds the safe-word evidence seen so far and judges flagged matches."""

    __slots__ = ("_collapser", "_enabled", "_safe")

    def __init__(self, collapser: Collapser, *, enabled: bool = True) -> None:
        self._collapser = collapser
        self._enabled = enabled
        self._safe: list[Match] = []

    def add_safe(self, match: Match) -> None:
        # Only a contiguous spelling is evidence; "as sassin" proves nothing.
        if not match.spaced:
            self._safe.append(match)

    def ready(self, match: Match, earliest_active: int | None) -> bool:
        if earliest_active is not None and earliest_active <= match.first_unit:
            return False
        return self._collapser.is_word_end(match.last_unit) is not None

    def keep(self, match: Match) -> bool:
        """True if the match is genuine.  Call only once ``ready``."""
        if not self._enabled:
            return True
        if self.contained(match):
            return False
        return not self.splits_words(match)

    def contained(self, match: Match) -> bool:
        return any(
            s.first_unit <= match.first_unit and s.last_unit >= match.last_unit
            for s in self._safe
        )

    def splits_words(self, match: Match) -> bool:
        if not match.spaced:
            return False
        collapser = self._collapser
        if collapser.spans_one_token(match.first_unit, match.last_unit):
            # Spaced-out letters: "f u c k".
            return False
        starts_word = collapser.units[match.first_unit].first_in_word
        ends_word = bool(collapser.is_word_end(match.last_unit))
        return not (starts_word and ends_word)

    def trim(self, horizon: int) -> None:
        """Forget evidence ending before unit ``horizon``; nothing can use it."""
        if self._safe:
            self._safe = [s for s in self._safe if s.last_unit >= horizon]
