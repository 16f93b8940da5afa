"""Dictionary matcher: walks every candidate start through the trie at once.

A candidate is seeded at each letter unit, so embedded words are found
("ass" inside "assassin") alongside the longer words containing them.  Every
entry a candidate reaches is reported, not only the longest.

Repeated letters are absorbed ("craap"), filler gaps mark a candidate as
spaced ("c r a p"), and wildcard symbols ("f*ck") may stand for any letter
when self-censoring is recognised.
"""

from __future__ import annotations
from dataclasses import dataclass, replace

from .collapse import Unit
from .dictionary import Dictionary, Entry
from .types import Match


@dataclass(frozen=True, slots=True)
class Candidate:
    """A partial walk through the trie."""
    node: int
    start: int          # first unit
    last: str           # last letter consumed
    spaced: bool = False
    wildcard: bool = False


class Matcher:
    """Incremental matcher over the unit stream."""

    __slots__ = ("_dictionary", "_units", "_self_censoring", "_active")

    def __init__(
        self,
        dictionary: Dictionary,
        units: list[Unit],
        *,
        self_censoring: bool = True,
    ) -> None:
        self._dictionary = dictionary
        self._units = units             # shared with the collapser
        self._self_censoring = self_censoring
        self._active: dict[tuple[int, int, str], Candidate] = {}

    def earliest_start(self, *, gap: int = 0, broken: bool = False) -> int | None:
        """First unit of the oldest candidate that can still produce a hit.

        ``gap`` and ``broken`` describe filler seen since the last unit: a
        boundary ends every candidate, and any gap ends those that cannot grow.
        """
        if broken:
            return None
        live = self._active.values()
        if gap:
            live = [c for c in live if self._dictionary.has_children(c.node)]
        return min((c.start for c in live), default=None)

    def finish(self) -> None:
        self._active = {}

    def push(self, unit: Unit) -> list[Match]:
        """Advance all candidates over one unit, return the dictionary hits."""
        trie = self._dictionary
        found: dict[tuple[int, int, str], Candidate] = {}
        hits: dict[tuple[int, int], Match] = {}

        def keep(c: Candidate) -> None:
            key = (c.node, c.start, c.last)
            old = found.get(key)
            if old is not None:
                c = replace(c, spaced=old.spaced and c.spaced, wildcard=old.wildcard and c.wildcard)
            found[key] = c

        def hit(c: Candidate, entry: Entry) -> None:
            m = Match(
                first_unit=c.start,
                last_unit=unit.index,
                start=self._units[c.start].start,
                end=unit.end,
                word=entry.word,
                type=entry.type,
                spaced=c.spaced,
                self_censored=c.wildcard,
            )
            key = (c.start, c.node)
            old = hits.get(key)
            if old is not None:
                m = replace(
                    m,
                    spaced=old.spaced and m.spaced,
                    self_censored=old.self_censored and m.self_censored,
                )
            hits[key] = m

        def advance(c: Candidate, letter: str, node: int, *, wildcard: bool = False) -> None:
            nc = Candidate(node, c.start, letter, c.spaced, c.wildcard or wildcard)
            keep(nc)
            entry = trie.entry(node)
            # A word may not end on a wildcard: "as*" is not "ass".
            if entry is not None and not wildcard:
                hit(nc, entry)

        carried = list(self._active.values())
        if unit.gap:
            if unit.broken:
                carried = []
            else:
                carried = [replace(c, spaced=True) for c in carried]

        for c in carried:
            for letter in unit.candidates:
                nxt = trie.child(c.node, letter)
                if nxt is not None:
                    advance(c, letter, nxt)
                    if unit.repeat:
                        again = trie.child(nxt, letter)
                        if again is not None:
                            advance(c, letter, again)
                if letter == c.last and not unit.gap:
                    keep(c)
                    entry = trie.entry(c.node)
                    if entry is not None:
                        hit(c, entry)

            if unit.wildcard and not unit.gap:
                if self._self_censoring and self._units[c.start].first_in_word:
                    for letter, nxt in trie.children(c.node):
                        advance(c, letter, nxt, wildcard=True)
                        if unit.repeat:
                            for letter2, again in trie.children(nxt):
                                advance(c, letter2, again, wildcard=True)
                if not unit.candidates:
                    keep(c)

        if unit.candidates:
            seed = Candidate(Dictionary.ROOT, unit.index, "")
            for letter in unit.candidates:
                nxt = trie.child(Dictionary.ROOT, letter)
                if nxt is not None:
                    advance(seed, letter, nxt)
                    if unit.repeat:
                        again = trie.child(nxt, letter)
                        if again is not None:
                            advance(seed, letter, again)

        self._active = found
        return list(hits.values())
