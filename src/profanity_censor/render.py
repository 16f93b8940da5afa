"""Censoring renderer: length-preserving replacement of matched spans."""

from __future__ import annotations

from .types import Match, Type


class Renderer:
    """Marks censored original positions and renders text slices."""

    __slots__ = ("_threshold", "_first_threshold", "_replacement", "_marked")

    def __init__(
        self,
        *,
        threshold: Type,
        first_character_threshold: Type,
        replacement: str,
    ) -> None:
        self._threshold = threshold
        self._first_threshold = first_character_threshold
        self._replacement = replacement
        self._marked: set[int] = set()

    def mark(self, match: Match) -> None:
        if match.type.isnt(self._threshold):
            return
        start = match.start
        if match.type.isnt(self._first_threshold):
            start += 1
        self._marked.update(range(start, match.end))

    def render(self, chars: list[str], start: int, stop: int) -> str:
        marked = self._marked
        out = [
            self._replacement if i in marked else chars[i]
            for i in range(start, stop)
        ]
        marked.difference_update(range(start, stop))
        return "".join(out)
