"""Compiled word dictionary: a trie stored as an arena of indexed nodes.

Built once and never mutated, so one instance is shared by every scan on
every thread.  Node 0 is the root.

    dictionary = build_dictionary([("crap", Type.PROFANE & Type.MODERATE)])
    node = dictionary.ROOT
    for letter in "crap":
        node = dictionary.child(node, letter)
    dictionary.entry(node)   # Entry(word='crap', ...)
"""

from __future__ import annotations
import logging
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from .normalize import canonical
from .types import DictionaryError, Type

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Entry:
    """One dictionary word."""
    word: str               # canonical spelling
    type: Type
    suppresses: bool        # known-safe word: cancels flagged words inside it
    words: int = 1          # space-separated words in the original phrase

    @property
    def flagged(self) -> bool:
        return self.type.is_(Type.ANY)

    @property
    def safe(self) -> bool:
        return self.type.is_(Type.SAFE)


class Dictionary:
    """Immutable trie.  Nodes are addressed by index."""

    ROOT = 0

    __slots__ = ("_children", "_entries", "_count")

    def __init__(
        self,
        children: tuple[Mapping[str, int], ...],
        entries: tuple[Entry | None, ...],
    ) -> None:
        self._children = children
        self._entries = entries
        self._count = sum(1 for e in entries if e is not None)

    def child(self, node: int, letter: str) -> int | None:
        return self._children[node].get(letter)

    def children(self, node: int) -> Iterable[tuple[str, int]]:
        return self._children[node].items()

    def has_children(self, node: int) -> bool:
        return bool(self._children[node])

    def entry(self, node: int) -> Entry | None:
        return self._entries[node]

    def lookup(self, word: str) -> Entry | None:
        """Find the entry spelled like ``word`` (after canonicalization)."""
        node: int | None = self.ROOT
        for letter in canonical(word):
            node = self.child(node, letter)
            if node is None:
                return None
        return self._entries[node]

    @property
    def node_count(self) -> int:
        return len(self._children)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Entry]:
        return (e for e in self._entries if e is not None)


def build_dictionary(words: Iterable[tuple[str, Type] | Entry]) -> Dictionary:
    """Compile (spelling, type) pairs into a Dictionary.

    Duplicate spellings are merged by OR-ing their types.  Raises
    DictionaryError for empty input, unspellable words, or a word that ends
    up both SAFE and flagged.
    """
    merged: dict[str, Type] = {}
    phrase_words: dict[str, int] = {}
    for item in words:
        if isinstance(item, Entry):
            word, typ, count = item.word, item.type, item.words
        else:
            word, typ = item
            count = sum(1 for part in word.split() if canonical(part))
        spelling = canonical(word)
        if not spelling:
            raise DictionaryError(f"word has no letters: {word!r}")
        merged[spelling] = merged.get(spelling, Type.NONE) | Type(typ)
        phrase_words[spelling] = max(phrase_words.get(spelling, 1), count)

    if not merged:
        raise DictionaryError("dictionary is empty")

    children: list[dict[str, int]] = [{}]
    entries: list[Entry | None] = [None]
    for spelling, typ in merged.items():
        if typ.is_(Type.SAFE) and typ.is_(Type.ANY):
            raise DictionaryError(f"word is both safe and flagged: {spelling!r}")
        node = Dictionary.ROOT
        for letter in spelling:
            nxt = children[node].get(letter)
            if nxt is None:
                nxt = len(children)
                children[node][letter] = nxt
                children.append({})
                entries.append(None)
            node = nxt
        entries[node] = Entry(
            word=spelling,
            type=typ,
            suppresses=not typ.is_(Type.ANY),
            words=phrase_words[spelling],
        )

    logger.debug("built dictionary: %d words, %d nodes", len(merged), len(children))
    return Dictionary(
        tuple(MappingProxyType(c) for c in children),
        tuple(entries),
    )


# Lazy singleton, built on first use and published only once complete.
_default: Dictionary | None = None
_default_lock = threading.Lock()


def default_dictionary() -> Dictionary:
    """The shared dictionary of the built-in word pack."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                from .wordlist import default_entries
                _default = build_dictionary(default_entries())
    return _default
