"""Character normalizer: folds each input character to canonical letters.

Every character gets a class:

    LETTER    canonical letter candidates, e.g. "É" -> "e", "1" -> "il"
    SYMBOL    punctuation that may stand in for a letter ("@", "$") or be a
              self-censoring wildcard ("*", "#")
    FILLER    spaces and ordinary punctuation, absorbed by the collapser
    BOUNDARY  line breaks, which end any word or spaced-out sequence
    IGNORED   zero-width, bidi and combining characters, invisible to matching

Nothing here raises: unknown characters default to FILLER.
"""

from __future__ import annotations
import enum
import unicodedata
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType

from unidecode import unidecode


class CharClass(enum.Enum):
    LETTER = "letter"
    SYMBOL = "symbol"
    FILLER = "filler"
    BOUNDARY = "boundary"
    IGNORED = "ignored"


# Source character -> candidate canonical letters (first is the usual reading).
CONFUSABLES: MappingProxyType[str, str] = MappingProxyType({
    # Digits and ASCII symbols
    "0": "o", "1": "il", "2": "z", "3": "e", "4": "a", "5": "s",
    "6": "b", "7": "t", "8": "b", "9": "g",
    "@": "a", "$": "s", "!": "i", "|": "il", "+": "t",
    "€": "e", "¢": "c", "£": "e", "§": "s", "µ": "u", "¡": "i",
    # Cyrillic lookalikes
    "а": "a", "в": "b", "с": "c", "е": "e", "ё": "e", "һ": "h", "і": "i",
    "ї": "i", "ј": "j", "к": "k", "м": "m", "н": "h", "о": "o", "р": "p",
    "ѕ": "s", "т": "t", "у": "y", "х": "x", "ԁ": "d", "ԛ": "q", "ԝ": "w",
    "ь": "b", "п": "n", "и": "u", "г": "r",
    # Greek lookalikes
    "α": "a", "β": "b", "γ": "y", "δ": "d", "ε": "e", "η": "n", "ι": "i",
    "κ": "k", "ν": "v", "ο": "o", "ρ": "p", "τ": "t", "υ": "u", "χ": "x",
    "ω": "w", "μ": "u", "ς": "s", "σ": "o",
    # Latin oddities that do not decompose
    "ł": "l", "ø": "o", "đ": "d", "ħ": "h", "ı": "i", "ß": "b",
})

# Symbols commonly typed in place of letters ("f*ck", "sh#t").
WILDCARDS = frozenset("*#%_@$")

BOUNDARIES = frozenset("\n\r\v\f\u0085\u2028\u2029")


@dataclass(frozen=True, slots=True)
class Glyph:
    """One original character after normalization."""
    index: int
    char: str
    kind: CharClass
    candidates: str = ""     # canonical letters this character may stand for
    wildcard: bool = False   # may stand for any letter (self-censoring)
    spelled: str = ""        # letter sequence of a ligature, e.g. "ff"


@lru_cache(maxsize=4096)
def fold(ch: str) -> tuple[CharClass, str]:
    """Classify one character and return its canonical letter candidates."""
    if ch in BOUNDARIES:
        return CharClass.BOUNDARY, ""
    if unicodedata.category(ch) in ("Mn", "Me", "Cf"):
        return CharClass.IGNORED, ""

    base = _strip_accents(ch.lower())
    if len(base) != 1:
        base = ch

    if base in CONFUSABLES:
        kind = CharClass.LETTER if base.isalnum() else CharClass.SYMBOL
        return kind, CONFUSABLES[base]
    if "a" <= base <= "z":
        return CharClass.LETTER, base

    # Fullwidth, mathematical and enclosed letters.
    compat = _strip_accents(unicodedata.normalize("NFKC", base).lower())
    if len(compat) > 1 and spelling(ch):
        return CharClass.LETTER, compat[0]
    if len(compat) == 1 and "a" <= compat <= "z":
        return CharClass.LETTER, compat
    if len(compat) == 1 and compat in CONFUSABLES and compat.isalnum():
        return CharClass.LETTER, CONFUSABLES[compat]

    if base.isalnum():
        latin = unidecode(base).strip().lower()
        if len(latin) == 1 and "a" <= latin <= "z":
            return CharClass.LETTER, latin
        # A letter of another script: part of a word, matches nothing.
        return CharClass.LETTER, base

    if base in WILDCARDS:
        return CharClass.SYMBOL, ""
    return CharClass.FILLER, ""


@lru_cache(maxsize=1024)
def spelling(ch: str) -> str:
    """Letters of a ligature or compatibility sequence (U+FB00 -> "ff"), else ""."""
    compat = _strip_accents(unicodedata.normalize("NFKC", ch).lower())
    if len(compat) > 1 and all("a" <= c <= "z" for c in compat):
        return compat
    return ""


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(c for c in decomposed if unicodedata.category(c) != "Mn")


class Normalizer:
    """Turns characters into glyphs.  ``replacement`` also counts as a wildcard."""

    __slots__ = ("_replacement",)

    def __init__(self, replacement: str = "*") -> None:
        self._replacement = replacement

    def __call__(self, index: int, ch: str) -> Glyph:
        kind, candidates = fold(ch)
        wildcard = kind is CharClass.SYMBOL and ch in WILDCARDS
        if ch == self._replacement and kind in (CharClass.SYMBOL, CharClass.FILLER):
            kind, wildcard = CharClass.SYMBOL, True
        return Glyph(
            index=index,
            char=ch,
            kind=kind,
            candidates=candidates,
            wildcard=wildcard,
            spelled=spelling(ch) if kind is CharClass.LETTER else "",
        )


def canonical(word: str) -> str:
    """Canonical spelling of a dictionary word: first candidates, letters only."""
    out = []
    for ch in word:
        kind, candidates = fold(ch)
        if kind is CharClass.LETTER and candidates:
            out.append(spelling(ch) or candidates[0])
    return "".join(out)
