"""Core types."""

from __future__ import annotations
import re
from dataclasses import dataclass, field


class InvalidOptionError(ValueError):
    """A censor option was malformed."""


class DictionaryError(RuntimeError):
    """The word dictionary could not be built."""


# Six categories of three severity bits each, plus SAFE.
_CATEGORY_BITS = 3
_CATEGORY_COUNT = 6
_WEIGHT_COUNT = 5   # SPAM is never read from a word list
_ALL_BITS = (1 << (_CATEGORY_BITS * _CATEGORY_COUNT + 1)) - 1

_CATEGORY_NAMES = ("profane", "offensive", "sexual", "mean", "evasive", "spam")


class Type(int):
    """Bitset of categories and severities.  Combine with ``&``, ``|``, ``~``.

    Severity bits are ordered mild, moderate, severe within each category,
    so ``PROFANE & MODERATE`` reads as "moderately or severely profane".
    """

    __slots__ = ()

    PROFANE: Type
    OFFENSIVE: Type
    SEXUAL: Type
    MEAN: Type
    EVASIVE: Type
    SPAM: Type
    SAFE: Type
    MILD: Type
    MODERATE: Type
    SEVERE: Type
    INAPPROPRIATE: Type
    ANY: Type
    NONE: Type

    def __and__(self, other: int) -> Type:
        return Type(int(self) & int(other))

    __rand__ = __and__

    def __or__(self, other: int) -> Type:
        return Type(int(self) | int(other))

    __ror__ = __or__

    def __xor__(self, other: int) -> Type:
        return Type(int(self) ^ int(other))

    __rxor__ = __xor__

    def __invert__(self) -> Type:
        return Type(~int(self) & _ALL_BITS)

    def is_(self, threshold: int) -> bool:
        """True if any bit of ``threshold`` is present."""
        return int(self) & int(threshold) != 0

    def isnt(self, threshold: int) -> bool:
        return not self.is_(threshold)

    @classmethod
    def from_weights(cls, weights: tuple[int, ...] | list[int]) -> Type:
        """Build from (profane, offensive, sexual, mean, evasive) weights 0-3."""
        if len(weights) != _WEIGHT_COUNT:
            raise DictionaryError(f"expected {_WEIGHT_COUNT} weights, got {len(weights)}")
        bits = 0
        for i, weight in enumerate(weights):
            if weight >= 3:
                severity = 0b100
            elif weight == 2:
                severity = 0b010
            elif weight == 1:
                severity = 0b001
            else:
                severity = 0
            bits |= severity << (i * _CATEGORY_BITS)
        return cls(bits)

    def at(self, weight: int) -> Type:
        """These categories at exactly one severity: 1 mild, 2 moderate, 3 severe."""
        if weight not in (1, 2, 3):
            raise InvalidOptionError(f"severity weight must be 1-3, got {weight}")
        return self & Type(_every_category(1 << (weight - 1)))

    def to_weights(self) -> tuple[int, ...]:
        out = []
        for i in range(_WEIGHT_COUNT):
            bits = (int(self) >> (i * _CATEGORY_BITS)) & 0b111
            out.append(_severity_weight(bits))
        return tuple(out)

    def describe(self) -> str:
        """Human readable summary, e.g. "severely profane, mildly spam"."""
        parts = []
        for i, name in enumerate(_CATEGORY_NAMES):
            bits = (int(self) >> (i * _CATEGORY_BITS)) & 0b111
            if bits:
                adverb = ("mildly", "moderately", "severely")[_severity_weight(bits) - 1]
                parts.append(f"{adverb} {name}")
        if self.is_(Type.SAFE):
            parts.append("safe")
        return ", ".join(parts) if parts else "no detections"

    def __repr__(self) -> str:
        return f"Type({self.describe()})"


def _severity_weight(bits: int) -> int:
    # Highest severity wins when several bits are set.
    if bits & 0b100:
        return 3
    if bits & 0b010:
        return 2
    if bits & 0b001:
        return 1
    return 0


def _every_category(pattern: int) -> int:
    return sum(pattern << (i * _CATEGORY_BITS) for i in range(_CATEGORY_COUNT))


Type.PROFANE = Type(0b111)
Type.OFFENSIVE = Type(0b111 << 3)
Type.SEXUAL = Type(0b111 << 6)
Type.MEAN = Type(0b111 << 9)
Type.EVASIVE = Type(0b111 << 12)
Type.SPAM = Type(0b111 << 15)
Type.SAFE = Type(1 << 18)
Type.MILD = Type(_every_category(0b111))
Type.MODERATE = Type(_every_category(0b110))
Type.SEVERE = Type(_every_category(0b100))
Type.INAPPROPRIATE = Type.PROFANE | Type.OFFENSIVE | Type.SEXUAL | (Type.MEAN & Type.SEVERE)
Type.ANY = Type.PROFANE | Type.OFFENSIVE | Type.SEXUAL | Type.MEAN | Type.EVASIVE | Type.SPAM
Type.NONE = Type(0)

_NAMED = {
    name: getattr(Type, name)
    for name in (
        "PROFANE", "OFFENSIVE", "SEXUAL", "MEAN", "EVASIVE", "SPAM", "SAFE",
        "MILD", "MODERATE", "SEVERE", "INAPPROPRIATE", "ANY", "NONE",
    )
}
_EXPR_TOKEN = re.compile(r"\s*(?:([A-Za-z_]+)|(&|\|))")


def parse_type(value: int | str) -> Type:
    """Parse a threshold such as ``"PROFANE & SEVERE | SEXUAL"``.

    ``&`` binds tighter than ``|``.  Integers are range-checked and wrapped.
    """
    if isinstance(value, bool):
        raise InvalidOptionError(f"not a type mask: {value!r}")
    if isinstance(value, int):
        if not 0 <= value <= _ALL_BITS:
            raise InvalidOptionError(f"type mask out of range: {value}")
        return Type(value)
    if not isinstance(value, str) or not value.strip():
        raise InvalidOptionError(f"not a type mask: {value!r}")

    terms: list[Type] = []
    current: Type | None = None
    expect_name = True
    pos = 0
    text = value.strip()
    while pos < len(text):
        m = _EXPR_TOKEN.match(text, pos)
        if not m:
            raise InvalidOptionError(f"cannot parse type mask: {value!r}")
        pos = m.end()
        name, op = m.groups()
        if expect_name:
            if name is None or name.upper() not in _NAMED:
                raise InvalidOptionError(f"unknown type name in {value!r}")
            t = _NAMED[name.upper()]
            current = t if current is None else current & t
            expect_name = False
        else:
            if op is None:
                raise InvalidOptionError(f"expected '&' or '|' in {value!r}")
            if op == "|":
                terms.append(current)
                current = None
            expect_name = True
    if expect_name:
        raise InvalidOptionError(f"dangling operator in {value!r}")
    terms.append(current)

    result = Type.NONE
    for t in terms:
        result |= t
    return result


@dataclass(frozen=True, slots=True)
class Token:
    """A compacted candidate word and the original span it was built from."""
    first_unit: int
    last_unit: int
    start: int             # original index, inclusive
    end: int               # original index, exclusive (inner filler included)
    text: str              # canonical letters, first candidate of each unit


@dataclass(frozen=True, slots=True)
class Match:
    """A dictionary hit over a range of collapsed units."""
    first_unit: int
    last_unit: int
    start: int             # original index, inclusive
    end: int               # original index, exclusive
    word: str              # canonical dictionary spelling
    type: Type
    spaced: bool = False           # crossed a filler gap
    self_censored: bool = False    # relied on a wildcard symbol


@dataclass(frozen=True, slots=True)
class Analysis:
    """Aggregated classification of one input."""
    type: Type = Type.NONE
    matches: tuple[Match, ...] = field(default_factory=tuple)

    def is_(self, threshold: int) -> bool:
        return self.type.is_(threshold)

    def isnt(self, threshold: int) -> bool:
        return self.type.isnt(threshold)

    def describe(self) -> str:
        return self.type.describe()
