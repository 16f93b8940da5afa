"""Censor: the main API.

Usage:
    from profanity_censor import Censor, Type

    censor = Censor()                  # reusable, thread-safe
    text, analysis = censor.censor("hello crap")
    print(text)                        # "hello c***"
    analysis.is_(Type.INAPPROPRIATE)   # True

    # One-shot helpers on a shared default Censor
    from profanity_censor import censor as censor_text, is_inappropriate
    censor_text("f u c k")             # "f******"
    is_inappropriate("hello")          # False
"""

from __future__ import annotations
import threading
from dataclasses import dataclass

from .dictionary import Dictionary, default_dictionary
from .engine import Scanner
from .types import Analysis, InvalidOptionError, Type, parse_type


@dataclass
class CensorConfig:
    """Configuration for the Censor."""
    # Matches with any bit of this mask are replaced.
    censor_threshold: Type = Type.INAPPROPRIATE
    # Matches with any bit of this mask lose their first character too.
    censor_first_character_threshold: Type = Type.OFFENSIVE & Type.SEVERE
    ignore_false_positives: bool = False
    ignore_self_censoring: bool = False
    censor_replacement: str = "*"

    def validate(self) -> None:
        """Raise InvalidOptionError for malformed options."""
        for name in ("censor_threshold", "censor_first_character_threshold"):
            value = getattr(self, name)
            if not isinstance(value, int):
                raise InvalidOptionError(f"{name} must be a Type mask, got {value!r}")
            parse_type(value)   # range and bool check
        for name in ("ignore_false_positives", "ignore_self_censoring"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidOptionError(f"{name} must be a bool")

        replacement = self.censor_replacement
        if not isinstance(replacement, str) or len(replacement) != 1:
            raise InvalidOptionError(
                f"censor_replacement must be a single character, got {replacement!r}"
            )
        if replacement.isalnum() or replacement.isspace():
            raise InvalidOptionError(
                f"censor_replacement must not be a letter, digit or space: {replacement!r}"
            )


class Censor:
    """Profanity detector and censor.

    Every call runs its own Scanner, so one Censor can serve many threads.
    The dictionary is shared and immutable.
    """

    def __init__(
        self,
        config: CensorConfig | None = None,
        *,
        dictionary: Dictionary | None = None,
    ) -> None:
        self.config = config or CensorConfig()
        self.config.validate()
        self._dictionary = dictionary

    @property
    def dictionary(self) -> Dictionary:
        if self._dictionary is not None:
            return self._dictionary
        return default_dictionary()

    def scanner(self) -> Scanner:
        """A fresh single-use scanner bound to this configuration."""
        return Scanner(self.config, self.dictionary)

    def censor(self, text: str) -> tuple[str, Analysis]:
        """Censor text, returning the censored text and its analysis.

        The output has exactly as many characters as the input.
        """
        scanner = self.scanner()
        parts = [scanner.feed(ch) for ch in text]
        parts.append(scanner.finish())
        return "".join(parts), scanner.analysis()

    def censor_text(self, text: str) -> str:
        return self.censor(text)[0]

    def analyze(self, text: str) -> Analysis:
        return self.censor(text)[1]

    def stream(self):
        """A StreamingCensor for text arriving in chunks."""
        from .streaming import StreamingCensor
        return StreamingCensor(self)

    def censor_messages(
        self,
        messages: list[dict],
        *,
        content_key: str = "content",
    ) -> list[dict]:
        """Censor a list of chat messages (``{"role": ..., "content": ...}``).

        Returns new message dicts with content censored.  Does NOT
        mutate the originals.
        """
        out: list[dict] = []
        for msg in messages:
            content = msg.get(content_key)
            if isinstance(content, str) and content:
                out.append({**msg, content_key: self.censor_text(content)})
            else:
                out.append(msg)
        return out


# Shared Censor with default options for the module-level helpers.
_default: Censor | None = None
_default_lock = threading.Lock()


def _default_censor() -> Censor:
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = Censor()
    return _default


def _pick(config: CensorConfig | None) -> Censor:
    return Censor(config) if config is not None else _default_censor()


def censor(text: str, config: CensorConfig | None = None) -> str:
    """Censor text with default (or the given) options."""
    return _pick(config).censor_text(text)


def analyze(text: str, config: CensorConfig | None = None) -> Analysis:
    return _pick(config).analyze(text)


def is_inappropriate(text: str) -> bool:
    return analyze(text).is_(Type.INAPPROPRIATE)


def is_(text: str, threshold: int) -> bool:
    """True if the analysis of ``text`` shares any bit with ``threshold``."""
    return analyze(text).is_(threshold)


def isnt(text: str, threshold: int) -> bool:
    return analyze(text).isnt(threshold)
