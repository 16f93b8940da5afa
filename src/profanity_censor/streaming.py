"""Streaming censor: censors text as it arrives in chunks.

For SSE/streaming responses where a word can straddle chunks:
    "fu"  →  "ck you"  →  "!"

Characters are held back only while they could still belong to a match
(or to a safe word that would cancel one) and are released as soon as
that is decided.  Concatenating every ``feed`` result plus ``flush`` gives
exactly what the batch ``Censor.censor_text`` returns for the whole text.

Usage:
    stream = StreamingCensor(Censor())
    for chunk in sse_stream:
        ready_text = stream.feed(chunk)
        if ready_text:
            yield ready_text
    # Flush whatever is still held back
    yield stream.flush()
    stream.analysis           # Analysis of everything fed
"""

from __future__ import annotations

from .censor import Censor
from .engine import Scanner
from .types import Analysis


class StreamingCensor:
    """Feeds chunks through one Scanner and returns text that is final."""

    __slots__ = ("_scanner",)

    def __init__(self, censor: Censor | None = None) -> None:
        self._scanner: Scanner = (censor or Censor()).scanner()

    def feed(self, chunk: str) -> str:
        """Feed a chunk, return any text ready to emit."""
        scanner = self._scanner
        return "".join(scanner.feed(ch) for ch in chunk)

    def feed_char(self, ch: str) -> tuple[Analysis, str]:
        """Feed one character, return the analysis so far and released text."""
        out = self._scanner.feed(ch)
        return self._scanner.analysis(), out

    def flush(self) -> str:
        """End of stream: release everything still held back.

        Further calls to ``feed`` raise RuntimeError.
        """
        return self._scanner.finish()

    @property
    def analysis(self) -> Analysis:
        return self._scanner.analysis()

    @property
    def finished(self) -> bool:
        return self._scanner.finished
