"""Tests for the streaming censor."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from profanity_censor import Analysis, Censor, CensorConfig, StreamingCensor, Type


TEXTS = [
    "hello crap",
    "HELLO fuck shit WORLD!",
    "f u c k you",
    "assassin and classic push it",
    "craaaap\nshit\r\nthanks",
    "what the f*ck is this",
    "",
]


def run_chunks(text, size, censor=None):
    stream = StreamingCensor(censor or Censor())
    parts = [stream.feed(text[i:i + size]) for i in range(0, len(text), size)]
    parts.append(stream.flush())
    return "".join(parts), stream.analysis


# ── Equivalence with batch ───────────────────────────────────────────

@pytest.mark.parametrize("text", TEXTS)
@pytest.mark.parametrize("size", [1, 2, 3, 7, 1000])
def test_stream_matches_batch(text, size):
    c = Censor()
    batch_text, batch_analysis = c.censor(text)
    stream_text, stream_analysis = run_chunks(text, size, c)
    assert stream_text == batch_text
    assert stream_analysis == batch_analysis


def test_stream_matches_batch_with_options():
    c = Censor(CensorConfig(censor_replacement="#", ignore_false_positives=True))
    text = "assassin crap"
    assert run_chunks(text, 1, c)[0] == c.censor_text(text)


# ── Incremental release ──────────────────────────────────────────────

def test_word_held_until_decided():
    stream = StreamingCensor()
    assert stream.feed("shit") == ""
    assert stream.feed("\n") == "s***\n"
    assert stream.flush() == ""


def test_split_word_across_chunks():
    stream = StreamingCensor()
    out = stream.feed("cr") + stream.feed("ap") + stream.flush()
    assert out == "c***"


def test_feed_char_reports_analysis():
    stream = StreamingCensor()
    results = [stream.feed_char(ch) for ch in "crap\n"]
    analysis, text = results[-1]
    assert isinstance(analysis, Analysis)
    assert analysis.is_(Type.PROFANE)
    assert text == "c***\n"
    assert results[0][0].type == Type.NONE


def test_flush_finishes_stream():
    stream = StreamingCensor()
    stream.feed("hello")
    stream.flush()
    assert stream.finished
    assert stream.flush() == ""
    with pytest.raises(RuntimeError):
        stream.feed("more")


def test_safe_only_decided_at_end():
    stream = StreamingCensor()
    stream.feed("thanks")
    assert stream.analysis.isnt(Type.SAFE)
    stream.flush()
    assert stream.analysis.is_(Type.SAFE)


def test_censor_stream_helper():
    stream = Censor().stream()
    assert isinstance(stream, StreamingCensor)
    assert stream.feed("crap") + stream.flush() == "c***"
