"""
Tests for the message sequence statistics helpers.
"""

from __future__ import annotations

from datetime import date, datetime

import pytest

from whatsapp_stats.errors import EmptySequenceError
from whatsapp_stats.messages import Message
from whatsapp_stats.parser import reassemble
from whatsapp_stats.stats import (
    authors,
    duration_in,
    first_timestamp,
    iter_words,
    last_timestamp,
    message_at,
    message_counts,
    messages_by_author,
    messages_on_date,
    summarize,
    symbol_frequency,
    word_frequency,
)
from whatsapp_stats.symbols import build_symbol_pattern, iter_symbols


def _sample_messages() -> list[Message]:
    """Return the two-message sample conversation."""

    return reassemble(
        [
            "3/6/24, 09:16 - John Smith: Hey everyone!",
            "3/6/24, 09:18 - Sarah Johnson: Hi John! Great idea 😊",
            "still there?",
        ]
    )


def _span_messages() -> list[Message]:
    """Return messages exactly two days apart."""

    return [
        Message(datetime(2024, 3, 6, 9, 16), "A", "start"),
        Message(datetime(2024, 3, 7, 12, 0), "B", "middle"),
        Message(datetime(2024, 3, 8, 9, 16), "A", "end"),
    ]


def test_authors_first_seen_order_without_duplicates() -> None:
    """authors should list each author once, in order of appearance."""

    messages = [
        Message(datetime(2024, 1, 1), "Zoe", "a"),
        Message(datetime(2024, 1, 1), "Adam", "b"),
        Message(datetime(2024, 1, 1), "Zoe", "c"),
        Message(datetime(2024, 1, 1), "zoe", "d"),
    ]

    assert authors(messages) == ["Zoe", "Adam", "zoe"]
    assert authors([]) == []


def test_messages_by_author_uses_substring_match() -> None:
    """Author filtering matches substrings, case-sensitively."""

    messages = _sample_messages()

    assert [m.author for m in messages_by_author("John", messages)] == [
        "John Smith",
        "Sarah Johnson",
    ]
    assert [m.author for m in messages_by_author("Sarah", messages)] == [
        "Sarah Johnson"
    ]
    assert messages_by_author("john", messages) == []


def test_messages_on_date_matches_calendar_day() -> None:
    """Both sample messages fall on 2024-03-06 and no other day."""

    messages = _sample_messages()

    assert messages_on_date(date(2024, 3, 6), messages) == messages
    assert messages_on_date(datetime(2024, 3, 6, 23, 59), messages) == messages
    assert messages_on_date(date(2024, 3, 7), messages) == []


def test_first_and_last_timestamp() -> None:
    """First and last timestamps come from the sequence ends."""

    messages = _span_messages()

    assert first_timestamp(messages) == datetime(2024, 3, 6, 9, 16)
    assert last_timestamp(messages) == datetime(2024, 3, 8, 9, 16)


def test_duration_in_days_is_exact() -> None:
    """Two days between first and last message is exactly 2."""

    assert duration_in("days", _span_messages()) == 2


@pytest.mark.parametrize(
    ("unit", "expected"),
    [
        ("seconds", 172800.0),
        ("minutes", 2880.0),
        ("hours", 48.0),
        ("weeks", 2 / 7),
        ("months", 2 / 30.436875),
        ("years", 2 / 365.25),
    ],
)
def test_duration_in_other_units(unit: str, expected: float) -> None:
    """Units divide the elapsed seconds by their declared length."""

    assert duration_in(unit, _span_messages()) == pytest.approx(expected)


def test_duration_in_rejects_unknown_unit() -> None:
    """Unknown units raise instead of silently falling back to seconds."""

    with pytest.raises(ValueError, match="fortnights"):
        duration_in("fortnights", _span_messages())


@pytest.mark.parametrize(
    "func",
    [
        first_timestamp,
        last_timestamp,
        lambda messages: duration_in("days", messages),
    ],
)
def test_empty_sequence_raises(func) -> None:
    """Aggregations needing a message fail explicitly on empty input."""

    with pytest.raises(EmptySequenceError):
        func([])


def test_word_frequency_counts_verbatim_tokens() -> None:
    """Tokens are split on whitespace without case folding."""

    messages = [Message(datetime(2024, 1, 1), "A", "a a b")]

    assert word_frequency(messages) == {"a": 2, "b": 1}


def test_word_frequency_discards_empty_tokens_and_keeps_punctuation() -> None:
    """Repeated whitespace never produces empty tokens."""

    messages = [
        Message(datetime(2024, 1, 1), "A", "Hi  hi,   Hi"),
        Message(datetime(2024, 1, 1), "B", ""),
    ]

    assert word_frequency(messages) == {"Hi": 2, "hi,": 1}
    assert list(iter_words(messages)) == ["Hi", "hi,", "Hi"]


def test_symbol_frequency_sample() -> None:
    """The sample conversation contains a single smiley."""

    assert symbol_frequency(_sample_messages()) == {"😊": 1}


def test_symbol_frequency_counts_each_codepoint() -> None:
    """Symbols from several ranges are counted; variation selectors are not."""

    messages = [
        Message(datetime(2024, 1, 1), "A", "☀️ hot 🔥🔥"),
        Message(datetime(2024, 1, 1), "B", "👍 ok ✅ plain text"),
    ]

    counts = symbol_frequency(messages)

    assert counts == {"☀": 1, "🔥": 2, "👍": 1, "✅": 1}


def test_build_symbol_pattern_uses_supplied_ranges() -> None:
    """A custom range table changes what is matched."""

    pattern = build_symbol_pattern([(ord("a"), ord("c"))])

    assert list(iter_symbols("abcdef", pattern)) == ["a", "b", "c"]
    with pytest.raises(ValueError):
        build_symbol_pattern([(0x2700, 0x2600)])


def test_message_at_and_counts() -> None:
    """Positional access and per-author counts."""

    messages = _span_messages()

    assert message_at(1, messages).body == "middle"
    assert message_at(-1, messages).body == "end"
    with pytest.raises(IndexError):
        message_at(3, messages)
    assert message_counts(messages) == {"A": 2, "B": 1}


def test_summarize_handles_empty_and_populated_sequences() -> None:
    """summarize reports None timestamps for an empty sequence."""

    empty = summarize([])
    assert empty.message_count == 0
    assert empty.first is None
    assert empty.span_days is None

    summary = summarize(_span_messages())
    assert summary.message_count == 3
    assert summary.authors == ["A", "B"]
    assert summary.messages_per_author == {"A": 2, "B": 1}
    assert summary.first == datetime(2024, 3, 6, 9, 16)
    assert summary.last == datetime(2024, 3, 8, 9, 16)
    assert summary.span_days == 2
