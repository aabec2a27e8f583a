"""Descriptive statistics over a reassembled message sequence.

Every helper here is a pure function of its arguments. Message sequences are
only read, never modified, so the helpers can be combined freely.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Iterator, List, Mapping, Optional, Sequence

from .errors import EmptySequenceError
from .messages import Message
from .symbols import SYMBOL_PATTERN, iter_symbols

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR

# Months and years are averages over the Gregorian cycle.
SECONDS_PER_UNIT: Mapping[str, float] = {
    "seconds": 1,
    "minutes": SECONDS_PER_MINUTE,
    "hours": SECONDS_PER_HOUR,
    "days": SECONDS_PER_DAY,
    "weeks": 7 * SECONDS_PER_DAY,
    "months": 30.436875 * SECONDS_PER_DAY,
    "years": 365.25 * SECONDS_PER_DAY,
}

DURATION_UNITS = tuple(SECONDS_PER_UNIT)


@dataclass(frozen=True)
class ChatSummary:
    """Headline numbers for a conversation.

    ``first`` and ``last`` (and ``span_days``) are ``None`` for an empty
    sequence.
    """

    message_count: int
    authors: List[str]
    messages_per_author: Dict[str, int]
    first: Optional[datetime]
    last: Optional[datetime]
    span_days: Optional[float]


def authors(messages: Sequence[Message]) -> List[str]:
    """Return distinct authors in order of first appearance."""

    seen: Dict[str, None] = {}
    for message in messages:
        seen.setdefault(message.author, None)
    return list(seen)


def messages_by_author(author: str, messages: Sequence[Message]) -> List[Message]:
    """Return messages whose author contains ``author`` (case-sensitive)."""

    return [message for message in messages if author in message.author]


def messages_on_date(day: date, messages: Sequence[Message]) -> List[Message]:
    """Return messages sent on the calendar date of ``day``.

    ``day`` may be a ``date`` or a ``datetime``; for the latter only the
    year, month and day are compared.
    """

    if isinstance(day, datetime):
        day = day.date()
    return [message for message in messages if message.timestamp.date() == day]


def message_at(index: int, messages: Sequence[Message]) -> Message:
    """Return the message at ``index`` (negative indices count from the end)."""

    return messages[index]


def first_timestamp(messages: Sequence[Message]) -> datetime:
    """Return the timestamp of the first message.

    Raises
    ------
    EmptySequenceError
        If ``messages`` is empty.
    """

    if not messages:
        raise EmptySequenceError("first_timestamp requires at least one message")
    return messages[0].timestamp


def last_timestamp(messages: Sequence[Message]) -> datetime:
    """Return the timestamp of the last message.

    Raises
    ------
    EmptySequenceError
        If ``messages`` is empty.
    """

    if not messages:
        raise EmptySequenceError("last_timestamp requires at least one message")
    return messages[-1].timestamp


def duration_in(unit: str, messages: Sequence[Message]) -> float:
    """Return the time between the first and last message in ``unit``.

    Parameters
    ----------
    unit:
        One of ``seconds``, ``minutes``, ``hours``, ``days``, ``weeks``,
        ``months`` or ``years``.
    messages:
        Message sequence in input order. The result is negative when the
        last message predates the first one.

    Raises
    ------
    ValueError
        If ``unit`` is not supported.
    EmptySequenceError
        If ``messages`` is empty.
    """

    try:
        divisor = SECONDS_PER_UNIT[unit]
    except KeyError:
        expected = ", ".join(DURATION_UNITS)
        raise ValueError(
            f"Unsupported duration unit: {unit!r} (expected one of {expected})"
        ) from None
    if not messages:
        raise EmptySequenceError("duration_in requires at least one message")
    delta = messages[-1].timestamp - messages[0].timestamp
    return delta.total_seconds() / divisor


def iter_words(messages: Sequence[Message]) -> Iterator[str]:
    """Yield every whitespace-separated token of every message body."""

    for message in messages:
        yield from message.body.split()


def word_frequency(messages: Sequence[Message]) -> Counter[str]:
    """Count verbatim tokens (no case folding or punctuation stripping)."""

    return Counter(iter_words(messages))


def symbol_frequency(messages: Sequence[Message]) -> Counter[str]:
    """Count symbol and emoji codepoints across all message bodies."""

    counts: Counter[str] = Counter()
    for message in messages:
        counts.update(iter_symbols(message.body, SYMBOL_PATTERN))
    return counts


def message_counts(messages: Sequence[Message]) -> Counter[str]:
    """Count messages per author."""

    return Counter(message.author for message in messages)


def summarize(messages: Sequence[Message]) -> ChatSummary:
    """Bundle the headline statistics for ``messages``."""

    if not messages:
        return ChatSummary(
            message_count=0,
            authors=[],
            messages_per_author={},
            first=None,
            last=None,
            span_days=None,
        )
    per_author = message_counts(messages)
    roster = authors(messages)
    return ChatSummary(
        message_count=len(messages),
        authors=roster,
        messages_per_author={name: per_author[name] for name in roster},
        first=first_timestamp(messages),
        last=last_timestamp(messages),
        span_days=duration_in("days", messages),
    )


__all__ = [
    "ChatSummary",
    "DURATION_UNITS",
    "SECONDS_PER_UNIT",
    "authors",
    "duration_in",
    "first_timestamp",
    "iter_words",
    "last_timestamp",
    "message_at",
    "message_counts",
    "messages_by_author",
    "messages_on_date",
    "summarize",
    "symbol_frequency",
    "word_frequency",
]
