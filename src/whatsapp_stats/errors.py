"""Exception types raised while parsing exports and computing statistics."""

from __future__ import annotations


class ChatExportError(Exception):
    """Base class for errors raised by :mod:`whatsapp_stats`."""


class InvalidTimestampError(ChatExportError, ValueError):
    """Raised when a header timestamp is well formed but out of range.

    Parameters
    ----------
    raw:
        The date/time text captured from the header line.
    reason:
        Short description of why the value was rejected.
    """

    def __init__(self, raw: str, reason: str = "out of range") -> None:
        super().__init__(f"Invalid timestamp {raw!r}: {reason}")
        self.raw = raw
        self.reason = reason


class EmptySequenceError(ChatExportError, ValueError):
    """Raised when an aggregation needs at least one message."""
