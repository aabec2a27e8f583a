"""Record types shared by the parser and the statistics helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union


@dataclass(frozen=True)
class Message:
    """A single reassembled chat message.

    Parameters
    ----------
    timestamp:
        Naive ``datetime`` in the export's own wall clock.
    author:
        Author name exactly as it appeared in the header line.
    body:
        Inline header text joined with any continuation lines by single
        spaces.
    """

    timestamp: datetime
    author: str
    body: str


@dataclass(frozen=True)
class Header:
    """A line that opens a new message."""

    raw_timestamp: str
    author: str
    body: str


@dataclass(frozen=True)
class Fragment:
    """A line that continues the message opened before it."""

    body: str


ClassifiedLine = Union[Header, Fragment]


__all__ = [
    "ClassifiedLine",
    "Fragment",
    "Header",
    "Message",
]
