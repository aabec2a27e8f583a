"""pandas views of message sequences and frequency tables."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

import pandas as pd

from .messages import Message

MESSAGE_COLUMNS = ["timestamp", "author", "body"]


def messages_to_frame(messages: Sequence[Message]) -> pd.DataFrame:
    """Return one row per message with ``timestamp``, ``author`` and ``body``."""

    frame = pd.DataFrame(
        [(m.timestamp, m.author, m.body) for m in messages],
        columns=MESSAGE_COLUMNS,
    )
    frame["timestamp"] = pd.to_datetime(frame["timestamp"])
    return frame


def frequency_to_frame(
    counts: Mapping[str, int], *, label: str, top: Optional[int] = None
) -> pd.DataFrame:
    """Return a frequency table sorted by descending count, then token.

    Parameters
    ----------
    counts:
        Mapping from token to occurrence count.
    label:
        Column name for the tokens, for example ``"word"`` or ``"symbol"``.
    top:
        Keep only the first ``top`` rows when given.
    """

    frame = pd.DataFrame(list(counts.items()), columns=[label, "count"])
    frame = frame.sort_values(
        by=["count", label], ascending=[False, True], kind="mergesort"
    ).reset_index(drop=True)
    if top is not None:
        frame = frame.head(top)
    return frame


__all__ = [
    "MESSAGE_COLUMNS",
    "frequency_to_frame",
    "messages_to_frame",
]
