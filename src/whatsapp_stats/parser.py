"""Line classification and message reassembly for WhatsApp text exports.

Each exported message starts with a header line carrying the timestamp, the
author and the first line of text::

  3/6/24, 09:18 - Sarah Johnson: Hi John! Great idea
  still there?

Any line that does not match the header shape continues the message opened
before it, so a single pass is enough: headers flush the open message and
start a new one, other lines extend it. Lines seen before the first header
have nothing to attach to and are discarded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from .config import DEFAULT_CONFIG, ParserConfig
from .errors import InvalidTimestampError
from .messages import ClassifiedLine, Fragment, Header, Message
from .timestamps import parse_header_timestamp

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvalidHeader:
    """A header line dropped because its timestamp could not be parsed."""

    line_number: int
    raw_timestamp: str
    author: str


@dataclass(frozen=True)
class ParseResult:
    """Messages reassembled from an export plus counts useful for reporting.

    Parameters
    ----------
    messages:
        Finalized messages in input order.
    header_count:
        Number of lines that matched the header pattern, including dropped
        ones.
    fragment_count:
        Number of non-empty lines that did not match the header pattern.
    orphan_fragments:
        Fragments discarded because no message was open when they arrived.
    invalid_timestamps:
        Headers dropped because of an impossible date or time.
    """

    messages: List[Message]
    header_count: int
    fragment_count: int
    orphan_fragments: int
    invalid_timestamps: Tuple[InvalidHeader, ...] = ()


def normalize_line(text: str) -> str:
    """Strip newline characters and surrounding whitespace from ``text``."""

    return text.replace("\r", "").replace("\n", "").strip()


def classify_line(line: str, config: ParserConfig = DEFAULT_CONFIG) -> ClassifiedLine:
    """Classify a normalized line as a :class:`Header` or a :class:`Fragment`.

    The header pattern is anchored at the start of the line. A line that
    does not match in full is returned whole as a fragment; colons, dates or
    ``" - Name: "`` sequences later in the line are never re-parsed.
    """

    m = config.header_pattern.match(line)
    if m is None:
        return Fragment(body=line)
    return Header(
        raw_timestamp=m.group("timestamp"),
        author=m.group("author"),
        body=m.group("body") or "",
    )


def parse_lines(
    lines: Iterable[str], config: ParserConfig = DEFAULT_CONFIG
) -> ParseResult:
    """Fold raw export lines into messages and a short parse report.

    Parameters:
    - lines: Raw lines in file order. Normalization is applied here; lines
      that normalize to an empty string are skipped.
    - config: Parser configuration.

    Returns a :class:`ParseResult`.

    Raises :class:`InvalidTimestampError` only when
    ``config.drop_invalid_timestamps`` is ``False``. Otherwise a header with
    an impossible timestamp is logged and dropped together with the
    continuation lines that follow it.
    """

    messages: List[Message] = []
    invalid: List[InvalidHeader] = []
    header_count = 0
    fragment_count = 0
    orphans = 0

    # Idle while current_timestamp is None.
    current_timestamp: Optional[datetime] = None
    current_author: Optional[str] = None
    current_parts: List[str] = []

    def flush() -> None:
        if current_timestamp is None or current_author is None:
            return
        messages.append(
            Message(
                timestamp=current_timestamp,
                author=current_author,
                body=" ".join(current_parts),
            )
        )

    for line_number, raw in enumerate(lines, start=1):
        line = normalize_line(raw)
        if not line:
            continue

        classified = classify_line(line, config)
        if isinstance(classified, Header):
            header_count += 1
            flush()
            current_timestamp = None
            current_author = None
            current_parts = []
            try:
                timestamp = parse_header_timestamp(classified.raw_timestamp, config)
            except InvalidTimestampError as err:
                if not config.drop_invalid_timestamps:
                    raise
                LOGGER.warning("[SKIP] line %d: %s", line_number, err)
                invalid.append(
                    InvalidHeader(
                        line_number=line_number,
                        raw_timestamp=classified.raw_timestamp,
                        author=classified.author,
                    )
                )
                continue
            current_timestamp = timestamp
            current_author = classified.author
            current_parts = [classified.body]
        else:
            fragment_count += 1
            if current_timestamp is None:
                orphans += 1
                continue
            current_parts.append(classified.body)

    flush()

    if orphans:
        LOGGER.info("Discarded %d continuation line(s) with no open message", orphans)

    return ParseResult(
        messages=messages,
        header_count=header_count,
        fragment_count=fragment_count,
        orphan_fragments=orphans,
        invalid_timestamps=tuple(invalid),
    )


def reassemble(
    lines: Iterable[str], config: ParserConfig = DEFAULT_CONFIG
) -> List[Message]:
    """Return the messages reassembled from raw export ``lines``."""

    return parse_lines(lines, config).messages


__all__ = [
    "InvalidHeader",
    "ParseResult",
    "classify_line",
    "normalize_line",
    "parse_lines",
    "reassemble",
]
