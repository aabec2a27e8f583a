"""Parser configuration for WhatsApp text exports.

Only one export layout is recognised at a time. The defaults describe the
Android-style US export::

    3/6/24, 09:16 - John Smith: Hey everyone!

A different layout can be supplied by building a new :class:`ParserConfig`
with its own header pattern and timestamp formats; the parser never tries to
guess between layouts.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Mapping

# Anchored at line start. The body group is optional so that a header whose
# trailing space was trimmed away ("... - Sarah:") still opens a message.
HEADER_PATTERN = re.compile(
    r"^(?P<timestamp>\d{1,2}/\d{1,2}/\d{2,4}, \d{1,2}:\d{2})"
    r" - (?P<author>[^:]+):(?: (?P<body>.*))?$"
)

# Keyed by the number of digits in the year component.
TIMESTAMP_FORMATS: Mapping[int, str] = {
    2: "%m/%d/%y, %H:%M",
    4: "%m/%d/%Y, %H:%M",
}


@dataclass(frozen=True)
class ParserConfig:
    """Settings that control line classification and timestamp parsing.

    Parameters
    ----------
    header_pattern:
        Compiled regex with named groups ``timestamp``, ``author`` and
        ``body`` (the latter may be absent from a match).
    timestamp_formats:
        ``strptime`` formats keyed by the digit count of the year.
    drop_invalid_timestamps:
        When ``True`` (default) a header with an impossible date is dropped
        and logged. When ``False`` the :class:`InvalidTimestampError`
        propagates to the caller.
    """

    header_pattern: re.Pattern[str] = HEADER_PATTERN
    timestamp_formats: Mapping[int, str] = field(
        default_factory=lambda: dict(TIMESTAMP_FORMATS)
    )
    drop_invalid_timestamps: bool = True


DEFAULT_CONFIG = ParserConfig()


__all__ = [
    "DEFAULT_CONFIG",
    "HEADER_PATTERN",
    "ParserConfig",
    "TIMESTAMP_FORMATS",
]
