"""Timestamp parsing for WhatsApp header lines.

Header timestamps look like ``"3/6/24, 09:16"``: numeric month, numeric day,
a two- or four-digit year, a comma and a 24-hour ``H:MM`` time. Parsed values
are naive ``datetime`` objects in the export's own wall clock; no timezone
conversion is applied anywhere in the package.

Two-digit years use the usual ``strptime`` pivot: 69-99 map to the 1900s
and 00-68 to the 2000s.
"""

from __future__ import annotations

from datetime import datetime

from .config import DEFAULT_CONFIG, ParserConfig
from .errors import InvalidTimestampError


def _year_digits(raw: str) -> int:
    """Return the number of digits in the year component of ``raw``."""

    date_part = raw.split(",", 1)[0]
    return len(date_part.rsplit("/", 1)[-1].strip())


def parse_header_timestamp(
    raw: str, config: ParserConfig = DEFAULT_CONFIG
) -> datetime:
    """Parse the date/time text captured from a header line.

    Parameters
    ----------
    raw:
        Text such as ``"3/6/24, 09:16"`` or ``"12/31/2023, 23:59"``.
    config:
        Parser configuration providing the ``strptime`` formats.

    Returns
    -------
    datetime
        Naive datetime for the header.

    Raises
    ------
    InvalidTimestampError
        If the year has an unsupported number of digits or any component is
        out of range (month 13, February 30, hour 24, minute 60, ...).
    """

    text = raw.strip()
    digits = _year_digits(text)
    fmt = config.timestamp_formats.get(digits)
    if fmt is None:
        raise InvalidTimestampError(raw, f"unsupported {digits}-digit year")
    try:
        return datetime.strptime(text, fmt)
    except ValueError as err:
        raise InvalidTimestampError(raw, str(err)) from err


__all__ = [
    "parse_header_timestamp",
]
