"""Unicode ranges counted as symbols or pictographs (emoji).

Membership is tested per codepoint. Variation selectors and zero-width
joiners inside an emoji sequence are never counted, while each pictograph in
the sequence is (skin-tone modifiers sit inside U+1F300-U+1F5FF and count too).
"""

from __future__ import annotations

import re
from typing import Iterator, Sequence, Tuple

SYMBOL_RANGES: Sequence[Tuple[int, int]] = (
    (0x1F600, 0x1F64F),  # emoticons
    (0x1F300, 0x1F5FF),  # misc symbols and pictographs
    (0x1F680, 0x1F6FF),  # transport and map
    (0x1F700, 0x1F77F),  # alchemical
    (0x1F780, 0x1F7FF),  # geometric shapes extended
    (0x1F800, 0x1F8FF),  # supplemental arrows-c
    (0x1F900, 0x1F9FF),  # supplemental symbols and pictographs
    (0x1FA00, 0x1FA6F),  # chess symbols
    (0x1FA70, 0x1FAFF),  # symbols and pictographs extended-a
    (0x2600, 0x26FF),  # misc symbols
    (0x2700, 0x27BF),  # dingbats
)


def build_symbol_pattern(ranges: Sequence[Tuple[int, int]]) -> re.Pattern[str]:
    """Compile a character class matching any codepoint in ``ranges``."""

    if not ranges:
        raise ValueError("at least one symbol range is required")
    parts = []
    for start, end in ranges:
        if start > end:
            raise ValueError(f"empty symbol range {start:#x}-{end:#x}")
        parts.append(f"{re.escape(chr(start))}-{re.escape(chr(end))}")
    return re.compile("[" + "".join(parts) + "]")


SYMBOL_PATTERN = build_symbol_pattern(SYMBOL_RANGES)


def iter_symbols(text: str, pattern: re.Pattern[str] = SYMBOL_PATTERN) -> Iterator[str]:
    """Yield each symbol codepoint in ``text`` in order of appearance."""

    for match in pattern.finditer(text):
        yield match.group(0)


__all__ = [
    "SYMBOL_PATTERN",
    "SYMBOL_RANGES",
    "build_symbol_pattern",
    "iter_symbols",
]
