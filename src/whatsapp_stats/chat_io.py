"""Read WhatsApp text exports from disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from .config import DEFAULT_CONFIG, ParserConfig
from .parser import ParseResult, parse_lines

LOGGER = logging.getLogger(__name__)


def decode_export(raw: bytes) -> str:
    """Decode export bytes as UTF-8, tolerating a BOM and stray bytes.

    Undecodable bytes are replaced with U+FFFD rather than failing so a single
    corrupt line does not lose the whole conversation.
    """
    if raw.startswith(b"\xef\xbb\xbf"):
        return raw.decode("utf-8-sig", errors="replace")
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as err:
        LOGGER.warning("Export is not valid UTF-8 (%s); replacing bad bytes", err)
        return raw.decode("utf-8", errors="replace")


def read_lines(path: Path) -> List[str]:
    """Return the raw lines of the export at ``path``.

    Lines are split on ``"\\n"`` only and a trailing ``"\\r"`` is dropped, so
    Unicode line or paragraph separators inside a message body stay in it.
    No other normalization is applied.

    Raises
    ------
    OSError
        If the file is missing or unreadable.
    """

    raw = Path(path).read_bytes()
    return [line.removesuffix("\r") for line in decode_export(raw).split("\n")]


def load_messages(path: Path, config: ParserConfig = DEFAULT_CONFIG) -> ParseResult:
    """Read and reassemble the export at ``path``."""

    lines = read_lines(path)
    result = parse_lines(lines, config)
    LOGGER.info(
        "%s: %d line(s) -> %d message(s)", path, len(lines), len(result.messages)
    )
    return result


__all__ = [
    "decode_export",
    "load_messages",
    "read_lines",
]
