"""WhatsApp text export parsing and chat statistics.

The parser folds raw export lines into :class:`Message` records; the
statistics helpers in :mod:`whatsapp_stats.stats` aggregate them.
"""

from .chat_io import load_messages, read_lines
from .config import DEFAULT_CONFIG, ParserConfig
from .errors import ChatExportError, EmptySequenceError, InvalidTimestampError
from .messages import ClassifiedLine, Fragment, Header, Message
from .parser import (
    InvalidHeader,
    ParseResult,
    classify_line,
    normalize_line,
    parse_lines,
    reassemble,
)
from .stats import (
    ChatSummary,
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
from .timestamps import parse_header_timestamp
