"""CLI entry point for WhatsApp export statistics.

Examples::

  chat_stats summary chat.txt --unit hours
  chat_stats words chat.txt --top 10
  chat_stats messages chat.txt --author Sarah --date 2024-03-06
  chat_stats export chat.txt -o parsed/
"""

from __future__ import annotations

import argparse
import logging
from datetime import date
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Set, Tuple

from tqdm import tqdm

from .chat_io import load_messages
from .frames import frequency_to_frame, messages_to_frame
from .parser import ParseResult
from .stats import (
    DURATION_UNITS,
    duration_in,
    messages_by_author,
    messages_on_date,
    summarize,
    symbol_frequency,
    word_frequency,
)

LOGGER_NAME = "whatsapp_stats"


def _parse_date_arg(value: str) -> date:
    """argparse type for ``YYYY-MM-DD`` dates."""
    try:
        return date.fromisoformat(value)
    except ValueError as err:
        raise argparse.ArgumentTypeError(
            f"expected a date like 2024-03-06, got {value!r}"
        ) from err


def _add_common_args(p: argparse.ArgumentParser) -> None:
    """Add input and logging flags shared by every subcommand."""
    p.add_argument("inputs", nargs="+", type=Path, help="WhatsApp .txt export(s)")
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    p.add_argument("--log-file", help="Also write a detailed log to this path")
    p.add_argument(
        "--no-progress", action="store_true", help="Disable the per-file progress bar"
    )


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for ``chat_stats``."""
    parser = argparse.ArgumentParser(
        prog="chat_stats",
        description="Reassemble WhatsApp text exports and report chat statistics",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_sum = sub.add_parser("summary", help="Participants, message counts and span")
    _add_common_args(p_sum)
    p_sum.add_argument(
        "--unit",
        choices=DURATION_UNITS,
        default="days",
        help="Unit for the conversation span (default: days)",
    )

    for name, label in (("words", "word"), ("symbols", "symbol")):
        p_freq = sub.add_parser(name, help=f"Most frequent {label}s")
        _add_common_args(p_freq)
        p_freq.add_argument(
            "--top", type=int, default=20, help="Rows to show (default: 20)"
        )

    p_msg = sub.add_parser("messages", help="Print reassembled messages")
    _add_common_args(p_msg)
    p_msg.add_argument("--author", help="Keep messages whose author contains this")
    p_msg.add_argument(
        "--date", type=_parse_date_arg, help="Keep messages sent on YYYY-MM-DD"
    )

    p_exp = sub.add_parser("export", help="Write reassembled messages to CSV")
    _add_common_args(p_exp)
    p_exp.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        help="Directory for CSV files (default: next to each input)",
    )
    return parser


def _configure_logging(args: argparse.Namespace) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.INFO)
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO if args.verbose else logging.WARNING)
    ch.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(ch)
    if args.log_file:
        lf_path = Path(args.log_file).expanduser()
        lf_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(lf_path), encoding="utf-8")
        fh.setLevel(logging.INFO)
        fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
        logger.addHandler(fh)
    return logger


def _iter_results(
    paths: Sequence[Path], logger: logging.Logger, *, no_progress: bool
) -> Iterator[Tuple[Path, ParseResult]]:
    """Yield parse results for every readable input, logging failures."""
    iterator = paths
    if not no_progress and len(paths) > 1:
        iterator = tqdm(paths, desc="Files", unit="file")
    for path in iterator:
        try:
            result = load_messages(path)
        except OSError as e:
            logger.error("[FAIL] %s: %s", path, e)
            continue
        logger.info("[OK] %s", path)
        yield path, result


def _print_summary(path: Path, result: ParseResult, unit: str) -> None:
    summary = summarize(result.messages)
    print(f"== {path}")
    print(f"Messages: {summary.message_count}")
    print(f"Participants: {len(summary.authors)}")
    for name, count in summary.messages_per_author.items():
        print(f"  {name}: {count}")
    if summary.first is not None and summary.last is not None:
        print(f"First message: {summary.first:%Y-%m-%d %H:%M}")
        print(f"Last message: {summary.last:%Y-%m-%d %H:%M}")
        print(f"Span: {duration_in(unit, result.messages):.2f} {unit}")
    if result.invalid_timestamps:
        skipped = len(result.invalid_timestamps)
        print(f"Skipped headers with invalid timestamps: {skipped}")


def _print_frequency(path: Path, result: ParseResult, cmd: str, top: int) -> None:
    if cmd == "words":
        counts, label = word_frequency(result.messages), "word"
    else:
        counts, label = symbol_frequency(result.messages), "symbol"
    frame = frequency_to_frame(counts, label=label, top=top)
    print(f"== {path}")
    for token, count in frame.itertuples(index=False, name=None):
        print(f"{count:>7}  {token}")


def _print_messages(result: ParseResult, args: argparse.Namespace) -> None:
    selected = result.messages
    if args.author:
        selected = messages_by_author(args.author, selected)
    if args.date:
        selected = messages_on_date(args.date, selected)
    for m in selected:
        print(f"{m.timestamp:%Y-%m-%d %H:%M} - {m.author}: {m.body}")


def _csv_path_for(path: Path, out_dir: Path, written: Set[Path]) -> Path:
    """Return a CSV path under ``out_dir`` not yet written in this run.

    Inputs sharing a file name get their parent directory name as a prefix,
    then a numeric suffix if that still collides.
    """
    candidates = [path.stem, f"{path.parent.name}_{path.stem}"]
    for stem in candidates:
        out_path = (out_dir / (stem + ".csv")).resolve()
        if out_path not in written:
            return out_path
    n = 2
    while True:
        out_path = (out_dir / f"{candidates[-1]}_{n}.csv").resolve()
        if out_path not in written:
            return out_path
        n += 1


def _export_csv(
    path: Path,
    result: ParseResult,
    output_dir: Optional[Path],
    logger: logging.Logger,
    written: Set[Path],
) -> Path:
    out_dir = output_dir if output_dir is not None else path.parent
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = _csv_path_for(path, out_dir, written)
    written.add(out_path)
    if out_path.name != path.stem + ".csv":
        logger.warning("[RENAMED] %s -> %s (name already used)", path, out_path)
    messages_to_frame(result.messages).to_csv(out_path, index=False)
    logger.info("[CSV] %s -> %s", path, out_path)
    return out_path


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run ``chat_stats`` and return the process exit status.

    Returns 1 when none of the inputs could be read, otherwise 0.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "top", None) is not None and args.top <= 0:
        parser.error("--top must be a positive integer")

    logger = _configure_logging(args)

    done: List[Path] = []
    written: Set[Path] = set()
    for path, result in _iter_results(
        args.inputs, logger, no_progress=args.no_progress
    ):
        done.append(path)
        if args.cmd == "summary":
            _print_summary(path, result, args.unit)
        elif args.cmd in ("words", "symbols"):
            _print_frequency(path, result, args.cmd, args.top)
        elif args.cmd == "messages":
            _print_messages(result, args)
        elif args.cmd == "export":
            out_path = _export_csv(
                path, result, args.output_dir, logger, written
            )
            print(f"Wrote {len(result.messages)} message(s) to {out_path}")

    if not done:
        logger.error("No readable inputs")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
