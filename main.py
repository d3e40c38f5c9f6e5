"""Summarist — structured summaries of pasted text.

Command-line entry-point.  Everything runs in this one process: the only
network traffic is the single LLM call made per ``summarize`` command.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from config import settings
from engine.errors import ConfigError, SummarizationError
from engine.history import HistoryStore
from engine.labels import (
    SUPPORTED_LANGUAGES,
    LanguagePreference,
    format_label,
    length_label,
    section_label,
)
from engine.summarizer import Summarizer
from schemas.request import OutputFormat, SummarizationRequest, SummaryLength
from schemas.response import HistoryEntry, SummarizationResult
from services.storage import FileStore

logger = logging.getLogger("summarist")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2

_PREVIEW_CHARS = 100


# ── Rendering ──────────────────────────────────────────────────────────

def _choice(value: str) -> str:
    return value.upper().replace("-", "_")


def render_result(result: SummarizationResult, language: str) -> str:
    lines = [f"{section_label('summary', language)}:", result.summary.strip()]
    sections = (
        ("keyInsights", result.key_insights),
        ("actionableItems", result.actionable_items),
        ("suggestedQuestions", result.suggested_questions),
    )
    for key, items in sections:
        if not items:
            continue
        lines.append("")
        lines.append(f"{section_label(key, language)}:")
        lines.extend(f"  • {item}" for item in items)
    return "\n".join(lines)


def render_entry_line(entry: HistoryEntry, language: str) -> str:
    when = datetime.fromtimestamp(entry.timestamp / 1000).strftime("%Y-%m-%d %H:%M")
    preview = entry.content[:_PREVIEW_CHARS].replace("\n", " ")
    if len(entry.content) > _PREVIEW_CHARS:
        preview += "..."
    line = (
        f"{entry.id}  {when}  "
        f"[{format_label(entry.output_format, language)} | {length_label(entry.summary_length, language)}]"
    )
    if entry.focus_area:
        line += f"  focus: {entry.focus_area}"
    return f"{line}\n    {preview}"


# ── Commands ───────────────────────────────────────────────────────────

def _read_content(args: argparse.Namespace) -> str:
    if args.file:
        return Path(args.file).expanduser().read_text(encoding="utf-8")
    if args.text is not None:
        return args.text
    return sys.stdin.read()


def cmd_summarize(args: argparse.Namespace, store: FileStore, summarizer: Summarizer) -> int:
    language = LanguagePreference(store).get()
    try:
        request = SummarizationRequest(
            content=_read_content(args),
            length=SummaryLength(_choice(args.length)),
            format=OutputFormat(_choice(args.format)),
            focus_area=args.focus,
        )
    except ValidationError:
        print("Please enter some content to summarize.", file=sys.stderr)
        return EXIT_USAGE
    except OSError as exc:
        print(f"Could not read input: {exc}", file=sys.stderr)
        return EXIT_USAGE

    try:
        result = asyncio.run(_summarize_once(summarizer, request))
    except ConfigError as exc:
        logger.debug("Configuration error: %s", exc)
        print(exc.user_message, file=sys.stderr)
        return EXIT_USAGE
    except SummarizationError as exc:
        logger.debug("Summarization failed: %s", exc)
        print(exc.user_message, file=sys.stderr)
        return EXIT_ERROR

    if args.json:
        print(result.model_dump_json(by_alias=True, indent=2))
    else:
        print(render_result(result, language))

    try:
        HistoryStore(store).record(request, result)
    except OSError as exc:
        logger.warning("Could not save summary to history: %s", exc)
        print(f"Warning: summary not saved to history ({exc}).", file=sys.stderr)
    return EXIT_OK


async def _summarize_once(summarizer: Summarizer, request: SummarizationRequest) -> SummarizationResult:
    try:
        return await summarizer.summarize(request)
    finally:
        await summarizer.aclose()


def cmd_history(args: argparse.Namespace, store: FileStore) -> int:
    history = HistoryStore(store)
    entries = history.entries
    language = LanguagePreference(store).get()

    if args.history_command == "clear":
        history.clear()
        print("History cleared.")
        return EXIT_OK

    if args.history_command == "show":
        entry = history.get(args.id)
        if entry is None:
            print(f"No history entry with id {args.id}.", file=sys.stderr)
            return EXIT_ERROR
        if args.json:
            print(entry.model_dump_json(by_alias=True, indent=2))
        else:
            print(render_entry_line(entry, language))
            print()
            print(render_result(entry.result, language))
        return EXIT_OK

    if not entries:
        print("No summaries yet.")
        return EXIT_OK
    for entry in entries:
        print(render_entry_line(entry, language))
    return EXIT_OK


def cmd_language(args: argparse.Namespace, store: FileStore) -> int:
    preference = LanguagePreference(store)
    if args.code:
        try:
            preference.set(args.code)
        except ValueError as exc:
            print(str(exc), file=sys.stderr)
            return EXIT_USAGE
    print(f"{preference.get()} ({preference.direction()})")
    return EXIT_OK


# ── Parser ─────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="summarist", description=__doc__.splitlines()[0])
    parser.add_argument("--data-dir", type=Path, default=None, help="Directory for local state.")
    parser.add_argument("--log-level", default=None, help="Logging level (default from LOG_LEVEL).")
    sub = parser.add_subparsers(dest="command", required=True)

    summarize = sub.add_parser("summarize", help="Summarize text from an argument, a file, or stdin.")
    summarize.add_argument("text", nargs="?", help="Text to summarize (reads stdin when omitted).")
    summarize.add_argument("--file", "-f", help="Read the text from this file.")
    summarize.add_argument(
        "--length",
        default="standard",
        choices=[m.value.lower() for m in SummaryLength],
    )
    summarize.add_argument(
        "--format",
        default="paragraph",
        choices=[m.value.lower().replace("_", "-") for m in OutputFormat],
    )
    summarize.add_argument("--focus", default=None, help="Topic the summary should emphasise.")
    summarize.add_argument("--json", action="store_true", help="Print the raw result as JSON.")

    history = sub.add_parser("history", help="Browse or clear past summaries.")
    history_sub = history.add_subparsers(dest="history_command")
    history_sub.add_parser("list", help="List recent summaries (default).")
    show = history_sub.add_parser("show", help="Show one past summary.")
    show.add_argument("id")
    show.add_argument("--json", action="store_true")
    history_sub.add_parser("clear", help="Delete all stored summaries.")

    language = sub.add_parser("language", help="Show or set the display language.")
    language.add_argument("code", nargs="?", help=f"One of: {', '.join(SUPPORTED_LANGUAGES)}.")

    return parser


def main(argv: Sequence[str] | None = None, *, summarizer: Summarizer | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(asctime)s | %(name)-30s | %(levelname)-7s | %(message)s",
        stream=sys.stderr,
    )

    store = FileStore(args.data_dir or settings.data_path)

    if args.command == "summarize":
        return cmd_summarize(args, store, summarizer or Summarizer())
    if args.command == "history":
        return cmd_history(args, store)
    return cmd_language(args, store)


if __name__ == "__main__":
    sys.exit(main())
