"""Command-line interface for granolafetch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import load_config
from .tools import GranolaTools


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="granolafetch",
        description="Fetch Granola meeting notes and transcripts as Markdown",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to config YAML (default: ~/.config/granolafetch/config.yaml)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    recent = sub.add_parser("recent", help="List recent documents")
    recent.add_argument("--limit", "-n", type=int, default=None)

    get = sub.add_parser("get", help="Print a document's notes or transcript")
    get.add_argument("document_id")
    get.add_argument("--transcript", "-t", action="store_true")

    find = sub.add_parser("search", help="Search recent documents by title")
    find.add_argument("query")
    find.add_argument("--limit", "-n", type=int, default=None)

    one = sub.add_parser("one-on-one", help="Show the latest 1:1 with someone")
    one.add_argument("person")
    one.add_argument("--transcript", "-t", action="store_true")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1) from None

    tools = GranolaTools.from_config(config)

    match args.command:
        case "recent":
            result = tools.get_recent_documents(args.limit)
        case "get":
            result = tools.get_document(args.document_id, transcript=args.transcript)
        case "search":
            result = tools.search_documents(args.query, args.limit)
        case "one-on-one":
            result = tools.find_latest_one_on_one(args.person, transcript=args.transcript)
        case _:
            parser.error(f"unknown command: {args.command}")

    if result.is_error:
        print(result.text, file=sys.stderr)
        raise SystemExit(1)
    print(result.text)
