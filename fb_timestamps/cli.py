"""Command-line entry point for recovering photo timestamps."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Sequence

from .config import DEFAULT_MEDIA_SUFFIXES, DEFAULT_TIMESTAMP_MARKER, ExtractorConfig
from .export import RunSummary, collect_html_documents, merge_results, process_documents

logger = logging.getLogger("fb_timestamps.cli")

EXIT_OK = 0
EXIT_UNREADABLE = 1
EXIT_USAGE = 2


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Recover photo and video capture timestamps from the HTML pages of a "
            "Facebook data export."
        ),
    )
    parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="HTML pages or export directories to read",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the result to this file instead of standard output",
    )
    parser.add_argument(
        "--format",
        choices=("json", "lines"),
        default="json",
        help="Emit a JSON object or one 'filename|timestamp' line per photo",
    )
    parser.add_argument(
        "--per-document",
        action="store_true",
        help="Group JSON output by source document instead of merging",
    )
    parser.add_argument(
        "--suffix",
        dest="suffixes",
        action="append",
        default=None,
        help=(
            "Media suffix that marks a photo link (repeatable, default: "
            + ", ".join(DEFAULT_MEDIA_SUFFIXES)
            + ")"
        ),
    )
    parser.add_argument(
        "--marker",
        default=DEFAULT_TIMESTAMP_MARKER,
        help="Class name that identifies timestamp blocks",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def render_output(summary: RunSummary, output_format: str, per_document: bool) -> str:
    if output_format == "lines":
        merged = merge_results(summary.results)
        return "".join(f"{name}|{stamp}\n" for name, stamp in merged.items())

    payload: Dict[str, object]
    if per_document:
        payload = {str(result.source_path): result.timestamps for result in summary.results}
    else:
        payload = merge_results(summary.results)
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    config = ExtractorConfig(
        media_suffixes=tuple(args.suffixes) if args.suffixes else DEFAULT_MEDIA_SUFFIXES,
        timestamp_marker=args.marker,
    )

    documents: List[Path] = []
    for path in args.paths:
        found = collect_html_documents(path)
        if not found:
            logger.error("No HTML pages found in %s", path)
            return EXIT_USAGE
        documents.extend(found)

    summary = process_documents(documents, config)
    logger.info(
        "Finished in %.2fs (%d/%d documents read, %d unreadable, %d timestamps)",
        summary.total_seconds,
        len(summary.results),
        summary.document_count,
        len(summary.unreadable),
        summary.timestamp_count,
    )

    rendered = render_output(summary, args.format, args.per_document)
    if args.output:
        args.output.write_text(rendered, encoding="utf-8")
        logger.info("Saved timestamps to %s", args.output)
    else:
        sys.stdout.write(rendered)
        sys.stdout.flush()

    return EXIT_UNREADABLE if summary.unreadable else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
