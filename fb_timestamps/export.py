"""Run timestamp extraction over the HTML pages of an export directory."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from .config import ExtractorConfig
from .extractor import DocumentUnreadableError, extract_timestamps_from_file
from .models import DocumentResult

logger = logging.getLogger("fb_timestamps")

MAIN_INDEX = "your_photos.html"
EXPORT_PAGE_GLOBS = ("*.html", "album/*.html", "photos_and_videos/album/*.html")


@dataclass
class RunSummary:
    """Outcome of processing a batch of documents."""

    results: List[DocumentResult] = field(default_factory=list)
    unreadable: List[Path] = field(default_factory=list)
    total_seconds: float = 0.0

    @property
    def document_count(self) -> int:
        return len(self.results) + len(self.unreadable)

    @property
    def timestamp_count(self) -> int:
        return sum(len(result.timestamps) for result in self.results)


def collect_html_documents(path: Path) -> List[Path]:
    """List the HTML pages to read for a file or an export directory."""
    if not path.is_dir():
        return [path]

    documents: List[Path] = []
    seen = set()

    def _add(candidate: Path) -> None:
        if candidate.is_file() and candidate not in seen:
            seen.add(candidate)
            documents.append(candidate)

    _add(path / MAIN_INDEX)
    for pattern in EXPORT_PAGE_GLOBS:
        for candidate in sorted(path.glob(pattern)):
            _add(candidate)
    return documents


def process_document(
    path: Path,
    config: ExtractorConfig,
) -> Optional[DocumentResult]:
    """Extract one document; unreadable documents are logged and return ``None``."""
    logger.info("Processing %s", path)
    start = time.perf_counter()
    try:
        timestamps = extract_timestamps_from_file(path, config)
    except DocumentUnreadableError as exc:
        logger.error("Skipping %s: %s", path, exc.reason)
        return None
    elapsed = time.perf_counter() - start

    if timestamps:
        logger.info(
            "Found %d timestamp%s in %s",
            len(timestamps),
            "s" if len(timestamps) != 1 else "",
            path.name,
        )
    else:
        logger.warning("No photo timestamps found in %s", path)
    return DocumentResult(source_path=path, timestamps=timestamps, total_seconds=elapsed)


def process_documents(
    paths: Sequence[Path],
    config: ExtractorConfig,
) -> RunSummary:
    """Process each document independently, in order."""
    summary = RunSummary()
    overall_start = time.perf_counter()
    for path in paths:
        result = process_document(path, config)
        if result is None:
            summary.unreadable.append(path)
        else:
            summary.results.append(result)
    summary.total_seconds = time.perf_counter() - overall_start
    return summary


def merge_results(results: Iterable[DocumentResult]) -> Dict[str, str]:
    """Combine per-document maps; later documents win on duplicate filenames."""
    merged: Dict[str, str] = {}
    for result in results:
        merged.update(result.timestamps)
    return merged
