"""Recover photo timestamps from the HTML pages of a Facebook data export."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union
from urllib.parse import urlsplit

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from .config import ExtractorConfig
from .dates import parse_timestamp
from .models import MediaReference, TimestampBlock

logger = logging.getLogger("fb_timestamps")

START = "start"
TEXT = "text"
END = "end"

_EXHAUSTED = object()


class DocumentUnreadableError(RuntimeError):
    """Raised when an HTML document cannot be opened or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass
class MarkupEvent:
    """A start tag, text run or end tag, in document order."""

    kind: str
    tag: Optional[Tag] = None
    text: str = ""


def iter_markup_events(soup: BeautifulSoup) -> Iterator[MarkupEvent]:
    """Walk a parsed document forward, yielding start/text/end events."""
    pending: List[Iterator] = [iter(soup.contents)]
    open_tags: List[Tag] = []
    while pending:
        node = next(pending[-1], _EXHAUSTED)
        if node is _EXHAUSTED:
            pending.pop()
            if open_tags:
                yield MarkupEvent(END, tag=open_tags.pop())
            continue
        if isinstance(node, Tag):
            open_tags.append(node)
            yield MarkupEvent(START, tag=node)
            pending.append(iter(node.contents))
        elif isinstance(node, NavigableString) and not isinstance(
            node, PreformattedString
        ):
            yield MarkupEvent(TEXT, text=str(node))


def _class_attribute(tag: Tag) -> str:
    classes = tag.get("class") or ""
    if isinstance(classes, str):
        return classes
    return " ".join(classes)


def media_filename(href: str) -> str:
    """Return the last path segment of a link target."""
    path = urlsplit(href).path
    return path.rstrip("/").rsplit("/", 1)[-1]


def is_media_link(tag: Tag, config: ExtractorConfig) -> bool:
    """True for links whose target path ends in a recognized media suffix."""
    if tag.name != config.link_tag:
        return False
    href = tag.get("href")
    if not href or not isinstance(href, str):
        return False
    return urlsplit(href).path.endswith(tuple(config.media_suffixes))


def is_timestamp_block(tag: Tag, config: ExtractorConfig) -> bool:
    """True for the container elements that carry a photo's date line."""
    return tag.name == config.timestamp_tag and config.timestamp_marker in _class_attribute(tag)


class TimestampExtractor:
    """Pairs each timestamp block with the media link that precedes it.

    One instance holds the parse state for one document. ``feed`` consumes
    markup events and ``timestamps`` holds the filename to timestamp mapping
    built so far.
    """

    def __init__(self, config: Optional[ExtractorConfig] = None) -> None:
        self.config = config or ExtractorConfig()
        self.timestamps: Dict[str, str] = {}
        self._reference: Optional[MediaReference] = None
        self._block: Optional[TimestampBlock] = None

    def feed(self, event: MarkupEvent) -> None:
        if event.kind == START:
            self._handle_start(event.tag)
        elif event.kind == TEXT:
            self._handle_text(event.text)
        elif event.kind == END:
            self._handle_end(event.tag)

    def _handle_start(self, tag: Tag) -> None:
        if is_media_link(tag, self.config):
            href = tag["href"]
            reference = MediaReference(filename=media_filename(href), href=href)
            if self._reference is not None:
                logger.debug(
                    "Dropping unpaired reference %s in favour of %s",
                    self._reference.href,
                    reference.href,
                )
            self._reference = reference
        if self._block is None and is_timestamp_block(tag, self.config):
            self._block = TimestampBlock(element=tag)

    def _handle_text(self, text: str) -> None:
        if self._block is None or self._block.timestamp is not None:
            return
        stripped = text.strip()
        if not stripped:
            return
        timestamp = parse_timestamp(stripped)
        if timestamp is None:
            logger.debug("No date grammar matched %r", stripped)
            return
        self._block.timestamp = timestamp

    def _handle_end(self, tag: Tag) -> None:
        if self._block is None or tag is not self._block.element:
            return
        timestamp = self._block.timestamp
        reference = self._reference
        if reference is not None and timestamp is not None:
            if reference.filename in self.timestamps:
                logger.debug("Overwriting earlier timestamp for %s", reference.filename)
            self.timestamps[reference.filename] = timestamp
            logger.debug("Paired %s with %s", reference.filename, timestamp)
        else:
            logger.debug(
                "Timestamp block closed without a pairing (reference=%s, timestamp=%s)",
                reference.filename if reference else None,
                timestamp,
            )
        self._reference = None
        self._block = None


def extract_timestamps(
    html: str,
    config: Optional[ExtractorConfig] = None,
) -> Dict[str, str]:
    """Map each media filename in ``html`` to its canonical capture timestamp."""
    soup = BeautifulSoup(html, "html.parser")
    extractor = TimestampExtractor(config)
    for event in iter_markup_events(soup):
        extractor.feed(event)
    return extractor.timestamps


def read_document(path: Union[str, Path]) -> str:
    """Read a UTF-8 HTML document, raising ``DocumentUnreadableError`` on failure."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            return handle.read()
    except UnicodeDecodeError as exc:
        raise DocumentUnreadableError(path, f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise DocumentUnreadableError(path, exc.strerror or str(exc)) from exc


def extract_timestamps_from_file(
    path: Union[str, Path],
    config: Optional[ExtractorConfig] = None,
) -> Dict[str, str]:
    """Read ``path`` and extract its filename to timestamp mapping."""
    return extract_timestamps(read_document(path), config)
