"""Configuration objects and constants for timestamp extraction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

DEFAULT_MEDIA_SUFFIXES: Tuple[str, ...] = (".jpg", ".png", ".mp4")
DEFAULT_TIMESTAMP_MARKER = "_2lem"
DEFAULT_TIMESTAMP_TAG = "div"
DEFAULT_LINK_TAG = "a"


@dataclass
class ExtractorConfig:
    """Markup signatures used to find media links and timestamp blocks."""

    media_suffixes: Tuple[str, ...] = DEFAULT_MEDIA_SUFFIXES
    timestamp_marker: str = DEFAULT_TIMESTAMP_MARKER
    timestamp_tag: str = DEFAULT_TIMESTAMP_TAG
    link_tag: str = DEFAULT_LINK_TAG
