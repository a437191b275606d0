"""Data models used throughout the extraction pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from bs4 import Tag


@dataclass
class MediaReference:
    """Media link waiting to be paired with the next timestamp block."""

    filename: str
    href: str


@dataclass
class TimestampBlock:
    """Timestamp container currently being read."""

    element: Tag
    timestamp: Optional[str] = None


@dataclass
class DocumentResult:
    """Timestamps recovered from a single HTML document."""

    source_path: Path
    timestamps: Dict[str, str] = field(default_factory=dict)
    total_seconds: float = 0.0
