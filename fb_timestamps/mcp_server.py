"""MCP server exposing timestamp extraction as a tool."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from .config import ExtractorConfig
from .export import collect_html_documents, merge_results, process_documents

logger = logging.getLogger("fb_timestamps.mcp")
logger.setLevel(logging.ERROR)

mcp = FastMCP(name="fb-timestamps")


@mcp.tool()
def extract_timestamps(path: str) -> str:
    """Return a JSON object mapping photo filenames to EXIF timestamps.

    ``path`` may be a single HTML page or an export directory.
    """
    source = Path(path).expanduser()
    if not source.exists():
        raise FileNotFoundError(f"Export path does not exist: {source}")

    documents = collect_html_documents(source)
    if not documents:
        raise FileNotFoundError(f"No HTML pages found in {source}")

    summary = process_documents(documents, ExtractorConfig())
    if summary.unreadable:
        unreadable = ", ".join(str(path) for path in summary.unreadable)
        raise RuntimeError(f"Failed to read HTML pages: {unreadable}")
    return json.dumps(merge_results(summary.results), ensure_ascii=False)


def main() -> None:
    """Entry point for running the MCP server."""
    logging.basicConfig(level=logging.ERROR)
    mcp.run()


if __name__ == "__main__":
    main()
