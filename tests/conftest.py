from pathlib import Path

import pytest


def _photo(href: str, date: str) -> str:
    return (
        '<div class="pam _3-95 _2pi0 _2lej uiBoxWhite noborder">'
        f'<a href="{href}"><img src="{href}" class="_2yuc _3-96" /></a>'
        f'<div class="_3-94 _2lem">{date}</div>'
        "</div>"
    )


def _page(*blocks: str) -> str:
    return (
        "<!DOCTYPE html><html><head><meta charset=\"utf-8\" /><title>Album</title></head>"
        "<body><div class=\"_4t5n\">" + "".join(blocks) + "</div></body></html>"
    )


@pytest.fixture
def photo():
    return _photo


@pytest.fixture
def page():
    return _page


@pytest.fixture
def export_dir(tmp_path: Path) -> Path:
    """A small export tree with a main index and two album pages."""
    root = tmp_path / "facebook-export"
    (root / "album").mkdir(parents=True)
    (root / "photos_and_videos" / "album").mkdir(parents=True)
    (root / "your_photos.html").write_text(
        _page(_photo("photos_and_videos/album/cover.jpg", "18 mei 2012 16:09")),
        encoding="utf-8",
    )
    (root / "album" / "0.html").write_text(
        _page(
            _photo("photos_and_videos/album/beach.jpg", "May 18, 2012 at 4:09PM"),
            _photo("photos_and_videos/album/clip.mp4", "2013-07-01 09:30:15"),
        ),
        encoding="utf-8",
    )
    (root / "photos_and_videos" / "album" / "1.html").write_text(
        _page(_photo("photos_and_videos/album/cover.jpg", "20 juni 2014 8:05")),
        encoding="utf-8",
    )
    return root
