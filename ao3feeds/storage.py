"""On-disk storage of subscribed feeds and downloaded PDFs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

CONFIG_FILE = "feeds.txt"
KINDLE_DATA_PATH = "/mnt/us/documents/AO3/"
DESKTOP_DATA_PATH = "./downloads/"
UNKNOWN_FEED_TITLE = "Unknown Feed"


@dataclass(frozen=True)
class Feed:
    """A subscribed tag feed: its tag id and the title shown for it."""

    tag_id: str
    title: str


def default_data_path(kindle: bool) -> Path:
    """Return the directory feeds and downloads are kept in."""
    return Path(KINDLE_DATA_PATH if kindle else DESKTOP_DATA_PATH)


def ensure_data_path(data_path: str | Path) -> Path:
    """Create the data directory if it is missing and return it."""
    path = Path(data_path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def save_feeds(data_path: str | Path, feeds: Iterable[Feed]) -> Path:
    """Write the feeds, one ``id,title`` line each, and return the file path."""
    path = ensure_data_path(data_path) / CONFIG_FILE
    with path.open("w", encoding="utf-8") as out:
        for feed in feeds:
            out.write(f"{feed.tag_id},{feed.title}\n")
    return path


def load_feeds(data_path: str | Path) -> list[Feed]:
    """Read the saved feeds; a missing file yields no feeds.

    Lines are split at the first comma; a line without a comma is an id
    whose title is unknown. Empty lines are skipped.
    """
    path = Path(data_path) / CONFIG_FILE
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    feeds = []
    for line in text.split("\n"):
        if not line:
            continue
        tag_id, sep, title = line.partition(",")
        feeds.append(Feed(tag_id, title if sep else UNKNOWN_FEED_TITLE))
    return feeds


def save_pdf(data: bytes, filename: str, data_path: str | Path) -> Path:
    """Write PDF bytes under the data directory and return the full path."""
    path = ensure_data_path(data_path) / filename
    path.write_bytes(data)
    return path