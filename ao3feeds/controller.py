"""Feed subscriptions, feed loading and work downloads, independent of any UI."""

from __future__ import annotations

import dataclasses
import string
from pathlib import Path
from typing import Callable

from . import storage
from .client import Client, FetchError, trigger_kindle_scan
from .download import DownloadData
from .storage import Feed, default_data_path
from .works import FeedPage, FeedParseError, parse_feed

StatusCallback = Callable[[str], None]

INVALID_ID_MESSAGE = "Error: Feed ID must be numeric (e.g. 207209)"


def _ignore_status(message: str) -> None:
    """Discard a status message."""


def is_valid_feed_id(text: str) -> bool:
    """True when every character of ``text`` is an ASCII digit."""
    return all(ch in string.digits for ch in text)


class ReaderController:
    """Keeps the list of subscribed feeds and runs fetches and downloads.

    Every step is reported through the ``status`` callable.
    """

    def __init__(
        self,
        data_path: str | Path | None = None,
        client: Client | None = None,
        status: StatusCallback | None = None,
        kindle: bool = False,
    ) -> None:
        self.kindle = kindle
        self.data_path = (
            Path(data_path) if data_path is not None else default_data_path(kindle)
        )
        self.client = client if client is not None else Client()
        self.status = status if status is not None else _ignore_status
        self._feeds: list[Feed] = []

    @property
    def feeds(self) -> list[Feed]:
        """The subscribed feeds, in the order they were added."""
        return list(self._feeds)

    def add_feed(self, text: str) -> Feed | None:
        """Subscribe to the tag id typed by the user.

        A non-numeric id is reported and rejected; an empty one is ignored.
        """
        if not is_valid_feed_id(text):
            self.status(INVALID_ID_MESSAGE)
            return None
        return self.add_feed_row(text, text)

    def add_feed_row(self, tag_id: str, title: str) -> Feed | None:
        """Add a feed with the given title; an empty id adds nothing."""
        if not tag_id:
            return None
        feed = Feed(tag_id, title)
        self._feeds.append(feed)
        self.status(f"Added Feed ID: {tag_id}")
        return feed

    def remove_feed(self, tag_id: str) -> Feed:
        """Unsubscribe from the first feed with ``tag_id`` and save the list."""
        for index, feed in enumerate(self._feeds):
            if feed.tag_id == tag_id:
                del self._feeds[index]
                break
        else:
            raise KeyError(tag_id)
        self.status("Feed removed.")
        self.save_feeds()
        return feed

    def load_feeds(self) -> list[Feed]:
        """Add the feeds saved on disk; nothing happens if none were saved."""
        if not (self.data_path / storage.CONFIG_FILE).is_file():
            return []
        loaded = [
            feed
            for feed in storage.load_feeds(self.data_path)
            if self.add_feed_row(feed.tag_id, feed.title) is not None
        ]
        self.status("Feeds loaded from disk.")
        return loaded

    def save_feeds(self) -> Path | None:
        """Write the feed list to disk; returns the file, or None on failure."""
        try:
            return storage.save_feeds(self.data_path, self._feeds)
        except OSError:
            self.status("Could not open data file.")
            return None

    def _retitle(self, tag_id: str, title: str) -> None:
        for index, feed in enumerate(self._feeds):
            if feed.tag_id == tag_id:
                self._feeds[index] = dataclasses.replace(feed, title=title)
                return

    def open_feed(self, tag_id: str) -> FeedPage | None:
        """Fetch and parse a tag's feed; None if fetching or parsing failed.

        The feed's title replaces the shown title of the subscription, and
        the feed list is saved afterwards.
        """
        self.status(f"Fetching tag: {tag_id}")
        try:
            data = self.client.fetch_feed(tag_id)
        except FetchError as exc:
            self.status(f"Failed ({exc.status_code}): {exc.phrase}")
            return None
        try:
            page = parse_feed(data)
        except FeedParseError as exc:
            self.status(str(exc))
            return None
        if page.title is not None:
            self._retitle(tag_id, page.title)
        self.status("Feed loaded.")
        self.save_feeds()
        return page

    def download_work(self, download: DownloadData) -> Path | None:
        """Download a work's PDF into the data directory; None on failure."""
        self.status(f"Downloading {download.work_id}...")
        try:
            data = self.client.fetch_pdf(download.work_id)
        except FetchError as exc:
            self.status(f"Download Failed ({exc.status_code}): {exc.phrase}")
            return None
        try:
            path = storage.save_pdf(data, download.work_filename, self.data_path)
        except OSError:
            self.status("Error: Write failed.")
            return None
        self.status(f"Saved: {download.work_filename}")
        if self.kindle:
            trigger_kindle_scan(str(path))
        self.status(f"Saved as: {download.work_filename}")
        return path