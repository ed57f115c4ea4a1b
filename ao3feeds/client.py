"""HTTP access to tag feeds and work PDFs, and the e-reader index hook."""

from __future__ import annotations

import subprocess
from http import HTTPStatus

import requests

from .download import AO3_BASE_URL

USER_AGENT = "Kindle-RSS-AO3"
REQUEST_TIMEOUT = 60


class FetchError(Exception):
    """Raised when a request does not come back with status 200."""

    def __init__(self, status_code: int, phrase: str) -> None:
        super().__init__(f"({status_code}): {phrase}")
        self.status_code = status_code
        self.phrase = phrase


def _status_phrase(code: int) -> str:
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return "Unknown Error"


def get_url_from_id(feed_id: str) -> str:
    """Return the Atom feed URL for a tag id."""
    return f"{AO3_BASE_URL}/tags/{feed_id}/feed.atom"


def trigger_kindle_scan(full_path: str) -> bool:
    """Ask the Kindle content manager to index a file; True on success."""
    cmd = [
        "dbus-send",
        "--system",
        "/default/com/lab126/content_manager",
        "com.lab126.content_manager.externalScan",
        f"string:{full_path}",
    ]
    try:
        result = subprocess.run(cmd, check=False)
    except OSError:
        return False
    return result.returncode == 0


class Client:
    """Fetches feeds and PDFs with the reader's user agent."""

    def __init__(self, session: requests.Session | None = None) -> None:
        self.session = session if session is not None else requests.Session()

    def _get(self, url: str) -> bytes:
        try:
            response = self.session.get(
                url, headers={"User-Agent": USER_AGENT}, timeout=REQUEST_TIMEOUT
            )
        except requests.RequestException as exc:
            raise FetchError(0, str(exc) or "Unknown Error") from exc
        if response.status_code != 200:
            raise FetchError(response.status_code, _status_phrase(response.status_code))
        return response.content

    def fetch_feed(self, tag_id: str) -> bytes:
        """Download the Atom feed of a tag."""
        return self._get(get_url_from_id(tag_id))

    def fetch_pdf(self, work_id: str) -> bytes:
        """Download the PDF of a work."""
        return self._get(f"{AO3_BASE_URL}/downloads/{work_id}/work.pdf")