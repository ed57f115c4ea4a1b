"""Download descriptors for works listed in a feed."""

from __future__ import annotations

from dataclasses import dataclass

AO3_BASE_URL = "https://archiveofourown.org"

FORBIDDEN_FILENAME_CHARS = "/\\?%*:|\"<>!@#$^&()[]{};', \t\n\r"


@dataclass(frozen=True)
class DownloadData:
    """Identifies one work and the file name its PDF is saved under."""

    work_id: str
    work_url: str
    work_filename: str

    def pdf_url(self) -> str:
        """Return the URL the work's PDF is downloaded from."""
        return f"{AO3_BASE_URL}/downloads/{self.work_id}/work.pdf"


def _safe_filename(title: str, work_id: str) -> str:
    safe = "".join("_" if ch in FORBIDDEN_FILENAME_CHARS else ch for ch in title)
    if safe.startswith("."):
        safe = "_" + safe[1:]
    if not safe:
        safe = f"download_{work_id}"
    return safe + ".pdf"


def create_download_data(link: str, title: str) -> DownloadData:
    """Build the download descriptor for the work at ``link`` titled ``title``.

    The work id is whatever follows the last slash of the link; the file
    name is the title with unsafe characters replaced by underscores.
    """
    work_id = link.rsplit("/", 1)[-1]
    return DownloadData(
        work_id=work_id,
        work_url=link,
        work_filename=_safe_filename(title, work_id),
    )