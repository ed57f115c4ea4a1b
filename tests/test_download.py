import dataclasses

import pytest

from ao3feeds.download import (
    FORBIDDEN_FILENAME_CHARS,
    DownloadData,
    create_download_data,
)

LINK = "https://archiveofourown.org/works/12345"


def test_work_id_is_last_path_segment():
    data = create_download_data(LINK, "Title")
    assert data.work_id == "12345"


def test_work_url_is_the_link():
    data = create_download_data(LINK, "Title")
    assert data.work_url == LINK


def test_link_without_slash_is_whole_id():
    data = create_download_data("777", "Title")
    assert data.work_id == "777"


def test_plain_title_gets_pdf_suffix():
    data = create_download_data(LINK, "Title")
    assert data.work_filename == "Title.pdf"


@pytest.mark.parametrize("ch", list(FORBIDDEN_FILENAME_CHARS))
def test_each_forbidden_char_replaced(ch):
    data = create_download_data(LINK, f"x{ch}y")
    assert data.work_filename == "x_y.pdf"


def test_filename_has_no_forbidden_chars_and_keeps_length():
    title = "A: Story (part 1) & more!"
    data = create_download_data(LINK, title)
    stem = data.work_filename[: -len(".pdf")]
    assert len(stem) == len(title)
    assert not any(ch in FORBIDDEN_FILENAME_CHARS for ch in stem)
    assert data.work_filename.endswith(".pdf")


def test_leading_dot_replaced():
    data = create_download_data(LINK, ".hidden")
    assert data.work_filename == "_hidden.pdf"


def test_empty_title_falls_back_to_work_id():
    data = create_download_data("https://archiveofourown.org/works/999", "")
    assert data.work_filename == "download_999.pdf"


def test_non_ascii_title_kept():
    data = create_download_data(LINK, "Café")
    assert data.work_filename == "Café.pdf"


def test_pdf_url():
    data = DownloadData(work_id="42", work_url=LINK, work_filename="x.pdf")
    assert data.pdf_url() == "https://archiveofourown.org/downloads/42/work.pdf"


def test_download_data_is_immutable():
    data = create_download_data(LINK, "Title")
    with pytest.raises(dataclasses.FrozenInstanceError):
        data.work_id = "1"
    assert data.work_id == "12345"