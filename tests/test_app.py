import io
from pathlib import Path

import pytest
import responses

from ao3feeds.app import ReaderApp, build_parser, main
from ao3feeds.controller import ReaderController
from ao3feeds.storage import Feed, load_feeds, save_feeds
from ao3feeds.works import Work

FEED_URL = "https://archiveofourown.org/tags/123/feed.atom"
PDF_URL = "https://archiveofourown.org/downloads/111/work.pdf"

FEED_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>AO3 works tagged 'Test Tag'</title>
  <entry>
    <title>First Work</title>
    <link rel="alternate" href="https://archiveofourown.org/works/111"/>
    <summary type="html">&lt;p&gt;by writer&lt;/p&gt;&lt;p&gt;A story.&lt;/p&gt;</summary>
  </entry>
</feed>
"""


@pytest.fixture
def app(tmp_path):
    return ReaderApp(ReaderController(data_path=tmp_path))


def feed_stdin(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_update_status_prints_and_remembers(app, capsys):
    app.update_status("hello")
    assert app.status == "hello"
    assert "hello" in capsys.readouterr().out


def test_controller_reports_through_app(app):
    app.controller.add_feed("77")
    assert app.status == "Added Feed ID: 77"


def test_refresh_feeds_lists_feeds(app):
    app.controller.add_feed_row("5", "Five")
    app.controller.add_feed_row("6", "Six")
    lines = app.refresh_feeds()
    assert len(lines) == 2
    assert "Five" in lines[0] and "5" in lines[0]
    assert "Six" in lines[1]


def test_show_works_numbers_entries(app):
    works = [Work("Alpha", "https://archiveofourown.org/works/1", "sum a"),
             Work("Beta", "https://archiveofourown.org/works/2", "sum b")]
    entries = app.show_works(works)
    assert app.works == works
    assert entries[0].startswith("1. Alpha")
    assert entries[1].startswith("2. Beta")
    assert "sum b" in entries[1]


def test_run_adds_feed(app, monkeypatch):
    feed_stdin(monkeypatch, "add 42\nfeeds\nquit\n")
    app.run()
    assert app.controller.feeds == [Feed("42", "42")]


def test_run_rejects_bad_id_and_ends_at_eof(app, monkeypatch):
    feed_stdin(monkeypatch, "add abc\n")
    app.run()
    assert app.controller.feeds == []
    assert app.status == "Error: Feed ID must be numeric (e.g. 207209)"


def test_run_unknown_command(app, monkeypatch):
    feed_stdin(monkeypatch, "frobnicate\n")
    app.run()
    assert app.status.startswith("Unknown command")


def test_run_bad_index(app, monkeypatch):
    feed_stdin(monkeypatch, "load 3\n")
    app.run()
    assert app.status.startswith("Error: No such feed")


def test_run_unsubscribes(tmp_path, app, monkeypatch):
    feed_stdin(monkeypatch, "add 1\nadd 2\nunsub 1\n")
    app.run()
    assert app.controller.feeds == [Feed("2", "2")]
    assert load_feeds(tmp_path) == [Feed("2", "2")]


def test_run_loads_feed_and_downloads(tmp_path, app, monkeypatch):
    feed_stdin(monkeypatch, "add 123\nload 1\nget 1\nquit\n")
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, FEED_URL, body=FEED_XML, status=200)
        rsps.add(responses.GET, PDF_URL, body=b"%PDF data", status=200)
        app.run()
    assert [work.title for work in app.works] == ["First Work"]
    filename = app.works[0].download.work_filename
    assert (tmp_path / filename).read_bytes() == b"%PDF data"
    assert app.status == f"Saved as: {filename}"
    assert app.controller.feeds == [Feed("123", "'Test Tag'")]


def test_run_failed_load_clears_works(app, monkeypatch):
    app.show_works([Work("Old", "https://archiveofourown.org/works/9", "s")])
    feed_stdin(monkeypatch, "add 123\nload 1\n")
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, FEED_URL, status=404)
        app.run()
    assert app.works == []
    assert app.status.startswith("Failed (404)")


def test_build_parser_options():
    args = build_parser().parse_args(["--kindle", "--data-path", "somewhere"])
    assert args.kindle is True
    assert args.data_path == Path("somewhere")
    defaults = build_parser().parse_args([])
    assert defaults.kindle is False
    assert defaults.data_path is None


def test_main_loads_saved_feeds(tmp_path, monkeypatch, capsys):
    save_feeds(tmp_path, [Feed("9", "Nine")])
    feed_stdin(monkeypatch, "feeds\nquit\n")
    assert main(["--data-path", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Feeds loaded from disk." in out
    assert "Ready (Desktop Mode)" in out
    assert "Nine" in out