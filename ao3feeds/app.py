"""Interactive terminal front end for the feed reader."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, Iterable

from .controller import ReaderController
from .storage import Feed
from .works import Work

HELP_TEXT = """Commands:
  add <id>     subscribe to a tag feed by its numeric id
  load <n>     load the works of feed n
  unsub <n>    unsubscribe from feed n
  get <n>      download work n of the loaded feed as PDF
  feeds        list subscribed feeds
  help         show this text
  quit         leave"""


class ReaderApp:
    """Reads commands from standard input and drives a controller."""

    def __init__(self, controller: ReaderController) -> None:
        self.controller = controller
        self.status = ""
        self.works: list[Work] = []
        controller.status = self.update_status
        self._commands: dict[str, Callable[[str], None]] = {
            "add": self._add,
            "load": self._load,
            "unsub": self._unsubscribe,
            "get": self._get,
            "feeds": lambda _arg: self.refresh_feeds(),
            "help": lambda _arg: print(HELP_TEXT),
        }

    def update_status(self, message: str) -> None:
        """Show a status message and remember it as the current status."""
        self.status = message
        print(f"-- {message}")

    def refresh_feeds(self) -> list[str]:
        """Print the numbered list of subscribed feeds and return its lines."""
        lines = [
            f"{number}. {feed.title} [{feed.tag_id}]"
            for number, feed in enumerate(self.controller.feeds, start=1)
        ]
        print("\n".join(lines) if lines else "(no feeds)")
        return lines

    def show_works(self, works: Iterable[Work]) -> list[str]:
        """Replace the shown works, print them numbered and return the entries."""
        self.works = list(works)
        entries = []
        for number, work in enumerate(self.works, start=1):
            first, *rest = work.label_text().split("\n")
            entries.append("\n".join([f"{number}. {first}", *("   " + line for line in rest)]))
        for entry in entries:
            print(entry)
            print()
        return entries

    def _pick(self, items: list, arg: str, what: str):
        try:
            number = int(arg)
        except ValueError:
            number = 0
        if not 1 <= number <= len(items):
            self.update_status(f"Error: No such {what}: {arg}")
            return None
        return items[number - 1]

    def _add(self, arg: str) -> None:
        if self.controller.add_feed(arg) is not None:
            self.refresh_feeds()

    def _load(self, arg: str) -> None:
        feed: Feed | None = self._pick(self.controller.feeds, arg, "feed")
        if feed is None:
            return
        page = self.controller.open_feed(feed.tag_id)
        self.show_works(page.works if page is not None else [])
        self.refresh_feeds()

    def _unsubscribe(self, arg: str) -> None:
        feed: Feed | None = self._pick(self.controller.feeds, arg, "feed")
        if feed is None:
            return
        self.controller.remove_feed(feed.tag_id)
        self.refresh_feeds()

    def _get(self, arg: str) -> None:
        work: Work | None = self._pick(self.works, arg, "work")
        if work is not None:
            self.controller.download_work(work.download)

    def run(self) -> None:
        """Process commands until ``quit`` or the end of input."""
        print(HELP_TEXT)
        self.refresh_feeds()
        while True:
            try:
                line = input("> ")
            except EOFError:
                break
            command, _, arg = line.strip().partition(" ")
            if not command:
                continue
            if command in ("quit", "exit"):
                break
            handler = self._commands.get(command)
            if handler is None:
                self.update_status(f"Unknown command: {command}")
                continue
            handler(arg.strip())


def build_parser() -> argparse.ArgumentParser:
    """Return the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="ao3feeds", description="Follow tag feeds and download works as PDF."
    )
    parser.add_argument(
        "--kindle",
        action="store_true",
        help="store data on the Kindle and index downloads",
    )
    parser.add_argument(
        "--data-path",
        type=Path,
        default=None,
        help="directory for the feed list and downloads",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Start the reader; returns the exit status."""
    args = build_parser().parse_args(argv)
    controller = ReaderController(data_path=args.data_path, kindle=args.kindle)
    app = ReaderApp(controller)
    controller.load_feeds()
    app.update_status("Ready (Kindle Mode)" if args.kindle else "Ready (Desktop Mode)")
    app.run()
    return 0