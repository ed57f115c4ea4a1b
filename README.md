# ao3feeds

A small terminal reader for Archive of Our Own tag feeds. You subscribe to
tags by their numeric ID, list the newest works in a tag's Atom feed, and
download any of them as a PDF.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running

```
ao3feeds
```

Options:

```
ao3feeds --help
```

- `--data-path DIR` — directory for the feed list and downloaded PDFs.
- `--kindle` — use `/mnt/us/documents/AO3/` as the data directory (unless
  `--data-path` is given) and, after each download, ask the Kindle content
  manager to index the new file by running `dbus-send`.

Without either option the data directory is `./downloads/`.

### Commands

The reader prints its help, lists the saved subscriptions and then reads
commands from standard input:

```
add <id>     subscribe to a tag feed by its numeric id
load <n>     load the works of feed n
unsub <n>    unsubscribe from feed n
get <n>      download work n of the loaded feed as PDF
feeds        list subscribed feeds
help         show this text
quit         leave
```

`exit` and end of input also leave the reader.

- `add` accepts only IDs made up of digits; anything else is rejected with
  `Error: Feed ID must be numeric (e.g. 207209)`.
- `load` fetches `https://archiveofourown.org/tags/<id>/feed.atom`. The
  feed's title replaces the subscription's name, the feed list is saved,
  and each work is printed, numbered, with its title, author, description,
  statistics and tags.
- `get` downloads `https://archiveofourown.org/downloads/<work id>/work.pdf`
  into the data directory. The file is named after the work's title, with
  characters unsafe in file names replaced by `_`; an empty title gives
  `download_<work id>.pdf`.
- `unsub` removes the subscription and saves the feed list.

Status messages are printed on lines starting with `--`, including request
errors such as `-- Failed (404): Not Found` or
`-- Download Failed (503): Service Unavailable`.

### Where files go

Subscriptions are kept in `feeds.txt` in the data directory, one `id,title`
pair per line; a line without a comma is read as an ID with the title
`Unknown Feed`. Downloaded PDFs are written to the same directory, which is
created when needed.

## Using it as a library

```python
from ao3feeds.client import Client
from ao3feeds.works import parse_feed

client = Client()
page = parse_feed(client.fetch_feed("207209"))
for work in page.works:
    print(work.label_text())
```

- `ao3feeds.client` — `Client.fetch_feed` and `Client.fetch_pdf` fetch
  feeds and PDFs with the `Kindle-RSS-AO3` user agent, raising `FetchError`
  (with `status_code` and `phrase`) when the response is not 200;
  `get_url_from_id` builds a tag's feed URL; `trigger_kindle_scan` runs the
  Kindle indexing command for a file.
- `ao3feeds.works` — `parse_feed` turns Atom data into a `FeedPage` with a
  `title` and a list of `Work` entries, raising `FeedParseError` on
  malformed XML; entries without a title, summary or alternate link are
  skipped. `format_summary` condenses a work's HTML summary into plain text.
- `ao3feeds.download` — `create_download_data` derives a `DownloadData`
  (work ID, URL and safe PDF file name) from a work's link and title.
- `ao3feeds.storage` — `load_feeds`, `save_feeds` and `save_pdf` read and
  write the data directory; `default_data_path` gives the desktop or Kindle
  directory.
- `ao3feeds.controller` — `ReaderController` keeps the subscription list,
  opens feeds and downloads works, reporting every step through a status
  callable, without any user interface.

## What it does not do

There is no graphical window: the reader is used only through the text
commands above, and works are picked by their number in the printed list.