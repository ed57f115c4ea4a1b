"""Parsing of tag feeds into the works they list."""

from __future__ import annotations

from dataclasses import dataclass, field

from lxml import etree

from .download import DownloadData, create_download_data

ATOM_NS = "http://www.w3.org/2005/Atom"
_NS = {"atom": ATOM_NS}
_FEED_TITLE_PREFIX_LEN = len("AO3 works tagged ")


class FeedParseError(ValueError):
    """Raised when feed data is not well-formed XML."""


@dataclass(frozen=True)
class Work:
    """One work listed in a feed, with its formatted summary."""

    title: str
    link: str
    summary: str

    @property
    def download(self) -> DownloadData:
        """The descriptor used to download this work's PDF."""
        return create_download_data(self.link, self.title)

    def label_text(self) -> str:
        """The text shown for the work: its title, then its summary."""
        return f"{self.title}\n{self.summary}"


@dataclass
class FeedPage:
    """A parsed feed: its display title, if any, and its works."""

    title: str | None
    works: list[Work] = field(default_factory=list)


def _content(node) -> str:
    if isinstance(node, str):
        return str(node)
    return str(node.xpath("string()"))


def _first(context, expr: str, default: str) -> str:
    nodes = context.xpath(expr)
    return _content(nodes[0]) if nodes else default


def format_summary(raw_html: str | None) -> str:
    """Turn a work's HTML summary into author, description, stats and tags."""
    if not raw_html:
        return ""
    try:
        doc = etree.HTML(raw_html)
    except (etree.ParserError, etree.XMLSyntaxError, ValueError):
        return ""
    if doc is None:
        return ""
    author = _first(doc, "//p[1]", "Unknown")
    description = _first(doc, "//p[2]", "")
    stats = _first(doc, "//p[3]", "")
    tags = ", ".join(_content(node) for node in doc.xpath("//li/a"))
    return f"{author}\n{description}\n\n{stats}\nTags: {tags}"


def parse_feed(xml_data: bytes | str) -> FeedPage:
    """Parse an Atom tag feed.

    Entries lacking a title, a summary or an alternate link are left out.
    """
    if isinstance(xml_data, str):
        xml_data = xml_data.encode("utf-8")
    parser = etree.XMLParser(no_network=True)
    try:
        root = etree.fromstring(xml_data, parser)
    except etree.XMLSyntaxError as exc:
        raise FeedParseError(
            "XML Error: Entered ID is probably a non-cannonical tag."
        ) from exc

    titles = root.xpath("/atom:feed/atom:title", namespaces=_NS)
    page_title = _content(titles[0])[_FEED_TITLE_PREFIX_LEN:] if titles else None

    works = []
    for entry in root.xpath("//atom:entry", namespaces=_NS):
        title = entry.xpath("atom:title", namespaces=_NS)
        summary = entry.xpath("atom:summary", namespaces=_NS)
        link = entry.xpath("atom:link[@rel='alternate']/@href", namespaces=_NS)
        if not (title and summary and link):
            continue
        works.append(
            Work(
                title=_content(title[0]),
                link=_content(link[0]),
                summary=format_summary(_content(summary[0])),
            )
        )
    return FeedPage(title=page_title, works=works)