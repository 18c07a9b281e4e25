"""Anchor href extraction using BeautifulSoup."""

from typing import IO

from bs4 import BeautifulSoup

_BS4_PARSER = "lxml"


def extract_hrefs(content: bytes | str | IO) -> list[str]:
    """
    Return the ``href`` of every ``<a>`` tag in *content*, in document order.

    *content* may be raw bytes, text, or a readable stream (consumed to the
    end).  Anchors without an ``href`` are skipped; duplicates are kept.
    Parsing is best-effort: malformed markup never raises, whatever the
    parser cannot recover is simply not returned.
    """
    if hasattr(content, "read"):
        content = content.read()
    if not content:
        return []

    soup = BeautifulSoup(content, _BS4_PARSER)

    hrefs: list[str] = []
    for el in soup.find_all("a"):
        href = el.get("href")
        if href is not None:
            hrefs.append(href)
    return hrefs
