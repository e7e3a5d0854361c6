"""Shared HTML utilities: DOM construction and cleanup."""

from __future__ import annotations

import re
from typing import Callable

from dumbdown.config import DUMBDOWN_HTML_PARSER

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


DomBuilder = Callable[[str], BeautifulSoup]

# Elements with no semantic value, dropped before traversal.
UNWANTED_TAGS = ("script", "style", "meta", "noscript", "iframe")

_WHITESPACE_RE = re.compile(r"\s+")


def build_dom(html: str) -> BeautifulSoup:
    """Default DOM builder: a fresh, independent soup per call."""
    return BeautifulSoup(html, DUMBDOWN_HTML_PARSER)


def strip_unwanted_elements(soup: BeautifulSoup) -> None:
    for tag in soup.find_all(list(UNWANTED_TAGS)):
        tag.decompose()


def find_document_root(soup: BeautifulSoup) -> Tag:
    """Return ``<body>`` when the builder produced one, else the soup itself."""
    if soup.body:
        return soup.body
    return soup


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces without trimming."""
    return _WHITESPACE_RE.sub(" ", text)


def normalize_text(text: str) -> str:
    return collapse_whitespace(text).strip()
