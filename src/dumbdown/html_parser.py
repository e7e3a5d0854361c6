"""Parse HTML into the semantic tree consumed by the normalizer and serializer."""

from __future__ import annotations

import re
from typing import Callable

from dumbdown.html_utils import (
    DomBuilder,
    build_dom,
    collapse_whitespace,
    find_document_root,
    normalize_text,
    strip_unwanted_elements,
)
from dumbdown.schemas import NodeMeta, NodeType, SemanticNode

try:
    from bs4.element import NavigableString, PreformattedString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


_CALLOUT_PATTERNS = (
    re.compile(r"^\[?(WARNING|NOTE|ERROR)\]?\s*(.+)", re.IGNORECASE),
    re.compile(r"^(>>|!!)\s*(.+)"),
)

_TagHandler = Callable[[Tag, SemanticNode, int], None]


def parse_html(html: str, *, dom_builder: DomBuilder | None = None) -> SemanticNode:
    """Build a semantic tree from an HTML string.

    Parameters
    ----------
    html : str
        The markup to parse.
    dom_builder : DomBuilder | None
        Callable turning markup into a BeautifulSoup document. Defaults to
        :func:`dumbdown.html_utils.build_dom`; every call builds its own DOM.

    Returns
    -------
    SemanticNode
        A fresh ``root`` node owning the whole tree.
    """
    soup = (dom_builder or build_dom)(html)
    strip_unwanted_elements(soup)

    root = SemanticNode(type=NodeType.ROOT)
    _parse_children(find_document_root(soup), root, 0)
    return root


def _parse_node(node: NavigableString | Tag, parent: SemanticNode, depth: int) -> None:
    if isinstance(node, NavigableString):
        # Comments, doctypes, CDATA and processing instructions carry no text.
        if isinstance(node, PreformattedString):
            return
        text = collapse_whitespace(str(node))
        if text.strip():
            parent.add_child(SemanticNode(type=NodeType.TEXT, content=text, depth=depth))
        return

    if not isinstance(node, Tag):
        return

    handler = _TAG_HANDLERS.get(node.name.lower(), _parse_transparent)
    handler(node, parent, depth)


def _parse_children(tag: Tag, parent: SemanticNode, depth: int) -> None:
    for child in list(tag.children):
        _parse_node(child, parent, depth)


def _flatten_text(tag: Tag) -> str:
    return normalize_text(tag.get_text())


def _parse_transparent(tag: Tag, parent: SemanticNode, depth: int) -> None:
    _parse_children(tag, parent, depth)


def _parse_heading(tag: Tag, parent: SemanticNode, depth: int) -> None:
    level = int(tag.name[1])
    parent.add_child(
        SemanticNode(
            type=NodeType.HEADING,
            content=_flatten_text(tag),
            depth=depth,
            meta=NodeMeta(level=level),
        )
    )


def _parse_paragraph(tag: Tag, parent: SemanticNode, depth: int) -> None:
    paragraph = SemanticNode(type=NodeType.PARAGRAPH, depth=depth)
    _parse_children(tag, paragraph, depth)
    parent.add_child(paragraph)


def _parse_list(tag: Tag, parent: SemanticNode, depth: int) -> None:
    # A list directly under an item stays level with it; its items go one deeper.
    item_depth = depth + 1 if parent.type is NodeType.LIST_ITEM else depth
    list_node = SemanticNode(
        type=NodeType.LIST,
        depth=depth,
        meta=NodeMeta(ordered=tag.name.lower() == "ol"),
    )
    for item in tag.find_all("li", recursive=False):
        _parse_list_item(item, list_node, item_depth)
    parent.add_child(list_node)


def _parse_list_item(tag: Tag, parent: SemanticNode, depth: int) -> None:
    item = SemanticNode(type=NodeType.LIST_ITEM, depth=depth)
    _parse_children(tag, item, depth)
    parent.add_child(item)


def _parse_pre(tag: Tag, parent: SemanticNode, depth: int) -> None:
    parent.add_child(
        SemanticNode(type=NodeType.CODE_BLOCK, content=tag.get_text(), depth=depth)
    )


def _parse_code(tag: Tag, parent: SemanticNode, depth: int) -> None:
    if tag.find_parent("pre") is not None:
        _parse_transparent(tag, parent, depth)
        return
    parent.add_child(
        SemanticNode(type=NodeType.INLINE_CODE, content=tag.get_text(), depth=depth)
    )


def _parse_blockquote(tag: Tag, parent: SemanticNode, depth: int) -> None:
    quote = SemanticNode(type=NodeType.BLOCKQUOTE, depth=depth)
    _parse_children(tag, quote, depth)
    parent.add_child(quote)


def _parse_link(tag: Tag, parent: SemanticNode, depth: int) -> None:
    href = tag.get("href") or "#"
    parent.add_child(
        SemanticNode(
            type=NodeType.LINK,
            content=_flatten_text(tag),
            depth=depth,
            meta=NodeMeta(href=href),
        )
    )


def _emphasis_handler(kind: str) -> _TagHandler:
    def _parse_emphasis(tag: Tag, parent: SemanticNode, depth: int) -> None:
        parent.add_child(
            SemanticNode(
                type=NodeType.EMPHASIS,
                content=_flatten_text(tag),
                depth=depth,
                meta=NodeMeta(type=kind),
            )
        )

    return _parse_emphasis


def _parse_section(tag: Tag, parent: SemanticNode, depth: int) -> None:
    """Emit a callout when the block's text starts with a marker, else recurse."""
    text = tag.get_text().strip()
    for pattern in _CALLOUT_PATTERNS:
        match = pattern.match(text)
        if match:
            parent.add_child(
                SemanticNode(
                    type=NodeType.CALLOUT,
                    content=match.group(2).strip(),
                    depth=depth,
                    meta=NodeMeta(type=match.group(1)),
                )
            )
            return
    _parse_children(tag, parent, depth)


_TAG_HANDLERS: dict[str, _TagHandler] = {
    **{f"h{level}": _parse_heading for level in range(1, 7)},
    "p": _parse_paragraph,
    "ul": _parse_list,
    "ol": _parse_list,
    "li": _parse_list_item,
    "pre": _parse_pre,
    "code": _parse_code,
    "blockquote": _parse_blockquote,
    "a": _parse_link,
    "b": _emphasis_handler("strong"),
    "strong": _emphasis_handler("strong"),
    "i": _emphasis_handler("em"),
    "em": _emphasis_handler("em"),
    "div": _parse_section,
    "section": _parse_section,
    "article": _parse_section,
}
