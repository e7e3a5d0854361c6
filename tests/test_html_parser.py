"""Tests for the HTML -> semantic tree parser."""

from __future__ import annotations

from typing import Iterator

import pytest
from bs4 import BeautifulSoup

from dumbdown.html_parser import parse_html
from dumbdown.schemas import NodeType, SemanticNode


def _walk(node: SemanticNode) -> Iterator[SemanticNode]:
    yield node
    for child in node.children:
        yield from _walk(child)


def _find_all(node: SemanticNode, node_type: NodeType) -> list[SemanticNode]:
    return [n for n in _walk(node) if n.type is node_type]


def _find(node: SemanticNode, node_type: NodeType) -> SemanticNode:
    found = _find_all(node, node_type)
    assert found, f"no {node_type.value} node in tree"
    return found[0]


def test_returns_fresh_root_each_call() -> None:
    first = parse_html("<p>Hi</p>")
    second = parse_html("<p>Hi</p>")

    assert first.type is NodeType.ROOT
    assert first is not second
    assert first == second


def test_paragraph_children_are_parsed_recursively() -> None:
    tree = parse_html("<p>Hello <b>world</b></p>")

    paragraph = _find(tree, NodeType.PARAGRAPH)
    assert [child.type for child in paragraph.children] == [NodeType.TEXT, NodeType.EMPHASIS]
    assert paragraph.children[0].content == "Hello "
    assert paragraph.children[1].content == "world"
    assert paragraph.children[1].meta.type == "strong"


def test_text_whitespace_runs_collapse_and_blank_text_is_dropped() -> None:
    tree = parse_html("<p>A \n\t  B</p>\n   \n<p>C</p>")

    texts = [node.content for node in _find_all(tree, NodeType.TEXT)]
    assert texts == ["A B", "C"]


@pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
def test_heading_level_and_flattened_text(level: int) -> None:
    tree = parse_html(f"<h{level}>  Big <b>bold</b>\n title </h{level}>")

    heading = _find(tree, NodeType.HEADING)
    assert heading.meta.level == level
    assert heading.content == "Big bold title"
    assert heading.children == []


def test_list_ordered_flag() -> None:
    tree = parse_html("<ol><li>x</li></ol><ul><li>y</li></ul>")

    lists = _find_all(tree, NodeType.LIST)
    assert [lst.meta.ordered for lst in lists] == [True, False]


def test_only_li_children_become_items() -> None:
    tree = parse_html("<ul><li>one</li><li>two</li></ul>")

    items = _find(tree, NodeType.LIST).children
    assert [item.type for item in items] == [NodeType.LIST_ITEM, NodeType.LIST_ITEM]


def test_nested_list_depths() -> None:
    tree = parse_html(
        "<ul><li>A<ul><li>B<ul><li>C</li></ul></li></ul></li></ul>"
    )

    outer = _find(tree, NodeType.LIST)
    item_a = outer.children[0]
    inner = _find(item_a, NodeType.LIST)
    item_b = inner.children[0]
    innermost = _find(item_b, NodeType.LIST)
    item_c = innermost.children[0]

    assert (outer.depth, item_a.depth) == (0, 0)
    # The nested list stays level with its item; its items go one deeper.
    assert (inner.depth, item_b.depth) == (0, 1)
    assert (innermost.depth, item_c.depth) == (1, 2)


def test_pre_keeps_raw_text() -> None:
    tree = parse_html("<pre>line1\n    line2</pre>")

    code = _find(tree, NodeType.CODE_BLOCK)
    assert code.content == "line1\n    line2"


def test_code_inside_pre_is_not_inline_code() -> None:
    tree = parse_html("<pre><code>x = 1</code></pre>")

    assert _find(tree, NodeType.CODE_BLOCK).content == "x = 1"
    assert _find_all(tree, NodeType.INLINE_CODE) == []


def test_inline_code_keeps_its_text() -> None:
    tree = parse_html("<p>Use <code>a  b</code></p>")

    assert _find(tree, NodeType.INLINE_CODE).content == "a  b"


def test_link_href_and_default() -> None:
    tree = parse_html('<p><a href="https://x.com">label</a> <a>bare</a></p>')

    links = _find_all(tree, NodeType.LINK)
    assert [(link.content, link.meta.href) for link in links] == [
        ("label", "https://x.com"),
        ("bare", "#"),
    ]


@pytest.mark.parametrize(
    ("tag", "kind"),
    [("b", "strong"), ("strong", "strong"), ("i", "em"), ("em", "em")],
)
def test_emphasis_is_a_leaf(tag: str, kind: str) -> None:
    tree = parse_html(f"<p><{tag}>very <code>loud</code></{tag}></p>")

    emphasis = _find(tree, NodeType.EMPHASIS)
    assert emphasis.meta.type == kind
    assert emphasis.content == "very loud"
    assert emphasis.children == []


@pytest.mark.parametrize(
    ("html", "marker", "content"),
    [
        ("<div>[WARNING] Disk almost full</div>", "WARNING", "Disk almost full"),
        ("<section>NOTE remember this</section>", "NOTE", "remember this"),
        ("<article>error  went wrong</article>", "error", "went wrong"),
        ("<div>&gt;&gt; Key point</div>", ">>", "Key point"),
        ("<div>!! Do it now</div>", "!!", "Do it now"),
    ],
)
def test_callouts(html: str, marker: str, content: str) -> None:
    tree = parse_html(html)

    callout = _find(tree, NodeType.CALLOUT)
    assert callout.meta.type == marker
    assert callout.content == content


def test_plain_div_is_transparent() -> None:
    tree = parse_html("<div><p>Plain</p></div>")

    assert [child.type for child in tree.children] == [NodeType.PARAGRAPH]


def test_blockquote_is_a_container() -> None:
    tree = parse_html("<blockquote><p>Quoted</p></blockquote>")

    quote = _find(tree, NodeType.BLOCKQUOTE)
    assert [child.type for child in quote.children] == [NodeType.PARAGRAPH]


def test_unwanted_elements_and_comments_are_dropped() -> None:
    tree = parse_html(
        "<p>a<!-- hidden --><script>evil()</script>b</p>"
        "<style>p { color: red; }</style><noscript>nojs</noscript>"
        '<iframe src="x"></iframe>'
    )

    texts = " ".join(node.content for node in _find_all(tree, NodeType.TEXT))
    assert "a" in texts and "b" in texts
    for dropped in ("hidden", "evil", "color", "nojs"):
        assert dropped not in texts


def test_injected_dom_builder_is_used() -> None:
    calls: list[str] = []

    def builder(html: str) -> BeautifulSoup:
        calls.append(html)
        return BeautifulSoup(html, "html.parser")

    tree = parse_html("<p>x</p>", dom_builder=builder)

    assert calls == ["<p>x</p>"]
    assert [child.type for child in tree.children] == [NodeType.PARAGRAPH]
