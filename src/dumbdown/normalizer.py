"""Canonicalize whitespace and structure of a semantic tree in place."""

from __future__ import annotations

from dumbdown.html_utils import normalize_text
from dumbdown.schemas import LEAF_TYPES, PRUNABLE_TYPES, NodeType, SemanticNode


def normalize_tree(tree: SemanticNode) -> SemanticNode:
    """Normalize ``tree`` in place and return it.

    Two depth-first, post-order passes: the first collapses whitespace in
    text nodes, drops empty children and merges adjacent text siblings; the
    second prunes paragraphs, lists and list items left without children.
    Running it on an already normalized tree changes nothing.
    """
    _normalize_node(tree)
    _remove_empty_nodes(tree)
    return tree


def _normalize_node(node: SemanticNode) -> None:
    if node.type is NodeType.TEXT:
        node.content = normalize_text(node.content)

    for child in node.children:
        _normalize_node(child)

    node.children = _collapse_text_nodes(
        [child for child in node.children if not _is_empty(child)]
    )


def _is_empty(node: SemanticNode) -> bool:
    if node.type is NodeType.TEXT:
        return not node.content.strip()
    if node.type in LEAF_TYPES:
        return False
    return not node.children


def _collapse_text_nodes(children: list[SemanticNode]) -> list[SemanticNode]:
    collapsed: list[SemanticNode] = []
    for child in children:
        if (
            child.type is NodeType.TEXT
            and collapsed
            and collapsed[-1].type is NodeType.TEXT
        ):
            collapsed[-1].content = f"{collapsed[-1].content} {child.content}"
        else:
            collapsed.append(child)
    return collapsed


def _remove_empty_nodes(node: SemanticNode) -> None:
    for child in node.children:
        _remove_empty_nodes(child)

    node.children = [
        child
        for child in node.children
        if child.type not in PRUNABLE_TYPES or child.children
    ]
