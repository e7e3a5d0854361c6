"""Render a normalized semantic tree as Dumbdown text."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator

from dumbdown.schemas import BLOCK_TYPES, INLINE_TYPES, NodeType, SemanticNode

_CALLOUT_LABELS = {
    ">>": "KEY INSIGHT",
    "!!": "ACTION REQUIRED",
}

_CODE_FENCE = "```"


def serialize_tree(tree: SemanticNode) -> str:
    """Serialize ``tree`` to Dumbdown. The tree is not modified."""
    nodes = tree.children if tree.type is NodeType.ROOT else [tree]
    return "\n".join(_render_sequence(nodes)).strip()


def _render_sequence(nodes: Iterable[SemanticNode]) -> list[str]:
    """Render sibling nodes, separating adjacent blocks with a blank line.

    ``last_type`` is the kind of the most recently emitted chunk; nodes that
    render to nothing leave it untouched.
    """
    lines: list[str] = []
    last_type: NodeType | None = None
    for node_type, chunk in _iter_chunks(nodes):
        if not chunk:
            continue
        if last_type in BLOCK_TYPES and node_type in BLOCK_TYPES:
            lines.append("")
        lines.extend(chunk)
        last_type = node_type
    return lines


def _iter_chunks(nodes: Iterable[SemanticNode]) -> Iterator[tuple[NodeType, list[str]]]:
    """Yield ``(type, lines)`` per block node; runs of inline nodes share one line."""
    inline_run: list[SemanticNode] = []
    for node in nodes:
        if node.type in INLINE_TYPES:
            inline_run.append(node)
            continue
        if inline_run:
            yield NodeType.TEXT, _inline_lines(inline_run)
            inline_run = []
        yield node.type, _render_block(node)
    if inline_run:
        yield NodeType.TEXT, _inline_lines(inline_run)


def _render_block(node: SemanticNode) -> list[str]:
    renderer = _BLOCK_RENDERERS.get(node.type)
    if renderer is not None:
        return renderer(node)
    if node.type in INLINE_TYPES:
        return _inline_lines([node])
    return _render_sequence(node.children)


def _render_heading(node: SemanticNode) -> list[str]:
    level = node.meta.level or 1
    if level == 1:
        return [node.content, "=" * len(node.content)]
    if level == 2:
        return [node.content, "-" * len(node.content)]
    return [f"{'/' * (level - 1)} {node.content}"]


def _render_paragraph(node: SemanticNode) -> list[str]:
    return _inline_lines(node.children)


def _render_list(node: SemanticNode) -> list[str]:
    lines: list[str] = []
    ordered = bool(node.meta.ordered)
    number = 1
    for child in node.children:
        if child.type is NodeType.LIST_ITEM:
            lines.extend(
                _render_list_item(
                    child, ordered=ordered, number=number, list_depth=node.depth
                )
            )
            number += 1
        else:
            lines.extend(_render_block(child))
    return lines


def _render_list_item(
    node: SemanticNode,
    *,
    ordered: bool = False,
    number: int = 1,
    list_depth: int | None = None,
) -> list[str]:
    """Render one item line followed by its block children and nested lists.

    Items level with their list get ``N. `` or ``- ``; anything deeper gets
    ``-- `` however deep it sits.
    """
    if list_depth is None:
        list_depth = node.depth
    indent = "  " * node.depth
    if node.depth == list_depth:
        marker = f"{number}. " if ordered else "- "
    else:
        marker = "-- "

    inline_nodes: list[SemanticNode] = []
    trailing: list[SemanticNode] = []
    for child in node.children:
        if child.type in INLINE_TYPES:
            inline_nodes.append(child)
        elif child.type is NodeType.PARAGRAPH:
            inline_nodes.extend(child.children)
        else:
            trailing.append(child)

    prefix = indent + marker
    text = render_inline(inline_nodes)
    lines = [prefix + text if text else prefix.rstrip()]
    for child in trailing:
        lines.extend(_render_block(child))
    return lines


def _render_code_block(node: SemanticNode) -> list[str]:
    return [_CODE_FENCE, node.content.strip(), _CODE_FENCE]


def _render_blockquote(node: SemanticNode) -> list[str]:
    text = " ".join(part for part in map(plain_text, node.children) if part)
    return [f'"{text or node.content}"']


def _render_callout(node: SemanticNode) -> list[str]:
    return [f"[{callout_label(node.meta.type or '')}] {node.content}"]


def callout_label(marker: str) -> str:
    """Map a callout marker to its bracketed label text."""
    return _CALLOUT_LABELS.get(marker, marker.upper())


def render_inline(nodes: Iterable[SemanticNode]) -> str:
    """Render inline nodes as one line.

    Parts are joined with a single space unless one side already carries
    the boundary whitespace.
    """
    result = ""
    for part in map(_render_inline_part, nodes):
        if not part:
            continue
        if result and not result.endswith(" ") and not part.startswith(" "):
            result += " "
        result += part
    return result


def _inline_lines(nodes: Iterable[SemanticNode]) -> list[str]:
    text = render_inline(nodes)
    return [text] if text else []


def _render_inline_part(node: SemanticNode) -> str:
    if node.type is NodeType.TEXT:
        return node.content
    if node.type is NodeType.INLINE_CODE:
        return f"`{node.content}`"
    if node.type is NodeType.EMPHASIS:
        return node.content.upper()
    if node.type is NodeType.LINK:
        return node.meta.href or "#"
    return plain_text(node)


def plain_text(node: SemanticNode) -> str:
    """Flatten a node to its text: containers join their children's text."""
    if not node.children:
        return node.content
    return " ".join(part for part in map(plain_text, node.children) if part)


_BLOCK_RENDERERS: dict[NodeType, Callable[[SemanticNode], list[str]]] = {
    NodeType.HEADING: _render_heading,
    NodeType.PARAGRAPH: _render_paragraph,
    NodeType.LIST: _render_list,
    NodeType.LIST_ITEM: _render_list_item,
    NodeType.CODE_BLOCK: _render_code_block,
    NodeType.BLOCKQUOTE: _render_blockquote,
    NodeType.CALLOUT: _render_callout,
}
