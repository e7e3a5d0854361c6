"""Semantic tree models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class NodeType(str, Enum):
    """Closed set of semantic node kinds."""

    ROOT = "root"
    TEXT = "text"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST = "list"
    LIST_ITEM = "list_item"
    CODE_BLOCK = "code_block"
    INLINE_CODE = "inline_code"
    EMPHASIS = "emphasis"
    LINK = "link"
    BLOCKQUOTE = "blockquote"
    CALLOUT = "callout"


# Separated from each other by a blank line when adjacent.
BLOCK_TYPES = frozenset(
    {
        NodeType.HEADING,
        NodeType.PARAGRAPH,
        NodeType.LIST,
        NodeType.CODE_BLOCK,
        NodeType.BLOCKQUOTE,
        NodeType.CALLOUT,
    }
)

INLINE_TYPES = frozenset(
    {NodeType.TEXT, NodeType.INLINE_CODE, NodeType.EMPHASIS, NodeType.LINK}
)

# Never pruned, even with empty content.
LEAF_TYPES = frozenset(
    {
        NodeType.HEADING,
        NodeType.CODE_BLOCK,
        NodeType.BLOCKQUOTE,
        NodeType.EMPHASIS,
        NodeType.LINK,
        NodeType.INLINE_CODE,
        NodeType.CALLOUT,
    }
)

# Containers that carry no meaning once childless.
PRUNABLE_TYPES = frozenset({NodeType.PARAGRAPH, NodeType.LIST, NodeType.LIST_ITEM})


class NodeMeta(BaseModel):
    """Per-type metadata.

    ``level`` is set for headings, ``ordered`` for lists, ``href`` for links
    and ``type`` for emphasis (``strong``/``em``) and callouts (the matched
    marker).
    """

    level: int | None = Field(default=None, ge=1, le=6)
    ordered: bool | None = None
    href: str | None = None
    type: str | None = None


class SemanticNode(BaseModel):
    """A node of the intermediate semantic tree."""

    type: NodeType
    content: str = ""
    depth: int = Field(default=0, ge=0)
    children: list["SemanticNode"] = Field(default_factory=list)
    meta: NodeMeta = Field(default_factory=NodeMeta)

    def add_child(self, child: SemanticNode) -> SemanticNode:
        self.children.append(child)
        return child
