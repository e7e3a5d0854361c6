"""Shared schemas for dumbdown."""

from dumbdown.schemas.nodes import (
    BLOCK_TYPES,
    INLINE_TYPES,
    LEAF_TYPES,
    PRUNABLE_TYPES,
    NodeMeta,
    NodeType,
    SemanticNode,
)

__all__ = [
    "BLOCK_TYPES",
    "INLINE_TYPES",
    "LEAF_TYPES",
    "PRUNABLE_TYPES",
    "NodeMeta",
    "NodeType",
    "SemanticNode",
]
