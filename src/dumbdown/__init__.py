"""dumbdown: convert HTML and Markdown into plain-text Dumbdown."""

from dumbdown.converter import convert
from dumbdown.exceptions import ConversionError, DumbdownError, InvalidInputError
from dumbdown.html_parser import parse_html
from dumbdown.markdown_converter import convert_markdown
from dumbdown.normalizer import normalize_tree
from dumbdown.schemas import NodeMeta, NodeType, SemanticNode
from dumbdown.serializer import serialize_tree

__all__ = [
    "ConversionError",
    "DumbdownError",
    "InvalidInputError",
    "NodeMeta",
    "NodeType",
    "SemanticNode",
    "convert",
    "convert_markdown",
    "normalize_tree",
    "parse_html",
    "serialize_tree",
]
