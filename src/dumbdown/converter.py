"""HTML -> Dumbdown pipeline: parse, normalize, serialize."""

from __future__ import annotations

from dumbdown.exceptions import ConversionError, InvalidInputError
from dumbdown.html_parser import parse_html
from dumbdown.html_utils import DomBuilder
from dumbdown.normalizer import normalize_tree
from dumbdown.serializer import serialize_tree
from dumbdown.utils.logging_config import get_logger

logger = get_logger(__name__)


def convert(html: str, *, dom_builder: DomBuilder | None = None) -> str:
    """Convert an HTML string to Dumbdown text.

    Args:
        html: The markup to convert. An empty string short-circuits to ``""``.
        dom_builder: Optional DOM-construction callable passed to the parser.

    Returns:
        The Dumbdown rendering, trimmed.

    Raises:
        InvalidInputError: If ``html`` is not a ``str``.
        ConversionError: If any pipeline stage fails; the original exception
            is chained as ``__cause__``.
    """
    if not isinstance(html, str):
        raise InvalidInputError(f"Invalid HTML input: expected str, got {type(html).__name__}")

    if not html:
        return ""

    try:
        tree = parse_html(html, dom_builder=dom_builder)
        normalize_tree(tree)
        dumbdown = serialize_tree(tree)
    except Exception as exc:
        logger.error(
            "Conversion failed",
            extra={"input_chars": len(html), "error": str(exc)},
        )
        raise ConversionError(f"Conversion failed: {exc}") from exc

    logger.debug(
        "Converted HTML to Dumbdown",
        extra={"input_chars": len(html), "output_chars": len(dumbdown)},
    )
    return dumbdown
