"""Convert Markdown source to Dumbdown with an ordered set of regex rewrites."""

from __future__ import annotations

import re
from typing import Callable

from dumbdown.exceptions import ConversionError, InvalidInputError
from dumbdown.utils.logging_config import get_logger

logger = get_logger(__name__)

# Spans copied through untouched: fenced code, inline code, display and inline math.
_PROTECTED_RE = re.compile(
    r"(```[\s\S]*?```|`[^`\n]+`|\$\$[\s\S]+?\$\$|\$[^$\n]+?\$)"
)
_PLACEHOLDER = "\x00{}\x00"
_PLACEHOLDER_RE = re.compile(r"\x00(\d+)\x00")

_HEADING_RE = re.compile(r"^(#{1,6})[ \t]+(.+?)[ \t]*$", re.MULTILINE)
_BOLD_RES = (
    re.compile(r"\*\*([^*]+)\*\*"),
    re.compile(r"(?<!\w)__([^_]+)__(?!\w)"),
)
_ITALIC_RES = (
    re.compile(r"\*([^*\n]+)\*"),
    re.compile(r"(?<!\w)_([^_\n]+)_(?!\w)"),
)
_LINK_RE = re.compile(r"!?\[[^\]]*\]\(([^)\s]+)(?:\s+\"[^\"]*\")?\)")
_AUTOLINK_RE = re.compile(r"<(https?://[^>\s]+)>")
_BARE_URL_RE = re.compile(r"https?://[^\s<>()\[\]*]+")
_UNORDERED_ITEM_RE = re.compile(r"^(\s*)[-*+]\s+(.+)$")
_ORDERED_ITEM_RE = re.compile(r"^(\s*)(\d+)\.\s+(.+)$")
_BLOCKQUOTE_RE = re.compile(r"^>[ \t]+(.+)$", re.MULTILINE)
_RULE_RE = re.compile(r"^(?:[-*_][ \t]*){3,}$", re.MULTILINE)
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def convert_markdown(markdown: str) -> str:
    """Convert Markdown to Dumbdown.

    Raises:
        InvalidInputError: If ``markdown`` is not a ``str``.
        ConversionError: If a rewrite step fails unexpectedly.
    """
    if not isinstance(markdown, str):
        raise InvalidInputError(
            f"Invalid markdown input: expected str, got {type(markdown).__name__}"
        )

    if not markdown:
        return ""

    try:
        result = _rewrite(markdown)
    except Exception as exc:
        logger.error(
            "Markdown conversion failed",
            extra={"input_chars": len(markdown), "error": str(exc)},
        )
        raise ConversionError(f"Markdown conversion failed: {exc}") from exc

    logger.debug(
        "Converted Markdown to Dumbdown",
        extra={"input_chars": len(markdown), "output_chars": len(result)},
    )
    return result


def _rewrite(markdown: str) -> str:
    protected: list[str] = []

    def _stash(text: str) -> str:
        protected.append(text)
        return _PLACEHOLDER.format(len(protected) - 1)

    def _restore(text: str) -> str:
        return _PLACEHOLDER_RE.sub(lambda match: _restore(protected[int(match.group(1))]), text)

    # NUL only ever delimits placeholders.
    result = markdown.replace("\x00", "")
    result = _PROTECTED_RE.sub(lambda match: _stash(match.group(0)), result)
    # Link targets are stashed so the emphasis passes never touch a URL.
    result = _LINK_RE.sub(lambda match: _stash(match.group(1)), result)
    result = _AUTOLINK_RE.sub(lambda match: _stash(match.group(1)), result)
    result = _BARE_URL_RE.sub(lambda match: _stash(match.group(0)), result)

    # Order matters: rules before list markers, list markers before "*" emphasis,
    # emphasis before headings so underlines match the upper-cased text.
    result = _RULE_RE.sub("", result)
    result = "\n".join(_list_line(line) for line in result.split("\n"))
    for pattern in _BOLD_RES + _ITALIC_RES:
        result = pattern.sub(lambda match: match.group(1).upper(), result)
    result = _HEADING_RE.sub(lambda match: _heading(match, _restore), result)
    result = _BLOCKQUOTE_RE.sub(r'"\1"', result)
    result = _BLANK_RUN_RE.sub("\n\n", result)

    return _restore(result).strip()


def _heading(match: re.Match[str], restore: Callable[[str], str]) -> str:
    level = len(match.group(1))
    text = match.group(2)
    width = len(restore(text))
    if level == 1:
        return f"{text}\n{'=' * width}"
    if level == 2:
        return f"{text}\n{'-' * width}"
    return f"{'/' * (level - 1)} {text}"


def _list_line(line: str) -> str:
    unordered = _UNORDERED_ITEM_RE.match(line)
    if unordered:
        indent, content = unordered.groups()
        return _list_marker(len(indent) // 2, "- ") + content

    ordered = _ORDERED_ITEM_RE.match(line)
    if ordered:
        indent, number, content = ordered.groups()
        return _list_marker(len(indent) // 2, f"{number}. ") + content

    return line


def _list_marker(level: int, top_marker: str) -> str:
    if level == 0:
        return top_marker
    return "  " * level + "-- "
