"""Token counts for Dumbdown output destined for LLM prompts."""

from __future__ import annotations

from functools import lru_cache

from dumbdown.config import DUMBDOWN_TOKEN_ENCODING
from dumbdown.utils.logging_config import get_logger

try:
    import tiktoken
except ImportError:  # pragma: no cover - optional dependency
    tiktoken = None

logger = get_logger(__name__)


@lru_cache(maxsize=4)
def _encoding(name: str):
    return tiktoken.get_encoding(name)


def count_tokens(text: str, encoding_name: str | None = None) -> int | None:
    """Count the tokens ``text`` occupies in a prompt.

    Returns ``None`` when tiktoken is not installed or the encoding cannot
    be loaded; callers treat the count as optional.
    """
    if tiktoken is None:
        return None

    name = encoding_name or DUMBDOWN_TOKEN_ENCODING
    try:
        encoding = _encoding(name)
    except Exception as exc:
        logger.warning("Token encoding unavailable", extra={"encoding": name, "error": str(exc)})
        return None
    return len(encoding.encode(text, disallowed_special=()))


def humanize_count(count: int) -> str:
    """``812`` -> ``"812"``, ``4512`` -> ``"4.5k"``, ``1_200_000`` -> ``"1.2M"``."""
    for threshold, suffix in ((1_000_000, "M"), (1_000, "k")):
        if count >= threshold:
            return f"{count / threshold:.1f}{suffix}"
    return str(count)
