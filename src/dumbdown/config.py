"""Local configuration for dumbdown."""

from __future__ import annotations

import os


DEFAULT_HTML_PARSER = "lxml"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_MAX_INPUT_CHARS = 10 * 1024 * 1024
DEFAULT_CONVERT_TIMEOUT_S = 30.0
DEFAULT_TOKEN_ENCODING = "o200k_base"

# Tree builder handed to BeautifulSoup by the default DOM builder.
DUMBDOWN_HTML_PARSER = os.getenv("DUMBDOWN_HTML_PARSER", DEFAULT_HTML_PARSER)
DUMBDOWN_LOG_LEVEL = os.getenv("DUMBDOWN_LOG_LEVEL", DEFAULT_LOG_LEVEL)
DUMBDOWN_MAX_INPUT_CHARS = int(os.getenv("DUMBDOWN_MAX_INPUT_CHARS", str(DEFAULT_MAX_INPUT_CHARS)))
DUMBDOWN_CONVERT_TIMEOUT_S = float(os.getenv("DUMBDOWN_CONVERT_TIMEOUT_S", str(DEFAULT_CONVERT_TIMEOUT_S)))
# tiktoken encoding used for token counts (``--stats`` and ``estimated_tokens``).
DUMBDOWN_TOKEN_ENCODING = os.getenv("DUMBDOWN_TOKEN_ENCODING", DEFAULT_TOKEN_ENCODING)
