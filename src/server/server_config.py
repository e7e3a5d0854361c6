"""Configuration for the HTTP service."""

from __future__ import annotations

import os

from dumbdown.config import DUMBDOWN_CONVERT_TIMEOUT_S, DUMBDOWN_MAX_INPUT_CHARS

MAX_INPUT_CHARS = DUMBDOWN_MAX_INPUT_CHARS
CONVERT_TIMEOUT_S = DUMBDOWN_CONVERT_TIMEOUT_S
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("DUMBDOWN_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
GZIP_MINIMUM_SIZE = 1000
