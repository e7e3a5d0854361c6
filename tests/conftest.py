"""Test setup for dumbdown."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def _reset_logging_handlers():
    """Drop handlers bound to a test's captured stderr once the test ends."""
    yield
    logging.getLogger("dumbdown").handlers.clear()
