"""Test setup for todotree."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from todotree.parser import parse_outline  # noqa: E402
from todotree.schemas import TodoNode  # noqa: E402

EXAMPLE_TEXT = "A\n    a1\n    a2\nB\n"


@pytest.fixture
def example_text() -> str:
    """Two categories, the first with two tasks."""
    return EXAMPLE_TEXT


@pytest.fixture
def example_forest() -> list[TodoNode]:
    """Parsed ``EXAMPLE_TEXT``: A=item-0, a1=item-1, a2=item-2, B=item-3."""
    return parse_outline(EXAMPLE_TEXT)
