"""Serialize an outline forest back into canonical indented text."""

from __future__ import annotations

from typing import Iterable

from todotree.config import INDENT_UNIT
from todotree.parser import parse_outline
from todotree.schemas import TodoNode


def serialize_outline(forest: Iterable[TodoNode]) -> str:
    """Render the forest as canonical text, four spaces per depth level.

    Every node is written on its own newline-terminated line, children
    directly after their parent. The empty forest renders as ``""``.
    """
    lines: list[str] = []
    _append_lines(forest, 0, lines)
    return "".join(lines)


def canonicalize(text: str) -> str:
    """Re-indent ``text`` to the canonical four-space form."""
    return serialize_outline(parse_outline(text))


def _append_lines(nodes: Iterable[TodoNode], depth: int, lines: list[str]) -> None:
    for node in nodes:
        lines.append(INDENT_UNIT * depth + node.name + "\n")
        if node.children:
            _append_lines(node.children, depth + 1, lines)
