"""Shared schemas for todotree."""

from todotree.schemas.outline import ROOT, NodeKind, TodoNode
from todotree.schemas.requests import DropPosition, DropRequest, MoveRequest

__all__ = ["ROOT", "DropPosition", "DropRequest", "MoveRequest", "NodeKind", "TodoNode"]
