"""todotree: edit a category/task outline as indented text or as a tree."""

from todotree.document import OutlineDocument
from todotree.exceptions import (
    DocumentNotFoundError,
    OutlineFileError,
    StoreError,
    TodoTreeError,
)
from todotree.mutations import apply_request, move_node, resolve_drop
from todotree.parser import parse_outline
from todotree.schemas import ROOT, DropPosition, DropRequest, MoveRequest, NodeKind, TodoNode
from todotree.serializer import canonicalize, serialize_outline

__all__ = [
    "ROOT",
    "DocumentNotFoundError",
    "DropPosition",
    "DropRequest",
    "MoveRequest",
    "NodeKind",
    "OutlineDocument",
    "OutlineFileError",
    "StoreError",
    "TodoNode",
    "TodoTreeError",
    "apply_request",
    "canonicalize",
    "move_node",
    "parse_outline",
    "resolve_drop",
    "serialize_outline",
]
