"""Edit session tying the outline text to its parsed forest."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from todotree.exceptions import DocumentNotFoundError, OutlineFileError, StoreError
from todotree.files import export_path_for, read_outline_file, write_outline_file
from todotree.mutations import apply_request
from todotree.parser import parse_outline
from todotree.schemas import DropRequest, MoveRequest, TodoNode
from todotree.serializer import serialize_outline
from todotree.store import OutlineStore

logger = logging.getLogger(__name__)

SAMPLE_OUTLINE = """
Kitchen Renovation
    Replace countertops
        Get quotes from three contractors
        Choose between granite and quartz
    Paint cabinets
        Buy sandpaper and primer
        Select color: thinking about light gray

Backyard Landscaping
    Plant new flower bed
        Research native plants
        Buy soil and mulch
    Install irrigation system
        Get professional consultation
        Compare drip vs. sprinkler systems
"""

INVALID_USER_MESSAGE = "Invalid user id."
LOAD_ERROR_MESSAGE = "Error loading from database. Please try again."
SAVE_ERROR_MESSAGE = "Error saving to database. Please try again."
IMPORT_ERROR_MESSAGE = "Error reading file. Please try again."
EXPORT_ERROR_MESSAGE = "Error writing file. Please try again."


@dataclass
class OutlineDocument:
    """The text blob being edited and the forest derived from it.

    The text is the source of truth: every change replaces it and the forest
    is recomputed from scratch. I/O failures are recorded in ``error`` and
    leave both untouched.

    Attributes:
        text: Current outline text.
        forest: Nodes parsed from ``text``.
        error: User-facing message from the last failed operation, if any.
    """

    text: str = ""
    forest: list[TodoNode] = field(init=False)
    error: str | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.forest = parse_outline(self.text)

    def set_text(self, text: str) -> None:
        """Replace the text and rebuild the forest."""
        self.text = text
        self.forest = parse_outline(text)
        self.error = None

    def apply(self, request: MoveRequest | DropRequest) -> bool:
        """Run a move and write the result back as canonical text.

        Returns:
            True if the forest changed, False for a rejected move.
        """
        moved = apply_request(self.forest, request)
        if moved is self.forest:
            return False
        self.set_text(serialize_outline(moved))
        return True

    async def load_from(self, store: OutlineStore, user_id: str) -> bool:
        """Replace the text with the user's saved outline."""
        try:
            text = await store.load(user_id)
        except DocumentNotFoundError as exc:
            self.error = str(exc)
            return False
        except ValueError as exc:
            logger.warning("Loading outline rejected: %s", exc)
            self.error = INVALID_USER_MESSAGE
            return False
        except StoreError as exc:
            logger.warning("Loading outline for %s failed: %s", user_id, exc)
            self.error = LOAD_ERROR_MESSAGE
            return False
        self.set_text(text)
        return True

    async def save_to(self, store: OutlineStore, user_id: str) -> bool:
        """Store the current text for ``user_id``."""
        try:
            await store.save(user_id, self.text)
        except ValueError as exc:
            logger.warning("Saving outline rejected: %s", exc)
            self.error = INVALID_USER_MESSAGE
            return False
        except StoreError as exc:
            logger.warning("Saving outline for %s failed: %s", user_id, exc)
            self.error = SAVE_ERROR_MESSAGE
            return False
        self.error = None
        return True

    async def import_file(self, path: Path) -> bool:
        """Replace the text with the contents of ``path``."""
        try:
            text = await read_outline_file(path)
        except OutlineFileError as exc:
            logger.warning("%s", exc)
            self.error = IMPORT_ERROR_MESSAGE
            return False
        self.set_text(text)
        return True

    async def export_file(self, path: Path) -> bool:
        """Write the current text to ``path``.

        A directory is resolved to the default export file inside it.
        """
        if path.is_dir():
            path = export_path_for(path)
        try:
            await write_outline_file(path, self.text)
        except OutlineFileError as exc:
            logger.warning("%s", exc)
            self.error = EXPORT_ERROR_MESSAGE
            return False
        self.error = None
        return True
