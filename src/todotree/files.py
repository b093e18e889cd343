"""Import and export outline text files."""

from __future__ import annotations

import asyncio
from pathlib import Path

from todotree.config import DEFAULT_EXPORT_FILENAME
from todotree.exceptions import OutlineFileError


def export_path_for(directory: Path) -> Path:
    """Default file an outline is exported to inside ``directory``."""
    return directory / DEFAULT_EXPORT_FILENAME


async def read_outline_file(path: Path, encoding: str = "utf-8") -> str:
    """Read an outline file asynchronously using a thread pool.

    Args:
        path: Path to the file to read.
        encoding: Text encoding to use.

    Returns:
        The file contents as a string.

    Raises:
        OutlineFileError: If the file is missing, unreadable or not valid
            text in ``encoding``.
    """
    try:
        return await asyncio.to_thread(path.read_text, encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise OutlineFileError(f"Could not read {path}: {exc}") from exc


async def write_outline_file(path: Path, content: str, encoding: str = "utf-8") -> None:
    """Write outline text asynchronously, creating parent directories.

    Args:
        path: Path to the file to write.
        content: Text content to write.
        encoding: Text encoding to use.

    Raises:
        OutlineFileError: If the file cannot be written.
    """
    try:
        await asyncio.to_thread(path.parent.mkdir, parents=True, exist_ok=True)
        await asyncio.to_thread(path.write_text, content, encoding=encoding)
    except OSError as exc:
        raise OutlineFileError(f"Could not write {path}: {exc}") from exc
