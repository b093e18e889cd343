"""Custom exceptions for todotree."""


class TodoTreeError(Exception):
    """Base exception for todotree operations."""


class OutlineFileError(TodoTreeError):
    """Error while importing or exporting an outline file."""


class StoreError(TodoTreeError):
    """Error while talking to the user record store."""


class DocumentNotFoundError(StoreError):
    """No outline has been saved for the requested user."""
