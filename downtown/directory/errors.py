from __future__ import annotations


class DirectoryError(Exception):
    """Base class for errors raised by the directory core."""


class NotFoundError(DirectoryError, LookupError):
    """Raised when a business or review id does not exist."""


class ValidationError(DirectoryError, ValueError):
    """Raised for malformed caller input such as a non-numeric id."""
