from __future__ import annotations

from fastapi import Request

from .directory.service import DirectoryService


def get_directory(request: Request) -> DirectoryService:
    """Return the directory service attached to the running app."""
    return request.app.state.directory
