from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DirectoryConfig:
    # Category filter value that means "every business", not a literal category.
    all_categories: str = "All"


DEFAULT_DIRECTORY_CONFIG = DirectoryConfig()
