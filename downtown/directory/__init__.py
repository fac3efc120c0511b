"""
Business directory core.

Responsibilities:
- Hold business and review records in memory, keyed by sequential ids.
- Search and filter businesses by text, category and open status.
- Validate caller input before it reaches the repository.
"""
