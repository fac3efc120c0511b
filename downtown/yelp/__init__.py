"""
Yelp Fusion integration layer.

Responsibilities:
- Manage Yelp API configuration and credentials.
- Issue authenticated GET requests for search, details and reviews.
- Raise typed errors so callers can choose between degrading and failing.
"""
