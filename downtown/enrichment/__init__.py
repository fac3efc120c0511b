"""
Enrichment of directory records with Yelp data.

Responsibilities:
- Merge first-party reviews with normalized Yelp reviews.
- Sync rating, review count, open status and phone from Yelp.
"""
