from __future__ import annotations

import logging
from typing import Any

from ..directory.models import Review
from ..directory.repository import BusinessRepository
from ..yelp.client import YelpClient

logger = logging.getLogger(__name__)

YELP_ID_PREFIX = "yelp-"


def _date_portion(timestamp: str) -> str:
    """Yelp sends ``"2016-08-29 00:41:13"``; keep only the date."""
    return timestamp.split(" ")[0].split("T")[0]


def normalize_yelp_review(raw: dict[str, Any], business_id: int) -> Review:
    return Review(
        id=f"{YELP_ID_PREFIX}{raw['id']}",
        business_id=business_id,
        author=raw["user"]["name"],
        rating=raw["rating"],
        text=raw["text"],
        date=_date_portion(raw["time_created"]),
        source="yelp",
    )


def fetch_yelp_reviews(
    client: YelpClient,
    yelp_id: str,
    business_id: int,
) -> list[Review] | None:
    """
    Fetch and normalize Yelp reviews for one business.

    Returns ``None`` on any failure (missing key, network, bad status,
    malformed payload) so the caller decides what to fall back to.
    """
    try:
        raw_reviews = client.get_business_reviews(yelp_id)
        return [normalize_yelp_review(raw, business_id) for raw in raw_reviews]
    except Exception:
        logger.warning("Could not fetch Yelp reviews for %s", yelp_id, exc_info=True)
        return None


class ReviewAggregator:
    def __init__(self, repository: BusinessRepository, yelp_client: YelpClient) -> None:
        self.repository = repository
        self.yelp_client = yelp_client

    def get_reviews(self, business_id: int) -> list[Review]:
        """First-party reviews followed by Yelp reviews, each in original order."""
        business = self.repository.get_by_id(business_id)
        local_reviews = self.repository.get_reviews_for_business(business_id)

        external: list[Review] = []
        if business.yelp_id:
            external = fetch_yelp_reviews(self.yelp_client, business.yelp_id, business_id) or []

        return [*local_reviews, *external]
