from __future__ import annotations

import logging
from typing import Any

import pydantic

from ..directory.errors import NotFoundError
from ..directory.models import Business, BusinessUpdate
from ..directory.repository import BusinessRepository
from ..yelp.client import YelpClient, YelpServiceError

logger = logging.getLogger(__name__)


def build_update(details: dict[str, Any]) -> BusinessUpdate:
    """
    Map a Yelp business-details payload onto a partial update.

    Phone is only included when Yelp supplies a non-empty display phone.
    """
    try:
        is_closed = details["is_closed"]
        if not isinstance(is_closed, bool):
            raise YelpServiceError(f"Malformed Yelp business details: is_closed={is_closed!r}")
        fields: dict[str, Any] = {
            "rating": details["rating"],
            "review_count": details["review_count"],
            "is_open": not is_closed,
        }
        phone = details.get("display_phone")
        if phone:
            fields["phone"] = phone
        return BusinessUpdate(**fields)
    except (KeyError, TypeError, pydantic.ValidationError) as exc:
        raise YelpServiceError(f"Malformed Yelp business details: {exc}") from exc


class YelpSync:
    def __init__(self, repository: BusinessRepository, yelp_client: YelpClient) -> None:
        self.repository = repository
        self.yelp_client = yelp_client

    def sync(self, business_id: int) -> Business:
        business = self.repository.get_by_id(business_id)
        if not business.yelp_id:
            raise NotFoundError(f"Business {business_id} has no Yelp ID")

        details = self.yelp_client.get_business_details(business.yelp_id)
        changes = build_update(details)
        updated = self.repository.update(business_id, changes)
        logger.info(
            "Synced business id=%s from Yelp: rating=%s review_count=%s is_open=%s",
            business_id,
            updated.rating,
            updated.review_count,
            updated.is_open,
        )
        return updated
