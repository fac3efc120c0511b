from __future__ import annotations

import logging

import pydantic

from .config import DEFAULT_DIRECTORY_CONFIG, DirectoryConfig
from .errors import NotFoundError, ValidationError
from .models import Business, BusinessCreate, BusinessUpdate, Review, ReviewCreate

logger = logging.getLogger(__name__)


class BusinessRepository:
    """
    In-memory store of businesses and their first-party reviews.

    Each entity type has its own sequential id counter starting at 1.
    Records are replaced wholesale on update, so readers never see a
    half-applied change. There is no locking; callers are expected to
    serialize writes.
    """

    def __init__(self, config: DirectoryConfig = DEFAULT_DIRECTORY_CONFIG) -> None:
        self.config = config
        self._businesses: dict[int, Business] = {}
        self._reviews: dict[int, Review] = {}
        self._next_business_id = 1
        self._next_review_id = 1

    # ── Businesses ───────────────────────────────────────────────────────

    def get_all(self) -> list[Business]:
        return list(self._businesses.values())

    def get_by_id(self, business_id: int) -> Business:
        business = self._businesses.get(business_id)
        if business is None:
            raise NotFoundError(f"Business {business_id} not found")
        return business

    def create(self, fields: BusinessCreate) -> Business:
        business_id = self._next_business_id
        self._next_business_id += 1
        business = Business(id=business_id, **fields.model_dump())
        self._businesses[business_id] = business
        logger.debug("Created business id=%s name=%r", business_id, business.name)
        return business

    def update(self, business_id: int, changes: BusinessUpdate) -> Business:
        existing = self.get_by_id(business_id)
        data = existing.model_dump()
        for field, value in changes.changes().items():
            data[field] = value
        try:
            updated = Business.model_validate(data)
        except pydantic.ValidationError as exc:
            raise ValidationError(f"Invalid update for business {business_id}: {exc}") from exc
        self._businesses[business_id] = updated
        logger.debug("Updated business id=%s fields=%s", business_id, sorted(changes.model_fields_set))
        return updated

    def search(self, query: str) -> list[Business]:
        """
        Case-insensitive substring match on name, description or category.

        A blank query matches nothing.
        """
        if not query.strip():
            return []
        needle = query.lower()
        return [
            b for b in self._businesses.values()
            if needle in b.name.lower()
            or needle in b.description.lower()
            or needle in b.category.lower()
        ]

    def get_by_category(self, category: str) -> list[Business]:
        if category == self.config.all_categories:
            return self.get_all()
        return [b for b in self._businesses.values() if b.category == category]

    def categories(self) -> list[str]:
        return sorted({b.category for b in self._businesses.values()})

    # ── Reviews ──────────────────────────────────────────────────────────

    def get_reviews_for_business(self, business_id: int) -> list[Review]:
        return [r for r in self._reviews.values() if r.business_id == business_id]

    def create_review(self, fields: ReviewCreate) -> Review:
        if fields.business_id not in self._businesses:
            raise NotFoundError(f"Business {fields.business_id} not found")
        review_id = self._next_review_id
        self._next_review_id += 1
        review = Review(id=review_id, **fields.model_dump())
        self._reviews[review_id] = review
        logger.debug("Created review id=%s business_id=%s", review_id, fields.business_id)
        return review
