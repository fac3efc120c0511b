from __future__ import annotations

import re

from ..enrichment.reviews import ReviewAggregator
from ..enrichment.sync import YelpSync
from .errors import ValidationError
from .models import Business, BusinessCreate, Review, ReviewCreate, ReviewIn
from .repository import BusinessRepository

_BUSINESS_ID_RE = re.compile(r"-?[0-9]+")


def parse_business_id(raw_id: str | int) -> int:
    """Turn a path segment into a business id, rejecting anything but plain digits."""
    if isinstance(raw_id, int):
        return raw_id
    if not _BUSINESS_ID_RE.fullmatch(raw_id):
        raise ValidationError("Invalid business ID")
    return int(raw_id)


def _open_only(businesses: list[Business]) -> list[Business]:
    return [b for b in businesses if b.is_open is True]


class DirectoryService:
    """Caller-facing boundary used by the HTTP layer."""

    def __init__(
        self,
        repository: BusinessRepository,
        aggregator: ReviewAggregator,
        sync: YelpSync,
    ) -> None:
        self.repository = repository
        self.aggregator = aggregator
        self.yelp_sync = sync

    def list_businesses(self, open_only: bool = False) -> list[Business]:
        businesses = self.repository.get_all()
        return _open_only(businesses) if open_only else businesses

    def search(self, query: str | None, open_only: bool = False) -> list[Business]:
        if query is None or not query.strip():
            raise ValidationError("Search query is required")
        businesses = self.repository.search(query)
        return _open_only(businesses) if open_only else businesses

    def list_by_category(self, category: str, open_only: bool = False) -> list[Business]:
        businesses = self.repository.get_by_category(category)
        return _open_only(businesses) if open_only else businesses

    def categories(self) -> list[str]:
        return self.repository.categories()

    def get_business(self, raw_id: str | int) -> Business:
        return self.repository.get_by_id(parse_business_id(raw_id))

    def create_business(self, fields: BusinessCreate) -> Business:
        return self.repository.create(fields)

    def get_reviews(self, raw_id: str | int) -> list[Review]:
        return self.aggregator.get_reviews(parse_business_id(raw_id))

    def add_review(self, raw_id: str | int, fields: ReviewIn) -> Review:
        business_id = parse_business_id(raw_id)
        return self.repository.create_review(
            ReviewCreate(business_id=business_id, **fields.model_dump())
        )

    def sync_from_yelp(self, raw_id: str | int) -> Business:
        return self.yelp_sync.sync(parse_business_id(raw_id))
