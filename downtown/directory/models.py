from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class BusinessCreate(BaseModel):
    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    description: str
    phone: str | None = None
    website: str | None = None
    address: str
    latitude: float
    longitude: float
    hours: dict[str, str] | None = Field(
        default=None, description='Weekday name to hours, e.g. {"Monday": "9:00 AM - 5:00 PM"}'
    )
    rating: float | None = Field(default=None, ge=0.0, le=5.0)
    review_count: int | None = Field(default=None, ge=0)
    is_open: bool | None = None
    yelp_id: str | None = None
    image_url: str | None = None
    images: list[str] | None = None


class Business(BusinessCreate):
    id: int

    # Stored records are replaced through BusinessRepository.update, never mutated.
    model_config = ConfigDict(frozen=True)


class BusinessUpdate(BaseModel):
    """Partial update: only fields that were explicitly set are applied."""

    name: str | None = Field(default=None, min_length=1)
    category: str | None = Field(default=None, min_length=1)
    description: str | None = None
    phone: str | None = None
    website: str | None = None
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    hours: dict[str, str] | None = None
    rating: float | None = Field(default=None, ge=0.0, le=5.0)
    review_count: int | None = Field(default=None, ge=0)
    is_open: bool | None = None
    yelp_id: str | None = None
    image_url: str | None = None
    images: list[str] | None = None

    def changes(self) -> dict:
        """Return the explicitly set fields, in declaration order."""
        set_fields = self.model_fields_set
        return {
            name: getattr(self, name)
            for name in type(self).model_fields
            if name in set_fields
        }


class ReviewIn(BaseModel):
    author: str = Field(..., min_length=1)
    rating: int
    text: str
    date: str


class ReviewCreate(ReviewIn):
    business_id: int


class Review(BaseModel):
    id: int | str
    business_id: int
    author: str
    rating: int
    text: str
    date: str
    source: str = "directory"

    model_config = ConfigDict(frozen=True)
