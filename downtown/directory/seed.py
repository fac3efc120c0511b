from __future__ import annotations

from typing import Any

from .config import DEFAULT_DIRECTORY_CONFIG, DirectoryConfig
from .models import BusinessCreate, ReviewCreate
from .repository import BusinessRepository

_WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday"]


def _hours(
    weekdays: str,
    friday: str,
    saturday: str,
    sunday: str,
    **overrides: str,
) -> dict[str, str]:
    hours = {day: weekdays for day in _WEEKDAYS}
    hours.update({"Friday": friday, "Saturday": saturday, "Sunday": sunday})
    hours.update(overrides)
    return hours


def _unsplash(*photo_ids: str) -> list[str]:
    return [
        f"https://images.unsplash.com/photo-{pid}?w=800&h=600&fit=crop"
        for pid in photo_ids
    ]


SAMPLE_BUSINESSES: list[dict[str, Any]] = [
    {
        "name": "Blue Agave Club",
        "category": "Restaurants",
        "description": (
            "Upscale Mexican cuisine in a historic building with a lovely patio. "
            "Known for their authentic flavors and craft margaritas."
        ),
        "phone": "(925) 555-0123",
        "website": "https://blueagaveclub.com",
        "address": "123 Main St, Pleasanton, CA 94566",
        "latitude": 37.661871,
        "longitude": -121.874397,
        "hours": _hours("11:00 AM - 10:00 PM", "11:00 AM - 11:00 PM", "11:00 AM - 11:00 PM", "11:00 AM - 9:00 PM"),
        "rating": 4.5,
        "review_count": 127,
        "is_open": True,
        "yelp_id": "blue-agave-club-pleasanton",
        "images": _unsplash("1514933651103-005eec06c04b", "1428515613728-6b4607e44363", "1555396273-367ea4eb4db5"),
    },
    {
        "name": "Inklings Coffee & Tea",
        "category": "Cafés",
        "description": (
            "Charming coffee shop with rustic decor and a relaxed vibe. "
            "Perfect for remote work and studying."
        ),
        "phone": "(925) 555-0156",
        "website": "https://inklingscoffee.com",
        "address": "456 Main St, Pleasanton, CA 94566",
        "latitude": 37.661491,
        "longitude": -121.874916,
        "hours": _hours("6:00 AM - 8:00 PM", "6:00 AM - 9:00 PM", "7:00 AM - 9:00 PM", "7:00 AM - 7:00 PM"),
        "rating": 4.2,
        "review_count": 89,
        "is_open": True,
        "yelp_id": "inklings-coffee-tea-pleasanton",
        "images": _unsplash("1501339847302-ac426a4a7cbb", "1554118811-1e0d58224f24", "1495474472287-4d71bcdd2085"),
    },
    {
        "name": "Prim Boutique",
        "category": "Shopping",
        "description": (
            "Trendy women's clothing boutique with curated fashion collections "
            "and personal styling services."
        ),
        "phone": "(925) 555-0178",
        "website": "https://primboutique.com",
        "address": "789 Main St, Pleasanton, CA 94566",
        "latitude": 37.661763,
        "longitude": -121.875523,
        "hours": _hours("10:00 AM - 7:00 PM", "10:00 AM - 8:00 PM", "10:00 AM - 8:00 PM", "11:00 AM - 6:00 PM"),
        "rating": 4.8,
        "review_count": 42,
        "is_open": False,
        "yelp_id": "prim-boutique-pleasanton",
        "images": _unsplash("1441986300917-64674bd600d8", "1445205170230-053b83016050", "1603400521630-9f2de124b33b"),
    },
    {
        "name": "Museum on Main",
        "category": "Attractions",
        "description": (
            "Local history museum with educational exhibits and family programs "
            "showcasing Pleasanton's heritage."
        ),
        "phone": "(925) 555-0189",
        "website": "https://museumonmain.org",
        "address": "603 Main St, Pleasanton, CA 94566",
        "latitude": 37.662096,
        "longitude": -121.875302,
        "hours": _hours("10:00 AM - 4:00 PM", "10:00 AM - 4:00 PM", "10:00 AM - 4:00 PM", "1:00 PM - 4:00 PM", Monday="Closed"),
        "rating": 4.1,
        "review_count": 33,
        "is_open": True,
        "yelp_id": "museum-on-main-pleasanton",
        "images": _unsplash("1518998053901-5348d3961a04", "1544735716-392fe2489ffa", "1578662996442-48f60103fc96"),
    },
    {
        "name": "Meadowlark Dairy",
        "category": "Dessert",
        "description": "Classic drive-thru dairy known for giant soft-serve cones and nostalgic charm.",
        "phone": "(925) 555-0145",
        "website": None,
        "address": "301 Ray St, Pleasanton, CA 94566",
        "latitude": 37.663014,
        "longitude": -121.875919,
        "hours": _hours("11:00 AM - 9:00 PM", "11:00 AM - 10:00 PM", "11:00 AM - 10:00 PM", "11:00 AM - 9:00 PM"),
        "rating": 4.6,
        "review_count": 156,
        "is_open": True,
        "yelp_id": "meadowlark-dairy-pleasanton",
        "images": _unsplash("1567206563064-6f60f40a2b57", "1580915411954-282cb1b0d780", "1551024506-0bccd828d307"),
    },
    {
        "name": "Beer Baron Bar & Kitchen",
        "category": "Restaurants",
        "description": "Craft cocktails, beer flights, and comfort food in a cool setting with live music.",
        "phone": "(925) 555-0167",
        "website": "https://beerbaronbar.com",
        "address": "714 Main St, Pleasanton, CA 94566",
        "latitude": 37.662188,
        "longitude": -121.874796,
        "hours": _hours(
            "4:00 PM - 12:00 AM", "4:00 PM - 2:00 AM", "2:00 PM - 2:00 AM", "2:00 PM - 11:00 PM",
            Thursday="4:00 PM - 1:00 AM",
        ),
        "rating": 4.3,
        "review_count": 98,
        "is_open": True,
        "yelp_id": "beer-baron-bar-kitchen-pleasanton",
        "images": _unsplash("1555396273-367ea4eb4db5", "1559339352-11d035aa65de", "1571115764595-644a1f56a55c"),
    },
]

# Reviews reference seed businesses by their position (ids are assigned from 1).
SAMPLE_REVIEWS: list[dict[str, Any]] = [
    {
        "business_id": 1,
        "author": "Sarah M.",
        "rating": 5,
        "text": "Amazing atmosphere and incredible food! The patio is perfect for dinner with friends.",
        "date": "2024-01-15",
    },
    {
        "business_id": 2,
        "author": "Mike R.",
        "rating": 4,
        "text": "Great coffee and cozy atmosphere. WiFi is reliable for working remotely.",
        "date": "2024-01-10",
    },
    {
        "business_id": 3,
        "author": "Emma L.",
        "rating": 5,
        "text": "Beautiful selection and amazing personal styling service. Highly recommend!",
        "date": "2024-01-08",
    },
]


def seed_repository(repository: BusinessRepository) -> BusinessRepository:
    """Load the sample downtown Pleasanton businesses and reviews."""
    for raw in SAMPLE_BUSINESSES:
        fields = dict(raw)
        # The first gallery image doubles as the card image.
        fields.setdefault("image_url", fields["images"][0] if fields.get("images") else None)
        repository.create(BusinessCreate(**fields))
    for raw in SAMPLE_REVIEWS:
        repository.create_review(ReviewCreate(**raw))
    return repository


def build_seeded_repository(config: DirectoryConfig = DEFAULT_DIRECTORY_CONFIG) -> BusinessRepository:
    return seed_repository(BusinessRepository(config))
