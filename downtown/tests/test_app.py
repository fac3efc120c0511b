from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from downtown.app import app, create_app
from downtown.directory.seed import build_seeded_repository
from downtown.yelp.client import YelpClient, YelpConfigurationError, YelpServiceError

NEW_CAFE = {
    "name": "Test Cafe",
    "category": "Cafés",
    "description": "Espresso bar with a sunny patio.",
    "address": "10 Main St, Pleasanton, CA 94566",
    "latitude": 37.6615,
    "longitude": -121.8745,
    "rating": 4.0,
}


@pytest.fixture
def yelp():
    client = MagicMock(spec=YelpClient)
    client.get_business_reviews.return_value = []
    return client


@pytest.fixture
def client(yelp):
    return TestClient(create_app(repository=build_seeded_repository(), yelp_client=yelp))


# ── Public endpoints ─────────────────────────────────────────────────────


def test_health():
    resp = TestClient(app).get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_default_app_is_seeded():
    resp = TestClient(app).get("/api/businesses")
    assert resp.status_code == 200
    assert len(resp.json()) >= 6


def test_categories(client):
    resp = client.get("/api/categories")
    assert resp.json() == ["Attractions", "Cafés", "Dessert", "Restaurants", "Shopping"]


# ── Listing / filtering ──────────────────────────────────────────────────


def test_list_businesses(client):
    resp = client.get("/api/businesses")
    assert resp.status_code == 200
    body = resp.json()
    assert len(body) == 6
    assert body[0]["name"] == "Blue Agave Club"
    assert body[0]["latitude"] == 37.661871
    assert body[0]["yelp_id"] == "blue-agave-club-pleasanton"


def test_list_open_only(client):
    resp = client.get("/api/businesses", params={"open_only": "true"})
    names = [b["name"] for b in resp.json()]
    assert "Prim Boutique" not in names
    assert len(names) == 5


def test_search_case_insensitive(client):
    resp = client.get("/api/businesses/search", params={"q": "COFFEE"})
    assert resp.status_code == 200
    assert [b["name"] for b in resp.json()] == ["Inklings Coffee & Tea"]


def test_search_matches_category(client):
    resp = client.get("/api/businesses/search", params={"q": "restaurants"})
    assert {b["name"] for b in resp.json()} == {"Blue Agave Club", "Beer Baron Bar & Kitchen"}


def test_search_with_open_only(client):
    resp = client.get("/api/businesses/search", params={"q": "boutique", "open_only": "true"})
    assert resp.json() == []


@pytest.mark.parametrize("params", [{}, {"q": ""}, {"q": "   "}])
def test_search_requires_query(client, params):
    resp = client.get("/api/businesses/search", params=params)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Search query is required"


def test_category_filter(client):
    resp = client.get("/api/businesses/category/Restaurants")
    assert resp.status_code == 200
    assert {b["category"] for b in resp.json()} == {"Restaurants"}
    assert len(resp.json()) == 2


def test_category_all_returns_everything(client):
    all_resp = client.get("/api/businesses")
    resp = client.get("/api/businesses/category/All")
    assert resp.json() == all_resp.json()


def test_category_is_case_sensitive(client):
    assert client.get("/api/businesses/category/restaurants").json() == []


# ── Single business ──────────────────────────────────────────────────────


def test_get_business(client):
    resp = client.get("/api/businesses/2")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Inklings Coffee & Tea"


def test_get_business_invalid_id(client):
    resp = client.get("/api/businesses/abc")
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Invalid business ID"


def test_get_business_not_found(client):
    resp = client.get("/api/businesses/999")
    assert resp.status_code == 404


def test_create_business_scenario(client):
    resp = client.post("/api/businesses", json=NEW_CAFE)
    assert resp.status_code == 201
    created = resp.json()
    assert created["id"] == 7
    assert created["phone"] is None

    assert client.get("/api/businesses/7").json() == created
    assert created in client.get("/api/businesses/search", params={"q": "cafe"}).json()
    assert created in client.get("/api/businesses/category/Cafés").json()
    assert created not in client.get("/api/businesses/category/Restaurants").json()


def test_create_business_validation(client):
    resp = client.post("/api/businesses", json={**NEW_CAFE, "rating": 7.5})
    assert resp.status_code == 422
    resp = client.post("/api/businesses", json={k: v for k, v in NEW_CAFE.items() if k != "latitude"})
    assert resp.status_code == 422


# ── Reviews ──────────────────────────────────────────────────────────────


def test_reviews_merge_local_and_yelp(client, yelp):
    yelp.get_business_reviews.return_value = [
        {
            "id": "abc123",
            "rating": 4,
            "user": {"name": "Jordan P."},
            "text": "Solid margaritas.",
            "time_created": "2024-03-02 19:11:05",
        }
    ]
    resp = client.get("/api/businesses/1/reviews")
    assert resp.status_code == 200
    body = resp.json()
    assert [r["id"] for r in body] == [1, "yelp-abc123"]
    assert body[1]["date"] == "2024-03-02"
    assert body[1]["business_id"] == 1


def test_reviews_survive_yelp_failure(client, yelp):
    yelp.get_business_reviews.side_effect = YelpServiceError("Yelp API error: 500")
    resp = client.get("/api/businesses/1/reviews")
    assert resp.status_code == 200
    assert [r["author"] for r in resp.json()] == ["Sarah M."]


def test_reviews_unknown_business(client):
    assert client.get("/api/businesses/999/reviews").status_code == 404


def test_reviews_invalid_id(client):
    assert client.get("/api/businesses/x1/reviews").status_code == 400


def test_add_review(client):
    resp = client.post(
        "/api/businesses/5/reviews",
        json={"author": "Lee", "rating": 5, "text": "Best soft-serve around.", "date": "2024-06-01"},
    )
    assert resp.status_code == 201
    review = resp.json()
    assert review["id"] == 4
    assert review["business_id"] == 5
    assert client.get("/api/businesses/5/reviews").json() == [review]


def test_add_review_unknown_business(client):
    resp = client.post(
        "/api/businesses/999/reviews",
        json={"author": "Lee", "rating": 5, "text": "?", "date": "2024-06-01"},
    )
    assert resp.status_code == 404


# ── Yelp sync ────────────────────────────────────────────────────────────


def test_sync_yelp(client, yelp):
    yelp.get_business_details.return_value = {
        "rating": 4.0,
        "review_count": 300,
        "is_closed": False,
        "display_phone": "",
    }
    resp = client.post("/api/businesses/3/sync-yelp")
    assert resp.status_code == 200
    body = resp.json()
    assert body["rating"] == 4.0
    assert body["review_count"] == 300
    assert body["is_open"] is True
    assert body["phone"] == "(925) 555-0178"
    yelp.get_business_details.assert_called_once_with("prim-boutique-pleasanton")


def test_sync_yelp_without_yelp_id(client):
    created = client.post("/api/businesses", json=NEW_CAFE).json()
    resp = client.post(f"/api/businesses/{created['id']}/sync-yelp")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Business not found or no Yelp ID"


def test_sync_yelp_service_error(client, yelp):
    yelp.get_business_details.side_effect = YelpServiceError("Yelp API error: 500")
    resp = client.post("/api/businesses/1/sync-yelp")
    assert resp.status_code == 502
    assert client.get("/api/businesses/1").json()["rating"] == 4.5


def test_sync_yelp_not_configured(client, yelp):
    yelp.get_business_details.side_effect = YelpConfigurationError("Yelp API key not configured")
    resp = client.post("/api/businesses/1/sync-yelp")
    assert resp.status_code == 503


@pytest.mark.parametrize("raw_id", ["1_0", "+2", "2.0", "٣"])
def test_get_business_rejects_non_digit_ids(client, raw_id):
    resp = client.get(f"/api/businesses/{raw_id}")
    assert resp.status_code == 400
