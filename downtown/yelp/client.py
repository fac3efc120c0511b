"""Client for the Yelp Fusion business and review endpoints."""

from __future__ import annotations

import logging
from typing import Any

import requests

from .config import DEFAULT_YELP_CONFIG, YelpConfig

logger = logging.getLogger(__name__)


class YelpError(RuntimeError):
    """Base class for Yelp integration failures."""


class YelpConfigurationError(YelpError):
    """Raised when no Yelp API key is configured."""


class YelpServiceError(YelpError):
    """Raised on network failure or a non-successful Yelp response."""


def _quote_id(yelp_id: str) -> str:
    # Ids go into the URL path; "/" and "?" must not change the route.
    return requests.utils.quote(yelp_id, safe="")


class YelpClient:
    def __init__(
        self,
        config: YelpConfig = DEFAULT_YELP_CONFIG,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()
        if not config.api_key:
            logger.warning("YELP_API_KEY is not configured; Yelp requests will fail.")

    def _get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        if not self.config.api_key:
            raise YelpConfigurationError("Yelp API key not configured")

        url = f"{self.config.base_url}{path}"
        headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Accept": "application/json",
        }
        try:
            response = self.session.get(url, params=params, headers=headers, timeout=self.config.timeout)
        except requests.RequestException as exc:
            logger.error("Yelp request failed: url=%s error=%s", url, exc)
            raise YelpServiceError(f"Yelp request failed: {exc}") from exc

        if not response.ok:
            logger.error("Yelp API error: url=%s status=%s reason=%s", url, response.status_code, response.reason)
            raise YelpServiceError(f"Yelp API error: {response.status_code} {response.reason}")

        try:
            return response.json()
        except ValueError as exc:
            logger.error("Yelp returned invalid JSON: url=%s", url)
            raise YelpServiceError("Yelp returned invalid JSON") from exc

    def search_businesses(
        self,
        location: str,
        categories: str | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        params: dict[str, Any] = {
            "location": location,
            "limit": limit if limit is not None else self.config.search_limit,
            "sort_by": "rating",
        }
        if categories:
            params["categories"] = categories
        payload = self._get("/businesses/search", params=params)
        return payload.get("businesses") or []

    def get_business_details(self, yelp_id: str) -> dict[str, Any]:
        return self._get(f"/businesses/{_quote_id(yelp_id)}")

    def get_business_reviews(self, yelp_id: str) -> list[dict[str, Any]]:
        payload = self._get(f"/businesses/{_quote_id(yelp_id)}/reviews")
        return payload.get("reviews") or []
