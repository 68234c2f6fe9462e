# client/api.py
"""
Thin async wrapper over the Restaurant Finder HTTP API.

Every call returns the decoded JSON envelope. Failures are raised as `APIError`
carrying a message that is fit to show to the user as-is.
"""
from __future__ import annotations

import httpx

from utils.constants import API_BASE_URL, API_TIMEOUT, DEFAULT_PAGE_LIMIT, DEFAULT_RADIUS_KM
from utils.logging import logger

NO_RESPONSE_MESSAGE = "No response from server. Please check your connection."
DEFAULT_ERROR_MESSAGE = "An error occurred"


class APIError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _clean_params(params: dict) -> dict:
    return {key: value for key, value in params.items() if value is not None and value != []}


class RestaurantAPI:
    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = API_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> "RestaurantAPI":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get(self, path: str, params: dict | None = None) -> dict:
        try:
            response = await self._client.get(path, params=_clean_params(params or {}))
        except httpx.RequestError as e:
            logger.warning(f"No response for GET {path}: {e!r}")
            raise APIError(NO_RESPONSE_MESSAGE) from e

        if response.is_error:
            try:
                message = response.json().get("message")
            except ValueError:
                message = None
            raise APIError(message or DEFAULT_ERROR_MESSAGE, response.status_code)
        return response.json()

    async def get_nearby_restaurants(
        self, latitude: float, longitude: float, radius: float = DEFAULT_RADIUS_KM, filters: dict | None = None
    ) -> dict:
        """Get nearby restaurants; `filters` may hold cuisine, priceRange, minRating, limit, skip"""
        params = {"latitude": latitude, "longitude": longitude, "radius": radius, **(filters or {})}
        return await self._get("/restaurants/nearby", params)

    async def get_restaurant_by_id(self, restaurant_id: str) -> dict:
        return await self._get(f"/restaurants/{restaurant_id}")

    async def get_all_restaurants(self, page: int = 1, limit: int = DEFAULT_PAGE_LIMIT, filters: dict | None = None) -> dict:
        return await self._get("/restaurants", {"page": page, "limit": limit, **(filters or {})})

    async def get_cuisines(self) -> dict:
        return await self._get("/restaurants/cuisines")
