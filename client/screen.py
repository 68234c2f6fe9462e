# client/screen.py
"""
State holder for the nearby-restaurants screen.

AWAITING_LOCATION_PERMISSION -> FETCHING -> READY, with PERMISSION_DENIED reachable
from the first state and left only through `retry()`. Moving the search pin or
changing the radius fetches a new base set; filters and search text are applied
locally to the cached base set.

Every fetch is numbered. A response is applied only if no newer fetch was started
meanwhile, so a slow response can never overwrite the results of a later search.
"""
from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import Callable

from pydantic import ValidationError

from client.api import APIError, RestaurantAPI
from client.filters import FilterState, apply_filters
from client.location import (
    Coordinates,
    LocationProvider,
    check_location_services,
    format_distance,
    get_current_location,
    request_location_permission,
)
from models.restaurant import RestaurantResult
from utils.constants import DEFAULT_RADIUS_KM
from utils.logging import logger

RADIUS_OPTIONS_KM = (1, 2, 5, 10)
FETCH_ERROR_MESSAGE = "Failed to fetch restaurants"
SERVICES_DISABLED_MESSAGE = "Location services are disabled. Please enable them in your device settings."


class ScreenState(str, Enum):
    AWAITING_LOCATION_PERMISSION = "awaiting_location_permission"
    PERMISSION_DENIED = "permission_denied"
    FETCHING = "fetching"
    READY = "ready"


class NearbyRestaurantsScreen:
    def __init__(
        self,
        api: RestaurantAPI,
        location_provider: LocationProvider,
        on_error: Callable[[str], None] | None = None,
        radius: float = DEFAULT_RADIUS_KM,
    ):
        self.api = api
        self.location_provider = location_provider
        self.on_error = on_error or (lambda message: logger.warning(f"Alert: {message}"))

        self.state = ScreenState.AWAITING_LOCATION_PERMISSION
        self.permission_message: str | None = None
        self.user_location: Coordinates | None = None
        self.search_point: Coordinates | None = None
        self.radius = radius
        self.filters = FilterState()
        self.base_set: tuple[RestaurantResult, ...] = ()
        self.restaurants: list[RestaurantResult] = []
        self.show_list = False
        self.selected: RestaurantResult | None = None
        self._generation = 0

    @property
    def loading(self) -> bool:
        return self.state == ScreenState.FETCHING

    # ---- location permission ----

    async def start(self) -> ScreenState:
        """Ask for location access and run the first search around the user"""
        if not await check_location_services(self.location_provider):
            return self._deny(SERVICES_DISABLED_MESSAGE)

        permission = await request_location_permission(self.location_provider)
        if not permission.granted:
            return self._deny(permission.message)

        current = await get_current_location(self.location_provider)
        if not current.success:
            return self._deny(current.error)

        self.user_location = current.location
        self.search_point = Coordinates(current.location.latitude, current.location.longitude)
        await self._fetch()
        return self.state

    async def retry(self) -> ScreenState:
        if self.state != ScreenState.PERMISSION_DENIED:
            return self.state
        self.state = ScreenState.AWAITING_LOCATION_PERMISSION
        self.permission_message = None
        return await self.start()

    def _deny(self, message: str | None) -> ScreenState:
        self.state = ScreenState.PERMISSION_DENIED
        self.permission_message = message
        return self.state

    # ---- changes that need a new base set ----

    async def move_search_point(self, latitude: float, longitude: float) -> None:
        """Search pin dragged to a new position"""
        self.search_point = Coordinates(latitude, longitude)
        await self._fetch()

    async def set_radius(self, radius: float) -> None:
        if radius not in RADIUS_OPTIONS_KM:
            raise ValueError(f"Radius must be one of {RADIUS_OPTIONS_KM} km")
        self.radius = radius
        await self._fetch()

    async def recenter(self) -> None:
        """Move the search pin back to the user's own location"""
        if self.user_location:
            await self.move_search_point(self.user_location.latitude, self.user_location.longitude)

    async def _fetch(self) -> None:
        if self.search_point is None:
            return

        self._generation += 1
        generation = self._generation
        self.state = ScreenState.FETCHING
        point, radius = self.search_point, self.radius

        base: tuple[RestaurantResult, ...] = ()
        error: str | None = None
        try:
            response = await self.api.get_nearby_restaurants(point.latitude, point.longitude, radius)
            if response.get("success"):
                base = tuple(RestaurantResult.model_validate(item) for item in response["data"]["restaurants"])
        except APIError as e:
            error = e.message or FETCH_ERROR_MESSAGE
        except (ValidationError, KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Malformed nearby response: {e!r}")
            error = FETCH_ERROR_MESSAGE

        if generation != self._generation:
            logger.debug(f"Dropping stale response for fetch #{generation}")
            return

        if error:
            self.on_error(error)
        self.base_set = base
        self.state = ScreenState.READY
        self._recompute()

    # ---- local changes ----

    def apply_filters(self, filters: FilterState) -> None:
        self.filters = replace(filters, search_text=self.filters.search_text)
        self._recompute()

    def clear_filters(self) -> None:
        self.apply_filters(FilterState())

    def set_search_text(self, text: str) -> None:
        self.filters = replace(self.filters, search_text=text)
        self._recompute()

    def _recompute(self) -> None:
        self.restaurants = apply_filters(self.base_set, self.filters)

    # ---- view helpers ----

    def toggle_list(self) -> bool:
        self.show_list = not self.show_list
        return self.show_list

    def select(self, restaurant_id: str) -> RestaurantResult | None:
        self.selected = next((r for r in self.restaurants if r.id == restaurant_id), None)
        return self.selected

    def header(self) -> str:
        count = len(self.restaurants)
        return f"{count} restaurant{'' if count == 1 else 's'} within {self.radius:g}km"

    def markers(self) -> list[dict]:
        """Map pins for the working set"""
        return [
            {
                "id": restaurant.id,
                "latitude": restaurant.location.latitude,
                "longitude": restaurant.location.longitude,
                "title": restaurant.name,
                "description": " • ".join(
                    part
                    for part in (
                        ", ".join(cuisine.value for cuisine in restaurant.cuisine),
                        format_distance(restaurant.distance) if restaurant.distance is not None else "",
                    )
                    if part
                ),
            }
            for restaurant in self.restaurants
        ]
