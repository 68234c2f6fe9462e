from datetime import datetime
from math import ceil

from beanie import PydanticObjectId

from databases.mongo.restaurant import (
    find_nearby_restaurants,
    get_cuisines,
    get_restaurant_by_id,
    list_restaurants,
)
from geo_utils import distance_km
from models.restaurant import Restaurant, RestaurantResult
from models.search import ListQuery, NearbySearchQuery, Pagination


def annotate(restaurant: Restaurant, latitude: float, longitude: float, now: datetime) -> RestaurantResult:
    """Attach the distance from the search point (km) and the open/closed status"""
    location = restaurant.location
    return RestaurantResult.from_document(
        restaurant,
        distance=distance_km(latitude, longitude, location.latitude, location.longitude),
        is_open_now=restaurant.is_open_now(now),
    )


async def find_nearby(search: NearbySearchQuery, now: datetime | None = None) -> list[RestaurantResult]:
    """
    Restaurants within `search.radius` km of the search point.

    Distances are recomputed with the haversine formula so they are always reported in
    kilometers. The order is the one returned by the store; nothing is re-sorted here.
    """
    now = now or datetime.now()
    restaurants = await find_nearby_restaurants(search)
    return [annotate(restaurant, search.latitude, search.longitude, now) for restaurant in restaurants]


async def get_restaurant(restaurant_id: str, now: datetime | None = None) -> RestaurantResult:
    """Get an active restaurant with its open/closed status"""
    restaurant = await get_restaurant_by_id(PydanticObjectId(restaurant_id))
    return RestaurantResult.from_document(restaurant, is_open_now=restaurant.is_open_now(now))


async def list_all(query: ListQuery) -> tuple[list[RestaurantResult], Pagination]:
    """Page through active restaurants, best rated first"""
    restaurants, total = await list_restaurants(query)
    pagination = Pagination(page=query.page, limit=query.limit, total=total, pages=ceil(total / query.limit))
    return [RestaurantResult.from_document(restaurant) for restaurant in restaurants], pagination


async def list_cuisines() -> list[str]:
    """Sorted cuisines among active restaurants"""
    return await get_cuisines()
