from fastapi import APIRouter, Path, Query

from business.restaurant_search import find_nearby, get_restaurant, list_all, list_cuisines
from models.restaurant import CuisineType, PriceRange
from models.search import ListQuery, NearbySearchQuery
from utils.constants import (
    DEFAULT_NEARBY_LIMIT,
    DEFAULT_PAGE_LIMIT,
    DEFAULT_RADIUS_KM,
    MAX_LIMIT,
    MAX_RADIUS_KM,
    MIN_RADIUS_KM,
)

router = APIRouter(prefix="/restaurants", tags=["restaurants"])

OBJECT_ID_PATTERN = r"^[0-9a-fA-F]{24}$"


@router.get("/cuisines")
async def get_available_cuisines() -> dict:
    """Get the cuisines offered by active restaurants"""
    cuisines = await list_cuisines()
    return {"success": True, "count": len(cuisines), "data": {"cuisines": cuisines}}


@router.get("/nearby")
async def get_nearby_restaurants(
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
    radius: float = Query(DEFAULT_RADIUS_KM, ge=MIN_RADIUS_KM, le=MAX_RADIUS_KM),
    cuisine: list[CuisineType] | None = Query(None),
    price_range: PriceRange | None = Query(None, alias="priceRange"),
    min_rating: float | None = Query(None, alias="minRating", ge=0, le=5),
    limit: int = Query(DEFAULT_NEARBY_LIMIT, ge=1, le=MAX_LIMIT),
    skip: int = Query(0, ge=0),
) -> dict:
    """Get active restaurants within `radius` km of the given point"""
    search = NearbySearchQuery(
        latitude=latitude,
        longitude=longitude,
        radius=radius,
        cuisine=cuisine,
        price_range=price_range,
        min_rating=min_rating,
        limit=limit,
        skip=skip,
    )
    restaurants = await find_nearby(search)
    return {
        "success": True,
        "count": len(restaurants),
        "data": {
            "restaurants": [restaurant.to_json() for restaurant in restaurants],
            "searchParams": search.search_params(),
        },
    }


@router.get("")
async def get_all_restaurants(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_LIMIT),
    cuisine: list[CuisineType] | None = Query(None),
    price_range: PriceRange | None = Query(None, alias="priceRange"),
    min_rating: float | None = Query(None, alias="minRating", ge=0, le=5),
) -> dict:
    """Get a page of active restaurants, best rated first"""
    query = ListQuery(page=page, limit=limit, cuisine=cuisine, price_range=price_range, min_rating=min_rating)
    restaurants, pagination = await list_all(query)
    return {
        "success": True,
        "count": len(restaurants),
        "pagination": pagination.model_dump(),
        "data": {"restaurants": [restaurant.to_json(exclude={"distance", "is_open_now"}) for restaurant in restaurants]},
    }


@router.get("/{restaurant_id}")
async def get_restaurant_by_id(restaurant_id: str = Path(..., pattern=OBJECT_ID_PATTERN)) -> dict:
    """Get a single active restaurant"""
    restaurant = await get_restaurant(restaurant_id)
    return {"success": True, "data": {"restaurant": restaurant.to_json(exclude={"distance"})}}
