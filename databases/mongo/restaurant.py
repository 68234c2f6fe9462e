from beanie import PydanticObjectId
from beanie.exceptions import DocumentNotFound

from models.restaurant import Restaurant
from models.search import ListQuery, NearbySearchQuery, RestaurantFilters
from utils.logging import logger


def build_filter_query(filters: RestaurantFilters) -> dict:
    """Mongo filter for active restaurants matching the optional facets"""
    query: dict = {"isActive": True}

    if filters.cuisine:
        query["cuisine"] = {"$in": [cuisine.value for cuisine in filters.cuisine]}

    if filters.price_range:
        query["priceRange"] = filters.price_range.value

    if filters.min_rating is not None:
        query["rating.average"] = {"$gte": filters.min_rating}

    return query


def build_nearby_query(search: NearbySearchQuery) -> dict:
    """Radius query: `$near` on the 2dsphere index, bounded by the radius in meters"""
    return {
        "location": {
            "$near": {
                "$geometry": {"type": "Point", "coordinates": [search.longitude, search.latitude]},
                "$maxDistance": search.radius * 1000,
            }
        },
        **build_filter_query(search.filters),
    }


async def find_nearby_restaurants(search: NearbySearchQuery) -> list[Restaurant]:
    """Active restaurants within the search radius, in the order the store returns them"""
    logger.info(f"Finding restaurants within {search.radius}km of ({search.latitude}, {search.longitude})")
    return await Restaurant.find(build_nearby_query(search)).skip(search.skip).limit(search.limit).to_list()


async def get_restaurant_by_id(restaurant_id: PydanticObjectId) -> Restaurant:
    """Get an active restaurant by id"""
    restaurant = await Restaurant.get(restaurant_id)

    if not restaurant or not restaurant.is_active:
        logger.info(f"Restaurant {restaurant_id} not found or inactive")
        raise DocumentNotFound("Restaurant not found")
    return restaurant


async def list_restaurants(query: ListQuery) -> tuple[list[Restaurant], int]:
    """Page of active restaurants sorted by rating, with the total number of matches"""
    mongo_query = build_filter_query(query.filters)
    total = await Restaurant.find(mongo_query).count()
    restaurants = (
        await Restaurant.find(mongo_query).sort("-rating.average").skip(query.skip).limit(query.limit).to_list()
    )
    return restaurants, total


async def get_cuisines() -> list[str]:
    """Distinct cuisines offered by active restaurants"""
    return sorted(await Restaurant.distinct("cuisine", {"isActive": True}))
