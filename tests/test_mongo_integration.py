"""
Runs the real `$near` query against a MongoDB server.

Skipped unless MONGODB_TEST_URI points at a server; the `restaurants_test` database is wiped.
"""
import os

import pytest
from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient

from business.restaurant_search import find_nearby, list_all, list_cuisines
from models.restaurant import Restaurant
from models.search import ListQuery, NearbySearchQuery
from seed_restaurants import BASE_LAT, BASE_LNG, build_reference_restaurants

MONGODB_TEST_URI = os.getenv("MONGODB_TEST_URI")

pytestmark = pytest.mark.skipif(not MONGODB_TEST_URI, reason="MONGODB_TEST_URI not set")


@pytest.mark.asyncio
async def test_reference_data_queries():
    client = AsyncIOMotorClient(MONGODB_TEST_URI)
    try:
        await init_beanie(database=client["restaurants_test"], document_models=[Restaurant])
        await Restaurant.delete_all()
        restaurants = [Restaurant(**profile.model_dump()) for profile in build_reference_restaurants()]
        restaurants[0].is_active = False
        await Restaurant.insert_many(restaurants)

        nearby = await find_nearby(NearbySearchQuery(latitude=BASE_LAT, longitude=BASE_LNG, radius=2))
        # six reference restaurants lie within 2 km, one of them is inactive
        assert len(nearby) == 5
        assert "Spice Garden" not in [r.name for r in nearby]
        distances = [r.distance for r in nearby]
        assert distances == sorted(distances)
        assert all(distance <= 2 for distance in distances)

        thai = await find_nearby(NearbySearchQuery(latitude=BASE_LAT, longitude=BASE_LNG, cuisine=["Thai"]))
        assert [r.name for r in thai] == ["Thai Orchid"]

        results, pagination = await list_all(ListQuery(limit=4))
        assert pagination.total == 9
        assert pagination.pages == 3
        assert results[0].name == "Ocean Breeze Seafood"

        cuisines = await list_cuisines()
        assert cuisines == sorted(cuisines)
        assert "Bangladeshi" not in cuisines
    finally:
        await Restaurant.delete_all()
        client.close()
