"""
Shared fixtures.

Restaurant documents are built with `model_construct` from an already validated
profile, so no MongoDB connection (and no `init_beanie`) is needed.
"""
from datetime import datetime

import pytest
from beanie import PydanticObjectId

from models.restaurant import Restaurant, RestaurantProfile, RestaurantResult

# A Wednesday
WEDNESDAY_AFTERNOON = datetime(2024, 1, 17, 14, 30)


def restaurant_fields(**overrides) -> dict:
    fields = {
        "name": "Pizza Paradise",
        "description": "Wood-fired pizzas and Italian delicacies.",
        "cuisine": ["Italian", "Fast Food"],
        "location": {"type": "Point", "coordinates": [90.724821, 24.876535]},
        "address": {"street": "Plot 78, Avenue 5", "area": "Banani", "city": "Dhaka", "zipCode": "1213"},
        "phone": "+880 1823-456789",
        "email": "Contact@PizzaParadise.com",
        "rating": {"average": 4.2, "count": 189},
        "priceRange": "$$$",
        "openingHours": {
            "wednesday": {"open": "12:00", "close": "22:30"},
            "friday": {"open": "12:00", "close": "23:00"},
        },
        "images": ["https://example.com/pizza-paradise-1.jpg"],
        "features": ["Dine-in", "WiFi"],
    }
    fields.update(overrides)
    return fields


def make_restaurant(**overrides) -> Restaurant:
    profile = RestaurantProfile.model_validate(restaurant_fields(**overrides))
    return Restaurant.model_construct(id=PydanticObjectId(), **dict(profile))


def make_result(**overrides) -> RestaurantResult:
    fields = restaurant_fields(**overrides)
    fields.setdefault("_id", str(PydanticObjectId()))
    return RestaurantResult.model_validate(fields)


@pytest.fixture
def restaurant() -> Restaurant:
    return make_restaurant()
