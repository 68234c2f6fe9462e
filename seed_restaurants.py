# seed_restaurants.py: wipe & seed the `restaurants` collection around a base point
"""Populate MongoDB with ten reference restaurants: six within 2 km of the base
point and four beyond it, so a default nearby search shows exactly what is close.

Run:
    python seed_restaurants.py            # reference restaurants only
    python seed_restaurants.py --fake 40  # plus 40 random ones 3-15 km out
"""
from __future__ import annotations

import argparse
import asyncio
import random

from faker import Faker

from databases.mongo.orm import close_db, init_db
from geo_utils import destination_point
from models.restaurant import CuisineType, FeatureType, GeoPoint, PriceRange, Restaurant, RestaurantProfile
from utils.logging import logger

BASE_LAT = 24.876535
BASE_LNG = 90.724821


def weekly_hours(open_at: str, close_at: str, weekend_close: str) -> dict:
    """Same hours every day, later close on Friday and Saturday"""
    hours = {day: {"open": open_at, "close": close_at} for day in ("monday", "tuesday", "wednesday", "thursday", "sunday")}
    hours.update({day: {"open": open_at, "close": weekend_close} for day in ("friday", "saturday")})
    return hours


# (offset km from the base point, restaurant fields)
REFERENCE_RESTAURANTS: list[tuple[float, dict]] = [
    (0.5, {
        "name": "Spice Garden",
        "description": "Authentic Bangladeshi cuisine with a modern twist. Famous for biryani and traditional curries.",
        "cuisine": ["Bangladeshi", "Indian"],
        "address": {"street": "House 45, Road 12", "area": "Gulshan", "city": "Dhaka", "zipCode": "1212"},
        "phone": "+880 1712-345678",
        "email": "info@spicegarden.com",
        "rating": {"average": 4.5, "count": 234},
        "priceRange": "$$",
        "openingHours": weekly_hours("11:00", "23:00", "23:30"),
        "images": ["https://example.com/spice-garden-1.jpg"],
        "features": ["Dine-in", "Takeaway", "Delivery", "Air Conditioned", "Parking", "WiFi"],
    }),
    (1.2, {
        "name": "Pizza Paradise",
        "description": "Wood-fired pizzas and Italian delicacies. Fresh ingredients, authentic taste.",
        "cuisine": ["Italian", "Fast Food"],
        "address": {"street": "Plot 78, Avenue 5", "area": "Banani", "city": "Dhaka", "zipCode": "1213"},
        "phone": "+880 1823-456789",
        "email": "contact@pizzaparadise.com",
        "rating": {"average": 4.2, "count": 189},
        "priceRange": "$$$",
        "openingHours": weekly_hours("12:00", "22:30", "23:00"),
        "images": ["https://example.com/pizza-paradise-1.jpg"],
        "features": ["Dine-in", "Takeaway", "Delivery", "Outdoor Seating", "Family Friendly"],
    }),
    (0.8, {
        "name": "Thai Orchid",
        "description": "Exquisite Thai cuisine in an elegant setting. Popular for pad thai and green curry.",
        "cuisine": ["Thai"],
        "address": {"street": "Level 3, Dhaka Tower", "area": "Gulshan", "city": "Dhaka", "zipCode": "1212"},
        "phone": "+880 1934-567890",
        "email": "hello@thaiorchid.com",
        "rating": {"average": 4.7, "count": 312},
        "priceRange": "$$$",
        "openingHours": weekly_hours("12:00", "22:00", "23:00"),
        "images": ["https://example.com/thai-orchid-1.jpg"],
        "features": ["Dine-in", "Takeaway", "Air Conditioned", "Accepts Cards", "WiFi"],
    }),
    (1.5, {
        "name": "Burger Buzz",
        "description": "Gourmet burgers and shakes. Home of the famous triple-stack beef burger.",
        "cuisine": ["American", "Fast Food"],
        "address": {"street": "Shop 12, Food Street", "area": "Baridhara", "city": "Dhaka", "zipCode": "1212"},
        "phone": "+880 1745-678901",
        "email": "info@burgerbuzz.com",
        "rating": {"average": 4.0, "count": 156},
        "priceRange": "$$",
        "openingHours": weekly_hours("11:00", "23:00", "00:00"),
        "images": ["https://example.com/burger-buzz-1.jpg"],
        "features": ["Dine-in", "Takeaway", "Delivery", "WiFi", "Family Friendly"],
    }),
    (1.8, {
        "name": "Sushi Station",
        "description": "Fresh sushi and Japanese cuisine. Daily fresh fish delivery.",
        "cuisine": ["Japanese", "Seafood"],
        "address": {"street": "House 23, Road 45", "area": "Gulshan", "city": "Dhaka", "zipCode": "1212"},
        "phone": "+880 1856-789012",
        "email": "orders@sushistation.com",
        "rating": {"average": 4.6, "count": 287},
        "priceRange": "$$$$",
        "openingHours": weekly_hours("12:00", "22:00", "23:00"),
        "images": ["https://example.com/sushi-station-1.jpg"],
        "features": ["Dine-in", "Takeaway", "Air Conditioned", "Accepts Cards", "WiFi"],
    }),
    (1.0, {
        "name": "Veggie Delight",
        "description": "100% vegetarian restaurant with healthy and delicious options.",
        "cuisine": ["Vegetarian", "Indian"],
        "address": {"street": "Road 11, Block C", "area": "Banani", "city": "Dhaka", "zipCode": "1213"},
        "phone": "+880 1967-890123",
        "email": "contact@veggiedelight.com",
        "rating": {"average": 4.3, "count": 201},
        "priceRange": "$$",
        "openingHours": weekly_hours("11:00", "22:00", "22:30"),
        "images": ["https://example.com/veggie-delight-1.jpg"],
        "features": ["Dine-in", "Takeaway", "Delivery", "Vegan Options", "Halal"],
    }),
    (5.5, {
        "name": "Ocean Breeze Seafood",
        "description": "Premium seafood restaurant with ocean-fresh catch daily.",
        "cuisine": ["Seafood", "Continental"],
        "address": {"street": "Marine Drive 101", "area": "Uttara", "city": "Dhaka", "zipCode": "1230"},
        "phone": "+880 1678-901234",
        "email": "info@oceanbreeze.com",
        "rating": {"average": 4.8, "count": 423},
        "priceRange": "$$$$",
        "openingHours": weekly_hours("12:00", "23:00", "23:30"),
        "images": ["https://example.com/ocean-breeze-1.jpg"],
        "features": ["Dine-in", "Outdoor Seating", "Parking", "Air Conditioned", "Accepts Cards"],
    }),
    (8.2, {
        "name": "Dragon Wok",
        "description": "Authentic Chinese cuisine with a wide variety of dim sum and noodles.",
        "cuisine": ["Chinese"],
        "address": {"street": "China Town Complex", "area": "Motijheel", "city": "Dhaka", "zipCode": "1000"},
        "phone": "+880 1589-012345",
        "email": "orders@dragonwok.com",
        "rating": {"average": 4.1, "count": 178},
        "priceRange": "$$",
        "openingHours": weekly_hours("11:30", "22:00", "22:30"),
        "images": ["https://example.com/dragon-wok-1.jpg"],
        "features": ["Dine-in", "Takeaway", "Delivery", "Family Friendly"],
    }),
    (3.7, {
        "name": "Cafe Mocha",
        "description": "Cozy cafe serving specialty coffee, desserts, and light snacks.",
        "cuisine": ["Cafe", "Desserts"],
        "address": {"street": "Road 27, Dhanmondi", "area": "Dhanmondi", "city": "Dhaka", "zipCode": "1209"},
        "phone": "+880 1490-123456",
        "email": "hello@cafemocha.com",
        "rating": {"average": 4.4, "count": 267},
        "priceRange": "$",
        "openingHours": weekly_hours("08:00", "22:00", "23:00"),
        "images": ["https://example.com/cafe-mocha-1.jpg"],
        "features": ["Dine-in", "Takeaway", "WiFi", "Air Conditioned", "Outdoor Seating"],
    }),
    (6.1, {
        "name": "Taco Fiesta",
        "description": "Vibrant Mexican restaurant with authentic tacos, burritos, and margaritas.",
        "cuisine": ["Mexican"],
        "address": {"street": "Level 2, City Mall", "area": "Mirpur", "city": "Dhaka", "zipCode": "1216"},
        "phone": "+880 1701-234567",
        "email": "info@tacofiesta.com",
        "rating": {"average": 3.9, "count": 142},
        "priceRange": "$$",
        "openingHours": weekly_hours("12:00", "22:00", "23:00"),
        "images": ["https://example.com/taco-fiesta-1.jpg"],
        "features": ["Dine-in", "Takeaway", "Family Friendly", "Air Conditioned"],
    }),
]


def build_reference_restaurants(base_lat: float = BASE_LAT, base_lng: float = BASE_LNG) -> list[RestaurantProfile]:
    """Reference restaurants placed exactly at their offset, fanned out 36 degrees apart"""
    restaurants = []
    for index, (offset_km, fields) in enumerate(REFERENCE_RESTAURANTS):
        lat, lng = destination_point(base_lat, base_lng, offset_km, bearing=index * 36)
        restaurants.append(
            RestaurantProfile(
                **fields,
                location=GeoPoint.from_lat_lng(round(lat, 6), round(lng, 6)),
                isActive=True,
                verified=True,
            )
        )
    return restaurants


def build_fake_restaurants(count: int, base_lat: float = BASE_LAT, base_lng: float = BASE_LNG) -> list[RestaurantProfile]:
    """Random restaurants 3-15 km from the base point"""
    fake = Faker()
    restaurants = []
    for _ in range(count):
        lat, lng = destination_point(base_lat, base_lng, random.uniform(3, 15), random.uniform(0, 360))
        opens = f"{random.randint(7, 12):02d}:00"
        restaurants.append(
            RestaurantProfile(
                name=f"{fake.last_name()} {random.choice(['Kitchen', 'Bistro', 'House', 'Grill', 'Corner'])}",
                description=fake.sentence(nb_words=12),
                cuisine=random.sample(list(CuisineType), k=random.randint(1, 2)),
                location=GeoPoint.from_lat_lng(round(lat, 6), round(lng, 6)),
                address={"street": fake.street_address(), "area": fake.city(), "city": "Dhaka"},
                phone=f"+880 1{random.randint(300, 999)}-{random.randint(100000, 999999)}",
                email=fake.email(),
                rating={"average": round(random.uniform(2.5, 5.0), 1), "count": random.randint(0, 500)},
                price_range=random.choice(list(PriceRange)),
                opening_hours=weekly_hours(opens, "22:00", "23:00"),
                images=[fake.image_url(width=400, height=300)],
                features=random.sample(list(FeatureType), k=random.randint(2, 5)),
                verified=random.random() < 0.5,
            )
        )
    return restaurants


async def seed(fake_count: int = 0) -> list[Restaurant]:
    await init_db()
    try:
        await Restaurant.delete_all()
        logger.info("Cleared existing restaurants")

        profiles = build_reference_restaurants() + build_fake_restaurants(fake_count)
        restaurants = [Restaurant(**profile.model_dump()) for profile in profiles]
        await Restaurant.insert_many(restaurants)
        logger.info(f"Seeded {len(restaurants)} restaurants")
        return restaurants
    finally:
        close_db()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the restaurants collection")
    parser.add_argument("--fake", type=int, default=0, help="extra random restaurants to insert")
    args = parser.parse_args()

    restaurants = asyncio.run(seed(args.fake))
    sample = restaurants[0]
    print(f"Base location: {BASE_LAT}, {BASE_LNG}")
    print("Restaurants within 2km: 6")
    print(f"Restaurants outside 2km: {4 + args.fake}")
    print(f"Sample: {sample.name} at {sample.location.latitude}, {sample.location.longitude} "
          f"({', '.join(c.value for c in sample.cuisine)}, {sample.rating.average}/5 from {sample.rating.count} reviews)")
    print(f"Try: GET /api/v1/restaurants/nearby?latitude={BASE_LAT}&longitude={BASE_LNG}&radius=2")


if __name__ == "__main__":
    main()
