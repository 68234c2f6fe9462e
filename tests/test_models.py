from datetime import datetime

import pytest
from pydantic import ValidationError

from models.restaurant import GeoPoint, OpeningHours, PriceRange, RestaurantProfile, RestaurantResult
from tests.conftest import WEDNESDAY_AFTERNOON, make_restaurant, restaurant_fields


class TestGeoPoint:
    def test_coordinates_are_longitude_then_latitude(self):
        point = GeoPoint.from_lat_lng(24.87, 90.72)
        assert point.coordinates == (90.72, 24.87)
        assert point.latitude == 24.87
        assert point.longitude == 90.72

    @pytest.mark.parametrize("coordinates", [(181, 0), (-181, 0), (0, 91), (0, -90.5)])
    def test_rejects_out_of_range_coordinates(self, coordinates):
        with pytest.raises(ValidationError, match="Invalid coordinates"):
            GeoPoint(coordinates=coordinates)

    def test_accepts_boundaries(self):
        assert GeoPoint(coordinates=(-180, 90)).latitude == 90


class TestRestaurantProfile:
    def test_parses_camel_case_payload(self):
        profile = RestaurantProfile.model_validate(restaurant_fields())
        assert profile.price_range == PriceRange.EXPENSIVE
        assert profile.address.zip_code == "1213"
        assert profile.is_active is True
        assert profile.verified is False

    def test_email_is_lowercased(self):
        profile = RestaurantProfile.model_validate(restaurant_fields())
        assert profile.email == "contact@pizzaparadise.com"

    def test_name_is_trimmed(self):
        profile = RestaurantProfile.model_validate(restaurant_fields(name="  Thai Orchid  "))
        assert profile.name == "Thai Orchid"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"cuisine": []},
            {"cuisine": ["Klingon"]},
            {"features": ["Helipad"]},
            {"priceRange": "$$$$$"},
            {"rating": {"average": 5.5, "count": 1}},
            {"rating": {"average": 4, "count": -1}},
            {"phone": "12-34"},
            {"email": "not-an-email"},
            {"name": "x" * 101},
            {"description": "x" * 501},
            {"openingHours": {"monday": {"open": "25:00", "close": "23:00"}}},
        ],
    )
    def test_rejects_invalid_fields(self, overrides):
        with pytest.raises(ValidationError):
            RestaurantProfile.model_validate(restaurant_fields(**overrides))


class TestOpeningHours:
    def test_open_within_hours(self):
        assert make_restaurant().is_open_now(WEDNESDAY_AFTERNOON) is True

    def test_bounds_are_inclusive(self):
        restaurant = make_restaurant()
        assert restaurant.is_open_now(datetime(2024, 1, 17, 12, 0)) is True
        assert restaurant.is_open_now(datetime(2024, 1, 17, 22, 30)) is True
        assert restaurant.is_open_now(datetime(2024, 1, 17, 22, 31)) is False
        assert restaurant.is_open_now(datetime(2024, 1, 17, 11, 59)) is False

    def test_closed_without_entry_for_the_day(self):
        # Thursday has no entry
        assert make_restaurant().is_open_now(datetime(2024, 1, 18, 14, 0)) is False

    def test_closed_when_open_or_close_is_missing(self):
        hours = OpeningHours.model_validate({"wednesday": {"open": "10:00"}})
        assert hours.is_open_at(WEDNESDAY_AFTERNOON) is False

    def test_hours_past_midnight_are_not_treated_as_open(self):
        hours = OpeningHours.model_validate({"wednesday": {"open": "18:00", "close": "02:00"}})
        assert hours.is_open_at(datetime(2024, 1, 17, 23, 0)) is False
        assert hours.is_open_at(datetime(2024, 1, 17, 1, 0)) is False


class TestRestaurantResult:
    def test_from_document_keeps_id_and_annotations(self):
        restaurant = make_restaurant()
        result = RestaurantResult.from_document(restaurant, distance=1.23, is_open_now=True)

        payload = result.to_json()
        assert payload["_id"] == str(restaurant.id)
        assert payload["distance"] == 1.23
        assert payload["isOpenNow"] is True
        assert payload["priceRange"] == "$$$"
        assert payload["location"] == {"type": "Point", "coordinates": [90.724821, 24.876535]}
        assert payload["cuisine"] == ["Italian", "Fast Food"]
        assert "revisionId" not in payload

    def test_to_json_can_drop_annotations(self):
        payload = RestaurantResult.from_document(make_restaurant()).to_json(exclude={"distance", "is_open_now"})
        assert "distance" not in payload
        assert "isOpenNow" not in payload
