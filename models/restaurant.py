from datetime import datetime, timezone
from enum import Enum
from typing import Literal

from beanie import Document
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pymongo import ASCENDING, DESCENDING, GEOSPHERE, IndexModel

PHONE_PATTERN = r"^[0-9+\-\s()]{10,20}$"
EMAIL_PATTERN = r"^\S+@\S+\.\S+$"
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


class CuisineType(str, Enum):
    BANGLADESHI = "Bangladeshi"
    INDIAN = "Indian"
    CHINESE = "Chinese"
    THAI = "Thai"
    ITALIAN = "Italian"
    AMERICAN = "American"
    FAST_FOOD = "Fast Food"
    CONTINENTAL = "Continental"
    MEXICAN = "Mexican"
    JAPANESE = "Japanese"
    KOREAN = "Korean"
    MEDITERRANEAN = "Mediterranean"
    SEAFOOD = "Seafood"
    VEGETARIAN = "Vegetarian"
    DESSERTS = "Desserts"
    CAFE = "Cafe"


class FeatureType(str, Enum):
    DINE_IN = "Dine-in"
    TAKEAWAY = "Takeaway"
    DELIVERY = "Delivery"
    OUTDOOR_SEATING = "Outdoor Seating"
    WIFI = "WiFi"
    PARKING = "Parking"
    AIR_CONDITIONED = "Air Conditioned"
    FAMILY_FRIENDLY = "Family Friendly"
    WHEELCHAIR_ACCESSIBLE = "Wheelchair Accessible"
    ACCEPTS_CARDS = "Accepts Cards"
    HALAL = "Halal"
    VEGAN_OPTIONS = "Vegan Options"


class PriceRange(str, Enum):
    BUDGET = "$"
    MODERATE = "$$"
    EXPENSIVE = "$$$"
    LUXURY = "$$$$"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _document_alias(name: str) -> str:
    """Mongo keeps the id under `_id`, every other field is stored camelCased"""
    return "_id" if name == "id" else to_camel(name)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GeoPoint(CamelModel):
    """GeoJSON point, coordinates are [longitude, latitude]"""

    type: Literal["Point"] = "Point"
    coordinates: tuple[float, float]

    @field_validator("coordinates")
    @classmethod
    def check_coordinates(cls, coordinates: tuple[float, float]) -> tuple[float, float]:
        longitude, latitude = coordinates
        if not -180 <= longitude <= 180 or not -90 <= latitude <= 90:
            raise ValueError("Invalid coordinates. Format: [longitude, latitude]")
        return coordinates

    @classmethod
    def from_lat_lng(cls, latitude: float, longitude: float) -> "GeoPoint":
        return cls(coordinates=(longitude, latitude))

    @property
    def longitude(self) -> float:
        return self.coordinates[0]

    @property
    def latitude(self) -> float:
        return self.coordinates[1]


class Address(CamelModel):
    street: str
    area: str
    city: str
    zip_code: str | None = None


class Rating(CamelModel):
    average: float = Field(0, ge=0, le=5)
    count: int = Field(0, ge=0)


class DayHours(CamelModel):
    open: str | None = Field(None, pattern=TIME_PATTERN)
    close: str | None = Field(None, pattern=TIME_PATTERN)


class OpeningHours(CamelModel):
    monday: DayHours | None = None
    tuesday: DayHours | None = None
    wednesday: DayHours | None = None
    thursday: DayHours | None = None
    friday: DayHours | None = None
    saturday: DayHours | None = None
    sunday: DayHours | None = None

    def for_day(self, day: str) -> DayHours | None:
        return getattr(self, day)

    def is_open_at(self, moment: datetime) -> bool:
        """
        Same-day check: "HH:MM" becomes HH*100+MM and the current marker must lie in [open, close].
        Hours that run past midnight (close < open) are never reported as open.
        """
        hours = self.for_day(WEEKDAYS[moment.weekday()])
        if not hours or not hours.open or not hours.close:
            return False

        current = moment.hour * 100 + moment.minute
        open_at = int(hours.open.replace(":", ""))
        close_at = int(hours.close.replace(":", ""))
        return open_at <= current <= close_at


class RestaurantProfile(CamelModel):
    """Restaurant fields shared by the stored document and API payloads"""

    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., max_length=500)
    cuisine: list[CuisineType] = Field(..., min_length=1)
    location: GeoPoint
    address: Address
    phone: str = Field(..., pattern=PHONE_PATTERN)
    email: str | None = Field(None, pattern=EMAIL_PATTERN)
    rating: Rating = Field(default_factory=Rating)
    price_range: PriceRange
    opening_hours: OpeningHours = Field(default_factory=OpeningHours)
    images: list[str] = Field(default_factory=list)
    features: list[FeatureType] = Field(default_factory=list)
    is_active: bool = True
    verified: bool = False
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, name):
        return name.strip() if isinstance(name, str) else name

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, email: str | None) -> str | None:
        return email.lower() if email else email


class Restaurant(Document, RestaurantProfile):
    model_config = ConfigDict(alias_generator=_document_alias, populate_by_name=True)

    class Settings:
        name = "restaurants"
        indexes = [
            IndexModel([("location", GEOSPHERE)]),
            IndexModel([("name", ASCENDING)]),
            IndexModel([("rating.average", DESCENDING), ("isActive", ASCENDING)]),
            IndexModel([("cuisine", ASCENDING), ("isActive", ASCENDING)]),
            IndexModel([("priceRange", ASCENDING), ("isActive", ASCENDING)]),
        ]

    def is_open_now(self, now: datetime | None = None) -> bool:
        """Whether the restaurant is open at `now` (server local time by default)"""
        return self.opening_hours.is_open_at(now or datetime.now())

    def profile(self) -> dict:
        """Profile fields by python name, without the document bookkeeping"""
        return self.model_dump(include=set(RestaurantProfile.model_fields))


class RestaurantResult(RestaurantProfile):
    """A restaurant as returned by the API, optionally annotated for a search"""

    id: str = Field(..., alias="_id")
    distance: float | None = None
    is_open_now: bool | None = None

    @classmethod
    def from_document(
        cls, restaurant: Restaurant, distance: float | None = None, is_open_now: bool | None = None
    ) -> "RestaurantResult":
        return cls(id=str(restaurant.id), distance=distance, is_open_now=is_open_now, **restaurant.profile())

    def to_json(self, exclude: set[str] | None = None) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude=exclude)
