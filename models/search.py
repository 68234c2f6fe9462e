from pydantic import BaseModel, Field

from models.restaurant import CamelModel, CuisineType, PriceRange
from utils.constants import (
    DEFAULT_NEARBY_LIMIT,
    DEFAULT_PAGE_LIMIT,
    DEFAULT_RADIUS_KM,
    MAX_LIMIT,
    MAX_RADIUS_KM,
    MIN_RADIUS_KM,
)


class RestaurantFilters(CamelModel):
    cuisine: list[CuisineType] | None = None
    price_range: PriceRange | None = None
    min_rating: float | None = Field(None, ge=0, le=5)

    @property
    def filters(self) -> "RestaurantFilters":
        """Only the facet part of a query"""
        return RestaurantFilters(cuisine=self.cuisine, price_range=self.price_range, min_rating=self.min_rating)


class NearbySearchQuery(RestaurantFilters):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    radius: float = Field(DEFAULT_RADIUS_KM, ge=MIN_RADIUS_KM, le=MAX_RADIUS_KM)
    limit: int = Field(DEFAULT_NEARBY_LIMIT, ge=1, le=MAX_LIMIT)
    skip: int = Field(0, ge=0)

    def search_params(self) -> dict:
        """Echo of the search, in the shape returned under `data.searchParams`"""
        return {
            "location": {"latitude": self.latitude, "longitude": self.longitude},
            "radius": self.radius,
            "filters": self.filters.model_dump(mode="json", by_alias=True),
        }


class ListQuery(RestaurantFilters):
    page: int = Field(1, ge=1)
    limit: int = Field(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_LIMIT)

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int
