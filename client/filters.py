# client/filters.py
"""
In-memory search, facet filtering and sorting of the restaurants the API returned.

`apply_filters(base, state)` is a pure function: the stages below run in a fixed
order, each narrowing the result of the previous one, then the survivors are sorted.
Cuisine matches when ANY selected cuisine is offered; features match only when ALL
selected features are present.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Iterable, Sequence

from models.restaurant import CuisineType, FeatureType, PriceRange, RestaurantResult


class SortOption(str, Enum):
    DISTANCE = "distance"
    RATING = "rating"
    NAME = "name"


@dataclass(frozen=True)
class FilterState:
    cuisine: tuple[CuisineType, ...] = ()
    price_range: PriceRange | None = None
    min_rating: float | None = None
    features: tuple[FeatureType, ...] = ()
    sort_by: SortOption | None = None
    search_text: str = ""


def _values(items: Iterable) -> set[str]:
    return {getattr(item, "value", item) for item in items}


def matches_search_text(restaurant: RestaurantResult, text: str) -> bool:
    needle = text.strip().lower()
    if not needle:
        return True

    haystack = [restaurant.name, restaurant.address.area, restaurant.description, *_values(restaurant.cuisine)]
    return any(needle in field.lower() for field in haystack)


def matches_cuisine(restaurant: RestaurantResult, selected: Sequence[CuisineType]) -> bool:
    if not selected:
        return True
    return bool(_values(restaurant.cuisine) & _values(selected))


def matches_price_range(restaurant: RestaurantResult, price_range: PriceRange | None) -> bool:
    return price_range is None or restaurant.price_range == price_range


def matches_min_rating(restaurant: RestaurantResult, min_rating: float | None) -> bool:
    return min_rating is None or restaurant.rating.average >= min_rating


def matches_features(restaurant: RestaurantResult, selected: Sequence[FeatureType]) -> bool:
    return _values(selected) <= _values(restaurant.features)


def _distance_key(restaurant: RestaurantResult):
    # restaurants without a distance go last
    return (restaurant.distance is None, restaurant.distance or 0)


SORT_KEYS: dict[SortOption, tuple[Callable, bool]] = {
    SortOption.DISTANCE: (_distance_key, False),
    SortOption.RATING: (lambda restaurant: restaurant.rating.average, True),
    SortOption.NAME: (lambda restaurant: restaurant.name.casefold(), False),
}


def sort_restaurants(restaurants: Iterable[RestaurantResult], sort_by: SortOption | None) -> list[RestaurantResult]:
    key, reverse = SORT_KEYS[sort_by or SortOption.DISTANCE]
    return sorted(restaurants, key=key, reverse=reverse)


def apply_filters(base: Sequence[RestaurantResult], state: FilterState) -> list[RestaurantResult]:
    """Working set for display: base set narrowed by text and facets, then sorted"""
    stages: list[Callable[[RestaurantResult], bool]] = [
        lambda restaurant: matches_search_text(restaurant, state.search_text),
        lambda restaurant: matches_cuisine(restaurant, state.cuisine),
        lambda restaurant: matches_price_range(restaurant, state.price_range),
        lambda restaurant: matches_min_rating(restaurant, state.min_rating),
        lambda restaurant: matches_features(restaurant, state.features),
    ]
    selected = [restaurant for restaurant in base if all(stage(restaurant) for stage in stages)]
    return sort_restaurants(selected, state.sort_by)


# Editing helpers used by the filter sheet. Each returns a new state.


def _toggle(items: tuple, item) -> tuple:
    return tuple(existing for existing in items if existing != item) if item in items else (*items, item)


def toggle_cuisine(state: FilterState, cuisine: CuisineType) -> FilterState:
    return replace(state, cuisine=_toggle(state.cuisine, CuisineType(cuisine)))


def toggle_feature(state: FilterState, feature: FeatureType) -> FilterState:
    return replace(state, features=_toggle(state.features, FeatureType(feature)))


def toggle_price_range(state: FilterState, price_range: PriceRange) -> FilterState:
    price_range = PriceRange(price_range)
    return replace(state, price_range=None if state.price_range == price_range else price_range)


def toggle_min_rating(state: FilterState, min_rating: float) -> FilterState:
    return replace(state, min_rating=None if state.min_rating == min_rating else min_rating)


def toggle_sort(state: FilterState, sort_by: SortOption) -> FilterState:
    sort_by = SortOption(sort_by)
    return replace(state, sort_by=None if state.sort_by == sort_by else sort_by)


def clear_filters(state: FilterState) -> FilterState:
    """Drop every facet and the sort; the search text is kept"""
    return FilterState(search_text=state.search_text)


def active_filter_count(state: FilterState) -> int:
    return sum(
        [
            bool(state.cuisine),
            state.price_range is not None,
            bool(state.min_rating),
            bool(state.features),
            state.sort_by is not None,
        ]
    )
