from client.api import APIError, RestaurantAPI
from client.filters import FilterState, SortOption, apply_filters
from client.screen import NearbyRestaurantsScreen, ScreenState

__all__ = [
    "APIError",
    "FilterState",
    "NearbyRestaurantsScreen",
    "RestaurantAPI",
    "ScreenState",
    "SortOption",
    "apply_filters",
]
