# client/location.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from utils.logging import logger


@dataclass
class Coordinates:
    latitude: float
    longitude: float
    accuracy: float | None = None


@dataclass
class PermissionResult:
    granted: bool
    message: str


@dataclass
class LocationResult:
    success: bool
    location: Coordinates | None = None
    error: str | None = None


class LocationProvider(Protocol):
    """Device location services, as seen by the nearby screen"""

    async def services_enabled(self) -> bool: ...

    async def request_permission(self) -> bool: ...

    async def current_position(self) -> Coordinates: ...


async def check_location_services(provider: LocationProvider) -> bool:
    """Whether device location services are on; a failing check counts as off"""
    try:
        return await provider.services_enabled()
    except Exception as e:
        logger.warning(f"Could not check location services: {e!r}")
        return False


async def request_location_permission(provider: LocationProvider) -> PermissionResult:
    """Ask for foreground location access"""
    try:
        granted = await provider.request_permission()
    except Exception as e:
        return PermissionResult(granted=False, message=str(e) or "Error requesting location permission")

    if not granted:
        return PermissionResult(granted=False, message="Permission to access location was denied")
    return PermissionResult(granted=True, message="Location permission granted")


async def get_current_location(provider: LocationProvider) -> LocationResult:
    try:
        return LocationResult(success=True, location=await provider.current_position())
    except Exception as e:
        return LocationResult(success=False, error=str(e) or "Error getting current location")


def format_distance(distance_km: float) -> str:
    """`850 m` below one kilometer, `1.2 km` otherwise"""
    if distance_km < 1:
        return f"{round(distance_km * 1000)} m"
    return f"{distance_km:.1f} km"
