# geo_utils.py
from math import asin, atan2, cos, degrees, radians, sin, sqrt

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometers between two (lat, lon) points."""
    d_lat = radians(lat2 - lat1)
    d_lon = radians(lon2 - lon1)
    a = sin(d_lat / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(d_lon / 2) ** 2
    return 2 * EARTH_RADIUS_KM * atan2(sqrt(a), sqrt(1 - a))


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance rounded to 2 decimals, as reported to API callers."""
    return round(haversine_km(lat1, lon1, lat2, lon2), 2)


def destination_point(lat: float, lon: float, distance: float, bearing: float) -> tuple[float, float]:
    """Returns the (lat, lng) reached after travelling `distance` km on `bearing` degrees."""
    delta = distance / EARTH_RADIUS_KM
    theta = radians(bearing)
    phi1, lambda1 = radians(lat), radians(lon)

    phi2 = asin(sin(phi1) * cos(delta) + cos(phi1) * sin(delta) * cos(theta))
    lambda2 = lambda1 + atan2(sin(theta) * sin(delta) * cos(phi1), cos(delta) - sin(phi1) * sin(phi2))
    # normalise to [-180, 180)
    lng = (degrees(lambda2) + 540) % 360 - 180
    return degrees(phi2), lng
