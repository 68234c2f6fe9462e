# client/detail.py
import math
import re

from models.restaurant import WEEKDAYS, OpeningHours, RestaurantResult

DAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
DIRECTIONS_URL = "https://www.google.com/maps/dir/?api=1&destination={latitude},{longitude}"


def dial_number(phone: str) -> str:
    """Phone number reduced to what a dialer accepts"""
    return re.sub(r"[^0-9+]", "", phone)


def directions_url(restaurant: RestaurantResult) -> str:
    return DIRECTIONS_URL.format(latitude=restaurant.location.latitude, longitude=restaurant.location.longitude)


def opening_hours_lines(hours: OpeningHours) -> list[str]:
    """One line per weekday, Monday first, e.g. `Mon: 11:00 - 23:00` or `Sun: Closed`"""
    lines = []
    for day, label in zip(WEEKDAYS, DAY_LABELS):
        day_hours = hours.for_day(day)
        if day_hours and day_hours.open and day_hours.close:
            lines.append(f"{label}: {day_hours.open} - {day_hours.close}")
        else:
            lines.append(f"{label}: Closed")
    return lines


def rating_stars(average: float) -> tuple[int, int, int]:
    """(full, half, empty) stars out of five"""
    full = math.floor(average)
    half = 1 if average % 1 else 0
    return full, half, 5 - math.ceil(average)
