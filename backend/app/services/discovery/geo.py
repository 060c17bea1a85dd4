"""Straight-line distance and drive-time estimates.

The drive time is a planning estimate: great-circle distance at an assumed
average urban speed. It ignores road networks, water, and traffic, so it can
be well off for places without a direct road.
"""

import math

from app.services.discovery.config import DRIVE


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points in kilometres."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return DRIVE.earth_radius_km * c


def estimate_drive_time(lat1: float, lng1: float, lat2: float, lng2: float) -> int:
    """Estimated one-way drive time in whole minutes, halves rounded up."""
    distance_km = haversine_km(lat1, lng1, lat2, lng2)
    minutes = distance_km * 60 / DRIVE.average_speed_kmh
    return int(minutes + 0.5)


def radius_km_from_travel_minutes(travel_minutes: float) -> float:
    """Convert a family's travel radius in minutes into kilometres at the same speed."""
    return travel_minutes / 60 * DRIVE.average_speed_kmh
