"""Geographic helpers."""

import math

EARTH_RADIUS_KM = 6371.0


def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in kilometres between two coordinates."""
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lng = math.radians(lng2 - lng1)

    a = (
        math.sin(delta_lat / 2) * math.sin(delta_lat / 2)
        + math.cos(lat1_rad) * math.cos(lat2_rad)
        * math.sin(delta_lng / 2) * math.sin(delta_lng / 2)
    )
    # Rounding can push a slightly outside [0, 1].
    a = min(max(a, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def latitude_in_domain(lat: float) -> bool:
    return -90 <= lat <= 90


def longitude_in_domain(lng: float) -> bool:
    return -180 <= lng <= 180
