from __future__ import annotations

from math import atan2, cos, radians, sin, sqrt

EARTH_RADIUS_METERS = 6_371_000


def distance_km(
    start_lat: float,
    start_lng: float,
    end_lat: float,
    end_lng: float,
) -> float:
    """Great-circle distance between two points using the haversine formula.

    A point at exactly (0, 0) means the row carried no coordinates, and
    out-of-range latitudes or longitudes are treated the same way: both
    yield 0.0 instead of a distance.
    """
    if _is_missing(start_lat, start_lng) or _is_missing(end_lat, end_lng):
        return 0.0
    if not _in_range(start_lat, start_lng) or not _in_range(end_lat, end_lng):
        return 0.0

    phi1 = radians(start_lat)
    phi2 = radians(end_lat)
    delta_phi = radians(end_lat - start_lat)
    delta_lambda = radians(end_lng - start_lng)

    a = (
        sin(delta_phi / 2) ** 2
        + cos(phi1) * cos(phi2) * sin(delta_lambda / 2) ** 2
    )
    if a < 0 or a > 1:
        return 0.0

    c = 2 * atan2(sqrt(a), sqrt(1 - a))
    return EARTH_RADIUS_METERS * c / 1000


def speed_kmh(distance: float, duration_seconds: float) -> float:
    if duration_seconds <= 0:
        return 0.0
    return distance / duration_seconds * 3600


def _is_missing(lat: float, lng: float) -> bool:
    return lat == 0 and lng == 0


def _in_range(lat: float, lng: float) -> bool:
    return abs(lat) <= 90 and abs(lng) <= 180
