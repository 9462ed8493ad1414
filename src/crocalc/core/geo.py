"""
Geospatial helpers.

A tiny geometry layer: great-circle distance on a spherical Earth plus a
driving-time estimate from an assumed average speed. No GIS dependencies.
"""

from __future__ import annotations
from dataclasses import dataclass
from math import asin, cos, radians, sin, sqrt

EARTH_RADIUS_KM = 6_371.0


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lon: float


def haversine_km(a: GeoPoint, b: GeoPoint) -> float:
    """Compute great-circle distance in kilometers between two points."""
    lat1 = radians(a.lat)
    lon1 = radians(a.lon)
    lat2 = radians(b.lat)
    lon2 = radians(b.lon)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    # Rounding noise can push h marginally above 1 for antipodal points.
    return 2 * EARTH_RADIUS_KM * asin(sqrt(min(1.0, h)))


def travel_time_minutes(distance_km: float, *, average_speed_kmh: float) -> float:
    """Estimate driving time in minutes for `distance_km` at a constant average speed."""
    if average_speed_kmh <= 0:
        raise ValueError("average_speed_kmh must be > 0")
    return float(distance_km) / float(average_speed_kmh) * 60.0
