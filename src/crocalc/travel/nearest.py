"""
Nearest-institute resolution and travel cost estimation.

Travel cost model:
- every dentist drives to the institute on their own (one round trip each)
- assistants share cars, `carpool_size` people per car (car count rounded up)
- each round trip costs `round_trip_distance_km * cost_per_km`

The catalog is small (tens of institutes), so a linear scan is all we need.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from crocalc.config.settings import TravelSettings
from crocalc.core.geo import haversine_km, travel_time_minutes
from crocalc.domain.errors import NoInstituteAvailableError
from crocalc.domain.models import GeoPoint, Institute, NearestInstituteResult, StaffingProfile

logger = logging.getLogger(__name__)


def nearest_institute(origin: GeoPoint, catalog: Iterable[Institute]) -> tuple[Institute, float]:
    """Return the closest institute and its one-way distance in km.

    Ties go to the institute that comes first in catalog order.

    Raises:
        NoInstituteAvailableError: If the catalog is empty.
    """
    origin_pt = origin.as_core()
    best: Institute | None = None
    best_km = math.inf
    for institute in catalog:
        d = haversine_km(origin_pt, institute.location.as_core())
        # Strict comparison keeps the first minimum.
        if d < best_km:
            best, best_km = institute, d
    if best is None:
        raise NoInstituteAvailableError("institute catalog is empty")
    return best, best_km


def assistant_carpools(assistants: int, *, carpool_size: int) -> int:
    """Number of cars needed to bring `assistants` people to the institute."""
    if carpool_size < 1:
        raise ValueError("carpool_size must be >= 1")
    return math.ceil(assistants / carpool_size)


def travel_costs(
    round_trip_distance_km: float,
    *,
    dentists: int,
    assistants: int,
    cost_per_km: float,
    carpool_size: int,
) -> float:
    """Cost of all round trips: one per dentist plus one per assistant carpool."""
    trips = dentists + assistant_carpools(assistants, carpool_size=carpool_size)
    return round_trip_distance_km * cost_per_km * trips


def find_nearest(
    origin: GeoPoint,
    catalog: Iterable[Institute],
    *,
    profile: StaffingProfile,
    travel: TravelSettings,
) -> NearestInstituteResult:
    """Resolve the closest institute and derive distance, time and travel cost figures.

    Raises:
        NoInstituteAvailableError: If the catalog is empty.
    """
    institute, one_way_km = nearest_institute(origin, catalog)
    carpools = assistant_carpools(profile.assistants, carpool_size=travel.carpool_size)
    costs = travel_costs(
        2 * one_way_km,
        dentists=profile.dentists,
        assistants=profile.assistants,
        cost_per_km=travel.cost_per_km,
        carpool_size=travel.carpool_size,
    )
    logger.debug("Nearest institute: %s (%.1f km one way)", institute.name, one_way_km)
    return NearestInstituteResult(
        institute=institute,
        one_way_distance_km=one_way_km,
        one_way_travel_time_min=travel_time_minutes(one_way_km, average_speed_kmh=travel.average_speed_kmh),
        travel_costs=costs,
        dentist_trips=profile.dentists,
        assistant_carpools=carpools,
    )
