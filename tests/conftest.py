from __future__ import annotations

import math

import pytest

from crocalc.domain.models import GeoPoint, Institute

# One degree of latitude on the 6371 km sphere.
KM_PER_DEG_LAT = 6371.0 * math.pi / 180


@pytest.fixture
def berlin() -> GeoPoint:
    return GeoPoint(lat=52.5200, lon=13.4050)


@pytest.fixture
def two_institute_catalog(berlin: GeoPoint) -> list[Institute]:
    """Institute A at Berlin, institute B 50 km due north of it."""
    return [
        Institute(name="A", location=berlin),
        Institute(name="B", location=GeoPoint(lat=berlin.lat + 50 / KM_PER_DEG_LAT, lon=berlin.lon)),
    ]
