import logging

import pytest
from pydantic import ValidationError

from crocalc.calculator.calculate import build_context, calculate, run_calculation
from crocalc.config.settings import get_settings
from crocalc.domain.errors import InvalidProfileError
from crocalc.domain.models import AddressComponents, CalculationRequest, GeoPoint, StaffingProfile


def test_calculate_with_origin_includes_travel(berlin, two_institute_catalog):
    settings = get_settings()
    profile = StaffingProfile(team_size=5, dentists=2)
    # Origin 20 km south of institute A: A is the nearest, B is 70 km away.
    origin = GeoPoint(lat=berlin.lat - 20 / 111.19492664455873, lon=berlin.lon)

    result = calculate(profile, origin, two_institute_catalog, settings=settings)

    assert result.nearest_institute is not None
    assert result.nearest_institute.institute.name == "A"
    assert result.nearest_institute.one_way_distance_km == pytest.approx(20, abs=1e-6)
    assert result.travel_costs == pytest.approx(36, abs=1e-6)
    assert result.total_traditional_costs == pytest.approx(3276, abs=1e-6)


def test_calculate_without_origin_degrades_gracefully(two_institute_catalog):
    result = calculate(StaffingProfile(team_size=5, dentists=2), None, two_institute_catalog, settings=get_settings())
    assert result.nearest_institute is None
    assert result.total_traditional_costs == 3240


def test_calculate_with_empty_catalog_does_not_raise(berlin, caplog):
    with caplog.at_level(logging.WARNING, logger="crocalc.calculator.calculate"):
        result = calculate(StaffingProfile(team_size=5, dentists=2), berlin, [], settings=get_settings())

    assert result.nearest_institute is None
    assert result.total_traditional_costs == 3240
    assert "No institute available" in caplog.text


def test_calculate_rejects_invalid_profile_before_resolving(berlin, two_institute_catalog):
    with pytest.raises(InvalidProfileError):
        calculate(StaffingProfile(team_size=5, dentists=6), berlin, two_institute_catalog, settings=get_settings())


def test_build_context_uses_packaged_catalog():
    context = build_context(settings=get_settings())
    assert len(context.catalog) > 0
    assert isinstance(context.catalog, tuple)


def test_build_context_accepts_injected_catalog(two_institute_catalog):
    context = build_context(settings=get_settings(), catalog=two_institute_catalog)
    assert [i.name for i in context.catalog] == ["A", "B"]


def test_run_calculation_reports_degradation(berlin, two_institute_catalog):
    settings = get_settings()
    address = AddressComponents(street="Unter den Linden 1", city="Berlin", postal_code="10117")

    ok = run_calculation(
        CalculationRequest(profile=StaffingProfile(team_size=5, dentists=2), origin=berlin, address=address),
        build_context(settings=settings, catalog=two_institute_catalog),
    )
    assert ok.meta["status"] == "ok"
    assert ok.meta["issues"] == []
    assert ok.query.address == address
    assert ok.result.nearest_institute.institute.name == "A"

    no_origin = run_calculation(
        CalculationRequest(profile=StaffingProfile(team_size=5, dentists=2)),
        build_context(settings=settings, catalog=two_institute_catalog),
    )
    assert no_origin.meta["issues"] == ["missing_origin"]

    no_catalog = run_calculation(
        CalculationRequest(profile=StaffingProfile(team_size=5, dentists=2), origin=berlin),
        build_context(settings=settings, catalog=[]),
    )
    assert no_catalog.meta["status"] == "degraded"
    assert no_catalog.meta["issues"] == ["no_institute_available"]


def test_results_are_independent_per_call(berlin, two_institute_catalog):
    settings = get_settings()
    small = calculate(StaffingProfile(team_size=2, dentists=1), berlin, two_institute_catalog, settings=settings)
    large = calculate(StaffingProfile(team_size=20, dentists=4), berlin, two_institute_catalog, settings=settings)

    assert small.traditional_costs_dentists == 1200
    assert large.traditional_costs_dentists == 4800
    with pytest.raises(ValidationError):
        small.crocodile_costs = 0  # type: ignore[misc]
