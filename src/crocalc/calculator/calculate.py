from __future__ import annotations

# This module is the "orchestrator" for a savings calculation.
# It wires together:
# - domain input (StaffingProfile + optional resolved origin)
# - the nearest-institute resolver (distance, travel time, travel costs)
# - the cost model (traditional fees, online pricing, savings)
#
# Design goal:
# - Degrade gracefully: a missing origin or an empty catalog still yields a result,
#   just without travel figures. Only an invalid profile fails the call.

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone

from crocalc.catalog.loader import load_catalog
from crocalc.config.settings import Settings, get_settings
from crocalc.costs.model import compute_costs, validate_profile
from crocalc.domain.errors import NoInstituteAvailableError
from crocalc.domain.models import (
    CalculationRequest,
    CalculationResponse,
    CalculationResult,
    GeoPoint,
    Institute,
    NearestInstituteResult,
    StaffingProfile,
)
from crocalc.travel.nearest import find_nearest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculatorContext:
    """Read-only process-wide state: validated settings plus the institute catalog."""

    settings: Settings
    catalog: tuple[Institute, ...]


def build_context(settings: Settings | None = None, catalog: Sequence[Institute] | None = None) -> CalculatorContext:
    """Resolve settings and load the institute catalog once, at startup."""
    settings = settings or get_settings()
    institutes = tuple(catalog) if catalog is not None else load_catalog(settings)
    logger.info("Calculator ready with %d institutes", len(institutes))
    return CalculatorContext(settings=settings, catalog=institutes)


def calculate(
    profile: StaffingProfile,
    origin: GeoPoint | None,
    catalog: Sequence[Institute],
    *,
    settings: Settings | None = None,
) -> CalculationResult:
    """Compute the full savings result for one staffing profile.

    Raises:
        InvalidProfileError: If the profile is invalid (checked before anything else).
    """
    settings = settings or get_settings()

    # Fail fast: never resolve travel for a profile we are going to reject anyway.
    validate_profile(profile)

    nearest: NearestInstituteResult | None = None
    if origin is None:
        logger.debug("No origin resolved yet; calculating without travel costs")
    else:
        try:
            nearest = find_nearest(origin, catalog, profile=profile, travel=settings.travel)
        except NoInstituteAvailableError:
            logger.warning("No institute available; calculating without travel costs")

    return compute_costs(profile, nearest, settings)


def run_calculation(request: CalculationRequest, context: CalculatorContext) -> CalculationResponse:
    """Run `calculate` for an API/CLI request and wrap it with the query and run metadata."""
    t0 = time.monotonic()
    result = calculate(request.profile, request.origin, context.catalog, settings=context.settings)

    degraded: list[str] = []
    if request.origin is None:
        degraded.append("missing_origin")
    elif result.nearest_institute is None:
        degraded.append("no_institute_available")

    meta = {
        "status": "degraded" if degraded else "ok",
        "issues": degraded,
        "institute_count": len(context.catalog),
        "calc_ms": int((time.monotonic() - t0) * 1000),
    }
    return CalculationResponse(
        generated_at=datetime.now(timezone.utc),
        query=request,
        result=result,
        meta=meta,
    )
