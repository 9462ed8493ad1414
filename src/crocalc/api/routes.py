"""
API routes.

Endpoints:
- POST `/api/calculations`: main calculator entrypoint.
- GET  `/api/institutes`: the institute catalog used for travel estimates.
- GET  `/api/settings`: public pricing settings for the widget.
- GET  `/api/health`: liveness probe.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import APIRouter, HTTPException

from crocalc.calculator.calculate import CalculatorContext, build_context, run_calculation
from crocalc.domain.errors import CalculatorError
from crocalc.domain.models import CalculationRequest, CalculationResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@lru_cache
def _context() -> CalculatorContext:
    # Built once per process; settings and catalog are read-only afterwards.
    return build_context()


@router.get("/api/health")
def get_health() -> dict:
    return {"status": "ok"}


@router.post("/api/calculations", response_model=CalculationResponse)
def post_calculations(request: CalculationRequest) -> CalculationResponse:
    """Calculate savings for a staffing profile and optional practice location."""
    try:
        return run_calculation(request, _context())
    except CalculatorError as e:
        raise HTTPException(
            status_code=400,
            detail={"code": e.error_code, "message": str(e)},
        ) from e
    except ValueError as e:
        raise HTTPException(
            status_code=400,
            detail={"code": "VALIDATION_ERROR", "message": str(e)},
        ) from e
    except Exception as e:
        logger.exception("Calculation failed")
        raise HTTPException(
            status_code=500,
            detail={"code": "INTERNAL_ERROR", "message": str(e)},
        ) from e


@router.get("/api/institutes")
def get_institutes() -> dict:
    """Return the institute catalog in search (tie-break) order."""
    context = _context()
    return {
        "count": len(context.catalog),
        "institutes": [i.model_dump(mode="json") for i in context.catalog],
    }


@router.get("/api/settings")
def get_public_settings() -> dict:
    """Return the pricing knobs the widget needs to label its figures."""
    settings = _context().settings
    return {
        "app": {"name": settings.app.name},
        "traditional": settings.traditional.model_dump(mode="json"),
        "travel": settings.travel.model_dump(mode="json"),
        "online_pricing": settings.online_pricing.model_dump(mode="json"),
    }
