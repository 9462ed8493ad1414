"""
Domain models (Pydantic).

These types represent the stable "contract" between layers:
- calculator inputs (`StaffingProfile`, `GeoPoint`, `AddressComponents`)
- read-only reference data (`Institute`)
- the immutable calculation output (`NearestInstituteResult`, `CalculationResult`)
- the API/CLI envelope (`CalculationRequest`, `CalculationResponse`)

Every model is frozen: a result is produced once per calculation and handed to the
presentation layer as-is. Derived figures (assistants, round trips, totals, savings)
are computed fields so they can never disagree with the values they derive from.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from crocalc.core import geo


class GeoPoint(BaseModel):
    """A geographic point in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)

    def as_core(self) -> geo.GeoPoint:
        return geo.GeoPoint(lat=self.lat, lon=self.lon)


class AddressComponents(BaseModel):
    """Resolved address parts, carried through for reporting only."""

    model_config = ConfigDict(frozen=True)

    street: str = ""
    city: str = ""
    postal_code: str = ""


class StaffingProfile(BaseModel):
    """Practice team composition.

    Counts are not range-checked here; `crocalc.costs.model.validate_profile` rejects
    invalid profiles with a single typed error before any computation.
    """

    model_config = ConfigDict(frozen=True)

    team_size: int
    dentists: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def assistants(self) -> int:
        return self.team_size - self.dentists


class Institute(BaseModel):
    """A training venue from the institute catalog."""

    model_config = ConfigDict(frozen=True)

    name: str
    location: GeoPoint


class NearestInstituteResult(BaseModel):
    """Distance, travel time and travel cost figures for the closest institute."""

    model_config = ConfigDict(frozen=True)

    institute: Institute
    one_way_distance_km: float = Field(..., ge=0)
    one_way_travel_time_min: float = Field(..., ge=0)
    travel_costs: float = Field(..., ge=0)
    dentist_trips: int = Field(..., ge=0)
    assistant_carpools: int = Field(..., ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def round_trip_distance_km(self) -> float:
        return 2 * self.one_way_distance_km

    @computed_field  # type: ignore[prop-decorator]
    @property
    def round_trip_travel_time_min(self) -> float:
        return 2 * self.one_way_travel_time_min


class CalculationResult(BaseModel):
    """Traditional vs. online training costs for one staffing profile."""

    model_config = ConfigDict(frozen=True)

    traditional_costs_dentists: float
    traditional_costs_assistants: float
    crocodile_costs: float
    nearest_institute: NearestInstituteResult | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def travel_costs(self) -> float:
        return self.nearest_institute.travel_costs if self.nearest_institute else 0.0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_traditional_costs(self) -> float:
        return self.traditional_costs_dentists + self.traditional_costs_assistants + self.travel_costs

    @computed_field  # type: ignore[prop-decorator]
    @property
    def savings(self) -> float:
        return self.total_traditional_costs - self.crocodile_costs

    @computed_field  # type: ignore[prop-decorator]
    @property
    def savings_percentage(self) -> float:
        total = self.total_traditional_costs
        if total <= 0:
            return 0.0
        return self.savings / total * 100


class CalculationRequest(BaseModel):
    """API/CLI input: a staffing profile plus an optional resolved address."""

    model_config = ConfigDict(frozen=True)

    profile: StaffingProfile
    origin: GeoPoint | None = None
    address: AddressComponents | None = None


class CalculationResponse(BaseModel):
    """One calculation result plus the query that produced it."""

    generated_at: datetime
    query: CalculationRequest
    result: CalculationResult
    meta: dict[str, Any] = Field(default_factory=dict)
