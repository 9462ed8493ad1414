"""
Online training pricing.

Crocodile bills per seat; the seat price depends on the team size band. The band
table is business policy and comes from `online_pricing.bands` in settings.
"""

from __future__ import annotations

from crocalc.config.settings import OnlinePricingBand, OnlinePricingSettings
from crocalc.domain.models import StaffingProfile


def pricing_band(team_size: int, pricing: OnlinePricingSettings) -> OnlinePricingBand | None:
    """Return the band covering `team_size` (None for an empty team)."""
    for band in pricing.bands:
        if band.covers(team_size):
            return band
    return None


def online_cost(profile: StaffingProfile, pricing: OnlinePricingSettings) -> float:
    """Online training cost for the whole team (every team member takes a seat)."""
    band = pricing_band(profile.team_size, pricing)
    if band is None:
        return 0.0
    return profile.team_size * band.price_per_seat
