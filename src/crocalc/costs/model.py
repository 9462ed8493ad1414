from __future__ import annotations

import logging

from crocalc.config.settings import Settings
from crocalc.costs.pricing import online_cost
from crocalc.domain.errors import InvalidProfileError
from crocalc.domain.models import CalculationResult, NearestInstituteResult, StaffingProfile

logger = logging.getLogger(__name__)


def validate_profile(profile: StaffingProfile) -> None:
    """Reject profiles with negative counts or more dentists than team members."""
    if profile.team_size < 0 or profile.dentists < 0:
        raise InvalidProfileError(
            f"team_size and dentists must be >= 0 (got team_size={profile.team_size}, dentists={profile.dentists})"
        )
    if profile.dentists > profile.team_size:
        raise InvalidProfileError(
            f"dentists ({profile.dentists}) must not exceed team_size ({profile.team_size})"
        )


def compute_costs(
    profile: StaffingProfile,
    nearest: NearestInstituteResult | None,
    settings: Settings,
) -> CalculationResult:
    """Compute traditional and online training costs for `profile`.

    Travel costs are included only when `nearest` is given. Savings may be negative
    when online training is the more expensive option.

    Raises:
        InvalidProfileError: If the profile fails `validate_profile`.
    """
    validate_profile(profile)
    fees = settings.traditional
    result = CalculationResult(
        traditional_costs_dentists=profile.dentists * fees.cost_per_dentist,
        traditional_costs_assistants=profile.assistants * fees.cost_per_assistant,
        crocodile_costs=online_cost(profile, settings.online_pricing),
        nearest_institute=nearest,
    )
    logger.debug(
        "Costs for team_size=%d dentists=%d: traditional=%.2f online=%.2f",
        profile.team_size,
        profile.dentists,
        result.total_traditional_costs,
        result.crocodile_costs,
    )
    return result
