"""
Presentation helpers for calculation results.

The calculator is embedded in a German-language result card, so labels and number
formats follow German conventions (`1.234,56 €`). Used by the CLI text output.
"""

from __future__ import annotations

from crocalc.domain.models import CalculationResult


def _format_decimal(value: float, digits: int = 2) -> str:
    # Normalise -0.0 so tiny negative amounts do not render as "-0,00".
    value = round(float(value), digits) + 0.0
    text = f"{value:,.{digits}f}"
    # Swap separators: 1,234.56 -> 1.234,56
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_currency(amount: float) -> str:
    """Format an amount in EUR the German way, e.g. `3.276,00 €`."""
    return f"{_format_decimal(amount)} €"


def travel_breakdown(result: CalculationResult, *, cost_per_km: float) -> str | None:
    """Spell out the travel cost formula, or None when no institute was resolved."""
    nearest = result.nearest_institute
    if nearest is None:
        return None
    km = round(nearest.round_trip_distance_km)
    rate = _format_decimal(cost_per_km)
    return (
        f"{km}km × {rate}€ × {nearest.dentist_trips} Zahnärzte + "
        f"{km}km × {rate}€ × {nearest.assistant_carpools} Fahrgemeinschaften"
    )


def summary_lines(result: CalculationResult, *, cost_per_km: float) -> list[tuple[str, str]]:
    """Render label/value pairs in result-card order.

    The percentage keeps a decimal point (`93.7%`), as the result card renders it.
    """
    percentage = round(result.savings_percentage, 1) + 0.0
    lines = [
        ("Jährliches Einsparpotenzial", format_currency(result.savings)),
        ("Ersparnis", f"{percentage:.1f}%"),
        ("Bisherige geschätzte Kosten", format_currency(result.total_traditional_costs)),
        ("Crocodile Kosten", format_currency(result.crocodile_costs)),
        ("Zahnärzte", format_currency(result.traditional_costs_dentists)),
        ("Assistenzkräfte", format_currency(result.traditional_costs_assistants)),
    ]
    nearest = result.nearest_institute
    if nearest is not None:
        lines.extend(
            [
                (f"Reisekosten ({_format_decimal(cost_per_km)}€/km)", format_currency(nearest.travel_costs)),
                ("Nächstgelegenes Fortbildungsinstitut", nearest.institute.name),
                ("Entfernung (einfach)", f"{round(nearest.one_way_distance_km)} km"),
                ("Entfernung (Hin- und Rückfahrt)", f"{round(nearest.round_trip_distance_km)} km"),
                ("Fahrzeit (einfach)", f"{round(nearest.one_way_travel_time_min)} min"),
                ("Fahrzeit (Hin- und Rückfahrt)", f"{round(nearest.round_trip_travel_time_min)} min"),
            ]
        )
    return lines
