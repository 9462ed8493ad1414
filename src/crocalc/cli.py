"""
Crocodile savings calculator CLI entrypoint.

This CLI is intended for quick local checks of pricing configuration and results
without the web widget. It delegates all calculation logic to
`crocalc.calculator.calculate.run_calculation`.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from crocalc.calculator.calculate import build_context, run_calculation
from crocalc.calculator.explain import summary_lines, travel_breakdown
from crocalc.core.logging import configure_logging
from crocalc.domain.errors import CalculatorError
from crocalc.domain.models import AddressComponents, CalculationRequest, GeoPoint, StaffingProfile
from crocalc.leads.payload import LeadContact, build_lead_payload


def _request_from_args(args: argparse.Namespace) -> CalculationRequest:
    """Build a validated calculation request from the shared calculation arguments."""
    if (args.lat is None) != (args.lon is None):
        raise ValueError("--lat and --lon must be given together")

    origin = GeoPoint(lat=float(args.lat), lon=float(args.lon)) if args.lat is not None else None
    address = None
    if args.street or args.city or args.postal_code:
        address = AddressComponents(
            street=args.street or "",
            city=args.city or "",
            postal_code=args.postal_code or "",
        )
    return CalculationRequest(
        profile=StaffingProfile(team_size=int(args.team_size), dentists=int(args.dentists)),
        origin=origin,
        address=address,
    )


def _cmd_calculate(args: argparse.Namespace) -> int:
    """Handle the `calculate` subcommand."""
    context = build_context()
    response = run_calculation(_request_from_args(args), context)

    if args.json:
        print(json.dumps(response.model_dump(mode="json"), ensure_ascii=False, indent=2))
        return 0

    result = response.result
    for label, value in summary_lines(result, cost_per_km=context.settings.travel.cost_per_km):
        print(f"{label:<38} {value}")
    breakdown = travel_breakdown(result, cost_per_km=context.settings.travel.cost_per_km)
    if breakdown:
        print(f"  ({breakdown})")
    if response.meta.get("issues"):
        print(f"Note: {', '.join(response.meta['issues'])}")
    return 0


def _cmd_institutes(_: argparse.Namespace) -> int:
    context = build_context()
    for institute in context.catalog:
        print(f"{institute.name}  ({institute.location.lat:.4f}, {institute.location.lon:.4f})")
    return 0


def _cmd_lead_payload(args: argparse.Namespace) -> int:
    """Print the webhook body the lead form would submit for this calculation."""
    context = build_context()
    request = _request_from_args(args)
    contact = LeadContact(email=args.email, practice_name=args.practice_name, consent=bool(args.consent))
    response = run_calculation(request, context)
    payload = build_lead_payload(contact, request.profile, response.result, request.address)
    print(json.dumps(payload.model_dump(mode="json", by_alias=True), ensure_ascii=False, indent=2))
    return 0


def _add_calculation_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--team-size", required=True, type=int, help="Total team size (dentists + assistants)")
    parser.add_argument("--dentists", required=True, type=int)
    parser.add_argument("--lat", type=float, default=None, help="Practice latitude (omit if not resolved)")
    parser.add_argument("--lon", type=float, default=None, help="Practice longitude (omit if not resolved)")
    parser.add_argument("--street", type=str, default=None)
    parser.add_argument("--city", type=str, default=None)
    parser.add_argument("--postal-code", dest="postal_code", type=str, default=None)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the crocalc CLI."""
    parser = argparse.ArgumentParser(prog="crocalc")
    sub = parser.add_subparsers(dest="command", required=True)

    calc = sub.add_parser("calculate", help="Estimate savings of online vs. in-person training.")
    _add_calculation_args(calc)
    calc.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    calc.set_defaults(func=_cmd_calculate)

    inst = sub.add_parser("institutes", help="List the configured training institutes.")
    inst.set_defaults(func=_cmd_institutes)

    lead = sub.add_parser("lead-payload", help="Print the lead webhook body for a calculation.")
    _add_calculation_args(lead)
    lead.add_argument("--email", required=True)
    lead.add_argument("--practice-name", dest="practice_name", required=True)
    lead.add_argument("--consent", action="store_true", help="Contact agreed to receive the result")
    lead.set_defaults(func=_cmd_lead_payload)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m crocalc.cli`."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    func: Any = getattr(args, "func")
    try:
        return int(func(args))
    except CalculatorError as e:
        print(f"error [{e.error_code}]: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"error [VALIDATION_ERROR]: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
