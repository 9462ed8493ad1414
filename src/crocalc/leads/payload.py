"""
Lead payload shaping.

After seeing their result, a practice can request it by email. Delivery (form embed,
webhook POST) happens outside this package; here we only validate the contact details
and build the body the lead webhook expects.
"""

from __future__ import annotations

from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field, field_validator

from crocalc.domain.models import AddressComponents, CalculationResult, StaffingProfile


class LeadContact(BaseModel):
    """Contact details from the email-capture form (all fields required)."""

    model_config = ConfigDict(frozen=True)

    email: str
    practice_name: str
    consent: bool

    @field_validator("email")
    @classmethod
    def _validate_email(cls, value: str) -> str:
        value = value.strip()
        local, _, domain = value.partition("@")
        if not local or not domain:
            raise ValueError("email must look like name@domain")
        return value

    @field_validator("practice_name")
    @classmethod
    def _validate_practice_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("practice_name must not be blank")
        return value

    @field_validator("consent")
    @classmethod
    def _validate_consent(cls, value: bool) -> bool:
        if not value:
            raise ValueError("consent is required to send the result")
        return value


class LeadPayload(BaseModel):
    """Webhook body: contact, calculator inputs, results and the address."""

    email: str
    company_name: str = Field(..., serialization_alias="companyName")
    calculator_data: dict[str, Any] = Field(..., serialization_alias="calculatorData")
    results: dict[str, Any]
    address_components: dict[str, Any] = Field(..., serialization_alias="addressComponents")


class LeadSubmitter(Protocol):
    """Delivery capability implemented by the hosting application."""

    def submit_lead(self, payload: LeadPayload) -> bool: ...


def build_lead_payload(
    contact: LeadContact,
    profile: StaffingProfile,
    result: CalculationResult,
    address: AddressComponents | None = None,
) -> LeadPayload:
    """Assemble the webhook body for one calculation."""
    address = address or AddressComponents()
    return LeadPayload(
        email=contact.email,
        company_name=contact.practice_name,
        calculator_data=profile.model_dump(mode="json"),
        results=result.model_dump(mode="json"),
        address_components=address.model_dump(mode="json"),
    )
