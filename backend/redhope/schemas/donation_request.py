"""Donation Request Schemas: create and partial-update bodies.

Invariants:
    - No field is required on create (the registry inserts as-is)
    - status, when present, must be a DonationStatus value
    - A PATCH may omit status but never clear it (explicit null → 400)
    - Unknown keys are accepted and stored as opaque payload
"""

from pydantic import field_validator

from redhope.core.domain_types import DonationStatus
from redhope.schemas.common import OpenDocument


class _DonationRequestFields(OpenDocument):
    requester_name: str | None = None
    requester_email: str | None = None
    recipient_name: str | None = None
    blood_group: str | None = None
    recipient_district: str | None = None
    recipient_upazila: str | None = None
    hospital_name: str | None = None
    full_address: str | None = None
    donation_date: str | None = None
    donation_time: str | None = None
    request_message: str | None = None
    status: DonationStatus | None = None
    donor_name: str | None = None
    donor_email: str | None = None


class DonationRequestCreate(_DonationRequestFields):
    """Body of POST /donation-requests."""


class DonationRequestUpdate(_DonationRequestFields):
    """Body of PATCH /donation-requests/{id}. Only sent fields are written."""

    @field_validator("status")
    @classmethod
    def status_not_cleared(cls, v: DonationStatus | None) -> DonationStatus:
        if v is None:
            raise ValueError("status cannot be null")
        return v
