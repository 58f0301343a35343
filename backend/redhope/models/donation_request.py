"""DonationRequest ORM: a need for blood at a recipient location.

Invariants:
    - status defaults to pending; any DonationStatus value may be set at any time
    - requester_email identifies the owner; recipient_* identify the location
    - Fields outside WIRE_FIELDS are kept verbatim in `extra`

Design Decisions:
    - recipient_district/recipient_upazila named apart from users.district/upazila
      so filters never mix requester and recipient location
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from redhope.core.domain_types import DEFAULT_DONATION_STATUS
from redhope.db.base import Base
from redhope.db.document import DocumentMixin


class DonationRequest(DocumentMixin, Base):
    """Blood donation request."""
    __tablename__ = "donation_requests"

    WIRE_FIELDS = {
        "requesterName": "requester_name",
        "requesterEmail": "requester_email",
        "recipientName": "recipient_name",
        "bloodGroup": "blood_group",
        "recipientDistrict": "recipient_district",
        "recipientUpazila": "recipient_upazila",
        "hospitalName": "hospital_name",
        "fullAddress": "full_address",
        "donationDate": "donation_date",
        "donationTime": "donation_time",
        "requestMessage": "request_message",
        "status": "status",
        "donorName": "donor_name",
        "donorEmail": "donor_email",
    }

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    requester_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    requester_email: Mapped[str | None] = mapped_column(
        String(255), nullable=True, index=True,
    )
    recipient_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    blood_group: Mapped[str | None] = mapped_column(String(5), nullable=True)
    recipient_district: Mapped[str | None] = mapped_column(
        String(100), nullable=True,
    )
    recipient_upazila: Mapped[str | None] = mapped_column(
        String(100), nullable=True,
    )
    hospital_name: Mapped[str | None] = mapped_column(String(300), nullable=True)
    full_address: Mapped[str | None] = mapped_column(Text, nullable=True)
    donation_date: Mapped[str | None] = mapped_column(String(40), nullable=True)
    donation_time: Mapped[str | None] = mapped_column(String(40), nullable=True)
    request_message: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=DEFAULT_DONATION_STATUS.value,
    )
    donor_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    donor_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    extra: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
