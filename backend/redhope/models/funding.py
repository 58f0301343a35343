"""Funding ORM: confirmed monetary contributions.

Invariants:
    - transaction_id (Stripe payment_intent) is UNIQUE: one record per payment
    - amount is in the major currency unit
    - Rows are only written after the gateway reports the session as paid
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Float, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from redhope.db.base import Base


class Funding(Base):
    """Funding record reconciled from a paid checkout session."""
    __tablename__ = "fundings"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    currency: Mapped[str | None] = mapped_column(String(10), nullable=True)
    transaction_id: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    payment_status: Mapped[str | None] = mapped_column(
        String(30), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_document(self) -> dict:
        return {
            "_id": str(self.id),
            "name": self.name,
            "email": self.email,
            "amount": self.amount,
            "currency": self.currency,
            "transactionId": self.transaction_id,
            "paymentStatus": self.payment_status,
            "createdAt": self.created_at.isoformat(),
        }
