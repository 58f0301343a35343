"""Funding Rules: pure amount handling and checkout/record construction.

Invariants:
    - Accepted amounts are positive whole numbers in the major currency unit
    - The gateway always sees minor units (major * 100)
    - Stored amounts are major units (gateway minor total / 100)
    - A record is only built from a paid session; the caller checks payment_status

Design Decisions:
    - CheckoutSession is a plain dataclass: the gateway wrapper normalizes the Stripe
      object into it so reconciliation logic never touches SDK types
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from redhope.core.domain_types import FUNDING_SESSION_TYPE
from redhope.core.errors import InvalidAmountError

MINOR_UNITS_PER_MAJOR = 100
PAID_STATUS = "paid"
LINE_ITEM_NAME = "Donation"


@dataclass
class CheckoutSession:
    """Gateway checkout session, reduced to what reconciliation needs."""
    id: str
    url: str | None = None
    payment_status: str | None = None
    payment_intent: str | None = None
    amount_total: int | None = None
    currency: str | None = None
    customer_email: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def is_paid(self) -> bool:
        return self.payment_status == PAID_STATUS


def parse_amount(raw: object) -> int:
    """Parse a funding amount into a positive integer or raise InvalidAmountError."""
    if isinstance(raw, bool):
        raise InvalidAmountError(raw)
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float) and raw.is_integer():
        value = int(raw)
    elif isinstance(raw, str):
        try:
            value = int(raw.strip())
        except ValueError:
            raise InvalidAmountError(raw)
    else:
        raise InvalidAmountError(raw)
    if value <= 0:
        raise InvalidAmountError(raw)
    return value


def to_minor_units(amount: int) -> int:
    return amount * MINOR_UNITS_PER_MAJOR


def from_minor_units(total: int | None) -> float:
    return (total or 0) / MINOR_UNITS_PER_MAJOR


def build_checkout_params(
    amount: int,
    donor_name: str | None,
    donor_email: str | None,
    site_domain: str,
    currency: str,
) -> dict:
    """Build Stripe Checkout Session create params for a one-off donation."""
    site = site_domain.rstrip("/")
    params = {
        "mode": "payment",
        "payment_method_types": ["card"],
        "line_items": [
            {
                "price_data": {
                    "currency": currency,
                    "product_data": {"name": LINE_ITEM_NAME},
                    "unit_amount": to_minor_units(amount),
                },
                "quantity": 1,
            },
        ],
        "metadata": {
            "donorName": donor_name or "",
            "donorEmail": donor_email or "",
            "type": FUNDING_SESSION_TYPE,
        },
        # {CHECKOUT_SESSION_ID} is substituted by Stripe on redirect
        "success_url": (
            f"{site}/dashboard/funding-success?session_id={{CHECKOUT_SESSION_ID}}"
        ),
        "cancel_url": f"{site}/dashboard/funding?canceled=true",
    }
    if donor_email:
        params["customer_email"] = donor_email
    return params


def build_funding_record(
    session: CheckoutSession, now: datetime | None = None,
) -> dict:
    """Map a paid checkout session to FundingRecord column values."""
    metadata = session.metadata or {}
    return {
        "name": metadata.get("donorName") or session.customer_email,
        "email": metadata.get("donorEmail") or session.customer_email,
        "amount": from_minor_units(session.amount_total),
        "currency": session.currency,
        "transaction_id": session.payment_intent,
        "payment_status": session.payment_status,
        "created_at": now or datetime.now(timezone.utc),
    }
