"""Funding Schemas: checkout initiation and reconciliation results.

Invariants:
    - CheckoutRequest.amount is loosely typed on purpose: parse_amount decides validity
      so "abc", -5 and 0 all produce the same InvalidAmountError
"""

from redhope.schemas.common import WireModel


class CheckoutRequest(WireModel):
    """Body of POST /funding-checkout-session."""
    amount: int | float | str | None = None
    donor_name: str | None = None
    donor_email: str | None = None


class CheckoutResponse(WireModel):
    url: str


class FundingConfirmation(WireModel):
    """Outcome of GET /funding-success."""
    success: bool
    message: str | None = None
    inserted_id: str | None = None
    transaction_id: str | None = None
    payment_status: str | None = None
