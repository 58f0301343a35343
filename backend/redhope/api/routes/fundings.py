"""Funding Routes: funding history, Stripe checkout and return-callback reconciliation.

Invariants:
    - POST /funding-checkout-session persists nothing; it only returns the Stripe URL
    - GET /funding-success is safe to call repeatedly for the same session
    - Invalid amount / missing session id → 400 before any gateway call
"""

from fastapi import APIRouter, Depends, Query

from redhope.api.dependencies import get_funding_reconciliation
from redhope.api.guards import operation_guard, require_token
from redhope.schemas.funding import (
    CheckoutRequest, CheckoutResponse, FundingConfirmation,
)
from redhope.services.funding_reconciliation import FundingReconciliation

router = APIRouter(tags=["fundings"], dependencies=[Depends(require_token)])


@router.get("/fundings")
async def list_fundings(
    funding: FundingReconciliation = Depends(get_funding_reconciliation),
):
    with operation_guard("Failed to get fundings"):
        return await funding.list_fundings()


@router.post("/funding-checkout-session", response_model=CheckoutResponse)
async def create_checkout_session(
    body: CheckoutRequest,
    funding: FundingReconciliation = Depends(get_funding_reconciliation),
):
    """Start a Stripe Checkout session and return its hosted URL."""
    with operation_guard("Failed to create checkout session"):
        return await funding.initiate_checkout(
            body.amount, body.donor_name, body.donor_email,
        )


@router.get(
    "/funding-success",
    response_model=FundingConfirmation,
    response_model_exclude_none=True,
)
async def confirm_funding(
    session_id: str | None = Query(None),
    funding: FundingReconciliation = Depends(get_funding_reconciliation),
):
    """Reconcile a returned checkout session with the local funding records."""
    with operation_guard("Failed to confirm funding"):
        return await funding.confirm_funding(session_id)
